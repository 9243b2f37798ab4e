"""
Product catalog models and synthetic data.

Example:
    >>> from catalog import generate_dataset
    >>> products, categories = generate_dataset(1000, 50, seed=7)
    >>> products[0].category_id
    0
"""

from .schemas import (
    Category,
    Product,
    ReportEntry,
    Tier,
)
from .datagen import generate_categories, generate_products, generate_dataset

__all__ = [
    # Schemas
    "Category",
    "Product",
    "ReportEntry",
    "Tier",
    # Synthetic data
    "generate_categories",
    "generate_products",
    "generate_dataset",
]
