"""
Synthetic catalog factory.

Builds products and categories on demand for benchmarks and tests.
Nothing here is cached at module level; every call returns fresh lists.
"""

import random
from decimal import Decimal
from typing import Optional

from .schemas import Category, Product

DEFAULT_CATEGORY_SPAN = 50
PRICE_QUANTUM = Decimal("0.0001")


def generate_categories(count: int, discount: Decimal | float | str = Decimal("0.1")) -> list[Category]:
    """
    Build `count` categories with ids 0..count-1 sharing one discount.

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"Category count must be non-negative, got {count}")

    discount = Decimal(str(discount))
    return [Category(id=i, discount=discount) for i in range(count)]


def generate_products(
    count: int,
    category_span: int = DEFAULT_CATEGORY_SPAN,
    max_price: Decimal | float | int = 100,
    seed: Optional[int] = None,
) -> list[Product]:
    """
    Build `count` products with pseudo-random prices.

    Args:
        count: Number of products
        category_span: Products are assigned category ids round-robin in
            range(category_span)
        max_price: Upper (exclusive) bound of the uniform price draw
        seed: Seed for reproducible prices

    Returns:
        List of Product objects ordered by id

    Raises:
        ValueError: If count is negative or category_span is not positive
    """
    if count < 0:
        raise ValueError(f"Product count must be non-negative, got {count}")
    if category_span <= 0:
        raise ValueError(f"category_span must be positive, got {category_span}")

    rng = random.Random(seed)
    upper = float(max_price)
    products = []
    for i in range(count):
        price = Decimal(rng.random() * upper).quantize(PRICE_QUANTUM)
        products.append(
            Product(
                id=i,
                name=f"Product_{i}",
                category_id=i % category_span,
                price=price,
            )
        )
    return products


def generate_dataset(
    product_count: int,
    category_count: int,
    discount: Decimal | float | str = Decimal("0.1"),
    max_price: Decimal | float | int = 100,
    seed: Optional[int] = None,
) -> tuple[list[Product], list[Category]]:
    """
    Build a matching (products, categories) pair.

    Products reference categories round-robin. With zero categories the
    products still point at the default span of ids, so every reference
    dangles and the report applies no discount.
    """
    span = category_count if category_count > 0 else DEFAULT_CATEGORY_SPAN
    categories = generate_categories(category_count, discount=discount)
    products = generate_products(product_count, category_span=span, max_price=max_price, seed=seed)
    return products, categories
