"""
Tests for the catalog schemas and synthetic data factory
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from catalog.schemas import Category, Product, ReportEntry, Tier
from catalog.datagen import (
    DEFAULT_CATEGORY_SPAN,
    generate_categories,
    generate_dataset,
    generate_products,
)


class TestSchemas:
    """Test Pydantic schema models."""

    def test_product_creation(self):
        """Test creating a Product coerces the price to Decimal."""
        product = Product(id=1, name="Widget", category_id=3, price="19.99")

        assert product.id == 1
        assert product.category_id == 3
        assert isinstance(product.price, Decimal)
        assert product.price == Decimal("19.99")

    def test_product_accepts_integer_price(self):
        product = Product(id=1, name="Widget", category_id=3, price=100)
        assert product.price == Decimal("100")

    def test_product_requires_fields(self):
        """Test that structurally incomplete records are rejected."""
        with pytest.raises(ValidationError):
            Product(id=1, name="Widget", price="1.00")

        with pytest.raises(ValidationError):
            Product(id=1, name="Widget", category_id=1, price="not-a-number")

    def test_out_of_range_values_are_not_rejected_by_models(self):
        """Range checks belong to strict report generation, not the models."""
        product = Product(id=1, name="Refund", category_id=1, price="-5")
        category = Category(id=1, discount="1.5")

        assert product.price == Decimal("-5")
        assert category.discount == Decimal("1.5")

    def test_category_default_discount(self):
        assert Category(id=7).discount == Decimal("0")

    def test_models_are_frozen(self):
        """Test that records cannot be mutated after construction."""
        product = Product(id=1, name="Widget", category_id=3, price="19.99")

        with pytest.raises(ValidationError):
            product.price = Decimal("0")

    def test_report_entry_to_row(self):
        entry = ReportEntry(id=4, name="Gadget", discounted_price="54.10", tier=Tier.PREMIUM)

        assert entry.to_row() == {
            "id": 4,
            "name": "Gadget",
            "discounted_price": 54.1,
            "tier": "Premium",
        }

    def test_report_entry_json(self):
        entry = ReportEntry(id=4, name="Gadget", discounted_price="50.00", tier="Standard")

        data = entry.model_dump(mode="json")
        assert data["tier"] == "Standard"
        assert data["discounted_price"] == "50.00"


class TestTierEnum:
    """Test tier label handling."""

    def test_tier_values(self):
        assert Tier.STANDARD.value == "Standard"
        assert Tier.PREMIUM.value == "Premium"

    def test_tier_is_string_valued(self):
        assert Tier("Premium") is Tier.PREMIUM
        assert Tier.STANDARD == "Standard"


class TestDatagen:
    """Test the synthetic catalog factory."""

    def test_generate_categories(self):
        categories = generate_categories(3, discount="0.25")

        assert [c.id for c in categories] == [0, 1, 2]
        assert all(c.discount == Decimal("0.25") for c in categories)

    def test_generate_categories_default_discount(self):
        assert generate_categories(1)[0].discount == Decimal("0.1")

    def test_generate_products_layout(self):
        products = generate_products(7, category_span=3, seed=1)

        assert [p.id for p in products] == list(range(7))
        assert [p.category_id for p in products] == [0, 1, 2, 0, 1, 2, 0]
        assert products[5].name == "Product_5"

    def test_generate_products_price_range(self):
        products = generate_products(500, max_price=100, seed=2)

        assert all(Decimal("0") <= p.price <= Decimal("100") for p in products)
        assert all(p.price == p.price.quantize(Decimal("0.0001")) for p in products)

    def test_generate_products_is_reproducible(self):
        assert generate_products(20, seed=42) == generate_products(20, seed=42)

    def test_generate_products_returns_fresh_lists(self):
        first = generate_products(5, seed=1)
        second = generate_products(5, seed=1)

        assert first is not second

    def test_negative_counts_raise(self):
        with pytest.raises(ValueError, match="non-negative"):
            generate_products(-1)

        with pytest.raises(ValueError, match="non-negative"):
            generate_categories(-1)

    def test_bad_category_span_raises(self):
        with pytest.raises(ValueError, match="category_span"):
            generate_products(5, category_span=0)

    def test_generate_dataset_references_resolve(self):
        products, categories = generate_dataset(100, 10, seed=3)
        category_ids = {c.id for c in categories}

        assert len(products) == 100
        assert len(categories) == 10
        assert all(p.category_id in category_ids for p in products)

    def test_generate_dataset_without_categories_dangles(self):
        products, categories = generate_dataset(60, 0, seed=3)

        assert categories == []
        assert max(p.category_id for p in products) == DEFAULT_CATEGORY_SPAN - 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
