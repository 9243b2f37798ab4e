"""
Report generator for the product catalog.

Takes products and categories and produces one ReportEntry per product:
1. Index categories by id (last duplicate wins)
2. Look up each product's discount, defaulting to zero
3. Round the discounted price to cents (ROUND_HALF_UP)
4. Classify the entry as Standard or Premium
"""

from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Sequence

import pandas as pd

from catalog.schemas import Category, Product, ReportEntry, Tier

from .config import ReportConfig
from .errors import InvalidInputError

ZERO = Decimal("0")
ONE = Decimal("1")

REPORT_COLUMNS = ["id", "name", "discounted_price", "tier"]


def _as_decimal(value) -> Decimal:
    """Convert a threshold to Decimal through its text form so 10.1 stays 10.1."""
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _require_sequence(value, name: str) -> None:
    if value is None:
        raise InvalidInputError(f"{name} must be a sequence, got None")


def _check_category(category: Category) -> None:
    if not ZERO <= category.discount <= ONE:
        raise InvalidInputError(
            f"Category {category.id} has discount {category.discount} outside [0, 1]",
            record_id=category.id,
        )


def _check_product(product: Product) -> None:
    if product.price < ZERO:
        raise InvalidInputError(
            f"Product {product.id} has negative price {product.price}",
            record_id=product.id,
        )


def build_discount_index(categories: Iterable[Category], strict: bool = False) -> dict[int, Decimal]:
    """
    Map category id to discount in a single pass.

    When an id repeats, the later category overwrites the earlier one.
    """
    index: dict[int, Decimal] = {}
    for category in categories:
        if strict:
            _check_category(category)
        index[category.id] = category.discount
    return index


def resolve_discount(index: dict[int, Decimal], category_id: int) -> Decimal:
    """Return the discount for a category id, or zero if it is unknown."""
    return index.get(category_id, ZERO)


def apply_discount(price: Decimal, discount: Decimal, places: Optional[Decimal] = None) -> Decimal:
    """Apply a fractional discount and round half away from zero."""
    places = ReportConfig.PRICE_PLACES if places is None else places
    return (price * (ONE - discount)).quantize(places, rounding=ROUND_HALF_UP)


def classify_tier(discounted_price: Decimal, threshold: Optional[Decimal] = None) -> Tier:
    """Premium strictly above the threshold, Standard at or below it."""
    threshold = ReportConfig.PREMIUM_THRESHOLD if threshold is None else _as_decimal(threshold)
    return Tier.PREMIUM if discounted_price > threshold else Tier.STANDARD


def _build_entry(product: Product, discount: Decimal, threshold: Optional[Decimal]) -> ReportEntry:
    discounted_price = apply_discount(product.price, discount)
    return ReportEntry(
        id=product.id,
        name=product.name,
        discounted_price=discounted_price,
        tier=classify_tier(discounted_price, threshold),
    )


def generate_report(
    products: Sequence[Product],
    categories: Sequence[Category],
    strict: Optional[bool] = None,
    threshold: Optional[Decimal] = None,
) -> list[ReportEntry]:
    """
    Build the inventory report using a category index.

    Runs in O(N + M) time with O(M) extra space. Inputs are not modified.

    Args:
        products: Products to report on, in output order
        categories: Categories providing discounts
        strict: Reject negative prices and discounts outside [0, 1].
            Defaults to ReportConfig.STRICT_VALIDATION.
        threshold: Premium threshold. Defaults to ReportConfig.PREMIUM_THRESHOLD.

    Returns:
        One ReportEntry per product, in input order

    Raises:
        InvalidInputError: If either input is None, or a record fails
            strict validation
    """
    _require_sequence(products, "products")
    _require_sequence(categories, "categories")
    strict = ReportConfig.STRICT_VALIDATION if strict is None else strict

    index = build_discount_index(categories, strict=strict)

    report = []
    for product in products:
        if strict:
            _check_product(product)
        report.append(_build_entry(product, resolve_discount(index, product.category_id), threshold))
    return report


def generate_report_naive(
    products: Sequence[Product],
    categories: Sequence[Category],
    strict: Optional[bool] = None,
    threshold: Optional[Decimal] = None,
) -> list[ReportEntry]:
    """
    Build the same report by scanning every category for every product.

    O(N * M). Kept as the baseline the indexed version is measured against.
    The scan does not stop at the first match, so the last duplicate wins
    exactly as it does in the index.
    """
    _require_sequence(products, "products")
    _require_sequence(categories, "categories")
    strict = ReportConfig.STRICT_VALIDATION if strict is None else strict

    if strict:
        for category in categories:
            _check_category(category)

    report = []
    for product in products:
        if strict:
            _check_product(product)
        discount = ZERO
        for category in categories:
            if category.id == product.category_id:
                discount = category.discount
        report.append(_build_entry(product, discount, threshold))
    return report


class ReportGenerator:
    """
    Stateful wrapper around generate_report.

    Holds the pricing settings for a run and keeps running totals
    across calls, like the other processors in this project.
    """

    def __init__(
        self,
        threshold: Optional[Decimal] = None,
        strict: Optional[bool] = None,
        naive: bool = False,
    ):
        self.threshold = ReportConfig.PREMIUM_THRESHOLD if threshold is None else _as_decimal(threshold)
        self.strict = ReportConfig.STRICT_VALIDATION if strict is None else strict
        self.naive = naive

        self.reports_generated = 0
        self.entries_generated = 0
        self.premium_count = 0
        self.standard_count = 0

    def generate(self, products: Sequence[Product], categories: Sequence[Category]) -> list[ReportEntry]:
        """Generate a report and fold it into the running totals."""
        strategy = generate_report_naive if self.naive else generate_report
        report = strategy(products, categories, strict=self.strict, threshold=self.threshold)

        tiers = summarize_tiers(report)
        self.reports_generated += 1
        self.entries_generated += len(report)
        self.premium_count += tiers[Tier.PREMIUM.value]
        self.standard_count += tiers[Tier.STANDARD.value]
        return report

    def get_stats(self) -> dict:
        """Get processing statistics."""
        return {
            "reports_generated": self.reports_generated,
            "entries_generated": self.entries_generated,
            "premium_count": self.premium_count,
            "standard_count": self.standard_count,
            "premium_rate": self.premium_count / self.entries_generated if self.entries_generated > 0 else 0,
        }


def summarize_tiers(entries: Iterable[ReportEntry]) -> dict[str, int]:
    """Count entries per tier; every tier is present, even at zero."""
    counts = Counter(entry.tier for entry in entries)
    return {tier.value: counts.get(tier, 0) for tier in Tier}


def entries_to_frame(entries: Iterable[ReportEntry]) -> pd.DataFrame:
    """Tabulate report entries as a DataFrame with one row per entry."""
    return pd.DataFrame([entry.to_row() for entry in entries], columns=REPORT_COLUMNS)
