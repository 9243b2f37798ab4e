"""
Inventory report

Takes catalog products and categories and produces:
1. Discounted prices rounded to cents
2. Standard / Premium tiers
3. Benchmarks of the indexed generator against the nested-scan baseline
"""

__version__ = "1.0.0"

from .errors import InvalidInputError
from .generator import (
    ReportGenerator,
    apply_discount,
    build_discount_index,
    classify_tier,
    entries_to_frame,
    generate_report,
    generate_report_naive,
    resolve_discount,
    summarize_tiers,
)

__all__ = [
    "InvalidInputError",
    "ReportGenerator",
    "apply_discount",
    "build_discount_index",
    "classify_tier",
    "entries_to_frame",
    "generate_report",
    "generate_report_naive",
    "resolve_discount",
    "summarize_tiers",
]
