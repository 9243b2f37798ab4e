#!/usr/bin/env python3
"""
Inventory Report - Benchmark Runner

Builds a synthetic catalog, generates the report with the indexed and
naive strategies, and prints timings and output size.

Usage:
    python run.py [--products N] [--categories M] [--seed S] [--repeats R]
                  [--discount D] [--skip-naive] [--preview K]

Examples:
    python run.py
    python run.py --products 50000 --categories 500 --repeats 3
    python run.py --categories 0 --skip-naive
"""

import sys
from pathlib import Path
from typing import Optional

# Make the src/ packages importable without installing the project
sys.path.insert(0, str(Path(__file__).parent / "src"))

from inventory_report.benchmark import run_benchmark
from inventory_report.config import ReportConfig
from inventory_report.generator import entries_to_frame, summarize_tiers


def _get_option(args: list[str], flag: str) -> Optional[str]:
    """Return the value following `flag`, or None if the flag is absent."""
    if flag not in args:
        return None
    idx = args.index(flag)
    if idx + 1 >= len(args):
        raise ValueError(f"Missing value for {flag}")
    return args[idx + 1]


def _get_int(args: list[str], flag: str, default: int) -> int:
    value = _get_option(args, flag)
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError as exc:
        raise ValueError(f"{flag} expects an integer, got {value!r}") from exc
    if number < 0:
        raise ValueError(f"{flag} must be non-negative, got {number}")
    return number


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if "--help" in args or "-h" in args:
        print(__doc__)
        return 0

    try:
        product_count = _get_int(args, "--products", ReportConfig.DEFAULT_PRODUCT_COUNT)
        category_count = _get_int(args, "--categories", ReportConfig.DEFAULT_CATEGORY_COUNT)
        repeats = _get_int(args, "--repeats", ReportConfig.BENCHMARK_REPEATS)
        preview = _get_int(args, "--preview", 5)
        seed_value = _get_option(args, "--seed")
        seed = int(seed_value) if seed_value is not None else None
        discount_value = _get_option(args, "--discount")
        discount = (
            ReportConfig.parse_decimal(discount_value)
            if discount_value is not None
            else ReportConfig.DEFAULT_DISCOUNT
        )
        if repeats < 1:
            raise ValueError("--repeats must be at least 1")
    except ValueError as exc:
        print(f"ERROR: {exc}")
        print(__doc__)
        return 1

    ReportConfig.validate()
    include_naive = "--skip-naive" not in args

    print(f"Products: {product_count}  Categories: {category_count}  Repeats: {repeats}")
    print("-" * 50)

    result = run_benchmark(
        product_count=product_count,
        category_count=category_count,
        repeats=repeats,
        seed=seed,
        discount=discount,
        include_naive=include_naive,
    )

    for timing in result.timings:
        print(f"Process Time ({timing.strategy}): {timing.best_ms:.2f} ms")
    if result.speedup is not None:
        print(f"Speedup: {result.speedup:.1f}x")
    if result.outputs_match is False:
        print("WARNING: naive and indexed reports differ")
    print(f"Output size: {result.output_size} entries")

    report = result.report

    tiers = summarize_tiers(report)
    print("-" * 50)
    for tier, count in tiers.items():
        print(f"  {tier}: {count}")

    if preview and report:
        print("-" * 50)
        print(entries_to_frame(report[:preview]).to_string(index=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
