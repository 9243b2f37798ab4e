"""
Benchmark harness comparing the naive and indexed report strategies.

Timing stays out of the generator itself; this module builds synthetic
data, runs each strategy and records how long it took.
"""

import time
from decimal import Decimal
from typing import Callable, Optional, Sequence

import pandas as pd
from pydantic import BaseModel, Field

from catalog.datagen import generate_dataset
from catalog.schemas import Category, Product, ReportEntry

from .config import ReportConfig
from .generator import generate_report, generate_report_naive

Strategy = Callable[[Sequence[Product], Sequence[Category]], list[ReportEntry]]


class StrategyTiming(BaseModel):
    """Timing for a single report strategy."""
    strategy: str = Field(..., description="Strategy name")
    best_ms: float = Field(..., ge=0.0, description="Fastest run in milliseconds")
    runs: int = Field(..., ge=1, description="Number of timed runs")


class BenchmarkResult(BaseModel):
    """Outcome of a benchmark run."""
    product_count: int = Field(..., description="Number of synthetic products")
    category_count: int = Field(..., description="Number of synthetic categories")
    output_size: int = Field(default=0, description="Number of report entries produced")
    timings: list[StrategyTiming] = Field(default_factory=list, description="Per-strategy timings")
    outputs_match: Optional[bool] = Field(
        None, description="Whether all strategies produced identical reports (None if only one ran)"
    )
    report: list[ReportEntry] = Field(
        default_factory=list, exclude=True, description="Report produced by the indexed strategy"
    )

    def timing_for(self, strategy: str) -> Optional[StrategyTiming]:
        for timing in self.timings:
            if timing.strategy == strategy:
                return timing
        return None

    @property
    def speedup(self) -> Optional[float]:
        """Naive time divided by indexed time, when both ran."""
        naive = self.timing_for("naive")
        indexed = self.timing_for("indexed")
        if naive is None or indexed is None or indexed.best_ms == 0:
            return None
        return naive.best_ms / indexed.best_ms

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [timing.model_dump() for timing in self.timings],
            columns=["strategy", "best_ms", "runs"],
        )


def time_strategy(
    strategy: Strategy,
    products: Sequence[Product],
    categories: Sequence[Category],
    repeats: int = 1,
) -> tuple[float, list[ReportEntry]]:
    """
    Run a strategy `repeats` times.

    Returns:
        Tuple of (best wall time in milliseconds, report from the last run)

    Raises:
        ValueError: If repeats is less than 1
    """
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")

    best_ms = float("inf")
    report: list[ReportEntry] = []
    for _ in range(repeats):
        start = time.perf_counter()
        report = strategy(products, categories)
        elapsed_ms = (time.perf_counter() - start) * 1000
        best_ms = min(best_ms, elapsed_ms)
    return best_ms, report


def run_benchmark(
    product_count: Optional[int] = None,
    category_count: Optional[int] = None,
    repeats: Optional[int] = None,
    seed: Optional[int] = None,
    discount: Optional[Decimal] = None,
    include_naive: bool = True,
) -> BenchmarkResult:
    """
    Generate a synthetic catalog and time the report strategies over it.

    Args:
        product_count: Number of products (default from ReportConfig)
        category_count: Number of categories (default from ReportConfig)
        repeats: Timed runs per strategy; the best one is kept
        seed: Seed for the synthetic prices
        discount: Discount applied by every category
        include_naive: Also time the O(N * M) baseline

    Returns:
        BenchmarkResult with timings and output size
    """
    product_count = ReportConfig.DEFAULT_PRODUCT_COUNT if product_count is None else product_count
    category_count = ReportConfig.DEFAULT_CATEGORY_COUNT if category_count is None else category_count
    repeats = ReportConfig.BENCHMARK_REPEATS if repeats is None else repeats
    discount = ReportConfig.DEFAULT_DISCOUNT if discount is None else discount

    products, categories = generate_dataset(
        product_count,
        category_count,
        discount=discount,
        max_price=ReportConfig.DEFAULT_MAX_PRICE,
        seed=seed,
    )

    strategies: list[tuple[str, Strategy]] = []
    if include_naive:
        strategies.append(("naive", generate_report_naive))
    strategies.append(("indexed", generate_report))

    result = BenchmarkResult(product_count=product_count, category_count=category_count)
    reports = []
    for name, strategy in strategies:
        best_ms, report = time_strategy(strategy, products, categories, repeats=repeats)
        result.timings.append(StrategyTiming(strategy=name, best_ms=best_ms, runs=repeats))
        reports.append(report)

    result.report = reports[-1]
    result.output_size = len(result.report)
    if len(reports) > 1:
        result.outputs_match = all(report == reports[0] for report in reports[1:])
    return result
