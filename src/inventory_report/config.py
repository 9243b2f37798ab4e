"""
Configuration for the inventory report.

Handles pricing thresholds, validation strictness and the defaults
used when generating synthetic benchmark data.
"""

import os
from decimal import Decimal, InvalidOperation

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# Environment values that could not be parsed, reported by ReportConfig.validate()
_ENV_ERRORS: list[str] = []


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_decimal(name: str, default: str) -> Decimal:
    value = os.getenv(name, default)
    try:
        parsed = Decimal(value.strip())
        if not parsed.is_finite():
            raise InvalidOperation(value)
        return parsed
    except InvalidOperation:
        _ENV_ERRORS.append(f"{name}={value!r} is not a decimal; using {default}")
        return Decimal(default)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        _ENV_ERRORS.append(f"{name}={value!r} is not an integer; using {default}")
        return default


class ReportConfig:
    """Configuration for the report generator and benchmark runner."""

    # Pricing rules
    PREMIUM_THRESHOLD: Decimal = _env_decimal("REPORT_PREMIUM_THRESHOLD", "50")
    PRICE_PLACES: Decimal = Decimal("0.01")

    # Reject negative prices and out-of-range discounts instead of
    # passing them through the arithmetic
    STRICT_VALIDATION: bool = _env_bool("REPORT_STRICT_VALIDATION")

    # Synthetic data defaults
    DEFAULT_PRODUCT_COUNT: int = _env_int("REPORT_PRODUCT_COUNT", 10000)
    DEFAULT_CATEGORY_COUNT: int = _env_int("REPORT_CATEGORY_COUNT", 50)
    DEFAULT_DISCOUNT: Decimal = _env_decimal("REPORT_DEFAULT_DISCOUNT", "0.1")
    DEFAULT_MAX_PRICE: int = 100

    # Benchmark
    BENCHMARK_REPEATS: int = _env_int("REPORT_BENCHMARK_REPEATS", 1)

    ENV_ERRORS: list[str] = _ENV_ERRORS

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration is properly set up."""
        ok = True
        for error in cls.ENV_ERRORS:
            print(f"WARNING: {error}")
            ok = False
        if cls.PREMIUM_THRESHOLD < 0:
            print(f"WARNING: premium threshold is negative ({cls.PREMIUM_THRESHOLD}); every entry will be Premium.")
            ok = False
        if not Decimal("0") <= cls.DEFAULT_DISCOUNT <= Decimal("1"):
            print(f"WARNING: default discount {cls.DEFAULT_DISCOUNT} is outside [0, 1].")
            print("   Set via: export REPORT_DEFAULT_DISCOUNT=0.1")
            ok = False
        if cls.BENCHMARK_REPEATS < 1:
            print(f"WARNING: benchmark repeats must be at least 1, got {cls.BENCHMARK_REPEATS}.")
            ok = False
        return ok

    @staticmethod
    def parse_decimal(value: str) -> Decimal:
        """Parse a user-supplied decimal, raising ValueError on junk."""
        try:
            return Decimal(value)
        except InvalidOperation as exc:
            raise ValueError(f"Not a decimal value: {value!r}") from exc
