"""Input guards shared by every calculator.

The input models already validate on construction, but a model built
with ``model_construct`` (or a duck-typed stand-in) skips that.  Each
compute function re-checks the fields it divides by or raises to a power
so no NaN or Infinity can leak out as a disguised result.  Amounts near
the float range can still overflow, so results are checked on the way out.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from contextlib import contextmanager

from fincalc.config.policy import MAX_ANNUAL_RATE_PERCENT, MAX_TERM_MONTHS, MAX_TERM_YEARS
from fincalc.errors import InvalidInput


def require_finite(value: float, field: str) -> None:
    if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
        raise InvalidInput(field, "a finite number")


def require_positive(value: float, field: str) -> None:
    require_finite(value, field)
    if value <= 0:
        raise InvalidInput(field, "> 0")


def require_non_negative(value: float, field: str) -> None:
    require_finite(value, field)
    if value < 0:
        raise InvalidInput(field, ">= 0")


def require_rate(value: float, field: str) -> None:
    require_non_negative(value, field)
    if value > MAX_ANNUAL_RATE_PERCENT:
        raise InvalidInput(field, f"<= {MAX_ANNUAL_RATE_PERCENT:g}")


def require_term_months(value: int, field: str = "term_months") -> None:
    require_finite(value, field)
    if value < 1:
        raise InvalidInput(field, ">= 1 month")
    if value > MAX_TERM_MONTHS:
        raise InvalidInput(field, f"<= {MAX_TERM_MONTHS} months")
    if value != int(value):
        raise InvalidInput(field, "a whole number of months")


def require_term_years(value: float, field: str = "term_years", whole: bool = False) -> None:
    require_positive(value, field)
    if value > MAX_TERM_YEARS:
        raise InvalidInput(field, f"<= {MAX_TERM_YEARS} years")
    if whole and (value < 1 or value != int(value)):
        raise InvalidInput(field, "a whole number >= 1")


def require_finite_results(**results: float | None) -> None:
    """Reject any computed value that overflowed to Infinity or NaN."""
    for field, value in results.items():
        if value is not None and not math.isfinite(value):
            raise InvalidInput(field, "a finite number (inputs too large to compute)")


@contextmanager
def overflow_as_invalid(field: str) -> Iterator[None]:
    """Turn an ``OverflowError`` from ``**`` or ``math`` into ``InvalidInput``."""
    try:
        yield
    except OverflowError as exc:
        raise InvalidInput(field, "a finite number (inputs too large to compute)") from exc
