"""Tenure conversion — (value, unit) pairs from the forms → whole months."""

from __future__ import annotations

from fincalc.config.policy import TenureUnit
from fincalc.errors import InvalidInput


def term_in_months(value: float, unit: TenureUnit = "months", field: str = "term") -> int:
    """Convert a tenure to a positive whole number of months.

    ``2.5`` years is 30 months; ``1.3`` years (15.6 months) is rejected.
    """
    if unit == "years":
        months = value * 12
    elif unit == "months":
        months = value
    else:
        raise InvalidInput(f"{field}_unit", "'years' or 'months'")

    if months != months or months < 1:  # NaN or below one month
        raise InvalidInput(field, ">= 1 month")
    if abs(months - round(months)) > 1e-9:
        raise InvalidInput(field, "a whole number of months")
    return int(round(months))
