"""Engine exceptions.

There is exactly one failure kind: ``InvalidInput``.  Everything else a
calculator can encounter (zero rate, zero base amount) is a valid,
degenerate case reported through the result models.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError


class FinCalcError(Exception):
    """Base exception for the calculation engine."""


class InvalidInput(FinCalcError, ValueError):
    """An input field violates its constraint.

    Carries the offending ``field`` and the ``constraint`` it broke so a
    caller can point at the exact form control.
    """

    def __init__(self, field: str, constraint: str) -> None:
        self.field = field
        self.constraint = constraint
        super().__init__(f"{field} must be {constraint}")

    @property
    def message(self) -> str:
        return str(self)

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "constraint": self.constraint, "message": self.message}

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidInput":
        """Collapse a pydantic ``ValidationError`` into one ``InvalidInput``.

        Only the first error is kept; pydantic reports them in field order.
        """
        return cls.from_error_dict(exc.errors()[0])

    @classmethod
    def from_error_dict(cls, error: dict[str, Any], skip_loc: tuple[str, ...] = ()) -> "InvalidInput":
        """Build from one entry of pydantic's ``errors()`` list."""
        loc = [str(p) for p in error.get("loc", ()) if p not in skip_loc]
        field = ".".join(loc) or "input"
        ctx = error.get("ctx") or {}
        if "ge" in ctx:
            constraint = f">= {ctx['ge']}"
        elif "gt" in ctx:
            constraint = f"> {ctx['gt']}"
        elif "le" in ctx:
            constraint = f"<= {ctx['le']}"
        elif "lt" in ctx:
            constraint = f"< {ctx['lt']}"
        elif "expected" in ctx:
            constraint = f"one of {ctx['expected']}"
        else:
            constraint = f"valid ({error.get('msg', 'invalid value')})"
        return cls(field, constraint)
