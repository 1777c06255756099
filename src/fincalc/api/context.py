"""Context manifest — makes the calculator service self-describing.

``GET /context`` returns every calculator's input parameters (types,
defaults, constraints) read straight off the pydantic models, plus the
key formulas at the ``full`` detail level.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from fincalc.config import (
    DepositInput,
    EligibilityInput,
    LoanInput,
    LumpSumInvestmentInput,
    RecurringInvestmentInput,
)
from fincalc.config.presets import (
    ACCOUNT_PRESETS,
    FUND_CATEGORIES,
    LOAN_GUIDELINES,
    LOAN_PRESETS,
)


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One input parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class CalculatorSchema(BaseModel):
    """Inputs of one calculator endpoint."""
    calculator: str
    endpoint: str
    description: str
    parameters: list[ParameterInfo]


class CalculatorContext(BaseModel):
    name: str
    version: str
    description: str
    calculators: list[CalculatorSchema]
    key_formulas: list[dict[str, str]] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = meta_val

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=field_info.default,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    for m in getattr(field_info, "metadata", ()):
        if hasattr(m, attr):
            return getattr(m, attr)
    return None


_CALCULATORS: list[tuple[str, str, type[BaseModel], str]] = [
    ("loan", "POST /loan", LoanInput,
     "Amortizing loan: EMI, total interest and full amortization schedule"),
    ("deposit", "POST /deposit", DepositInput,
     "Compounding deposit: APY, monthly balance growth, simple vs compound"),
    ("investment_recurring", "POST /investment", RecurringInvestmentInput,
     "SIP: future value of a monthly contribution, CAGR, monthly trajectory"),
    ("investment_lump_sum", "POST /investment", LumpSumInvestmentInput,
     "Lump sum: future value of a one-time investment, CAGR"),
    ("eligibility", "POST /eligibility", EligibilityInput,
     "Loan eligibility: max/recommended loan, DTI, down-payment analysis"),
]

_KEY_FORMULAS: list[dict[str, str]] = [
    {"name": "EMI", "formula": "P × r × (1+r)^n / ((1+r)^n − 1), r = rate/12"},
    {"name": "APY", "formula": "(1 + rate/n)^n − 1, n = compounding periods per year"},
    {"name": "SIP future value", "formula": "c × ((1+r)^n − 1) / r × (1+r)"},
    {"name": "Lump-sum future value", "formula": "initial × (1 + rate)^years"},
    {"name": "CAGR", "formula": "(final / invested)^(1/years) − 1"},
    {"name": "Max loan", "formula": "EMI × ((1+r)^n − 1) / (r × (1+r)^n) × credit multiplier"},
    {"name": "Sustainable EMI", "formula": "max(0, (income × 40% − existing EMIs) × 80%)"},
]


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(
    detail_level: Literal["compact", "full"] = "full",
    name: str = "Consumer Financial Calculators",
    version: str = "1.0",
) -> CalculatorContext:
    calculators = [
        CalculatorSchema(
            calculator=calc,
            endpoint=endpoint,
            description=desc,
            parameters=_extract_params(model_cls),
        )
        for calc, endpoint, model_cls, desc in _CALCULATORS
    ]
    return CalculatorContext(
        name=name,
        version=version,
        description=(
            "Stateless loan, deposit, investment and eligibility calculators. "
            "Send inputs, get raw numeric results and full-length schedules."
        ),
        calculators=calculators,
        key_formulas=_KEY_FORMULAS if detail_level == "full" else [],
    )


def get_presets() -> dict[str, dict[str, Any]]:
    """All product presets as JSON-serializable dicts."""
    return {
        "loans": {k: v.model_dump() for k, v in LOAN_PRESETS.items()},
        "loan_guidelines": {k: v.model_dump() for k, v in LOAN_GUIDELINES.items()},
        "accounts": {k: v.model_dump() for k, v in ACCOUNT_PRESETS.items()},
        "funds": {k: v.model_dump() for k, v in FUND_CATEGORIES.items()},
    }
