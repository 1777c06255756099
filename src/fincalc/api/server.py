"""FastAPI server — HTTP access to the financial calculators.

Run with:
    uvicorn fincalc.api.server:app --reload --port 8000

Or:
    fincalc-server

Endpoints:
    GET  /context                 — self-describing manifest (inputs + formulas)
    GET  /presets                 — loan / account / fund presets
    POST /loan                    — EMI + amortization schedule
    POST /deposit                 — APY + monthly balance growth
    POST /investment              — SIP or lump-sum growth (``mode`` selects)
    POST /eligibility             — max / recommended loan, DTI, down payment
    POST /eligibility/down-payment — down-payment analysis only
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Annotated, Any, AsyncIterator, Callable, Literal, TypeVar

from fastapi import Body, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from fincalc.api.context import CalculatorContext, build_context, get_presets
from fincalc.api.logging import log_calculation, setup_logging
from fincalc.config import (
    DepositInput,
    EligibilityInput,
    LoanInput,
)
from fincalc.config.investment import InvestmentModes
from fincalc.engine import (
    compute_deposit_growth,
    compute_down_payment_analysis,
    compute_eligibility,
    compute_investment_growth,
    compute_loan_schedule,
)
from fincalc.errors import InvalidInput
from fincalc.models.results import (
    DepositGrowth,
    DownPaymentAnalysis,
    EligibilityResult,
    InvestmentResult,
    LoanSchedule,
)
from fincalc.settings import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

ResultT = TypeVar("ResultT")

# FastAPI reads the discriminator off its own Body marker, not pydantic.Field.
InvestmentBody = Annotated[InvestmentModes, Body(discriminator="mode")]


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging when the server starts rather than on import."""
    setup_logging(settings.log_level, settings.log_json)
    logger.info("Starting %s %s", settings.app_name, settings.version)
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description=(
        "Stateless consumer financial calculators: loan EMI schedules, deposit APY, "
        "SIP / lump-sum growth and loan eligibility. Start with GET /context."
    ),
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class DownPaymentResponse(BaseModel):
    """Response from /eligibility/down-payment."""
    applicable: bool
    analysis: DownPaymentAnalysis | None = None


# ═══════════════════════════════════════════════════════════════════════════
# Error handling
# ═══════════════════════════════════════════════════════════════════════════

def _invalid_response(exc: InvalidInput) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": exc.to_dict()})


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    logger.warning(
        "Rejected input",
        extra={"path": request.url.path, "field": exc.field, "constraint": exc.constraint},
    )
    return _invalid_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if not errors:
        return _invalid_response(InvalidInput("body", "a valid JSON object"))
    invalid = InvalidInput.from_error_dict(errors[0], skip_loc=("body",))
    logger.warning(
        "Rejected input",
        extra={"path": request.url.path, "field": invalid.field, "constraint": invalid.constraint},
    )
    return _invalid_response(invalid)


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _timed(calculator: str, fn: Callable[[Any], ResultT], inputs: Any) -> ResultT:
    """Run one calculator and log its duration."""
    start = time.perf_counter()
    result = fn(inputs)
    log_calculation(logger, calculator, (time.perf_counter() - start) * 1000)
    return result


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context", response_model=CalculatorContext)
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for input schemas only, 'full' adds the key formulas",
    ),
):
    """Self-describing manifest of every calculator's inputs."""
    return build_context(detail_level, name=settings.app_name, version=settings.version)


@app.get("/presets")
def presets():
    """Loan, account and fund presets for pre-filling forms."""
    return get_presets()


@app.post("/loan", response_model=LoanSchedule)
def loan(inputs: LoanInput):
    """EMI, total interest and the full amortization schedule."""
    return _timed("loan", compute_loan_schedule, inputs)


@app.post("/deposit", response_model=DepositGrowth)
def deposit(inputs: DepositInput):
    """APY, month-by-month balance and simple vs compound comparison."""
    return _timed("deposit", compute_deposit_growth, inputs)


@app.post("/investment", response_model=InvestmentResult)
def investment(inputs: InvestmentBody):
    """SIP (``mode='recurring'``) or lump-sum (``mode='lump_sum'``) growth."""
    return _timed("investment", compute_investment_growth, inputs)


@app.post("/eligibility", response_model=EligibilityResult)
def eligibility(inputs: EligibilityInput):
    """Maximum and recommended loan for a borrower profile."""
    return _timed("eligibility", compute_eligibility, inputs)


@app.post("/eligibility/down-payment", response_model=DownPaymentResponse)
def down_payment(inputs: EligibilityInput):
    """Down-payment analysis; ``applicable`` is false for unsecured loan types."""
    analysis = _timed("down_payment", compute_down_payment_analysis, inputs)
    return DownPaymentResponse(applicable=analysis is not None, analysis=analysis)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "fincalc.api.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
