from __future__ import annotations

import logging
import time
from typing import Dict

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .config import get_settings
from .defaults import build_default_commission_tables, build_default_regimes
from .errors import QuoteEngineError
from .logger import setup_logging
from .models.results import FirstMonthInputs, FirstMonthStatement, IncomeStatement
from .schemas import (
    CommissionRequest,
    CommissionResponse,
    EffectiveRateRequest,
    EffectiveRateResponse,
    IncomeStatementRequest,
    NewVersionRequest,
    NextProposalIdRequest,
    ParsedProposalIdResponse,
    PaybackRequest,
    PaybackResponse,
    ProposalIdResponse,
)
from .services.commissions import CommissionResolver
from .services.income_statement import IncomeStatementBuilder
from .services.payback import PaybackValidator
from .services.proposal_ids import ProposalIdentifierAllocator
from .services.taxes import TaxRegimeCalculator

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="0.1.0")

REGIMES = build_default_regimes()
COMMISSION_TABLES = build_default_commission_tables()

tax_calculator = TaxRegimeCalculator()
commission_resolver = CommissionResolver()
payback_validator = PaybackValidator()
dre_builder = IncomeStatementBuilder()
id_allocator = ProposalIdentifierAllocator()


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - start_time
    logger.info(
        "%s %s -> %s (%.4fs)", request.method, request.url.path, response.status_code, elapsed
    )
    return response


@app.exception_handler(QuoteEngineError)
async def engine_error_handler(request: Request, exc: QuoteEngineError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc), "error": type(exc).__name__})


@app.post("/taxes/effective-rate", response_model=EffectiveRateResponse)
def effective_rate(payload: EffectiveRateRequest) -> EffectiveRateResponse:
    regime = payload.regime
    if regime is None:
        if not payload.regime_id:
            raise HTTPException(status_code=400, detail="Send either 'regime' or 'regime_id'")
        regime = tax_calculator.find_regime(REGIMES, payload.regime_id)
    rate = tax_calculator.compute_effective_rate(regime, payload.operation_type)
    breakdown = []
    if payload.revenue is not None:
        breakdown = tax_calculator.breakdown(regime, payload.operation_type, payload.revenue)
    return EffectiveRateResponse(
        regime_id=regime.id,
        operation_type=payload.operation_type,
        rate=rate,
        breakdown=breakdown,
    )


@app.post("/commissions/resolve", response_model=CommissionResponse)
def resolve_commission(payload: CommissionRequest) -> CommissionResponse:
    table = payload.table
    if table is None:
        table = COMMISSION_TABLES.get(payload.table_id or "")
    if table is None:
        raise HTTPException(status_code=404, detail=f"Commission table {payload.table_id!r} not found")
    rate = commission_resolver.resolve(table, payload.contract_term_months, payload.monthly_revenue)
    return CommissionResponse(table_id=table.id, rate=rate)


@app.post("/payback/validate", response_model=PaybackResponse)
def validate_payback(payload: PaybackRequest) -> PaybackResponse:
    result = payback_validator.validate(
        payload.installation_fee,
        payload.service_cost,
        payload.monthly_revenue,
        payload.contract_term_months,
    )
    return PaybackResponse(
        result=result,
        message=payback_validator.format_message(result, payload.contract_term_months),
    )


@app.post("/dre", response_model=IncomeStatement)
def build_income_statement(payload: IncomeStatementRequest) -> IncomeStatement:
    ratios = payload.cost_ratios or settings.cost_ratios()
    return dre_builder.build(
        payload.monthly_revenue,
        payload.setup_revenue,
        payload.contract_period_months,
        ratios,
    )


@app.post("/dre/first-month", response_model=FirstMonthStatement)
def build_first_month(payload: FirstMonthInputs) -> FirstMonthStatement:
    errors = dre_builder.validate_inputs(payload)
    if errors:
        raise HTTPException(status_code=422, detail=errors)
    return dre_builder.build_first_month(payload)


@app.post("/proposals/next-id", response_model=ProposalIdResponse)
def next_proposal_id(payload: NextProposalIdRequest) -> ProposalIdResponse:
    proposal_id = id_allocator.generate_next_proposal_id(payload.existing, payload.proposal_type)
    return ProposalIdResponse(proposal_id=proposal_id)


@app.post("/proposals/new-version", response_model=ProposalIdResponse)
def new_version(payload: NewVersionRequest) -> ProposalIdResponse:
    proposal_id = id_allocator.generate_new_version(payload.current_id, payload.existing)
    return ProposalIdResponse(proposal_id=proposal_id)


@app.get("/proposals/{proposal_id}/parse", response_model=ParsedProposalIdResponse)
def parse_proposal(proposal_id: str) -> ParsedProposalIdResponse:
    parsed = id_allocator.parse_strict(proposal_id)
    return ParsedProposalIdResponse(
        proposal_type=parsed.proposal_type,
        prefix=parsed.prefix,
        sequence=parsed.sequence,
        version=parsed.version,
    )


@app.get("/health")
def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}
