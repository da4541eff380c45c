"""API endpoints for trade quoting."""

from dataclasses import asdict

import structlog
from fastapi import APIRouter, Depends

from amm_quote.config import QuoteConfig
from amm_quote.models.api import QuoteRequest, QuoteResponse, UsdRateRequest, UsdRateResponse
from amm_quote.models.trade import TradeDirection
from amm_quote.pricing.exchange_rate import usd_exchange_rate
from amm_quote.validation import TradeError, TradeQuote, TradeValidator

logger = structlog.get_logger()

router = APIRouter()

_default_validator: TradeValidator | None = None


def get_validator() -> TradeValidator:
    """Dependency provider for the validator instance.

    Built once from AMM_QUOTE_* environment variables. Override this in
    tests to inject a different configuration:
        app.dependency_overrides[get_validator] = lambda: TradeValidator(config)
    """
    global _default_validator
    if _default_validator is None:
        config = QuoteConfig.from_env()
        logger.info("validator_configured", **asdict(config))
        _default_validator = TradeValidator(config)
    return _default_validator


def _run(
    direction: TradeDirection,
    request: QuoteRequest,
    validator: TradeValidator,
) -> QuoteResponse:
    logger.info(
        "received_quote_request",
        direction=direction.value,
        amount=request.amount,
        target=request.context.target_asset,
        selected=request.context.selected_asset,
        ready=request.context.is_ready,
    )
    # Validation reports problems through the quote; anything raised here is a bug
    try:
        if direction == TradeDirection.BUY:
            quote = validator.validate_buy(request.amount, request.context)
        else:
            quote = validator.validate_sell(request.amount, request.context)
    except Exception:
        logger.exception(
            "quote_error",
            direction=direction.value,
            message="Validator raised an exception, returning invalid trade",
        )
        quote = TradeQuote.with_error(direction, TradeError.INVALID_TRADE)
    return QuoteResponse.from_quote(quote)


@router.post("/quote/buy", response_model_by_alias=True)
async def quote_buy(
    request: QuoteRequest,
    validator: TradeValidator = Depends(get_validator),
) -> QuoteResponse:
    """Quote buying an exact amount of the target asset with the selected asset.

    Error Handling:
        - Invalid request schema: Returns 422 Validation Error (Pydantic)
        - Invalid amount / trade: Returns 200 with the error and no amounts
        - Insufficient gas / balance / allowance: Returns 200 with amounts and errors
    """
    return _run(TradeDirection.BUY, request, validator)


@router.post("/quote/sell", response_model_by_alias=True)
async def quote_sell(
    request: QuoteRequest,
    validator: TradeValidator = Depends(get_validator),
) -> QuoteResponse:
    """Quote selling an exact amount of the target asset for the selected asset."""
    return _run(TradeDirection.SELL, request, validator)


@router.post("/rate/usd")
async def rate_usd(request: UsdRateRequest) -> UsdRateResponse:
    """USD price of an asset for display. Unavailable rates are not errors."""
    rate = usd_exchange_rate(
        request.asset,
        request.reserves,
        usd_asset=request.usd_asset,
        reference_asset=request.reference_asset,
    )
    return UsdRateResponse(
        asset=request.asset,
        rate=None if rate is None else str(rate),
        available=rate is not None,
    )
