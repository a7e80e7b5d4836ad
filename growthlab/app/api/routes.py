"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict, Type, TypeVar

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from growthlab import __version__
from growthlab.core.charts import (
    CONTRIBUTION_STYLES,
    GROWTH_STYLES,
    TIMING_STYLES,
    build_chart_series,
)
from growthlab.core.contribution import simulate_contribution_growth
from growthlab.core.growth import generate_growth_series
from growthlab.core.timing import simulate_start_timing
from growthlab.schemas.ping import PingResponse
from growthlab.schemas.series import (
    ContributionRequest,
    ContributionResponse,
    GrowthRequest,
    GrowthResponse,
    TimingRequest,
    TimingResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


RequestT = TypeVar("RequestT", bound=BaseModel)


def _read_payload(model: Type[RequestT]) -> RequestT:
    """Validate the JSON body against the caps of the running app's settings."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return model.model_validate(
        raw_payload,
        context={"settings": current_app.config["GROWTHLAB_SETTINGS"]},
    )


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected %s: %d validation error(s)", request.path, exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.post("/series/growth")
def growth_series() -> Any:
    """Simple vs. compound growth of a lump sum."""
    payload = _read_payload(GrowthRequest)
    points = generate_growth_series(
        principal=payload.principal,
        rate=payload.rate,
        years=payload.years,
        frequency=payload.frequency,
    )
    chart = build_chart_series(points, GROWTH_STYLES) if payload.include_chart else None
    logger.info("growth series: %d points", len(points))
    response = GrowthResponse(points=list(points), chart=chart)
    return jsonify(response.model_dump())


@api_bp.post("/series/contributions")
def contribution_series() -> Any:
    """Monthly deposits plus a yearly bonus, split into principal and interest."""
    payload = _read_payload(ContributionRequest)
    points = simulate_contribution_growth(
        initial=payload.initial,
        monthly=payload.monthly,
        annual_bonus=payload.annual_bonus,
        rate=payload.rate,
        years=payload.years,
    )
    chart = (
        build_chart_series(points, CONTRIBUTION_STYLES) if payload.include_chart else None
    )
    logger.info("contribution series: %d points", len(points))
    response = ContributionResponse(points=list(points), chart=chart)
    return jsonify(response.model_dump())


@api_bp.post("/series/timing")
def timing_series() -> Any:
    """Early vs. delayed start of the same monthly deposit plan."""
    payload = _read_payload(TimingRequest)
    points = simulate_start_timing(
        monthly=payload.monthly,
        years_investing=payload.years_investing,
        delay_years=payload.delay_years,
        rate=payload.rate,
        horizon_years=payload.horizon_years,
    )
    chart = build_chart_series(points, TIMING_STYLES) if payload.include_chart else None
    logger.info("timing series: %d points", len(points))
    response = TimingResponse(points=list(points), chart=chart)
    return jsonify(response.model_dump())
