"""Simple vs. compound growth of a single lump sum."""

from __future__ import annotations

import logging
import math

from growthlab.core.params import prepare_growth_params
from growthlab.schemas.series import GrowthPoint

logger = logging.getLogger(__name__)


def _compound_factor(periodic_rate: float, periods: int) -> float:
    """Growth multiple after `periods` compounding steps, inf once it leaves float range."""
    try:
        return (1 + periodic_rate) ** periods
    except OverflowError:
        return math.inf


def generate_growth_series(
    principal: float, rate: float, years: float, frequency: float
) -> tuple[GrowthPoint, ...]:
    """Sample simple and compound growth once per year, year 0 included.

    `frequency` is the number of compounding periods per year.
    """
    params = prepare_growth_params(principal, rate, years, frequency)
    periodic_rate = params.rate / params.frequency

    points: list[GrowthPoint] = []
    for year in range(params.years + 1):
        simple = params.principal * (1 + params.rate * year)
        factor = _compound_factor(periodic_rate, params.frequency * year)
        # a zero principal stays zero even when the factor overflows
        compound = params.principal * factor if params.principal else 0.0
        points.append(GrowthPoint(year=year, simple=simple, compound=compound))

    logger.debug("growth series %s -> %d points", params, len(points))
    return tuple(points)
