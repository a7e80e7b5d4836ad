"""Balance under monthly compounding with monthly and yearly deposits."""

from __future__ import annotations

import logging

from growthlab.core.params import MONTHS_PER_YEAR, prepare_contribution_params
from growthlab.schemas.series import ContributionPoint

logger = logging.getLogger(__name__)


def simulate_contribution_growth(
    initial: float,
    monthly: float,
    annual_bonus: float,
    rate: float,
    years: float,
) -> tuple[ContributionPoint, ...]:
    """Project a savings account, sampled at the end of every year.

    Interest accrues monthly on the running balance. The monthly deposit lands
    after that month's interest and the bonus lands after the twelfth month,
    so neither earns interest in the period it is deposited. The initial
    deposit counts as a contribution.
    """
    params = prepare_contribution_params(initial, monthly, annual_bonus, rate, years)
    monthly_rate = params.rate / MONTHS_PER_YEAR

    balance = params.initial
    contributions = balance
    timeline: list[ContributionPoint] = [
        ContributionPoint(
            year=0,
            total=balance,
            contributions=contributions,
            interest=balance - contributions,
        )
    ]

    for year in range(1, params.years + 1):
        for _ in range(MONTHS_PER_YEAR):
            balance *= 1 + monthly_rate
            if params.monthly > 0:
                balance += params.monthly
                contributions += params.monthly

        if params.annual_bonus > 0:
            balance += params.annual_bonus
            contributions += params.annual_bonus

        timeline.append(
            ContributionPoint(
                year=year,
                total=balance,
                contributions=contributions,
                interest=balance - contributions,
            )
        )

    logger.debug("contribution series %s -> %d points", params, len(timeline))
    return tuple(timeline)
