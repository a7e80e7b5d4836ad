"""Deterministic series simulators and chart shaping."""
from growthlab.core.contribution import simulate_contribution_growth
from growthlab.core.growth import generate_growth_series
from growthlab.core.timing import simulate_start_timing

__all__ = [
    "generate_growth_series",
    "simulate_contribution_growth",
    "simulate_start_timing",
]
