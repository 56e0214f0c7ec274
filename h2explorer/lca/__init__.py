"""
LCA module: carbon intensity of hydrogen pathways and CO2 avoided against
conventional production.
"""

from .config import (
    EmissionFactors,
    ELECTRICITY_EMISSION_FACTORS,
    HYDROGEN_FEEDSTOCK_INTENSITY,
    GREY_HYDROGEN_BENCHMARK,
    DERIVATIVE_BENCHMARKS,
)
from .models import CarbonIntensityResult
from .calculator import CarbonIntensityCalculator, compute_carbon_intensity

__all__ = [
    'EmissionFactors',
    'ELECTRICITY_EMISSION_FACTORS',
    'HYDROGEN_FEEDSTOCK_INTENSITY',
    'GREY_HYDROGEN_BENCHMARK',
    'DERIVATIVE_BENCHMARKS',
    'CarbonIntensityResult',
    'CarbonIntensityCalculator',
    'compute_carbon_intensity',
]
