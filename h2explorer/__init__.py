"""
h2explorer - techno-economic and carbon-intensity screening of hydrogen
production (green, blue) and hydrogen derivatives for a region.
"""

__version__ = "0.1.0"

from .tea import (
    BlueHydrogenInputs,
    DerivativeInputs,
    EconomicAssumptions,
    GreenHydrogenInputs,
    InvalidConfigurationError,
    TEAEngine,
    run_calculation,
)

__all__ = [
    'BlueHydrogenInputs',
    'DerivativeInputs',
    'EconomicAssumptions',
    'GreenHydrogenInputs',
    'InvalidConfigurationError',
    'TEAEngine',
    'run_calculation',
]
