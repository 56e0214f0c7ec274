"""
Regional resource module: region lookup, renewable capacity sizing and
production limits.
"""

from .models import (
    Bottleneck,
    ProductionLimits,
    RegionalResourceProfile,
    RenewableSource,
    ResourceCapacityResult,
    SizingMode,
    WaterSource,
)
from .regional import RegionalResourceResolver, resolve_region, derive_wind_capacity_factor
from .capacity import size_resource_capacity
from .production import limit_production, select_bottleneck
from .data_loader import load_regional_dataset, load_calculation_params

__all__ = [
    # Models
    'Bottleneck',
    'ProductionLimits',
    'RegionalResourceProfile',
    'RenewableSource',
    'ResourceCapacityResult',
    'SizingMode',
    'WaterSource',
    # Resolver
    'RegionalResourceResolver',
    'resolve_region',
    'derive_wind_capacity_factor',
    # Sizing and limits
    'size_resource_capacity',
    'limit_production',
    'select_bottleneck',
    # Data loading
    'load_regional_dataset',
    'load_calculation_params',
]
