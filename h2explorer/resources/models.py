"""
Regional Resource Data Models
Data structures describing a region's renewable and water resources and the
capacity / production figures derived from them.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from .config import (
    HOURS_IN_YEAR,
    HYDRO_CAPACITY_FACTOR,
    M3_PER_MILLION_M3,
    POWER_DENSITY_MW_PER_KM2,
    USABLE_LAND_FRACTION,
)


class RenewableSource(Enum):
    """Renewable electricity sources available to the green pathway"""
    SOLAR = "solar"
    WIND = "wind"
    HYDRO = "hydro"


class WaterSource(Enum):
    """Water source categories reported in the regional dataset"""
    FRESHWATER = "freshwater"
    BRACKISH = "brackish"
    TREATED = "treated"
    GROUNDWATER = "groundwater"


class SizingMode(Enum):
    """How the renewable resource is sized"""
    MAXIMUM_POTENTIAL = "max"
    CUSTOM_CAPACITY = "custom"


class Bottleneck(Enum):
    """Resource constraint binding actual production"""
    POWER = "power"
    WATER = "water"


@dataclass(frozen=True)
class RegionalResourceProfile:
    """Resolved resource attributes of a single region"""

    region: str
    matched: bool

    solar_yield_kwh_per_kwp: float  # Annual specific yield (kWh/kWp/yr)
    wind_capacity_factor: float  # 0-1
    hydro_potential_mw: float  # Technical hydro potential (MW)
    land_area_km2: float  # Usable land area (km2)

    # Million m3/yr per source; None means the dataset has no figure
    water_availability: Dict[WaterSource, Optional[float]] = field(
        default_factory=dict)

    hydro_capacity_factor: float = HYDRO_CAPACITY_FACTOR
    defaulted_fields: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    def max_capacity_mw(self, source: RenewableSource) -> float:
        """Technology-specific installable capacity ceiling"""
        if source == RenewableSource.HYDRO:
            return self.hydro_potential_mw
        density = POWER_DENSITY_MW_PER_KM2[source.value]
        return USABLE_LAND_FRACTION * self.land_area_km2 * density

    def capacity_factor(self, source: RenewableSource) -> float:
        if source == RenewableSource.SOLAR:
            return self.solar_yield_kwh_per_kwp / HOURS_IN_YEAR
        if source == RenewableSource.WIND:
            return self.wind_capacity_factor
        return self.hydro_capacity_factor

    def yield_factor(self, source: RenewableSource) -> float:
        """Annual energy per installed kW (kWh/kW/yr)"""
        if source == RenewableSource.SOLAR:
            return self.solar_yield_kwh_per_kwp
        return self.capacity_factor(source) * HOURS_IN_YEAR

    def water_available_m3(self, source: WaterSource) -> Optional[float]:
        volume = self.water_availability.get(source)
        if volume is None:
            return None
        return volume * M3_PER_MILLION_M3

    @property
    def total_water_mln_m3(self) -> float:
        return sum(v for v in self.water_availability.values() if v is not None)


@dataclass(frozen=True)
class ResourceCapacityResult:
    """Installed renewable capacity and its annual yield"""

    source: RenewableSource
    installed_capacity_mw: float
    annual_energy_kwh: float
    capacity_factor: float
    yield_factor: float  # kWh/kW/yr
    ceiling_mw: float  # Regional ceiling for the source (MW)
    resource_available: bool = True
    defaulted: bool = False
    note: Optional[str] = None


@dataclass(frozen=True)
class ProductionLimits:
    """Power- and water-constrained output and the binding constraint"""

    unit: str  # "kg" (hydrogen) or "t" (derivative product)
    power_limited_output: float
    water_limited_output: float  # math.inf when no water data
    actual_output: float
    bottleneck: Bottleneck

    water_per_unit_m3: float
    water_draw_m3: float  # Annual water draw at actual output
    primary_energy_kwh: float  # Conversion energy at actual output
    auxiliary_energy_kwh: float  # Water treatment energy at actual output

    @property
    def total_energy_kwh(self) -> float:
        return self.primary_energy_kwh + self.auxiliary_energy_kwh

    @property
    def water_constrained(self) -> bool:
        return self.bottleneck == Bottleneck.WATER

    @property
    def has_water_data(self) -> bool:
        return not math.isinf(self.water_limited_output)
