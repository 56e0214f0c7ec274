"""
Production limiter: power- and water-constrained output and the binding
constraint, with water draw and treatment energy evaluated at the actual
(bound) output.
"""

import logging
import math
from typing import Optional

from .models import Bottleneck, ProductionLimits

logger = logging.getLogger(__name__)


def select_bottleneck(power_limited_output: float, water_limited_output: float) -> Bottleneck:
    """Binding constraint; power wins exact ties."""
    if power_limited_output <= water_limited_output:
        return Bottleneck.POWER
    return Bottleneck.WATER


def limit_production(annual_energy_kwh: float,
                     specific_energy: float,
                     water_per_unit_m3: float,
                     water_available_m3: Optional[float],
                     treatment_energy_kwh_per_m3: float = 0.0,
                     unit: str = "kg") -> ProductionLimits:
    """
    Compute production limits for a conversion process.

    Args:
        annual_energy_kwh: Energy available for conversion (kWh/yr)
        specific_energy: Conversion energy per unit output (kWh/unit)
        water_per_unit_m3: Water consumption per unit output (m3/unit)
        water_available_m3: Annual water available (m3/yr); None when the
            region reports no figure, which leaves water unconstrained
        treatment_energy_kwh_per_m3: Water treatment energy (kWh/m3)
        unit: Output unit label ("kg" or "t")

    Returns:
        ProductionLimits at the actual (bound) output
    """
    if annual_energy_kwh > 0 and specific_energy > 0:
        power_limit = annual_energy_kwh / specific_energy
    else:
        power_limit = 0.0

    if water_available_m3 is None or water_per_unit_m3 <= 0:
        water_limit = math.inf
    else:
        water_limit = max(water_available_m3, 0.0) / water_per_unit_m3

    actual = min(power_limit, water_limit)
    bottleneck = select_bottleneck(power_limit, water_limit)

    # Second pass at the bound output
    water_draw = actual * water_per_unit_m3
    auxiliary_energy = water_draw * treatment_energy_kwh_per_m3
    primary_energy = actual * specific_energy

    if bottleneck == Bottleneck.WATER:
        logger.info(
            f"Production water-limited: {actual:,.0f} {unit}/yr (power limit {power_limit:,.0f} {unit}/yr)")
    else:
        logger.debug(
            f"Production power-limited: {actual:,.0f} {unit}/yr (water limit {water_limit:,.0f} {unit}/yr)")

    return ProductionLimits(
        unit=unit,
        power_limited_output=power_limit,
        water_limited_output=water_limit,
        actual_output=actual,
        bottleneck=bottleneck,
        water_per_unit_m3=water_per_unit_m3,
        water_draw_m3=water_draw,
        primary_energy_kwh=primary_energy,
        auxiliary_energy_kwh=auxiliary_energy,
    )
