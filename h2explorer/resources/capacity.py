"""
Resource capacity sizing: installed renewable capacity and annual energy
yield for the selected source and sizing mode.
"""

import logging
import math
from typing import Optional

from .config import (
    DEFAULT_CUSTOM_CAPACITY_MW,
    DEFAULT_INSTALLED_CAPACITY_MW,
    FALLBACK_CAPACITY_FACTOR,
    HOURS_IN_YEAR,
)
from .models import (
    RegionalResourceProfile,
    RenewableSource,
    ResourceCapacityResult,
    SizingMode,
)

logger = logging.getLogger(__name__)

def _is_valid_capacity(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def annual_energy_kwh(installed_mw: float, yield_factor: float) -> float:
    """Annual energy from installed MW and kWh/kW/yr yield."""
    return installed_mw * 1000 * yield_factor


def size_resource_capacity(source: RenewableSource,
                           sizing_mode: SizingMode,
                           custom_capacity_mw: Optional[float],
                           profile: RegionalResourceProfile) -> ResourceCapacityResult:
    """
    Size the renewable resource feeding the electrolyzer.

    Args:
        source: Renewable source
        sizing_mode: Regional ceiling or user-specified MW
        custom_capacity_mw: User-specified capacity for custom sizing
        profile: Resolved regional profile

    Returns:
        ResourceCapacityResult. Hydro without potential under max sizing
        returns a zero-capacity result with resource_available=False.
    """
    ceiling = profile.max_capacity_mw(source)
    yield_factor = profile.yield_factor(source)
    capacity_factor = profile.capacity_factor(source)

    if sizing_mode == SizingMode.CUSTOM_CAPACITY:
        if _is_valid_capacity(custom_capacity_mw):
            installed = float(custom_capacity_mw)
        else:
            logger.warning(
                f"Custom capacity '{custom_capacity_mw}' absent or non-positive; using {DEFAULT_CUSTOM_CAPACITY_MW} MW")
            installed = DEFAULT_CUSTOM_CAPACITY_MW
    else:
        installed = ceiling

    if (source == RenewableSource.HYDRO and sizing_mode != SizingMode.CUSTOM_CAPACITY
            and not _is_valid_capacity(installed)):
        note = (f"No hydropower potential reported for {profile.region}; "
                "hydrogen production from hydro is not possible in this region")
        logger.warning(f"resource-unavailable: {note}")
        return ResourceCapacityResult(
            source=source,
            installed_capacity_mw=0.0,
            annual_energy_kwh=0.0,
            capacity_factor=capacity_factor,
            yield_factor=yield_factor,
            ceiling_mw=ceiling,
            resource_available=False,
            note=note,
        )

    if not _is_valid_capacity(installed) or not _is_valid_capacity(yield_factor):
        note = (f"{source.value.title()} capacity for {profile.region} resolved to an invalid value "
                f"({installed} MW, yield {yield_factor} kWh/kW); substituted {DEFAULT_INSTALLED_CAPACITY_MW:.0f} MW "
                f"at capacity factor {FALLBACK_CAPACITY_FACTOR}")
        logger.warning(note)
        yield_factor = FALLBACK_CAPACITY_FACTOR * HOURS_IN_YEAR
        return ResourceCapacityResult(
            source=source,
            installed_capacity_mw=DEFAULT_INSTALLED_CAPACITY_MW,
            annual_energy_kwh=annual_energy_kwh(
                DEFAULT_INSTALLED_CAPACITY_MW, yield_factor),
            capacity_factor=FALLBACK_CAPACITY_FACTOR,
            yield_factor=yield_factor,
            ceiling_mw=ceiling,
            defaulted=True,
            note=note,
        )

    energy = annual_energy_kwh(installed, yield_factor)
    logger.debug(
        f"Sized {source.value}: {installed:,.1f} MW x {yield_factor:,.0f} kWh/kW -> {energy:,.0f} kWh/yr")
    return ResourceCapacityResult(
        source=source,
        installed_capacity_mw=installed,
        annual_energy_kwh=energy,
        capacity_factor=capacity_factor,
        yield_factor=yield_factor,
        ceiling_mw=ceiling,
    )
