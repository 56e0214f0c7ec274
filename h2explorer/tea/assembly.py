"""
Result assembly helpers shared by the pathway calculators.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from ..lca.models import CarbonIntensityResult
from ..resources.models import ProductionLimits, RegionalResourceProfile
from .config import DAYS_IN_YEAR
from .models import EconomicsResult, Pathway, ResultStatus

logger = logging.getLogger(__name__)

USD_PER_MUSD = 1e6


def determine_status(profile: RegionalResourceProfile,
                     limits: ProductionLimits,
                     resource_available: bool = True,
                     defaulted: bool = False) -> ResultStatus:
    """Most severe recovered condition of a run."""
    if not resource_available:
        return ResultStatus.RESOURCE_UNAVAILABLE
    if not limits.actual_output > 0:
        return ResultStatus.UNDEFINED_RATIO
    if not profile.matched or profile.defaulted_fields or defaulted:
        return ResultStatus.DATA_MISSING
    return ResultStatus.OK


def common_result_fields(pathway: Pathway,
                         region: str,
                         technology: str,
                         status: ResultStatus,
                         limits: ProductionLimits,
                         economics: EconomicsResult,
                         carbon: CarbonIntensityResult,
                         tonnes_per_unit: float,
                         annual_energy_mwh: float,
                         notes: Iterable[str] = (),
                         warnings: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Flat CalculationResult fields.

    Args:
        tonnes_per_unit: Conversion of the output unit to tonnes (0.001 for kg)
        annual_energy_mwh: Energy use reported on the result (MWh/yr)
    """
    annual_production_t = limits.actual_output * tonnes_per_unit
    return dict(
        pathway=pathway,
        region=region,
        technology=technology,
        status=status,
        annual_production=annual_production_t,
        daily_production=annual_production_t / DAYS_IN_YEAR,
        power_limited_production=limits.power_limited_output * tonnes_per_unit,
        water_limited_production=limits.water_limited_output * tonnes_per_unit,
        bottleneck=limits.bottleneck,
        levelized_cost=economics.levelized_cost,
        total_capex=economics.total_capex / USD_PER_MUSD,
        annualized_capex=(economics.annualized_capex + economics.annualized_replacement) / USD_PER_MUSD,
        annual_opex=economics.annual_opex / USD_PER_MUSD,
        annual_revenue=economics.annual_revenue / USD_PER_MUSD,
        npv=economics.npv / USD_PER_MUSD,
        irr=economics.irr,
        payback_period=economics.payback_period,
        cost_breakdown=dict(economics.levelized_breakdown),
        cost_breakdown_percent=dict(economics.breakdown_percentages),
        carbon_intensity=carbon.total,
        annual_co2_emissions=carbon.annual_emissions_t,
        co2_avoided=carbon.co2_avoided_t,
        emissions_by_stage=dict(carbon.by_stage),
        annual_energy_use=annual_energy_mwh,
        annual_water_use=limits.water_draw_m3,
        notes=tuple(notes),
        warnings=tuple(warnings),
        economics=economics,
        limits=limits,
        carbon=carbon,
    )


def collect_notes(limits: ProductionLimits, extra: Optional[Iterable[str]] = None) -> list:
    notes = [n for n in (extra or ()) if n]
    if limits.water_constrained:
        notes.append(
            f"Production is water-limited: {limits.water_limited_output:,.0f} {limits.unit}/yr "
            f"versus {limits.power_limited_output:,.0f} {limits.unit}/yr from available power")
    if not limits.has_water_data:
        notes.append("No water availability data for the selected source; water treated as unconstrained")
    if not limits.actual_output > 0:
        notes.append("No production possible; per-unit costs and intensities are undefined")
    return notes
