"""
Green hydrogen pathway: renewable electricity sized from regional potential
feeding an electrolyzer, with grid/PPA purchase or owned-asset procurement.
"""

import logging

from ..lca.calculator import CarbonIntensityCalculator
from ..resources.capacity import size_resource_capacity
from ..resources.config import WATER_SOURCES
from ..resources.models import (
    ProductionLimits,
    RegionalResourceProfile,
    ResourceCapacityResult,
    SizingMode,
)
from ..resources.production import limit_production
from .assembly import collect_notes, common_result_fields, determine_status
from .calculations import calculate_levelized_cost, calculate_scale_factor
from .config import H2_ENERGY_CONTENT_KWH_PER_KG, H2_SELLING_PRICE_USD_PER_KG
from .models import (
    CostCategory,
    CostComponent,
    EconomicsResult,
    GreenHydrogenInputs,
    GreenHydrogenResult,
    Pathway,
    Procurement,
    ResultStatus,
)

logger = logging.getLogger(__name__)


def calculate_effective_capacity(sizing: ResourceCapacityResult,
                                 limits: ProductionLimits,
                                 sizing_mode: SizingMode) -> float:
    """
    Renewable capacity actually needed (MW).

    Under maximum-potential sizing only the capacity required to supply the
    production-limited energy demand is counted, capped at the regional
    ceiling. Custom and defaulted sizing use the installed capacity.
    """
    if not sizing.resource_available:
        return 0.0
    if (sizing_mode == SizingMode.MAXIMUM_POTENTIAL and not sizing.defaulted
            and sizing.yield_factor > 0):
        required_mw = limits.total_energy_kwh / (1000 * sizing.yield_factor)
        return min(required_mw, sizing.ceiling_mw)
    return sizing.installed_capacity_mw


def calculate_green_economics(inputs: GreenHydrogenInputs,
                              limits: ProductionLimits,
                              sizing: ResourceCapacityResult,
                              profile: RegionalResourceProfile) -> EconomicsResult:
    """
    CAPEX, OPEX and levelized cost of electrolytic hydrogen.

    Args:
        inputs: Green hydrogen parameter bundle
        limits: Production limits at actual output (kg/yr)
        sizing: Renewable capacity sizing
        profile: Resolved regional profile

    Returns:
        EconomicsResult in $ and $/kg
    """
    spec = inputs.electrolyzer_spec
    effective_mw = calculate_effective_capacity(sizing, limits, inputs.sizing_mode)
    scale_factor = calculate_scale_factor(effective_mw)

    electrolyzer_capex = effective_mw * 1000 * spec.capex_usd_per_kw * scale_factor
    capex_items = {"electrolyzer": electrolyzer_capex}

    total_energy_kwh = limits.total_energy_kwh
    opex_items = [
        CostComponent("fixed_om", CostCategory.FIXED_OM,
                      electrolyzer_capex * spec.fixed_om_fraction),
        CostComponent("variable_om", CostCategory.VARIABLE_OM,
                      total_energy_kwh / 1000 * spec.variable_om_usd_per_mwh),
    ]

    if inputs.procurement == Procurement.OWN:
        res_capex = effective_mw * inputs.res_capex_per_mw
        capex_items["renewables"] = res_capex
        opex_items.append(CostComponent("res_fixed_om", CostCategory.FIXED_OM,
                                        res_capex * inputs.res_fixed_om_fraction))
        logger.debug(
            f"Owned {inputs.renewable_source.value}: {effective_mw:,.1f} MW -> RES CAPEX ${res_capex:,.0f}")
    else:
        electricity_cost = total_energy_kwh * inputs.electricity_price
        opex_items.append(CostComponent("electricity", CostCategory.ENERGY, electricity_cost))
        logger.debug(
            f"Purchased electricity: {total_energy_kwh:,.0f} kWh x ${inputs.electricity_price}/kWh "
            f"= ${electricity_cost:,.0f}/yr")

    water_cost = limits.water_draw_m3 * WATER_SOURCES[inputs.water_source.value]["cost_usd_per_m3"]
    opex_items.append(CostComponent("water", CostCategory.WATER, water_cost))

    selling_price = (inputs.economics.selling_price if inputs.economics.selling_price is not None
                     else H2_SELLING_PRICE_USD_PER_KG)

    return calculate_levelized_cost(
        capex_items=capex_items,
        opex_items=opex_items,
        annual_output=limits.actual_output,
        economics=inputs.economics,
        annual_revenue=limits.actual_output * selling_price,
        scale_factor=scale_factor,
        replacement_base_capex=electrolyzer_capex,
        replacement_fraction=spec.replacement_fraction,
        replacement_interval_years=spec.replacement_interval_years,
        replacement_label="stack_replacement",
        output_unit="kg H2",
    )


def calculate_green_hydrogen(inputs: GreenHydrogenInputs,
                             profile: RegionalResourceProfile) -> GreenHydrogenResult:
    """
    Full green hydrogen pipeline: size renewables, limit production,
    economics and carbon intensity. Degenerate cases (no hydro potential,
    zero water) return a populated result with notes instead of raising.
    """
    logger.info(
        f"Green H2 for {profile.region}: {inputs.electrolyzer}, {inputs.renewable_source.value}, "
        f"{inputs.sizing_mode.value} sizing, {inputs.procurement.value} procurement")
    spec = inputs.electrolyzer_spec
    water_params = WATER_SOURCES[inputs.water_source.value]

    sizing = size_resource_capacity(inputs.renewable_source, inputs.sizing_mode,
                                    inputs.custom_capacity_mw, profile)

    limits = limit_production(
        annual_energy_kwh=sizing.annual_energy_kwh,
        specific_energy=spec.specific_energy_kwh_per_kg,
        water_per_unit_m3=spec.water_l_per_kg / 1000,
        water_available_m3=profile.water_available_m3(inputs.water_source),
        treatment_energy_kwh_per_m3=water_params["treatment_energy_kwh_per_m3"],
        unit="kg",
    )

    economics = calculate_green_economics(inputs, limits, sizing, profile)
    carbon = CarbonIntensityCalculator().calculate_green(
        inputs.renewable_source, spec.specific_energy_kwh_per_kg, limits)

    effective_mw = calculate_effective_capacity(sizing, limits, inputs.sizing_mode)
    warnings = list(profile.warnings)
    if sizing.defaulted and sizing.note:
        warnings.append(sizing.note)
    notes = collect_notes(limits, [sizing.note] if not sizing.resource_available else None)

    status = determine_status(profile, limits, sizing.resource_available, sizing.defaulted)
    if status != ResultStatus.OK:
        logger.warning(f"Green H2 for {profile.region} finished with status '{status.value}'")

    return GreenHydrogenResult(
        **common_result_fields(
            pathway=Pathway.GREEN,
            region=profile.region,
            technology=inputs.electrolyzer,
            status=status,
            limits=limits,
            economics=economics,
            carbon=carbon,
            tonnes_per_unit=0.001,
            annual_energy_mwh=limits.total_energy_kwh / 1000,
            notes=notes,
            warnings=warnings,
        ),
        renewable_source=inputs.renewable_source.value,
        water_source=inputs.water_source.value,
        sizing_mode=inputs.sizing_mode.value,
        procurement=inputs.procurement.value,
        installed_capacity_mw=sizing.installed_capacity_mw,
        effective_capacity_mw=effective_mw,
        electrolyzer_capacity_mw=effective_mw,
        capacity_factor=sizing.capacity_factor,
        specific_energy=spec.specific_energy_kwh_per_kg,
        system_efficiency=H2_ENERGY_CONTENT_KWH_PER_KG / spec.specific_energy_kwh_per_kg * 100,
        water_consumption=spec.water_l_per_kg,
        electricity_cost=economics.energy_cost / 1e6,
        renewable_capex=economics.capex_breakdown.get("renewables", 0.0) / 1e6,
        capacity_defaulted=sizing.defaulted,
        resource_available=sizing.resource_available,
    )
