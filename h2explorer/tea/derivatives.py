"""
Hydrogen derivatives pathway: ammonia, methanol and e-fuel synthesis from
purchased hydrogen plus nitrogen or CO2 feedstock.
"""

import logging
import math
from typing import Dict, Tuple

from ..lca.calculator import CarbonIntensityCalculator
from ..resources.config import WATER_SOURCES
from ..resources.models import ProductionLimits, RegionalResourceProfile
from ..resources.production import limit_production
from .assembly import collect_notes, common_result_fields, determine_status
from .calculations import calculate_levelized_cost, calculate_scale_factor
from .config import FEEDSTOCK_PRICES_USD_PER_T
from .models import (
    CostCategory,
    CostComponent,
    DerivativeInputs,
    DerivativeResult,
    EconomicsResult,
    Pathway,
)

logger = logging.getLogger(__name__)


def calculate_feedstock(inputs: DerivativeInputs, output_t: float) -> Tuple[str, str, float, float]:
    """
    Non-hydrogen feedstock for the product.

    Returns:
        (feedstock type, source, t/yr required, $/yr cost); type is ""
        when the product needs neither nitrogen nor CO2
    """
    spec = inputs.product_spec
    if spec.n2_t_per_t > 0:
        source = inputs.nitrogen_source.value
        required = output_t * spec.n2_t_per_t
        return "nitrogen", source, required, required * FEEDSTOCK_PRICES_USD_PER_T["nitrogen"][source]
    if spec.co2_t_per_t > 0:
        source = inputs.co2_source.value
        required = output_t * spec.co2_t_per_t
        return "co2", source, required, required * FEEDSTOCK_PRICES_USD_PER_T["co2"][source]
    return "", "", 0.0, 0.0


def hydrogen_required_t(inputs: DerivativeInputs, output_t: float) -> float:
    """Annual hydrogen feed (t/yr) after process losses."""
    return output_t * inputs.product_spec.h2_t_per_t / inputs.effective_process_efficiency


def calculate_derivative_economics(inputs: DerivativeInputs,
                                   limits: ProductionLimits,
                                   profile: RegionalResourceProfile) -> EconomicsResult:
    """CAPEX, OPEX and levelized product cost ($/t)."""
    spec = inputs.product_spec
    output_t = limits.actual_output

    scale_factor = calculate_scale_factor(inputs.plant_capacity_ktpa)
    plant_capex = inputs.plant_capacity_ktpa * 1000 * spec.capex_usd_per_tpy * scale_factor

    h2_t = hydrogen_required_t(inputs, output_t)
    feedstock_type, _, _, feedstock_cost = calculate_feedstock(inputs, output_t)
    water_cost = limits.water_draw_m3 * WATER_SOURCES[inputs.water_source.value]["cost_usd_per_m3"]

    opex_items = [
        CostComponent("fixed_om", CostCategory.FIXED_OM, plant_capex * spec.fixed_om_fraction),
        CostComponent("hydrogen_feedstock", CostCategory.VARIABLE_OM,
                      h2_t * 1000 * inputs.h2_price_usd_per_kg),
    ]
    if feedstock_type:
        opex_items.append(CostComponent(f"{feedstock_type}_feedstock", CostCategory.VARIABLE_OM,
                                        feedstock_cost))
    opex_items += [
        CostComponent("electricity", CostCategory.ENERGY,
                      limits.total_energy_kwh / 1000 * inputs.electricity_price_usd_per_mwh),
        CostComponent("water", CostCategory.WATER, water_cost),
    ]

    selling_price = (inputs.economics.selling_price if inputs.economics.selling_price is not None
                     else spec.market_price_usd_per_t)

    return calculate_levelized_cost(
        capex_items={"plant": plant_capex},
        opex_items=opex_items,
        annual_output=output_t,
        economics=inputs.economics,
        annual_revenue=output_t * selling_price,
        scale_factor=scale_factor,
        replacement_base_capex=plant_capex,
        replacement_fraction=spec.replacement_fraction,
        replacement_interval_years=spec.replacement_interval_years,
        replacement_label="equipment_replacement",
        output_unit=f"t {spec.name}",
    )


def calculate_market_metrics(economics: EconomicsResult, market_price: float) -> Dict[str, float]:
    """Production cost, gross margin and competitiveness against the market price."""
    output = economics.annual_output
    revenue = economics.annual_revenue
    production_cost = economics.annual_opex / output if output > 0 else math.nan
    total_product_cost = economics.levelized_cost
    return {
        "production_cost": production_cost,
        "total_product_cost": total_product_cost,
        "gross_margin": (revenue - economics.annual_opex) / revenue * 100 if revenue > 0 else math.nan,
        "competitiveness": ((market_price - total_product_cost) / market_price * 100
                            if market_price > 0 else math.nan),
    }


def calculate_derivatives(inputs: DerivativeInputs,
                          profile: RegionalResourceProfile) -> DerivativeResult:
    """Full derivative product pipeline for one region."""
    spec = inputs.product_spec
    logger.info(
        f"{spec.name} for {profile.region}: {inputs.plant_capacity_ktpa} kt/yr from "
        f"{inputs.hydrogen_source.value} H2")
    water_params = WATER_SOURCES[inputs.water_source.value]

    nameplate_t = inputs.plant_capacity_ktpa * 1000
    limits = limit_production(
        annual_energy_kwh=nameplate_t * spec.energy_kwh_per_t,
        specific_energy=spec.energy_kwh_per_t,
        water_per_unit_m3=spec.water_m3_per_t,
        water_available_m3=profile.water_available_m3(inputs.water_source),
        treatment_energy_kwh_per_m3=water_params["treatment_energy_kwh_per_m3"],
        unit="t",
    )
    output_t = limits.actual_output

    economics = calculate_derivative_economics(inputs, limits, profile)
    h2_t = hydrogen_required_t(inputs, output_t)
    carbon = CarbonIntensityCalculator().calculate_derivative(
        spec, inputs.hydrogen_source, h2_t, limits)
    feedstock_type, feedstock_source, feedstock_t, _ = calculate_feedstock(inputs, output_t)
    market = calculate_market_metrics(economics, spec.market_price_usd_per_t)

    return DerivativeResult(
        **common_result_fields(
            pathway=Pathway.DERIVATIVES,
            region=profile.region,
            technology=spec.name,
            status=determine_status(profile, limits),
            limits=limits,
            economics=economics,
            carbon=carbon,
            tonnes_per_unit=1.0,
            annual_energy_mwh=limits.total_energy_kwh / 1000,
            notes=collect_notes(limits),
            warnings=profile.warnings,
        ),
        product=spec.name,
        hydrogen_source=inputs.hydrogen_source.value,
        plant_capacity_ktpa=inputs.plant_capacity_ktpa,
        process_efficiency=inputs.effective_process_efficiency,
        h2_consumption=h2_t,
        h2_intensity=spec.h2_t_per_t,
        feedstock_type=feedstock_type,
        feedstock_source=feedstock_source,
        feedstock_required=feedstock_t,
        specific_energy=spec.energy_mwh_per_t,
        market_price=spec.market_price_usd_per_t,
        **market,
    )
