"""
Blue hydrogen pathway: natural gas reforming (SMR/ATR/POX) with carbon
capture and storage, sized from the user-specified plant capacity.
"""

import logging
from typing import Dict

from ..lca.calculator import CarbonIntensityCalculator
from ..resources.config import HOURS_IN_YEAR, WATER_SOURCES
from ..resources.models import ProductionLimits, RegionalResourceProfile
from ..resources.production import limit_production
from .assembly import collect_notes, common_result_fields, determine_status
from .calculations import calculate_levelized_cost, calculate_scale_factor
from .config import (
    BLUE_PLANT_AVAILABILITY,
    CCS,
    H2_ENERGY_CONTENT_KWH_PER_KG,
    H2_SELLING_PRICE_USD_PER_KG,
    MMBTU_TO_BCM,
    MWH_PER_MMBTU,
)
from .models import (
    BlueHydrogenInputs,
    BlueHydrogenResult,
    CostCategory,
    CostComponent,
    EconomicsResult,
    Pathway,
)

logger = logging.getLogger(__name__)


def nameplate_output_kg(plant_capacity_mw: float,
                        availability: float = BLUE_PLANT_AVAILABILITY) -> float:
    """Annual hydrogen output of a reformer at the given availability (kg/yr)."""
    return plant_capacity_mw * 1000 / H2_ENERGY_CONTENT_KWH_PER_KG * HOURS_IN_YEAR * availability


def calculate_gas_and_co2(inputs: BlueHydrogenInputs, output_kg: float) -> Dict[str, float]:
    """
    Natural gas use and CO2 balance at the given output.

    Capture adds an energy penalty proportional to the capture rate.
    """
    spec = inputs.technology_spec
    gas_mmbtu = output_kg * spec.gas_mmbtu_per_kg * (1 + CCS["energy_penalty"] * inputs.capture_rate)
    co2_generated_t = output_kg * spec.co2_kg_per_kg / 1000
    co2_captured_t = co2_generated_t * inputs.capture_rate
    return {
        "gas_mmbtu": gas_mmbtu,
        "gas_bcm": gas_mmbtu * MMBTU_TO_BCM,
        "co2_generated_t": co2_generated_t,
        "co2_captured_t": co2_captured_t,
        "co2_emitted_t": co2_generated_t - co2_captured_t,
    }


def calculate_blue_economics(inputs: BlueHydrogenInputs,
                             limits: ProductionLimits,
                             profile: RegionalResourceProfile) -> EconomicsResult:
    """
    CAPEX, OPEX and levelized cost of reformed hydrogen with CCS.

    The captured-CO2 credit is ccs_credit_fraction of the CO2 price per
    captured tonne and offsets the carbon cost of emitted CO2.
    """
    spec = inputs.technology_spec
    balance = calculate_gas_and_co2(inputs, limits.actual_output)

    scale_factor = calculate_scale_factor(inputs.plant_capacity_mw)
    reformer_capex = inputs.plant_capacity_mw * 1000 * spec.capex_usd_per_kw * scale_factor
    # Capture unit sized on annual captured tonnes
    ccs_capex = (balance["co2_captured_t"] * CCS["capex_usd_per_tpy"]
                 if inputs.capture_rate > 0 else 0.0)
    capex_items = {"reformer": reformer_capex, "ccs": ccs_capex}

    captured = balance["co2_captured_t"]
    carbon_cost = (balance["co2_emitted_t"] * inputs.co2_price_usd_per_t
                   - captured * inputs.co2_price_usd_per_t * inputs.ccs_credit_fraction)
    water_cost = limits.water_draw_m3 * WATER_SOURCES[inputs.water_source.value]["cost_usd_per_m3"]

    opex_items = [
        CostComponent("fixed_om", CostCategory.FIXED_OM, reformer_capex * spec.fixed_om_fraction),
        CostComponent("natural_gas", CostCategory.ENERGY,
                      balance["gas_mmbtu"] * inputs.gas_price_usd_per_mmbtu),
        CostComponent("auxiliary_power", CostCategory.ENERGY,
                      limits.auxiliary_energy_kwh / 1000 * inputs.auxiliary_electricity_price_usd_per_mwh),
        CostComponent("ccs_operation", CostCategory.VARIABLE_OM, captured * CCS["opex_usd_per_t"]),
        CostComponent("co2_transport", CostCategory.VARIABLE_OM,
                      captured * CCS["transport_usd_per_t_km"] * inputs.co2_transport_distance_km),
        CostComponent("carbon_cost", CostCategory.VARIABLE_OM, carbon_cost),
        CostComponent("water", CostCategory.WATER, water_cost),
    ]
    logger.debug(
        f"{inputs.technology}: gas {balance['gas_mmbtu']:,.0f} MMBtu/yr, CO2 captured {captured:,.0f} t/yr, "
        f"carbon cost ${carbon_cost:,.0f}/yr")

    selling_price = (inputs.economics.selling_price if inputs.economics.selling_price is not None
                     else H2_SELLING_PRICE_USD_PER_KG)

    return calculate_levelized_cost(
        capex_items=capex_items,
        opex_items=opex_items,
        annual_output=limits.actual_output,
        economics=inputs.economics,
        annual_revenue=limits.actual_output * selling_price,
        scale_factor=scale_factor,
        replacement_base_capex=reformer_capex,
        replacement_fraction=spec.replacement_fraction,
        replacement_interval_years=spec.replacement_interval_years,
        replacement_label="catalyst_replacement",
        output_unit="kg H2",
    )


def calculate_blue_hydrogen(inputs: BlueHydrogenInputs,
                            profile: RegionalResourceProfile) -> BlueHydrogenResult:
    """Full blue hydrogen pipeline for one region."""
    logger.info(
        f"Blue H2 for {profile.region}: {inputs.technology}, {inputs.plant_capacity_mw} MW, "
        f"capture {inputs.capture_rate:.0%}")
    spec = inputs.technology_spec
    water_params = WATER_SOURCES[inputs.water_source.value]

    # Power limit equals nameplate output; the hydrogen energy content stands in for conversion energy
    nameplate_kg = nameplate_output_kg(inputs.plant_capacity_mw)
    limits = limit_production(
        annual_energy_kwh=nameplate_kg * H2_ENERGY_CONTENT_KWH_PER_KG,
        specific_energy=H2_ENERGY_CONTENT_KWH_PER_KG,
        water_per_unit_m3=spec.water_l_per_kg / 1000,
        water_available_m3=profile.water_available_m3(inputs.water_source),
        treatment_energy_kwh_per_m3=water_params["treatment_energy_kwh_per_m3"],
        unit="kg",
    )

    economics = calculate_blue_economics(inputs, limits, profile)
    carbon = CarbonIntensityCalculator().calculate_blue(spec, inputs.capture_rate, limits)
    balance = calculate_gas_and_co2(inputs, limits.actual_output)

    status = determine_status(profile, limits)
    energy_mwh = balance["gas_mmbtu"] * MWH_PER_MMBTU + limits.auxiliary_energy_kwh / 1000

    return BlueHydrogenResult(
        **common_result_fields(
            pathway=Pathway.BLUE,
            region=profile.region,
            technology=inputs.technology,
            status=status,
            limits=limits,
            economics=economics,
            carbon=carbon,
            tonnes_per_unit=0.001,
            annual_energy_mwh=energy_mwh,
            notes=collect_notes(limits),
            warnings=profile.warnings,
        ),
        plant_capacity_mw=inputs.plant_capacity_mw,
        capture_rate=inputs.capture_rate,
        efficiency=spec.efficiency * 100,
        steam_carbon_ratio=spec.steam_carbon_ratio,
        water_source=inputs.water_source.value,
        gas_consumption_mmbtu=balance["gas_mmbtu"],
        gas_consumption_bcm=balance["gas_bcm"],
        specific_gas_consumption=spec.gas_mmbtu_per_kg,
        co2_generated=balance["co2_generated_t"],
        co2_captured=balance["co2_captured_t"],
        co2_emitted=balance["co2_emitted_t"],
    )
