"""
Hydrogen LCA Calculator
Carbon intensity of hydrogen and derivative products by process stage, and
CO2 avoided against conventional production.

Intensities are kg CO2 per output unit (kg H2, or t product for
derivatives); annual figures are t CO2/yr.
"""

import logging
import math
from typing import Any, Dict, Union

from ..resources.models import ProductionLimits, RenewableSource
from .config import (
    DERIVATIVE_BENCHMARKS,
    ELECTRICITY_EMISSION_FACTORS,
    GREY_HYDROGEN_BENCHMARK,
    HYDROGEN_FEEDSTOCK_INTENSITY,
)
from .models import CarbonIntensityResult

logger = logging.getLogger(__name__)

KG_PER_TONNE = 1000.0


def _key(value: Any) -> str:
    return str(getattr(value, "value", value)).lower()


class CarbonIntensityCalculator:
    """Stage-wise carbon intensity calculator for the three pathways"""

    def __init__(self, grid_emission_factor: float = None):
        """
        Args:
            grid_emission_factor: Override of the auxiliary-load grid factor
                (kg CO2/kWh)
        """
        self.grid_emission_factor = (grid_emission_factor if grid_emission_factor is not None
                                     else ELECTRICITY_EMISSION_FACTORS["grid"].value)

    @staticmethod
    def calculate_co2_avoided(benchmark: float, intensity: float, output: float) -> float:
        """
        CO2 avoided (t/yr) against a benchmark intensity.

        Args:
            benchmark: Conventional intensity (kg CO2 per output unit)
            intensity: Actual intensity (kg CO2 per output unit)
            output: Annual output in the unit the intensities refer to
        """
        if output <= 0 or not math.isfinite(intensity):
            return 0.0
        return (benchmark - intensity) * output / KG_PER_TONNE

    def _assemble(self, stages: Dict[str, float], output: float,
                  benchmark: float, unit: str) -> CarbonIntensityResult:
        if output > 0:
            total = sum(stages.values())
            by_stage = stages
            annual_emissions = total * output / KG_PER_TONNE
        else:
            logger.warning("Zero output; carbon intensity is undefined")
            total = math.nan
            by_stage = {stage: math.nan for stage in stages}
            annual_emissions = 0.0
        return CarbonIntensityResult(
            total=total,
            by_stage=by_stage,
            benchmark=benchmark,
            annual_emissions_t=annual_emissions,
            co2_avoided_t=self.calculate_co2_avoided(benchmark, total, output),
            unit=unit,
        )

    def calculate_green(self,
                        source: Union[RenewableSource, str],
                        specific_energy_kwh_per_kg: float,
                        limits: ProductionLimits) -> CarbonIntensityResult:
        """
        Electrolytic hydrogen: conversion energy plus water-treatment energy,
        both at the renewable source's lifecycle factor.
        """
        factor = ELECTRICITY_EMISSION_FACTORS[_key(source)].value
        output = limits.actual_output
        stages = {
            "electrolysis": factor * specific_energy_kwh_per_kg,
            "water_treatment": factor * limits.auxiliary_energy_kwh / output if output > 0 else 0.0,
        }
        result = self._assemble(stages, output, GREY_HYDROGEN_BENCHMARK.value, "kg CO2/kg H2")
        logger.debug(f"Green H2 carbon intensity ({_key(source)}): {result.total:.3f} kg CO2/kg")
        return result

    def calculate_blue(self,
                       technology_spec,
                       capture_rate: float,
                       limits: ProductionLimits) -> CarbonIntensityResult:
        """
        Reforming with capture: process CO2 discounted by the capture rate,
        plus auxiliary (water treatment) electricity at the grid factor.

        Args:
            technology_spec: Reforming record exposing co2_kg_per_kg
            capture_rate: Fraction of generated CO2 captured
            limits: Production limits at actual output
        """
        output = limits.actual_output
        stages = {
            "reforming": technology_spec.co2_kg_per_kg * (1 - capture_rate),
            "auxiliary_power": (self.grid_emission_factor * limits.auxiliary_energy_kwh / output
                                if output > 0 else 0.0),
        }
        result = self._assemble(stages, output, GREY_HYDROGEN_BENCHMARK.value, "kg CO2/kg H2")
        logger.debug(
            f"Blue H2 carbon intensity (capture {capture_rate:.0%}): {result.total:.3f} kg CO2/kg")
        return result

    def calculate_derivative(self,
                             product_spec,
                             hydrogen_source,
                             h2_required_t: float,
                             limits: ProductionLimits) -> CarbonIntensityResult:
        """
        Derivative product: embodied hydrogen emissions, process emissions
        (negative where CO2 is consumed) and auxiliary electricity.

        Args:
            product_spec: Product record exposing name and process_emissions_t_per_t
            hydrogen_source: "green" or "blue" (enum or string)
            h2_required_t: Annual hydrogen feed (t/yr)
            limits: Production limits at actual output (t product/yr)
        """
        output = limits.actual_output
        h2_factor = HYDROGEN_FEEDSTOCK_INTENSITY[_key(hydrogen_source)].value
        if output > 0:
            stages = {
                "hydrogen_feedstock": h2_required_t * KG_PER_TONNE * h2_factor / output,
                "process": product_spec.process_emissions_t_per_t * KG_PER_TONNE,
                "auxiliary_power": self.grid_emission_factor * limits.auxiliary_energy_kwh / output,
            }
        else:
            stages = {"hydrogen_feedstock": 0.0, "process": 0.0, "auxiliary_power": 0.0}
        benchmark = DERIVATIVE_BENCHMARKS[product_spec.name].value
        result = self._assemble(stages, output, benchmark, "kg CO2/t product")
        logger.debug(
            f"{product_spec.name} carbon intensity ({_key(hydrogen_source)} H2): {result.total:.1f} kg CO2/t")
        return result


def compute_carbon_intensity(pathway, limits: ProductionLimits, **kwargs) -> CarbonIntensityResult:
    """
    Functional entry point dispatching on the pathway name.

    Keyword arguments are those of the matching CarbonIntensityCalculator
    method (source/specific_energy_kwh_per_kg, technology_spec/capture_rate,
    or product_spec/hydrogen_source/h2_required_t).
    """
    calculator = CarbonIntensityCalculator(kwargs.pop("grid_emission_factor", None))
    key = _key(pathway)
    if key == "green":
        return calculator.calculate_green(kwargs["source"], kwargs["specific_energy_kwh_per_kg"], limits)
    if key == "blue":
        return calculator.calculate_blue(kwargs["technology_spec"], kwargs["capture_rate"], limits)
    if key == "derivatives":
        return calculator.calculate_derivative(kwargs["product_spec"], kwargs["hydrogen_source"],
                                               kwargs["h2_required_t"], limits)
    raise ValueError(f"Unknown pathway '{pathway}'")
