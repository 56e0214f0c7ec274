"""
TEA Summary Report Generator
Plain-text summary and JSON export of a calculation result.
"""

import json
import logging
import math
from pathlib import Path
from typing import Any, Optional, Union

import numpy as np

from .models import (
    BlueHydrogenResult,
    CalculationResult,
    DerivativeResult,
    GreenHydrogenResult,
)

logger = logging.getLogger(__name__)


def format_aligned_line(name: str, value: str, min_width: int = 40, indent: str = "  ") -> str:
    """
    Format a name-value pair with consistent colon alignment.
    """
    effective_width = max(min_width, len(name))
    return f"{indent}{name:<{effective_width}} : {value}\n"


def format_aligned_section(items: dict, min_width: int = 40, indent: str = "  ") -> str:
    """
    Format a dictionary of name-value pairs with consistent alignment.
    """
    if not items:
        return ""

    max_name_length = max(len(str(name)) for name in items.keys())
    effective_width = max(min_width, max_name_length)

    return "".join(format_aligned_line(str(name), str(value), effective_width, indent)
                   for name, value in items.items())


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, np.number)) and not isinstance(value, bool)


def _format_number(value: Optional[float], decimals: int = 1, suffix: str = "") -> str:
    if value is None or not _is_number(value) or np.isnan(value):
        return "N/A"
    if np.isinf(value):
        return "unconstrained" if value > 0 else "N/A"
    return f"{value:,.{decimals}f}{suffix}"


def _format_currency(value: Optional[float], decimals: int = 2, unit: str = "") -> str:
    if value is None or not _is_number(value) or not np.isfinite(value):
        return "N/A"
    return f"${value:,.{decimals}f}{unit}"


def _format_percentage(value: Optional[float], decimals: int = 1) -> str:
    if value is None or not _is_number(value) or not np.isfinite(value):
        return "N/A"
    return f"{value:.{decimals}f}%"


def _format_years(value: Optional[float]) -> str:
    if value is None or not _is_number(value) or np.isnan(value):
        return "N/A"
    if np.isinf(value):
        return "Never"
    return f"{value:.1f} years"


def _cost_unit(result: CalculationResult) -> str:
    return "/t" if isinstance(result, DerivativeResult) else "/kg"


def _section(title: str) -> str:
    return f"\n{title}\n{'-' * len(title)}\n"


def generate_summary_report(result: CalculationResult) -> str:
    """
    Render a calculation result as an aligned plain-text report.

    NaN values print as N/A, infinite payback as "Never" and an infinite
    water limit as "unconstrained".
    """
    cost_unit = _cost_unit(result)
    lines = []
    title = f"Hydrogen Techno-Economic Summary: {result.region}"
    lines.append(f"{'=' * len(title)}\n{title}\n{'=' * len(title)}\n")

    lines.append(_section("Project"))
    project = {
        "Pathway": result.pathway.value,
        "Technology": result.technology,
        "Status": result.status.value,
    }
    if isinstance(result, GreenHydrogenResult):
        project.update({
            "Renewable Source": result.renewable_source,
            "Sizing Mode": result.sizing_mode,
            "Procurement": result.procurement,
            "Water Source": result.water_source,
            "Installed Capacity (MW)": _format_number(result.installed_capacity_mw),
            "Effective Capacity (MW)": _format_number(result.effective_capacity_mw),
            "Capacity Factor": _format_percentage(result.capacity_factor * 100),
        })
    elif isinstance(result, BlueHydrogenResult):
        project.update({
            "Plant Capacity (MW)": _format_number(result.plant_capacity_mw),
            "Capture Rate": _format_percentage(result.capture_rate * 100),
            "Water Source": result.water_source,
        })
    elif isinstance(result, DerivativeResult):
        project.update({
            "Hydrogen Source": result.hydrogen_source,
            "Plant Capacity (kt/yr)": _format_number(result.plant_capacity_ktpa),
            "Process Efficiency": _format_percentage(result.process_efficiency * 100),
        })
    lines.append(format_aligned_section(project))

    lines.append(_section("Production"))
    production = {
        "Annual Production (t/yr)": _format_number(result.annual_production),
        "Daily Production (t/day)": _format_number(result.daily_production, 2),
        "Power-Limited Production (t/yr)": _format_number(result.power_limited_production),
        "Water-Limited Production (t/yr)": _format_number(result.water_limited_production),
        "Bottleneck": result.bottleneck.value,
        "Annual Energy Use (MWh/yr)": _format_number(result.annual_energy_use, 0),
        "Annual Water Use (m3/yr)": _format_number(result.annual_water_use, 0),
    }
    if isinstance(result, BlueHydrogenResult):
        production["Natural Gas (BCM/yr)"] = _format_number(result.gas_consumption_bcm, 4)
    if isinstance(result, DerivativeResult):
        production["Hydrogen Feed (t/yr)"] = _format_number(result.h2_consumption)
        if result.feedstock_type:
            production[f"{result.feedstock_type.upper()} Feed (t/yr)"] = _format_number(result.feedstock_required)
    lines.append(format_aligned_section(production))

    lines.append(_section("Economics"))
    economics = {
        "Levelized Cost": _format_currency(result.levelized_cost, 3, cost_unit),
        "Total CAPEX (M$)": _format_number(result.total_capex, 2),
        "Annualized CAPEX incl. Replacements (M$/yr)": _format_number(result.annualized_capex, 2),
        "Annual OPEX (M$/yr)": _format_number(result.annual_opex, 2),
        "Annual Revenue (M$/yr)": _format_number(result.annual_revenue, 2),
        "NPV (M$)": _format_number(result.npv, 2),
        "IRR": _format_percentage(result.irr),
        "Payback Period": _format_years(result.payback_period),
    }
    if isinstance(result, DerivativeResult):
        economics.update({
            "Production Cost, OPEX only ($/t)": _format_currency(result.production_cost),
            "Market Price ($/t)": _format_currency(result.market_price),
            "Gross Margin": _format_percentage(result.gross_margin),
            "Competitiveness": _format_percentage(result.competitiveness),
        })
    lines.append(format_aligned_section(economics))

    lines.append(_section("Cost Breakdown"))
    breakdown = {}
    for component, value in sorted(result.cost_breakdown.items(),
                                   key=lambda x: abs(x[1]) if math.isfinite(x[1]) else 0, reverse=True):
        share = result.cost_breakdown_percent.get(component)
        breakdown[component] = f"{_format_currency(value, 3, cost_unit)} ({_format_percentage(share)})"
    lines.append(format_aligned_section(breakdown) or "  N/A\n")

    if result.economics is not None and result.economics.sensitivity:
        lines.append(_section("Sensitivity (+/-20%)"))
        sensitivity = {}
        for component, cases in result.economics.sensitivity.items():
            sensitivity[component] = ", ".join(
                f"{label}: {_format_currency(case['new_total'], 3, cost_unit)}" for label, case in cases.items())
        lines.append(format_aligned_section(sensitivity))

    lines.append(_section("Environment"))
    intensity_unit = "kg CO2/t" if isinstance(result, DerivativeResult) else "kg CO2/kg H2"
    environment = {
        f"Carbon Intensity ({intensity_unit})": _format_number(result.carbon_intensity, 3),
        "Annual CO2 Emissions (t/yr)": _format_number(result.annual_co2_emissions, 0),
        "CO2 Avoided vs Conventional (t/yr)": _format_number(result.co2_avoided, 0),
    }
    for stage, value in result.emissions_by_stage.items():
        environment[f"  {stage}"] = _format_number(value, 3)
    lines.append(format_aligned_section(environment))

    if result.notes or result.warnings:
        lines.append(_section("Notes"))
        for message in (*result.notes, *result.warnings):
            lines.append(f"  - {message}\n")

    return "".join(lines)


def write_summary_report(result: CalculationResult, output_path: Union[str, Path]) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generate_summary_report(result), encoding="utf-8")
    logger.info(f"Summary report written to {output_path}")
    return output_path


def export_results_json(result: CalculationResult, output_path: Union[str, Path]) -> Path:
    """Write result.to_dict() as JSON; NaN is written as null."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, indent=2, allow_nan=False)
    logger.info(f"Results exported to {output_path}")
    return output_path
