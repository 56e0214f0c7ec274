"""
Calculation functions for the TEA module.
"""

import logging
import math
from typing import Dict, Iterable, Tuple

import numpy as np
import numpy_financial as npf

from .config import (
    IRR_INITIAL_GUESS,
    IRR_MAX_ITERATIONS,
    IRR_NPV_TOLERANCE,
    SCALE_EXPONENT,
    SCALE_FACTOR_MAX,
    SCALE_FACTOR_MIN,
    SCALE_REFERENCE_CAPACITY,
    SENSITIVITY_RANGE,
    SENSITIVITY_TOP_COMPONENTS,
)
from .models import CostCategory, CostComponent, EconomicAssumptions, EconomicsResult

logger = logging.getLogger(__name__)


def calculate_crf(discount_rate: float, project_lifetime_years: int) -> float:
    """Capital recovery factor; 1/n at a zero discount rate."""
    if project_lifetime_years <= 0:
        raise ValueError(
            f"Project lifetime must be positive, got {project_lifetime_years}")
    if discount_rate > 0:
        growth = (1 + discount_rate) ** project_lifetime_years
        return (discount_rate * growth) / (growth - 1)
    return 1 / project_lifetime_years


def calculate_scale_factor(capacity: float,
                           reference_capacity: float = SCALE_REFERENCE_CAPACITY,
                           exponent: float = SCALE_EXPONENT) -> float:
    """
    Unit-CAPEX multiplier for economies of scale, clamped to
    [SCALE_FACTOR_MIN, SCALE_FACTOR_MAX]. Zero or invalid capacity gets the
    upper bound.
    """
    if capacity is None or not math.isfinite(capacity) or capacity <= 0:
        return SCALE_FACTOR_MAX
    factor = (capacity / reference_capacity) ** exponent
    return min(SCALE_FACTOR_MAX, max(SCALE_FACTOR_MIN, factor))


def calculate_replacement_cost(base_capex: float,
                               replacement_fraction: float,
                               replacement_interval_years: int,
                               project_lifetime_years: int) -> Tuple[int, float]:
    """
    Equipment replacements over the project life.

    Returns:
        (number of replacements, total replacement cost)
    """
    if replacement_interval_years <= 0 or base_capex <= 0:
        return 0, 0.0
    num_replacements = int(math.floor(
        project_lifetime_years / replacement_interval_years))
    return num_replacements, base_capex * replacement_fraction * num_replacements


def calculate_breakdown_sensitivity(breakdown: Dict[str, float],
                                    total: float,
                                    sensitivity_range: float = SENSITIVITY_RANGE,
                                    top_n: int = SENSITIVITY_TOP_COMPONENTS) -> Dict[str, Dict[str, Dict[str, float]]]:
    """
    +/- sensitivity of the levelized cost to its largest cost components.
    """
    sensitivity_analysis = {}
    if not math.isfinite(total):
        return sensitivity_analysis

    sorted_components = sorted(
        breakdown.items(), key=lambda x: abs(x[1]), reverse=True)
    cost_components = [(comp, cost)
                       for comp, cost in sorted_components[:top_n] if cost > 0]

    for component, base_cost in cost_components:
        comp_sensitivity = {}
        for change_pct in [-sensitivity_range, sensitivity_range]:
            cost_diff = base_cost * change_pct
            new_total = total + cost_diff
            comp_sensitivity[f"{change_pct*100:+.0f}%"] = {
                "change": cost_diff,
                "new_total": new_total,
                "impact_percentage": (cost_diff / total) * 100 if total > 0 else 0.0,
            }
        sensitivity_analysis[component] = comp_sensitivity
    logger.debug(
        f"Sensitivity analysis for {len(sensitivity_analysis)} cost components completed.")
    return sensitivity_analysis


def build_cash_flows(total_capex: float,
                     annual_net_cash_flow: float,
                     project_lifetime_years: int,
                     replacement_cost_per_event: float = 0.0,
                     replacement_interval_years: int = 0,
                     num_replacements: int = 0) -> np.ndarray:
    """
    Yearly project cash flows: year 0 is the capital outlay, years
    1..lifetime carry the net operating cash flow less replacements booked
    every replacement interval.
    """
    cash_flows = np.full(project_lifetime_years + 1,
                         float(annual_net_cash_flow), dtype=float)
    cash_flows[0] = -float(total_capex)
    if replacement_interval_years > 0 and replacement_cost_per_event > 0:
        for k in range(1, num_replacements + 1):
            year = k * replacement_interval_years
            if year <= project_lifetime_years:
                cash_flows[year] -= replacement_cost_per_event
    return cash_flows


def calculate_npv(discount_rate: float, cash_flows: Iterable[float]) -> float:
    cf_array = np.array(cash_flows, dtype=float)
    try:
        return float(npf.npv(discount_rate, cf_array))
    except (ValueError, FloatingPointError) as e:
        logger.warning(f"NPV calculation failed: {e}")
        return math.nan


def calculate_irr(cash_flows: Iterable[float],
                  initial_guess: float = IRR_INITIAL_GUESS,
                  max_iterations: int = IRR_MAX_ITERATIONS,
                  tolerance: float = IRR_NPV_TOLERANCE) -> float:
    """
    Internal rate of return (%) by Newton-Raphson on the NPV polynomial.

    Stops once |NPV| <= tolerance or after max_iterations. Returns NaN when
    the cash flows never change sign or the iteration does not converge.
    """
    cf_array = np.array(cash_flows, dtype=float)
    if not (np.any(cf_array > 0) and np.any(cf_array < 0)):
        logger.debug("IRR undefined: cash flows do not change sign")
        return math.nan

    years = np.arange(len(cf_array), dtype=float)
    rate = initial_guess
    for iteration in range(max_iterations):
        discount = (1 + rate) ** years
        npv = float(np.sum(cf_array / discount))
        if abs(npv) <= tolerance:
            logger.debug(
                f"IRR converged to {rate * 100:.3f}% after {iteration} iterations")
            return rate * 100
        dnpv = float(np.sum(-years * cf_array / (discount * (1 + rate))))
        if dnpv == 0 or not math.isfinite(dnpv):
            break
        rate = rate - npv / dnpv
        if rate <= -1:
            rate = -0.99
        if not math.isfinite(rate):
            break

    logger.warning(
        f"IRR did not converge within {max_iterations} iterations")
    return math.nan


def calculate_payback_period(total_capex: float, annual_cash_flow: float) -> float:
    """Simple payback in years; inf when the annual cash flow is not positive."""
    if annual_cash_flow <= 0:
        return math.inf
    return total_capex / annual_cash_flow


def calculate_levelized_cost(capex_items: Dict[str, float],
                             opex_items: Iterable[CostComponent],
                             annual_output: float,
                             economics: EconomicAssumptions,
                             annual_revenue: float,
                             scale_factor: float = 1.0,
                             replacement_base_capex: float = 0.0,
                             replacement_fraction: float = 0.0,
                             replacement_interval_years: int = 0,
                             replacement_label: str = "replacement",
                             output_unit: str = "kg") -> EconomicsResult:
    """
    Assemble capital and operating costs into levelized cost and
    investment metrics.

    Args:
        capex_items: Capital cost by component ($), before adjustment
        opex_items: Annual operating cost lines ($/yr), before adjustment
        annual_output: Actual annual output (kg H2 or t product)
        economics: Discount rate, lifetime and adjustment factors
        annual_revenue: Annual sales revenue ($/yr)
        scale_factor: Economies-of-scale factor already applied to capex_items
        replacement_base_capex: CAPEX base of the replaced equipment ($)
        replacement_fraction: Share of the base replaced each interval
        replacement_interval_years: Years between replacements
        replacement_label: Breakdown key for the replacement line
        output_unit: Unit label for logging

    Returns:
        EconomicsResult with a levelized breakdown summing to the total
    """
    lifetime = economics.project_lifetime_years
    capex_mult = 1 + economics.capex_adjustment
    opex_mult = 1 + economics.opex_adjustment

    capex_breakdown = {name: cost * capex_mult for name, cost in capex_items.items()}
    total_capex = sum(capex_breakdown.values())
    crf = calculate_crf(economics.discount_rate, lifetime)
    annualized_capex = total_capex * crf

    num_replacements, replacement_cost = calculate_replacement_cost(
        replacement_base_capex * capex_mult, replacement_fraction,
        replacement_interval_years, lifetime)
    annualized_replacement = replacement_cost * crf

    opex_components: Dict[str, float] = {}
    category_totals = {category: 0.0 for category in CostCategory}
    for item in opex_items:
        adjusted = item.annual_cost * opex_mult
        opex_components[item.name] = opex_components.get(item.name, 0.0) + adjusted
        category_totals[item.category] += adjusted
    annual_opex = sum(opex_components.values())

    total_annualized_cost = annualized_capex + annualized_replacement + annual_opex

    annual_amounts: Dict[str, float] = {}
    for name, cost in capex_breakdown.items():
        annual_amounts[f"capex_{name}"] = cost * crf
    annual_amounts[replacement_label] = annualized_replacement
    annual_amounts.update(opex_components)

    if annual_output > 0:
        levelized_cost = total_annualized_cost / annual_output
        levelized_breakdown = {name: amount / annual_output
                               for name, amount in annual_amounts.items()}
    else:
        logger.warning(
            f"Annual output is zero or negative ({annual_output}). Levelized cost is undefined.")
        levelized_cost = math.nan
        levelized_breakdown = {name: math.nan for name in annual_amounts}

    total_absolute = sum(abs(v) for v in annual_amounts.values())
    breakdown_percentages = ({name: abs(v) / total_absolute * 100 for name, v in annual_amounts.items()}
                             if total_absolute > 0 else {})

    sensitivity = calculate_breakdown_sensitivity(levelized_breakdown, levelized_cost)

    replacement_per_event = (replacement_cost / num_replacements) if num_replacements else 0.0
    annual_net = annual_revenue - annual_opex
    cash_flows = build_cash_flows(total_capex, annual_net, lifetime,
                                  replacement_per_event, replacement_interval_years,
                                  num_replacements)
    npv = calculate_npv(economics.discount_rate, cash_flows)
    irr = calculate_irr(cash_flows)
    payback = calculate_payback_period(total_capex, annual_net)

    if math.isfinite(levelized_cost):
        logger.info(
            f"Levelized cost: ${levelized_cost:.3f}/{output_unit}. CAPEX ${total_capex:,.0f}, "
            f"annualized cost ${total_annualized_cost:,.0f}/yr")
        sorted_components = sorted(
            levelized_breakdown.items(), key=lambda x: abs(x[1]), reverse=True)
        for i, (component, cost) in enumerate(sorted_components[:SENSITIVITY_TOP_COMPONENTS]):
            logger.debug(
                f"     {i+1}. {component}: ${cost:.3f}/{output_unit} ({breakdown_percentages.get(component, 0):.1f}%)")

    return EconomicsResult(
        capex_breakdown=capex_breakdown,
        total_capex=total_capex,
        crf=crf,
        scale_factor=scale_factor,
        annualized_capex=annualized_capex,
        num_replacements=num_replacements,
        replacement_cost=replacement_cost,
        annualized_replacement=annualized_replacement,
        fixed_om=category_totals[CostCategory.FIXED_OM],
        variable_om=category_totals[CostCategory.VARIABLE_OM],
        energy_cost=category_totals[CostCategory.ENERGY],
        water_cost=category_totals[CostCategory.WATER],
        opex_components=opex_components,
        annual_opex=annual_opex,
        total_annualized_cost=total_annualized_cost,
        annual_output=annual_output,
        levelized_cost=levelized_cost,
        levelized_breakdown=levelized_breakdown,
        breakdown_percentages=breakdown_percentages,
        sensitivity=sensitivity,
        annual_revenue=annual_revenue,
        cash_flows=cash_flows,
        npv=npv,
        irr=irr,
        payback_period=payback,
    )
