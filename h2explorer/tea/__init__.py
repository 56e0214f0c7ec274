"""
TEA (Technical Economic Analysis) module for hydrogen production pathways.

The command-line entry point is h2explorer/main.py.
"""

from .models import (
    InvalidConfigurationError,
    Pathway,
    Procurement,
    HydrogenSource,
    NitrogenSource,
    CO2Source,
    ResultStatus,
    EconomicAssumptions,
    GreenHydrogenInputs,
    BlueHydrogenInputs,
    DerivativeInputs,
    EconomicsResult,
    CalculationResult,
    GreenHydrogenResult,
    BlueHydrogenResult,
    DerivativeResult,
)
from .calculations import (
    calculate_crf,
    calculate_scale_factor,
    calculate_replacement_cost,
    calculate_levelized_cost,
    calculate_breakdown_sensitivity,
    build_cash_flows,
    calculate_npv,
    calculate_irr,
    calculate_payback_period,
)
from .green_hydrogen import calculate_green_hydrogen, calculate_green_economics
from .blue_hydrogen import calculate_blue_hydrogen, calculate_blue_economics
from .derivatives import calculate_derivatives, calculate_derivative_economics
from .reporting import generate_summary_report, write_summary_report, export_results_json
from .utils import close_tea_module_logger, setup_logging, setup_tea_module_logger
from .tea_engine import TEAEngine, run_calculation, summarize_results

__all__ = [
    # Models
    'InvalidConfigurationError',
    'Pathway',
    'Procurement',
    'HydrogenSource',
    'NitrogenSource',
    'CO2Source',
    'ResultStatus',
    'EconomicAssumptions',
    'GreenHydrogenInputs',
    'BlueHydrogenInputs',
    'DerivativeInputs',
    'EconomicsResult',
    'CalculationResult',
    'GreenHydrogenResult',
    'BlueHydrogenResult',
    'DerivativeResult',
    # Calculations
    'calculate_crf',
    'calculate_scale_factor',
    'calculate_replacement_cost',
    'calculate_levelized_cost',
    'calculate_breakdown_sensitivity',
    'build_cash_flows',
    'calculate_npv',
    'calculate_irr',
    'calculate_payback_period',
    # Pathways
    'calculate_green_hydrogen',
    'calculate_green_economics',
    'calculate_blue_hydrogen',
    'calculate_blue_economics',
    'calculate_derivatives',
    'calculate_derivative_economics',
    # Reporting
    'generate_summary_report',
    'write_summary_report',
    'export_results_json',
    # Utils
    'setup_logging',
    'setup_tea_module_logger',
    'close_tea_module_logger',
    # TEA Engine
    'TEAEngine',
    'run_calculation',
    'summarize_results',
]
