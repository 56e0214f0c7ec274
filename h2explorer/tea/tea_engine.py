"""
TEA Engine - entry point of the techno-economic calculation.

Holds a read-only regional resolver and dispatches a parameter bundle to the
matching pathway calculator. Each call is independent; nothing is cached
between calls.
"""

import dataclasses
import logging
from typing import Iterable, Optional, Union

import pandas as pd

from ..resources.regional import RegionalDataset, RegionalResourceResolver
from .blue_hydrogen import calculate_blue_hydrogen
from .derivatives import calculate_derivatives
from .green_hydrogen import calculate_green_hydrogen
from .models import (
    BlueHydrogenInputs,
    CalculationResult,
    DerivativeInputs,
    GreenHydrogenInputs,
)

logger = logging.getLogger(__name__)

CalculationInputs = Union[GreenHydrogenInputs, BlueHydrogenInputs, DerivativeInputs]

# Columns of the region comparison table
SUMMARY_COLUMNS = [
    "region", "pathway", "technology", "status", "annual_production", "levelized_cost",
    "total_capex", "annual_opex", "npv", "irr", "payback_period", "carbon_intensity",
    "co2_avoided", "bottleneck",
]


class TEAEngine:
    """
    Core TEA engine shared by the CLI and library callers
    """

    def __init__(self, regional_dataset: Optional[RegionalDataset] = None):
        """
        Initialize TEA engine

        Args:
            regional_dataset: In-memory regional records (DataFrame, list of
                dicts, or mapping of region name to record)
        """
        self.resolver = RegionalResourceResolver(regional_dataset)

    def calculate(self, inputs: CalculationInputs) -> CalculationResult:
        """Resolve the region and run the pathway matching the input type."""
        if isinstance(inputs, GreenHydrogenInputs):
            calculator = calculate_green_hydrogen
        elif isinstance(inputs, BlueHydrogenInputs):
            calculator = calculate_blue_hydrogen
        elif isinstance(inputs, DerivativeInputs):
            calculator = calculate_derivatives
        else:
            raise TypeError(f"Unsupported input bundle: {type(inputs).__name__}")
        return calculator(inputs, self.resolver.resolve(inputs.region))

    def compare_regions(self, inputs: CalculationInputs, regions: Iterable[str]) -> pd.DataFrame:
        """
        Run the same parameter bundle across several regions.

        Returns:
            DataFrame with one row per region (SUMMARY_COLUMNS)
        """
        results = [self.calculate(dataclasses.replace(inputs, region=region)) for region in regions]
        logger.info(f"Compared {len(results)} regions")
        return summarize_results(results)


def summarize_results(results: Iterable[CalculationResult]) -> pd.DataFrame:
    """One SUMMARY_COLUMNS row per already computed result."""
    rows = []
    for result in results:
        data = result.to_dict()
        rows.append({col: data.get(col) for col in SUMMARY_COLUMNS})
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def run_calculation(inputs: CalculationInputs,
                    regional_dataset: Optional[RegionalDataset] = None) -> CalculationResult:
    """Functional entry point: one calculation against an in-memory dataset."""
    return TEAEngine(regional_dataset).calculate(inputs)
