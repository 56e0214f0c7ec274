"""
Hydrogen LCA Data Models
"""

import math
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class CarbonIntensityResult:
    """Per-unit carbon intensity and annual totals"""

    total: float  # kg CO2 per output unit, NaN when output is zero
    by_stage: Dict[str, float] = field(default_factory=dict)
    benchmark: float = math.nan  # kg CO2 per output unit
    annual_emissions_t: float = 0.0  # t CO2/yr
    co2_avoided_t: float = 0.0  # t CO2/yr versus benchmark
    unit: str = "kg CO2/kg H2"

    @property
    def is_defined(self) -> bool:
        return math.isfinite(self.total)

    @property
    def reduction_vs_benchmark_percent(self) -> float:
        if not self.is_defined or not self.benchmark:
            return math.nan
        return (self.benchmark - self.total) / self.benchmark * 100
