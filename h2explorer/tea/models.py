"""
TEA Data Models
Input bundles, economics records and result structures for the hydrogen
pathway calculators.

Inputs are validated on construction; contract violations raise
InvalidConfigurationError. Result records are flat, with stable field names
and documented units, so presentation code can format them directly.
"""

import math
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple

import numpy as np

from ..resources.models import (
    Bottleneck,
    ProductionLimits,
    RenewableSource,
    SizingMode,
    WaterSource,
)
from ..lca.models import CarbonIntensityResult
from . import config


class InvalidConfigurationError(ValueError):
    """Caller-supplied parameter outside its documented domain"""


class Pathway(Enum):
    GREEN = "green"
    BLUE = "blue"
    DERIVATIVES = "derivatives"


class Procurement(Enum):
    """Renewable electricity procurement for the green pathway"""
    BUY = "buy"  # grid / PPA purchase
    OWN = "own"  # project-owned renewable assets


class HydrogenSource(Enum):
    GREEN = "green"
    BLUE = "blue"


class NitrogenSource(Enum):
    AIR = "air"
    PIPELINE = "pipeline"


class CO2Source(Enum):
    CAPTURED = "captured"
    DAC = "dac"
    BIOGENIC = "biogenic"


class ResultStatus(Enum):
    OK = "ok"
    RESOURCE_UNAVAILABLE = "resource_unavailable"
    DATA_MISSING = "data_missing"
    UNDEFINED_RATIO = "undefined_ratio"


class CostCategory(Enum):
    FIXED_OM = "fixed_om"
    VARIABLE_OM = "variable_om"
    ENERGY = "energy"
    WATER = "water"


def _coerce_enum(enum_cls, value, field_name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidConfigurationError(
            f"Unrecognised {field_name} '{value}' (expected one of: {allowed})") from None


def _lookup_key(table: Dict[str, Any], value: str, field_name: str) -> str:
    """Case-insensitive lookup of a technology/product key"""
    for key in table:
        if key.lower() == str(value).strip().lower():
            return key
    raise InvalidConfigurationError(
        f"Unknown {field_name} '{value}' (expected one of: {', '.join(table)})")


def _require_finite(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(
            f"{field_name} must be numeric, got '{value}'") from None
    if not math.isfinite(number):
        raise InvalidConfigurationError(f"{field_name} must be finite, got {value}")
    return number


def _require_non_negative(value, field_name: str) -> float:
    number = _require_finite(value, field_name)
    if number < 0:
        raise InvalidConfigurationError(f"{field_name} must be non-negative, got {value}")
    return number


def _require_fraction(value, field_name: str) -> float:
    number = _require_finite(value, field_name)
    if number < 0 or number > 1:
        raise InvalidConfigurationError(f"{field_name} must be between 0 and 1, got {value}")
    return number


@dataclass(frozen=True)
class EconomicAssumptions:
    """Financial assumptions shared by all pathways"""

    discount_rate: float = config.DISCOUNT_RATE  # fraction
    project_lifetime_years: int = config.PROJECT_LIFETIME_YEARS
    # $/kg H2 for hydrogen pathways, $/t for derivatives; None = pathway default
    selling_price: Optional[float] = None
    capex_adjustment: float = config.CAPEX_ADJUSTMENT  # fraction
    opex_adjustment: float = config.OPEX_ADJUSTMENT  # fraction

    def __post_init__(self):
        """Validate parameters after initialization"""
        object.__setattr__(self, "discount_rate",
                           _require_fraction(self.discount_rate, "Discount rate"))

        lifetime = _require_finite(self.project_lifetime_years, "Project lifetime")
        if lifetime != int(lifetime):
            raise InvalidConfigurationError(
                f"Project lifetime must be a whole number of years, got {self.project_lifetime_years}")
        if not config.MIN_PROJECT_LIFETIME_YEARS <= lifetime <= config.MAX_PROJECT_LIFETIME_YEARS:
            raise InvalidConfigurationError(
                f"Project lifetime must be between {config.MIN_PROJECT_LIFETIME_YEARS} and "
                f"{config.MAX_PROJECT_LIFETIME_YEARS} years, got {self.project_lifetime_years}")
        object.__setattr__(self, "project_lifetime_years", int(lifetime))

        if self.selling_price is not None:
            object.__setattr__(self, "selling_price",
                               _require_non_negative(self.selling_price, "Selling price"))

        for name in ("capex_adjustment", "opex_adjustment"):
            value = _require_finite(getattr(self, name), name)
            if value <= -1:
                raise InvalidConfigurationError(
                    f"{name} must be greater than -100%, got {value * 100:.0f}%")
            object.__setattr__(self, name, value)


@dataclass(frozen=True)
class GreenHydrogenInputs:
    """Parameter bundle for electrolytic hydrogen from renewables"""

    region: str
    electrolyzer: str = "PEM"
    renewable_source: RenewableSource = RenewableSource.SOLAR
    water_source: WaterSource = WaterSource.FRESHWATER
    sizing_mode: SizingMode = SizingMode.MAXIMUM_POTENTIAL
    custom_capacity_mw: Optional[float] = None
    procurement: Procurement = Procurement.BUY
    # Overrides of the constant tables; None = table value
    electricity_price_usd_per_kwh: Optional[float] = None
    res_capex_usd_per_mw: Optional[float] = None
    res_fixed_om_fraction: float = config.RES_FIXED_OM_FRACTION
    economics: EconomicAssumptions = field(default_factory=EconomicAssumptions)

    def __post_init__(self):
        object.__setattr__(self, "electrolyzer",
                           _lookup_key(config.ELECTROLYZERS, self.electrolyzer, "electrolyzer type"))
        object.__setattr__(self, "renewable_source",
                           _coerce_enum(RenewableSource, self.renewable_source, "renewable source"))
        object.__setattr__(self, "water_source",
                           _coerce_enum(WaterSource, self.water_source, "water source"))
        object.__setattr__(self, "sizing_mode",
                           _coerce_enum(SizingMode, self.sizing_mode, "sizing mode"))
        object.__setattr__(self, "procurement",
                           _coerce_enum(Procurement, self.procurement, "procurement mode"))
        # Non-positive custom capacity is recovered later with the 100 MW default
        if self.custom_capacity_mw is not None:
            object.__setattr__(self, "custom_capacity_mw",
                               _require_finite(self.custom_capacity_mw, "Custom capacity"))
        for name in ("electricity_price_usd_per_kwh", "res_capex_usd_per_mw"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, _require_non_negative(value, name))
        object.__setattr__(self, "res_fixed_om_fraction",
                           _require_fraction(self.res_fixed_om_fraction, "RES fixed O&M fraction"))

    @property
    def electrolyzer_spec(self) -> config.ElectrolyzerSpec:
        return config.ELECTROLYZERS[self.electrolyzer]

    @property
    def electricity_price(self) -> float:
        """Purchased electricity price for the chosen source ($/kWh)"""
        if self.electricity_price_usd_per_kwh is not None:
            return self.electricity_price_usd_per_kwh
        return config.ELECTRICITY_PRICE_USD_PER_KWH[self.renewable_source.value]

    @property
    def res_capex_per_mw(self) -> float:
        if self.res_capex_usd_per_mw is not None:
            return self.res_capex_usd_per_mw
        return config.RES_CAPEX_USD_PER_MW[self.renewable_source.value]


@dataclass(frozen=True)
class BlueHydrogenInputs:
    """Parameter bundle for reforming with carbon capture"""

    region: str
    technology: str = "SMR"
    plant_capacity_mw: float = config.DEFAULT_BLUE_PLANT_CAPACITY_MW  # H2 output
    capture_rate: float = config.DEFAULT_CAPTURE_RATE  # fraction
    water_source: WaterSource = WaterSource.FRESHWATER
    gas_price_usd_per_mmbtu: float = config.NATURAL_GAS_PRICE_USD_PER_MMBTU
    co2_price_usd_per_t: float = config.CO2_PRICE_USD_PER_T
    ccs_credit_fraction: float = config.CCS["credit_fraction"]
    co2_transport_distance_km: float = config.CO2_TRANSPORT_DISTANCE_KM
    auxiliary_electricity_price_usd_per_mwh: float = config.AUXILIARY_ELECTRICITY_PRICE_USD_PER_MWH
    economics: EconomicAssumptions = field(default_factory=EconomicAssumptions)

    def __post_init__(self):
        object.__setattr__(self, "technology",
                           _lookup_key(config.REFORMING_TECHNOLOGIES, self.technology, "reforming technology"))
        capacity = _require_finite(self.plant_capacity_mw, "Plant capacity")
        if capacity <= 0:
            raise InvalidConfigurationError(
                f"Plant capacity must be positive, got {self.plant_capacity_mw} MW")
        object.__setattr__(self, "plant_capacity_mw", capacity)
        object.__setattr__(self, "capture_rate",
                           _require_fraction(self.capture_rate, "Capture rate"))
        object.__setattr__(self, "water_source",
                           _coerce_enum(WaterSource, self.water_source, "water source"))
        object.__setattr__(self, "ccs_credit_fraction",
                           _require_fraction(self.ccs_credit_fraction, "CCS credit fraction"))
        for name in ("gas_price_usd_per_mmbtu", "co2_price_usd_per_t",
                     "co2_transport_distance_km", "auxiliary_electricity_price_usd_per_mwh"):
            object.__setattr__(self, name, _require_non_negative(getattr(self, name), name))

    @property
    def technology_spec(self) -> config.ReformingTechSpec:
        return config.REFORMING_TECHNOLOGIES[self.technology]


@dataclass(frozen=True)
class DerivativeInputs:
    """Parameter bundle for ammonia, methanol and e-fuel synthesis"""

    region: str
    product: str = "ammonia"
    plant_capacity_ktpa: float = config.DEFAULT_DERIVATIVE_CAPACITY_KTPA  # kt product/yr
    hydrogen_source: HydrogenSource = HydrogenSource.GREEN
    nitrogen_source: NitrogenSource = NitrogenSource.AIR
    co2_source: CO2Source = CO2Source.CAPTURED
    water_source: WaterSource = WaterSource.FRESHWATER
    process_efficiency: Optional[float] = None  # None = product default
    h2_price_usd_per_kg: float = config.H2_INPUT_PRICE_USD_PER_KG
    electricity_price_usd_per_mwh: float = config.DERIVATIVE_ELECTRICITY_PRICE_USD_PER_MWH
    economics: EconomicAssumptions = field(default_factory=EconomicAssumptions)

    def __post_init__(self):
        object.__setattr__(self, "product",
                           _lookup_key(config.DERIVATIVE_PRODUCTS, self.product, "derivative product"))
        capacity = _require_finite(self.plant_capacity_ktpa, "Plant capacity")
        if capacity <= 0:
            raise InvalidConfigurationError(
                f"Plant capacity must be positive, got {self.plant_capacity_ktpa} kt/yr")
        object.__setattr__(self, "plant_capacity_ktpa", capacity)
        object.__setattr__(self, "hydrogen_source",
                           _coerce_enum(HydrogenSource, self.hydrogen_source, "hydrogen source"))
        object.__setattr__(self, "nitrogen_source",
                           _coerce_enum(NitrogenSource, self.nitrogen_source, "nitrogen source"))
        object.__setattr__(self, "co2_source",
                           _coerce_enum(CO2Source, self.co2_source, "CO2 source"))
        object.__setattr__(self, "water_source",
                           _coerce_enum(WaterSource, self.water_source, "water source"))
        if self.process_efficiency is not None:
            efficiency = _require_finite(self.process_efficiency, "Process efficiency")
            if efficiency <= 0 or efficiency > 1:
                raise InvalidConfigurationError(
                    f"Process efficiency must be in (0, 1], got {self.process_efficiency}")
            object.__setattr__(self, "process_efficiency", efficiency)
        for name in ("h2_price_usd_per_kg", "electricity_price_usd_per_mwh"):
            object.__setattr__(self, name, _require_non_negative(getattr(self, name), name))

    @property
    def product_spec(self) -> config.DerivativeProductSpec:
        return config.DERIVATIVE_PRODUCTS[self.product]

    @property
    def effective_process_efficiency(self) -> float:
        if self.process_efficiency is not None:
            return self.process_efficiency
        return self.product_spec.efficiency


# =================================================================
# Economics
# =================================================================


@dataclass(frozen=True)
class CostComponent:
    """One annual operating cost line"""
    name: str
    category: CostCategory
    annual_cost: float  # $/yr


@dataclass(frozen=True)
class EconomicsResult:
    """Capital, operating and levelized cost figures (all money in $)"""

    capex_breakdown: Dict[str, float]
    total_capex: float
    crf: float
    scale_factor: float
    annualized_capex: float

    num_replacements: int
    replacement_cost: float  # lifetime total
    annualized_replacement: float

    fixed_om: float
    variable_om: float
    energy_cost: float
    water_cost: float
    opex_components: Dict[str, float]  # $/yr by line item
    annual_opex: float
    total_annualized_cost: float

    annual_output: float  # kg H2 or t product
    levelized_cost: float  # NaN when annual_output <= 0
    levelized_breakdown: Dict[str, float]
    breakdown_percentages: Dict[str, float]
    sensitivity: Dict[str, Dict[str, Dict[str, float]]]

    annual_revenue: float
    cash_flows: np.ndarray = field(repr=False, compare=False)
    npv: float
    irr: float  # %, NaN when undefined
    payback_period: float  # years, inf when never recovered

    @property
    def annual_net_cash_flow(self) -> float:
        return self.annual_revenue - self.annual_opex


# =================================================================
# Results
# =================================================================

_DETAIL_FIELDS = ("economics", "limits", "carbon")


def _json_number(value):
    if isinstance(value, (float, np.floating)):
        value = float(value)
        if math.isnan(value):
            return None
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
    return value


def _json_value(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(k.value if isinstance(k, Enum) else k): _json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_value(v) for v in value]
    if isinstance(value, np.ndarray):
        return [_json_number(v) for v in value.tolist()]
    return _json_number(value)


@dataclass(frozen=True)
class CalculationResult:
    """
    Flat result record shared by all pathways.

    Units: annual_production t/yr, daily_production t/day, levelized_cost
    $/kg H2 (derivatives: $/t product), money in M$ (annual figures M$/yr),
    irr %, payback_period years, carbon_intensity kg CO2 per kg H2
    (derivatives: per t product), annual_co2_emissions and co2_avoided
    t CO2/yr, annual_energy_use MWh/yr, annual_water_use m3/yr.
    """

    pathway: Pathway
    region: str
    technology: str
    status: ResultStatus

    annual_production: float
    daily_production: float
    power_limited_production: float
    water_limited_production: float  # inf when water is unconstrained
    bottleneck: Bottleneck

    levelized_cost: float
    total_capex: float
    annualized_capex: float
    annual_opex: float
    annual_revenue: float
    npv: float
    irr: float
    payback_period: float
    cost_breakdown: Dict[str, float]
    cost_breakdown_percent: Dict[str, float]

    carbon_intensity: float
    annual_co2_emissions: float
    co2_avoided: float
    emissions_by_stage: Dict[str, float]

    annual_energy_use: float
    annual_water_use: float

    notes: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    economics: Optional[EconomicsResult] = field(default=None, repr=False, compare=False)
    limits: Optional[ProductionLimits] = field(default=None, repr=False, compare=False)
    carbon: Optional[CarbonIntensityResult] = field(default=None, repr=False, compare=False)

    @property
    def is_degenerate(self) -> bool:
        return not self.annual_production > 0

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly flat dict; NaN becomes None, infinities become strings."""
        data = {}
        for f in fields(self):
            if f.name in _DETAIL_FIELDS:
                continue
            data[f.name] = _json_value(getattr(self, f.name))
        if self.economics is not None:
            data["cash_flows"] = _json_value(self.economics.cash_flows)
            data["sensitivity"] = _json_value(self.economics.sensitivity)
        return data


@dataclass(frozen=True)
class GreenHydrogenResult(CalculationResult):
    renewable_source: str = ""
    water_source: str = ""
    sizing_mode: str = ""
    procurement: str = ""
    installed_capacity_mw: float = 0.0
    effective_capacity_mw: float = 0.0
    electrolyzer_capacity_mw: float = 0.0
    capacity_factor: float = 0.0
    specific_energy: float = 0.0  # kWh/kg
    system_efficiency: float = math.nan  # %, HHV basis
    water_consumption: float = 0.0  # L/kg
    electricity_cost: float = 0.0  # M$/yr
    renewable_capex: float = 0.0  # M$
    capacity_defaulted: bool = False
    resource_available: bool = True

    @property
    def lcoh(self) -> float:
        return self.levelized_cost

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["lcoh"] = _json_number(self.lcoh)
        return data


@dataclass(frozen=True)
class BlueHydrogenResult(CalculationResult):
    plant_capacity_mw: float = 0.0
    capture_rate: float = 0.0  # fraction
    efficiency: float = 0.0  # %
    steam_carbon_ratio: float = 0.0
    water_source: str = ""
    gas_consumption_mmbtu: float = 0.0  # MMBtu/yr
    gas_consumption_bcm: float = 0.0  # BCM/yr
    specific_gas_consumption: float = 0.0  # MMBtu/kg
    co2_generated: float = 0.0  # t/yr
    co2_captured: float = 0.0
    co2_emitted: float = 0.0

    @property
    def lcoh(self) -> float:
        return self.levelized_cost

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["lcoh"] = _json_number(self.lcoh)
        return data


@dataclass(frozen=True)
class DerivativeResult(CalculationResult):
    product: str = ""
    hydrogen_source: str = ""
    plant_capacity_ktpa: float = 0.0
    process_efficiency: float = 0.0  # fraction
    h2_consumption: float = 0.0  # t H2/yr
    h2_intensity: float = 0.0  # t H2/t product
    feedstock_type: str = ""  # "nitrogen", "co2" or ""
    feedstock_source: str = ""
    feedstock_required: float = 0.0  # t/yr
    specific_energy: float = 0.0  # MWh/t
    production_cost: float = math.nan  # $/t, OPEX only
    total_product_cost: float = math.nan  # $/t incl. annualized CAPEX
    market_price: float = 0.0  # $/t
    gross_margin: float = math.nan  # %
    competitiveness: float = math.nan  # %
