"""
Global configuration variables, constants, and technology parameter tables for the TEA module.
"""

from dataclasses import dataclass
from pathlib import Path

# Base file paths
SCRIPT_DIR_PATH = Path(__file__).resolve().parent
PROJECT_ROOT = SCRIPT_DIR_PATH.parent.parent
BASE_OUTPUT_DIR_DEFAULT = PROJECT_ROOT / "output" / "tea"
BASE_INPUT_DIR_DEFAULT = PROJECT_ROOT / "input"
LOG_DIR = PROJECT_ROOT / "output" / "logs"

# TEA Parameters
PROJECT_LIFETIME_YEARS = 20
DISCOUNT_RATE = 0.08
HOURS_IN_YEAR = 8760
DAYS_IN_YEAR = 365

MIN_PROJECT_LIFETIME_YEARS = 1
MAX_PROJECT_LIFETIME_YEARS = 100

H2_SELLING_PRICE_USD_PER_KG = 7.00
CAPEX_ADJUSTMENT = 0.0  # fraction, +0.10 = +10 %
OPEX_ADJUSTMENT = 0.0

# Hydrogen energy content (HHV basis), kWh/kg
H2_ENERGY_CONTENT_KWH_PER_KG = 33.33

# Economies of scale: (capacity / reference) ** exponent, clamped
SCALE_REFERENCE_CAPACITY = 100.0  # MW for hydrogen plants, kt/yr for derivatives
SCALE_EXPONENT = -0.1
SCALE_FACTOR_MIN = 0.6
SCALE_FACTOR_MAX = 1.1

# IRR Newton-Raphson termination
IRR_MAX_ITERATIONS = 100
IRR_NPV_TOLERANCE = 0.01
IRR_INITIAL_GUESS = 0.10

SENSITIVITY_RANGE = 0.20
SENSITIVITY_TOP_COMPONENTS = 5

# =================================================================
# Technology records
# =================================================================


@dataclass(frozen=True)
class ElectrolyzerSpec:
    """Electrolyzer technology record"""
    name: str
    specific_energy_kwh_per_kg: float
    efficiency: float
    capex_usd_per_kw: float
    fixed_om_fraction: float  # of CAPEX per year
    variable_om_usd_per_mwh: float
    replacement_interval_years: int
    replacement_fraction: float  # of electrolyzer CAPEX per replacement
    water_l_per_kg: float


@dataclass(frozen=True)
class ReformingTechSpec:
    """Natural gas reforming technology record"""
    name: str
    efficiency: float
    capex_usd_per_kw: float  # per kW H2 output
    fixed_om_fraction: float
    gas_mmbtu_per_kg: float  # natural gas per kg H2 before the capture penalty
    co2_kg_per_kg: float  # generated before capture
    steam_carbon_ratio: float
    water_l_per_kg: float
    replacement_interval_years: int  # catalyst
    replacement_fraction: float


@dataclass(frozen=True)
class DerivativeProductSpec:
    """Hydrogen derivative product record"""
    name: str
    h2_t_per_t: float
    energy_mwh_per_t: float
    capex_usd_per_tpy: float  # per t/yr of capacity
    fixed_om_fraction: float
    efficiency: float
    n2_t_per_t: float
    co2_t_per_t: float
    market_price_usd_per_t: float
    water_m3_per_t: float
    process_emissions_t_per_t: float  # negative when CO2 is consumed
    replacement_interval_years: int
    replacement_fraction: float

    @property
    def energy_kwh_per_t(self) -> float:
        return self.energy_mwh_per_t * 1000


ELECTROLYZERS = {
    "PEM": ElectrolyzerSpec(
        name="PEM",
        specific_energy_kwh_per_kg=52.0,
        efficiency=0.70,
        capex_usd_per_kw=1200.0,
        fixed_om_fraction=0.03,
        variable_om_usd_per_mwh=1.5,
        replacement_interval_years=10,
        replacement_fraction=0.40,
        water_l_per_kg=9.0,
    ),
    "Alkaline": ElectrolyzerSpec(
        name="Alkaline",
        specific_energy_kwh_per_kg=52.0,
        efficiency=0.65,
        capex_usd_per_kw=1000.0,
        fixed_om_fraction=0.025,
        variable_om_usd_per_mwh=1.0,
        replacement_interval_years=10,
        replacement_fraction=0.35,
        water_l_per_kg=9.0,
    ),
    "SOEC": ElectrolyzerSpec(
        name="SOEC",
        specific_energy_kwh_per_kg=45.0,
        efficiency=0.85,
        capex_usd_per_kw=1500.0,
        fixed_om_fraction=0.04,
        variable_om_usd_per_mwh=2.0,
        replacement_interval_years=5,
        replacement_fraction=0.45,
        water_l_per_kg=9.0,
    ),
}

REFORMING_TECHNOLOGIES = {
    "SMR": ReformingTechSpec(
        name="SMR",
        efficiency=0.76,
        capex_usd_per_kw=800.0,
        fixed_om_fraction=0.04,
        gas_mmbtu_per_kg=0.160,  # 33.33 kWh/kg HHV / 0.76 is 0.15 MMBtu, plus firing losses
        co2_kg_per_kg=9.0,
        steam_carbon_ratio=3.0,
        water_l_per_kg=4.5,
        replacement_interval_years=5,
        replacement_fraction=0.03,
    ),
    "ATR": ReformingTechSpec(
        name="ATR",
        efficiency=0.78,
        capex_usd_per_kw=900.0,
        fixed_om_fraction=0.045,
        gas_mmbtu_per_kg=0.155,
        co2_kg_per_kg=8.5,
        steam_carbon_ratio=2.5,
        water_l_per_kg=5.0,
        replacement_interval_years=5,
        replacement_fraction=0.03,
    ),
    "POX": ReformingTechSpec(
        name="POX",
        efficiency=0.72,
        capex_usd_per_kw=750.0,
        fixed_om_fraction=0.035,
        gas_mmbtu_per_kg=0.175,
        co2_kg_per_kg=10.0,
        steam_carbon_ratio=0.0,  # No steam required
        water_l_per_kg=3.0,
        replacement_interval_years=5,
        replacement_fraction=0.03,
    ),
}

DERIVATIVE_PRODUCTS = {
    "ammonia": DerivativeProductSpec(
        name="ammonia",
        h2_t_per_t=0.178,
        energy_mwh_per_t=8.5,
        capex_usd_per_tpy=1000.0,
        fixed_om_fraction=0.05,
        efficiency=0.85,
        n2_t_per_t=0.822,
        co2_t_per_t=0.0,
        market_price_usd_per_t=500.0,
        water_m3_per_t=1.0,
        process_emissions_t_per_t=0.1,
        replacement_interval_years=5,
        replacement_fraction=0.02,
    ),
    "methanol": DerivativeProductSpec(
        name="methanol",
        h2_t_per_t=0.189,
        energy_mwh_per_t=10.2,
        capex_usd_per_tpy=800.0,
        fixed_om_fraction=0.06,
        efficiency=0.83,
        n2_t_per_t=0.0,
        co2_t_per_t=1.375,
        market_price_usd_per_t=400.0,
        water_m3_per_t=1.5,
        process_emissions_t_per_t=-1.375,
        replacement_interval_years=5,
        replacement_fraction=0.02,
    ),
    "e-fuels": DerivativeProductSpec(
        name="e-fuels",
        h2_t_per_t=0.25,
        energy_mwh_per_t=15.0,
        capex_usd_per_tpy=1500.0,
        fixed_om_fraction=0.07,
        efficiency=0.60,
        n2_t_per_t=0.0,
        co2_t_per_t=3.67,
        market_price_usd_per_t=1200.0,
        water_m3_per_t=2.0,
        process_emissions_t_per_t=-3.67,
        replacement_interval_years=5,
        replacement_fraction=0.02,
    ),
}

# =================================================================
# Green hydrogen: renewable electricity procurement
# =================================================================

# Purchased (grid/PPA) electricity by source, $/kWh
ELECTRICITY_PRICE_USD_PER_KWH = {
    "solar": 0.045,
    "wind": 0.040,
    "hydro": 0.050,
}

# Project-owned renewable assets, $/MW installed
RES_CAPEX_USD_PER_MW = {
    "solar": 900_000,
    "wind": 1_300_000,
    "hydro": 2_500_000,
}
RES_FIXED_OM_FRACTION = 0.02

# =================================================================
# Blue hydrogen
# =================================================================

BLUE_PLANT_AVAILABILITY = 0.90
DEFAULT_BLUE_PLANT_CAPACITY_MW = 100.0
DEFAULT_CAPTURE_RATE = 0.90
NATURAL_GAS_PRICE_USD_PER_MMBTU = 3.0
CO2_PRICE_USD_PER_T = 50.0
CO2_TRANSPORT_DISTANCE_KM = 50.0
MMBTU_TO_BCM = 0.0283168 / 1000  # reported gas volume, BCM per MMBtu
MWH_PER_MMBTU = 0.293071
AUXILIARY_ELECTRICITY_PRICE_USD_PER_MWH = 50.0

CCS = {
    "capex_usd_per_tpy": 200.0,  # per t CO2/yr of capture capacity, applied to annual captured tonnes
    "opex_usd_per_t": 20.0,
    "transport_usd_per_t_km": 0.1,
    "energy_penalty": 0.10,  # extra gas at full capture
    "credit_fraction": 0.5,  # share of CO2 price credited per captured tonne
}

# =================================================================
# Derivatives
# =================================================================

DEFAULT_DERIVATIVE_CAPACITY_KTPA = 100.0
H2_INPUT_PRICE_USD_PER_KG = 3.0
DERIVATIVE_ELECTRICITY_PRICE_USD_PER_MWH = 50.0

FEEDSTOCK_PRICES_USD_PER_T = {
    "nitrogen": {
        "air": 50.0,  # Air separation unit
        "pipeline": 30.0,
    },
    "co2": {
        "captured": 50.0,
        "dac": 600.0,  # Direct air capture
        "biogenic": 100.0,
    },
}
