"""
Regional resource configuration: dataset field names, fallback defaults,
land-use power densities and water source parameters.
"""

HOURS_IN_YEAR = 8760

# =================================================================
# Regional dataset schema
# =================================================================

# Region label columns, checked in order for an exact match
REGION_NAME_FIELDS = ("region_name_en", "region_name", "name_en", "name")

REGION_FIELDS = {
    "solar_yield_annual": "pvout_kwh_kwp_yr",  # kWh/kWp/yr
    "solar_yield_daily": "pvout_kwh_kwp_day",  # kWh/kWp/day
    "wind_capacity_factor": "wind_cf",  # 0-1
    "wind_speed": ("ws_m_s_10pct", "mean_wind_speed_m_s"),  # m/s
    "wind_power_density": "wpd_w_m2_10pct",  # W/m2 (informational)
    "hydro_potential": "hydro_potential_mw",  # MW
    "land_area": "available_land_km2",  # km2
}

# =================================================================
# Fallback defaults
# =================================================================

DEFAULT_SOLAR_YIELD_KWH_PER_KWP = 1500.0
DEFAULT_WIND_CAPACITY_FACTOR = 0.25
DEFAULT_LAND_AREA_KM2 = 1000.0
DEFAULT_HYDRO_POTENTIAL_MW = 0.0
HYDRO_CAPACITY_FACTOR = 0.45

# Linear fit of capacity factor against mean wind speed
WIND_CF_SLOPE = 0.087
WIND_CF_INTERCEPT = -0.33

# =================================================================
# Land-constrained capacity ceilings
# =================================================================

USABLE_LAND_FRACTION = 0.10
POWER_DENSITY_MW_PER_KM2 = {
    "solar": 35.0,
    "wind": 5.0,
}

# Substituted when a sized capacity resolves to zero or invalid
DEFAULT_INSTALLED_CAPACITY_MW = 100.0
DEFAULT_CUSTOM_CAPACITY_MW = 100.0
FALLBACK_CAPACITY_FACTOR = 0.25

# =================================================================
# Water sources
# =================================================================

WATER_SOURCES = {
    "freshwater": {
        "dataset_field": "freshwater_mln_m3",
        "cost_usd_per_m3": 0.5,
        "treatment_energy_kwh_per_m3": 0.5,
    },
    "brackish": {
        # Reverse osmosis desalination
        "dataset_field": "brackish_water_mln_m3",
        "cost_usd_per_m3": 1.5,
        "treatment_energy_kwh_per_m3": 3.0,
    },
    "treated": {
        "dataset_field": "wastewater_mln_m3",
        "cost_usd_per_m3": 1.0,
        "treatment_energy_kwh_per_m3": 1.5,
    },
    "groundwater": {
        # Pumping plus basic treatment
        "dataset_field": "groundwater_mln_m3",
        "cost_usd_per_m3": 0.8,
        "treatment_energy_kwh_per_m3": 0.8,
    },
}

M3_PER_MILLION_M3 = 1_000_000
