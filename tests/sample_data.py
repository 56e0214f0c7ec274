"""
In-memory regional records shared by the test modules.
"""

import math

import pandas as pd

from h2explorer.resources.regional import RegionalResourceResolver

NAN = math.nan

# Sunland: every field present, no hydro potential, ample water.
#   solar ceiling 0.10 * 1000 km2 * 35 MW/km2 = 3500 MW at 1500 kWh/kWp/yr
# Dryland: daily solar yield and wind speed only, scarce freshwater, no treated water.
#   solar ceiling 0.10 * 500 * 35 = 1750 MW at 4.0 * 365 = 1460 kWh/kWp/yr
# Gusty: wind speed beyond the linear fit range.
SAMPLE_REGIONS = [
    {
        "region_name_en": "Sunland",
        "region_name": "Солнечная",
        "pvout_kwh_kwp_yr": 1500.0,
        "pvout_kwh_kwp_day": NAN,
        "wind_cf": 0.30,
        "ws_m_s_10pct": NAN,
        "hydro_potential_mw": 0.0,
        "available_land_km2": 1000.0,
        "freshwater_mln_m3": 100.0,
        "brackish_water_mln_m3": 10.0,
        "wastewater_mln_m3": 5.0,
        "groundwater_mln_m3": 20.0,
    },
    {
        "region_name_en": "Dryland",
        "region_name": "Сухая",
        "pvout_kwh_kwp_yr": NAN,
        "pvout_kwh_kwp_day": 4.0,
        "wind_cf": NAN,
        "ws_m_s_10pct": 10.0,
        "hydro_potential_mw": 500.0,
        "available_land_km2": 500.0,
        "freshwater_mln_m3": 0.2,
        "brackish_water_mln_m3": NAN,
        "wastewater_mln_m3": 0.0,
        "groundwater_mln_m3": 1.0,
    },
    {
        "region_name_en": "Gusty",
        "region_name": "Ветреная",
        "pvout_kwh_kwp_yr": 1200.0,
        "pvout_kwh_kwp_day": NAN,
        "wind_cf": NAN,
        "ws_m_s_10pct": 20.0,
        "hydro_potential_mw": 50.0,
        "available_land_km2": 2000.0,
        "freshwater_mln_m3": 40.0,
        "brackish_water_mln_m3": 5.0,
        "wastewater_mln_m3": 2.0,
        "groundwater_mln_m3": 8.0,
    },
]


def make_regional_dataframe() -> pd.DataFrame:
    return pd.DataFrame(SAMPLE_REGIONS)


def make_resolver() -> RegionalResourceResolver:
    return RegionalResourceResolver(make_regional_dataframe())
