"""
Regional resource resolver.

Looks a region label up in the in-memory regional dataset and builds a
RegionalResourceProfile, deriving missing fields from related ones and
falling back to documented defaults when neither is available.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

import numpy as np
import pandas as pd

from .config import (
    DEFAULT_HYDRO_POTENTIAL_MW,
    DEFAULT_LAND_AREA_KM2,
    DEFAULT_SOLAR_YIELD_KWH_PER_KWP,
    DEFAULT_WIND_CAPACITY_FACTOR,
    REGION_FIELDS,
    REGION_NAME_FIELDS,
    WATER_SOURCES,
    WIND_CF_INTERCEPT,
    WIND_CF_SLOPE,
)
from .models import RegionalResourceProfile, WaterSource

logger = logging.getLogger(__name__)

RegionalDataset = Union[pd.DataFrame, List[Mapping[str, Any]],
                        Mapping[str, Mapping[str, Any]]]


def _to_dataframe(dataset: Optional[RegionalDataset]) -> pd.DataFrame:
    if dataset is None:
        return pd.DataFrame()
    if isinstance(dataset, pd.DataFrame):
        return dataset.copy()
    if isinstance(dataset, Mapping):
        # region label -> record
        records = []
        for region_name, record in dataset.items():
            row = dict(record)
            row.setdefault("region_name", region_name)
            records.append(row)
        return pd.DataFrame(records)
    return pd.DataFrame(list(dataset))


def _field_value(record: Mapping[str, Any], key) -> Optional[float]:
    """Return the record value as float, or None when absent, NA or non-numeric."""
    keys = key if isinstance(key, tuple) else (key,)
    for k in keys:
        val = record.get(k)
        if val is None or pd.isna(val):
            continue
        try:
            val = float(val)
        except (ValueError, TypeError):
            logger.warning(
                f"Non-numeric value '{val}' for field '{k}'; treating as missing")
            continue
        if np.isfinite(val):
            return val
    return None


def derive_wind_capacity_factor(mean_wind_speed_m_s: float) -> float:
    """Capacity factor from mean wind speed, clamped to [0, 1]."""
    return max(0.0, min(1.0, WIND_CF_SLOPE * mean_wind_speed_m_s + WIND_CF_INTERCEPT))


def default_profile(region_label: str, warning: Optional[str] = None) -> RegionalResourceProfile:
    """Profile used when the region is not present in the dataset."""
    warnings = (warning,) if warning else ()
    return RegionalResourceProfile(
        region=region_label or "Unknown",
        matched=False,
        solar_yield_kwh_per_kwp=DEFAULT_SOLAR_YIELD_KWH_PER_KWP,
        wind_capacity_factor=DEFAULT_WIND_CAPACITY_FACTOR,
        hydro_potential_mw=DEFAULT_HYDRO_POTENTIAL_MW,
        land_area_km2=DEFAULT_LAND_AREA_KM2,
        water_availability={source: None for source in WaterSource},
        defaulted_fields=("solar_yield_kwh_per_kwp", "wind_capacity_factor",
                          "hydro_potential_mw", "land_area_km2",
                          "water_availability"),
        warnings=warnings,
    )


class RegionalResourceResolver:
    """Read-only lookup of regional resource profiles"""

    def __init__(self, dataset: Optional[RegionalDataset] = None):
        """
        Args:
            dataset: Regional records as a DataFrame, a list of dicts, or a
                mapping of region name to record
        """
        self._data = _to_dataframe(dataset)
        logger.debug(
            f"Regional resolver initialised with {len(self._data)} records")

    @property
    def region_names(self) -> List[str]:
        """One label per record, in dataset order, from the first filled name column."""
        name_cols = [col for col in REGION_NAME_FIELDS if col in self._data.columns]
        names = []
        for _, row in self._data[name_cols].iterrows():
            label = next((str(row[col]) for col in name_cols if not pd.isna(row[col])), None)
            if label is not None and label not in names:
                names.append(label)
        return names

    def _find_record(self, region_label: str) -> Optional[Dict[str, Any]]:
        if self._data.empty or not region_label:
            return None
        for col in REGION_NAME_FIELDS:
            if col not in self._data.columns:
                continue
            matches = self._data[self._data[col] == region_label]
            if not matches.empty:
                if len(matches) > 1:
                    logger.warning(
                        f"Region '{region_label}' matched {len(matches)} records on '{col}'; using the first")
                return matches.iloc[0].to_dict()
        return None

    def resolve(self, region_label: str) -> RegionalResourceProfile:
        """
        Resolve a region label into a resource profile.

        Args:
            region_label: English or localized region name (exact match)

        Returns:
            RegionalResourceProfile; defaults with matched=False when unknown
        """
        record = self._find_record(region_label)
        if record is None:
            message = (f"Regional data not available for '{region_label}'; "
                       "using default resource profile")
            logger.warning(f"resource-unknown: {message}")
            return default_profile(region_label, message)

        defaulted: List[str] = []
        warnings: List[str] = []

        # Solar: annual yield, else daily x 365, else default
        solar = _field_value(record, REGION_FIELDS["solar_yield_annual"])
        if solar is None:
            daily = _field_value(record, REGION_FIELDS["solar_yield_daily"])
            if daily is not None:
                solar = daily * 365
                logger.debug(
                    f"{region_label}: solar yield derived from daily value {daily} kWh/kWp/day")
            else:
                solar = DEFAULT_SOLAR_YIELD_KWH_PER_KWP
                defaulted.append("solar_yield_kwh_per_kwp")

        # Wind: stored estimate, else fit on mean wind speed, else default
        wind_cf = _field_value(record, REGION_FIELDS["wind_capacity_factor"])
        if wind_cf is None:
            speed = _field_value(record, REGION_FIELDS["wind_speed"])
            if speed is not None:
                wind_cf = derive_wind_capacity_factor(speed)
                logger.debug(
                    f"{region_label}: wind CF {wind_cf:.3f} derived from {speed} m/s")
            else:
                wind_cf = DEFAULT_WIND_CAPACITY_FACTOR
                defaulted.append("wind_capacity_factor")

        hydro = _field_value(record, REGION_FIELDS["hydro_potential"])
        if hydro is None:
            hydro = DEFAULT_HYDRO_POTENTIAL_MW
            defaulted.append("hydro_potential_mw")

        land = _field_value(record, REGION_FIELDS["land_area"])
        if land is None:
            land = DEFAULT_LAND_AREA_KM2
            defaulted.append("land_area_km2")

        water: Dict[WaterSource, Optional[float]] = {}
        for source in WaterSource:
            volume = _field_value(
                record, WATER_SOURCES[source.value]["dataset_field"])
            water[source] = volume
            if volume is None:
                defaulted.append(f"water_{source.value}")

        if defaulted:
            message = (f"Missing fields for '{region_label}': {', '.join(defaulted)} "
                       "(defaults applied, missing water volumes treated as unconstrained)")
            logger.warning(message)
            warnings.append(message)

        return RegionalResourceProfile(
            region=region_label,
            matched=True,
            solar_yield_kwh_per_kwp=solar,
            wind_capacity_factor=wind_cf,
            hydro_potential_mw=max(hydro, 0.0),
            land_area_km2=max(land, 0.0),
            water_availability=water,
            defaulted_fields=tuple(defaulted),
            warnings=tuple(warnings),
        )


def resolve_region(dataset: Optional[RegionalDataset], region_label: str) -> RegionalResourceProfile:
    """Convenience wrapper around RegionalResourceResolver.resolve."""
    return RegionalResourceResolver(dataset).resolve(region_label)
