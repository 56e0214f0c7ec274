"""
Data loading functions for regional resource data and calculation parameters.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import pandas as pd

from .config import REGION_NAME_FIELDS

logger = logging.getLogger(__name__)


def get_param_value(params_dict, key, default_val, type_converter, param_logger=logger):
    val = params_dict.get(key)
    if val is None or pd.isna(val):
        param_logger.info(
            f"Parameter '{key}' is None or NA (likely missing or empty in CSV). Using default: {default_val}"
        )
        return default_val
    try:
        return type_converter(val)
    except (ValueError, TypeError):
        param_logger.warning(
            f"Invalid value '{val}' for '{key}' in parameter file. Using default: {default_val}"
        )
        return default_val


def load_regional_dataset(file_path: Union[str, Path]) -> pd.DataFrame:
    """
    Load the regional resource table.

    Args:
        file_path: CSV with one row per region and named numeric fields

    Returns:
        DataFrame of regional records; empty when the file is missing
    """
    file_path = Path(file_path)
    if not file_path.exists():
        logger.warning(
            f"Regional dataset not found at {file_path}. All regions will resolve to defaults.")
        return pd.DataFrame()

    df = pd.read_csv(file_path)
    name_cols = [c for c in REGION_NAME_FIELDS if c in df.columns]
    if not name_cols:
        logger.warning(
            f"Regional dataset {file_path} has none of the name columns {REGION_NAME_FIELDS}")
    for col in name_cols:
        df[col] = df[col].astype("string").str.strip()

    logger.info(f"Loaded {len(df)} regional records from {file_path}")
    return df


def load_calculation_params(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a two-column Parameter,Value CSV into a dict.

    Duplicate parameters keep their first value. A missing file yields an
    empty dict so callers fall back to defaults.
    """
    params: Dict[str, Any] = {}
    file_path = Path(file_path)
    if not file_path.exists():
        logger.warning(
            f"Parameter file not found at {file_path}. Using defaults for all parameters.")
        return params

    df_params = pd.read_csv(file_path, index_col=0)
    if "Value" not in df_params.columns:
        logger.error(
            f"Parameter file {file_path} has no 'Value' column; columns: {list(df_params.columns)}")
        return params

    for key in df_params.index.unique():
        value_series = df_params.loc[key, "Value"]
        params[str(key).strip()] = (
            value_series.iloc[0]
            if isinstance(value_series, pd.Series)
            else value_series
        )
    logger.info(f"Loaded {len(params)} parameters from {file_path}")
    return params
