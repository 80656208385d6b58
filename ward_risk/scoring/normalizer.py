"""
Ward Risk Scores - Covariate Normalization
Rescales covariate columns to the 0-1 range with min-max scaling.
"""

import warnings
import pandas as pd
import numpy as np
from typing import Any, Dict, Mapping, Sequence, Union
import logging

from ward_risk.errors import DegenerateNormalizationWarning

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "norm_"


def normalize(values: Union[pd.Series, Sequence[Any]]) -> pd.Series:
    """
    Min-max normalize a numeric column to [0, 1].

    Missing values stay missing. Min and max are taken over the non-missing
    values only. A column with no values, or a constant one, comes back as
    all-NaN; 0/0 is never turned into 0.

    Args:
        values: Series or sequence of numbers, None, NaN or pd.NA

    Returns:
        float64 Series with the input's index and name
    """
    series = values if isinstance(values, pd.Series) else pd.Series(values)
    if series.dtype == object:
        # pd.NA cannot be cast to float directly
        values = np.where(series.isna(), np.nan, series.to_numpy(dtype=object))
        series = pd.Series(values, index=series.index, name=series.name)
    series = series.astype('float64')

    lo = series.min(skipna=True)
    hi = series.max(skipna=True)

    if pd.isna(lo):
        logger.warning(f"Column {series.name!r} has no values to normalize")
        warnings.warn(
            f"Column {series.name!r} is entirely missing; normalized values are all NaN",
            DegenerateNormalizationWarning,
            stacklevel=2,
        )
        return series

    span = hi - lo
    if span == 0:
        logger.warning(f"Column {series.name!r} is constant ({lo}); normalized values are NaN")
        warnings.warn(
            f"Column {series.name!r} has zero variance; normalized values are all NaN",
            DegenerateNormalizationWarning,
            stacklevel=2,
        )
        # 0/0 for every value; build the NaN column directly
        return pd.Series(np.nan, index=series.index, name=series.name)

    return (series - lo) / span


def normalized_name(covariate: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Name of the normalized column for a covariate."""
    return f"{prefix}{covariate}"


def normalize_columns(
    columns: Mapping[str, pd.Series],
    prefix: str = DEFAULT_PREFIX
) -> Dict[str, pd.Series]:
    """
    Normalize each covariate column independently.

    Args:
        columns: covariate name -> numeric column, in covariate order
        prefix: prefix of the generated column names

    Returns:
        Ordered dict of normalized column name -> normalized Series
    """
    normalized = {}
    for covariate, series in columns.items():
        name = normalized_name(covariate, prefix)
        normalized[name] = normalize(series).rename(name)

    logger.info(f"Data normalized ({len(normalized)} covariates)")
    return normalized
