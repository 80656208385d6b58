"""
Ward Risk Scores - Ward Table
Schema-aware view over an extracted ward DataFrame.
"""

import pandas as pd
from enum import Enum
from typing import Dict, List, Iterable
import logging

from pandas.api.types import is_bool_dtype, is_numeric_dtype

from ward_risk.errors import CovariateTypeError, MissingColumnError

logger = logging.getLogger(__name__)


class ColumnKind(Enum):
    """Kind of a ward table column."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


class WardTable:
    """
    Wraps a ward DataFrame and resolves covariate names to typed columns.

    The wrapped frame is copied on construction so later changes by the
    caller cannot leak into scoring.
    """

    def __init__(self, data: pd.DataFrame):
        if not isinstance(data, pd.DataFrame):
            raise TypeError(f"Expected a pandas DataFrame, got {type(data).__name__}")

        self.data = data.copy()
        self.kinds: Dict[str, ColumnKind] = {
            column: self._infer_kind(self.data[column]) for column in self.data.columns
        }

    @staticmethod
    def _infer_kind(series: pd.Series) -> ColumnKind:
        if is_numeric_dtype(series) or is_bool_dtype(series):
            return ColumnKind.NUMERIC
        return ColumnKind.CATEGORICAL

    @property
    def columns(self) -> List[str]:
        return list(self.data.columns)

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, column: str) -> bool:
        return column in self.kinds

    def numeric_columns(self) -> List[str]:
        """Names of columns usable as covariates."""
        return [c for c, kind in self.kinds.items() if kind is ColumnKind.NUMERIC]

    def numeric_column(self, name: str) -> pd.Series:
        """
        Get a covariate column as float64.

        Raises:
            MissingColumnError: column not in the table
            CovariateTypeError: column is not numeric
        """
        if name not in self.kinds:
            raise MissingColumnError(name)

        if self.kinds[name] is not ColumnKind.NUMERIC:
            raise CovariateTypeError(name, str(self.data[name].dtype))

        # Nullable integer/boolean dtypes carry pd.NA; float64 turns it into NaN
        return self.data[name].astype('float64')

    def resolve(self, names: Iterable[str]) -> Dict[str, pd.Series]:
        """Resolve every name to a numeric column, failing on the first bad one."""
        return {name: self.numeric_column(name) for name in names}
