"""
Ward Risk Scores - Error Taxonomy
Exceptions and warnings raised while resolving covariates and scoring wards.
"""

from typing import List, Optional


class CompositeScoreError(Exception):
    """Base class for composite scoring failures."""


class ConfigurationError(CompositeScoreError):
    """Configuration file missing/malformed or run options inconsistent."""


class PreconditionError(CompositeScoreError, ValueError):
    """Fewer than two usable covariates were supplied."""

    def __init__(self, covariates: List[str], minimum: int = 2):
        self.covariates = list(covariates)
        self.count = len(self.covariates)
        self.minimum = minimum
        super().__init__(
            f"At least {minimum} valid covariates are required for composite "
            f"score calculation, got {self.count}: {self.covariates}"
        )


class MissingColumnError(CompositeScoreError, KeyError):
    """A requested covariate column is absent from the ward table."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(column)

    def __str__(self) -> str:
        return f"Covariate column not found in ward table: '{self.column}'"


class CovariateTypeError(CompositeScoreError, TypeError):
    """A covariate column cannot be normalized because it is not numeric."""

    def __init__(self, column: str, dtype: Optional[str] = None):
        self.column = column
        self.dtype = dtype
        super().__init__(
            f"Covariate column '{column}' has non-numeric dtype {dtype}; "
            f"encode it numerically before scoring"
        )


class DegenerateNormalizationWarning(UserWarning):
    """Covariate has zero variance (or no values) and normalizes to all-NaN."""
