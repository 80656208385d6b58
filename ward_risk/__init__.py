"""Composite malaria risk scores for wards."""

from .errors import (
    CompositeScoreError,
    ConfigurationError,
    CovariateTypeError,
    DegenerateNormalizationWarning,
    MissingColumnError,
    PreconditionError,
)
from .settings import CovariateSelection, load_config, load_selection, parse_flag
from .scoring import compute_composite_scores, enumerate_models, normalize
from .pipeline import CompositeScoreResult, WardRiskPipeline, create_pipeline

__version__ = "0.1.0"

__all__ = [
    "CompositeScoreError",
    "ConfigurationError",
    "CovariateTypeError",
    "DegenerateNormalizationWarning",
    "MissingColumnError",
    "PreconditionError",
    "CovariateSelection",
    "load_config",
    "load_selection",
    "parse_flag",
    "compute_composite_scores",
    "enumerate_models",
    "normalize",
    "CompositeScoreResult",
    "WardRiskPipeline",
    "create_pipeline",
]
