"""Normalization and composite scoring modules."""

from .normalizer import normalize, normalize_columns
from .aggregator import CompositeScorer, compute_composite_scores, create_scorer, enumerate_models
from .cleanup import clean_merge_suffixes

__all__ = [
    "normalize",
    "normalize_columns",
    "CompositeScorer",
    "compute_composite_scores",
    "create_scorer",
    "enumerate_models",
    "clean_merge_suffixes",
]
