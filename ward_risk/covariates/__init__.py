"""Covariate resolution."""

from .resolver import CovariateResolver, ResolvedCovariates, create_resolver

__all__ = ["CovariateResolver", "ResolvedCovariates", "create_resolver"]
