"""
Ward Risk Scores - Composite Score Engine
Combines normalized covariates into one composite score column per covariate subset.
"""

import pandas as pd
import numpy as np
from itertools import combinations
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union
import logging

from ward_risk.data.table import WardTable
from ward_risk.errors import PreconditionError
from ward_risk.scoring.cleanup import clean_merge_suffixes
from ward_risk.scoring.normalizer import normalize_columns, normalized_name
from ward_risk.settings import load_config

logger = logging.getLogger(__name__)

MIN_COVARIATES = 2


def enumerate_models(
    covariates: Sequence[str],
    model_prefix: str = "model_"
) -> Dict[str, Tuple[str, ...]]:
    """
    Enumerate every covariate subset of size 2..N and name it.

    Subsets are ordered by size, then in combination order over the given
    covariate order, so for [A, B, C]:
    model_1=(A, B), model_2=(A, C), model_3=(B, C), model_4=(A, B, C).

    Returns:
        Ordered dict of model column name -> covariates in that model
    """
    models = {}
    model_id = 0
    for size in range(MIN_COVARIATES, len(covariates) + 1):
        for subset in combinations(covariates, size):
            model_id += 1
            models[f"{model_prefix}{model_id}"] = subset
    return models


def composite_score(normalized: Sequence[pd.Series]) -> pd.Series:
    """Row-wise mean of normalized columns; any missing input gives a missing score."""
    values = np.column_stack([s.to_numpy(dtype='float64') for s in normalized])
    # Plain sum propagates NaN, unlike nanmean
    return pd.Series(values.sum(axis=1) / len(normalized), index=normalized[0].index)


class CompositeScorer:
    """Builds composite risk scores for every combination of covariates."""

    def __init__(self, config: Optional[Dict] = None, config_path: Optional[Path] = None):
        if config is None:
            config = load_config(config_path)

        self.config = config
        self.normalized_prefix = config['naming']['normalized_prefix']
        self.model_prefix = config['naming']['model_prefix']
        self.keep_suffix = config['merge_suffixes']['keep']
        self.drop_suffix = config['merge_suffixes']['drop']

    def select_covariates(
        self,
        table: WardTable,
        covariates: Iterable[str],
        extra_covariates: Iterable[str] = ()
    ) -> List[str]:
        """
        Keep the covariates present in the table, then append the extras.

        Extras (settlement type, prevalence column) are not checked here; a
        missing one fails when its column is resolved.

        Raises:
            PreconditionError: fewer than two covariates remain
        """
        selected = [c for c in covariates if c in table]
        selected.extend(extra_covariates)
        selected = list(dict.fromkeys(selected))

        if len(selected) < MIN_COVARIATES:
            raise PreconditionError(selected, MIN_COVARIATES)

        logger.info(f"Covariate check passed ({len(selected)} covariates: {', '.join(selected)})")
        return selected

    def compute_composite_scores(
        self,
        table: Union[pd.DataFrame, WardTable],
        covariates: Iterable[str],
        extra_covariates: Iterable[str] = ()
    ) -> pd.DataFrame:
        """
        Add normalized covariates and one composite score per covariate subset.

        Args:
            table: Ward table (DataFrame or WardTable); never modified
            covariates: Candidate covariate columns, in order
            extra_covariates: Columns appended regardless of presence

        Returns:
            Copy of the table with norm_<covariate> and model_<id> columns added

        Raises:
            PreconditionError: fewer than two covariates
            MissingColumnError: a selected covariate is not in the table
            CovariateTypeError: a selected covariate is not numeric
        """
        result, _ = self.score(table, covariates, extra_covariates)
        return result

    def score(
        self,
        table: Union[pd.DataFrame, WardTable],
        covariates: Iterable[str],
        extra_covariates: Iterable[str] = ()
    ) -> Tuple[pd.DataFrame, Dict[str, Tuple[str, ...]]]:
        """Like compute_composite_scores, also returning model -> covariates."""
        if not isinstance(table, WardTable):
            table = WardTable(table)

        selected = self.select_covariates(table, covariates, extra_covariates)
        columns = table.resolve(selected)

        normalized = normalize_columns(columns, self.normalized_prefix)
        norm_names = {c: normalized_name(c, self.normalized_prefix) for c in selected}

        models = enumerate_models(selected, self.model_prefix)
        logger.info(f"Model combinations done ({len(models)} models)")

        scores = {}
        for model_name, subset in models.items():
            logger.debug(f"Processing {model_name} with {len(subset)} variables...")
            scores[model_name] = composite_score([normalized[norm_names[c]] for c in subset])

        logger.info("Composite scores computed")

        result = self._assemble(table.data, normalized, scores)
        result = clean_merge_suffixes(result, self.keep_suffix, self.drop_suffix)

        return result, models

    def _assemble(
        self,
        base: pd.DataFrame,
        normalized: Dict[str, pd.Series],
        scores: Dict[str, pd.Series]
    ) -> pd.DataFrame:
        """Join generated columns onto the base table in one step."""
        generated = {**normalized, **scores}

        replaced = [c for c in base.columns if c in generated]
        if replaced:
            logger.warning(f"Replacing existing columns: {', '.join(map(str, replaced))}")
            base = base.drop(columns=replaced)

        added = pd.DataFrame(
            {name: series.to_numpy() for name, series in generated.items()},
            index=base.index,
        )
        return pd.concat([base, added], axis=1)


def create_scorer(config_path: Optional[Path] = None) -> CompositeScorer:
    """Factory function."""
    return CompositeScorer(config_path=config_path)


def compute_composite_scores(
    table: Union[pd.DataFrame, WardTable],
    covariates: Iterable[str],
    extra_covariates: Iterable[str] = ()
) -> pd.DataFrame:
    """Score a ward table with the packaged configuration."""
    return create_scorer().compute_composite_scores(table, covariates, extra_covariates)
