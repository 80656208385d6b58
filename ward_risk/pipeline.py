"""
Ward Risk Scores - Main Interface
Combines covariate resolution and composite scoring into one entry point.
"""

import pandas as pd
import numpy as np
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import logging

from ward_risk.covariates.resolver import CovariateResolver
from ward_risk.scoring.aggregator import CompositeScorer
from ward_risk.settings import CovariateSelection, load_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositeScoreResult:
    """Scored ward table with the covariates behind each model column."""

    table: pd.DataFrame
    covariates: Tuple[str, ...]
    models: Dict[str, Tuple[str, ...]]

    @property
    def model_columns(self) -> List[str]:
        return list(self.models)


class WardRiskPipeline:
    """
    Main interface for composite ward risk scoring.

    Provides:
    - Resolution of supplied data sources to covariate columns
    - One composite score per combination of two or more covariates
    - Model descriptions for map captions and summaries
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config = load_config(config_path)
        self.resolver = CovariateResolver(self.config)
        self.scorer = CompositeScorer(self.config)

    def score_wards(self, table: pd.DataFrame, selection: CovariateSelection) -> CompositeScoreResult:
        """
        Resolve the selection and score every covariate combination.

        Args:
            table: Extracted ward data, one row per ward
            selection: Data sources supplied and inclusion flags

        Returns:
            CompositeScoreResult with the augmented table
        """
        resolved = self.resolver.resolve(table.columns, selection)
        scored, models = self.scorer.score(table, resolved.covariates, resolved.extras)

        covariates = tuple(dict.fromkeys(c for subset in models.values() for c in subset))
        return CompositeScoreResult(table=scored, covariates=covariates, models=models)

    def describe_models(self, result: CompositeScoreResult) -> pd.DataFrame:
        """
        List the covariates combined by each model.

        Returns:
            DataFrame with columns: model, n_covariates, covariates
        """
        return pd.DataFrame(
            [
                {
                    'model': name,
                    'n_covariates': len(subset),
                    'covariates': ', '.join(subset),
                }
                for name, subset in result.models.items()
            ],
            columns=['model', 'n_covariates', 'covariates'],
        )

    def rank_wards(
        self,
        result: CompositeScoreResult,
        model: str,
        id_column: Optional[str] = None
    ) -> pd.DataFrame:
        """
        Order wards by one model's composite score, highest risk first.

        Args:
            result: Output of score_wards
            model: Model column, e.g. 'model_3'
            id_column: Ward identifier column to keep alongside the score

        Returns:
            DataFrame with the identifier (if given), the score and a 1-based rank
        """
        if model not in result.models:
            raise KeyError(f"Unknown model: {model}")

        columns = [id_column, model] if id_column else [model]
        ranked = result.table[columns].copy()
        ranked['rank'] = ranked[model].rank(ascending=False, method='min', na_option='keep')
        return ranked.sort_values(model, ascending=False, na_position='last')

    def print_summary(self, result: CompositeScoreResult):
        """Print formatted scoring summary to console."""
        print("\n" + "=" * 80)
        print("WARD RISK SCORES - Composite Models")
        print(f"Timestamp: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        print("=" * 80)

        print(f"Wards: {len(result.table)}")
        print(f"Covariates: {', '.join(result.covariates)}")
        print(f"Models: {len(result.models)}")

        display_df = self.describe_models(result)
        display_df['missing'] = [int(result.table[m].isna().sum()) for m in display_df['model']]
        display_df['mean'] = [
            round(result.table[m].mean(), 3) if result.table[m].notna().any() else np.nan
            for m in display_df['model']
        ]
        display_df.columns = ['Model', 'Vars', 'Covariates', 'Missing', 'Mean']

        print("\n" + display_df.to_string(index=False))

        incomplete = display_df[display_df['Missing'] > 0]
        print("\n" + "-" * 80)
        if not incomplete.empty:
            print(f"{len(incomplete)} models have wards without a score")
        else:
            print("All wards scored under every model")
        print("=" * 80)


def create_pipeline(config_path: Optional[Path] = None) -> WardRiskPipeline:
    """Factory function to create pipeline."""
    return WardRiskPipeline(config_path)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    wards = pd.DataFrame({
        'WardName': ['Agugu', 'Bashorun', 'Challenge', 'Olopomewa', 'Yemetu'],
        'mean_EVI': [0.21, 0.34, 0.28, 0.45, 0.19],
        'mean_rainfall': [110.0, 145.5, 98.2, 160.3, np.nan],
        'distance_to_water': [1200.0, 340.0, 860.0, 150.0, 975.0],
        'settlement_type': [1, 0, 1, 0, 1],
    })

    selection = CovariateSelection.from_dict({
        'raster_paths': {
            'evi_path': 'EVI.tif',
            'rainfall_path': 'rainfall.tif',
            'h2o_distance_path': 'water.tif',
        },
        'include_settlement_type': 'Yes',
    })

    pipeline = create_pipeline()
    result = pipeline.score_wards(wards, selection)
    pipeline.print_summary(result)

    print("\nTop wards under the full model:")
    print(pipeline.rank_wards(result, result.model_columns[-1], 'WardName').to_string(index=False))
