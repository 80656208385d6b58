"""
Ward Risk Scores - Quick Start Example

This script scores a handful of wards read from a CSV of extracted covariates,
or from a small built-in table when no CSV is given.

Usage:
    python examples/quickstart.py [wards.csv] [run.yaml]
"""

import sys
import logging
from pathlib import Path

import pandas as pd

from ward_risk import CovariateSelection, create_pipeline, load_selection


def demo_wards() -> pd.DataFrame:
    return pd.DataFrame({
        'WardName': ['Agugu', 'Bashorun', 'Challenge', 'Olopomewa', 'Yemetu', 'Mokola'],
        'mean_EVI': [0.21, 0.34, 0.28, 0.45, 0.19, 0.31],
        'mean_NDVI': [0.32, 0.41, 0.37, 0.52, 0.30, None],
        'mean_rainfall': [110.0, 145.5, 98.2, 160.3, 121.7, 133.0],
        'distance_to_water': [1200.0, 340.0, 860.0, 150.0, 975.0, 410.0],
        'settlement_type': [1, 0, 1, 0, 1, 0],
        'u5_tpr_rdt': [0.42, 0.18, 0.35, 0.11, 0.47, 0.22],
    })


def main():
    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) > 1:
        wards = pd.read_csv(sys.argv[1])
    else:
        wards = demo_wards()

    if len(sys.argv) > 2:
        selection = load_selection(Path(sys.argv[2]))
    else:
        selection = CovariateSelection.from_dict({
            'sources': ['evi_path', 'ndvi_path', 'rainfall_path', 'h2o_distance_path'],
            'include_settlement_type': 'yes',
            'include_u5_tpr_data': 'No',
        })

    pipeline = create_pipeline()

    # 1. Score every covariate combination
    result = pipeline.score_wards(wards, selection)
    pipeline.print_summary(result)

    # 2. Variables behind each model (for map captions)
    print("\nModel definitions:")
    print(pipeline.describe_models(result).to_string(index=False))

    # 3. Highest risk wards under the full model
    full_model = result.model_columns[-1]
    print(f"\nWards ranked by {full_model}:")
    print(pipeline.rank_wards(result, full_model, 'WardName').to_string(index=False))


if __name__ == "__main__":
    main()
