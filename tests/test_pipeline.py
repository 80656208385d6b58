"""
Tests for the ward risk pipeline.

============================================================
PURPOSE
============================================================
End-to-end: selection -> resolved covariates -> scored table.
============================================================
"""

import numpy as np
import pytest

from ward_risk import CovariateSelection, PreconditionError, create_pipeline
from ward_risk.errors import MissingColumnError


@pytest.fixture
def pipeline():
    return create_pipeline()


@pytest.fixture
def selection():
    return CovariateSelection.from_dict({
        'raster_paths': {
            'evi_path': 'evi.tif',
            'h2o_distance_path': 'water.tif',
            'ndwi_path': 'ndwi.tif',
        },
        'include_settlement_type': 'Yes',
        'include_u5_tpr_data': 'No',
    })


class TestScoreWards:

    def test_scores_every_combination(self, pipeline, wards, selection):
        result = pipeline.score_wards(wards, selection)

        assert result.covariates == ('mean_EVI', 'distance_to_water', 'settlement_type')
        assert result.model_columns == ['model_1', 'model_2', 'model_3', 'model_4']
        assert result.models['model_2'] == ('mean_EVI', 'settlement_type')
        assert len(result.table) == len(wards)

    def test_full_model_values(self, pipeline, wards, selection):
        result = pipeline.score_wards(wards, selection)
        table = result.table

        expected = (
            table['norm_mean_EVI'] + table['norm_distance_to_water'] + table['norm_settlement_type']
        ) / 3
        np.testing.assert_allclose(table['model_4'].to_numpy(), expected.to_numpy())

    def test_tpr_column(self, pipeline, wards):
        selection = CovariateSelection.from_dict({
            'sources': ['rainfall_path'],
            'include_u5_tpr_data': 'yes',
            'tpr_data_col_name': 'u5_tpr_rdt',
        })
        result = pipeline.score_wards(wards, selection)

        assert result.models == {'model_1': ('mean_rainfall', 'u5_tpr_rdt')}
        # rainfall is missing for the third ward
        assert result.table['model_1'].isna().tolist() == [False, False, True, False]

    def test_single_covariate_rejected(self, pipeline, wards):
        selection = CovariateSelection.from_dict({'sources': ['evi_path', 'flood_path']})
        with pytest.raises(PreconditionError):
            pipeline.score_wards(wards, selection)

    def test_missing_settlement_column(self, pipeline, correlated):
        table = correlated.rename(columns={'A': 'mean_EVI', 'B': 'flood'})
        selection = CovariateSelection.from_sources(
            ['evi_path', 'flood_path'], include_settlement_type=True
        )
        with pytest.raises(MissingColumnError, match="settlement_type"):
            pipeline.score_wards(table, selection)


class TestReporting:

    def test_describe_models(self, pipeline, wards, selection):
        result = pipeline.score_wards(wards, selection)
        described = pipeline.describe_models(result)

        assert list(described.columns) == ['model', 'n_covariates', 'covariates']
        assert described['model'].tolist() == result.model_columns
        assert described.iloc[-1]['covariates'] == 'mean_EVI, distance_to_water, settlement_type'
        assert described['n_covariates'].tolist() == [2, 2, 2, 3]

    def test_rank_wards(self, pipeline, wards, selection):
        result = pipeline.score_wards(wards, selection)
        ranked = pipeline.rank_wards(result, 'model_1', 'WardName')

        assert list(ranked.columns) == ['WardName', 'model_1', 'rank']
        assert ranked['model_1'].is_monotonic_decreasing
        assert ranked['rank'].iloc[0] == 1

    def test_rank_unknown_model(self, pipeline, wards, selection):
        result = pipeline.score_wards(wards, selection)
        with pytest.raises(KeyError):
            pipeline.rank_wards(result, 'model_99')

    def test_print_summary(self, pipeline, wards, selection, capsys):
        result = pipeline.score_wards(wards, selection)
        pipeline.print_summary(result)

        out = capsys.readouterr().out
        assert "WARD RISK SCORES" in out
        assert "Models: 4" in out
        assert "All wards scored under every model" in out
