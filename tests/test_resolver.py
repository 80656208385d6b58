"""Tests for covariate resolution."""

import pytest

from ward_risk.covariates.resolver import CovariateResolver, ResolvedCovariates, create_resolver
from ward_risk.errors import ConfigurationError
from ward_risk.settings import CovariateSelection


@pytest.fixture
def resolver(config):
    return CovariateResolver(config)


class TestCovariateResolver:

    def test_maps_sources_in_order(self, resolver):
        names = resolver.map_sources(['rainfall_path', 'evi_path', 'lights_path'])
        assert names == ['mean_rainfall', 'mean_EVI', 'avgRAD']

    def test_unknown_sources_dropped(self, resolver):
        assert resolver.map_sources(['evi_path', 'soil_ph_path']) == ['mean_EVI']

    def test_filters_to_table_columns(self, resolver, wards):
        selection = CovariateSelection.from_sources(
            {'evi_path': 'evi.tif', 'ndwi_path': 'ndwi.tif', 'h2o_distance_path': 'water.tif'}
        )
        resolved = resolver.resolve(wards.columns, selection)
        assert resolved.covariates == ('mean_EVI', 'distance_to_water')
        assert resolved.extras == ()

    def test_settlement_and_tpr_extras(self, resolver, wards):
        selection = CovariateSelection.from_sources(
            ['evi_path'], include_settlement_type=True, include_tpr=True, tpr_column='u5_tpr_rdt'
        )
        resolved = resolver.resolve(wards.columns, selection)
        assert resolved.extras == ('settlement_type', 'u5_tpr_rdt')
        assert resolved.all() == ['mean_EVI', 'settlement_type', 'u5_tpr_rdt']
        assert len(resolved) == 3

    def test_extras_not_checked_against_table(self, resolver, correlated):
        selection = CovariateSelection(include_settlement_type=True)
        resolved = resolver.resolve(correlated.columns, selection)
        assert resolved.extras == ('settlement_type',)

    def test_tpr_requires_column_name(self, resolver, wards):
        selection = CovariateSelection(sources=('evi_path',), include_tpr=True)
        with pytest.raises(ConfigurationError):
            resolver.resolve(wards.columns, selection)

    def test_settlement_column_from_config(self, config):
        config = {**config, 'settlement_type_column': 'settlement_class'}
        resolver = CovariateResolver(config)
        assert resolver.extras(CovariateSelection(include_settlement_type=True)) == ['settlement_class']

    def test_factory_uses_packaged_catalogue(self):
        resolver = create_resolver()
        assert resolver.data_sources['flood_path'] == 'flood'
        assert len(resolver.data_sources) == 16


class TestResolvedCovariates:

    def test_all_deduplicates(self):
        resolved = ResolvedCovariates(covariates=('a', 'b'), extras=('b', 'c'))
        assert resolved.all() == ['a', 'b', 'c']
