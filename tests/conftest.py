"""Shared fixtures for ward risk score tests."""

import numpy as np
import pandas as pd
import pytest

from ward_risk.settings import load_config


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def wards():
    """Extracted ward covariates, as produced by the raster extraction step."""
    return pd.DataFrame({
        'WardName': ['Agugu', 'Bashorun', 'Challenge', 'Olopomewa'],
        'WardCode': ['OY001', 'OY002', 'OY003', 'OY004'],
        'mean_EVI': [0.2, 0.4, 0.3, 0.6],
        'mean_rainfall': [100.0, 150.0, np.nan, 200.0],
        'distance_to_water': [1000.0, 250.0, 500.0, 0.0],
        'settlement_type': [1, 0, 1, 0],
        'u5_tpr_rdt': [0.40, 0.20, 0.30, 0.10],
    })


@pytest.fixture
def correlated():
    return pd.DataFrame({
        'A': [1, 2, 3, 4],
        'B': [10, 20, 30, 40],
    })


@pytest.fixture
def with_gaps():
    return pd.DataFrame({
        'A': [1, 2, np.nan, 4],
        'B': [5, np.nan, 7, 8],
    })
