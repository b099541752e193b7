import numpy as np
import pytest


def make_train_data(data_num=200, dim=2, seed=0):
    """Four well separated gaussian blobs around 2, -2, 12 and -20."""
    rng = np.random.default_rng(seed)
    per_cluster = data_num // 4
    return np.vstack([
        rng.normal(loc=2.0, scale=0.3, size=(per_cluster, dim)),
        rng.normal(loc=-2.0, scale=0.5, size=(per_cluster, dim)),
        rng.normal(loc=12.0, scale=0.1, size=(per_cluster, dim)),
        rng.normal(loc=-20.0, scale=0.3, size=(per_cluster, dim)),
    ])


@pytest.fixture
def blobs():
    return make_train_data()


@pytest.fixture
def make_blobs():
    """Factory for blob data with a custom size, dimension or seed."""
    return make_train_data
