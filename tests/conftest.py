import numpy as np
import pytest
import xarray as xr


@pytest.fixture
def rng():
    return np.random.default_rng(20240607)


@pytest.fixture
def vector_dataset():
    x = np.array([1.0, 0.0, -3.0, 0.0])
    y = np.array([0.0, 2.0, -4.0, 0.0])
    z = np.array([0.0, 0.0, 12.0, 5.0])
    ds = xr.Dataset(
        {
            "x": ("point", x, {"units": "m"}),
            "y": ("point", y, {"units": "m"}),
            "z": ("point", z, {"units": "m"}),
        },
        coords={"point": np.arange(x.size)},
    )
    return ds
