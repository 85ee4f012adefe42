import warnings

import numpy as np
import pytest

from phys_tools import (
    DegenerateInputWarning,
    add_spherical_coordinates,
    cartesian_to_spherical,
    spherical_to_cartesian,
)


def test_unit_z_axis():
    radius, polar, azimuthal = cartesian_to_spherical(0.0, 0.0, 1.0)

    assert radius == pytest.approx(1.0)
    assert polar == pytest.approx(0.0)
    assert azimuthal == pytest.approx(0.0)


def test_negative_y_azimuth_is_shifted():
    radius, polar, azimuthal = cartesian_to_spherical(0.0, -2.0, 0.0)

    assert radius == pytest.approx(2.0)
    assert polar == pytest.approx(np.pi / 2)
    assert azimuthal == pytest.approx(3 * np.pi / 2)


def test_spherical_to_cartesian_equator():
    x, y, z = spherical_to_cartesian(2.0, np.pi / 2, np.pi)

    assert x == pytest.approx(-2.0)
    assert y == pytest.approx(0.0, abs=1e-12)
    assert z == pytest.approx(0.0, abs=1e-12)


def test_origin_propagates_nan_with_warning():
    with pytest.warns(DegenerateInputWarning, match="origin"):
        radius, polar, azimuthal = cartesian_to_spherical(0.0, 0.0, 0.0)

    assert radius == 0.0
    assert np.isnan(polar)
    assert azimuthal == 0.0


def test_origin_does_not_emit_numpy_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        warnings.simplefilter("ignore", DegenerateInputWarning)
        _, polar, _ = cartesian_to_spherical(0.0, 0.0, 0.0)

    assert np.isnan(polar)


def test_origin_strict_raises():
    with pytest.raises(ValueError, match="origin"):
        cartesian_to_spherical(0.0, 0.0, 0.0, strict=True)


def test_angle_ranges_on_random_points(rng):
    points = rng.uniform(-10, 10, size=(3, 1000))

    _, polar, azimuthal = cartesian_to_spherical(*points)

    assert np.all((polar >= 0.0) & (polar <= np.pi))
    assert np.all((azimuthal >= 0.0) & (azimuthal < 2 * np.pi))


def test_spherical_round_trip(rng):
    x, y, z = rng.uniform(-10, 10, size=(3, 500))

    x_back, y_back, z_back = spherical_to_cartesian(*cartesian_to_spherical(x, y, z))

    np.testing.assert_allclose(x_back, x, atol=1e-9)
    np.testing.assert_allclose(y_back, y, atol=1e-9)
    np.testing.assert_allclose(z_back, z, atol=1e-9)


def test_add_spherical_coordinates(vector_dataset):
    ds = vector_dataset.isel(point=[0, 1, 2])

    ds_out = add_spherical_coordinates(ds)

    np.testing.assert_allclose(ds_out["radius"].values, [1.0, 2.0, 13.0])
    np.testing.assert_allclose(
        ds_out["polar_angle"].values,
        [np.pi / 2, np.pi / 2, np.arccos(12.0 / 13.0)],
    )
    assert ds_out["azimuthal_angle"].dims == ("point",)
    assert ds_out["radius"].attrs["units"] == "m"
    assert ds_out["polar_angle"].attrs["units"] == "radians"


def test_add_spherical_coordinates_origin_warns(vector_dataset):
    ds = vector_dataset.assign(z=vector_dataset["z"] * 0.0)

    with pytest.warns(DegenerateInputWarning):
        ds_out = add_spherical_coordinates(ds)

    assert np.isnan(ds_out["polar_angle"].values[3])


def test_add_spherical_coordinates_missing_variable(vector_dataset):
    with pytest.raises(ValueError, match="'w' not found"):
        add_spherical_coordinates(vector_dataset, z_var="w")


def test_origin_warning_points_at_caller():
    with pytest.warns(DegenerateInputWarning) as record:
        cartesian_to_spherical(0.0, 0.0, 0.0)

    assert record[0].filename == __file__


def test_dataset_origin_warning_points_at_caller(vector_dataset):
    ds = vector_dataset.assign(z=vector_dataset["z"] * 0.0)

    with pytest.warns(DegenerateInputWarning) as record:
        add_spherical_coordinates(ds)

    assert record[0].filename == __file__
