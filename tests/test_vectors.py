import numpy as np
import pytest

from phys_tools import (
    add_polar_components,
    vector_components,
    vector_magnitude_direction,
)


def test_vector_components_along_x_axis():
    x, y = vector_components(1.0, 0.0)

    assert x == pytest.approx(1.0)
    assert y == pytest.approx(0.0)


def test_vector_components_quarter_turn():
    x, y = vector_components(1.0, 90.0)

    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)


def test_vector_components_accepts_any_direction():
    x, y = vector_components(2.0, -270.0)

    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(2.0)


def test_magnitude_direction_diagonal():
    magnitude, direction = vector_magnitude_direction(1.0, 1.0)

    assert magnitude == pytest.approx(np.sqrt(2.0))
    assert direction == pytest.approx(45.0)


def test_magnitude_direction_negative_x_axis():
    magnitude, direction = vector_magnitude_direction(-1.0, 0.0)

    assert magnitude == pytest.approx(1.0)
    assert direction == pytest.approx(180.0)


def test_magnitude_direction_lower_half_plane_is_shifted():
    _, direction = vector_magnitude_direction(0.0, -3.0)

    assert direction == pytest.approx(270.0)


def test_zero_vector_has_zero_direction():
    magnitude, direction = vector_magnitude_direction(0.0, 0.0)

    assert magnitude == 0.0
    assert direction == 0.0


def test_tiny_negative_y_stays_below_full_turn():
    _, direction = vector_magnitude_direction(1.0, -1e-300)

    assert 0.0 <= direction < 360.0


def test_direction_range_on_random_vectors(rng):
    x = rng.uniform(-100, 100, size=1000)
    y = rng.uniform(-100, 100, size=1000)

    _, direction = vector_magnitude_direction(x, y)

    assert np.all(direction >= 0.0)
    assert np.all(direction < 360.0)


def test_polar_round_trip(rng):
    magnitude = rng.uniform(0.1, 50.0, size=500)
    direction = rng.uniform(0.0, 360.0, size=500)

    x, y = vector_components(magnitude, direction)
    magnitude_back, direction_back = vector_magnitude_direction(x, y)

    np.testing.assert_allclose(magnitude_back, magnitude, rtol=1e-12)
    # Compare on the circle so 0 and 360 count as equal
    angle_diff = (direction_back - direction + 180.0) % 360.0 - 180.0
    np.testing.assert_allclose(angle_diff, 0.0, atol=1e-9)


def test_add_polar_components(vector_dataset):
    ds_out = add_polar_components(vector_dataset)

    np.testing.assert_allclose(ds_out["magnitude"].values, [1.0, 2.0, 5.0, 0.0])
    np.testing.assert_allclose(
        ds_out["direction"].values,
        [0.0, 90.0, np.degrees(np.arctan2(-4.0, -3.0)) + 360.0, 0.0],
    )
    assert ds_out["magnitude"].dims == ("point",)
    assert ds_out["magnitude"].attrs["units"] == "m"
    assert ds_out["direction"].attrs["units"] == "degrees"
    assert "magnitude" not in vector_dataset


def test_add_polar_components_missing_variable(vector_dataset):
    with pytest.raises(ValueError, match="'u' not found"):
        add_polar_components(vector_dataset, x_var="u")
