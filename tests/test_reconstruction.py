"""Tests for the reconstructed diffraction orders."""

import math
from dataclasses import replace

import numpy as np
import pytest
from hypothesis import assume, given, settings, strategies as st
from numpy.testing import assert_allclose

from hololearn.model import reconstruction
from hololearn.model.parameters import ExperimentParameters, HolographyMode
from hololearn.model.wave_field import reference_wave
from hololearn.model.wave_math import sample_grid

WIDTH, HEIGHT = 600, 320
PLATE_X = reconstruction.RECONSTRUCTION_PLATE_X


class TestDiffractionOrders:

    def test_inline_images_overlap_on_axis(self, inline_params):
        orders = reconstruction.compute_orders(inline_params, WIDTH, HEIGHT)

        assert orders.virtual_image.x == pytest.approx(PLATE_X - 120)
        assert orders.virtual_image.y == pytest.approx(HEIGHT / 2)
        assert orders.real_image.x == pytest.approx(PLATE_X + 120)
        assert orders.real_image.y == pytest.approx(HEIGHT / 2)
        assert orders.images_overlap

    def test_offaxis_real_image_deflected_by_twice_the_angle(self, offaxis_params):
        orders = reconstruction.compute_orders(offaxis_params, WIDTH, HEIGHT)

        assert orders.deflection_angle == pytest.approx(math.radians(30))
        assert orders.real_image_axis_offset == pytest.approx(60.0)
        assert orders.real_image.x - PLATE_X == pytest.approx(120 * math.cos(math.radians(30)))
        assert orders.real_image_offset.magnitude == pytest.approx(120.0)
        assert not orders.images_overlap

    @pytest.mark.parametrize("distance", [50, 120, 250])
    def test_colinear_real_image_mirrors_virtual(self, inline_params, distance):
        params = replace(inline_params, object_distance=distance)
        orders = reconstruction.compute_orders(params, WIDTH, HEIGHT)
        assert orders.real_image.x == pytest.approx(PLATE_X + distance)
        assert orders.real_image.y == pytest.approx(HEIGHT / 2)

    @settings(max_examples=50)
    @given(a=st.floats(0.01, 45), b=st.floats(0.01, 45))
    def test_axis_offset_grows_with_angle(self, a, b):
        assume(abs(a - b) > 0.01)
        lo, hi = sorted((a, b))

        def offset(angle):
            params = ExperimentParameters(reference_angle=angle, mode=HolographyMode.ANGULAR_OFFSET)
            return reconstruction.compute_orders(params, WIDTH, HEIGHT).real_image_axis_offset

        assert offset(lo) < offset(hi)


class TestReconstructedField:

    def test_reading_beam_only_before_plate(self, offaxis_params):
        field = reconstruction.compute_field(offaxis_params, 12, WIDTH, HEIGHT)
        x, y = sample_grid(WIDTH, HEIGHT)
        reading = np.broadcast_to(reference_wave(offaxis_params, 12, x, y, HEIGHT), (HEIGHT, WIDTH))

        before = int(PLATE_X)
        assert_allclose(field.values[:, :before], reading[:, :before])
        assert field.mask.all()

    def test_orders_summed_behind_plate(self, inline_params):
        tick = 5
        field = reconstruction.compute_field(inline_params, tick, WIDTH, HEIGHT)
        orders = reconstruction.compute_orders(inline_params, WIDTH, HEIGHT)
        x, y = sample_grid(WIDTH, HEIGHT)

        expected = (
            0.5 * reference_wave(inline_params, tick, x, y, HEIGHT)
            + reconstruction.image_wave(inline_params, tick, x, y, orders.virtual_image)
            + reconstruction.image_wave(inline_params, tick, x, y, orders.real_image)
        )
        expected = np.broadcast_to(expected, (HEIGHT, WIDTH))
        after = int(PLATE_X)
        assert_allclose(field.values[:, after:], expected[:, after:])

    @settings(max_examples=10, deadline=None)
    @given(
        angle=st.floats(5, 45),
        distance=st.floats(50, 250),
        intensity=st.floats(1, 8),
        tick=st.integers(0, 10_000),
    )
    def test_field_finite(self, angle, distance, intensity, tick):
        params = ExperimentParameters(
            reference_angle=angle,
            object_distance=distance,
            intensity=intensity,
            mode=HolographyMode.ANGULAR_OFFSET,
        )
        field = reconstruction.compute_field(params, tick, WIDTH, HEIGHT)
        assert np.all(np.isfinite(field.values))
