"""Tests for the recording-side field and the recorded intensity profile."""

from dataclasses import replace

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st
from numpy.testing import assert_allclose, assert_array_equal

from hololearn.model import wave_field
from hololearn.model.parameters import ExperimentParameters, HolographyMode
from hololearn.model.wave_math import sample_grid, spherical_amplitude, tone_map

WIDTH, HEIGHT = 600, 320


legal_params = st.builds(
    ExperimentParameters,
    wavelength=st.floats(15, 40),
    reference_angle=st.floats(5, 45),
    object_distance=st.floats(50, 250),
    intensity=st.floats(1, 8),
    object_opacity=st.floats(0, 1),
    object_phase=st.floats(0, 6.28),
    mode=st.sampled_from(list(HolographyMode)),
).map(lambda p: p.clamped())


class TestGrid:

    def test_grid_shapes_broadcast_to_raster(self):
        x, y = sample_grid(WIDTH, HEIGHT)
        assert x.shape == (1, WIDTH)
        assert y.shape == (HEIGHT, 1)
        assert not x.flags.writeable

    @pytest.mark.parametrize("size", [(0, 10), (10, 0), (-5, 5)])
    def test_non_positive_size_raises(self, size):
        with pytest.raises(ValueError):
            sample_grid(*size)

    def test_amplitude_finite_at_source(self):
        amp = spherical_amplitude(4.0, 0.0, gain=40, exponent=0.7, epsilon=5)
        assert amp == pytest.approx(4.0 * 40 / 5)


class TestRecordingField:

    @settings(max_examples=20, deadline=None)
    @given(params=legal_params, tick=st.integers(0, 10_000))
    def test_field_finite_and_brightness_in_range(self, params, tick):
        field = wave_field.compute_field(params, tick, WIDTH, HEIGHT)
        assert field.shape == (HEIGHT, WIDTH)

        computed = field.values[field.mask]
        assert np.all(np.isfinite(computed))

        brightness = tone_map(computed, params.intensity)
        assert brightness.min() >= 0
        assert brightness.max() <= 255

    def test_mask_stops_at_plate(self, inline_params):
        field = wave_field.compute_field(inline_params, 0, WIDTH, HEIGHT)
        plate_x = WIDTH - wave_field.PLATE_MARGIN_PX

        assert field.mask[:, :plate_x + 1].all()
        assert not field.mask[:, plate_x + 1:].any()
        assert_array_equal(field.values[:, plate_x + 1:], 0.0)

    def test_object_sits_distance_before_plate(self, inline_params):
        geometry = wave_field.RecordingGeometry.for_grid(inline_params, WIDTH, HEIGHT)
        assert geometry.plate_x == WIDTH - 40
        assert geometry.object_position.x == pytest.approx(geometry.plate_x - 120)
        assert geometry.object_position.y == HEIGHT / 2

    def test_object_wave_zero_behind_object(self, inline_params):
        x, y = sample_grid(WIDTH, HEIGHT)
        geometry = wave_field.RecordingGeometry.for_grid(inline_params, WIDTH, HEIGHT)
        obj_wave = np.broadcast_to(
            wave_field.object_wave(inline_params, 3, x, y, geometry), (HEIGHT, WIDTH)
        )
        left = x[0] <= geometry.object_position.x
        assert_array_equal(obj_wave[:, left], 0.0)
        assert np.any(obj_wave[:, ~left] != 0.0)

    def test_transparent_object_leaves_pure_reference(self, inline_params):
        params = replace(inline_params, object_opacity=0.0)
        x, y = sample_grid(WIDTH, HEIGHT)
        geometry = wave_field.RecordingGeometry.for_grid(params, WIDTH, HEIGHT)

        assert_array_equal(wave_field.object_wave(params, 7, x, y, geometry), 0.0)

        field = wave_field.compute_field(params, 7, WIDTH, HEIGHT)
        reference = np.broadcast_to(wave_field.reference_wave(params, 7, x, y, HEIGHT), (HEIGHT, WIDTH))
        assert_allclose(field.values[field.mask], reference[field.mask])

    def test_field_changes_over_time(self, inline_params):
        a = wave_field.compute_field(inline_params, 0, WIDTH, HEIGHT)
        b = wave_field.compute_field(inline_params, 10, WIDTH, HEIGHT)
        assert not np.allclose(a.values, b.values)


class TestIntensityProfile:

    @settings(max_examples=15, deadline=None)
    @given(params=legal_params, t1=st.integers(0, 5000), t2=st.integers(0, 5000))
    def test_profile_is_time_invariant(self, params, t1, t2):
        p1 = wave_field.compute_profile_at(params, t1, WIDTH, HEIGHT)
        p2 = wave_field.compute_profile_at(params, t2, WIDTH, HEIGHT)
        assert_array_equal(p1.values, p2.values)

    def test_profile_matches_field_envelope(self, offaxis_params):
        """Averaged over one period, the squared field at the plate is I(y)/2."""
        profile = wave_field.compute_profile(offaxis_params, WIDTH, HEIGHT)
        plate_col = WIDTH - wave_field.PLATE_MARGIN_PX

        period = 2 * np.pi / 0.15
        ticks = np.linspace(0, period, 64, endpoint=False)
        squares = [
            wave_field.compute_field(offaxis_params, t, WIDTH, HEIGHT).values[:, plate_col] ** 2
            for t in ticks
        ]
        assert_allclose(np.mean(squares, axis=0), profile.values / 2, rtol=1e-6, atol=1e-9)

    def test_profile_shape_and_non_negative(self, inline_params):
        profile = wave_field.compute_profile(inline_params, WIDTH, HEIGHT)
        assert profile.values.shape == (HEIGHT,)
        assert profile.values.min() >= 0
        assert not profile.values.flags.writeable

    def test_transparent_object_gives_flat_profile(self, inline_params):
        params = replace(inline_params, object_opacity=0.0)
        profile = wave_field.compute_profile(params, WIDTH, HEIGHT)
        assert_allclose(profile.values, params.intensity ** 2)

    def test_normalization_divisor(self, inline_params):
        # (4 + 4·1·2)² · 1.1
        assert wave_field.normalization_divisor(inline_params) == pytest.approx(144 * 1.1)

    def test_phase_shift_moves_fringes(self, offaxis_params):
        base = wave_field.compute_profile(offaxis_params, WIDTH, HEIGHT)
        shifted = wave_field.compute_profile(replace(offaxis_params, object_phase=np.pi), WIDTH, HEIGHT)
        assert not np.allclose(base.values, shifted.values)
