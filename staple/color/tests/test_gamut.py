"""Tests for gamut checking and chroma clamping."""

import numpy as np
import pytest

from staple.color import (
    RGB,
    OKLCH,
    is_in_gamut,
    is_in_gamut_array,
    max_chroma_for_lh,
    clamp_to_gamut,
    clamp_to_gamut_array,
    oklch_to_rgb,
    oklch_to_hex,
    hex_to_oklch,
)


class TestInGamut:

    def test_bounds(self):
        assert is_in_gamut(RGB(0, 0, 0))
        assert is_in_gamut(RGB(255, 255, 255))
        assert not is_in_gamut(RGB(256, 0, 0))
        assert not is_in_gamut(RGB(0, -1, 0))

    def test_array(self):
        rgb = np.array([[0, 0, 0], [255, 128, 3], [300, 0, 0], [0, 0, -2]])
        np.testing.assert_array_equal(is_in_gamut_array(rgb), [True, True, False, False])

    def test_unclamped_conversion_detects_overflow(self):
        """High chroma overflows before clamping, and clamping hides it."""
        lch = OKLCH(0.5, 0.5, 0.0)
        assert not is_in_gamut(oklch_to_rgb(lch, clamp=False))
        assert is_in_gamut(oklch_to_rgb(lch))


class TestClampToGamut:

    def test_extreme_chroma(self):
        """Chroma 2.0 is far outside sRGB; result must fit and keep L and H."""
        r = clamp_to_gamut(OKLCH(0.5, 2.0, 250.0))

        assert is_in_gamut(oklch_to_rgb(r, clamp=False))
        assert r.C <= 2.0
        assert 0 < r.C < 0.4
        assert r.L == 0.5
        assert r.H == 250.0

    def test_result_is_near_the_boundary(self):
        r = clamp_to_gamut(OKLCH(0.7, 0.4, 30.0))
        above = OKLCH(r.L, r.C + 0.01, r.H)
        assert not is_in_gamut(oklch_to_rgb(above, clamp=False))

    def test_in_gamut_unchanged(self):
        lch = OKLCH(0.6, 0.05, 180.0)
        assert clamp_to_gamut(lch) == lch

    def test_black_and_white(self):
        assert clamp_to_gamut(OKLCH(0.0, 0.2, 100.0)) == OKLCH(0.0, 0.0, 100.0)
        assert clamp_to_gamut(OKLCH(-0.1, 0.2, 100.0)) == OKLCH(0.0, 0.0, 100.0)
        assert clamp_to_gamut(OKLCH(1.0, 0.2, 100.0)) == OKLCH(1.0, 0.0, 100.0)
        assert clamp_to_gamut(OKLCH(1.3, 0.2, 100.0)) == OKLCH(1.0, 0.0, 100.0)

    def test_zero_chroma_passthrough(self):
        lch = OKLCH(0.4, 0.0, 42.0)
        assert clamp_to_gamut(lch) == lch

    def test_array_matches_scalar(self):
        lch = np.array([
            [0.5, 2.0, 250.0],
            [0.7, 0.4, 30.0],
            [0.6, 0.05, 180.0],
            [0.95, 0.3, 120.0],
            [0.0, 0.3, 10.0],
        ])
        batch = clamp_to_gamut_array(lch)
        for row, out in zip(lch, batch):
            single = clamp_to_gamut(OKLCH(*row))
            np.testing.assert_allclose(out, [single.L, single.C, single.H], atol=2e-4)

    def test_array_all_in_gamut(self):
        rng = np.random.default_rng(3)
        lch = np.stack([
            rng.uniform(0.05, 0.95, 200),
            rng.uniform(0.0, 0.5, 200),
            rng.uniform(0.0, 360.0, 200),
        ], axis=-1)
        out = clamp_to_gamut_array(lch)
        rgb_ok = [is_in_gamut(oklch_to_rgb(OKLCH(*row), clamp=False)) for row in out]
        assert all(rgb_ok)
        assert (out[:, 1] <= lch[:, 1]).all()


class TestMaxChroma:

    def test_mid_lightness_has_headroom(self):
        c = max_chroma_for_lh(np.array([0.6]), np.array([180.0]), np.array([0.5]))
        assert c[0] > 0.05

    def test_near_white_is_limited(self):
        c = max_chroma_for_lh(np.array([0.99]), np.array([0.0]), np.array([0.5]))
        assert c[0] < 0.05

    def test_converges_within_epsilon(self):
        eps = 1e-4
        c = max_chroma_for_lh(np.array([0.5]), np.array([250.0]), np.array([2.0]), epsilon=eps)
        assert is_in_gamut(oklch_to_rgb(OKLCH(0.5, float(c[0]), 250.0), clamp=False))


class TestOklchToHex:

    def test_out_of_gamut_color_gets_valid_hex(self):
        hex_color = oklch_to_hex(OKLCH(0.7, 0.5, 140.0))
        assert len(hex_color) == 7
        assert hex_color.startswith("#")

    def test_hue_preserved(self):
        lch = hex_to_oklch(oklch_to_hex(OKLCH(0.6, 0.4, 200.0)))
        assert lch.H == pytest.approx(200.0, abs=2.0)
        assert lch.L == pytest.approx(0.6, abs=0.01)
