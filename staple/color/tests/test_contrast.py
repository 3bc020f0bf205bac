"""Tests for WCAG and APCA contrast."""

import pytest

from staple.color import (
    RGB,
    InvalidHexColor,
    relative_luminance,
    wcag_contrast,
    wcag_contrast_hex,
    wcag_rating,
    apca_contrast_hex,
    apca_rating,
    best_text_color,
    check_contrast,
)
from staple.color.contrast import _round_to


class TestWCAG:

    def test_luminance_endpoints(self):
        assert relative_luminance(RGB(0, 0, 0)) == 0.0
        assert relative_luminance(RGB(255, 255, 255)) == pytest.approx(1.0)

    def test_black_on_white_is_max(self):
        assert wcag_contrast_hex("#000000", "#ffffff") == pytest.approx(21.0)

    def test_same_color_is_min(self):
        assert wcag_contrast_hex("#808080", "#808080") == pytest.approx(1.0)

    def test_symmetric(self):
        a = wcag_contrast_hex("#2563eb", "#ffffff")
        b = wcag_contrast_hex("#ffffff", "#2563eb")
        assert a == pytest.approx(b)

    def test_typical_ui_colors(self):
        assert wcag_contrast_hex("#111827", "#ffffff") > 15
        assert wcag_contrast_hex("#ffffff", "#2563eb") > 4.5

    def test_range(self):
        ratio = wcag_contrast(RGB(12, 200, 90), RGB(240, 10, 77))
        assert 1.0 <= ratio <= 21.0

    def test_rejects_bad_hex(self):
        with pytest.raises(InvalidHexColor):
            wcag_contrast_hex("#fff", "#000000")


class TestWCAGRating:

    @pytest.mark.parametrize("ratio, expected", [
        (21, "AAA"),
        (7.0, "AAA"),
        (6.99, "AA"),
        (4.5, "AA"),
        (4.0, "AA Large"),
        (3.0, "AA Large"),
        (2.9, "Fail"),
        (1, "Fail"),
    ])
    def test_thresholds(self, ratio, expected):
        assert wcag_rating(ratio) == expected


class TestAPCA:

    def test_max_contrast_magnitude(self):
        assert abs(apca_contrast_hex("#ffffff", "#000000")) > 100
        assert abs(apca_contrast_hex("#000000", "#ffffff")) > 100

    def test_polarity_sign(self):
        """Dark text on light is positive, light text on dark is negative."""
        assert apca_contrast_hex("#000000", "#ffffff") > 0
        assert apca_contrast_hex("#ffffff", "#000000") < 0

    def test_known_values(self):
        assert apca_contrast_hex("#000000", "#ffffff") == pytest.approx(106.04, abs=0.05)
        assert apca_contrast_hex("#ffffff", "#000000") == pytest.approx(-107.88, abs=0.05)

    def test_same_color_is_zero(self):
        assert apca_contrast_hex("#808080", "#808080") == 0.0

    def test_low_contrast_clips_to_zero(self):
        assert apca_contrast_hex("#777777", "#7a7a7a") == 0.0
        assert apca_contrast_hex("#7a7a7a", "#777777") == 0.0

    def test_not_symmetric(self):
        """Swapping text and background changes the magnitude too."""
        normal = apca_contrast_hex("#333333", "#eeeeee")
        reverse = apca_contrast_hex("#eeeeee", "#333333")
        assert normal > 0 > reverse
        assert abs(normal) != pytest.approx(abs(reverse), abs=0.5)


class TestAPCARating:

    def test_body(self):
        assert apca_rating(80, "body") == "Pass"
        assert apca_rating(65, "body") == "Marginal"
        assert apca_rating(50, "body") == "Fail"
        assert apca_rating(10, "body") == "Fail"

    def test_large(self):
        assert apca_rating(65, "large") == "Pass"
        assert apca_rating(50, "large") == "Marginal"
        assert apca_rating(30, "large") == "Fail"

    def test_headline_and_placeholder(self):
        assert apca_rating(45, "headline") == "Pass"
        assert apca_rating(30, "headline") == "Marginal"
        assert apca_rating(30, "placeholder") == "Pass"
        assert apca_rating(15, "placeholder") == "Marginal"
        assert apca_rating(14.9, "placeholder") == "Fail"

    def test_default_is_body(self):
        assert apca_rating(70) == "Marginal"

    def test_uses_absolute_value(self):
        assert apca_rating(-80, "body") == "Pass"
        assert apca_rating(-50, "body") == "Fail"

    def test_unknown_use_case(self):
        with pytest.raises(ValueError):
            apca_rating(80, "caption")


class TestBestTextColor:

    @pytest.mark.parametrize("bg", ["#000000", "#1a1a1a", "#2563eb"])
    def test_white_on_dark(self, bg):
        assert best_text_color(bg) == "#ffffff"

    @pytest.mark.parametrize("bg", ["#ffffff", "#f0f0f0", "#fbbf24"])
    def test_black_on_light(self, bg):
        assert best_text_color(bg) == "#000000"


class TestCheckContrast:

    def test_white_on_blue(self):
        result = check_contrast("#ffffff", "#2563eb")

        assert 5.0 < result.wcag.ratio < 5.4
        assert result.wcag.rating == "AA"
        assert result.apca.lc < -75
        assert result.apca.rating == "Pass"

    def test_rounding(self):
        result = check_contrast("#2563eb", "#ffffff")
        assert result.wcag.ratio == round(result.wcag.ratio, 2)
        assert result.apca.lc == round(result.apca.lc, 1)

    def test_use_case_changes_rating_not_value(self):
        body = check_contrast("#999999", "#ffffff", "body")
        headline = check_contrast("#999999", "#ffffff", "headline")

        assert body.apca.lc == headline.apca.lc
        assert body.apca.rating == "Fail"
        assert headline.apca.rating == "Pass"

    def test_rounds_half_up(self):
        """Halves round up, not to even."""
        assert _round_to(80.25, 1) == 80.3
        assert _round_to(4.125, 2) == 4.13
        assert _round_to(-80.25, 1) == -80.2
