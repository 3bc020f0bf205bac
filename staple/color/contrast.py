"""Text/background contrast: WCAG 2.1 ratio and APCA lightness contrast.

WCAG levels (ratio):
- AAA normal text: >= 7.0
- AA normal text / AAA large text: >= 4.5
- AA large text: >= 3.0

APCA returns a signed Lc value. Positive means dark text on a light
background, negative means light text on a dark background. Recommended
minimums (absolute value):
- Body text: Lc 75+
- Large text: Lc 60+
- Headlines: Lc 45+
- Placeholder/disabled: Lc 30+

Reference: https://github.com/Myndex/SAPC-APCA
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np

from staple import defaults
from .oklch import RGB, _round_half_up, hex_to_rgb, srgb_to_linear

WCAGRating = Literal["AAA", "AA", "AA Large", "Fail"]
APCARating = Literal["Pass", "Marginal", "Fail"]
APCAUseCase = Literal["body", "large", "headline", "placeholder"]

WHITE = "#ffffff"
BLACK = "#000000"

_WCAG_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])

# === APCA 0.0.98G constants ===
_MAIN_TRC = 2.4
_APCA_WEIGHTS = np.array([0.2126729, 0.7151522, 0.0721750])
_NORM_BG = 0.56
_NORM_TXT = 0.57
_REV_TXT = 0.62
_REV_BG = 0.65
_BLK_THRS = 0.022
_BLK_CLMP = 1.414
_SCALE_BOW = 1.14
_SCALE_WOB = 1.14
_LO_BOW_THRESH = 0.035991
_LO_WOB_THRESH = 0.035991
_LO_BOW_FACTOR = 27.7847239587675
_LO_WOB_FACTOR = 27.7847239587675
_LO_BOW_OFFSET = 0.027
_LO_WOB_OFFSET = 0.027
_LO_CLIP = 0.1
_DELTA_Y_MIN = 0.0005

# (pass, marginal) thresholds on |Lc|
APCA_THRESHOLDS: dict[str, tuple[float, float]] = {
    "body": (75.0, 60.0),
    "large": (60.0, 45.0),
    "headline": (45.0, 30.0),
    "placeholder": (30.0, 15.0),
}


@dataclass(frozen=True)
class WCAGResult:
    ratio: float
    rating: WCAGRating


@dataclass(frozen=True)
class APCAResult:
    lc: float
    rating: APCARating


@dataclass(frozen=True)
class ContrastResult:
    """Both contrast metrics for one foreground/background pair."""
    wcag: WCAGResult
    apca: APCAResult


# === WCAG 2.1 ===

def relative_luminance(rgb: RGB) -> float:
    """WCAG relative luminance, 0 (black) to 1 (white).

    https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
    """
    return float(np.dot(_WCAG_WEIGHTS, srgb_to_linear(rgb.as_array())))


def wcag_contrast(fg: RGB, bg: RGB) -> float:
    """WCAG contrast ratio in [1, 21]. Symmetric in its arguments."""
    l1 = relative_luminance(fg)
    l2 = relative_luminance(bg)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_contrast_hex(fg_hex: str, bg_hex: str) -> float:
    return wcag_contrast(hex_to_rgb(fg_hex), hex_to_rgb(bg_hex))


def wcag_rating(ratio: float) -> WCAGRating:
    if ratio >= 7:
        return "AAA"
    if ratio >= 4.5:
        return "AA"
    if ratio >= 3:
        return "AA Large"
    return "Fail"


# === APCA ===

def _apca_luminance(rgb: RGB) -> float:
    """Screen luminance with a plain 2.4 power curve and black soft clamp."""
    Y = float(np.dot(_APCA_WEIGHTS, np.power(rgb.as_array() / 255.0, _MAIN_TRC)))
    if Y > _BLK_THRS:
        return Y
    return Y + (_BLK_THRS - Y) ** _BLK_CLMP


def apca_contrast(text: RGB, bg: RGB) -> float:
    """APCA Lc of text on background, roughly -108 to 106."""
    txt_y = _apca_luminance(text)
    bg_y = _apca_luminance(bg)

    if abs(bg_y - txt_y) < _DELTA_Y_MIN:
        return 0.0

    if bg_y > txt_y:
        # Normal polarity: dark text on light background
        sapc = (bg_y ** _NORM_BG - txt_y ** _NORM_TXT) * _SCALE_BOW
        if sapc < _LO_CLIP:
            output = 0.0
        elif sapc < _LO_BOW_THRESH:
            output = sapc - sapc * _LO_BOW_FACTOR * _LO_BOW_OFFSET
        else:
            output = sapc - _LO_BOW_OFFSET
    else:
        # Reverse polarity: light text on dark background
        sapc = (bg_y ** _REV_BG - txt_y ** _REV_TXT) * _SCALE_WOB
        if sapc > -_LO_CLIP:
            output = 0.0
        elif sapc > -_LO_WOB_THRESH:
            output = sapc - sapc * _LO_WOB_FACTOR * _LO_WOB_OFFSET
        else:
            output = sapc + _LO_WOB_OFFSET

    return output * 100


def apca_contrast_hex(text_hex: str, bg_hex: str) -> float:
    return apca_contrast(hex_to_rgb(text_hex), hex_to_rgb(bg_hex))


def apca_rating(lc: float, use_case: APCAUseCase = defaults.DEFAULT_APCA_USE_CASE) -> APCARating:
    """Rate |Lc| against the thresholds for a use case."""
    try:
        pass_at, marginal_at = APCA_THRESHOLDS[use_case]
    except KeyError:
        raise ValueError(f"Unknown APCA use case: {use_case}") from None

    abs_lc = abs(lc)
    if abs_lc >= pass_at:
        return "Pass"
    if abs_lc >= marginal_at:
        return "Marginal"
    return "Fail"


# === Convenience ===

def best_text_color(bg_hex: str) -> str:
    """Pick black or white text for a background, whichever has more |Lc|."""
    bg = hex_to_rgb(bg_hex)
    white_lc = abs(apca_contrast(hex_to_rgb(WHITE), bg))
    black_lc = abs(apca_contrast(hex_to_rgb(BLACK), bg))
    return WHITE if white_lc > black_lc else BLACK


def _round_to(x: float, places: int) -> float:
    scale = 10 ** places
    return float(_round_half_up(x * scale)) / scale


def check_contrast(
    fg_hex: str,
    bg_hex: str,
    apca_use_case: APCAUseCase = defaults.DEFAULT_APCA_USE_CASE,
) -> ContrastResult:
    """Full contrast check. Ratio rounded to 2 places, Lc to 1; ratings use raw values."""
    ratio = wcag_contrast_hex(fg_hex, bg_hex)
    lc = apca_contrast_hex(fg_hex, bg_hex)
    return ContrastResult(
        wcag=WCAGResult(ratio=_round_to(ratio, 2), rating=wcag_rating(ratio)),
        apca=APCAResult(lc=_round_to(lc, 1), rating=apca_rating(lc, apca_use_case)),
    )
