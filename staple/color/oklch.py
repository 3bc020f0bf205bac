"""OKLCH color space conversions and hex parsing.

Reference: https://bottosson.github.io/posts/oklab/

Two layers:
- Array functions take numpy arrays with channels on the last axis,
  so a single color is shape (3,) and a batch is (N, 3).
- Record functions take and return RGB / OKLab / OKLCH values.

sRGB channels are on the 0-255 scale throughout.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import numpy as np

from .errors import InvalidHexColor


def _matrix(rows) -> np.ndarray:
    m = np.array(rows, dtype=np.float64)
    m.setflags(write=False)
    return m


# === OKLab <-> Linear RGB matrices ===
# From Björn Ottosson's reference implementation

# Linear RGB -> LMS
_RGB_TO_LMS = _matrix((
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
))

# LMS cube root -> OKLab
_LMS_TO_OKLAB = _matrix((
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
))

# OKLab -> LMS cube root
_OKLAB_TO_LMS = _matrix((
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
))

# LMS -> Linear RGB
_LMS_TO_RGB = _matrix((
    (+4.0767416621, -3.3077115913, +0.2309699292),
    (-1.2684380046, +2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, +1.7076147010),
))

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


# === Value types ===

@dataclass(frozen=True)
class RGB:
    """sRGB color, channels 0-255.

    Channels are integers once rounded. Unclamped conversions used for
    gamut testing may leave them outside [0, 255].
    """
    r: int
    g: int
    b: int

    def as_array(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b], dtype=np.float64)


@dataclass(frozen=True)
class OKLab:
    """OKLab color: L in [0, 1], a and b roughly in [-0.4, 0.4]."""
    L: float
    a: float
    b: float

    def as_array(self) -> np.ndarray:
        return np.array([self.L, self.a, self.b], dtype=np.float64)


@dataclass(frozen=True)
class OKLCH:
    """OKLCH color: L in [0, 1], C >= 0, H in degrees [0, 360)."""
    L: float
    C: float
    H: float

    def as_array(self) -> np.ndarray:
        return np.array([self.L, self.C, self.H], dtype=np.float64)


# === Helpers ===

def wrap_hue(H):
    """Wrap hue degrees into [0, 360)."""
    H = np.mod(H, 360.0)
    # Tiny negative inputs round up to exactly 360.0
    H = np.where(H >= 360.0, H - 360.0, H)
    return H[()]


def _round_half_up(x):
    return np.floor(np.asarray(x, dtype=np.float64) + 0.5)


def _gamma_decode(v: np.ndarray) -> np.ndarray:
    """sRGB -> linear on the unit scale."""
    low = v / 12.92
    high = np.power((np.maximum(v, 0.04045) + 0.055) / 1.055, 2.4)
    return np.where(v <= 0.04045, low, high)


def _gamma_encode(x: np.ndarray) -> np.ndarray:
    """Linear -> sRGB on the unit scale, unclamped."""
    low = x * 12.92
    high = 1.055 * np.power(np.maximum(x, 0.0031308), 1 / 2.4) - 0.055
    return np.where(x <= 0.0031308, low, high)


# === Array conversions ===

def srgb_to_linear(channel):
    """sRGB channel(s) 0-255 -> linear light 0-1."""
    v = np.asarray(channel, dtype=np.float64) / 255.0
    return _gamma_decode(v)[()]


def linear_to_srgb(x, clamp: bool = True):
    """Linear light -> sRGB channel(s), rounded to integers.

    With clamp=False out-of-gamut values are kept (e.g. -3 or 270) so
    callers can tell how far a color sits outside sRGB.
    """
    v = _round_half_up(_gamma_encode(np.asarray(x, dtype=np.float64)) * 255.0)
    if clamp:
        v = np.clip(v, 0.0, 255.0)
    return v[()]


def linear_rgb_to_oklab(rgb: np.ndarray) -> np.ndarray:
    """Linear RGB (..., 3) -> OKLab (..., 3) via LMS intermediate."""
    lms = np.asarray(rgb, dtype=np.float64) @ _RGB_TO_LMS.T
    # cbrt keeps the sign for slightly negative LMS values
    return np.cbrt(lms) @ _LMS_TO_OKLAB.T


def oklab_to_linear_rgb(lab: np.ndarray) -> np.ndarray:
    """OKLab (..., 3) -> linear RGB (..., 3) via LMS intermediate."""
    lms_ = np.asarray(lab, dtype=np.float64) @ _OKLAB_TO_LMS.T
    return (lms_ ** 3) @ _LMS_TO_RGB.T


def oklab_to_oklch_array(lab: np.ndarray) -> np.ndarray:
    """OKLab -> OKLCH. H in degrees [0, 360)."""
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    C = np.hypot(a, b)
    H = wrap_hue(np.degrees(np.arctan2(b, a)))
    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab_array(lch: np.ndarray) -> np.ndarray:
    """OKLCH -> OKLab. H in degrees."""
    lch = np.asarray(lch, dtype=np.float64)
    L, C, H = lch[..., 0], lch[..., 1], lch[..., 2]
    H_rad = np.radians(H)
    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


def rgb_to_oklch_array(rgb: np.ndarray) -> np.ndarray:
    """sRGB (..., 3) on 0-255 -> OKLCH (..., 3)."""
    return oklab_to_oklch_array(linear_rgb_to_oklab(srgb_to_linear(rgb)))


def oklch_to_rgb_array(lch: np.ndarray, clamp: bool = True) -> np.ndarray:
    """OKLCH (..., 3) -> rounded sRGB (..., 3) on 0-255.

    Args:
        lch: OKLCH values, hue in degrees
        clamp: Clip channels to [0, 255]. Gamut checks pass False.
    """
    linear = oklab_to_linear_rgb(oklch_to_oklab_array(lch))
    return np.asarray(linear_to_srgb(linear, clamp=clamp))


# === Record conversions ===

def _rgb_from_array(v: np.ndarray) -> RGB:
    return RGB(int(v[0]), int(v[1]), int(v[2]))


def rgb_to_oklab(rgb: RGB) -> OKLab:
    """Convert RGB to OKLab."""
    L, a, b = linear_rgb_to_oklab(srgb_to_linear(rgb.as_array()))
    return OKLab(float(L), float(a), float(b))


def oklab_to_rgb(lab: OKLab, clamp: bool = True) -> RGB:
    """Convert OKLab to RGB, rounding (and by default clamping) channels."""
    linear = oklab_to_linear_rgb(lab.as_array())
    return _rgb_from_array(linear_to_srgb(linear, clamp=clamp))


def oklab_to_oklch(lab: OKLab) -> OKLCH:
    """Convert OKLab to OKLCH."""
    L, C, H = oklab_to_oklch_array(lab.as_array())
    return OKLCH(float(L), float(C), float(H))


def oklch_to_oklab(lch: OKLCH) -> OKLab:
    """Convert OKLCH to OKLab."""
    L, a, b = oklch_to_oklab_array(lch.as_array())
    return OKLab(float(L), float(a), float(b))


def rgb_to_oklch(rgb: RGB) -> OKLCH:
    return oklab_to_oklch(rgb_to_oklab(rgb))


def oklch_to_rgb(lch: OKLCH, clamp: bool = True) -> RGB:
    """Convert OKLCH to RGB. No chroma reduction, see gamut.clamp_to_gamut."""
    return oklab_to_rgb(oklch_to_oklab(lch), clamp=clamp)


# === Hex ===

def hex_to_rgb(hex_color: str) -> RGB:
    """Parse '#rrggbb' (case-insensitive, '#' optional) to RGB.

    Raises:
        InvalidHexColor: If the string is not exactly six hex digits
    """
    if not isinstance(hex_color, str):
        raise InvalidHexColor(hex_color)
    match = _HEX_RE.fullmatch(hex_color)
    if match is None:
        raise InvalidHexColor(hex_color)
    r, g, b = (int(part, 16) for part in match.groups())
    return RGB(r, g, b)


def rgb_to_hex(rgb: RGB) -> str:
    """Format RGB as lowercase '#rrggbb', clamping and rounding channels."""
    channels = np.clip(_round_half_up(rgb.as_array()), 0, 255).astype(int)
    return "#" + "".join(f"{c:02x}" for c in channels)


def normalize_hex(hex_color: str) -> str:
    """Validate a hex color and return it as lowercase '#rrggbb'."""
    return rgb_to_hex(hex_to_rgb(hex_color))


def hex_to_oklch(hex_color: str) -> OKLCH:
    return rgb_to_oklch(hex_to_rgb(hex_color))


def interpolate_oklch(start: OKLCH, end: OKLCH, t: float) -> OKLCH:
    """Blend two OKLCH colors, taking the shorter way around the hue circle."""
    dh = end.H - start.H
    if dh > 180:
        dh -= 360
    elif dh < -180:
        dh += 360

    return OKLCH(
        L=start.L + (end.L - start.L) * t,
        C=start.C + (end.C - start.C) * t,
        H=float(wrap_hue(start.H + dh * t)),
    )
