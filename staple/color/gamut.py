"""Gamut clamping for out-of-gamut OKLCH values.

Not all (L, C, H) combinations produce valid sRGB. High chroma at
extreme lightness is particularly problematic.

Clamping keeps L and H and reduces C until the color fits, found by
bisection on chroma. For fixed L and H, raising chroma eventually
leaves the gamut and never comes back, so the search is well defined.
"""

from __future__ import annotations

import logging

import numpy as np

from staple import defaults
from .oklch import OKLCH, RGB, oklch_to_rgb, oklch_to_rgb_array, rgb_to_hex

logger = logging.getLogger(__name__)


# === Gamut checking ===

def is_in_gamut(rgb: RGB) -> bool:
    """Check that every channel lies in [0, 255]."""
    return bool(is_in_gamut_array(rgb.as_array()))


def is_in_gamut_array(rgb: np.ndarray) -> np.ndarray:
    """Per-color gamut check for sRGB arrays (..., 3) on 0-255."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.all((rgb >= 0.0) & (rgb <= 255.0), axis=-1)


def _in_gamut_lch(L: np.ndarray, C: np.ndarray, H: np.ndarray) -> np.ndarray:
    rgb = oklch_to_rgb_array(np.stack([L, C, H], axis=-1), clamp=False)
    return is_in_gamut_array(rgb)


# === Max chroma search ===

def max_chroma_for_lh(
    L: np.ndarray,
    H: np.ndarray,
    C_max: np.ndarray,
    epsilon: float = defaults.GAMUT_EPSILON,
) -> np.ndarray:
    """Find the largest in-gamut chroma in [0, C_max] via binary search.

    Each color stops narrowing once its interval is below epsilon, so
    the result matches a one-color-at-a-time search.

    Returns:
        Lower bound of the final interval (always in gamut)
    """
    L = np.asarray(L, dtype=np.float64)
    H = np.asarray(H, dtype=np.float64)
    lo = np.zeros_like(L)
    hi = np.asarray(C_max, dtype=np.float64).copy()

    iterations = 0
    active = (hi - lo) > epsilon
    while np.any(active):
        mid = (lo + hi) / 2
        valid = _in_gamut_lch(L, mid, H)
        lo = np.where(active & valid, mid, lo)
        hi = np.where(active & ~valid, mid, hi)
        active = (hi - lo) > epsilon
        iterations += 1

    logger.debug("Chroma bisection converged in %d iterations", iterations)
    return lo


# === Clamping ===

def clamp_to_gamut_array(lch: np.ndarray, epsilon: float = defaults.GAMUT_EPSILON) -> np.ndarray:
    """Bring OKLCH colors (..., 3) into sRGB by reducing chroma.

    - L <= 0 becomes achromatic black, L >= 1 achromatic white
    - C <= 0 passes through unchanged
    - In-gamut colors pass through unchanged
    - Everything else gets the largest chroma that fits
    """
    lch = np.asarray(lch, dtype=np.float64)
    L, C, H = lch[..., 0], lch[..., 1], lch[..., 2]

    black = L <= 0
    white = L >= 1
    L_out = np.where(black, 0.0, np.where(white, 1.0, L))
    C_out = np.where(black | white, 0.0, C)

    candidates = ~black & ~white & (C > 0)
    needs_search = candidates & ~_in_gamut_lch(L, C, H)

    if np.any(needs_search):
        found = max_chroma_for_lh(L[needs_search], H[needs_search], C[needs_search], epsilon)
        C_out = C_out.copy()
        C_out[needs_search] = found

    return np.stack([L_out, C_out, H], axis=-1)


def clamp_to_gamut(lch: OKLCH, epsilon: float = defaults.GAMUT_EPSILON) -> OKLCH:
    """Clamp one OKLCH color to the sRGB gamut, preserving L and H."""
    L, C, H = clamp_to_gamut_array(lch.as_array(), epsilon)
    return OKLCH(float(L), float(C), float(H))


def oklch_to_hex(lch: OKLCH) -> str:
    """OKLCH -> '#rrggbb' with gamut clamping."""
    return rgb_to_hex(oklch_to_rgb(clamp_to_gamut(lch)))
