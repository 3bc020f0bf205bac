"""Perceptual color ramps and harmonies from a single seed color.

Ramps follow the Radix 12-step convention:
- 1-2: App/subtle backgrounds
- 3-5: Component backgrounds (normal, hover, active)
- 6-8: Borders
- 9: Solid backgrounds (main brand color)
- 10: Solid hover
- 11: Low contrast text
- 12: High contrast text

Each step has a target lightness and a chroma multiplier (relative to
the seed's chroma). 8- and 10-step ramps pick a subset of the 12 steps.

Example:
    from staple.color import generate_ramp

    ramp = generate_ramp("#2563eb", steps=10, dark_mode=True)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Mapping

import numpy as np

from staple import defaults
from .errors import InvalidRampOptions
from .gamut import clamp_to_gamut_array, oklch_to_hex
from .oklch import OKLCH, RGB, hex_to_oklch, normalize_hex, oklch_to_rgb_array, rgb_to_hex, wrap_hue
from .presets import PRESET_TEMPLATES

logger = logging.getLogger(__name__)

HarmonyType = Literal[
    "complementary",
    "split-complementary",
    "analogous",
    "triadic",
    "tetradic",
    "monochrome",
]


def _table(values) -> np.ndarray:
    t = np.array(values, dtype=np.float64)
    t.setflags(write=False)
    return t


# Indexed by nominal step - 1
LIGHTNESS_TARGETS_LIGHT = _table((
    0.99,  # 1  Near white
    0.98,  # 2  Subtle background
    0.96,  # 3  UI element background
    0.93,  # 4  Hovered element
    0.90,  # 5  Active/selected element
    0.85,  # 6  Subtle border
    0.78,  # 7  UI element border, focus ring
    0.68,  # 8  Solid border
    0.55,  # 9  Solid background (main color)
    0.50,  # 10 Hover state
    0.42,  # 11 Low contrast text
    0.25,  # 12 High contrast text
))

LIGHTNESS_TARGETS_DARK = _table((
    0.11,  # 1  Near black
    0.13,  # 2
    0.16,  # 3
    0.19,  # 4
    0.22,  # 5
    0.27,  # 6
    0.34,  # 7
    0.42,  # 8
    0.55,  # 9  Solid background (main color)
    0.62,  # 10
    0.72,  # 11
    0.93,  # 12 High contrast text
))

# Early steps are nearly neutral
CHROMA_MULTIPLIERS_LIGHT = _table((
    0.02, 0.04, 0.08, 0.14, 0.22, 0.35, 0.50, 0.70, 1.00, 0.95, 0.80, 0.45,
))

CHROMA_MULTIPLIERS_DARK = _table((
    0.02, 0.04, 0.08, 0.14, 0.20, 0.30, 0.45, 0.65, 1.00, 1.10, 0.85, 0.15,
))

# Output position -> nominal step
STEP_MAPS: dict[int, tuple[int, ...]] = {
    12: (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12),
    10: (1, 2, 3, 4, 5, 7, 8, 9, 10, 12),
    8: (1, 3, 5, 7, 8, 9, 11, 12),
}

ALPHA_VALUES: dict[int, tuple[float, ...]] = {
    12: (0.02, 0.04, 0.08, 0.12, 0.18, 0.26, 0.36, 0.48, 0.64, 0.72, 0.82, 0.94),
    10: (0.03, 0.06, 0.12, 0.20, 0.30, 0.42, 0.58, 0.72, 0.84, 0.95),
    8: (0.05, 0.12, 0.25, 0.40, 0.58, 0.75, 0.88, 0.96),
}

# Hue offsets in degrees; monochrome varies lightness instead
HARMONY_OFFSETS: dict[str, tuple[float, ...]] = {
    "complementary": (180,),
    "split-complementary": (150, 210),
    "analogous": (30, 330),
    "triadic": (120, 240),
    "tetradic": (90, 180, 270),
    "monochrome": (),
}


def _check_steps(steps: int) -> None:
    if steps not in defaults.RAMP_STEP_CHOICES:
        raise InvalidRampOptions(
            f"Unsupported step count: {steps} (expected one of {defaults.RAMP_STEP_CHOICES})"
        )


@dataclass(frozen=True)
class RampOptions:
    """Ramp generation settings.

    Attributes:
        base_color: Seed hex color
        steps: 8, 10 or 12
        chroma_scale: Chroma multiplier (0.5 = muted, 1.0 = normal, 1.5 = vibrant)
        hue_bias: Warm/cool shift in [-1, 1], 10 degrees of hue per unit
        dark_mode: Use the dark-mode lightness and chroma tables
        locked_steps: 1-based output position -> hex override. Positions are
            counted in the generated ramp, so position 4 of an 8-step ramp
            is nominal step 7 and position 5 is nominal step 8.
    """
    base_color: str
    steps: int = defaults.DEFAULT_RAMP_STEPS
    chroma_scale: float = defaults.DEFAULT_CHROMA_SCALE
    hue_bias: float = defaults.DEFAULT_HUE_BIAS
    dark_mode: bool = False
    locked_steps: Mapping[int, str] = field(default_factory=dict)

    def __post_init__(self):
        _check_steps(self.steps)
        if not defaults.MIN_HUE_BIAS <= self.hue_bias <= defaults.MAX_HUE_BIAS:
            raise InvalidRampOptions(f"hue_bias must be in [-1, 1], got {self.hue_bias}")
        if self.chroma_scale < defaults.MIN_CHROMA_SCALE:
            raise InvalidRampOptions(f"chroma_scale must be >= 0, got {self.chroma_scale}")
        for position in self.locked_steps:
            if not isinstance(position, int):
                raise InvalidRampOptions(f"Locked step must be an int, got {position!r}")
            if not 1 <= position <= self.steps:
                raise InvalidRampOptions(
                    f"Locked step {position} outside 1..{self.steps}"
                )


def generate_ramp(base_color: str | RampOptions, **options) -> list[str]:
    """Generate a ramp of lowercase '#rrggbb' colors, lightest role first.

    Args:
        base_color: Seed hex color, or a complete RampOptions
        **options: RampOptions fields when base_color is a string

    Raises:
        InvalidHexColor: Seed or a locked override is malformed
        InvalidRampOptions: Unsupported step count, bias or lock position
    """
    if isinstance(base_color, RampOptions):
        if options:
            raise TypeError("Pass either RampOptions or keyword options, not both")
        opts = base_color
    else:
        opts = RampOptions(base_color=base_color, **options)

    base = hex_to_oklch(opts.base_color)
    if opts.dark_mode:
        lightness, chroma_mult = LIGHTNESS_TARGETS_DARK, CHROMA_MULTIPLIERS_DARK
    else:
        lightness, chroma_mult = LIGHTNESS_TARGETS_LIGHT, CHROMA_MULTIPLIERS_LIGHT

    idx = np.array(STEP_MAPS[opts.steps]) - 1
    L = lightness[idx]
    C = base.C * chroma_mult[idx] * opts.chroma_scale
    H = np.full_like(L, wrap_hue(base.H + opts.hue_bias * defaults.HUE_BIAS_DEGREES))

    targets = clamp_to_gamut_array(np.stack([L, C, H], axis=-1))
    rgb = oklch_to_rgb_array(targets)
    ramp = [rgb_to_hex(RGB(*channels)) for channels in rgb]

    for position, override in opts.locked_steps.items():
        ramp[position - 1] = normalize_hex(override)

    logger.debug(
        "Generated %d-step %s ramp from %s (chroma_scale=%s, hue_bias=%s, locked=%s)",
        opts.steps, "dark" if opts.dark_mode else "light", opts.base_color,
        opts.chroma_scale, opts.hue_bias, sorted(opts.locked_steps),
    )
    return ramp


def generate_alpha_ramp(base_color: str, steps: int = defaults.DEFAULT_RAMP_STEPS) -> list[str]:
    """Alpha variants of one color as '#rrggbbaa' strings, most transparent first."""
    _check_steps(steps)
    base = normalize_hex(base_color)
    return [base + f"{int(np.floor(alpha * 255 + 0.5)):02x}" for alpha in ALPHA_VALUES[steps]]


def generate_harmony(base_color: str, harmony: HarmonyType) -> list[str]:
    """Colors related to base_color by fixed hue offsets (base not included).

    Monochrome instead returns a lighter and a darker variant, L +/- 0.2
    kept within [0.15, 0.95].
    """
    try:
        offsets = HARMONY_OFFSETS[harmony]
    except KeyError:
        raise InvalidRampOptions(f"Unknown harmony type: {harmony}") from None

    base = hex_to_oklch(base_color)

    if harmony == "monochrome":
        colors = [
            OKLCH(min(base.L + defaults.MONOCHROME_LIGHTNESS_DELTA, defaults.MONOCHROME_MAX_LIGHTNESS), base.C, base.H),
            OKLCH(max(base.L - defaults.MONOCHROME_LIGHTNESS_DELTA, defaults.MONOCHROME_MIN_LIGHTNESS), base.C, base.H),
        ]
    else:
        colors = [OKLCH(base.L, base.C, float(wrap_hue(base.H + offset))) for offset in offsets]

    return [oklch_to_hex(lch) for lch in colors]


def generate_preset_ramp(preset: str, **options) -> list[str]:
    """Generate a ramp seeded from a named preset.

    The preset's chroma scale applies unless chroma_scale is given.
    """
    template = PRESET_TEMPLATES.get(preset)
    if template is None:
        raise InvalidRampOptions(f"Unknown preset: {preset}")
    options.setdefault("chroma_scale", template.chroma_scale)
    return generate_ramp(template.base_color, **options)
