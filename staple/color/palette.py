"""Palette building: seeds + generation params -> named light/dark palettes.

A palette is one ramp per mode plus alpha variants of each mode's
solid color. generate_palettes() derives the full set a theme needs
(brand, neutral and status colors) from as little as a primary seed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace

from staple import defaults
from .errors import InvalidRampOptions
from .ramp import HarmonyType, generate_alpha_ramp, generate_harmony, generate_ramp

logger = logging.getLogger(__name__)

# Tailwind-style shade names for ramp steps 2-12
SHADE_NAMES: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

_SOLID_INDEX = 8  # Output index of the main solid color (step 9)


@dataclass(frozen=True)
class Seeds:
    """Seed colors. Only primary is required."""
    primary: str
    secondary: str | None = None
    accent: str | None = None
    neutral: str | None = None
    success: str | None = None
    warn: str | None = None
    danger: str | None = None


@dataclass(frozen=True)
class GenerationParams:
    step_count: int = defaults.DEFAULT_RAMP_STEPS
    chroma_scale: float = defaults.DEFAULT_CHROMA_SCALE
    warm_cool_bias: float = defaults.DEFAULT_HUE_BIAS
    vibrant: bool = False

    def __post_init__(self):
        if self.step_count not in defaults.RAMP_STEP_CHOICES:
            raise InvalidRampOptions(f"Unsupported step count: {self.step_count}")
        if not defaults.MIN_CHROMA_SCALE <= self.chroma_scale <= defaults.MAX_CHROMA_SCALE:
            raise InvalidRampOptions(f"chroma_scale must be in [0, 2], got {self.chroma_scale}")
        if not defaults.MIN_HUE_BIAS <= self.warm_cool_bias <= defaults.MAX_HUE_BIAS:
            raise InvalidRampOptions(f"warm_cool_bias must be in [-1, 1], got {self.warm_cool_bias}")


@dataclass(frozen=True)
class Palette:
    name: str
    base_color: str
    light_steps: list[str]
    dark_steps: list[str]
    light_alpha_steps: list[str]
    dark_alpha_steps: list[str]


@dataclass(frozen=True)
class HarmonySuggestion:
    type: HarmonyType
    label: str
    description: str
    colors: list[str]


_HARMONY_LABELS: tuple[tuple[HarmonyType, str, str], ...] = (
    ("complementary", "Complementary", "Opposite on the color wheel, high contrast"),
    ("split-complementary", "Split Complementary", "Two colors adjacent to the complement"),
    ("analogous", "Analogous", "Adjacent colors, harmonious and unified"),
    ("triadic", "Triadic", "Three evenly spaced colors"),
    ("tetradic", "Tetradic", "Four colors in rectangular pattern"),
    ("monochrome", "Monochrome", "Variations in lightness only"),
)


def generate_single_palette(name: str, base_color: str, params: GenerationParams) -> Palette:
    """Light and dark ramps for one seed, plus alpha variants of the solid step."""
    chroma_scale = params.chroma_scale
    if params.vibrant:
        chroma_scale *= defaults.VIBRANT_CHROMA_MULTIPLIER

    ramps = {}
    for dark_mode in (False, True):
        ramps[dark_mode] = generate_ramp(
            base_color,
            steps=params.step_count,
            chroma_scale=chroma_scale,
            hue_bias=params.warm_cool_bias,
            dark_mode=dark_mode,
        )

    def solid(steps: list[str]) -> str:
        return steps[_SOLID_INDEX] if len(steps) > _SOLID_INDEX else base_color

    return Palette(
        name=name,
        base_color=base_color,
        light_steps=ramps[False],
        dark_steps=ramps[True],
        light_alpha_steps=generate_alpha_ramp(solid(ramps[False]), params.step_count),
        dark_alpha_steps=generate_alpha_ramp(solid(ramps[True]), params.step_count),
    )


def generate_palettes(seeds: Seeds, params: GenerationParams | None = None) -> list[Palette]:
    """Generate the full palette set.

    Order: primary, secondary, accent (only if seeded), neutral, success,
    warn, danger. A missing secondary comes from the primary's first
    analogous harmony. Neutrals are always muted.
    """
    params = params if params is not None else GenerationParams()

    secondary = seeds.secondary or generate_harmony(seeds.primary, "analogous")[0]
    neutral_params = replace(
        params,
        chroma_scale=min(params.chroma_scale * defaults.NEUTRAL_CHROMA_FACTOR, defaults.NEUTRAL_CHROMA_CAP),
    )

    palettes = [
        generate_single_palette("primary", seeds.primary, params),
        generate_single_palette("secondary", secondary, params),
    ]
    if seeds.accent:
        palettes.append(generate_single_palette("accent", seeds.accent, params))
    palettes.append(
        generate_single_palette("neutral", seeds.neutral or defaults.DEFAULT_NEUTRAL_SEED, neutral_params)
    )
    palettes.append(generate_single_palette("success", seeds.success or defaults.DEFAULT_SUCCESS_SEED, params))
    palettes.append(generate_single_palette("warn", seeds.warn or defaults.DEFAULT_WARN_SEED, params))
    palettes.append(generate_single_palette("danger", seeds.danger or defaults.DEFAULT_DANGER_SEED, params))

    logger.debug("Generated %d palettes from primary %s", len(palettes), seeds.primary)
    return palettes


def harmony_suggestions(base_color: str) -> list[HarmonySuggestion]:
    """One suggestion per harmony type, in a fixed order."""
    return [
        HarmonySuggestion(kind, label, description, generate_harmony(base_color, kind))
        for kind, label, description in _HARMONY_LABELS
    ]


# === CSS export ===

def to_slug(name: str) -> str:
    """Lowercase CSS-safe identifier; 'custom' when nothing survives."""
    slug = re.sub(r"[^a-z0-9-]", "-", name.lower())
    slug = re.sub(r"-+", "-", slug).strip("-")
    return slug or "custom"


def ramp_to_shades(ramp: list[str]) -> list[tuple[int, str]]:
    """Map a 12-step ramp onto shades 50-950, dropping the app background step."""
    if len(ramp) != 12:
        raise InvalidRampOptions(f"Shade mapping needs a 12-step ramp, got {len(ramp)}")
    return [(shade, ramp[i + 1]) for i, shade in enumerate(SHADE_NAMES)]


def palette_css(name: str, ramp: list[str]) -> str:
    """Render a 12-step ramp as CSS custom properties on :root."""
    slug = to_slug(name)
    lines = [f"  --st-{slug}-{shade}: {hex_color};" for shade, hex_color in ramp_to_shades(ramp)]
    return ":root {\n" + "\n".join(lines) + "\n}"
