"""Color science for design tokens.

This module provides:
- sRGB <-> OKLab <-> OKLCH conversions and strict hex parsing
- Gamut clamping by chroma reduction
- WCAG 2.1 and APCA contrast checks
- 8/10/12-step perceptual ramps, alpha ramps and hue harmonies
- Palette building and batch contrast audits on top of those

Example:
    from staple.color import generate_ramp, check_contrast

    ramp = generate_ramp("#2563eb")
    result = check_contrast(ramp[11], ramp[0])
    result.wcag.rating  # 'AAA'
"""

from .errors import ColorError, InvalidHexColor, InvalidRampOptions

from .oklch import (
    RGB,
    OKLab,
    OKLCH,
    srgb_to_linear,
    linear_to_srgb,
    linear_rgb_to_oklab,
    oklab_to_linear_rgb,
    oklab_to_oklch_array,
    oklch_to_oklab_array,
    rgb_to_oklch_array,
    oklch_to_rgb_array,
    rgb_to_oklab,
    oklab_to_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    rgb_to_oklch,
    oklch_to_rgb,
    hex_to_rgb,
    rgb_to_hex,
    hex_to_oklch,
    normalize_hex,
    interpolate_oklch,
    wrap_hue,
)

from .gamut import (
    is_in_gamut,
    is_in_gamut_array,
    max_chroma_for_lh,
    clamp_to_gamut,
    clamp_to_gamut_array,
    oklch_to_hex,
)

from .contrast import (
    ContrastResult,
    WCAGResult,
    APCAResult,
    relative_luminance,
    wcag_contrast,
    wcag_contrast_hex,
    wcag_rating,
    apca_contrast,
    apca_contrast_hex,
    apca_rating,
    best_text_color,
    check_contrast,
)

from .ramp import (
    RampOptions,
    HarmonyType,
    generate_ramp,
    generate_alpha_ramp,
    generate_harmony,
    generate_preset_ramp,
)

from .presets import PRESET_TEMPLATES, PresetTemplate, get_preset, list_presets

from .palette import (
    Seeds,
    GenerationParams,
    Palette,
    HarmonySuggestion,
    generate_single_palette,
    generate_palettes,
    harmony_suggestions,
    palette_css,
)

from .audit import (
    ColorToken,
    PairResult,
    AuditSummary,
    audit_token_pairs,
    filter_pairs,
    summarize,
)

__all__ = [
    # Errors
    'ColorError',
    'InvalidHexColor',
    'InvalidRampOptions',
    # Value types
    'RGB',
    'OKLab',
    'OKLCH',
    # Array conversions
    'srgb_to_linear',
    'linear_to_srgb',
    'linear_rgb_to_oklab',
    'oklab_to_linear_rgb',
    'oklab_to_oklch_array',
    'oklch_to_oklab_array',
    'rgb_to_oklch_array',
    'oklch_to_rgb_array',
    # Record conversions
    'rgb_to_oklab',
    'oklab_to_rgb',
    'oklab_to_oklch',
    'oklch_to_oklab',
    'rgb_to_oklch',
    'oklch_to_rgb',
    'hex_to_rgb',
    'rgb_to_hex',
    'hex_to_oklch',
    'normalize_hex',
    'interpolate_oklch',
    'wrap_hue',
    # Gamut
    'is_in_gamut',
    'is_in_gamut_array',
    'max_chroma_for_lh',
    'clamp_to_gamut',
    'clamp_to_gamut_array',
    'oklch_to_hex',
    # Contrast
    'ContrastResult',
    'WCAGResult',
    'APCAResult',
    'relative_luminance',
    'wcag_contrast',
    'wcag_contrast_hex',
    'wcag_rating',
    'apca_contrast',
    'apca_contrast_hex',
    'apca_rating',
    'best_text_color',
    'check_contrast',
    # Ramps
    'RampOptions',
    'HarmonyType',
    'generate_ramp',
    'generate_alpha_ramp',
    'generate_harmony',
    'generate_preset_ramp',
    'PRESET_TEMPLATES',
    'PresetTemplate',
    'get_preset',
    'list_presets',
    # Palettes
    'Seeds',
    'GenerationParams',
    'Palette',
    'HarmonySuggestion',
    'generate_single_palette',
    'generate_palettes',
    'harmony_suggestions',
    'palette_css',
    # Audit
    'ColorToken',
    'PairResult',
    'AuditSummary',
    'audit_token_pairs',
    'filter_pairs',
    'summarize',
]
