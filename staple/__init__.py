"""staple: design-token color science (OKLCH conversions, contrast, ramps)."""

__version__ = "0.1.0"
