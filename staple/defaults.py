"""Central place for staple color default settings."""

# Ramp generation
DEFAULT_RAMP_STEPS: int = 12
RAMP_STEP_CHOICES: tuple[int, ...] = (8, 10, 12)
DEFAULT_CHROMA_SCALE: float = 1.0
MIN_CHROMA_SCALE: float = 0.0
MAX_CHROMA_SCALE: float = 2.0
DEFAULT_HUE_BIAS: float = 0.0
MIN_HUE_BIAS: float = -1.0
MAX_HUE_BIAS: float = 1.0
HUE_BIAS_DEGREES: float = 10.0  # Degrees of hue rotation per unit of bias

# Gamut clamping
GAMUT_EPSILON: float = 1e-4  # Chroma bisection stops below this interval width

# Harmony
MONOCHROME_LIGHTNESS_DELTA: float = 0.2
MONOCHROME_MIN_LIGHTNESS: float = 0.15
MONOCHROME_MAX_LIGHTNESS: float = 0.95

# Contrast
DEFAULT_APCA_USE_CASE: str = "body"

# Palette builder
VIBRANT_CHROMA_MULTIPLIER: float = 1.2
NEUTRAL_CHROMA_FACTOR: float = 0.3
NEUTRAL_CHROMA_CAP: float = 0.5
DEFAULT_NEUTRAL_SEED: str = "#64748b"  # Slate-like neutral
DEFAULT_SUCCESS_SEED: str = "#16a34a"
DEFAULT_WARN_SEED: str = "#d97706"
DEFAULT_DANGER_SEED: str = "#dc2626"
