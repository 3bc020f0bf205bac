"""Built-in seed presets for ramp generation.

Presets are named base colors with a default chroma scale, modeled on
the Radix named scales. Grays and earth tones use a reduced scale.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PresetTemplate:
    """A named ramp seed."""
    base_color: str
    chroma_scale: float = 1.0


PRESET_TEMPLATES: dict[str, PresetTemplate] = {
    # Neutrals
    "gray": PresetTemplate("#8b8d98", 0.3),
    "slate": PresetTemplate("#889096", 0.4),
    "sage": PresetTemplate("#7c8e84", 0.5),
    "olive": PresetTemplate("#898e79", 0.5),
    "sand": PresetTemplate("#9a9181", 0.5),
    # Reds / pinks
    "tomato": PresetTemplate("#e54d2e"),
    "red": PresetTemplate("#e5484d"),
    "ruby": PresetTemplate("#e54666"),
    "crimson": PresetTemplate("#e93d82"),
    "pink": PresetTemplate("#d6409f"),
    # Purples / blues
    "plum": PresetTemplate("#ab4aba"),
    "purple": PresetTemplate("#8e4ec6"),
    "violet": PresetTemplate("#6e56cf"),
    "iris": PresetTemplate("#5b5bd6"),
    "indigo": PresetTemplate("#3e63dd"),
    "blue": PresetTemplate("#0090ff"),
    "cyan": PresetTemplate("#00a2c7"),
    # Greens
    "teal": PresetTemplate("#12a594"),
    "jade": PresetTemplate("#29a383"),
    "green": PresetTemplate("#30a46c"),
    "grass": PresetTemplate("#46a758"),
    # Earth tones
    "bronze": PresetTemplate("#a18072", 0.6),
    "gold": PresetTemplate("#978365", 0.6),
    "brown": PresetTemplate("#ad7f58", 0.7),
    # Warm brights
    "orange": PresetTemplate("#f76b15"),
    "amber": PresetTemplate("#ffc53d"),
    "yellow": PresetTemplate("#ffe629"),
    # Light brights
    "lime": PresetTemplate("#bdee63", 0.9),
    "mint": PresetTemplate("#86ead4", 0.8),
    "sky": PresetTemplate("#7ce2fe", 0.8),
}


def get_preset(name: str) -> PresetTemplate | None:
    """Get a preset by name."""
    return PRESET_TEMPLATES.get(name)


def list_presets() -> list[str]:
    """List all available preset names."""
    return list(PRESET_TEMPLATES.keys())
