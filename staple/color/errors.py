"""Color parsing and generation errors."""


class ColorError(Exception):
    """Base class for color errors."""
    pass


class InvalidHexColor(ColorError, ValueError):
    """String is not a strict 6-digit hex color."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


class InvalidRampOptions(ColorError, ValueError):
    """Ramp, harmony or palette options outside the supported set."""
    pass
