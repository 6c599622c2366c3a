"""
RGB color values and their textual encodings.

A ColorValue holds three 8-bit channels. Each source format encodes colors
differently (hex literals, decimal triplets, float components); the
constructors here are the only place those encodings are decoded.
"""

import re
from dataclasses import dataclass
from numbers import Integral, Real

import numpy as np

from .config.constants import FLOAT_CHANNEL_DIGITS
from .errors import MalformedColor, OutOfRange

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]{6}")


def float_to_byte(value: float) -> int:
    """
    Convert a [0.0, 1.0] channel intensity to a byte.

    Rounds half away from zero, then clamps to [0, 255].
    """
    scaled = np.float64(value) * 255.0
    rounded = np.sign(scaled) * np.floor(np.abs(scaled) + 0.5)
    return int(np.clip(rounded, 0, 255))


@dataclass(frozen=True)
class ColorValue:
    """A single RGB color, immutable once constructed."""

    red: int
    green: int
    blue: int

    def __post_init__(self):
        for channel in (self.red, self.green, self.blue):
            if (
                isinstance(channel, bool)
                or not isinstance(channel, Integral)
                or not 0 <= channel <= 255
            ):
                raise OutOfRange(f"channel value out of range [0, 255]: {channel!r}")

    @classmethod
    def from_hex(cls, text: str) -> "ColorValue":
        """
        Parse a hex color string.

        Args:
            text: "#RRGGBB" or "RRGGBB", case-insensitive

        Returns:
            Parsed color

        Raises:
            MalformedColor: If the text is not exactly 6 hex digits
        """
        digits = text.strip()
        if digits.startswith("#"):
            digits = digits[1:]
        if not _HEX_PATTERN.fullmatch(digits):
            raise MalformedColor(f"invalid hex color: {text!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def from_rgb_triplet(cls, red: int, green: int, blue: int) -> "ColorValue":
        """
        Construct from three integer channels.

        Raises:
            OutOfRange: If any value is not an integer in [0, 255]
        """
        return cls(red, green, blue)

    @classmethod
    def from_float_triplet(cls, red: float, green: float, blue: float) -> "ColorValue":
        """
        Construct from three [0.0, 1.0] channel intensities.

        Raises:
            MalformedColor: If a component is not numeric or outside [0.0, 1.0]
        """
        for component in (red, green, blue):
            if isinstance(component, bool) or not isinstance(component, Real):
                raise MalformedColor(f"color component is not numeric: {component!r}")
            if not 0.0 <= component <= 1.0:
                raise MalformedColor(
                    f"color component out of range [0.0, 1.0]: {component!r}"
                )
        return cls(float_to_byte(red), float_to_byte(green), float_to_byte(blue))

    def to_hex(self) -> str:
        """Render as lowercase "rrggbb" without a prefix."""
        return f"{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_rgb_triplet(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue

    def to_float_triplet(self) -> tuple[float, float, float]:
        """Render each channel as channel / 255 rounded to 8 decimal digits."""
        channels = np.array(self.to_rgb_triplet(), dtype=np.float64) / 255.0
        red, green, blue = (
            float(v) for v in np.round(channels, FLOAT_CHANNEL_DIGITS)
        )
        return red, green, blue
