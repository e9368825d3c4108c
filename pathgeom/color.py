from dataclasses import dataclass, replace
from typing import Optional, Tuple

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _clamp01(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


def _to_byte(value: float) -> int:
    # Truncates, with slack so that rgb() channels survive the round trip
    return int(_clamp01(value) * 255.0 + 1e-6)


@dataclass(frozen=True)
class Color:
    """RGBA color with float channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @staticmethod
    def rgb(r: int, g: int, b: int) -> "Color":
        """Create an opaque color from 8-bit channels."""
        return Color(r / 255.0, g / 255.0, b / 255.0, 1.0)

    @staticmethod
    def rgba(r: int, g: int, b: int, a: float) -> "Color":
        return Color(r / 255.0, g / 255.0, b / 255.0, _clamp01(a))

    @staticmethod
    def from_hex(value: str) -> Optional["Color"]:
        """
        Parse ``"#RRGGBB"`` or ``"RRGGBB"``.

        Returns:
            The color, or None if ``value`` is not exactly six hex digits
        """
        digits = value[1:] if value.startswith("#") else value
        if len(digits) != 6 or not all(ch in _HEX_DIGITS for ch in digits):
            return None
        return Color.rgb(
            int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
        )

    def to_hex(self) -> str:
        r, g, b, _ = self.to_rgba8()
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        return (
            _to_byte(self.r), _to_byte(self.g), _to_byte(self.b), _to_byte(self.a)
        )

    def lerp(self, other: "Color", t: float) -> "Color":
        s = 1.0 - t
        return Color(
            self.r * s + other.r * t,
            self.g * s + other.g * t,
            self.b * s + other.b * t,
            self.a * s + other.a * t,
        )

    def with_alpha(self, alpha: float) -> "Color":
        return replace(self, a=_clamp01(alpha))

    def __str__(self) -> str:
        return self.to_hex()


Color.WHITE = Color(1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0)
Color.RED = Color(1.0, 0.0, 0.0)
Color.GREEN = Color(0.0, 1.0, 0.0)
Color.BLUE = Color(0.0, 0.0, 1.0)
Color.YELLOW = Color(1.0, 1.0, 0.0)
Color.CYAN = Color(0.0, 1.0, 1.0)
Color.MAGENTA = Color(1.0, 0.0, 1.0)
Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
