"""
Typed angle values.

``Degrees`` and ``Radians`` are plain floats that remember their unit, so an
angle can be handed to any API that expects a number while still converting
explicitly when the unit matters.
"""

import math

from pathgeom.constants import TAU


class Degrees(float):
    """An angle measured in degrees."""

    ZERO: "Degrees"
    RIGHT: "Degrees"
    UP: "Degrees"
    LEFT: "Degrees"
    DOWN: "Degrees"
    FULL_CIRCLE: "Degrees"

    def to_radians(self) -> "Radians":
        return Radians(math.radians(self))

    def normalized(self) -> "Degrees":
        """Wrap into the range [0, 360)."""
        value = math.fmod(float(self), 360.0)
        if value < 0.0:
            value += 360.0
        if value >= 360.0:
            value = 0.0
        return Degrees(value)

    def sin(self) -> float:
        return math.sin(math.radians(self))

    def cos(self) -> float:
        return math.cos(math.radians(self))

    def tan(self) -> float:
        return math.tan(math.radians(self))

    def __repr__(self) -> str:
        return f"Degrees({float(self)})"


class Radians(float):
    """An angle measured in radians."""

    ZERO: "Radians"
    RIGHT: "Radians"
    UP: "Radians"
    LEFT: "Radians"
    DOWN: "Radians"
    FULL_CIRCLE: "Radians"

    def to_degrees(self) -> Degrees:
        return Degrees(math.degrees(self))

    def normalized(self) -> "Radians":
        """Wrap into the range [0, 2*pi)."""
        value = math.fmod(float(self), TAU)
        if value < 0.0:
            value += TAU
        if value >= TAU:
            value = 0.0
        return Radians(value)

    def sin(self) -> float:
        return math.sin(self)

    def cos(self) -> float:
        return math.cos(self)

    def tan(self) -> float:
        return math.tan(self)

    def __repr__(self) -> str:
        return f"Radians({float(self)})"


Degrees.ZERO = Degrees(0.0)
Degrees.RIGHT = Degrees(0.0)
Degrees.UP = Degrees(90.0)
Degrees.LEFT = Degrees(180.0)
Degrees.DOWN = Degrees(270.0)
Degrees.FULL_CIRCLE = Degrees(360.0)

Radians.ZERO = Radians(0.0)
Radians.RIGHT = Radians(0.0)
Radians.UP = Radians(math.pi / 2.0)
Radians.LEFT = Radians(math.pi)
Radians.DOWN = Radians(3.0 * math.pi / 2.0)
Radians.FULL_CIRCLE = Radians(TAU)


def to_radians(angle: float) -> float:
    """Interpret ``angle`` in radians unless it is tagged as ``Degrees``."""
    if isinstance(angle, Degrees):
        return float(angle.to_radians())
    return float(angle)
