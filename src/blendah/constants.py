"""
Various constants for blendah
"""

from enum import Enum


class BlendMode(str, Enum):
    """
    Blend mode keys.

    The values match the strings accepted by the command line interface, so
    ``BlendMode("multiply")`` resolves a user-supplied mode.
    """

    ADDITIVE = "additive"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    DIFFERENCE = "difference"
    ALPHA = "alpha"

    def __str__(self) -> str:
        return self.value


class Norm(str, Enum):
    """
    Vector norm types.
    """

    L1 = "L1"
    L2 = "L2"


#: Number of channels per pixel in an RGBA8 buffer.
CHANNELS = 4

#: Maximum value of an 8-bit channel.
MAX_VALUE = 255
