"""
Color value types.

Components are kept in the 0-1 range. Values given on the 0-255 scale are
detected by their L1 norm and scaled down on construction::

    RGB(255, 128, 0).g   # 0.50196...
    RGB(1.0, 0.5, 0.0).g  # 0.5
"""

import logging
from typing import Union

import numpy as np

from blendah.constants import MAX_VALUE, Norm
from blendah.vector import NumericVector

logger = logging.getLogger(__name__)


class _Color:
    _CHANNELS = 3

    def __init__(self, *values: float):
        if len(values) != self._CHANNELS:
            raise TypeError(
                f"{self.__class__.__name__} takes {self._CHANNELS} components, "
                f"got {len(values)}"
            )
        self._vector = self._normalize(NumericVector(values))

    @classmethod
    def _normalize(cls, vector: NumericVector) -> NumericVector:
        # Components are on the 0-255 scale unless they all fit in [0, 1].
        if vector.norm(Norm.L1) > cls._CHANNELS:
            return vector.scalar_multiply(1.0 / MAX_VALUE)
        return vector

    @property
    def vector(self) -> NumericVector:
        return NumericVector(self._vector)

    @property
    def r(self) -> float:
        return self._vector.get(0)

    @property
    def g(self) -> float:
        return self._vector.get(1)

    @property
    def b(self) -> float:
        return self._vector.get(2)

    def to_bytes(self) -> tuple:
        """Components on the 0-255 scale, rounded and clamped."""
        values = np.clip(np.rint(self._vector.elements * MAX_VALUE), 0, MAX_VALUE)
        return tuple(int(x) for x in values)

    def to_rgba8(self) -> tuple:
        """RGBA8 pixel value of the color."""
        return self.to_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Color) or type(self) is not type(other):
            return NotImplemented
        return self._vector.isclose(other._vector)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "%s(%s)" % (
            self.__class__.__name__,
            ", ".join("%g" % x for x in self._vector.tolist()),
        )


class RGB(_Color):
    """Opaque color."""

    _CHANNELS = 3

    def to_rgba8(self) -> tuple:
        return self.to_bytes() + (MAX_VALUE,)


class RGBA(_Color):
    """Color with an alpha component."""

    _CHANNELS = 4

    @property
    def a(self) -> float:
        return self._vector.get(3)


Color = Union[RGB, RGBA]


def parse_color(text: str) -> Color:
    """
    Parse a comma-separated color, e.g. ``"255,255,255"`` or
    ``"0.5,0.5,0.5,1"``.
    """
    try:
        values = [float(x) for x in text.split(",")]
    except ValueError as e:
        raise ValueError(f"Invalid color: {text!r}") from e
    if len(values) == 3:
        return RGB(*values)
    if len(values) == 4:
        return RGBA(*values)
    raise ValueError(f"Color must have 3 or 4 components, got {text!r}")
