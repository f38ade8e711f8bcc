"""Utility functions for composite operations."""

from typing import TYPE_CHECKING, Union, overload

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from blendah.api.raster_image import RasterImage


def divide(a: NDArray[np.floating], b: NDArray[np.floating]) -> NDArray[np.floating]:
    """Safe division for color ops."""
    with np.errstate(divide="ignore", invalid="ignore"):
        c = np.true_divide(a, b)
        c[~np.isfinite(c)] = 1.0
    return c


def overlap(foreground: "RasterImage", background: "RasterImage") -> int:
    """
    Number of pixels a blend processes.

    Blending walks the background buffer and stops as soon as the foreground
    buffer runs out, so only the first ``min`` pixels by flat index are
    blended.
    """
    return min(foreground.pixel_count, background.pixel_count)


@overload
def union(backdrop: float, source: float) -> float: ...


@overload
def union(
    backdrop: NDArray[np.floating], source: NDArray[np.floating]
) -> NDArray[np.floating]: ...


def union(
    backdrop: Union[float, NDArray[np.floating]],
    source: Union[float, NDArray[np.floating]],
) -> Union[float, NDArray[np.floating]]:
    """Alpha of `source` over `backdrop`, ``a_s + a_b * (1 - a_s)``."""
    return backdrop + source - (backdrop * source)
