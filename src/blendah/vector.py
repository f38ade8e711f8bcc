"""
Numeric vector type used for per-pixel blend math.

:py:class:`NumericVector` is a fixed-length sequence of floats with
elementwise and scalar arithmetic. Components live on the last axis of a
NumPy array; leading axes, when present, hold a batch of vectors of the same
length so a blend operator can run one formula over many pixels::

    from blendah.vector import NumericVector, subtract

    one = NumericVector([1.0, 1.0, 1.0])
    pixels = NumericVector([[0.2, 0.4, 0.6], [1.0, 0.0, 0.5]])
    inverse = subtract(one, pixels)
"""

import logging
from functools import reduce
from typing import Any, Iterator, Union

import numpy as np

from blendah.constants import Norm
from blendah.exceptions import DimensionMismatch

logger = logging.getLogger(__name__)

# A per-vector scalar may be given as an array with a trailing axis of 1.
Scalar = Union[int, float, np.number, np.ndarray]


class NumericVector:
    """
    Fixed-length vector of floats.

    Every arithmetic method returns a new vector. :py:meth:`set` is the only
    operation that modifies the vector in place.

    :param elements: sequence of numbers, or an array whose last axis holds
        the components.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Any):
        if isinstance(elements, NumericVector):
            elements = elements._elements
        array = np.array(elements, dtype=np.float64)
        if array.ndim == 0:
            raise TypeError("NumericVector requires a sequence of components")
        self._elements = array

    @property
    def elements(self) -> np.ndarray:
        """Components as a read-only float64 array."""
        view = self._elements.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> tuple:
        return self._elements.shape

    def __len__(self) -> int:
        return self._elements.shape[-1]

    def __iter__(self) -> Iterator[Any]:
        if self._elements.ndim == 1:
            return iter(self._elements.tolist())
        return (NumericVector(row) for row in self._elements)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Scalar) -> None:
        self.set(index, value)

    def get(self, index: int) -> Any:
        """Component at `index`; an array of components for a batch."""
        value = self._elements[..., index]
        return float(value) if np.ndim(value) == 0 else value

    def set(self, index: int, value: Scalar) -> None:
        self._elements[..., index] = value

    # Elementwise operations.
    def add(self, other: "NumericVector") -> "NumericVector":
        return NumericVector(self._elementwise(np.add, other))

    def subtract(self, other: "NumericVector") -> "NumericVector":
        return NumericVector(self._elementwise(np.subtract, other))

    def multiply(self, other: "NumericVector") -> "NumericVector":
        return NumericVector(self._elementwise(np.multiply, other))

    def divide(self, other: "NumericVector") -> "NumericVector":
        with np.errstate(divide="ignore", invalid="ignore"):
            return NumericVector(self._elementwise(np.true_divide, other))

    # Scalar operations.
    def scalar_add(self, value: Scalar) -> "NumericVector":
        return NumericVector(self._elements + value)

    def scalar_multiply(self, value: Scalar) -> "NumericVector":
        return NumericVector(self._elements * value)

    def abs(self) -> "NumericVector":
        return NumericVector(np.abs(self._elements))

    def norm(self, kind: Union[Norm, str] = Norm.L2) -> Any:
        """
        Vector norm.

        :param kind: ``"L1"`` for the sum of absolute values, ``"L2"`` for the
            Euclidean length.
        :return: float, or an array with one norm per vector for a batch.
        """
        kind = Norm(kind)
        if kind == Norm.L1:
            value = np.sum(np.abs(self._elements), axis=-1)
        else:
            value = np.sqrt(np.sum(self._elements * self._elements, axis=-1))
        return float(value) if np.ndim(value) == 0 else value

    def isclose(self, other: "NumericVector", **kwargs: Any) -> bool:
        """Whether all components match `other` within float tolerance."""
        self._check_length(other)
        return bool(np.allclose(self._elements, other._elements, **kwargs))

    def tolist(self) -> list:
        return self._elements.tolist()

    def numpy(self) -> np.ndarray:
        return self._elements.copy()

    def _check_length(self, other: Any) -> None:
        if not isinstance(other, NumericVector):
            raise TypeError(
                f"Expected NumericVector, got {type(other).__name__}"
            )
        if len(self) != len(other):
            raise DimensionMismatch(
                "Vectors must have the same length: %d != %d"
                % (len(self), len(other))
            )

    def _elementwise(self, func: Any, other: "NumericVector") -> np.ndarray:
        self._check_length(other)
        try:
            return func(self._elements, other._elements)
        except ValueError as e:
            raise DimensionMismatch(
                "Vector batches do not match: %s vs %s" % (self.shape, other.shape)
            ) from e

    # Operators dispatch to the elementwise or scalar forms.
    def __add__(self, other: Any) -> "NumericVector":
        if isinstance(other, NumericVector):
            return self.add(other)
        return self.scalar_add(other)

    def __radd__(self, other: Any) -> "NumericVector":
        return self.scalar_add(other)

    def __sub__(self, other: Any) -> "NumericVector":
        if isinstance(other, NumericVector):
            return self.subtract(other)
        return self.scalar_add(-other)

    def __rsub__(self, other: Any) -> "NumericVector":
        return self.scalar_multiply(-1).scalar_add(other)

    def __mul__(self, other: Any) -> "NumericVector":
        if isinstance(other, NumericVector):
            return self.multiply(other)
        return self.scalar_multiply(other)

    def __rmul__(self, other: Any) -> "NumericVector":
        return self.scalar_multiply(other)

    def __truediv__(self, other: Any) -> "NumericVector":
        if isinstance(other, NumericVector):
            return self.divide(other)
        with np.errstate(divide="ignore", invalid="ignore"):
            return NumericVector(np.true_divide(self._elements, other))

    def __abs__(self) -> "NumericVector":
        return self.abs()

    def __neg__(self) -> "NumericVector":
        return self.scalar_multiply(-1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return bool(np.array_equal(self._elements, other._elements))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "%s(%s)" % (self.__class__.__name__, self._elements.tolist())


def add(*vectors: NumericVector) -> NumericVector:
    """Sum two or more vectors, folding left to right."""
    if len(vectors) < 2:
        raise TypeError("add() requires at least two vectors")
    return reduce(lambda acc, vector: acc.add(vector), vectors)


def subtract(*vectors: NumericVector) -> NumericVector:
    """Subtract each following vector from the first, left to right."""
    if len(vectors) < 2:
        raise TypeError("subtract() requires at least two vectors")
    return reduce(lambda acc, vector: acc.subtract(vector), vectors)


def absolute(vector: NumericVector) -> NumericVector:
    return vector.abs()
