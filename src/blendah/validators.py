"""
Validation functions for attrs.
"""

from typing import Any

from attrs import define

__all__ = ["range_"]


@define(repr=False, hash=True)
class _RangeValidator:
    minimum: Any
    maximum: Any

    def __call__(self, inst: Any, attr: Any, value: Any) -> None:
        try:
            in_range = self.minimum <= value <= self.maximum
        except TypeError:
            in_range = False

        if not in_range:
            raise ValueError(
                f"'{attr.name}' must be in range [{self.minimum!r}, "
                f"{self.maximum!r}], got {value!r}"
            )

    def __repr__(self) -> str:
        return "<range_ validator with [{minimum!r}, {maximum!r}]>".format(
            minimum=self.minimum, maximum=self.maximum
        )


def range_(minimum: Any, maximum: Any) -> _RangeValidator:
    """
    A validator that raises a :exc:`ValueError` if the initializer is called
    with a value that does not belong in the [minimum, maximum] range. The
    check is performed using ``minimum <= value <= maximum``.
    """
    return _RangeValidator(minimum, maximum)
