import logging

import pytest
from attrs import define, field

from blendah.registry import new_registry
from blendah.validators import range_

logger = logging.getLogger(__name__)


def test_new_registry():
    registry, register = new_registry(attribute="key")

    @register("foo")
    def foo():
        return 1

    assert registry == {"foo": foo}
    assert foo.key == "foo"

    with pytest.raises(ValueError):
        register("foo")(lambda: 2)


@define
class _Sized:
    value: int = field(validator=range_(0, 10))


@pytest.mark.parametrize("value", [0, 5, 10])
def test_range_validator(value):
    assert _Sized(value).value == value


@pytest.mark.parametrize("value", [-1, 11, "a", None])
def test_range_validator_error(value):
    with pytest.raises(ValueError):
        _Sized(value)


def test_range_validator_repr():
    assert repr(range_(0, 10)) == "<range_ validator with [0, 10]>"
