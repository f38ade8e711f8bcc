"""
Registry pattern utility for creating lookup tables.

``new_registry`` returns a dictionary and a decorator that fills it. The blend
operators use it to build the mode-to-function table::

    BLEND_FUNC, register = new_registry(attribute="blend_mode")

    @register(BlendMode.MULTIPLY)
    def multiply(foreground, background):
        ...

    BLEND_FUNC[BlendMode.MULTIPLY] is multiply  # True
"""

from typing import Any, Callable, Tuple, TypeVar, Union

T = TypeVar("T")


def new_registry(attribute: Union[str, None] = None) -> Tuple[dict, Callable]:
    """
    Returns an empty dict and a @register decorator.

    :param attribute: Optional attribute name to set on registered objects.
                     The key will be stored as this attribute on the object.
    :return: Tuple of (registry_dict, register_decorator)
    """
    registry: dict = {}

    def register(key: Any) -> Callable[[Callable[..., T]], Callable[..., T]]:
        def decorator(func: Callable[..., T]) -> Callable[..., T]:
            if key in registry:
                raise ValueError(f"{key!r} is already registered")
            registry[key] = func
            if attribute:
                setattr(func, attribute, key)
            return func

        return decorator

    return registry, register
