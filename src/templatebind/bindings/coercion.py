"""Value coercion applied when data is merged into a binding store."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ToDisplayString(Protocol):
    """Capability of values that know how to render themselves for a document."""

    def to_display_string(self) -> str: ...


def coerce_value(value: Any) -> Any:
    """
    Coerce an incoming value before it is stored.

    Values exposing ``to_display_string`` are stored as that string; anything
    else (None, numbers, booleans, plain strings) is stored unchanged.

    Args:
        value: Raw value supplied by the caller

    Returns:
        The value to store
    """
    if isinstance(value, ToDisplayString):
        return value.to_display_string()
    return value
