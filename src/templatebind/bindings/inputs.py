"""Boundary parsing of caller-supplied binding data."""

from collections.abc import Mapping
from typing import Any, Union

from .models import BindingInputError, FlatInput, StructuredInput

DOCUMENT_PARTS = ("values", "tables", "blocks")

ParsedInput = Union[StructuredInput, FlatInput]


def is_group_shaped(value: Any) -> bool:
    """Check whether a value can hold a group (a mapping or a list)."""
    return isinstance(value, (Mapping, list, tuple))


def is_formatted(data: Any) -> bool:
    """
    Check whether data is a three-part document.

    True when data is a mapping holding ``values``, ``tables`` and ``blocks``,
    each of them a mapping or a list.
    """
    if not isinstance(data, Mapping):
        return False
    return all(
        data.get(part) is not None and is_group_shaped(data[part]) for part in DOCUMENT_PARTS
    )


def parse_input(data: Any) -> ParsedInput:
    """
    Parse caller data into a structured or a flat input.

    Args:
        data: A three-part document or a mapping keyed by scalar/group names

    Returns:
        StructuredInput when data is a three-part document, FlatInput otherwise

    Raises:
        BindingInputError: If data is not a mapping
    """
    if not isinstance(data, Mapping):
        raise BindingInputError(
            f"Binding data must be a mapping, got {type(data).__name__}"
        )

    raw = dict(data)
    if is_formatted(raw):
        return StructuredInput(
            values=raw["values"],
            tables=raw["tables"],
            blocks=raw["blocks"],
            raw=raw,
        )

    return FlatInput(raw=raw)
