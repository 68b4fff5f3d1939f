"""Binding model for template placeholders.

This module parses the flat placeholder identifier list of a template (like
``name``, ``table__account.id`` or ``block__customer.address``) into scalar
values, repeating tables and repeating blocks, and merges caller data into
that schema.
"""

from .models import (
    IdentifierKind,
    ClassifiedIdentifiers,
    BindingSchema,
    BindingDocument,
    StructuredInput,
    FlatInput,
    BindingInputError,
)
from .coercion import ToDisplayString, coerce_value
from .inputs import is_formatted, parse_input
from .parser import BindingParser
from .store import BindingStore, contains_only_none, prefix_keys

__all__ = [
    "IdentifierKind",
    "ClassifiedIdentifiers",
    "BindingSchema",
    "BindingDocument",
    "StructuredInput",
    "FlatInput",
    "BindingInputError",
    "ToDisplayString",
    "coerce_value",
    "is_formatted",
    "parse_input",
    "BindingParser",
    "BindingStore",
    "contains_only_none",
    "prefix_keys",
]
