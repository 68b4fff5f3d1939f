"""Data models for the binding system."""

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field


class IdentifierKind(str, Enum):
    """Kind of placeholder identifier."""

    SCALAR = "scalar"  # name - single substituted value
    TABLE = "table"  # table__group.column - repeating row group
    BLOCK = "block"  # block__group.field - repeating field group


class ClassifiedIdentifiers(BaseModel):
    """Identifier list partitioned by kind, first-seen order kept."""

    scalars: list[str] = Field(default_factory=list)
    tables: list[str] = Field(default_factory=list)
    blocks: list[str] = Field(default_factory=list)

    def add(self, identifier: str, kind: IdentifierKind) -> None:
        if kind == IdentifierKind.TABLE:
            self.tables.append(identifier)
        elif kind == IdentifierKind.BLOCK:
            self.blocks.append(identifier)
        else:
            self.scalars.append(identifier)


class BindingSchema(BaseModel):
    """Names of every fillable value, table column and block field."""

    values: list[str] = Field(default_factory=list)
    tables: dict[str, list[str]] = Field(default_factory=dict)
    blocks: dict[str, list[str]] = Field(default_factory=dict)


class BindingDocument(BaseModel):
    """Three-part document holding scalar values, table rows and block entries."""

    values: dict[str, Any] = Field(default_factory=dict)
    tables: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)
    blocks: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)


class StructuredInput(BaseModel):
    """Caller input recognised as a three-part document."""

    values: Union[dict[Any, Any], list[Any]]
    tables: Union[dict[Any, Any], list[Any]]
    blocks: Union[dict[Any, Any], list[Any]]
    raw: dict[Any, Any] = Field(default_factory=dict)


class FlatInput(BaseModel):
    """Caller input keyed directly by scalar, table or block name."""

    raw: dict[Any, Any] = Field(default_factory=dict)


class BindingInputError(TypeError):
    """Exception raised when input is neither a mapping, a list nor a store."""

    pass
