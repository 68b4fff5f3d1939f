"""Binding store holding the schema and current values of a template."""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from .coercion import coerce_value
from .inputs import StructuredInput, is_formatted, is_group_shaped, parse_input
from .models import BindingDocument, BindingInputError, BindingSchema
from .parser import BindingParser
from .syntax import BLOCK_PREFIX, block_path, table_path

logger = logging.getLogger(__name__)

Row = dict[str, Any]
StoreSource = Union["BindingStore", Mapping, list, tuple, None]


def prefix_keys(mapping: Mapping, prefix: str) -> dict[str, Any]:
    """Return a copy of mapping with every key prefixed."""
    return {f"{prefix}{key}": value for key, value in mapping.items()}


def contains_only_none(row: Mapping) -> bool:
    """Check whether every value of a row is None."""
    return all(value is None for value in row.values())


def _names_from_definition(definition: Any) -> list[str]:
    """
    Extract member names from a group or values definition.

    Mappings contribute their keys, lists of names their elements and lists
    of rows the first-seen union of the row keys.
    """
    if isinstance(definition, Mapping):
        return list(definition.keys())

    names: list[str] = []
    for item in definition or []:
        candidates = item.keys() if isinstance(item, Mapping) else [item]
        for name in candidates:
            if name not in names:
                names.append(name)
    return names


class BindingStore:
    """
    Fillable bindings of a template: scalar values, table rows and block entries.

    The schema is fixed at construction. Fills only ever touch names the
    schema declares; anything else is dropped without raising. Each table and
    block starts with a single all-None seed row that the first real fill
    replaces.
    """

    def __init__(self, source: StoreSource = None):
        """
        Initialize the store from identifiers, a three-part document or a sibling.

        Args:
            source: Placeholder identifier list (or a mapping of them),
                three-part document (``{"values", "tables", "blocks"}``),
                another BindingStore (schema only) or None for an empty schema

        Raises:
            BindingInputError: If source is none of the accepted shapes
        """
        self.scalar_keys: list[str] = []
        self.scalar_values: dict[str, Any] = {}
        self.table_schemas: dict[str, list[str]] = {}
        self.table_rows: dict[str, list[Row]] = {}
        self.block_schemas: dict[str, list[str]] = {}
        self.block_entries: dict[str, list[Row]] = {}

        if source is None:
            return
        if isinstance(source, BindingStore):
            self._from_sibling(source)
        elif is_formatted(source):
            self._from_document(source)
        elif isinstance(source, (list, tuple)):
            self._from_identifiers(source)
        elif isinstance(source, Mapping):
            # Not a document: its values are the identifiers
            self._from_identifiers(list(source.values()))
        else:
            raise BindingInputError(
                f"Cannot build bindings from {type(source).__name__}; "
                "expected an identifier list or mapping, a three-part document or a BindingStore"
            )

        logger.debug(
            f"Bindings established: {len(self.scalar_keys)} values, "
            f"{len(self.table_schemas)} tables, {len(self.block_schemas)} blocks"
        )

    @classmethod
    def init(cls, source: StoreSource = None) -> "BindingStore":
        """Alternative constructor, reads well in chained calls."""
        return cls(source)

    # Construction

    def _from_identifiers(self, identifiers: Union[list, tuple]) -> None:
        schema = BindingParser().parse(str(identifier) for identifier in identifiers)
        self._set_tables(schema.tables)
        self._set_blocks(schema.blocks)
        self._set_keys(schema.values)

    def _from_document(self, document: Mapping) -> None:
        self._set_tables(
            {name: _names_from_definition(d) for name, d in _group_items(document["tables"])}
        )
        self._set_blocks(
            {name: _names_from_definition(d) for name, d in _group_items(document["blocks"])}
        )
        self._set_keys(_names_from_definition(document["values"]))

    def _from_sibling(self, sibling: "BindingStore") -> None:
        self._set_tables(sibling.table_schemas)
        self._set_blocks(sibling.block_schemas)
        self._set_keys(sibling.scalar_keys)

    def _set_keys(self, keys: list[str]) -> None:
        self.scalar_keys = list(keys)
        self.scalar_values = dict.fromkeys(self.scalar_keys)

    def _set_tables(self, tables: Mapping[str, list[str]]) -> None:
        self.table_schemas = {name: list(columns) for name, columns in tables.items()}
        self.table_rows = self.blank_tables()

    def _set_blocks(self, blocks: Mapping[str, list[str]]) -> None:
        self.block_schemas = {name: list(fields) for name, fields in blocks.items()}
        self.block_entries = self.blank_blocks()

    # Merging

    def fill(self, data: Union["BindingStore", Mapping]) -> "BindingStore":
        """
        Merge data into the store.

        Accepts another store, a three-part document or a flat mapping keyed
        directly by scalar, table or block names. Every top-level key is also
        offered to the tables, blocks and values of the same name, so both
        shapes can be mixed freely.

        Args:
            data: Data to merge

        Returns:
            self, for chaining

        Raises:
            BindingInputError: If data is not a mapping or a BindingStore
        """
        if isinstance(data, BindingStore):
            self._fill_structured(parse_input(data.to_dict()))
            return self

        parsed = parse_input(data)
        if isinstance(parsed, StructuredInput):
            self._fill_structured(parsed)

        for key, value in parsed.raw.items():
            if is_group_shaped(value):
                self.fill_table(key, value)
                self.fill_block(key, value)

            self.fill_values({key: value})

        return self

    def _fill_structured(self, parsed: StructuredInput) -> None:
        if isinstance(parsed.values, Mapping):
            self.fill_values(parsed.values)

        for block, entries in _group_items(parsed.blocks):
            self.fill_block(block, entries)

        for table, rows in _group_items(parsed.tables):
            self.fill_table(table, rows)

    def fill_values(self, values: Mapping) -> "BindingStore":
        """
        Set scalar values for the declared keys.

        Args:
            values: Mapping of scalar key to value; undeclared keys are ignored

        Returns:
            self, for chaining
        """
        for key, value in values.items():
            if key not in self.scalar_values:
                logger.debug(f"Dropping unknown value '{key}'")
                continue
            self.scalar_values[key] = coerce_value(value)

        return self

    def fill_table(self, name: str, rows: Union[Mapping, list, tuple]) -> "BindingStore":
        """
        Append rows to a declared table.

        Args:
            name: Table name; unknown tables are ignored
            rows: A single row mapping or a list of row mappings

        Returns:
            self, for chaining
        """
        if name not in self.table_schemas:
            logger.debug(f"Ignoring fill of unknown table '{name}'")
            return self

        self._append_rows(self.table_rows, name, self.table_schemas[name], rows)
        return self

    def fill_block(self, name: str, entries: Union[Mapping, list, tuple]) -> "BindingStore":
        """
        Append entries to a declared block.

        Args:
            name: Block name; unknown blocks are ignored
            entries: A single entry mapping or a list of entry mappings

        Returns:
            self, for chaining
        """
        if name not in self.block_schemas:
            logger.debug(f"Ignoring fill of unknown block '{name}'")
            return self

        self._append_rows(self.block_entries, name, self.block_schemas[name], entries)
        return self

    def _append_rows(
        self,
        groups: dict[str, list[Row]],
        name: str,
        members: list[str],
        rows: Union[Mapping, list, tuple],
    ) -> None:
        if isinstance(rows, Mapping):
            rows = [rows]

        entries = []
        for entry in rows:
            if not isinstance(entry, Mapping):
                logger.warning(f"Skipping non-mapping entry for '{name}': {entry!r}")
                continue
            entries.append(entry)

        if not entries:
            return

        # Drop the unconsumed seed row
        current = groups[name]
        if len(current) == 1 and contains_only_none(current[0]):
            logger.debug(f"Discarding blank seed row of '{name}'")
            current.clear()

        for entry in entries:
            unknown = [member for member in entry if member not in members]
            if unknown:
                logger.debug(f"Dropping unknown members of '{name}': {unknown}")

            current.append(
                {
                    member: coerce_value(value)
                    for member, value in entry.items()
                    if member in members
                }
            )

    def flush(self) -> "BindingStore":
        """Reset every value to None and every group to a single seed row."""
        self.scalar_values = dict.fromkeys(self.scalar_keys)
        self.table_rows = self.blank_tables()
        self.block_entries = self.blank_blocks()
        return self

    # Exports

    def values(self) -> dict[str, Any]:
        return dict(self.scalar_values)

    def tables(self, full_path: bool = False) -> dict[str, list[Row]]:
        """
        Table rows keyed by table name.

        Args:
            full_path: Key cells by their fully-qualified identifier
                (``table__<table>.<column>``) instead of the bare column

        Returns:
            Copy of the table rows
        """
        if full_path:
            return {
                table: [prefix_keys(row, table_path(table)) for row in rows]
                for table, rows in self.table_rows.items()
            }
        return _copy_groups(self.table_rows)

    def blocks(self, full_path: bool = False) -> dict[str, list[Row]]:
        """
        Block entries keyed by block name.

        Args:
            full_path: Key fields by their fully-qualified identifier
                (``block__<block>.<field>``) instead of the bare field

        Returns:
            Copy of the block entries
        """
        if full_path:
            return {
                block: [prefix_keys(entry, block_path(block)) for entry in entries]
                for block, entries in self.block_entries.items()
            }
        return _copy_groups(self.block_entries)

    def table_id_for(self, table: str) -> Optional[str]:
        """Identifier of the cell the rendering side clones a table's rows from."""
        if not self.table_schemas.get(table):
            return None
        return f"{table_path(table)}{self.table_schemas[table][0]}"

    def block_id_for(self, block: str) -> Optional[str]:
        """Identifier the rendering side clones a block from."""
        if block not in self.block_schemas:
            return None
        return f"{BLOCK_PREFIX}{block}"

    def names(self) -> dict[str, Any]:
        """Names of all the fillable values, table columns and block fields."""
        return {
            "values": list(self.scalar_keys),
            "tables": {name: list(columns) for name, columns in self.table_schemas.items()},
            "blocks": {name: list(fields) for name, fields in self.block_schemas.items()},
        }

    def to_dict(self) -> dict[str, Any]:
        """All the filled values as a three-part document."""
        return {
            "values": self.values(),
            "tables": self.tables(),
            "blocks": self.blocks(),
        }

    def blank(self) -> dict[str, Any]:
        """Three-part document of the current schema with every value set to None."""
        return {
            "values": dict.fromkeys(self.scalar_keys),
            "tables": self.blank_tables(),
            "blocks": self.blank_blocks(),
        }

    def blank_tables(self) -> dict[str, list[Row]]:
        return {name: [dict.fromkeys(columns)] for name, columns in self.table_schemas.items()}

    def blank_blocks(self) -> dict[str, list[Row]]:
        return {name: [dict.fromkeys(fields)] for name, fields in self.block_schemas.items()}

    def schema(self) -> BindingSchema:
        return BindingSchema(**self.names())

    def document(self) -> BindingDocument:
        return BindingDocument(**self.to_dict())

    @staticmethod
    def is_formatted(data: Any) -> bool:
        """Check whether data is a three-part document."""
        return is_formatted(data)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(values={self.scalar_keys!r}, "
            f"tables={list(self.table_schemas)!r}, blocks={list(self.block_schemas)!r})"
        )


def _group_items(groups: Any) -> list[tuple[Any, Any]]:
    """Items of a ``tables``/``blocks`` part; list-shaped parts hold no named groups."""
    if isinstance(groups, Mapping):
        return list(groups.items())
    return []


def _copy_groups(groups: dict[str, list[Row]]) -> dict[str, list[Row]]:
    return {name: [dict(row) for row in rows] for name, rows in groups.items()}
