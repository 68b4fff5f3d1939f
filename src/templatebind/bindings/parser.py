"""Parser turning a flat placeholder identifier list into a binding schema."""

import logging
from typing import Iterable

from .models import BindingSchema, ClassifiedIdentifiers, IdentifierKind
from .syntax import (
    is_block_identifier,
    is_table_identifier,
    split_group_path,
    strip_block_prefix,
    strip_table_prefix,
)

logger = logging.getLogger(__name__)


class BindingParser:
    """Classify placeholder identifiers and group them into tables and blocks."""

    def identify(self, identifier: str) -> IdentifierKind:
        """Kind of a single identifier, by naming convention."""
        if is_table_identifier(identifier):
            return IdentifierKind.TABLE
        if is_block_identifier(identifier):
            return IdentifierKind.BLOCK
        return IdentifierKind.SCALAR

    def classify(self, identifiers: Iterable[str]) -> ClassifiedIdentifiers:
        """
        Partition identifiers into table, block and scalar identifiers.

        Each identifier lands in exactly one list; duplicates are dropped and
        the first-seen order is kept.

        Args:
            identifiers: Placeholder identifiers as read from a template

        Returns:
            ClassifiedIdentifiers with the three disjoint lists
        """
        classified = ClassifiedIdentifiers()
        seen: set[str] = set()

        for identifier in identifiers:
            if identifier in seen:
                continue
            seen.add(identifier)

            classified.add(identifier, self.identify(identifier))

        logger.debug(
            f"Classified identifiers: {len(classified.scalars)} scalars, "
            f"{len(classified.tables)} table, {len(classified.blocks)} block"
        )
        return classified

    def group_tables(self, identifiers: Iterable[str]) -> dict[str, list[str]]:
        """
        Group table identifiers into ``{table: [column, ...]}``.

        A table referenced without a column registers itself as its own
        single column, the anchor the row cloning starts from.
        """
        groups: dict[str, list[str]] = {}

        for identifier in identifiers:
            table, column = split_group_path(strip_table_prefix(identifier))
            columns = groups.setdefault(table, [])
            column = table if column is None else column
            if column not in columns:
                columns.append(column)

        return groups

    def group_blocks(self, identifiers: Iterable[str]) -> dict[str, list[str]]:
        """
        Group block identifiers into ``{block: [field, ...]}``.

        Closing markers only confirm the block exists. A block may have no
        fields at all.
        """
        groups: dict[str, list[str]] = {}

        for identifier in identifiers:
            block, field = split_group_path(strip_block_prefix(identifier))
            fields = groups.setdefault(block, [])
            if field is not None and field not in fields:
                fields.append(field)

        return groups

    def parse(self, identifiers: Iterable[str]) -> BindingSchema:
        """
        Build the full binding schema from an identifier list.

        Args:
            identifiers: Placeholder identifiers as read from a template

        Returns:
            BindingSchema with scalar names, table columns and block fields
        """
        classified = self.classify(identifiers)

        return BindingSchema(
            values=classified.scalars,
            tables=self.group_tables(classified.tables),
            blocks=self.group_blocks(classified.blocks),
        )
