"""Placeholder identifier naming convention and patterns."""

import re
from typing import Optional, Pattern

TABLE_PREFIX = "table__"
BLOCK_PREFIX = "block__"
CLOSING_MARKER = "/"
PATH_SEPARATOR = "."

# table__<group> or table__<group>.<column>
TABLE_PATTERN: Pattern = re.compile(r"^table__([^.]+)(?:\.(.+))?$")

# block__<group>, block__<group>.<field> or the closing /block__<group>
BLOCK_PATTERN: Pattern = re.compile(r"^/?block__([^.]+)(?:\.(.+))?$")

# ${variable} - scalar substitution inside plain strings
VARIABLE_PATTERN: Pattern = re.compile(r"\$\{([^{}]+)\}")


def is_table_identifier(identifier: str) -> bool:
    """Check whether an identifier addresses a table column."""
    return bool(TABLE_PATTERN.match(identifier))


def is_block_identifier(identifier: str) -> bool:
    """Check whether an identifier addresses a block or its closing marker."""
    return bool(BLOCK_PATTERN.match(identifier))


def split_group_path(path: str) -> tuple[str, Optional[str]]:
    """
    Split a prefix-less identifier into its group and member parts.

    Args:
        path: Identifier with the ``table__``/``block__`` prefix removed

    Returns:
        Tuple of (group, member); member is None when there is no separator
    """
    if PATH_SEPARATOR in path:
        group, member = path.split(PATH_SEPARATOR, 1)
        return group, member
    return path, None


def strip_table_prefix(identifier: str) -> str:
    return identifier[len(TABLE_PREFIX):]


def strip_block_prefix(identifier: str) -> str:
    return identifier.lstrip(CLOSING_MARKER)[len(BLOCK_PREFIX):]


def table_path(table: str) -> str:
    """Prefix used to fully qualify the columns of a table."""
    return f"{TABLE_PREFIX}{table}{PATH_SEPARATOR}"


def block_path(block: str) -> str:
    """Prefix used to fully qualify the fields of a block."""
    return f"{BLOCK_PREFIX}{block}{PATH_SEPARATOR}"
