"""
Identifier quoting and clause joining helpers.

Identifiers handed over as column names or table names are quoted here.
Join, group and order entries are caller-controlled literals and are never
passed through `quote`.
"""

from typing import Optional

from .mappings import placeholder_prefix, quote_char


def quote(identifier: str) -> str:
    """
    Quote a bare identifier.

    Examples:
        >>> quote('users')
        '`users`'
        >>> quote('users.id')
        '`users.id`'
        >>> quote('odd`name')
        '`odd``name`'
    """
    escaped = str(identifier).replace(quote_char, quote_char * 2)
    return f'{quote_char}{escaped}{quote_char}'


def qualify(database: str, table: str) -> str:
    """
    Fully qualified, quoted table name.

    Examples:
        >>> qualify('db', 'table')
        '`db`.`table`'
    """
    return f'{quote(database)}.{quote(table)}'


def placeholder(name: str, index: Optional[int] = None) -> str:
    """
    Named placeholder, optionally suffixed with a 1-based index.

    Examples:
        >>> placeholder('id')
        ':id'
        >>> placeholder('name', 2)
        ':name_2'
    """
    if index is None:
        return f'{placeholder_prefix}{name}'
    return f'{placeholder_prefix}{name}_{index}'


def join_clauses(*parts: Optional[str]) -> str:
    """Join the non-empty clause parts with single spaces, in the given order."""
    return ' '.join(p for p in parts if p)
