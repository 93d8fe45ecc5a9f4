"""Identifier quoting and statement building for the relational store.

Note: statements in this module are assembled with f-strings, which triggers S608 warnings.
Every identifier passes through `quote_identifier` first and values are only ever bound
through positional placeholders.
"""

# ruff: noqa: S608

from dataclasses import dataclass
from enum import Enum
from typing import Final

DEFAULT_QUOTE: Final[str] = '"'
DEFAULT_SEPARATOR: Final[str] = "."
DEFAULT_PLACEHOLDER: Final[str] = "?"


class UpsertStyle(str, Enum):
    """The insert-or-update statement form understood by the backend."""

    MERGE = "merge"
    """`merge into ... key (...) values (...)`, as supported by H2."""

    ON_CONFLICT = "on_conflict"
    """`insert ... on conflict (...) do update`, as supported by SQLite, PostgreSQL and DuckDB."""

    REPLACE = "replace"
    """`insert or replace into ...`, as supported by SQLite and DuckDB."""


def quote_identifier(name: str, quote: str = DEFAULT_QUOTE) -> str:
    """Quote an identifier so it can be embedded literally in SQL text.

    Every occurrence of the quote string inside the identifier is doubled and the result is
    wrapped in a single leading and trailing quote.

    Args:
        name: The identifier to quote.
        quote: The quote string of the target dialect.

    Returns:
        The quoted identifier.
    """
    if not quote:
        msg = "Quote string must not be empty"
        raise ValueError(msg)

    escaped = name.replace(quote, quote + quote)
    return f"{quote}{escaped}{quote}"


def qualified_name(
    table: str,
    *,
    catalog: str | None = None,
    schema: str | None = None,
    quote: str = DEFAULT_QUOTE,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Build the quoted, optionally catalog and schema qualified, name of a table.

    Catalog and schema segments are only included when non-empty.
    """
    segments: list[str] = [quote_identifier(name=part, quote=quote) for part in (catalog, schema) if part]
    segments.append(quote_identifier(name=table, quote=quote))
    return separator.join(segments)


@dataclass(frozen=True)
class Statements:
    """The SQL text used by a store, built once and reused for every call."""

    destination: str
    create: str
    create_if_not_exists: str
    upsert: str
    lookup: str
    delete: str


def build_upsert(destination: str, key: str, value: str, *, style: UpsertStyle, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Build an atomic insert-or-update statement binding the key then the value.

    `key` and `value` are expected to be quoted column names already.
    """
    params = f"{placeholder}, {placeholder}"

    if style is UpsertStyle.MERGE:
        return f"merge into {destination} ({key}, {value}) key ({key}) values ({params})"

    if style is UpsertStyle.ON_CONFLICT:
        return f"insert into {destination} ({key}, {value}) values ({params}) on conflict ({key}) do update set {value} = excluded.{value}"

    if style is UpsertStyle.REPLACE:
        return f"insert or replace into {destination} ({key}, {value}) values ({params})"

    msg = f"Unsupported upsert style: {style}"
    raise ValueError(msg)


def build_statements(
    *,
    table: str,
    key_column: str,
    value_column: str,
    catalog: str | None = None,
    schema: str | None = None,
    quote: str = DEFAULT_QUOTE,
    upsert_style: UpsertStyle = UpsertStyle.MERGE,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> Statements:
    """Build every statement a store needs for the given table and columns."""
    destination = qualified_name(table, catalog=catalog, schema=schema, quote=quote)
    key = quote_identifier(name=key_column, quote=quote)
    value = quote_identifier(name=value_column, quote=quote)

    columns = f"({key} binary primary key, {value} binary)"

    return Statements(
        destination=destination,
        create=f"create table {destination} {columns}",
        create_if_not_exists=f"create table if not exists {destination} {columns}",
        upsert=build_upsert(destination, key, value, style=upsert_style, placeholder=placeholder),
        lookup=f"select {value} from {destination} where {key} = {placeholder}",
        delete=f"delete from {destination} where {key} = {placeholder}",
    )
