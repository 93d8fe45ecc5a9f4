"""Key-value store persisting byte keys and byte values in a relational table."""

import logging
from collections.abc import Iterator
from contextlib import closing, contextmanager
from typing import Final

from typing_extensions import override

from key_value.relational.errors import BackendError, KeyValueStoreError, StoreSetupError
from key_value.relational.protocols import ConnectionFactory, ConnectionProtocol, CursorProtocol, KeyValueProtocol
from key_value.relational.sql import DEFAULT_PLACEHOLDER, DEFAULT_QUOTE, Statements, UpsertStyle, build_statements
from key_value.relational.type_checking import bear_enforce

logger = logging.getLogger(__name__)

DEFAULT_KEY_COLUMN: Final[str] = "key"
DEFAULT_VALUE_COLUMN: Final[str] = "value"


class RelationalStore(KeyValueProtocol[bytes, bytes]):
    """A key-value store backed by a single relational table.

    Each operation acquires a fresh connection from the connection factory, runs exactly one
    statement and closes the cursor and the connection before returning. The store holds no
    connection between calls, so it can be shared between threads as long as the factory can.

    Example:
        >>> import sqlite3
        >>> store = RelationalStore(
        ...     connection_factory=lambda: sqlite3.connect("kv.db"),
        ...     table="kv",
        ...     upsert_style=UpsertStyle.ON_CONFLICT,
        ... )
        >>> store.create_table(if_not_exists=True)
        >>> store.put(b"key", b"value")
        >>> store.get(b"key")
        b'value'
    """

    _connection_factory: ConnectionFactory
    _quote: str
    _catalog: str | None
    _schema: str | None
    _table: str
    _key_column: str
    _value_column: str
    _statements: Statements

    def __init__(
        self,
        *,
        connection_factory: ConnectionFactory,
        table: str,
        key_column: str = DEFAULT_KEY_COLUMN,
        value_column: str = DEFAULT_VALUE_COLUMN,
        catalog: str | None = None,
        schema: str | None = None,
        quote: str = DEFAULT_QUOTE,
        upsert_style: UpsertStyle = UpsertStyle.MERGE,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> None:
        """Initialize the relational store.

        Args:
            connection_factory: A zero-argument callable returning a DB-API 2.0 connection. The
                store closes every connection it obtains.
            table: The name of the backing table.
            key_column: The name of the binary primary key column.
            value_column: The name of the binary value column.
            catalog: The catalog holding the table, omitted from statements when empty.
            schema: The schema holding the table, omitted from statements when empty.
            quote: The identifier quote string of the backend.
            upsert_style: The insert-or-update statement form the backend understands.
            placeholder: The positional parameter marker of the driver (`?` for qmark, `%s` for format).
        """
        for argument, name in (("table", table), ("key_column", key_column), ("value_column", value_column)):
            if not name:
                msg = f"{argument} must not be empty"
                raise ValueError(msg)

        if not quote:
            msg = "quote must not be empty"
            raise ValueError(msg)

        self._connection_factory = connection_factory
        self._quote = quote
        self._catalog = catalog or None
        self._schema = schema or None
        self._table = table
        self._key_column = key_column
        self._value_column = value_column

        self._statements = build_statements(
            table=table,
            key_column=key_column,
            value_column=value_column,
            catalog=catalog,
            schema=schema,
            quote=quote,
            upsert_style=upsert_style,
            placeholder=placeholder,
        )

    @property
    def catalog(self) -> str | None:
        return self._catalog

    @property
    def schema(self) -> str | None:
        return self._schema

    @property
    def table(self) -> str:
        return self._table

    @property
    def key_column(self) -> str:
        return self._key_column

    @property
    def value_column(self) -> str:
        return self._value_column

    @property
    def destination(self) -> str:
        """The quoted, qualified table name embedded in every statement."""
        return self._statements.destination

    @property
    def statements(self) -> Statements:
        return self._statements

    @contextmanager
    def _translate_errors(self, operation: str, error_type: type[KeyValueStoreError] = BackendError) -> Iterator[None]:
        """Re-raise any backend failure inside the block as a store error carrying the original cause."""
        try:
            yield
        except Exception as e:
            logger.error(
                "Relational store operation failed",
                extra={
                    "operation": operation,
                    "destination": self.destination,
                    "error": str(e),
                },
            )
            raise error_type(
                message=f"Failed to {operation}: {e}",
                extra_info={"operation": operation, "destination": self.destination},
            ) from e

    @contextmanager
    def _cursor(self, operation: str, error_type: type[KeyValueStoreError] = BackendError) -> Iterator[tuple[ConnectionProtocol, CursorProtocol]]:
        """Acquire a connection and a cursor, closing both in reverse order on every exit path."""
        with (
            self._translate_errors(operation=operation, error_type=error_type),
            closing(self._connection_factory()) as connection,
            closing(connection.cursor()) as cursor,
        ):
            yield connection, cursor

    def create_table(self, *, if_not_exists: bool = False) -> None:
        """Create the backing table with a binary primary key column and a nullable binary value column.

        Args:
            if_not_exists: Do nothing if the table already exists instead of failing.

        Raises:
            StoreSetupError: If the backend fails to create the table.
        """
        sql = self._statements.create_if_not_exists if if_not_exists else self._statements.create

        logger.debug("Creating table %s", self.destination)

        with self._cursor(operation="create table", error_type=StoreSetupError) as (connection, cursor):
            cursor.execute(sql)
            connection.commit()

    @override
    @bear_enforce
    def get(self, key: bytes) -> bytes | None:
        """Retrieve the value stored under the key.

        Returns:
            The stored value, or None if no row matched the key.

        Raises:
            BackendError: If the backend fails.
        """
        with self._cursor(operation="get") as (_, cursor):
            cursor.execute(self._statements.lookup, (key,))
            row = cursor.fetchone()

        if row is None or row[0] is None:
            return None

        return bytes(row[0])

    @override
    @bear_enforce
    def put(self, key: bytes, value: bytes) -> None:
        """Insert the value under the key, or replace the existing value, in a single statement.

        Raises:
            BackendError: If the backend fails.
        """
        with self._cursor(operation="put") as (connection, cursor):
            cursor.execute(self._statements.upsert, (key, value))
            connection.commit()

    @override
    @bear_enforce
    def remove(self, key: bytes) -> None:
        """Remove the key. Removing a key that does not exist is a no-op.

        Raises:
            BackendError: If the backend fails.
        """
        with self._cursor(operation="remove") as (connection, cursor):
            cursor.execute(self._statements.delete, (key,))
            connection.commit()
