from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

K_contra = TypeVar("K_contra", contravariant=True)
V = TypeVar("V")


@runtime_checkable
class KeyValueProtocol(Protocol[K_contra, V]):
    """Protocol defining a minimal get/put/remove key-value store."""

    def get(self, key: K_contra) -> V | None:
        """Retrieve the value stored under the key, or None if there is no such key."""
        ...

    def put(self, key: K_contra, value: V) -> None:
        """Store the value under the key, replacing any existing value."""
        ...

    def remove(self, key: K_contra) -> None:
        """Remove the key. Removing a key that does not exist is not an error."""
        ...


@runtime_checkable
class CursorProtocol(Protocol):
    """The subset of a DB-API 2.0 cursor used by the relational store."""

    def execute(self, operation: str, parameters: Sequence[Any] = ..., /) -> object: ...

    def fetchone(self) -> Sequence[Any] | None: ...

    def close(self) -> object: ...


@runtime_checkable
class ConnectionProtocol(Protocol):
    """The subset of a DB-API 2.0 connection used by the relational store."""

    def cursor(self) -> CursorProtocol: ...

    def commit(self) -> object: ...

    def close(self) -> object: ...


ConnectionFactory = Callable[[], ConnectionProtocol]
"""A zero-argument callable returning a fresh, ready-to-use connection."""
