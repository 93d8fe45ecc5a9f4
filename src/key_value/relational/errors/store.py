"""Store-level error classes."""

from key_value.relational.errors.base import BaseKeyValueError


class KeyValueStoreError(BaseKeyValueError):
    """Base exception for all Key-Value store errors."""


class StoreSetupError(KeyValueStoreError):
    """Raised when creating the backing table fails."""


class BackendError(KeyValueStoreError):
    """Raised when the relational backend fails to acquire a connection or run a statement.

    The driver's own exception is always attached as ``__cause__``.
    """
