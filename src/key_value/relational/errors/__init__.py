"""Error classes for the relational key-value store.

Exception Hierarchy:
    BaseKeyValueError
    ├── KeyValueStoreError
    │   ├── StoreSetupError
    │   └── BackendError
    └── UnknownCommandError
"""

from key_value.relational.errors.base import BaseKeyValueError, ExtraInfoType
from key_value.relational.errors.command import UnknownCommandError
from key_value.relational.errors.store import BackendError, KeyValueStoreError, StoreSetupError

__all__ = [
    "BackendError",
    "BaseKeyValueError",
    "ExtraInfoType",
    "KeyValueStoreError",
    "StoreSetupError",
    "UnknownCommandError",
]
