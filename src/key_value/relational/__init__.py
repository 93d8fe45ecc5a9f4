"""A byte-oriented key-value store backed by a relational table."""

from key_value.relational.commands import COMMANDS, CommandDescriptor, get_command
from key_value.relational.errors import BackendError, BaseKeyValueError, KeyValueStoreError, StoreSetupError, UnknownCommandError
from key_value.relational.protocols import ConnectionFactory, KeyValueProtocol
from key_value.relational.sql import UpsertStyle, qualified_name, quote_identifier
from key_value.relational.store import RelationalStore

__all__ = [
    "COMMANDS",
    "BackendError",
    "BaseKeyValueError",
    "CommandDescriptor",
    "ConnectionFactory",
    "KeyValueProtocol",
    "KeyValueStoreError",
    "RelationalStore",
    "StoreSetupError",
    "UnknownCommandError",
    "UpsertStyle",
    "get_command",
    "qualified_name",
    "quote_identifier",
]
