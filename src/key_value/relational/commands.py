"""Static command descriptors consumed by an external launcher.

A descriptor only names the deployable module and the entry point a launcher should invoke;
nothing here resolves or runs either of them.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from key_value.relational.errors import UnknownCommandError


@dataclass(frozen=True)
class CommandDescriptor:
    """Associates an invocation name with a target module and entry point."""

    name: str
    module: str
    entrypoint: str


def _index(*descriptors: CommandDescriptor) -> Mapping[str, CommandDescriptor]:
    return MappingProxyType({descriptor.name: descriptor for descriptor in descriptors})


COMMANDS: Mapping[str, CommandDescriptor] = _index(
    CommandDescriptor(name="hive", module="presto-wrmsr-hadoop", entrypoint="com.wrmsr.presto.hadoop.hive.HiveMain"),
)


def get_command(name: str, commands: Mapping[str, CommandDescriptor] = COMMANDS) -> tuple[str, str]:
    """Look up the target of a command.

    Args:
        name: The invocation name.
        commands: The descriptor table to search.

    Returns:
        The `(module, entrypoint)` pair registered under the name.

    Raises:
        UnknownCommandError: If no descriptor is registered under the name.
    """
    if (descriptor := commands.get(name)) is None:
        raise UnknownCommandError(name=name)

    return descriptor.module, descriptor.entrypoint
