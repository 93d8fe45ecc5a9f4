from key_value.relational.errors.base import BaseKeyValueError


class UnknownCommandError(BaseKeyValueError):
    """Raised when a command name has no registered descriptor."""

    def __init__(self, name: str):
        super().__init__(
            message="No command is registered under this name.",
            extra_info={"name": name},
        )
