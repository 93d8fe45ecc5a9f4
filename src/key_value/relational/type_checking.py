from collections.abc import Callable
from typing import Any, TypeVar

from beartype import BeartypeConf, BeartypeStrategy, beartype

F = TypeVar("F", bound=Callable[..., Any])

enforce_bear_type_conf = BeartypeConf(strategy=BeartypeStrategy.O1)

enforce_bear_type = beartype(conf=enforce_bear_type_conf)


def bear_enforce(func: F) -> F:
    """Check arguments and return values against the annotations at call time."""
    return enforce_bear_type(func)
