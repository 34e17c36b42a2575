"""fallible: Option and Result containers for Python 3.13+.

Represent "value or absence" and "success or error" as immutable tagged
values instead of None checks and exceptions.

Flat imports (preferred):
    from fallible import Option, Some, Nothing, Result, Ok, Err, safe

Submodule imports (for organization):
    from fallible.option import Some, Nothing, from_nullable
    from fallible.result import Ok, Err, collect
    from fallible.errors import IllegalStateError, InvalidArgumentError
"""

from fallible._config import Config, get_config, init
from fallible._logging import configure_logging, get_logger
from fallible.decorators import safe
from fallible.errors import FallibleError, IllegalStateError, InvalidArgumentError
from fallible.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    from_nullable,
    nothing,
    some,
)
from fallible.result import Err, Ok, Result, collect

__all__ = [
    # Configuration
    'Config',
    # Result types
    'Err',
    # Errors
    'FallibleError',
    'IllegalStateError',
    'InvalidArgumentError',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'collect',
    'configure_logging',
    'from_nullable',
    'get_config',
    'get_logger',
    'init',
    'nothing',
    'safe',
    'some',
]
