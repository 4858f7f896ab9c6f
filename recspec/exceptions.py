"""recspec exception hierarchy.

All recspec-specific exceptions inherit from RecSpecError, so a build
driver can stop on any specification failure with a single except clause:

    try:
        task.prepare()
    except recspec.RecSpecError as e:
        report_and_halt(e)

Each domain exception also inherits from its stdlib counterpart so
``except FileNotFoundError:`` / ``except ValueError:`` handlers keep
working.
"""

from __future__ import annotations


class RecSpecError(Exception):
    """Base exception for all recspec errors."""


class ConfigurationError(RecSpecError, ValueError):
    """Invalid configuration, parameters, or options."""


class UnsupportedOptionError(RecSpecError, NotImplementedError):
    """A recognised option that is not supported."""


class MissingSourceError(RecSpecError, FileNotFoundError):
    """A data-set source does not exist when it is resolved."""


class SerializationError(RecSpecError, TypeError):
    """A value cannot be converted to its document form."""


class TaskStateError(RecSpecError, RuntimeError):
    """Operation not allowed in the task's current lifecycle state."""


class ExecutionError(RecSpecError, RuntimeError):
    """The external evaluation command failed."""


__all__ = [
    "RecSpecError",
    "ConfigurationError",
    "UnsupportedOptionError",
    "MissingSourceError",
    "SerializationError",
    "TaskStateError",
    "ExecutionError",
]
