"""recspec - assemble train-test experiment specs for recommender evaluation.

The primary interface is :class:`TrainTestTask`:

    from recspec import BuildConventions, TrainTestTask
    task = TrainTestTask("eval", BuildConventions(project_dir="."))
    task.data_set(name="ml100k", train="train.csv", test="test.csv")
    task.algorithm("itemknn.json")
    task.predict()
    task.prepare()
"""

from recspec._version import __version__
from recspec.build import BuildConventions, CrossfoldOutput, DataSetProvider
from recspec.exceptions import (
    RecSpecError,
    ConfigurationError,
    UnsupportedOptionError,
    MissingSourceError,
    SerializationError,
    TaskStateError,
    ExecutionError,
)
from recspec.tasks import TaskState, TrainTestTask


def __getattr__(name: str):
    """Lazy-load optional submodules on first access."""
    import importlib

    _LAZY_SUBMODULES = {"config", "cli"}
    if name in _LAZY_SUBMODULES:
        return importlib.import_module(f"recspec.{name}")
    raise AttributeError(f"module 'recspec' has no attribute {name!r}")


__all__ = [
    "TrainTestTask",
    "TaskState",
    "BuildConventions",
    "CrossfoldOutput",
    "DataSetProvider",
    # Exceptions
    "RecSpecError",
    "ConfigurationError",
    "UnsupportedOptionError",
    "MissingSourceError",
    "SerializationError",
    "TaskStateError",
    "ExecutionError",
    # Submodules (lazy)
    "config",
    "cli",
    # Version
    "__version__",
]
