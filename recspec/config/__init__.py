"""Configuration loading for train-test tasks."""

from .loader import load_train_test_config
from .runtime import build_task, conventions_from_config
from .schema import TrainTestConfig

__all__ = [
    "TrainTestConfig",
    "build_task",
    "conventions_from_config",
    "load_train_test_config",
]
