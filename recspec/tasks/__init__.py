"""Evaluator command tasks."""

from recspec.tasks.base import EvalCommandTask, TaskState
from recspec.tasks.train_test import TrainTestTask

__all__ = ["EvalCommandTask", "TaskState", "TrainTestTask"]
