"""Lifecycle and process invocation shared by evaluator command tasks."""

from __future__ import annotations

import logging
import subprocess
from enum import Enum
from typing import Sequence

from recspec.build.conventions import BuildConventions, PathLike
from recspec.exceptions import ExecutionError, TaskStateError

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "lenskit"


class TaskState(str, Enum):
    CONFIGURING = "configuring"
    PREPARING = "preparing"
    READY = "ready"


class EvalCommandTask:
    """Base class for tasks that run one command of the evaluator executable.

    Subclasses accept registrations while ``CONFIGURING``, write whatever the
    command needs in :meth:`do_prepare`, and describe the command line through
    :attr:`command` and :meth:`command_args`.
    """

    command: str = ""

    def __init__(
        self,
        name: str,
        conventions: BuildConventions | None = None,
        *,
        executable: str = DEFAULT_EXECUTABLE,
        log_file: PathLike | None = None,
        log_file_level: str | None = None,
        extra_args: Sequence[str] = (),
    ) -> None:
        if not name:
            raise ValueError("Task name must be a non-empty string.")
        self.name = name
        self.conventions = conventions or BuildConventions()
        self.executable = executable
        self.log_file = log_file
        self.log_file_level = log_file_level
        self.extra_args = list(extra_args)
        self._state = TaskState.CONFIGURING

    @property
    def state(self) -> TaskState:
        return self._state

    def _require_configuring(self, operation: str) -> None:
        if self._state is not TaskState.CONFIGURING:
            raise TaskStateError(
                f"Cannot {operation} on task '{self.name}' in state "
                f"{self._state.value}; registration must finish before preparing."
            )

    def prepare(self):
        """Write everything the command needs; returns the subclass's result."""
        self._state = TaskState.PREPARING
        result = self.do_prepare()
        self._state = TaskState.READY
        return result

    def do_prepare(self):
        return None

    def command_args(self) -> list[str]:
        return []

    def global_args(self) -> list[str]:
        args: list[str] = []
        if self.log_file is not None:
            args += ["--log-file", str(self.conventions.file(self.log_file))]
        if self.log_file_level is not None:
            args += ["--log-file-level", self.log_file_level.upper()]
        return args

    def command_line(self) -> list[str]:
        if not self.command:
            raise NotImplementedError(f"{type(self).__name__} does not define a command")
        return [
            self.executable,
            *self.global_args(),
            *self.extra_args,
            self.command,
            *self.command_args(),
        ]

    def execute(self) -> None:
        """Prepare the task and run the evaluator command."""
        self.prepare()
        argv = self.command_line()
        logger.info("Running %s", " ".join(argv))
        try:
            subprocess.run(argv, check=True, cwd=self.conventions.project_dir)
        except FileNotFoundError as exc:
            raise ExecutionError(
                f"Evaluator executable not found: {self.executable}"
            ) from exc
        except subprocess.CalledProcessError as exc:
            raise ExecutionError(
                f"Command '{self.command}' for task '{self.name}' failed "
                f"with exit code {exc.returncode}"
            ) from exc


__all__ = ["EvalCommandTask", "TaskState", "DEFAULT_EXECUTABLE"]
