"""Convention defaults supplied by the surrounding build engine."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from recspec.exceptions import ConfigurationError

PathLike = str | os.PathLike


@dataclass(frozen=True)
class BuildConventions:
    """Immutable snapshot of the build engine's defaults for one project."""

    project_dir: Path = field(default_factory=Path.cwd)
    build_dir: Path | None = None
    thread_count: int = 1

    def __post_init__(self) -> None:
        project_dir = Path(self.project_dir).resolve()
        object.__setattr__(self, "project_dir", project_dir)
        if self.build_dir is None:
            build_dir = project_dir / "build"
        else:
            build_dir = self.file(self.build_dir)
        object.__setattr__(self, "build_dir", build_dir)
        if self.thread_count < 0:
            raise ConfigurationError("BuildConventions.thread_count must be >= 0.")

    def file(self, value: PathLike) -> Path:
        """Resolve ``value`` against the project directory.

        ``..`` segments are collapsed but symlinks are kept as given.
        """
        path = Path(os.fspath(value)).expanduser()
        if not path.is_absolute():
            path = self.project_dir / path
        return Path(os.path.normpath(path))


@dataclass
class TaskOverrides:
    """Per-task values set during configuration; ``None`` means use the convention."""

    output_file: PathLike | None = None
    user_output_file: PathLike | None = None
    cache_directory: PathLike | None = None
    thread_count: int | None = None
    share_model_components: bool = True
    spec_file: PathLike | None = None


@dataclass(frozen=True)
class TrainTestSettings:
    """Resolved scalar settings of a train-test task."""

    output_file: Path
    user_output_file: Path | None
    cache_directory: Path | None
    thread_count: int
    share_model_components: bool
    spec_file: Path


def resolve_settings(
    conventions: BuildConventions,
    task_name: str,
    overrides: TaskOverrides,
) -> TrainTestSettings:
    """Combine convention defaults with per-task overrides.

    Defaults follow the build engine's naming: ``<build_dir>/<task>.csv`` for
    the output file and ``<build_dir>/<task>-spec.json`` for the spec file.
    """
    if not task_name:
        raise ConfigurationError("Task name must be a non-empty string.")

    build_dir = conventions.build_dir
    assert build_dir is not None

    def _optional(value: PathLike | None) -> Path | None:
        return conventions.file(value) if value is not None else None

    thread_count = (
        overrides.thread_count
        if overrides.thread_count is not None
        else conventions.thread_count
    )
    if thread_count < 0:
        raise ConfigurationError(f"thread_count must be >= 0, got {thread_count}.")

    return TrainTestSettings(
        output_file=_optional(overrides.output_file) or build_dir / f"{task_name}.csv",
        user_output_file=_optional(overrides.user_output_file),
        cache_directory=_optional(overrides.cache_directory),
        thread_count=thread_count,
        share_model_components=bool(overrides.share_model_components),
        spec_file=_optional(overrides.spec_file)
        or build_dir / f"{task_name}-spec.json",
    )


__all__ = [
    "BuildConventions",
    "TaskOverrides",
    "TrainTestSettings",
    "resolve_settings",
]
