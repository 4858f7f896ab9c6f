"""Build train-test tasks from loaded configs."""

from __future__ import annotations

import logging
from pathlib import Path

from recspec.build.conventions import BuildConventions
from recspec.build.providers import DEFAULT_DATA_SET_FILE, CrossfoldOutput
from recspec.exceptions import ConfigurationError
from recspec.specs.tasks import TASK_TYPES
from recspec.tasks.train_test import TrainTestTask

from . import schema

logger = logging.getLogger(__name__)


def conventions_from_config(config: schema.TrainTestConfig) -> BuildConventions:
    return BuildConventions(
        project_dir=Path(config.project_dir),
        build_dir=Path(config.build_dir) if config.build_dir else None,
        thread_count=config.default_thread_count,
    )


def build_task(config: schema.TrainTestConfig) -> TrainTestTask:
    """Replay a config onto a new :class:`TrainTestTask`, in file order."""
    evaluator = config.evaluator
    task = TrainTestTask(
        config.name,
        conventions_from_config(config),
        executable=evaluator.executable,
        log_file=evaluator.log_file,
        log_file_level=evaluator.log_file_level,
        extra_args=evaluator.extra_args,
    )
    task.output_file = config.output_file
    task.user_output_file = config.user_output_file
    task.cache_directory = config.cache_directory
    task.thread_count = config.thread_count
    task.share_model_components = config.share_model_components
    task.spec_file = config.spec_file

    for index, entry in enumerate(config.datasets):
        _add_data_set(task, entry, index)
    for entry in config.algorithms:
        task.algorithm(entry.file, entry.name)
    for index, entry in enumerate(config.tasks):
        _add_eval_task(task, entry, index)

    logger.debug(
        "Configured task %s: %d data sets, %d algorithms, %d eval tasks",
        task.name,
        len(task.data_sources),
        len(task.algorithms),
        len(task.tasks),
    )
    return task


def _add_data_set(
    task: TrainTestTask, entry: schema.DataSetEntryConfig, index: int
) -> None:
    inline = entry.name is not None or entry.train is not None or entry.test is not None
    forms = [
        form
        for form, used in (
            ("file", entry.file is not None),
            ("crossfold", entry.crossfold is not None),
            ("inline", inline),
        )
        if used
    ]
    if len(forms) != 1:
        raise ConfigurationError(
            f"datasets[{index}] must use exactly one of file, crossfold, or "
            f"name/train/test; got {forms or 'none'}."
        )

    form = forms[0]
    if form != "crossfold" and (entry.isolate or entry.data_set_file):
        raise ConfigurationError(
            f"datasets[{index}]: isolate and data_set_file only apply to crossfold entries."
        )
    if form == "file":
        task.data_set_file(entry.file)
    elif form == "crossfold":
        provider = CrossfoldOutput(
            task.conventions.file(entry.crossfold),
            entry.data_set_file or DEFAULT_DATA_SET_FILE,
        )
        task.data_sets_from(provider, isolate=entry.isolate)
    else:
        task.data_set(name=entry.name, train=entry.train, test=entry.test)


def _add_eval_task(
    task: TrainTestTask, entry: schema.EvalTaskEntryConfig, index: int
) -> None:
    if entry.type not in TASK_TYPES:
        raise ConfigurationError(
            f"tasks[{index}]: unknown task type '{entry.type}'. "
            f"Available: {', '.join(sorted(TASK_TYPES))}"
        )
    fields = {"output_file": entry.output_file, "metrics": list(entry.metrics)}
    recommend_fields = {
        "list_size": entry.list_size,
        "candidates": entry.candidates,
        "exclude": entry.exclude,
        "label_prefix": entry.label_prefix,
    }
    if entry.type == "recommend":
        task.recommend(**fields, **recommend_fields)
        return
    stray = sorted(key for key, value in recommend_fields.items() if value is not None)
    if stray:
        raise ConfigurationError(
            f"tasks[{index}]: {', '.join(stray)} only apply to recommend tasks."
        )
    task.predict(**fields)


__all__ = ["build_task", "conventions_from_config"]
