"""Cyclopts-powered CLI entrypoints for recspec."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Sequence

from cyclopts import App, Parameter

from recspec.config import build_task, load_train_test_config
from recspec.tasks.train_test import TrainTestTask
from recspec.utils.logging_utils import configure_logging

app = App(help="Assemble and run train-test recommender evaluations")

ConfigOption = Annotated[
    Path, Parameter(help="Path to a YAML train-test config file")
]
OverridesOption = Annotated[
    tuple[str, ...],
    Parameter(
        help="Optional overrides in key=value form (e.g. thread_count=8)",
        show_default=False,
    ),
]
LogLevelOption = Annotated[
    str, Parameter(help="Logging level (critical/error/warning/info/debug/trace)")
]


def _load_task(config: Path, overrides: Sequence[str]) -> TrainTestTask:
    return build_task(load_train_test_config(config, overrides))


@app.command()
def prepare(
    *,
    config: ConfigOption,
    overrides: OverridesOption = (),
    log_level: LogLevelOption = "info",
) -> int:
    """Write the experiment spec file without running the evaluator."""

    configure_logging(log_level)
    task = _load_task(config, overrides)
    spec_file = task.prepare()
    print(spec_file)
    return 0


@app.command()
def outputs(
    *,
    config: ConfigOption,
    overrides: OverridesOption = (),
    log_level: LogLevelOption = "warning",
) -> int:
    """List the files the evaluation will write."""

    configure_logging(log_level)
    task = _load_task(config, overrides)
    for path in sorted(task.output_files()):
        print(path)
    return 0


@app.command()
def inputs(
    *,
    config: ConfigOption,
    overrides: OverridesOption = (),
    log_level: LogLevelOption = "warning",
) -> int:
    """List the files the evaluation depends on."""

    configure_logging(log_level)
    task = _load_task(config, overrides)
    for path in task.inputs:
        print(path)
    return 0


@app.command()
def run(
    *,
    config: ConfigOption,
    overrides: OverridesOption = (),
    log_level: LogLevelOption = "info",
) -> int:
    """Write the spec file and run the evaluator's train-test command."""

    configure_logging(log_level)
    task = _load_task(config, overrides)
    task.execute()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parsed_argv = list(argv) if argv is not None else None
    try:
        result = app(parsed_argv)
    except SystemExit as exc:  # pragma: no cover - CLI integration path
        return int(exc.code or 0)
    return int(result) if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
