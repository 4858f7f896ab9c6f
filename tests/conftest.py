from __future__ import annotations

from pathlib import Path

import pytest

from recspec.build import BuildConventions
from recspec.tasks import TrainTestTask


@pytest.fixture
def conventions(tmp_path: Path) -> BuildConventions:
    return BuildConventions(project_dir=tmp_path, thread_count=2)


@pytest.fixture
def root(conventions: BuildConventions) -> Path:
    return conventions.project_dir


@pytest.fixture
def task(conventions: BuildConventions) -> TrainTestTask:
    return TrainTestTask("eval", conventions)


@pytest.fixture
def write_file(root: Path):
    def _write(relative: str, text: str = "") -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
