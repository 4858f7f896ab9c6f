import json
import logging
from pathlib import Path
from unittest import mock

import pytest

from recspec.cli import main as cli_main


def create_config(tmp_path: Path) -> Path:
    (tmp_path / "splits").mkdir()
    (tmp_path / "splits" / "ml100k.yaml").write_text("name: ml100k\n", encoding="utf-8")
    config_path = tmp_path / "eval.yaml"
    config_path.write_text(
        """
name: eval
default_thread_count: 2
datasets:
  - file: splits/ml100k.yaml
  - name: inline
    train: train.csv
    test: test.csv
algorithms:
  - file: algorithms/itemknn.json
tasks:
  - type: predict
    output_file: build/predictions.csv
    metrics: [RMSE]
""",
        encoding="utf-8",
    )
    return config_path


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logging.getLogger().handlers.clear()


def test_prepare_writes_spec(tmp_path, capsys):
    config_path = create_config(tmp_path)

    exit_code = cli_main.main(
        ["prepare", "--config", str(config_path), "--overrides", "thread_count=6"]
    )

    assert exit_code == 0
    spec_file = tmp_path.resolve() / "build" / "eval-spec.json"
    assert str(spec_file) in capsys.readouterr().out
    document = json.loads(spec_file.read_text(encoding="utf-8"))
    assert document["thread_count"] == 6
    assert document["datasets"][0] == str(tmp_path.resolve() / "splits" / "ml100k.yaml")
    assert document["datasets"][1]["name"] == "inline"
    assert list(document["algorithms"]) == ["itemknn"]


def test_outputs_lists_files_without_resolving(tmp_path, capsys):
    config_path = create_config(tmp_path)
    (tmp_path / "splits" / "ml100k.yaml").unlink()

    exit_code = cli_main.main(["outputs", "--config", str(config_path)])

    assert exit_code == 0
    lines = capsys.readouterr().out.split()
    build = tmp_path.resolve() / "build"
    assert lines == [str(build / "eval.csv"), str(build / "predictions.csv")]


def test_inputs_lists_declared_files(tmp_path, capsys):
    config_path = create_config(tmp_path)

    exit_code = cli_main.main(["inputs", "--config", str(config_path)])

    assert exit_code == 0
    root = tmp_path.resolve()
    assert capsys.readouterr().out.split() == [
        str(root / "splits" / "ml100k.yaml"),
        str(root / "algorithms" / "itemknn.json"),
    ]


def test_run_invokes_evaluator(tmp_path):
    config_path = create_config(tmp_path)

    with mock.patch("recspec.tasks.base.subprocess.run") as run:
        exit_code = cli_main.main(["run", "--config", str(config_path)])

    assert exit_code == 0
    spec_file = tmp_path.resolve() / "build" / "eval-spec.json"
    run.assert_called_once()
    assert run.call_args.args[0] == ["lenskit", "train-test", str(spec_file)]
