from __future__ import annotations

import pytest

from recspec.config import loader
from recspec.exceptions import ConfigurationError

CONFIG = """
name: eval
default_thread_count: 2
datasets:
  - name: ml100k
    train: train.csv
    test: test.csv
  - crossfold: build/crossfold
algorithms:
  - file: algorithms/itemknn.json
tasks:
  - type: predict
    metrics: [RMSE, {type: TopNnDCG, listSize: 10}]
"""


def test_load_config_supports_overrides(tmp_path):
    config_path = tmp_path / "eval.yaml"
    config_path.write_text(CONFIG, encoding="utf-8")

    config = loader.load_train_test_config(
        config_path, overrides=["thread_count=8", "share_model_components=false"]
    )

    assert config.name == "eval"
    assert config.thread_count == 8
    assert config.share_model_components is False
    assert config.datasets[0].name == "ml100k"
    assert config.datasets[1].crossfold == "build/crossfold"
    assert config.algorithms[0].file == "algorithms/itemknn.json"
    assert config.algorithms[0].name is None
    assert config.tasks[0].metrics == ["RMSE", {"type": "TopNnDCG", "listSize": 10}]


def test_project_dir_is_relative_to_config_file(tmp_path):
    config_dir = tmp_path / "configs"
    config_dir.mkdir()
    config_path = config_dir / "eval.yaml"
    config_path.write_text("project_dir: ..\n", encoding="utf-8")

    config = loader.load_train_test_config(config_path)

    assert config.project_dir == str(tmp_path.resolve())


def test_unknown_keys_are_configuration_errors(tmp_path):
    config_path = tmp_path / "eval.yaml"
    config_path.write_text("threads: 4\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="threads"):
        loader.load_train_test_config(config_path)


def test_algorithm_file_is_required(tmp_path):
    config_path = tmp_path / "eval.yaml"
    config_path.write_text("algorithms:\n  - name: knn\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        loader.load_train_test_config(config_path)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        loader.load_train_test_config(tmp_path / "absent.yaml")
