"""Load train-test configs from YAML files with dotlist overrides."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from recspec.exceptions import ConfigurationError

from . import schema


def load_train_test_config(
    path: str | Path, overrides: Iterable[str] | None = None
) -> schema.TrainTestConfig:
    """Load a config file and apply ``key=value`` overrides.

    Relative ``project_dir`` values are taken relative to the config file.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        base = OmegaConf.structured(schema.TrainTestConfig)
        file_conf = OmegaConf.load(config_path)
        merged = OmegaConf.merge(base, file_conf)
        override_list = list(overrides or [])
        if override_list:
            merged = OmegaConf.merge(merged, OmegaConf.from_dotlist(override_list))
        config = OmegaConf.to_object(merged)
    except OmegaConfBaseException as exc:
        raise ConfigurationError(f"Invalid config {config_path}: {exc}") from exc

    assert isinstance(config, schema.TrainTestConfig)
    project_dir = Path(config.project_dir).expanduser()
    if not project_dir.is_absolute():
        config.project_dir = str((config_path.parent / project_dir).resolve())
    return config


__all__ = ["load_train_test_config"]
