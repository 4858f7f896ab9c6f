"""Version of the recspec distribution."""

from __future__ import annotations

import tomllib
from importlib import metadata
from pathlib import Path

DISTRIBUTION = "recspec"
_PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def get_version() -> str:
    """Installed version, or the pyproject version in a source checkout."""
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:  # pragma: no cover - source checkout
        pass
    if not _PYPROJECT.is_file():
        return "0.0.0"
    project = tomllib.loads(_PYPROJECT.read_text(encoding="utf-8")).get("project", {})
    return str(project.get("version", "0.0.0"))


__version__ = get_version()

__all__ = ["__version__", "get_version"]
