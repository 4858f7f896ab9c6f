"""Data-set providers: build steps whose output is a set of train/test splits."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

DEFAULT_DATA_SET_FILE = "datasets.yaml"


@runtime_checkable
class DataSetProvider(Protocol):
    """A step (such as a crossfold) that writes a data-set description file.

    ``data_set_file`` names the description the evaluator reads; it does not
    have to exist until the provider has run. ``output_files`` are the
    provider's own outputs, declared as inputs of any task consuming it.
    """

    @property
    def data_set_file(self) -> Path: ...

    @property
    def output_files(self) -> Sequence[Path]: ...


@dataclass(frozen=True)
class CrossfoldOutput:
    """Output layout of a crossfold step rooted at ``output_dir``."""

    output_dir: Path
    file_name: str = DEFAULT_DATA_SET_FILE

    @property
    def data_set_file(self) -> Path:
        return Path(self.output_dir) / self.file_name

    @property
    def output_files(self) -> Sequence[Path]:
        return (Path(self.output_dir),)


__all__ = ["DataSetProvider", "CrossfoldOutput", "DEFAULT_DATA_SET_FILE"]
