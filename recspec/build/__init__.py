"""Build-engine contract: convention defaults and data-set providers."""

from recspec.build.conventions import (
    BuildConventions,
    TaskOverrides,
    TrainTestSettings,
    resolve_settings,
)
from recspec.build.providers import CrossfoldOutput, DataSetProvider

__all__ = [
    "BuildConventions",
    "TaskOverrides",
    "TrainTestSettings",
    "resolve_settings",
    "CrossfoldOutput",
    "DataSetProvider",
]
