"""Specification building blocks: sources, configuration blocks, documents."""

from recspec.specs.datasets import DataSetConfig
from recspec.specs.documents import normalize_document, normalize_key, render_document
from recspec.specs.sources import (
    DataSetSource,
    DeferredSource,
    InlineSource,
    RawFileSource,
    resolve_all,
)
from recspec.specs.tasks import EvalTaskConfig, RecommendEvalTaskConfig

__all__ = [
    "DataSetConfig",
    "DataSetSource",
    "DeferredSource",
    "EvalTaskConfig",
    "InlineSource",
    "RawFileSource",
    "RecommendEvalTaskConfig",
    "normalize_document",
    "normalize_key",
    "render_document",
    "resolve_all",
]
