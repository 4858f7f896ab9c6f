"""Structured configuration definitions for OmegaConf."""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class DataSetEntryConfig:
    # Exactly one of: file, crossfold, or an inline name/train/test record
    file: Optional[str] = None
    crossfold: Optional[str] = None
    data_set_file: Optional[str] = None
    isolate: bool = False
    name: Optional[str] = None
    train: Any = None
    test: Any = None


@dataclass
class AlgorithmEntryConfig:
    file: str = "???"
    name: Optional[str] = None


@dataclass
class EvalTaskEntryConfig:
    type: str = "predict"
    output_file: Optional[str] = None
    metrics: List[Any] = field(default_factory=list)
    list_size: Optional[int] = None
    candidates: Optional[str] = None
    exclude: Optional[str] = None
    label_prefix: Optional[str] = None


@dataclass
class EvaluatorConfig:
    executable: str = "lenskit"
    log_file: Optional[str] = None
    log_file_level: Optional[str] = None
    extra_args: List[str] = field(default_factory=list)


@dataclass
class TrainTestConfig:
    name: str = "train-test"
    project_dir: str = "."
    build_dir: Optional[str] = None
    default_thread_count: int = 1
    output_file: Optional[str] = None
    user_output_file: Optional[str] = None
    cache_directory: Optional[str] = None
    thread_count: Optional[int] = None
    share_model_components: bool = True
    spec_file: Optional[str] = None
    datasets: List[DataSetEntryConfig] = field(default_factory=list)
    algorithms: List[AlgorithmEntryConfig] = field(default_factory=list)
    tasks: List[EvalTaskEntryConfig] = field(default_factory=list)
    evaluator: EvaluatorConfig = field(default_factory=EvaluatorConfig)
