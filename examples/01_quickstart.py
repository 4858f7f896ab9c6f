"""Quickstart: assemble a train-test spec from Python.

Run from a project directory containing ``algorithms/itemknn.json``:

    python examples/01_quickstart.py
"""

from __future__ import annotations

from pathlib import Path

from recspec import BuildConventions, TrainTestTask
from recspec.utils.logging_utils import configure_logging


def main() -> None:
    configure_logging("info")
    task = TrainTestTask("quickstart", BuildConventions(project_dir=Path.cwd()))
    task.thread_count = 4
    task.data_set(name="ml100k", train="data/ml100k/train.csv", test="data/ml100k/test.csv")
    task.algorithm("algorithms/itemknn.json")
    task.algorithm("algorithms/pop.json", name="popular")

    predict = task.predict(output_file="build/predictions.csv")
    predict.metric("RMSE")
    predict.metric("CoveragePredictMetric")

    def top_n(config):
        config.list_size = 10
        config.candidates = "allItems"
        config.exclude = "user.trainItems"
        config.metric("ndcg", listSize=10)

    task.recommend(top_n, output_file="build/recommendations.csv")

    print("Outputs:")
    for path in sorted(task.output_files()):
        print(f"  {path}")
    spec_file = task.prepare()
    print(f"Spec written to {spec_file}")
    print("Evaluator command:", " ".join(task.command_line()))


if __name__ == "__main__":
    main()
