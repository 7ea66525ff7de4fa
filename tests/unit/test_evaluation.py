"""Tests for the classifier evaluation harness."""

import pytest

from evaluation.config import EvalConfig
from evaluation.loader import load_tasks
from evaluation.run import run_evaluation


def test_load_tasks_skips_blank_descriptions(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text(
        "description,category,priority\n"
        "Pay the invoice,Finance,LOW\n"
        ",general,low\n",
        encoding="utf-8",
    )
    tasks = load_tasks(path)
    assert len(tasks) == 1
    assert tasks[0].category == "finance"
    assert tasks[0].priority == "low"


def test_load_tasks_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tasks(tmp_path / "missing.csv")


@pytest.mark.asyncio
async def test_run_evaluation_reports_accuracy(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text(
        "description,category,priority\n"
        "Schedule a meeting with client,scheduling,low\n"
        "Urgent bug fix needed today,technical,high\n"
        "Water the plants,general,medium\n",
        encoding="utf-8",
    )
    config = EvalConfig(data_path=path, results_dir=tmp_path / "results")

    output = await run_evaluation(config)

    meta = output["metadata"]
    assert meta["total_tasks"] == 3
    assert meta["category_accuracy"] == 1.0
    assert meta["priority_accuracy"] == pytest.approx(0.6667)
    assert output["results"][1]["predicted_priority"] == "high"
