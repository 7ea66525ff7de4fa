"""Main evaluation script - generates JSON results."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).parent.parent))

from evaluation.config import EvalConfig
from evaluation.executor import Executor
from evaluation.loader import LabeledTask, load_tasks

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _accuracy(results: list[dict[str, Any]], field: str) -> float:
    if not results:
        return 0.0
    hits = sum(1 for r in results if r[f"gold_{field}"] == r[f"predicted_{field}"])
    return round(hits / len(results), 4)


async def evaluate_task(executor: Executor, task: LabeledTask) -> dict[str, Any]:
    """Evaluate a single labeled task."""
    prediction = await executor.classify(task.description)
    return {
        "id": task.id,
        "description": task.description,
        "gold_category": task.category,
        "gold_priority": task.priority,
        "predicted_category": prediction["category"],
        "predicted_priority": prediction["priority"],
        "category_confidence": prediction.get("category_confidence"),
        "priority_confidence": prediction.get("priority_confidence"),
        "intent": prediction.get("intent"),
    }


async def run_evaluation(config: EvalConfig) -> dict[str, Any]:
    """Run evaluation and return results."""
    tasks = load_tasks(config.data_path)

    results: list[dict[str, Any]] = []
    async with Executor(use_enrichment=config.use_enrichment) as executor:
        for task in tasks:
            results.append(await evaluate_task(executor, task))

    return {
        "metadata": {
            "timestamp": datetime.now().isoformat(),
            "total_tasks": len(results),
            "dataset": config.data_path.name,
            "enrichment": config.use_enrichment,
            "category_accuracy": _accuracy(results, "category"),
            "priority_accuracy": _accuracy(results, "priority"),
        },
        "results": results,
    }


async def main() -> None:
    parser = argparse.ArgumentParser(description="Evaluate the task classifier")
    parser.add_argument("--data", type=str, help="Labeled CSV path")
    parser.add_argument("--enrich", action="store_true", help="Apply ML enrichment")
    parser.add_argument("--output", type=str, help="Output JSON path")
    args = parser.parse_args()

    config = EvalConfig(use_enrichment=args.enrich)
    if args.data:
        config.data_path = Path(args.data)
    output = await run_evaluation(config)

    output_path = Path(args.output) if args.output else config.output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(output, f, indent=2, ensure_ascii=False, default=str)

    meta = output["metadata"]
    logger.info(
        "Category accuracy %.2f, priority accuracy %.2f over %d tasks",
        meta["category_accuracy"],
        meta["priority_accuracy"],
        meta["total_tasks"],
    )
    logger.info("Results saved to %s", output_path)


if __name__ == "__main__":
    asyncio.run(main())
