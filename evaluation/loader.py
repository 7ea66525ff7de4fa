"""Dataset loader for labeled task descriptions."""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class LabeledTask:
    """A task description with its expected labels."""

    id: int
    description: str
    category: str
    priority: str


def load_tasks(path: Path) -> list[LabeledTask]:
    """Load labeled tasks from a CSV with description,category,priority columns."""
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")

    tasks = []
    with open(path, encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        for idx, row in enumerate(reader):
            task = LabeledTask(
                id=idx,
                description=(row.get("description") or "").strip(),
                category=(row.get("category") or "").strip().lower(),
                priority=(row.get("priority") or "").strip().lower(),
            )
            if task.description:
                tasks.append(task)

    logger.info("Loaded %d labeled tasks from %s", len(tasks), path)
    return tasks
