from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass
class Task:
    text: str
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Subject:
    name: str
    tasks: List[Task] = field(default_factory=list)
    completed: int = 0
    total: int = 0

    def add_task(self, task: Task) -> None:
        """
        Append a task and keep the counters in step with the task list.
        """
        self.tasks.append(task)
        self.total += 1
        if task.completed:
            self.completed += 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "tasks": [task.to_dict() for task in self.tasks],
            "completed": self.completed,
            "total": self.total,
        }
