"""In-memory todo list. Nothing here is persisted."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from craifter.textio import printable


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, text: str) -> TaskStatus:
        """Unrecognized status → PENDING."""
        try:
            return cls(text)
        except ValueError:
            return cls.PENDING

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


class Priority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, text: str | None) -> Priority:
        """Missing or unrecognized priority → MEDIUM."""
        try:
            return cls(text)
        except ValueError:
            return cls.MEDIUM


@dataclass
class TodoItem:
    id: str
    task: str
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING

    def format(self) -> str:
        return f"[{self.id}] {self.task} ({self.status.label}, {self.priority.value})"


@dataclass
class TodoList:
    items: list[TodoItem] = field(default_factory=list)

    def add(self, id: str, task: str, priority: Priority = Priority.MEDIUM) -> TodoItem:
        item = TodoItem(id=id, task=task, priority=priority)
        self.items.append(item)
        return item

    def find(self, id: str) -> TodoItem | None:
        for item in self.items:
            if item.id == id:
                return item
        return None

    def update_status(self, id: str, status: TaskStatus) -> bool:
        """Set the status of the first item with `id`. Returns False if absent."""
        item = self.find(id)
        if item is None:
            return False
        item.status = status
        return True

    def display_all(self) -> None:
        for item in self.items:
            print(printable(item.format()))
