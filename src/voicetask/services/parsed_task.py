from dataclasses import dataclass
from datetime import datetime
from typing import Any

from voicetask.schemas import TaskCreate, TaskPriority, TaskStatus

UNTITLED_TASK = "Untitled Task"


@dataclass
class ParsedTaskData:
    title: str
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority | None = None
    due_date: datetime | None = None
    raw_transcript: str = ""
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value if self.priority else None,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "raw_transcript": self.raw_transcript,
        }

    def to_task_create(self, default_priority: TaskPriority | None = None) -> TaskCreate:
        """Build a task payload, filling a missing priority with a default.

        Args:
            default_priority: Priority used when none was detected.
                Defaults to settings.default_priority.
        """
        priority = self.priority
        if priority is None:
            if default_priority is None:
                from voicetask.config import settings

                default_priority = settings.default_priority
            priority = default_priority

        return TaskCreate(
            title=self.title,
            description=self.description or "",
            status=self.status,
            priority=priority,
            due_date=self.due_date,
            transcription=self.raw_transcript or None,
        )
