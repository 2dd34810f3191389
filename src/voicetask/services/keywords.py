"""Keyword classifiers for task priority and status.

Both tables are scanned top to bottom and the first keyword contained in the
text wins. Matching is plain substring containment, so order carries meaning:
"urgent" is listed before "not urgent" and therefore claims it, and "high"
also fires inside "highlight".
"""

import logging
from typing import Generic, TypeVar

from voicetask.schemas import TaskPriority, TaskStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")

PRIORITY_KEYWORDS: tuple[tuple[str, TaskPriority], ...] = (
    ("urgent", TaskPriority.URGENT),
    ("urgently", TaskPriority.URGENT),
    ("asap", TaskPriority.URGENT),
    ("critical", TaskPriority.URGENT),
    ("emergency", TaskPriority.URGENT),
    ("high priority", TaskPriority.HIGH),
    ("high", TaskPriority.HIGH),
    ("important", TaskPriority.HIGH),
    ("medium priority", TaskPriority.MEDIUM),
    ("medium", TaskPriority.MEDIUM),
    ("normal", TaskPriority.MEDIUM),
    ("low priority", TaskPriority.LOW),
    ("low", TaskPriority.LOW),
    ("whenever", TaskPriority.LOW),
    ("not urgent", TaskPriority.LOW),
)

STATUS_KEYWORDS: tuple[tuple[str, TaskStatus], ...] = (
    ("to do", TaskStatus.TODO),
    ("todo", TaskStatus.TODO),
    ("pending", TaskStatus.TODO),
    ("not started", TaskStatus.TODO),
    ("in progress", TaskStatus.IN_PROGRESS),
    ("working on", TaskStatus.IN_PROGRESS),
    ("started", TaskStatus.IN_PROGRESS),
    ("ongoing", TaskStatus.IN_PROGRESS),
    ("done", TaskStatus.DONE),
    ("completed", TaskStatus.DONE),
    ("finished", TaskStatus.DONE),
    ("complete", TaskStatus.DONE),
)


class KeywordClassifier(Generic[T]):
    """First-match-wins lookup over an ordered (keyword, value) table."""

    def __init__(self, table: tuple[tuple[str, T], ...], name: str):
        self.table = table
        self.name = name

    def classify(self, text: str) -> T | None:
        for keyword, value in self.table:
            if keyword in text:
                logger.debug("%s keyword %r matched", self.name, keyword)
                return value
        return None


priority_classifier: KeywordClassifier[TaskPriority] = KeywordClassifier(
    PRIORITY_KEYWORDS, "priority"
)
status_classifier: KeywordClassifier[TaskStatus] = KeywordClassifier(STATUS_KEYWORDS, "status")


def classify_priority(lower: str) -> TaskPriority | None:
    return priority_classifier.classify(lower)


def classify_status(lower: str) -> TaskStatus:
    return status_classifier.classify(lower) or TaskStatus.TODO
