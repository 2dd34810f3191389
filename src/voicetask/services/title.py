"""Task title extraction.

The title is what is left of the transcript once request phrasing, dates,
times, priorities and status labels are cut out. Fragment removal uses its own
phrase lists and does not depend on what the classifiers detected.
"""

import re

from voicetask.services.parsed_task import UNTITLED_TASK

_WEEKDAYS = "monday|tuesday|wednesday|thursday|friday|saturday|sunday"


class TitleExtractor:
    """Strips filler and date/priority/status fragments to leave a task title."""

    # Applied once each, in order, to the start of the text
    PREFIX_PATTERNS = [
        re.compile(
            r"^(create|add|make|set up|setup|new|remind me to|i need to|i have to"
            r"|i want to|please|can you)\s+",
            re.IGNORECASE,
        ),
        re.compile(r"^(a )?(task|reminder|todo|to-do|item)\s+(to|for|about)?\s*", re.IGNORECASE),
    ]

    # Removed wherever they occur
    FRAGMENT_PATTERNS = [
        # "in 3 days", "in 2 weeks"
        re.compile(r"\bin\s+[0-9]+\s+(?:days?|weeks?)\b", re.IGNORECASE),
        # "by Friday", "due tomorrow", "next week"
        re.compile(
            r"\b(?:(?:by|before|until|due|on|this|next)\s+){0,2}"
            rf"(?:day after tomorrow|today|tomorrow|next week|this week|{_WEEKDAYS})\b",
            re.IGNORECASE,
        ),
        # "on 12/25", "3-4-2025"
        re.compile(
            r"\b(?:(?:by|before|until|due|on)\s+)?[0-9]{1,2}[/\-][0-9]{1,2}(?:[/\-][0-9]{2,4})?\b",
            re.IGNORECASE,
        ),
        # "at 3pm", "10:30 am"
        re.compile(r"\b(?:at\s+)?[0-9]{1,2}(?::[0-9]{2})?\s*(?:am|pm)\b", re.IGNORECASE),
        # "at 5", "at 17:30"
        re.compile(r"\bat\s+[0-9]{1,2}(?::[0-9]{2})?\b", re.IGNORECASE),
        # "in the morning", "by end of day"
        re.compile(
            r"\b(?:(?:in the|at|by|before|until|this)\s+)?"
            r"(?:midnight|morning|afternoon|evening|tonight|night|noon|end of day|eod)\b",
            re.IGNORECASE,
        ),
        # "it's urgent", "high priority"
        re.compile(
            r"\b(?:it'?s?\s+)?(?:not urgent|urgently|urgent|high priority|medium priority"
            r"|low priority|high|medium|low|important|critical|asap|emergency|normal"
            r"|whenever)\b",
            re.IGNORECASE,
        ),
        # Bare status words like "done" or "complete" are often the task itself
        re.compile(r"\b(?:in progress|not started)\b", re.IGNORECASE),
        # "priority: high", "with status done", bare "priority"
        re.compile(
            r"\b(?:with\s+)?(?:priority|status)\b(?:\s*:)?"
            r"(?:\s*(?:urgent|high|medium|low|todo|to do|pending|not started|in progress"
            r"|ongoing|started|done|completed|complete|finished)\b)?",
            re.IGNORECASE,
        ),
    ]

    EDGE_PUNCTUATION = " ,.-"

    def extract(self, text: str) -> str:
        """Build a title from original-case transcript text.

        Returns:
            The cleaned title with its first character upper-cased, or
            "Untitled Task" when nothing is left.
        """
        title = text

        for pattern in self.PREFIX_PATTERNS:
            title = pattern.sub("", title, count=1)

        for pattern in self.FRAGMENT_PATTERNS:
            title = pattern.sub("", title)

        title = re.sub(r"\s+", " ", title)
        title = title.strip(self.EDGE_PUNCTUATION)

        if title:
            title = title[0].upper() + title[1:]

        return title or UNTITLED_TASK


_extractor = TitleExtractor()


def extract_title(original: str) -> str:
    return _extractor.extract(original)
