import logging
from collections.abc import Callable
from datetime import datetime

from voicetask.services.dates import DateTimeResolver
from voicetask.services.keywords import classify_priority, classify_status
from voicetask.services.normalizer import normalize
from voicetask.services.parsed_task import ParsedTaskData
from voicetask.services.title import TitleExtractor

logger = logging.getLogger(__name__)


class TranscriptParser:
    """Turns one spoken task description into structured task fields.

    Priority, status, due date and title are each extracted independently
    from the same trimmed transcript. Parsing never raises: anything that
    cannot be recognised is left empty or falls back to a default.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None):
        """Initialize the parser.

        Args:
            clock: Returns the current time when parse() is not given one.
                Defaults to datetime.now (local time).
        """
        self.clock = clock or datetime.now
        self.date_resolver = DateTimeResolver()
        self.title_extractor = TitleExtractor()

    def parse(self, transcript: str, now: datetime | None = None) -> ParsedTaskData:
        text = normalize(transcript)
        if now is None:
            now = self.clock()

        result = ParsedTaskData(
            title=self.title_extractor.extract(text.original),
            status=classify_status(text.lower),
            priority=classify_priority(text.lower),
            due_date=self.date_resolver.resolve(text.lower, now),
            raw_transcript=text.trimmed,
        )

        logger.debug(
            "Parsed transcript: title=%r status=%s priority=%s due=%s",
            result.title,
            result.status.value,
            result.priority.value if result.priority else None,
            result.due_date.isoformat() if result.due_date else None,
        )
        return result


_parser: TranscriptParser | None = None


def get_transcript_parser() -> TranscriptParser:
    global _parser
    if _parser is None:
        _parser = TranscriptParser()
    return _parser


def parse_transcript(transcript: str, now: datetime | None = None) -> ParsedTaskData:
    """Parse a transcript using the shared parser and the local clock."""
    return get_transcript_parser().parse(transcript, now=now)
