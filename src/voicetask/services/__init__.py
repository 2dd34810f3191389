"""Transcript parsing services for voicetask.

Imports are lazy so that importing one service does not pull in the others.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS: dict[str, tuple[str, str]] = {
    # Orchestrator
    "TranscriptParser": ("voicetask.services.parser", "TranscriptParser"),
    "get_transcript_parser": ("voicetask.services.parser", "get_transcript_parser"),
    "parse_transcript": ("voicetask.services.parser", "parse_transcript"),
    # Result
    "ParsedTaskData": ("voicetask.services.parsed_task", "ParsedTaskData"),
    "UNTITLED_TASK": ("voicetask.services.parsed_task", "UNTITLED_TASK"),
    # Normalizer
    "NormalizedTranscript": ("voicetask.services.normalizer", "NormalizedTranscript"),
    "normalize": ("voicetask.services.normalizer", "normalize"),
    # Keyword classifiers
    "KeywordClassifier": ("voicetask.services.keywords", "KeywordClassifier"),
    "PRIORITY_KEYWORDS": ("voicetask.services.keywords", "PRIORITY_KEYWORDS"),
    "STATUS_KEYWORDS": ("voicetask.services.keywords", "STATUS_KEYWORDS"),
    "classify_priority": ("voicetask.services.keywords", "classify_priority"),
    "classify_status": ("voicetask.services.keywords", "classify_status"),
    # Dates
    "DATE_RULES": ("voicetask.services.dates", "DATE_RULES"),
    "TIME_RULES": ("voicetask.services.dates", "TIME_RULES"),
    "DateTimeResolver": ("voicetask.services.dates", "DateTimeResolver"),
    "resolve_datetime": ("voicetask.services.dates", "resolve_datetime"),
    # Title
    "TitleExtractor": ("voicetask.services.title", "TitleExtractor"),
    "extract_title": ("voicetask.services.title", "extract_title"),
}

__all__ = list(_EXPORTS.keys())


def __getattr__(name: str) -> Any:
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_name, attr_name = _EXPORTS[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_EXPORTS.keys()))
