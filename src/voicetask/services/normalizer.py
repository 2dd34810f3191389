from typing import NamedTuple


class NormalizedTranscript(NamedTuple):
    lower: str  # for keyword and pattern matching
    original: str  # original case, for title construction
    trimmed: str  # echoed back as raw_transcript


def normalize(raw: str) -> NormalizedTranscript:
    """Trim surrounding whitespace; nothing else is folded or stripped."""
    trimmed = raw.strip()
    return NormalizedTranscript(lower=trimmed.lower(), original=trimmed, trimmed=trimmed)
