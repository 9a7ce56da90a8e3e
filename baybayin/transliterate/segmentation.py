"""Split input text into whitespace runs and word tokens."""

import re

from baybayin.models import Span, SpanKind


# Whitespace runs are kept as separate items by the capturing group
RE_WHITESPACE_SPLIT = re.compile(r"(\s+)")

# Standalone plural marker, whole span only
RE_MGA = re.compile(r"[Mm]ga")


def is_standalone_mga(word: str) -> bool:
    """
    Check if a word is the plural marker "mga"/"Mga".

    Args:
        word: A single non-whitespace token

    Returns:
        True if the whole token is "mga" or "Mga"
    """
    return RE_MGA.fullmatch(word) is not None


def segment(text: str) -> list[Span]:
    """
    Segment text into alternating whitespace and word spans.

    Args:
        text: Input text

    Returns:
        Spans in original order; joining their text gives back the input
    """
    spans: list[Span] = []

    for part in RE_WHITESPACE_SPLIT.split(text):
        # re.split yields empty strings at the edges
        if not part:
            continue

        if part.isspace():
            spans.append(Span(SpanKind.WHITESPACE, part))
        elif is_standalone_mga(part):
            spans.append(Span(SpanKind.MGA, part))
        else:
            spans.append(Span(SpanKind.WORD, part))

    return spans
