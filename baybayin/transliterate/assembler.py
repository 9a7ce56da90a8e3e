"""Public conversion entry points."""

import logging
from collections.abc import Iterable

from baybayin.models import ConversionRequest, Span, SpanKind
from baybayin.tables.fonts import DEFAULT_CANCELLER, DEFAULT_FONT
from baybayin.tables.glyphs import MGA
from baybayin.transliterate.loanwords import normalize_endings as _normalize_endings
from baybayin.transliterate.mapper import map_word
from baybayin.transliterate.resolver import resolve_canceller
from baybayin.transliterate.segmentation import segment


logger = logging.getLogger(__name__)


def assemble(spans: Iterable[Span], canceller: str, normalize_endings: bool = False) -> str:
    """
    Render spans in order.

    Args:
        spans: Output of segment()
        canceller: Resolved canceller symbol
        normalize_endings: Rewrite English endings (-hn, -gh) before mapping

    Returns:
        Concatenated glyphs with whitespace kept verbatim
    """
    parts: list[str] = []

    for span in spans:
        if span.kind is SpanKind.WHITESPACE:
            parts.append(span.text)
        elif span.kind is SpanKind.MGA:
            parts.append(MGA)
        else:
            word = _normalize_endings(span.text) if normalize_endings else span.text
            parts.append(map_word(word, canceller))

    return "".join(parts)


def convert(
    text: object,
    canceller: object = DEFAULT_CANCELLER,
    font: object = DEFAULT_FONT,
    *,
    normalize_endings: bool = False,
) -> str:
    """
    Convert Latin text to Baybayin.

    Never raises: unknown fonts use the default font, unsupported cancellers
    are resolved against the font, and unrecognized characters pass through.

    Args:
        text: Latin text (Tagalog or English loanwords)
        canceller: Requested vowel-canceller symbol
        font: Font name
        normalize_endings: Rewrite English endings (-hn, -gh) before mapping

    Returns:
        Baybayin text, or "" for empty or non-string input
    """
    if not text or not isinstance(text, str):
        return ""

    resolved = resolve_canceller(canceller, font)
    spans = segment(text)
    logger.debug(f"Converting {len(spans)} spans with canceller {resolved!r}")

    return assemble(spans, resolved, normalize_endings=normalize_endings)


def convert_request(request: ConversionRequest, normalize_endings: bool = False) -> str:
    """Convert a ConversionRequest."""
    return convert(
        request.text,
        request.canceller,
        request.font,
        normalize_endings=normalize_endings,
    )
