"""Vowel-canceller resolution against font capabilities."""

import logging

from baybayin.models import CancellerSymbol
from baybayin.tables.fonts import CANCELLER_ORDER, DEFAULT_CANCELLER, get_font


logger = logging.getLogger(__name__)


def resolve_canceller(requested: object, font: object) -> str:
    """
    Reconcile a requested canceller with what the font can render.

    Unknown fonts resolve against the default font. Unsupported or unknown
    cancellers fall back to the font's documented default if it has one,
    then to the first supported canceller in canonical order, then to "+".
    The result is stable: resolving it again returns the same symbol.

    Args:
        requested: Requested canceller symbol
        font: Font name

    Returns:
        A canceller symbol the font supports
    """
    profile = get_font(font)

    if profile.supports(requested):
        # Enum members resolve to their plain symbol
        return CancellerSymbol(requested).value

    if profile.fallback_canceller is not None:
        resolved = profile.fallback_canceller
    else:
        resolved = next(
            (symbol for symbol in CANCELLER_ORDER if profile.supports(symbol)),
            DEFAULT_CANCELLER,
        )

    logger.debug(f"Canceller {requested!r} not supported by {profile.name}, using {resolved!r}")
    return resolved


def supported_cancellers(font: object) -> tuple[str, ...]:
    """
    List the cancellers a font supports, for populating a selector.

    Args:
        font: Font name (unknown names use the default font)

    Returns:
        Supported canceller symbols in canonical order
    """
    return get_font(font).supported
