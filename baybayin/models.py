"""Data models for the Baybayin transliteration engine."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class CancellerSymbol(str, Enum):
    """Vowel-canceller symbol, in canonical order."""

    KURUS = "+"
    EKIS = "x"
    PAMUDPOD = "]"
    PANGALTAS = "_"


class SpanKind(str, Enum):
    """Kind of segment produced by the segmenter."""

    WHITESPACE = "WHITESPACE"
    WORD = "WORD"
    MGA = "MGA"


@dataclass(frozen=True)
class VowelCanceller:
    """A vowel-cancellation mark (virama convention)."""

    symbol: str
    name: str
    description: str
    is_modern: bool
    font_dependent: bool = True


@dataclass(frozen=True)
class FontProfile:
    """A Baybayin typeface and the cancellers it can render."""

    name: str
    support: Mapping[str, bool]
    fallback_canceller: str | None = None

    def __post_init__(self) -> None:
        # Freeze the support matrix so profiles can be shared between callers
        object.__setattr__(self, "support", MappingProxyType(dict(self.support)))

    def supports(self, symbol: Any) -> bool:
        """Check whether the font renders the given canceller symbol."""
        if not isinstance(symbol, str):
            return False
        return self.support.get(symbol, False) is True

    @property
    def supported(self) -> tuple[str, ...]:
        """Supported canceller symbols in canonical order."""
        return tuple(c.value for c in CancellerSymbol if self.supports(c.value))

    @property
    def font_family(self) -> str:
        """CSS font-family used to render output in this font."""
        return self.name


@dataclass(frozen=True)
class ConversionRequest:
    """A single transliteration request."""

    text: str
    canceller: str = CancellerSymbol.KURUS.value
    font: str = "Baybayin Simple"


@dataclass(frozen=True)
class Span:
    """A run of input text: whitespace, a word, or the plural marker."""

    kind: SpanKind
    text: str

