"""Latin to Baybayin transliteration engine."""

from .assembler import assemble, convert, convert_request
from .mapper import map_word
from .resolver import resolve_canceller, supported_cancellers
from .segmentation import is_standalone_mga, segment

__all__ = [
    "assemble",
    "convert",
    "convert_request",
    "is_standalone_mga",
    "map_word",
    "resolve_canceller",
    "segment",
    "supported_cancellers",
]
