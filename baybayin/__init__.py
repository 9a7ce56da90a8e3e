"""
Baybayin transliterator.

Renders Latin-alphabet Tagalog (and English loanwords) as Baybayin script
for six Baybayin fonts and four vowel-canceller conventions.
"""

from baybayin.models import CancellerSymbol, ConversionRequest, FontProfile, VowelCanceller
from baybayin.tables.fonts import font_family, get_canceller, get_font, list_fonts
from baybayin.transliterate import convert, convert_request, resolve_canceller, supported_cancellers

__version__ = "1.0.0"

__all__ = [
    "CancellerSymbol",
    "ConversionRequest",
    "FontProfile",
    "VowelCanceller",
    "convert",
    "convert_request",
    "font_family",
    "get_canceller",
    "get_font",
    "list_fonts",
    "resolve_canceller",
    "supported_cancellers",
]
