"""Glyph tables for Latin to Baybayin mapping.

Glyphs are Unicode Baybayin (U+1700 block) except where the supported fonts
key a form off an ASCII character: the two A forms and the vowel cancellers
themselves are emitted as ASCII and drawn by the font.
"""

from types import MappingProxyType


# Unicode Baybayin block: U+1700 to U+171F
BAYBAYIN_BLOCK_START = 0x1700
BAYBAYIN_BLOCK_END = 0x171F

# Consonant base glyphs (inherent vowel a)
CONSONANTS: MappingProxyType[str, str] = MappingProxyType(
    {
        "b": "ᜊ",  # ba
        "k": "ᜃ",  # ka
        "d": "ᜇ",  # da
        "g": "ᜄ",  # ga
        "h": "ᜑ",  # ha
        "l": "ᜎ",  # la
        "m": "ᜋ",  # ma
        "n": "ᜈ",  # na
        "p": "ᜉ",  # pa
        "r": "ᜍ",  # ra
        "s": "ᜐ",  # sa
        "t": "ᜆ",  # ta
        "w": "ᜏ",  # wa
        "y": "ᜌ",  # ya
    }
)

NGA = "ᜅ"

# Vowel kudlit marks: upper for e/i, lower for o/u, none for a
VOWEL_MARKS: MappingProxyType[str, str] = MappingProxyType(
    {
        "a": "",
        "e": "ᜒ",
        "i": "ᜒ",
        "o": "ᜓ",
        "u": "ᜓ",
    }
)

VOWELS = frozenset(VOWEL_MARKS)

# Standalone vowels.
# NOTE: "o" has no glyph in the legacy table while "u" does. Kept as-is
# until the intended o/u glyph is confirmed.
STANDALONE_VOWELS: MappingProxyType[str, str] = MappingProxyType(
    {
        "e": "ᜁ",
        "i": "ᜁ",
        "o": "",
        "u": "ᜂ",
    }
)

# Case-sensitive A forms: historical root (A) vs modern simplified (a)
A_FORMS: MappingProxyType[str, str] = MappingProxyType({"A": "A", "a": "a"})

# "mga" read as ma-nga, no canceller on the m
MGA = "ᜋᜄ"

# Seed vowels reconstructed in front of an x (/ks/)
X_SEED_VOWELS: MappingProxyType[str, str] = MappingProxyType(
    {
        "a": "ᜀ",
        "e": "ᜁ",
        "i": "ᜁ",
        "o": "ᜂ",
        "u": "ᜂ",
    }
)
X_DEFAULT_SEED = "ᜁ"

# Loanword phoneme localization
LOCALIZATION: MappingProxyType[str, str] = MappingProxyType(
    {
        "f": "p",
        "v": "b",
        "z": "s",
        "c": "k",
    }
)


def syllable(consonant: str, vowel: str) -> str:
    """
    Build a consonant+vowel syllable glyph.

    Args:
        consonant: Base consonant glyph
        vowel: Lowercase vowel letter

    Returns:
        Base glyph with the vowel's kudlit attached
    """
    return consonant + VOWEL_MARKS[vowel]


def glyph_for(consonant: str, canceller: str) -> str:
    """
    Build a bare consonant (vowel cancelled).

    Args:
        consonant: Base consonant glyph
        canceller: Resolved canceller symbol

    Returns:
        Base glyph followed by the canceller mark
    """
    return consonant + canceller
