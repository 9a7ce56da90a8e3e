"""Grapheme mapper: Latin word to Baybayin glyphs.

A single left-to-right pass. At each position the rule classes are tried in
priority order and the first one that matches consumes its characters:

1. nga/nge/ngi/ngo/ngu
2. standalone ng
3. loanword clusters (qu-, j-, ch-, cy/ci)
4. x as /ks/
5. f/v/z/c localization (feeds 7 and 8)
6. A/a, the only case-sensitive rule
7. consonant + vowel syllable
8. bare consonant, standalone vowel, or pass-through
"""

from baybayin.tables.glyphs import (
    A_FORMS,
    CONSONANTS,
    LOCALIZATION,
    NGA,
    STANDALONE_VOWELS,
    VOWELS,
    glyph_for,
    syllable,
)
from baybayin.transliterate.loanwords import map_x, match_cluster


def map_word(word: str, canceller: str) -> str:
    """
    Map a single word token to Baybayin.

    Args:
        word: Non-whitespace token
        canceller: Resolved canceller symbol

    Returns:
        Glyph string; unrecognized characters are kept verbatim
    """
    out: list[str] = []
    i = 0
    n = len(word)

    while i < n:
        glyphs, consumed = _map_at(word, i, canceller)
        out.append(glyphs)
        i += consumed

    return "".join(out)


def _map_at(word: str, i: int, canceller: str) -> tuple[str, int]:
    """Apply the first matching rule class at position i."""
    char = word[i]
    lower = char.lower()

    # 1-2. Nga family
    if word[i : i + 2].lower() == "ng":
        following = word[i + 2 : i + 3].lower()
        if following in VOWELS:
            return syllable(NGA, following), 3
        return glyph_for(NGA, canceller), 2

    # 3. Loanword clusters
    cluster = match_cluster(word, i, canceller)
    if cluster is not None:
        return cluster

    # 4. X
    if lower == "x":
        return map_x(word, i, canceller), 1

    # 5. Localization
    localized = LOCALIZATION.get(lower, lower)

    # 6. Historical vs modern A, checked on the raw character
    if char in A_FORMS:
        return A_FORMS[char], 1

    # 7-8. Syllables and bare consonants
    base = CONSONANTS.get(localized)
    if base is not None:
        following = word[i + 1 : i + 2].lower()
        if following in VOWELS:
            return syllable(base, following), 2
        return glyph_for(base, canceller), 1

    # 8. Standalone vowels
    if localized in STANDALONE_VOWELS:
        return STANDALONE_VOWELS[localized], 1

    return char, 1
