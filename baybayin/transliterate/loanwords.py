"""Loanword handling: consonant clusters, x, and English spelling endings."""

from functools import lru_cache
from types import MappingProxyType

from baybayin.tables.glyphs import (
    CONSONANTS,
    VOWELS,
    X_DEFAULT_SEED,
    X_SEED_VOWELS,
    glyph_for,
    syllable,
)


# English endings rewritten before mapping (John -> Jon, burgh -> burg)
ENDING_RULES: tuple[tuple[str, str], ...] = (
    ("hn", "n"),
    ("gh", "g"),
)


@lru_cache(maxsize=None)
def cluster_table(canceller: str) -> MappingProxyType[str, str]:
    """
    Build the loanword cluster table for a canceller.

    Keys are lowercase. Built once per distinct canceller.

    Args:
        canceller: Resolved canceller symbol

    Returns:
        Read-only mapping of Latin cluster to glyphs
    """
    k, d, s, t, w, y = (CONSONANTS[c] for c in "kdstwy")
    table: dict[str, str] = {}

    for vowel in sorted(VOWELS):
        # J -> dy
        table[f"j{vowel}"] = glyph_for(d, canceller) + syllable(y, vowel)
        # Ch -> ts
        table[f"ch{vowel}"] = glyph_for(t, canceller) + syllable(s, vowel)

    # Qu: que/qui collapse to ke/ki, qua/quo keep the w
    table["que"] = syllable(k, "e")
    table["qui"] = syllable(k, "i")
    table["qua"] = glyph_for(k, canceller) + syllable(w, "a")
    table["quo"] = glyph_for(k, canceller) + syllable(w, "o")

    # Cy/ci -> si
    table["cy"] = glyph_for(s, canceller) + syllable("", "i")
    table["ci"] = table["cy"]

    return MappingProxyType(table)


def match_cluster(word: str, i: int, canceller: str) -> tuple[str, int] | None:
    """
    Match a loanword cluster at a position.

    Args:
        word: Word being mapped
        i: Cursor position
        canceller: Resolved canceller symbol

    Returns:
        Tuple of (glyphs, characters consumed), or None if nothing matches
    """
    table = cluster_table(canceller)
    head = word[i].lower()

    if head == "q":
        triple = word[i : i + 3].lower()
        if triple in table:
            return table[triple], 3

    elif head == "j":
        pair = word[i : i + 2].lower()
        if pair in table:
            return table[pair], 2

    elif head == "c":
        triple = word[i : i + 3].lower()
        if triple.startswith("ch") and triple in table:
            return table[triple], 3

        pair = triple[:2]
        if pair in ("cy", "ci"):
            return table[pair], 2

    return None


def x_seed_vowel(word: str, i: int) -> str:
    """
    Pick the vowel glyph written before an x.

    Args:
        word: Word being mapped
        i: Position of the x

    Returns:
        Seed vowel glyph, or "" after a consonant
    """
    if i == 0 or word[i - 1] == "-":
        return X_DEFAULT_SEED
    return X_SEED_VOWELS.get(word[i - 1].lower(), "")


def map_x(word: str, i: int, canceller: str) -> str:
    """
    Map an x as /ks/ with its reconstructed seed vowel.

    Args:
        word: Word being mapped
        i: Position of the x
        canceller: Resolved canceller symbol

    Returns:
        Seed vowel (if any) followed by ka+canceller and sa+canceller
    """
    ks = glyph_for(CONSONANTS["k"], canceller) + glyph_for(CONSONANTS["s"], canceller)
    return x_seed_vowel(word, i) + ks


def normalize_endings(word: str) -> str:
    """
    Rewrite silent English spelling endings.

    Args:
        word: Word token

    Returns:
        Word with the first matching ending replaced
    """
    lowered = word.lower()
    for ending, replacement in ENDING_RULES:
        if lowered.endswith(ending):
            return word[: -len(ending)] + replacement
    return word
