"""Coverage checks: which source characters were not transliterated."""

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from baybayin.tables.glyphs import BAYBAYIN_BLOCK_END, BAYBAYIN_BLOCK_START
from baybayin.transliterate import convert


# ASCII the fonts draw as glyphs: the A forms and the canceller marks
FONT_KEYED_ASCII = frozenset("Aa+x]_")

# Characters that are expected to survive unchanged
IGNORED_PASSTHROUGH = frozenset(".,;:!?-()[]{}\"'")


@dataclass
class CoverageResult:
    """Result of a coverage check."""

    total_texts: int
    texts_with_passthrough: int
    passthrough_chars: Counter[str]
    examples: list[dict[str, str]]

    @property
    def is_complete(self) -> bool:
        return self.texts_with_passthrough == 0


def is_baybayin_codepoint(char: str) -> bool:
    """
    Check if a character is in the Baybayin Unicode block.

    Args:
        char: Single character

    Returns:
        True if in Baybayin block
    """
    if len(char) != 1:
        return False

    code = ord(char)
    return BAYBAYIN_BLOCK_START <= code <= BAYBAYIN_BLOCK_END


def get_passthrough_chars(output: str) -> set[str]:
    """
    Find characters in converted output that were not transliterated.

    Args:
        output: Result of convert()

    Returns:
        Set of leftover characters (whitespace, punctuation, and
        font-keyed ASCII excluded)
    """
    leftover = set()

    for char in output:
        if char.isspace() or char in IGNORED_PASSTHROUGH or char in FONT_KEYED_ASCII:
            continue

        if not is_baybayin_codepoint(char):
            leftover.add(char)

    return leftover


def check_coverage(
    texts: Iterable[str],
    logger: logging.Logger,
    canceller: str = "+",
    font: str = "Baybayin Simple",
    max_examples: int = 10,
) -> CoverageResult:
    """
    Convert texts and report characters the engine passed through.

    Args:
        texts: Latin source texts
        logger: Logger instance
        canceller: Requested vowel-canceller symbol
        font: Font name
        max_examples: Maximum number of examples to collect

    Returns:
        Coverage result
    """
    passthrough: Counter[str] = Counter()
    texts_with_passthrough = 0
    examples: list[dict[str, str]] = []
    total = 0

    for text in texts:
        total += 1
        output = convert(text, canceller, font)
        chars = get_passthrough_chars(output)

        if chars:
            texts_with_passthrough += 1
            passthrough.update(chars)

            if len(examples) < max_examples:
                examples.append(
                    {
                        "text": text[:100],
                        "output": output[:100],
                        "passthrough": ", ".join(sorted(chars)),
                    }
                )

    logger.info(f"Found {texts_with_passthrough}/{total} texts with untransliterated characters")

    return CoverageResult(
        total_texts=total,
        texts_with_passthrough=texts_with_passthrough,
        passthrough_chars=passthrough,
        examples=examples,
    )
