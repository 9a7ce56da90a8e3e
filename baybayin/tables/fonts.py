"""Font profiles and vowel-canceller registry."""

from types import MappingProxyType

from baybayin.models import CancellerSymbol, FontProfile, VowelCanceller


DEFAULT_FONT = "Baybayin Simple"
DEFAULT_CANCELLER = CancellerSymbol.KURUS.value

# Canonical enumeration order used for every fallback scan
CANCELLER_ORDER: tuple[str, ...] = tuple(c.value for c in CancellerSymbol)

VOWEL_CANCELLERS: MappingProxyType[str, VowelCanceller] = MappingProxyType(
    {
        "+": VowelCanceller(
            symbol="+",
            name="Kurus",
            description="Cross-shaped mark placed below the character, introduced in the Doctrina Christiana",
            is_modern=False,
        ),
        "x": VowelCanceller(
            symbol="x",
            name="Ekis",
            description="Traditional rotated cross symbol placed below the character to cancel vowel sound",
            is_modern=False,
        ),
        "]": VowelCanceller(
            symbol="]",
            name="Pamudpod",
            description="Traditional close bracket symbol placed next to the character to cancel vowel sound",
            is_modern=False,
        ),
        "_": VowelCanceller(
            symbol="_",
            name="Pangaltas",
            description="Modern vowel cancellation symbol developed by Leyson, placed below the character",
            is_modern=True,
        ),
    }
)


def _profile(
    name: str,
    kurus: bool,
    ekis: bool,
    pamudpod: bool,
    pangaltas: bool,
    fallback: str | None = None,
) -> FontProfile:
    return FontProfile(
        name=name,
        support={"+": kurus, "x": ekis, "]": pamudpod, "_": pangaltas},
        fallback_canceller=fallback,
    )


FONT_PROFILES: MappingProxyType[str, FontProfile] = MappingProxyType(
    {
        profile.name: profile
        for profile in (
            _profile("Baybayin Simple", True, True, True, True),
            _profile("Tawbid Ukit", True, True, True, False),
            # Kariktan has no cross marks; pamudpod is its documented default
            _profile("Baybayin Kariktan", False, False, True, True, fallback="]"),
            _profile("Baybayin Filipino", True, True, True, False),
            _profile("Doctrina Christiana", True, False, False, False),
            _profile("Baybayin Jose Rizal", True, True, False, False),
        )
    }
)


def get_font(name: object) -> FontProfile:
    """
    Look up a font profile.

    Args:
        name: Font name

    Returns:
        The named profile, or the default profile if the name is unknown
    """
    if isinstance(name, str) and name in FONT_PROFILES:
        return FONT_PROFILES[name]
    return FONT_PROFILES[DEFAULT_FONT]


def get_canceller(symbol: object) -> VowelCanceller | None:
    """Look up a vowel canceller by symbol."""
    if not isinstance(symbol, str):
        return None
    return VOWEL_CANCELLERS.get(symbol)


def list_fonts() -> tuple[str, ...]:
    """Return all font names in registry order."""
    return tuple(FONT_PROFILES)


def font_family(name: object) -> str:
    """
    Return the CSS font-family that renders output for a font.

    Args:
        name: Font name

    Returns:
        Font family name (the default font's family if unknown)
    """
    return get_font(name).font_family
