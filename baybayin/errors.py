"""Exceptions raised at the edges of the transliterator.

The conversion engine itself never raises; these cover configuration,
batch files and the remote translation service.
"""


class BaybayinError(Exception):
    """Base class for transliterator errors."""

    pass


class ConfigError(BaybayinError):
    """Raised when settings cannot be loaded."""

    pass


class BatchError(BaybayinError):
    """Raised when a batch input cannot be converted."""

    pass


class TranslationError(BaybayinError):
    """Raised when the translation service fails."""

    pass
