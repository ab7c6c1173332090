from __future__ import annotations

class LetterBoxError(Exception):
    """Base class for letterbox errors."""

class DictionaryLoadError(LetterBoxError):
    """The word list could not be fetched or read. Safe to retry."""
