"""Exceptions raised by the suggestion core.

"No suggestions found" and "already spelled correctly" are ordinary
results, never exceptions.
"""

from __future__ import annotations


class SuggestError(Exception):
    """Base exception for all didyoumean errors."""


class InvalidConfiguration(SuggestError, ValueError):
    """A suggestion setting is out of range (e.g. ``max_results < 1``)."""


class EmptyDictionary(SuggestError):
    """The dictionary holds no words to match against."""


class WordListNotFound(SuggestError, FileNotFoundError):
    """No word list file exists for the requested language or path."""
