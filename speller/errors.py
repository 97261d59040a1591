# errors.py
from __future__ import annotations


class SpellerError(Exception):
    """Base class for everything the corrector raises at construction time."""


class DataSourceError(SpellerError):
    """The corpus could not be read (missing file, permissions, bad encoding)."""


class ConfigurationError(SpellerError):
    """A token pattern, alphabet or setting is malformed."""
