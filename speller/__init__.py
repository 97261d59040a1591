from speller.errors import ConfigurationError, DataSourceError, SpellerError
from speller.model import FrequencyModel, build, load, read_corpus
from speller.spell import ALPHABET, SpellCorrector, Suggestion

__all__ = [
    "ALPHABET",
    "ConfigurationError",
    "DataSourceError",
    "FrequencyModel",
    "SpellCorrector",
    "SpellerError",
    "Suggestion",
    "build",
    "load",
    "read_corpus",
]
