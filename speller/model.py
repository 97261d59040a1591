# model.py
from __future__ import annotations
import logging
import os
import re
from collections import Counter
from collections.abc import Mapping
from typing import IO, Iterator, List, Optional, Tuple, Union

from speller.errors import ConfigurationError, DataSourceError

logger = logging.getLogger(__name__)

# maximal runs of letters, digits and underscore
TOKEN_PATTERN = r"\w+"

Source = Union[str, "os.PathLike[str]", IO]


class FrequencyModel(Mapping):
    """
    Read-only word -> count table built from a reference corpus.

    Only words that actually occurred are stored, so membership doubles as
    the "known word" test. Unlike a Counter, looking up an absent word
    raises KeyError instead of returning 0.
    """

    def __init__(self, counts: Mapping[str, int]) -> None:
        """
        counts : word -> occurrence count; keys are lowercased and merged,
                 zero entries are dropped
        """
        table = {}
        for word, count in counts.items():
            if count < 0:
                raise ConfigurationError(f"negative count {count} for {word!r}")
            if count:
                key = word.lower()
                table[key] = table.get(key, 0) + count
        self._counts = table
        # the table never changes, so the normalizer is computed once
        self._total = sum(table.values())

    @property
    def total(self) -> int:
        """Sum of all counts, used to normalize probabilities."""
        return self._total

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        """Words by descending count, ties alphabetical."""
        ranked = sorted(self._counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return ranked if n is None else ranked[:n]

    def __getitem__(self, word: str) -> int:
        return self._counts[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"<FrequencyModel with {len(self)} words, {self._total} tokens>"


def _compile(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except (re.error, TypeError) as exc:
        raise ConfigurationError(f"invalid token pattern {pattern!r}: {exc}") from exc


def build(text: str, pattern: str = TOKEN_PATTERN) -> FrequencyModel:
    """
    Count every lowercased token of `text`.

    text    : raw, already decoded corpus text
    pattern : regular expression a token must match (default: \\w+)
    """
    token_re = _compile(pattern)
    # empty matches are possible with patterns like \w*, they are not words
    counts = Counter(tok.lower() for tok in (m.group(0) for m in token_re.finditer(text)) if tok)
    return FrequencyModel(counts)


def read_corpus(source: Source, encoding: str = "utf-8") -> str:
    """
    Return the full text of `source`.

    source   : a filesystem path, or any object with a read() method
    encoding : used to open paths and to decode bytes from read()
    """
    try:
        "".encode(encoding)
    except LookupError as exc:
        raise ConfigurationError(f"unknown encoding {encoding!r}") from exc

    try:
        if hasattr(source, "read"):
            data = source.read()
        else:
            with open(source, encoding=encoding) as fp:
                data = fp.read()
        if isinstance(data, bytes):
            data = data.decode(encoding)
    except (OSError, ValueError) as exc:   # ValueError: bad bytes, closed handle
        raise DataSourceError(f"cannot read corpus {source!r}: {exc}") from exc

    if not isinstance(data, str):
        raise DataSourceError(f"corpus {source!r} produced {type(data).__name__}, expected text")
    return data


def load(source: Source, pattern: str = TOKEN_PATTERN, encoding: str = "utf-8") -> FrequencyModel:
    """Read `source` and build its frequency model."""
    # compile first so a bad pattern fails before any I/O
    _compile(pattern)
    model = build(read_corpus(source, encoding=encoding), pattern=pattern)
    logger.info("Built frequency model from %r: %d words, %d tokens", source, len(model), model.total)
    return model
