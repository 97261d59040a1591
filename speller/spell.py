# spell.py
from __future__ import annotations
import logging
from typing import Iterable, Iterator, List, Mapping, NamedTuple, Set

import editdistance   # pip install editdistance

from speller.errors import ConfigurationError
from speller.model import TOKEN_PATTERN, FrequencyModel, Source, build, load

logger = logging.getLogger(__name__)

# Peter Norvig style edit distance candidate generation
ALPHABET = 'abcdefghijklmnopqrstuvwxyz'


class Suggestion(NamedTuple):
    word: str
    distance: int       # Levenshtein distance from the (lowercased) input
    probability: float


class SpellCorrector:
    def __init__(
        self,
        freq: Mapping[str, int],
        alphabet: str = ALPHABET
    ) -> None:
        """
        freq     : word frequencies of the reference corpus (a FrequencyModel,
                   or any word -> count mapping, which gets wrapped into one)
        alphabet : characters tried by replace and insert edits
        """
        if not isinstance(alphabet, str) or not alphabet:
            raise ConfigurationError(f"alphabet must be a non-empty string, got {alphabet!r}")
        self.alphabet = alphabet
        self.freq = freq if isinstance(freq, FrequencyModel) else FrequencyModel(freq)

    @classmethod
    def from_text(cls, text: str, alphabet: str = ALPHABET, pattern: str = TOKEN_PATTERN) -> "SpellCorrector":
        return cls(build(text, pattern=pattern), alphabet=alphabet)

    @classmethod
    def from_file(
        cls,
        source: Source,
        alphabet: str = ALPHABET,
        pattern: str = TOKEN_PATTERN,
        encoding: str = "utf-8"
    ) -> "SpellCorrector":
        """
        Build a corrector from a corpus file (path or readable object).

        Raises DataSourceError when the corpus cannot be read and
        ConfigurationError for a bad pattern, encoding or alphabet.
        """
        return cls(load(source, pattern=pattern, encoding=encoding), alphabet=alphabet)

    def __contains__(self, word: str) -> bool:
        return word in self.freq

    def __len__(self) -> int:
        return len(self.freq)

    def probability(self, word: str) -> float:
        """Probability of a known `word`; KeyError for anything else."""
        return self.freq[word] / self.freq.total

    def correction(self, word: str) -> str:
        """
        Most probable spelling correction for `word`.

        The input is lowercased to match the corpus. Among equally probable
        candidates the alphabetically first one wins. When nothing known lies
        within two edits, `word` is returned exactly as given.
        """
        lower = word.lower()
        cands = self.candidates(lower)
        if not self.known(cands):
            return word
        # max() keeps the first of equal keys, so sort for a stable tie-break
        return max(sorted(cands), key=self.probability)

    def candidates(self, word: str) -> Set[str]:
        """
        Generate possible spelling corrections for `word`.

        Tiers are tried in order and the first non-empty one wins:
          1. the word itself, if known
          2. known words one edit away
          3. known words two edits away
          4. the word itself, unknown
        """
        if word in self.freq:
            return {word}
        c1 = self.known(self.edits1(word))
        if c1:
            logger.debug("%r: %d candidates at distance 1", word, len(c1))
            return c1
        c2 = self.known(self.edits2(word))
        if c2:
            logger.debug("%r: %d candidates at distance 2", word, len(c2))
            return c2
        logger.debug("%r: no known candidate within two edits", word)
        return {word}

    def known(self, words: Iterable[str]) -> Set[str]:
        """The subset of `words` that appear in the frequency table."""
        return {w for w in words if w in self.freq}

    def edits1(self, word: str) -> Set[str]:
        """All strings one delete, transpose, replace or insert away from `word`."""
        letters = self.alphabet
        splits     = [(word[:i], word[i:]) for i in range(len(word) + 1)]
        deletes    = [L + R[1:]               for L, R in splits if R]
        transposes = [L + R[1] + R[0] + R[2:] for L, R in splits if len(R) > 1]
        replaces   = [L + c + R[1:]           for L, R in splits if R for c in letters]
        inserts    = [L + c + R               for L, R in splits for c in letters]
        return set(deletes + transposes + replaces + inserts)

    def edits2(self, word: str) -> Iterator[str]:
        """All strings two edits away from `word`, lazily and with repeats."""
        return (e2 for e1 in self.edits1(word) for e2 in self.edits1(e1))

    def suggestions(self, word: str, limit: int = 10) -> List[Suggestion]:
        """
        Ranked corrections for `word`: most probable first, ties alphabetical.

        Only the pool of the tier that `correction` would use is ranked. An
        empty list means nothing known lies within two edits.
        """
        lower = word.lower()
        cands = self.known(self.candidates(lower))
        ranked = sorted(cands, key=lambda w: (-self.freq[w], w))
        return [
            Suggestion(w, editdistance.eval(lower, w), self.probability(w))
            for w in ranked[:max(limit, 0)]
        ]
