# backend/modules/sentiment/services/lexicon.py

"""
Word polarity lexicon.

The default word list is AFINN-en-165 as shipped by the ``afinn`` package:
about 3,400 English words with signed integer weights in -5..+5.

Each entry is kept twice. The exact lower-cased word maps to its own
weight, and the Porter stem of the word maps to the strongest weight among
the words sharing that stem. A token that is itself a listed word uses its
own weight, so "affected" stays -1 even though "affection" (+3) has the same
stem. Inflections that are not listed ("hating", "frauds") fall back to the
stem table.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from afinn import Afinn

from modules.sentiment.services.stemmer import Stemmer

logger = logging.getLogger(__name__)

DEFAULT_LEXICON_LANGUAGE = "en"

MIN_WEIGHT = -5
MAX_WEIGHT = 5


class LexiconError(Exception):
    """Raised when a lexicon source cannot be read"""


class Lexicon:
    """Immutable word -> weight and stem -> weight tables"""

    def __init__(
        self,
        weights: Mapping[str, int],
        words: Optional[Mapping[str, int]] = None,
    ):
        self._weights = MappingProxyType(dict(weights))
        self._words = MappingProxyType(dict(words or {}))

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[Tuple[str, int]],
        stemmer: Optional[Stemmer] = None,
    ) -> "Lexicon":
        """
        Build a lexicon from (word, weight) pairs.

        Words that collapse to the same stem keep the strongest weight
        (largest absolute value) in the stem table; on a tie the first
        entry seen wins. Phrases and zero weights are dropped because they
        can never contribute to a score, and weights outside -5..+5 are
        dropped because the score scale assumes that range.
        """
        stemmer = stemmer or Stemmer()
        weights: Dict[str, int] = {}
        words: Dict[str, int] = {}

        for word, weight in entries:
            word = (word or "").strip().lower()
            if not word or any(ch.isspace() for ch in word):
                continue
            if weight == 0:
                continue
            if not MIN_WEIGHT <= weight <= MAX_WEIGHT:
                logger.warning(
                    f"Skipping lexicon entry {word!r}: weight {weight} "
                    f"outside {MIN_WEIGHT}..{MAX_WEIGHT}"
                )
                continue

            _keep_strongest(words, word, weight)
            _keep_strongest(weights, stemmer.stem(word), weight)

        return cls(weights, words)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        stemmer: Optional[Stemmer] = None,
    ) -> "Lexicon":
        """Load an AFINN-style word<TAB>weight file"""
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as handle:
                entries = list(_parse_lines(handle, str(path)))
        except OSError as e:
            raise LexiconError(f"Cannot read lexicon file {path}: {e}") from e

        lexicon = cls.from_entries(entries, stemmer=stemmer)
        logger.info(
            f"Loaded sentiment lexicon from {path}: "
            f"{len(entries)} entries, {len(lexicon)} stems"
        )
        return lexicon

    @classmethod
    def load_default(cls, stemmer: Optional[Stemmer] = None) -> "Lexicon":
        """Build the lexicon from the AFINN word list bundled with ``afinn``"""
        try:
            word_list = Afinn(language=DEFAULT_LEXICON_LANGUAGE)._dict
        except Exception as e:
            raise LexiconError(f"Cannot load the AFINN word list: {e}") from e

        lexicon = cls.from_entries(word_list.items(), stemmer=stemmer)
        logger.info(
            f"Loaded AFINN sentiment lexicon: "
            f"{len(word_list)} entries, {len(lexicon)} stems"
        )
        return lexicon

    def lookup(self, stem: str) -> Optional[int]:
        return self._weights.get(stem)

    def lookup_word(self, word: str) -> Optional[int]:
        """Weight of an exact (lower-cased) listed word"""
        return self._words.get(word)

    def __contains__(self, stem: object) -> bool:
        return stem in self._weights

    def __len__(self) -> int:
        return len(self._weights)

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    @property
    def weights(self) -> Mapping[str, int]:
        return self._weights

    @property
    def words(self) -> Mapping[str, int]:
        return self._words


def _keep_strongest(table: Dict[str, int], key: str, weight: int) -> None:
    existing = table.get(key)
    if existing is None or abs(weight) > abs(existing):
        table[key] = weight


def _parse_lines(lines: Iterable[str], source: str) -> Iterator[Tuple[str, int]]:
    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\n")
        if not line.strip() or line.lstrip().startswith("#"):
            continue

        word, sep, value = line.rpartition("\t")
        if not sep or not word.strip():
            logger.warning(f"Skipping malformed lexicon line {source}:{line_no}: {line!r}")
            continue

        try:
            weight = int(value.strip())
        except ValueError:
            logger.warning(f"Skipping lexicon line {source}:{line_no} with bad weight {value!r}")
            continue

        yield word, weight
