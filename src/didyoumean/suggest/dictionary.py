from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from didyoumean.utils.distance import normalize
from didyoumean.utils.log import get_logger

logger = get_logger(__name__)


class Dictionary:
    """Immutable set of valid words, bucketed by length.

    Every word lives in exactly one bucket keyed by ``len(word)``; buckets are
    sorted so enumeration order never depends on the input order.
    """

    __slots__ = ("_case_sensitive", "_words", "_folded", "_buckets", "_folded_buckets")

    def __init__(self, words: Iterable[str], case_sensitive: bool = False):
        unique: set[str] = set()
        skipped = 0
        for raw in words:
            word = raw.strip()
            if not word:
                skipped += 1
                continue
            unique.add(normalize(word, case_sensitive))
        if skipped:
            logger.debug("Skipped %d blank word list entries", skipped)

        buckets: dict[int, list[str]] = {}
        folded_buckets: dict[int, list[str]] = {}
        for word in unique:
            buckets.setdefault(len(word), []).append(word)
            # casefold can change the length ("ß" -> "ss")
            folded_buckets.setdefault(len(word.casefold()), []).append(word)

        self._case_sensitive = case_sensitive
        self._words = frozenset(unique)
        self._folded = frozenset(w.casefold() for w in unique)
        self._buckets = {n: tuple(sorted(ws)) for n, ws in sorted(buckets.items())}
        self._folded_buckets = {n: tuple(sorted(ws)) for n, ws in sorted(folded_buckets.items())}

    @classmethod
    def from_words(cls, words: Iterable[str], case_sensitive: bool = False) -> "Dictionary":
        return cls(words, case_sensitive=case_sensitive)

    @classmethod
    def from_file(cls, path: str | Path, case_sensitive: bool = False) -> "Dictionary":
        """Load a newline separated UTF-8 word list."""
        text = Path(path).read_text(encoding="utf-8")
        dictionary = cls(text.splitlines(), case_sensitive=case_sensitive)
        logger.info("Loaded %d words from %s", len(dictionary), path)
        return dictionary

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets.values():
            yield from bucket

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __repr__(self) -> str:
        return f"Dictionary(words={len(self)}, buckets={len(self._buckets)}, case_sensitive={self._case_sensitive})"

    def contains(self, word: str, case_sensitive: bool | None = None) -> bool:
        """Exact membership check.

        ``case_sensitive=False`` probes a case-sensitive dictionary ignoring
        case; by default the dictionary's own policy applies.
        """
        if case_sensitive is None:
            case_sensitive = self._case_sensitive
        if not case_sensitive:
            return word.casefold() in self._folded
        return word in self._words

    @property
    def lengths(self) -> tuple[int, ...]:
        return tuple(self._buckets)

    def bucket(self, length: int) -> tuple[str, ...]:
        return self._buckets.get(length, ())

    def buckets(
        self,
        length: int,
        max_distance: int | None = None,
        folded: bool = False,
    ) -> list[tuple[int, tuple[str, ...]]]:
        """Buckets whose length is within ``max_distance`` of ``length``.

        Each edit changes the length by at most one, so no word outside
        ``[length - max_distance, length + max_distance]`` can be a candidate.
        ``folded=True`` keys buckets by the case-folded length, for matching
        a folded query against a case-sensitive dictionary.
        """
        index = self._folded_buckets if folded else self._buckets
        if max_distance is None:
            return list(index.items())
        lo = length - max_distance
        hi = length + max_distance
        return [(n, ws) for n, ws in index.items() if lo <= n <= hi]

    def candidates(self, length: int, max_distance: int | None = None, folded: bool = False) -> Iterator[str]:
        for _n, bucket in self.buckets(length, max_distance, folded):
            yield from bucket

    def count_candidates(self, length: int, max_distance: int | None = None, folded: bool = False) -> int:
        return sum(len(ws) for _n, ws in self.buckets(length, max_distance, folded))
