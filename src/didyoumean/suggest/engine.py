from __future__ import annotations

import multiprocessing as mp
from dataclasses import dataclass
from typing import Iterable, Iterator

from tqdm import tqdm

from didyoumean.suggest.dictionary import Dictionary
from didyoumean.suggest.errors import EmptyDictionary
from didyoumean.utils.config import SuggestConfig
from didyoumean.utils.distance import distance, normalize
from didyoumean.utils.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Candidate:
    word: str
    distance: int

    @property
    def sort_key(self) -> tuple[int, str]:
        return (self.distance, self.word)


@dataclass(frozen=True)
class SuggestionList:
    """Ranked corrections for one query.

    An empty list with ``exact_match=True`` means the query is already a
    dictionary word; an empty list otherwise means nothing was close enough.
    """

    query: str
    candidates: tuple[Candidate, ...] = ()
    exact_match: bool = False

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)

    def __getitem__(self, idx: int) -> Candidate:
        return self.candidates[idx]

    def __bool__(self) -> bool:
        return bool(self.candidates)

    @property
    def words(self) -> list[str]:
        return [c.word for c in self.candidates]


def _scan(query: str, words: Iterable[str], max_distance: int, case_sensitive: bool) -> list[tuple[str, int]]:
    out: list[tuple[str, int]] = []
    for word in words:
        d = distance(query, word, bound=max_distance, case_sensitive=case_sensitive)
        if d is not None:
            out.append((word, d))
    return out


def _scan_task(task: tuple[str, tuple[str, ...], int, bool]) -> list[tuple[str, int]]:
    return _scan(*task)


def rank(found: Iterable[tuple[str, int]], max_results: int) -> tuple[Candidate, ...]:
    ranked = sorted((Candidate(word=w, distance=d) for w, d in found), key=lambda c: c.sort_key)
    return tuple(ranked[:max_results])


class SuggestionEngine:
    def __init__(self, dictionary: Dictionary, config: SuggestConfig = SuggestConfig(), show_progress: bool = False):
        self.dictionary = dictionary
        self.config = config
        self.show_progress = show_progress

    def _check(self) -> None:
        self.config.validate()
        if len(self.dictionary) == 0:
            raise EmptyDictionary("dictionary contains no words")

    def suggest(self, query: str) -> SuggestionList:
        self._check()
        cfg = self.config

        # a folded dictionary cannot be compared case-sensitively
        case_sensitive = cfg.case_sensitive and self.dictionary.case_sensitive
        term = normalize(query.strip(), case_sensitive)
        if self.dictionary.contains(term, case_sensitive=case_sensitive):
            logger.debug("%r is a dictionary word", term)
            return SuggestionList(query=term, exact_match=True)

        # words of a folded dictionary are already normalized
        fold_words = not case_sensitive and self.dictionary.case_sensitive
        total = self.dictionary.count_candidates(len(term), cfg.max_distance, folded=fold_words)

        if cfg.workers > 1:
            found = self._scan_parallel(term, fold_words)
        else:
            words = self.dictionary.candidates(len(term), cfg.max_distance, folded=fold_words)
            words = tqdm(words, total=total, unit="word", disable=not self.show_progress, leave=False)
            found = _scan(term, words, cfg.max_distance, not fold_words)

        logger.debug("Scanned %d words for %r, %d within distance %d", total, term, len(found), cfg.max_distance)
        return SuggestionList(query=term, candidates=rank(found, cfg.max_results))

    def _scan_parallel(self, term: str, fold_words: bool) -> list[tuple[str, int]]:
        max_distance = self.config.max_distance
        buckets = self.dictionary.buckets(len(term), max_distance, folded=fold_words)
        if len(buckets) < 2:
            words = self.dictionary.candidates(len(term), max_distance, folded=fold_words)
            return _scan(term, words, max_distance, not fold_words)

        tasks = [(term, ws, max_distance, not fold_words) for _n, ws in buckets]
        n_workers = max(1, min(self.config.workers, len(tasks)))
        ctx = mp.get_context("spawn")
        # all partial results are collected before the single final sort
        with ctx.Pool(processes=n_workers) as pool:
            parts = list(
                tqdm(
                    pool.imap(_scan_task, tasks),
                    total=len(tasks),
                    unit="bucket",
                    disable=not self.show_progress,
                    leave=False,
                )
            )
        return [item for part in parts for item in part]


def suggest(query: str, dictionary: Dictionary, config: SuggestConfig = SuggestConfig()) -> SuggestionList:
    return SuggestionEngine(dictionary, config).suggest(query)
