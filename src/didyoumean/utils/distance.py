from __future__ import annotations


def normalize(word: str, case_sensitive: bool = False) -> str:
    """Apply the case policy used for every comparison."""
    return word if case_sensitive else word.casefold()


def distance(a: str, b: str, bound: int | None = None, case_sensitive: bool = True) -> int | None:
    """Restricted Damerau-Levenshtein (optimal string alignment) distance.

    Insertion, deletion, substitution and a swap of two adjacent characters
    each cost 1. When ``bound`` is given the computation stops as soon as the
    result is known to exceed it and ``None`` is returned instead of a number.
    """
    if bound is not None and bound < 0:
        raise ValueError(f"bound must be non-negative, got {bound}")
    if not case_sensitive:
        a = a.casefold()
        b = b.casefold()
    if a == b:
        return 0

    # keep the shorter string along the row
    if len(a) < len(b):
        a, b = b, a
    if bound is not None and len(a) - len(b) > bound:
        return None
    if not b:
        return len(a)

    before: list[int] = []
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        row_min = i
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            d = min(cur[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost)
            if i > 1 and j > 1 and ca == b[j - 2] and a[i - 2] == cb:
                d = min(d, before[j - 2] + 1)
            cur.append(d)
            if d < row_min:
                row_min = d
        # later rows can only grow once a whole row is past the bound
        if bound is not None and row_min > bound:
            return None
        before, prev = prev, cur

    result = prev[-1]
    if bound is not None and result > bound:
        return None
    return result
