# distance.py
# Reference Levenshtein distance over sanitized strings.
# Checker.suggest never calls this; tools/profile_suggest.py --verify and the
# tests use it to confirm the distances the trie search reports.

from typing import Optional


def levenshtein_with_cutoff(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Edit distance between `a` and `b`. With `max_dist`, any distance above
    it is reported as max_dist + 1.
    """
    if max_dist is not None and abs(len(a) - len(b)) > max_dist:
        return max_dist + 1

    # row[j] = distance between the first i letters of a and the first j of b
    row = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        diagonal, row[0] = row[0], i
        for j, cb in enumerate(b, 1):
            above = row[j]
            row[j] = min(above + 1, row[j - 1] + 1, diagonal + (ca != cb))
            diagonal = above
        if max_dist is not None and min(row) > max_dist:
            return max_dist + 1
    dist = row[-1]
    if max_dist is not None and dist > max_dist:
        return max_dist + 1
    return dist
