from typing import Iterable, List

from hiscores.models import ScoreEntry


def query_leaderboard(entries: Iterable[ScoreEntry], level: str, page: int = 1, page_size: int = 20) -> List[ScoreEntry]:
    """Return one page of a level's scores, best first.

    - Only entries whose level equals ``level`` exactly are kept
    - Sorted by score descending; equal scores keep insertion order
    - ``page`` is 1-indexed; pages past the end (or below 1) are empty
    """
    if page < 1:
        return []
    ranked = sorted(
        (e for e in entries if e.level == level),
        key=lambda e: e.score,
        reverse=True,
    )
    start = (page - 1) * page_size
    end = page * page_size
    return ranked[start:end]
