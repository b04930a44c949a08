import math
import threading
from numbers import Number
from typing import List

from hiscores.models import ScoreEntry
from .errors import InvalidInput


class ScoreStore:
    """Append-only list of score entries. Nothing is ever updated or removed."""

    def __init__(self):
        self._entries: List[ScoreEntry] = []
        self._lock = threading.Lock()

    def append(self, level, handle, score, timestamp) -> ScoreEntry:
        # Falsy check: a score of 0 counts as missing
        fields = (('level', level), ('userHandle', handle), ('score', score), ('timestamp', timestamp))
        missing = [name for name, value in fields if not value]
        if missing:
            raise InvalidInput(f"Missing required fields: {', '.join(missing)}")
        if isinstance(score, bool) or not isinstance(score, Number):
            raise InvalidInput('score must be a number')
        if not math.isfinite(score):
            raise InvalidInput('score must be a finite number')
        entry = ScoreEntry(level=level, handle=handle, score=score, recorded_at=timestamp)
        with self._lock:
            self._entries.append(entry)
        return entry

    def entries(self) -> List[ScoreEntry]:
        with self._lock:
            return list(self._entries)

    def __len__(self):
        with self._lock:
            return len(self._entries)
