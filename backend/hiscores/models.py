from dataclasses import dataclass

from flask_login import UserMixin


@dataclass(frozen=True)
class Identity:
    handle: str
    secret: str


@dataclass(frozen=True)
class ScoreEntry:
    level: str
    handle: str
    score: float
    recorded_at: str

    def to_dict(self):
        return {
            'level': self.level,
            'userHandle': self.handle,
            'score': self.score,
            'timestamp': self.recorded_at,
        }


class Player(UserMixin):
    """Request-scoped user resolved from a bearer token."""

    def __init__(self, handle: str):
        self.handle = handle

    def get_id(self):
        return self.handle
