"""High score domain services: credentials, tokens, scores and rankings.

This package holds the in-memory state and rules of the service. HTTP
routes import from here, keeping transport concerns separated from the
leaderboard logic.
"""

from .errors import InvalidInput
from .credentials import CredentialStore
from .tokens import TokenService
from .scores import ScoreStore
from .leaderboard import query_leaderboard


class Services:
    """Per-app bundle of the stores, kept in ``app.extensions['hiscores']``."""

    def __init__(self, secret_key: str, min_length: int = 6, page_size: int = 20):
        self.credentials = CredentialStore(min_length=min_length)
        self.tokens = TokenService(secret_key, self.credentials)
        self.scores = ScoreStore()
        self.page_size = page_size

    def leaderboard(self, level, page=1):
        return query_leaderboard(self.scores.entries(), level, page, self.page_size)


__all__ = [
    'CredentialStore',
    'InvalidInput',
    'ScoreStore',
    'Services',
    'TokenService',
    'query_leaderboard',
]
