from typing import Optional

from itsdangerous import BadData, URLSafeSerializer

from .credentials import CredentialStore


class TokenService:
    """Signs and checks bearer tokens carrying ``{"handle": ...}``.

    Tokens never expire. A token is only accepted while the handle it
    carries is the handle currently registered.
    """

    salt = 'hiscores-token'

    def __init__(self, secret_key: str, credentials: CredentialStore):
        self._serializer = URLSafeSerializer(secret_key, salt=self.salt)
        self._credentials = credentials

    def issue(self, handle) -> str:
        return self._serializer.dumps({'handle': handle})

    def validate(self, token) -> Optional[str]:
        if not token or not isinstance(token, str):
            return None
        try:
            payload = self._serializer.loads(token)
        except BadData:
            return None
        if not isinstance(payload, dict):
            return None
        handle = payload.get('handle')
        current = self._credentials.current_handle
        if current is None or handle != current:
            return None
        return handle
