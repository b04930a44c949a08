import threading
from typing import Optional

from hiscores.models import Identity
from .errors import InvalidInput


class CredentialStore:
    """Holds the single registered identity.

    Registering replaces whatever identity was stored before. Tokens are
    checked against ``current_handle`` on every request, so a new
    registration invalidates all tokens issued for the previous one.
    """

    def __init__(self, min_length: int = 6):
        self.min_length = min_length
        self._identity: Optional[Identity] = None
        self._lock = threading.Lock()

    def register(self, handle, password) -> Identity:
        for name, value in (('userHandle', handle), ('password', password)):
            if not value:
                raise InvalidInput(f'{name} is required')
            if not isinstance(value, str):
                raise InvalidInput(f'{name} must be a string')
            if len(value) < self.min_length:
                raise InvalidInput(f'{name} must be at least {self.min_length} characters')
        identity = Identity(handle=handle, secret=password)
        with self._lock:
            self._identity = identity
        return identity

    def verify(self, handle, password) -> bool:
        with self._lock:
            identity = self._identity
        if identity is None:
            return False
        return identity.handle == handle and identity.secret == password

    @property
    def current_handle(self) -> Optional[str]:
        with self._lock:
            return self._identity.handle if self._identity else None
