"""Holder for the bearer credential the panel presents on every request."""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

TokenListener = Callable[[str | None], None]


class AuthContext:
    """Observable bearer token.

    Subscribers are called with the new token whenever it changes. Setting
    the same value again does not notify.
    """

    def __init__(self, token: str | None = None) -> None:
        self._token = token or None
        self._listeners: list[TokenListener] = []

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def set_token(self, token: str | None) -> None:
        """Replace the current token and notify subscribers on change."""
        token = token or None
        if token == self._token:
            return
        self._token = token
        logger.debug("Credential %s", "set" if token else "cleared")
        for listener in list(self._listeners):
            listener(token)

    def clear(self) -> None:
        self.set_token(None)

    def subscribe(self, listener: TokenListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def headers(self) -> dict[str, str]:
        """Authorization header for the current token (empty when unauthenticated)."""
        if self._token is None:
            return {}
        return {"Authorization": f"Bearer {self._token}"}
