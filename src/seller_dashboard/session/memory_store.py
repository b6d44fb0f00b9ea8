"""In-memory token storage."""

import logging

from seller_dashboard.session.token_store import TokenStore

logger = logging.getLogger(__name__)


class MemoryTokenStore(TokenStore):
    """
    In-memory token storage implementation.

    Suitable for tests and HuggingFace Spaces deployment where the token
    should live only while the process is running.
    """

    def __init__(self, token: str | None = None):
        """
        Initialize in-memory storage.

        Args:
            token: Optional initial token
        """
        self._token = token or None
        logger.info("Initialized in-memory token store")

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        if not token:
            raise ValueError("Cannot store an empty session token")
        self._token = token
        logger.debug("Stored session token")

    def clear(self) -> None:
        if self._token is not None:
            logger.debug("Cleared session token")
        self._token = None
