"""Abstract session token storage interface."""

from abc import ABC, abstractmethod


class TokenStore(ABC):
    """
    Abstract base class for session token storage.

    Holds at most one bearer token. The store never tracks expiry: the
    remote API is the only authority on token validity and reports it
    through 401 responses.
    """

    @abstractmethod
    def get(self) -> str | None:
        """
        Read the current session token.

        Returns:
            Token string if present, None otherwise
        """
        pass

    @abstractmethod
    def set(self, token: str) -> None:
        """
        Store a session token, replacing any previous one.

        Args:
            token: Opaque bearer token returned by login
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove the session token. Clearing an empty store is a no-op."""
        pass

    def has_token(self) -> bool:
        """Return True when a non-empty token is stored."""
        return bool(self.get())
