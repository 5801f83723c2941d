"""Abstract credential provider (port) supplying the ambient session identity."""

from abc import ABC, abstractmethod


class CredentialProvider(ABC):
    """Port for the session credential attached to every store request."""

    @abstractmethod
    def cookies(self) -> dict[str, str]:
        """Cookies identifying the session. Empty when unauthenticated."""
        ...
