"""Credential providers for the Living Apps session."""

from inventory_dashboard.application.interfaces import CredentialProvider


class SessionCookieCredentials(CredentialProvider):
    """Sends a fixed session cookie obtained outside this application."""

    def __init__(self, cookie_name: str, cookie_value: str):
        self._cookie_name = cookie_name
        self._cookie_value = cookie_value

    def cookies(self) -> dict[str, str]:
        if not self._cookie_value:
            return {}
        return {self._cookie_name: self._cookie_value}


class AnonymousCredentials(CredentialProvider):
    """No session; the store decides whether to reject the request."""

    def cookies(self) -> dict[str, str]:
        return {}
