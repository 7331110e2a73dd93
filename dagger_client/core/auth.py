"""Authentication handlers for the engine's GraphQL endpoint.

The engine authenticates a session with a token sent as the HTTP Basic
username and an empty password. Other handlers cover proxies and tests.
"""

import base64
from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class Auth(Protocol):
    """Protocol for authentication handlers.

    Implement this protocol to create custom authentication.

    Example:
        class ProxyAuth:
            def __init__(self, token: str, tenant: str):
                self.token = token
                self.tenant = tenant

            def get_headers(self) -> dict[str, str]:
                return {
                    "Authorization": f"Bearer {self.token}",
                    "X-Tenant": self.tenant,
                }
    """

    def get_headers(self) -> Dict[str, str]:
        """Return headers to include in requests."""
        ...


class SessionTokenAuth:
    """Engine session token authentication.

    Args:
        token: The session token (``DAGGER_SESSION_TOKEN``)

    Example:
        auth = SessionTokenAuth(os.environ["DAGGER_SESSION_TOKEN"])
    """

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> Dict[str, str]:
        encoded = base64.b64encode(f"{self.token}:".encode()).decode()
        return {"Authorization": f"Basic {encoded}"}


class BearerAuth:
    """Bearer token authentication, for engines behind an authenticating proxy."""

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class HeaderAuth:
    """Custom headers authentication.

    Example:
        auth = HeaderAuth({"X-Session": "abc", "X-Trace": "1"})
    """

    def __init__(self, headers: Dict[str, str]):
        self._headers = headers

    def get_headers(self) -> Dict[str, str]:
        return self._headers.copy()


class NoAuth:
    """No authentication (for unauthenticated local sessions or testing)."""

    def get_headers(self) -> Dict[str, str]:
        return {}
