"""Authenticated client selector.

Chooses the credential mode for outgoing requests from the session state
at the moment of the call: a signed-in user gets the user-pool mode,
everyone else the shared API key.  The session is re-checked on every
call; nothing is cached between submissions.

This is the only place authentication state influences behaviour.  It
does not enforce any per-field authorization.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

import httpx

from garagenet.infrastructure.api import DEFAULT_TIMEOUT, DataService, GraphQLDataService
from garagenet.infrastructure.identity import Identity, IdentityProvider, NoSessionError

logger = logging.getLogger(__name__)


class AuthMode(StrEnum):
    """Credential mode attached to outgoing requests."""

    USER_POOL = "userPool"
    API_KEY = "apiKey"


ClientFactory = Callable[[AuthMode, Identity | None], DataService]


class ClientSelector:
    """Hands out a data service client bound to the current credential mode."""

    def __init__(self, identity_provider: IdentityProvider, client_factory: ClientFactory) -> None:
        self._identity_provider = identity_provider
        self._client_factory = client_factory

    def current_identity(self) -> Identity | None:
        try:
            return self._identity_provider.get_current_identity()
        except NoSessionError:
            return None

    def auth_mode(self) -> AuthMode:
        """Re-evaluate the session and return the mode the next call uses."""
        return AuthMode.USER_POOL if self.current_identity() is not None else AuthMode.API_KEY

    def client(self) -> tuple[AuthMode, DataService]:
        """Return ``(mode, client)`` for a request issued now."""
        identity = self.current_identity()
        mode = AuthMode.USER_POOL if identity is not None else AuthMode.API_KEY
        logger.debug("Selected auth mode %s", mode)
        return mode, self._client_factory(mode, identity)


def graphql_client_factory(
    endpoint: str,
    api_key: str | None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> ClientFactory:
    """Factory producing :class:`GraphQLDataService` clients per mode.

    User-pool mode sends the identity token as ``Authorization``;
    API-key mode sends ``x-api-key``.
    """

    def _factory(mode: AuthMode, identity: Identity | None) -> DataService:
        headers: dict[str, str] = {}
        if mode is AuthMode.USER_POOL and identity is not None:
            headers["Authorization"] = identity.token
        elif api_key:
            headers["x-api-key"] = api_key
        return GraphQLDataService(endpoint, headers=headers, timeout=timeout, transport=transport)

    return _factory
