"""Authentication boundary: "who is signed in right now?".

``get_current_identity()`` raises :class:`NoSessionError` when nobody is
signed in.  Only the client selector interprets that; it is never a
user-facing error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class NoSessionError(Exception):
    """No authenticated session exists."""


@dataclass(frozen=True)
class Identity:
    """A signed-in user and the token that proves it."""

    user_id: str
    username: str
    token: str


class IdentityProvider(Protocol):
    def get_current_identity(self) -> Identity:
        """Return the signed-in identity.

        Raises:
            NoSessionError: If no session exists.
        """
        ...


class StaticIdentityProvider:
    """Identity held in memory; ``None`` means signed out.

    Embedding callers update it with :meth:`sign_in` / :meth:`sign_out`;
    the next request picks the change up.
    """

    def __init__(self, identity: Identity | None = None) -> None:
        self._identity = identity

    def sign_in(self, identity: Identity) -> None:
        self._identity = identity

    def sign_out(self) -> None:
        self._identity = None

    def get_current_identity(self) -> Identity:
        if self._identity is None:
            raise NoSessionError("No user is signed in")
        return self._identity


class SettingsIdentityProvider:
    """Session from configuration (``[auth]`` section or ``GARAGENET_AUTH__*``).

    A session exists when an ID token is configured.
    """

    def __init__(self, *, id_token: str | None, username: str | None, user_id: str | None) -> None:
        self._id_token = id_token
        self._username = username
        self._user_id = user_id

    def get_current_identity(self) -> Identity:
        if not self._id_token:
            raise NoSessionError("No ID token configured")
        username = self._username or ""
        return Identity(
            user_id=self._user_id or username,
            username=username,
            token=self._id_token,
        )
