"""Config section models with code-baked defaults.

garagenet.toml is sparse: it holds only what differs from these
defaults.  Anonymous use needs just ``[api] endpoint`` and ``api_key``;
signing in adds an ``[auth]`` section.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ApiConfig(BaseModel):
    """[api] section: where creates are sent."""

    model_config = {"frozen": True}

    endpoint: str = "http://localhost:20002/graphql"
    api_key: str | None = None
    timeout: float = Field(default=10.0, gt=0)

    @field_validator("endpoint")
    @classmethod
    def _http_endpoint(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            msg = f"endpoint must be an http(s) URL, got {value!r}"
            raise ValueError(msg)
        return value


class AuthConfig(BaseModel):
    """[auth] section: the signed-in session, if any.

    Without ``id_token`` every request goes out in API-key mode.
    """

    model_config = {"frozen": True}

    id_token: str | None = None
    username: str | None = None
    user_id: str | None = None
