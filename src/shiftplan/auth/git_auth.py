"""Credentials for authenticated git clones."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class GitAuth:
    """
    Token credential for HTTPS git remotes.

    The token is handed to the git child process through GIT_CONFIG_*
    environment variables (an http.extraHeader), so it never appears in
    argv, shift descriptions or logs.
    """

    token: str = field(repr=False)
    username: str = "x-access-token"

    def __post_init__(self) -> None:
        for name in ("token", "username"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"GitAuth.{name} must be a non-empty string")

    @property
    def authorization_header(self) -> str:
        """HTTP Basic authorization header value."""
        raw = f"{self.username}:{self.token}".encode("utf-8")
        return "Authorization: Basic " + base64.b64encode(raw).decode("ascii")

    def to_env(self) -> dict[str, str]:
        """Environment variables that make git send the authorization header."""
        return {
            "GIT_CONFIG_COUNT": "1",
            "GIT_CONFIG_KEY_0": "http.extraHeader",
            "GIT_CONFIG_VALUE_0": self.authorization_header,
            "GIT_TERMINAL_PROMPT": "0",
        }
