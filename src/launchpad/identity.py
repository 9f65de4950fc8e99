"""Credentials used to build per-identity service clients."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Identity", "TokenIdentity", "UserPasswordIdentity"]


@dataclass(frozen=True, slots=True)
class TokenIdentity:
    """Bearer/OAuth token credentials."""

    token: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class UserPasswordIdentity:
    """Basic-auth credentials."""

    username: str
    password: str = field(repr=False)


Identity = TokenIdentity | UserPasswordIdentity
