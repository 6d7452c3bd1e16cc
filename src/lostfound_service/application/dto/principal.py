from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """Authenticated caller identity extracted from the bearer token.

    Built once per request by the auth dependency and passed explicitly to
    every service call.
    """

    user_id: str
    email: str | None = None
