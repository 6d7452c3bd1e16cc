from __future__ import annotations

from typing import Any

from lostfound_service.application.dto.principal import Principal
from lostfound_service.application.exceptions import UnauthorizedError
from lostfound_service.domain.value_objects import keys


def principal_from_claims(payload: dict[str, Any]) -> Principal:
    subject = payload.get("sub")
    if not isinstance(subject, str) or not keys.is_valid_segment(subject):
        raise UnauthorizedError("Invalid token subject")
    email = payload.get("email")
    return Principal(user_id=subject, email=email if isinstance(email, str) else None)
