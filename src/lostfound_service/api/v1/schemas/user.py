from __future__ import annotations

from datetime import datetime

from lostfound_service.api.v1.schemas.common import CamelModel
from lostfound_service.application.dto.views import UserSummary


class RegisterProfileRequest(CamelModel):
    name: str


class UserResponse(CamelModel):
    id: str
    email: str
    name: str
    created_at: datetime


class UserSummaryResponse(CamelModel):
    id: str
    name: str
    email: str

    @classmethod
    def from_summary(cls, summary: UserSummary) -> UserSummaryResponse:
        return cls(id=summary.id, name=summary.name, email=summary.email)


class UserEnvelope(CamelModel):
    user: UserResponse
