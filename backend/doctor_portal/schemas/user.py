from pydantic import BaseModel
from typing import Any, Dict

from doctor_portal.schemas.results import UpdateResult


class UserProfile(BaseModel):
    """Free-form profile sent on login/registration (name, photo, ...)."""

    class Config:
        extra = "allow"

    def profile_fields(self) -> Dict[str, Any]:
        # Key and role are never taken from the body
        data = dict(self.model_extra or {})
        data.pop("email", None)
        data.pop("role", None)
        data.pop("_id", None)
        return data


class UpsertUserResponse(BaseModel):
    result: UpdateResult
    token: str


class AdminStatus(BaseModel):
    admin: bool
