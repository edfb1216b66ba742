# backend/models/user.py
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    """User account as stored in the ``users`` collection.

    ``password`` always holds a bcrypt hash once the record is persisted.
    Field names follow the camelCase keys of the stored documents.
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, validate_default=True)

    id: Optional[str] = None
    username: str
    email: str
    password: str
    full_name: str = Field(alias="fullName")
    bio: Optional[str] = None
    profile_picture: Optional[str] = Field(default=None, alias="profilePicture")
    status: UserStatus = UserStatus.ACTIVE
    registration_date: datetime = Field(default_factory=_utcnow, alias="registrationDate")

    @classmethod
    def from_document(cls, doc: dict) -> Optional["User"]:
        if not doc:
            return None
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        return cls.model_validate(data)

    def to_document(self) -> dict:
        doc = self.model_dump(by_alias=True, exclude={"id"})
        return {key: value for key, value in doc.items() if value is not None}

    def public(self) -> dict:
        """JSON-safe view without the password hash."""
        return self.model_dump(by_alias=True, mode="json", exclude={"password"})
