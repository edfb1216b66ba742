# backend/users/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class UserRegister(Payload):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = Field(default=None, alias="fullName")


class UserLogin(Payload):
    username: Optional[str] = None
    password: Optional[str] = None


class ProfileUpdate(Payload):
    username: Optional[str] = None
    email: Optional[str] = None
    full_name: Optional[str] = Field(default=None, alias="fullName")
    bio: Optional[str] = None

    def changes(self) -> dict:
        """Provided, non-empty fields keyed by their stored names."""
        return {
            key: value
            for key, value in self.model_dump(by_alias=True).items()
            if value not in (None, "")
        }


class PasswordChange(Payload):
    username: Optional[str] = None
    current_password: Optional[str] = Field(default=None, alias="currentPassword")
    new_password: Optional[str] = Field(default=None, alias="newPassword")
