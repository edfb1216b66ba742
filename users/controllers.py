# backend/users/controllers.py
import re
import logging
from auth.utils import verify_password, create_access_token
from auth.dependencies import TokenClaims
from core.errors import (
    ValidationError, AuthenticationError, ForbiddenError, NotFoundError
)
from models.user import User
from repositories.user_repository import (
    create_user, get_user_by_id, get_user_by_username, update_user_by_email,
    delete_user_by_username
)
from .models import UserRegister, UserLogin, ProfileUpdate, PasswordChange

logger = logging.getLogger("users.controllers")

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 8
# bcrypt only accepts up to 72 bytes
MAX_PASSWORD_BYTES = 72


def is_valid_email(email) -> bool:
    return bool(email) and EMAIL_REGEX.fullmatch(email) is not None


def is_valid_password(password) -> bool:
    return (
        bool(password)
        and len(password) >= MIN_PASSWORD_LENGTH
        and len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES
    )

# =====================================================
# 🔹 Register
# =====================================================
def register_user(data: UserRegister):
    logger.info(f"🧩 Registration request: username={data.username} email={data.email}")

    if not is_valid_email(data.email):
        raise ValidationError("Invalid email format")
    if not is_valid_password(data.password):
        raise ValidationError("Password must be at least 8 characters and at most 72 bytes long")
    if not data.username or not data.full_name:
        raise ValidationError("Username and full name are required")

    user = create_user(User(
        username=data.username,
        email=data.email,
        password=data.password,
        full_name=data.full_name,
    ))
    logger.info(f"✅ User created successfully: {user.username}")
    return {"message": "User created successfully", "user": user.public()}

# =====================================================
# 🔹 Login
# =====================================================
def login_user(data: UserLogin):
    if not data.username or not data.password:
        raise ValidationError("Username and password are required")

    logger.info(f"🔐 Login request: {data.username}")
    user = get_user_by_username(data.username)
    if user is None:
        logger.warning(f"⚠️ User does not exist: {data.username}")
        raise ValidationError("User does not exist")

    if not verify_password(data.password, user.password):
        logger.warning(f"⚠️ Incorrect password: {data.username}")
        raise AuthenticationError("Incorrect password")

    token = create_access_token(user.id, user.username)
    logger.info(f"✅ User logged in successfully: {data.username}")
    return {"message": "User logged in successfully", "token": token, "user": user.public()}

# =====================================================
# 🔹 Profile
# =====================================================
def get_profile(claims: TokenClaims):
    user = get_user_by_id(claims.user_id)
    if user is None:
        raise NotFoundError("User profile not found")
    return {"userProfile": user.public()}


def update_profile(current_user: User, data: ProfileUpdate):
    changes = data.changes()
    if not changes:
        raise ValidationError("At least one field is required for the update")
    if "email" in changes and not is_valid_email(changes["email"]):
        raise ValidationError("Invalid email format")

    updated = update_user_by_email(current_user.email, changes)
    if updated is None:
        raise NotFoundError("User profile not found")
    return {"message": "User profile updated successfully", "userProfile": updated.public()}


def delete_profile(claims: TokenClaims):
    user = get_user_by_id(claims.user_id)
    if user is None:
        raise NotFoundError("User profile not found")
    deleted = delete_user_by_username(user.username)
    if deleted is None:
        raise NotFoundError("User profile not found")
    return {"message": "User profile deleted successfully"}

# =====================================================
# 🔹 Change password
# =====================================================
def change_password(claims: TokenClaims, data: PasswordChange):
    if not is_valid_password(data.current_password):
        raise ValidationError("Current password must be provided and between 8 characters and 72 bytes long")
    if not is_valid_password(data.new_password):
        raise ValidationError("New password must be at least 8 characters and at most 72 bytes long")

    user = get_user_by_id(claims.user_id)
    if user is None:
        raise NotFoundError("User not found")
    if data.username and data.username != user.username:
        logger.warning(f"⚠️ {user.username} tried to change the password of {data.username}")
        raise ForbiddenError("Cannot change another user's password")
    if not verify_password(data.current_password, user.password):
        raise AuthenticationError("Invalid current password")

    update_user_by_email(user.email, {"password": data.new_password})
    logger.info(f"✅ Password changed: {user.username}")
    return {"message": "Password changed successfully"}
