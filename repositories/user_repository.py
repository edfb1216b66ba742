# backend/repositories/user_repository.py
from database.connection import get_users_collection
from models.user import User
from auth.utils import hash_password
from core.errors import ConflictError, translate_mongo_error
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError
from functools import wraps
from typing import Optional
import logging

logger = logging.getLogger("repositories.users")

# ------------------------------------------------------------
# 🔹 Driver errors -> taxonomy
# ------------------------------------------------------------
def mongo_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PyMongoError as e:
            error = translate_mongo_error(e)
            logger.error(f"❌ {func.__name__} failed: {type(e).__name__}: {e}")
            raise error from e
    return wrapper

# ------------------------------------------------------------
# 🔹 Password is hashed only when it is part of the write
# ------------------------------------------------------------
def prepare_changes(changes: dict) -> dict:
    """Returns the document fields to write for a set of dirty fields."""
    prepared = dict(changes)
    if "password" in prepared:
        prepared["password"] = hash_password(prepared["password"])
    return prepared

# ------------------------------------------------------------
# 🔹 Create user
# ------------------------------------------------------------
@mongo_errors
def create_user(user: User) -> User:
    """Inserts a new account; ``user.password`` is the plaintext password."""
    users = get_users_collection()
    if find_user_by_username_or_email(user.username, user.email):
        raise ConflictError()

    doc = user.to_document()
    doc.update(prepare_changes({"password": user.password}))
    result = users.insert_one(doc)
    logger.info(f"✅ User created with ID {result.inserted_id}")
    return User.from_document(doc)

# ------------------------------------------------------------
# 🔹 Lookups
# ------------------------------------------------------------
@mongo_errors
def find_user_by_username_or_email(username: str, email: str) -> Optional[User]:
    doc = get_users_collection().find_one({"$or": [{"username": username}, {"email": email}]})
    return User.from_document(doc)

@mongo_errors
def get_user_by_username(username: str) -> Optional[User]:
    return User.from_document(get_users_collection().find_one({"username": username}))

@mongo_errors
def get_user_by_email(email: str) -> Optional[User]:
    return User.from_document(get_users_collection().find_one({"email": email}))

@mongo_errors
def get_user_by_id(user_id: str) -> Optional[User]:
    try:
        obj_id = ObjectId(user_id)
    except (InvalidId, TypeError):
        logger.warning(f"Invalid user ID: {user_id}")
        return None
    return User.from_document(get_users_collection().find_one({"_id": obj_id}))

# ------------------------------------------------------------
# 🔹 Update user by email
# ------------------------------------------------------------
@mongo_errors
def update_user_by_email(email: str, changes: dict) -> Optional[User]:
    """Applies a partial update keyed by stored field names (camelCase)."""
    doc = get_users_collection().find_one_and_update(
        {"email": email},
        {"$set": prepare_changes(changes)},
        return_document=ReturnDocument.AFTER,
    )
    if doc is None:
        logger.warning(f"⚠️ User not found for update: {email}")
        return None
    logger.info(f"✅ User updated: {doc['_id']} ({', '.join(sorted(changes))})")
    return User.from_document(doc)

# ------------------------------------------------------------
# 🔹 Delete user by username
# ------------------------------------------------------------
@mongo_errors
def delete_user_by_username(username: str) -> Optional[User]:
    doc = get_users_collection().find_one_and_delete({"username": username})
    if doc is None:
        logger.warning(f"⚠️ User not found for deletion: {username}")
        return None
    logger.info(f"✅ User deleted with ID {doc['_id']}")
    return User.from_document(doc)
