# backend/auth/utils.py
import jwt
import bcrypt
from datetime import datetime, timedelta, timezone
from pathlib import Path
from config import settings
from core.errors import AuthenticationError, InternalError

# =====================================================
# 🔹 Secret
# =====================================================
def get_secret_key() -> str:
    """Resolved per call so a rotated secret file or setting applies at once."""
    if settings.JWT_SECRET_FILE:
        secret = Path(settings.JWT_SECRET_FILE).read_text(encoding="utf-8").strip()
    else:
        secret = settings.JWT_SECRET_KEY
    if not secret:
        raise InternalError("Token signing secret is not configured")
    return secret

# =====================================================
# 🔹 Hashing
# =====================================================
def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode()

def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False

# =====================================================
# 🔹 Tokens
# =====================================================
def create_access_token(user_id: str, username: str, issued_at: datetime = None) -> str:
    issued_at = issued_at or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.TOKEN_TTL_DAYS),
    }
    return jwt.encode(payload, get_secret_key(), algorithm=settings.JWT_ALGORITHM)

def decode_access_token(token: str) -> dict:
    try:
        payload = jwt.decode(
            token,
            get_secret_key(),
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token")
    return payload
