# backend/database/connection.py
import logging
from pymongo import ASCENDING, MongoClient
from pymongo.errors import PyMongoError
from config import settings

logger = logging.getLogger("database.connection")

USERS_COLLECTION_NAME = "users"

_client = None

# ============================================================
# 🔧 CLIENT
# ============================================================
def build_client(uri: str = None) -> MongoClient:
    """Client whose operations and server selection are bounded by timeouts."""
    return MongoClient(
        uri or settings.MONGO_URI,
        timeoutMS=settings.MONGO_TIMEOUT_MS,
        serverSelectionTimeoutMS=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
    )


def get_client() -> MongoClient:
    global _client
    if _client is None:
        _client = build_client()
    return _client


def set_client(client):
    """Swaps the process-wide client (tests plug an in-memory one here)."""
    global _client
    _client = client


def close_client():
    global _client
    if _client is not None:
        _client.close()
        _client = None

# ============================================================
# 👥 USERS DATABASE
# ============================================================
def get_db():
    return get_client()[settings.MONGO_DB]


def get_users_collection():
    return get_db()[USERS_COLLECTION_NAME]


def ensure_indexes():
    users = get_users_collection()
    users.create_index([("username", ASCENDING)], unique=True, name="username_unique")
    users.create_index([("email", ASCENDING)], unique=True, name="email_unique")

# ============================================================
# 🚀 STARTUP
# ============================================================
def init_db():
    """Pings MongoDB and creates indexes; raises if the store is unreachable."""
    try:
        get_client().admin.command("ping")
        ensure_indexes()
    except PyMongoError as e:
        logger.error(f"❌ Error connecting to MongoDB ({settings.MONGO_DB}): {e}")
        raise
    logger.info(f"✅ Connected to database: {settings.MONGO_DB}")
    return get_db()
