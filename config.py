# backend/config.py
import os
from dotenv import load_dotenv
from pathlib import Path

# ============================================================
# 🌍 DETECT ENVIRONMENT AND LOAD THE MATCHING .env
# ============================================================
ENV = os.getenv("ENV", "development")

env_file = ".env.production" if ENV == "production" else ".env.development"
dotenv_path = Path(__file__).resolve().parent / env_file
load_dotenv(dotenv_path)

# ============================================================
# ⚙️ GENERAL SETTINGS
# ============================================================
class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "PhotoGallery")
    VERSION: str = os.getenv("VERSION", "1.0")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # 🔹 Mongo
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://127.0.0.1:27017")
    MONGO_DB: str = os.getenv("MONGO_DB", "photogallery")
    MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = int(
        os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
    )

    # 🔹 Tokens and passwords
    JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "your-secret-key" if ENV != "production" else "")
    JWT_SECRET_FILE: str = os.getenv("JWT_SECRET_FILE", "")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    TOKEN_TTL_DAYS: int = int(os.getenv("TOKEN_TTL_DAYS", "7"))
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # 🔹 Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "app.log")

    # 🔹 Others
    ALLOWED_ORIGINS: list = os.getenv("ALLOWED_ORIGINS", "*").split(",")
    DEBUG: bool = ENV == "development"
    ENV: str = ENV

settings = Settings()
