import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(os.getenv("ENV_FILE", ".env"))

APP_NAME = "FilmLibrary"
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "8080"))

DB_USER = os.getenv("DB_USER", "postgres")
DB_PASSWORD = os.getenv("DB_PASSWORD", "postgres")
DB_HOST = os.getenv("DB_HOST", "postgres")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "filmlibrary")
SSL_MODE = os.getenv("SSL_MODE", "disable")
DB_URL = os.getenv(
    "DB_URL",
    f"postgresql+psycopg2://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}?sslmode={SSL_MODE}",
)
# hard cap on concurrently open connections
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))

REDIS_HOST = os.getenv("R_HOST", "redis")
REDIS_PORT = int(os.getenv("R_PORT", "6379"))
REDIS_DB = int(os.getenv("R_DB", "0"))

USER_SALT = os.getenv("USER_SALT", "secret")
SESSION_SALT = os.getenv("SESSION_SALT", "session")

RBAC_MODEL = os.getenv("RBAC_MODEL", str(BASE_DIR / "core" / "rbac_model.conf"))
RBAC_POLICY = os.getenv("RBAC_POLICY", str(BASE_DIR / "core" / "rbac_policy.csv"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

CREATE_SCHEMA = os.getenv("CREATE_SCHEMA", "true").lower() != "false"
