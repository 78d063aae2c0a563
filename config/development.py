import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "personnel_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Attachments are written under static/uploads and served from /uploads/...
ATTACHMENT_MODE = os.getenv("ATTACHMENT_MODE", "local")
UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", str(Path(__file__).resolve().parents[1] / "static" / "uploads"))
IMAGE_HOST_CLIENT_ID = os.getenv("IMAGE_HOST_CLIENT_ID", "")
UPLOAD_TIMEOUT = float(os.getenv("UPLOAD_TIMEOUT", "30"))

PAGE_SIZE = int(os.getenv("PAGE_SIZE", "5"))
DEFAULT_SALARY_CEILING = int(os.getenv("DEFAULT_SALARY_CEILING", "10000"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
