import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "personnel_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Production hosts have no persistent disk: photos and documents go to third-party hosts.
ATTACHMENT_MODE = os.getenv("ATTACHMENT_MODE", "hosted")
UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", str(Path(__file__).resolve().parents[1] / "static" / "uploads"))
IMAGE_HOST_CLIENT_ID = os.getenv("IMAGE_HOST_CLIENT_ID", "")
UPLOAD_TIMEOUT = float(os.getenv("UPLOAD_TIMEOUT", "30"))

PAGE_SIZE = int(os.getenv("PAGE_SIZE", "5"))
DEFAULT_SALARY_CEILING = int(os.getenv("DEFAULT_SALARY_CEILING", "10000"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
