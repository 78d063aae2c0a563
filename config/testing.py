import os
import tempfile

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "personnel_test_db"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

ATTACHMENT_MODE = "local"
UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(tempfile.gettempdir(), "personnel_uploads"))
IMAGE_HOST_CLIENT_ID = ""
UPLOAD_TIMEOUT = 5.0

PAGE_SIZE = 5
DEFAULT_SALARY_CEILING = 10000

AUTO_INIT_DB = False
AUTO_SEED_DB = False
