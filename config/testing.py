import os
import tempfile

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "json"
DATA_DIR = os.getenv("DATA_DIR", tempfile.mkdtemp(prefix="attendance-register-"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_register_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
RECONCILE_ON_START = True

WINDOW_MONTHS = 6
