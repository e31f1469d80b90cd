import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# "json" keeps one file per collection under DATA_DIR; "mysql" uses the kv_store table.
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")
DATA_DIR = os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_register"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled (mysql backend only), schema.sql is applied on startup (CREATE IF NOT EXISTS).
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Drop attendance rows whose student no longer exists when the app starts.
RECONCILE_ON_START = bool(int(os.getenv("RECONCILE_ON_START", "1")))

WINDOW_MONTHS = int(os.getenv("WINDOW_MONTHS", "6"))
