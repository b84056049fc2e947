import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timeclock_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

PRIMEPONTO_BASE_URL = "http://primeponto.invalid"
PRIMEPONTO_TIMEOUT = 5.0
IMPORT_MAX_WORKERS = 1

IMPORT_API_TOKEN = None

AUTO_INIT_DB = False
