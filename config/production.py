import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timeclock_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

PRIMEPONTO_BASE_URL = os.getenv("PRIMEPONTO_BASE_URL", "https://srep.primesw.com.br")
PRIMEPONTO_TIMEOUT = float(os.getenv("PRIMEPONTO_TIMEOUT", "30"))
IMPORT_MAX_WORKERS = int(os.getenv("IMPORT_MAX_WORKERS", "4"))

IMPORT_API_TOKEN = os.getenv("IMPORT_API_TOKEN") or None

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
