import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timeclock_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Primeponto gateway; the per-customer context, credentials and CNPJs live in the configs table.
PRIMEPONTO_BASE_URL = os.getenv("PRIMEPONTO_BASE_URL", "https://srep.primesw.com.br")
PRIMEPONTO_TIMEOUT = float(os.getenv("PRIMEPONTO_TIMEOUT", "30"))
IMPORT_MAX_WORKERS = int(os.getenv("IMPORT_MAX_WORKERS", "1"))

# Optional shared secret for the import endpoint (X-Api-Token header).
IMPORT_API_TOKEN = os.getenv("IMPORT_API_TOKEN") or None

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
