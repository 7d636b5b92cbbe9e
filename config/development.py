import os

from config.config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORAGE_BACKEND = Config.STORAGE_BACKEND
DATA_DIR = Config.DATA_DIR
DB_CONFIG = Config.db_config()

DEFAULT_ADMIN_PASSWORD = Config.DEFAULT_ADMIN_PASSWORD
SEED_DEFAULT_ROSTER = Config.SEED_DEFAULT_ROSTER

GEMINI_API_KEY = Config.GEMINI_API_KEY
GEMINI_MODEL = Config.GEMINI_MODEL
AUDIT_TIMEOUT = Config.AUDIT_TIMEOUT

DEBUG = True

# With the mysql backend, create the kv_store table on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
