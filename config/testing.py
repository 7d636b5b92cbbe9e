from config.config import Config

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
DATA_DIR = ""
DB_CONFIG = Config.db_config()

DEFAULT_ADMIN_PASSWORD = "admin123"
SEED_DEFAULT_ROSTER = True

# Tests inject a fake auditor; never reach the network.
GEMINI_API_KEY = None
GEMINI_MODEL = Config.GEMINI_MODEL
AUDIT_TIMEOUT = 5.0

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
