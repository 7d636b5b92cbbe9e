import os


class Config:
    """Values shared by every environment; modules below override them."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "workforce-tracker-secret"

    # memory | file | mysql
    STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "file")
    DATA_DIR = os.environ.get("DATA_DIR", "instance/data")

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "workforce_db")

    DEFAULT_ADMIN_PASSWORD = os.environ.get("DEFAULT_ADMIN_PASSWORD", "admin123")
    SEED_DEFAULT_ROSTER = bool(int(os.environ.get("SEED_DEFAULT_ROSTER", "1")))

    GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY") or None
    GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.0-flash")
    AUDIT_TIMEOUT = float(os.environ.get("AUDIT_TIMEOUT", "60"))

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
