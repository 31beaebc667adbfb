"""Environment parsing shared by the per-environment settings modules."""

import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


def db_config_from_env(*, password: str = "", database: str = "hr_records") -> dict:
    return {
        "host": os.environ.get("DB_HOST", "localhost"),
        "port": int(os.environ.get("DB_PORT", "3306")),
        "user": os.environ.get("DB_USER", "root"),
        "password": os.environ.get("DB_PASSWORD", password),
        "database": os.environ.get("DB_NAME", database),
    }


DB_POOL_SIZE = int(os.environ.get("DB_POOL_SIZE", "5"))

UPLOAD_DIR = os.environ.get("UPLOAD_DIR", "uploads")
ATTACHED_ASSETS_DIR = os.environ.get("ATTACHED_ASSETS_DIR", "attached_assets")
MAX_UPLOAD_MB = int(os.environ.get("MAX_UPLOAD_MB", "10"))

SESSION_DAYS = int(os.environ.get("SESSION_DAYS", "7"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Account created by AUTO_SEED_DB / scripts/seed_db.py
DEFAULT_HR_USERNAME = os.environ.get("DEFAULT_HR_USERNAME", "admin")
DEFAULT_HR_PASSWORD = os.environ.get("DEFAULT_HR_PASSWORD", "admin123")
DEFAULT_HR_FULL_NAME = os.environ.get("DEFAULT_HR_FULL_NAME", "HR Administrator")
