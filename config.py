import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/church_admin")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Provisioning
    SEED_ON_STARTUP = _env_flag("SEED_ON_STARTUP", True)
    SUPER_ADMIN_EMAIL = os.getenv("SUPER_ADMIN_EMAIL", "superadmin@test.com")
    CHURCH_ADMIN_EMAIL = os.getenv("CHURCH_ADMIN_EMAIL", "churchadmin@test.com")
    BOOTSTRAP_PASSWORD = os.getenv("BOOTSTRAP_PASSWORD", "12345678")


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "testing"
    MONGO_URI = "mongodb://localhost:27017/church_admin_test"
    SEED_ON_STARTUP = False
