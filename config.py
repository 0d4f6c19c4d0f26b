import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    API_PREFIX = data.get("API_PREFIX", "/api/v1")
    API_PORT = data.get("API_PORT", 9000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    APP_NAME = data.get("APP_NAME", "Family Catering")
    SECRET_KEY_ACCESS_TOKEN = data.get("SECRET_KEY_ACCESS_TOKEN", "dev-access-secret-change-in-production")
    SECRET_KEY_REFRESH_TOKEN = data.get("SECRET_KEY_REFRESH_TOKEN", "dev-refresh-secret-change-in-production")
    ACCESS_TOKEN_TTL_SECONDS = int(data.get("ACCESS_TOKEN_TTL_SECONDS", 15 * 60))
    REFRESH_TOKEN_TTL_SECONDS = int(data.get("REFRESH_TOKEN_TTL_SECONDS", 60 * 24 * 60 * 60))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "sid")
    RESET_PASSWORD_COOKIE_NAME = data.get("RESET_PASSWORD_COOKIE_NAME", "rpt")
    RESET_PASSWORD_URL = data.get("RESET_PASSWORD_URL", "http://localhost:9000/api/v1/owner/reset-password")
    MAILER_HOST = data.get("MAILER_HOST", "localhost")
    MAILER_PORT = int(data.get("MAILER_PORT", 1025))
    MAILER_EMAIL = data.get("MAILER_EMAIL", "no-reply@family-catering.local")
    MAILER_PASSWORD = data.get("MAILER_PASSWORD", "")
    MAILER_SUPPORT_EMAIL = data.get("MAILER_SUPPORT_EMAIL", "support@family-catering.local")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
