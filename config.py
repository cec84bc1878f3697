import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("CONFIG_FILE_PATH", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default):
    # Environment wins over env.yaml; values are coerced to the default's type
    raw = os.environ.get(key)
    if raw is None:
        return data.get(key, default)
    if isinstance(default, bool):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, float):
        return float(raw)
    if isinstance(default, list):
        return [item.strip() for item in raw.split(",") if item.strip()]
    return raw


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./app.db")
    API_PREFIX = _get("API_PREFIX", "")
    API_PORT = _get("API_PORT", 8000)
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = _get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    CREATE_TABLES_ON_STARTUP = _get("CREATE_TABLES_ON_STARTUP", True)

    # Sessions
    JWT_SECRET = _get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRE_MINUTES = _get("JWT_EXPIRE_MINUTES", 60 * 24 * 7)
    SESSION_COOKIE_NAME = _get("SESSION_COOKIE_NAME", "session")
    SESSION_COOKIE_SECURE = _get("SESSION_COOKIE_SECURE", False)

    # Credentials
    BCRYPT_ROUNDS = _get("BCRYPT_ROUNDS", 10)
    MIN_PASSWORD_LENGTH = _get("MIN_PASSWORD_LENGTH", 6)

    # Password reset
    RESET_TOKEN_EXPIRE_MINUTES = _get("RESET_TOKEN_EXPIRE_MINUTES", 60)
    RESET_RESEND_COOLDOWN_SECONDS = _get("RESET_RESEND_COOLDOWN_SECONDS", 30)

    # Contact form
    CONTACT_RATE_LIMIT_WINDOW_SECONDS = _get("CONTACT_RATE_LIMIT_WINDOW_SECONDS", 3600)
    CONTACT_RATE_LIMIT_MAX = _get("CONTACT_RATE_LIMIT_MAX", 5)
    CONTACT_INBOX = _get("CONTACT_INBOX", "")
    RATE_LIMIT_STORAGE_URI = _get("RATE_LIMIT_STORAGE_URI", "memory://")
    # Honour x-forwarded-for / x-real-ip only behind a trusted reverse proxy
    TRUST_PROXY_HEADERS = _get("TRUST_PROXY_HEADERS", False)

    # Mail
    APP_URL = _get("APP_URL", "http://localhost:3000")
    APP_NAME = _get("APP_NAME", "RobotiX")
    FROM_EMAIL = _get("FROM_EMAIL", "")
    RESEND_API_KEY = _get("RESEND_API_KEY", "")
    RESEND_API_URL = _get("RESEND_API_URL", "https://api.resend.com")
    SMTP_HOST = _get("SMTP_HOST", "")
    SMTP_PORT = _get("SMTP_PORT", 587)
    SMTP_USERNAME = _get("SMTP_USERNAME", "")
    SMTP_PASSWORD = _get("SMTP_PASSWORD", "")
    MAIL_SEND_TIMEOUT_SECONDS = _get("MAIL_SEND_TIMEOUT_SECONDS", 5.0)
