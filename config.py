import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./inventory.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5050)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRES_HOURS = data.get("JWT_EXPIRES_HOURS", 2)
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 10))

    # Password reset
    CLIENT_URL = data.get("CLIENT_URL", "http://localhost:3000")
    RESET_TOKEN_TTL_MINUTES = int(data.get("RESET_TOKEN_TTL_MINUTES", 60))

    # Outbound mail; leaving SMTP_HOST empty selects the preview transport
    SMTP_HOST = data.get("SMTP_HOST", "")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASS = data.get("SMTP_PASS", "")
    SMTP_FROM = data.get("SMTP_FROM", "no-reply@inventory.local")
    SMTP_TIMEOUT = float(data.get("SMTP_TIMEOUT", 5))
    MAIL_PREVIEW_LIMIT = int(data.get("MAIL_PREVIEW_LIMIT", 50))
