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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./snapfolio.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "dev-admin-key-change-in-production")
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "session")
    SESSION_COOKIE_SECURE = bool(data.get("SESSION_COOKIE_SECURE", False))
    BYTES_PER_TOKEN = int(data.get("BYTES_PER_TOKEN", 32))
    PASSWORD_RESET_DURATION_SECONDS = int(data.get("PASSWORD_RESET_DURATION_SECONDS", 3600))
    PASSWORD_RESET_URL = data.get("PASSWORD_RESET_URL", "http://localhost:8000/reset-pw")
