"""Application configuration loaded from environment variables."""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    APP_NAME: str = "MicroBlog"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # View locals
    COPYRIGHT_YEAR: int = 2024
    POST_NEO_TYPE: str = "Post"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./microblog.db"

    # Session cookie
    SESSION_SECRET: str = "oneringtorulethemall"
    SESSION_COOKIE: str = "microblog_session"
    SESSION_MAX_AGE: int = 14 * 24 * 60 * 60
    SESSION_HTTPS_ONLY: bool = False

    # Avatar
    AVATAR_SIZE: int = 100
    AVATAR_FONT: str = "DejaVuSans-Bold.ttf"
    AVATAR_FONT_SIZE: int = 48
    AVATAR_BACKGROUND: str = "#007bff"
    AVATAR_FOREGROUND: str = "#ffffff"

    # Views and static files
    TEMPLATES_DIR: str = str(APP_DIR / "templates")
    STATIC_DIR: str = str(APP_DIR / "static")


settings = Settings()
