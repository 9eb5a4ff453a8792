"""Application configuration and constants."""
import os
import secrets
from dataclasses import dataclass, field
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

# Session configuration
TOKEN_TTL_SECONDS = 2 * 60 * 60  # 2 hours
TOKEN_ALGORITHM = "HS256"

# Credential hashing
PBKDF2_ITERATIONS = 10_000

# Identifier formats
LIBRARY_ID_PATTERN = r"^[A-Za-z0-9_-]+$"
USERNAME_PATTERN = r"^[A-Za-z0-9._-]+$"
GENERATED_ID_LENGTH = 16

# Photo delivery
PHOTO_CACHE_CONTROL = "public, max-age=604800, immutable"
DEFAULT_PHOTO_CONTENT_TYPE = "image/jpeg"

# CORS preflight cache
CORS_MAX_AGE = 86400


@dataclass
class Settings:
    """Runtime settings, read once from the environment.

    Secrets live here and are handed to the services that need them;
    nothing below the application factory reads os.environ.
    """
    admin_secret: str = ""
    token_secret: str = field(default_factory=lambda: secrets.token_urlsafe(32))
    token_ttl_seconds: int = TOKEN_TTL_SECONDS
    database_path: Path = BASE_DIR / "photolib.db"
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from PHOTOLIB_* environment variables.

        PHOTOLIB_TOKEN_SECRET falls back to a random per-process value,
        which invalidates all sessions on restart.
        """
        settings = cls()
        settings.admin_secret = os.environ.get("PHOTOLIB_ADMIN_SECRET", "")

        token_secret = os.environ.get("PHOTOLIB_TOKEN_SECRET")
        if token_secret:
            settings.token_secret = token_secret

        settings.token_ttl_seconds = int(
            os.environ.get("PHOTOLIB_TOKEN_TTL_SECONDS", str(TOKEN_TTL_SECONDS))
        )

        database_path = os.environ.get("PHOTOLIB_DATABASE_PATH")
        if database_path:
            settings.database_path = Path(database_path)

        settings.log_level = os.environ.get("PHOTOLIB_LOG_LEVEL", "INFO").upper()

        origins = os.environ.get("PHOTOLIB_CORS_ORIGINS", "*")
        settings.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]
        return settings
