from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional
import os

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheMode(str, Enum):
    """Enum defining which cache backend is active for the process."""
    REDIS = "redis"
    FILE = "file"
    DISABLED = "disabled"


@dataclass(frozen=True)
class CacheConfig:
    """
    Resolved cache selection, built once at startup.

    Exactly one mode is active. Redis wins over the file cache when both
    are configured.
    """

    mode: CacheMode
    redis_url: Optional[str] = None
    directory: Optional[str] = None

    @classmethod
    def resolve(cls, redis_url: Optional[str], cache_dir: Optional[str]) -> "CacheConfig":
        """
        Pick the active cache backend from the raw settings.

        Args:
            redis_url: Optional Redis connection URL
            cache_dir: Optional local cache directory

        Returns:
            CacheConfig: The single active cache selection
        """
        if redis_url:
            return cls(CacheMode.REDIS, redis_url=redis_url)
        if cache_dir:
            return cls(CacheMode.FILE, directory=cache_dir)
        return cls(CacheMode.DISABLED)


class Settings(BaseSettings):
    """Application configuration settings loaded from environment variables."""

    PROJECT_NAME: str = "Product Lookup Service"
    DEBUG: bool = False

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Product Advertising API credentials
    AMAZON_ACCESS_KEY: str = ""
    AMAZON_SECRET_KEY: str = ""
    AMAZON_ASSOCIATE_TAG: str = ""
    AMAZON_DOMAIN: str = "JP"

    # Cache settings
    CACHE_DIR: Optional[str] = None
    REDIS_URL: Optional[str] = None

    # Logging settings
    LOG_LEVEL: str = "INFO"
    ENABLE_STRUCTURED_LOGGING: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        frozen=True,
    )

    @field_validator("AMAZON_DOMAIN", mode="before")
    @classmethod
    def normalize_domain(cls, v: str) -> str:
        """Domain codes are matched case-insensitively."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("CACHE_DIR", "REDIS_URL", mode="before")
    @classmethod
    def empty_as_unset(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty strings from flags or the environment as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def cache(self) -> CacheConfig:
        """Cache selection derived from the configured Redis URL and directory."""
        return CacheConfig.resolve(self.REDIS_URL, self.CACHE_DIR)


def load_env_file(env_file: str = ".env") -> None:
    """
    Load environment variables from specified .env file.

    Args:
        env_file: Path to the .env file. Defaults to ".env".
    """
    env_path = os.path.join(os.getcwd(), env_file)
    if os.path.exists(env_path):
        load_dotenv(env_path)


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings with caching for efficiency.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
