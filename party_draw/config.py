"""Environment-based configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def resolve_database_url() -> str:
    """Resolve DB connection string.

    Priority:
      1) DATABASE_URL (explicit)
      2) Fallback to local sqlite
    """

    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    return "sqlite:///./party_draw.db"


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    APP_TITLE: str = os.getenv("APP_TITLE", "송년회 2025")
    BASE_URL: str = os.getenv("BASE_URL", "http://localhost:3000")

    # Event capacity model
    TEAM_COUNT: int = _env_int("TEAM_COUNT", 9)
    MEMBERS_PER_TEAM: int = _env_int("MEMBERS_PER_TEAM", 10)

    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "sql").lower().strip()  # "memory" | "sql" | "mongo"
    STORAGE_KEY: str = os.getenv("STORAGE_KEY", "year-end-party-participants")

    # SQL backend
    DATABASE_URL: str = resolve_database_url()

    # Mongo backend
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DB: str = os.getenv("MONGODB_DB", "party_draw")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Test configuration: in-memory storage, no database."""

    DEBUG: bool = False
    TESTING: bool = True
    STORAGE_BACKEND: str = "memory"


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig


@dataclass(frozen=True)
class EventSettings:
    """Capacity model of the event: ``team_count`` teams of ``members_per_team``."""

    team_count: int = 9
    members_per_team: int = 10

    def __post_init__(self) -> None:
        if self.team_count < 1:
            raise ValueError("team_count must be >= 1")
        if self.members_per_team < 1:
            raise ValueError("members_per_team must be >= 1")

    @property
    def total_capacity(self) -> int:
        return self.team_count * self.members_per_team

    @property
    def lottery_range(self) -> tuple[int, int]:
        return 1, self.total_capacity

    @property
    def team_range(self) -> tuple[int, int]:
        return 1, self.team_count

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "EventSettings":
        return cls(
            team_count=int(config.get("TEAM_COUNT", 9)),
            members_per_team=int(config.get("MEMBERS_PER_TEAM", 10)),
        )
