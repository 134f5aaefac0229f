# pricewise/config.py
from __future__ import annotations

import os
from pathlib import Path
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = Path(BASE_DIR) / ".env"

# Load .env
load_dotenv(ENV_PATH)


class ServiceConfigs(BaseSettings):
    """Konfigurasi service pricing (bind address, seed catalog)."""

    # ====================================
    # Server
    # ====================================
    host: str = "0.0.0.0"
    port: int = 3100

    # ====================================
    # Catalog
    # ====================================
    # False → katalog kosong saat startup (produk & rule ditambah via API)
    seed_catalog: bool = True

    model_config = SettingsConfigDict(
        env_prefix="PRICEWISE_",
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def bind(self) -> str:
        return f"{self.host}:{self.port}"


class BaseConfig:
    """Base configuration class for Quart."""

    # ====================
    # App Config
    # ====================
    ENV = os.getenv("APP_ENV", "development")
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    ENV = "development"


class TestingConfig(BaseConfig):
    TESTING = True
    DEBUG = True
    ENV = "testing"


class ProductionConfig(BaseConfig):
    DEBUG = False
    ENV = "production"


config_map = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[BaseConfig]:
    """Return the configuration class corresponding to the given environment."""
    if not env:
        env = os.getenv("APP_ENV", "default")
    return config_map.get(env, config_map["default"])
