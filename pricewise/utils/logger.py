"""
pricewise/utils/logger.py → logger dengan 2 mode:

stdout (default): hanya ke console, rotasi/agregasi diserahkan ke Docker/systemd.

file: tulis ke logs/<module>.log, rotasi harian, retensi (default 90 hari).

Konfigurasi lewat ENV (prefix LOG_) atau .env di root proyek. Logger dibuat
saat import modul (sebelum ada app context), jadi app.config Quart tidak dipakai.
"""

# pricewise/utils/logger.py
from __future__ import annotations

import logging
import os
import sys
import threading
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


def _detect_project_root() -> Path:
    """
    Cari akar proyek:
    - ENV PROJECT_ROOT
    - folder yang punya pyproject.toml atau .git
    - fallback: 2 level di atas file ini
    """
    env_root = os.getenv("PROJECT_ROOT")
    if env_root:
        return Path(env_root).resolve()

    here = Path(__file__).resolve()
    for p in here.parents:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return here.parents[2]


class PricewiseLogSettings(BaseSettings):
    """
    Konfigurasi via ENV (prefix LOG_) / .env

      - LOG_MODE=stdout|file
      - LOG_LEVEL=INFO|DEBUG|WARNING|ERROR
      - LOG_FORMAT="%(asctime)s %(levelname)s %(name)s: %(message)s"
      - LOG_DATEFMT="%Y-%m-%d %H:%M:%S"
      - LOG_RETENTION=90
      - LOG_ROOT_DIR="/path/proyek" (opsional; default autodetect)
      - LOG_CONSOLE=true|false (mode file: ikut tulis ke console)
    """

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    mode: str = "stdout"
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    retention: int = 90
    root_dir: Optional[Path] = None
    console: bool = True


def _load_settings() -> PricewiseLogSettings:
    """Settings dari ENV, dengan .env root proyek sebagai fallback."""
    load_dotenv(_detect_project_root() / ".env", override=False)
    return PricewiseLogSettings()


def _to_level(level: str) -> int:
    return getattr(logging, str(level).upper(), logging.INFO)


def _console_handler(formatter: logging.Formatter, level: str) -> logging.Handler:
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(_to_level(level))
    ch.setFormatter(formatter)
    return ch


def _file_handler(
    name: str, settings: PricewiseLogSettings, formatter: logging.Formatter
) -> logging.Handler:
    # nama file berdasarkan segmen terakhir dari logger name
    last_segment = (name.rsplit(".", 1)[-1] or "app").replace(":", "_")
    log_dir = (settings.root_dir or _detect_project_root()) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    fh = TimedRotatingFileHandler(
        filename=str(log_dir / f"{last_segment}.log"),
        when="midnight",
        backupCount=int(settings.retention),
        encoding="utf-8",
    )
    fh.setLevel(_to_level(settings.level))
    fh.setFormatter(formatter)
    return fh


_init_lock = threading.Lock()
_inited_loggers: set[str] = set()


def get_logger(name: str) -> logging.Logger:
    """
    Logger 2-mode (stdout/file) dengan perilaku:
      - Idempotent & thread-safe (hindari duplikasi handler)
    """
    logger = logging.getLogger(name)

    # Fast path
    if name in _inited_loggers and logger.handlers:
        return logger

    with _init_lock:
        if name in _inited_loggers and logger.handlers:
            return logger

        settings = _load_settings()
        logger.setLevel(_to_level(settings.level))
        logger.propagate = False
        formatter = logging.Formatter(fmt=settings.format, datefmt=settings.datefmt)

        if settings.mode.lower().strip() == "file":
            logger.addHandler(_file_handler(name, settings, formatter))
            if settings.console:
                logger.addHandler(_console_handler(formatter, settings.level))
        else:
            logger.addHandler(_console_handler(formatter, settings.level))

        _inited_loggers.add(name)

    return logger
