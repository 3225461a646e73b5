"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_number(name: str, default: float, *, minimum: float, maximum: float | None = None) -> float:
    """Read a numeric environment variable and validate its range."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be numeric, got {raw!r}") from exc
    if value < minimum or (maximum is not None and value > maximum):
        raise ValueError(f"{name}={raw} is outside the allowed range")
    return value


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "FinSight"
    DB_FILENAME = "finsight.db"
    DEFAULT_OVER_BUDGET_THRESHOLD = 90.0
    DEFAULT_CASH_FLOW_WEEKS = 7
    DEFAULT_TOP_CATEGORIES = 5
    SQLITE_PRAGMAS = {"journal_mode": "wal", "foreign_keys": "on"}

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("FINSIGHT_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("FINSIGHT_DATABASE_URL", self._build_sqlite_url())
        self.CURRENCY = os.getenv("FINSIGHT_CURRENCY", "BDT").strip().upper() or "BDT"
        self.OVER_BUDGET_THRESHOLD = _env_number(
            "FINSIGHT_OVER_BUDGET_THRESHOLD",
            self.DEFAULT_OVER_BUDGET_THRESHOLD,
            minimum=0,
            maximum=1000,
        )
        self.CASH_FLOW_WEEKS = int(
            _env_number("FINSIGHT_CASH_FLOW_WEEKS", self.DEFAULT_CASH_FLOW_WEEKS, minimum=1)
        )
        self.TOP_CATEGORIES = int(
            _env_number("FINSIGHT_TOP_CATEGORIES", self.DEFAULT_TOP_CATEGORIES, minimum=1)
        )

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("FINSIGHT_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside the data directory."""

        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        connect_args: dict[str, Any] = {}
        if self.DATABASE_URL.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        return {"connect_args": connect_args}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration used by the test suite; keeps everything in memory."""

    DEBUG = False
    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.DATABASE_URL = "sqlite://"
        self.DEV_MODE = True
