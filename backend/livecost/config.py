"""Environment-driven settings for the livecost service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from livecost.exceptions import ConfigurationError
from livecost.models.enums import HousingTenure

_ENV_PREFIX = "LIVECOST_"

# backend/livecost/config.py -> backend/, and the project root above it
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_PROJECT_ROOT = _BACKEND_DIR.parent


def load_env_files() -> None:
    """Load .env from the project root and backend/ without overriding."""
    load_dotenv(_PROJECT_ROOT / ".env")
    load_dotenv(_BACKEND_DIR / ".env")


def _env(name: str) -> str | None:
    value = os.environ.get(_ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _env_float(name: str, default: float) -> float:
    value = _env(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        msg = f"{_ENV_PREFIX}{name} must be a number, got '{value}'"
        raise ConfigurationError(msg) from exc


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the API and dataset wiring.

    Defaults match the built-in sample comparison (Chicago to Austin on
    $75,000, renting) and the salary range offered by the input form.
    """

    dataset_path: Path | None = None
    min_salary: float = 20_000.0
    max_salary: float = 500_000.0
    default_origin: str = "chicago"
    default_destination: str = "austin"
    default_salary: float = 75_000.0
    default_tenure: HousingTenure = HousingTenure.RENTING
    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, *, load_files: bool = True) -> Settings:
        """Build settings from ``LIVECOST_*`` environment variables.

        Raises:
            ConfigurationError: If a numeric setting is not a number, the
                salary bounds are inverted, or the tenure or log level is
                unknown.
        """
        if load_files:
            load_env_files()

        defaults = cls()
        dataset_path = _env("DATASET_PATH")
        cors = _env("CORS_ORIGINS")
        tenure_value = _env("DEFAULT_TENURE")

        try:
            tenure = (
                HousingTenure(tenure_value) if tenure_value else defaults.default_tenure
            )
        except ValueError as exc:
            msg = f"{_ENV_PREFIX}DEFAULT_TENURE must be 'renting' or 'owning', got '{tenure_value}'"
            raise ConfigurationError(msg) from exc

        settings = cls(
            dataset_path=Path(dataset_path) if dataset_path else None,
            min_salary=_env_float("MIN_SALARY", defaults.min_salary),
            max_salary=_env_float("MAX_SALARY", defaults.max_salary),
            default_origin=_env("DEFAULT_ORIGIN") or defaults.default_origin,
            default_destination=_env("DEFAULT_DESTINATION") or defaults.default_destination,
            default_salary=_env_float("DEFAULT_SALARY", defaults.default_salary),
            default_tenure=tenure,
            cors_origins=(
                [origin.strip() for origin in cors.split(",") if origin.strip()]
                if cors
                else defaults.cors_origins
            ),
            log_level=(_env("LOG_LEVEL") or defaults.log_level).upper(),
        )

        if settings.log_level not in logging.getLevelNamesMapping():
            msg = (
                f"{_ENV_PREFIX}LOG_LEVEL must be a logging level name such as "
                f"DEBUG or INFO, got '{settings.log_level}'"
            )
            raise ConfigurationError(msg)

        if settings.min_salary > settings.max_salary:
            msg = (
                f"{_ENV_PREFIX}MIN_SALARY ({settings.min_salary}) is greater than "
                f"{_ENV_PREFIX}MAX_SALARY ({settings.max_salary})"
            )
            raise ConfigurationError(msg)
        return settings
