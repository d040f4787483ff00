"""Dependency wiring for FastAPI endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from livecost.exceptions import (
    ConfigurationError,
    DatasetIntegrityError,
    DatasetLoadError,
    UnknownCityError,
)
from livecost.factory import create_engine

if TYPE_CHECKING:
    from livecost.config import Settings
    from livecost.engine import ComparisonEngine

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Settings) -> ComparisonEngine:
    """Create the ComparisonEngine used by the API.

    Loads the dataset named by ``LIVECOST_DATASET_PATH`` when configured
    and falls back to the built-in cities otherwise. The configured
    default cities must exist in whichever dataset is used.

    Raises:
        ConfigurationError: If the dataset cannot be loaded, is invalid,
            or lacks one of the configured default cities.
    """
    try:
        engine = create_engine(settings)
    except (DatasetLoadError, DatasetIntegrityError) as exc:
        msg = f"Could not load the configured city dataset: {exc}"
        raise ConfigurationError(msg) from exc

    dataset = engine.dataset
    for setting, city_id in (
        ("LIVECOST_DEFAULT_ORIGIN", settings.default_origin),
        ("LIVECOST_DEFAULT_DESTINATION", settings.default_destination),
    ):
        try:
            dataset.require(city_id)
        except UnknownCityError as exc:
            msg = f"{setting} names '{city_id}', which is not in the city dataset"
            raise ConfigurationError(msg) from exc

    logger.info("Comparison engine ready with %d cities", len(dataset))
    return engine
