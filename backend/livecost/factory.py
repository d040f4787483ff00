"""Factory functions for creating pre-configured ComparisonEngine instances."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from livecost.data.dataset import default_dataset, load_dataset
from livecost.engine import ComparisonEngine

if TYPE_CHECKING:
    from livecost.config import Settings

logger = logging.getLogger(__name__)


def create_default_engine() -> ComparisonEngine:
    """Create a ComparisonEngine wired up with the built-in city dataset.

    This is the recommended way to create an engine for typical usage.

    Example::

        from livecost import ComparisonInput, create_default_engine

        engine = create_default_engine()
        result = engine.compare(
            ComparisonInput(
                origin_city_id="chicago",
                destination_city_id="austin",
                annual_salary=75_000,
            )
        )
    """
    return ComparisonEngine(default_dataset())


def create_engine(settings: Settings) -> ComparisonEngine:
    """Create a ComparisonEngine from settings.

    Uses the JSON dataset at ``settings.dataset_path`` when set, and the
    built-in dataset otherwise.

    Raises:
        DatasetLoadError: If the configured dataset file cannot be read.
        DatasetIntegrityError: If the configured dataset is invalid.
    """
    if settings.dataset_path is None:
        return create_default_engine()
    logger.info("Using city dataset from %s", settings.dataset_path)
    return ComparisonEngine(load_dataset(settings.dataset_path))
