"""Custom exception hierarchy for the livecost engine."""

from __future__ import annotations


class LivecostError(Exception):
    """Base exception for all livecost errors."""


class UnknownCityError(LivecostError, KeyError):
    """Raised when a city id is not present in the dataset."""

    def __init__(self, city_id: str) -> None:
        self.city_id = city_id
        super().__init__(city_id)

    def __str__(self) -> str:
        return f"Unknown city '{self.city_id}'"


class DatasetIntegrityError(LivecostError):
    """Raised when the city dataset violates its invariants.

    Covers non-positive index values, duplicate city ids, and records
    that fail validation while loading.
    """


class DatasetLoadError(LivecostError):
    """Raised when a dataset resource cannot be read or parsed."""


class ConfigurationError(LivecostError):
    """Raised when an environment setting has an invalid value."""
