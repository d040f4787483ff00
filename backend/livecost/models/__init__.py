"""Domain models for the livecost engine."""

from livecost.models.city import CityRecord
from livecost.models.comparison import BreakdownRow, ComparisonInput, ComparisonResult
from livecost.models.enums import HousingTenure

__all__ = [
    "BreakdownRow",
    "CityRecord",
    "ComparisonInput",
    "ComparisonResult",
    "HousingTenure",
]
