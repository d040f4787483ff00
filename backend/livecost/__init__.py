"""livecost cost-of-living comparison engine.

Usage::

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

from livecost.data.dataset import CityDataset, default_dataset, load_dataset
from livecost.engine import SPEND_FRACTION, ComparisonEngine, compare
from livecost.exceptions import (
    DatasetIntegrityError,
    DatasetLoadError,
    LivecostError,
    UnknownCityError,
)
from livecost.factory import create_default_engine
from livecost.models.city import CityRecord
from livecost.models.comparison import BreakdownRow, ComparisonInput, ComparisonResult
from livecost.models.enums import HousingTenure

__all__ = [
    "SPEND_FRACTION",
    "BreakdownRow",
    "CityDataset",
    "CityRecord",
    "ComparisonEngine",
    "ComparisonInput",
    "ComparisonResult",
    "DatasetIntegrityError",
    "DatasetLoadError",
    "HousingTenure",
    "LivecostError",
    "UnknownCityError",
    "compare",
    "create_default_engine",
    "default_dataset",
    "load_dataset",
]
