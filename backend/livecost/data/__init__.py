"""City data layer for the livecost engine."""

from livecost.data.city_cost_index import CITY_RECORDS
from livecost.data.dataset import CityDataset, default_dataset, load_dataset, parse_dataset

__all__ = [
    "CITY_RECORDS",
    "CityDataset",
    "default_dataset",
    "load_dataset",
    "parse_dataset",
]
