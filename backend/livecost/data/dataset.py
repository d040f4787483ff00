"""Read-only city dataset and JSON loader."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from livecost.exceptions import DatasetIntegrityError, DatasetLoadError, UnknownCityError
from livecost.models.city import CityRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class CityDataset(Mapping[str, CityRecord]):
    """Immutable mapping of city id -> CityRecord.

    Iteration follows the order the records were supplied in. Looking
    up an unknown id raises UnknownCityError (a KeyError subclass, so
    ``in`` and ``get`` behave like a normal mapping).

    Args:
        records: The city records. Ids must be unique.

    Raises:
        DatasetIntegrityError: If two records share an id.
    """

    def __init__(self, records: Iterable[CityRecord]) -> None:
        cities: dict[str, CityRecord] = {}
        for record in records:
            if record.id in cities:
                msg = f"Duplicate city id '{record.id}' in dataset"
                raise DatasetIntegrityError(msg)
            cities[record.id] = record
        self._cities = MappingProxyType(cities)

    def __getitem__(self, city_id: str) -> CityRecord:
        try:
            return self._cities[city_id]
        except KeyError:
            raise UnknownCityError(city_id) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._cities)

    def __len__(self) -> int:
        return len(self._cities)

    def __repr__(self) -> str:
        return f"CityDataset({len(self)} cities)"

    def ids(self) -> list[str]:
        """City ids in dataset order."""
        return list(self._cities)

    def records(self) -> list[CityRecord]:
        """City records in dataset order."""
        return list(self._cities.values())

    def require(self, city_id: str) -> CityRecord:
        """Return the record for ``city_id`` or raise UnknownCityError."""
        return self[city_id]


def default_dataset() -> CityDataset:
    """Return the built-in seed dataset."""
    from livecost.data.city_cost_index import CITY_RECORDS

    return CityDataset(CITY_RECORDS)


def load_dataset(path: str | Path) -> CityDataset:
    """Load a city dataset from a JSON file.

    The file holds either a list of city objects or an object with a
    ``cities`` list. Each city object uses the CityRecord field names.

    Raises:
        DatasetLoadError: If the file is missing or is not valid JSON.
        DatasetIntegrityError: If a record is invalid or ids repeat.
    """
    dataset_path = Path(path)
    try:
        raw = json.loads(dataset_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        msg = f"Dataset file not found: {dataset_path}"
        raise DatasetLoadError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in dataset file {dataset_path}: {exc}"
        raise DatasetLoadError(msg) from exc

    dataset = parse_dataset(raw)
    logger.info("Loaded %d cities from %s", len(dataset), dataset_path)
    return dataset


def parse_dataset(raw: Any) -> CityDataset:
    """Validate already-decoded JSON data into a CityDataset."""
    if isinstance(raw, dict):
        raw = raw.get("cities")
    if not isinstance(raw, list):
        msg = "Dataset must be a list of cities or an object with a 'cities' list"
        raise DatasetIntegrityError(msg)

    records: list[CityRecord] = []
    for position, item in enumerate(raw):
        try:
            records.append(CityRecord.model_validate(item))
        except ValidationError as exc:
            msg = f"Invalid city record at position {position}: {exc}"
            raise DatasetIntegrityError(msg) from exc

    if not records:
        msg = "Dataset contains no cities"
        raise DatasetIntegrityError(msg)
    return CityDataset(records)
