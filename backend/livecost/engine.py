"""Core comparison engine for the livecost library.

The engine compares the cost of living between two cities from their
index values (US average = 100):

1. **City lookup** — Resolve both city ids against the dataset.
2. **Percent difference** — Relative change of the overall index from
   origin to destination, kept to one decimal place. The
   ``is_more_expensive`` flag is read from the rounded value.
3. **Monthly spend** — Monthly salary scaled by each city's index and by
   the share of income that tracks living costs (``SPEND_FRACTION``).
4. **Break-even salary** — Input salary scaled by the index ratio.
5. **Category breakdown** — Housing, utilities, transportation and
   groceries sub-indexes plus the overall index. The housing row carries
   the tenure multiplier; monthly spend and break-even salary do not.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from livecost.exceptions import DatasetIntegrityError
from livecost.models.comparison import BreakdownRow, ComparisonResult
from livecost.models.enums import HousingTenure

if TYPE_CHECKING:
    from livecost.data.dataset import CityDataset
    from livecost.models.city import CityRecord
    from livecost.models.comparison import ComparisonInput

logger = logging.getLogger(__name__)

# Share of gross income treated as cost-of-living-sensitive spend
SPEND_FRACTION = 0.65

_HOUSING_MULTIPLIERS: dict[HousingTenure, float] = {
    HousingTenure.RENTING: 1.0,
    HousingTenure.OWNING: 1.2,
}

# (label, CityRecord field) for the category rows, in display order
_CATEGORY_ROWS: list[tuple[str, str]] = [
    ("Housing Index", "housing_index"),
    ("Utilities Index", "utilities_index"),
    ("Transportation Index", "transport_index"),
    ("Groceries Index", "groceries_index"),
]

OVERALL_ROW_LABEL = "Overall Index"

ENGINE_VERSION = "0.1.0"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going toward +infinity."""
    return math.floor(value + 0.5)


def _round_percent(value: float) -> float:
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def housing_multiplier(tenure: HousingTenure) -> float:
    """Multiplier applied to the housing breakdown row for a tenure."""
    return _HOUSING_MULTIPLIERS[tenure]


def compare(dataset: CityDataset, comparison_input: ComparisonInput) -> ComparisonResult:
    """Compare the cost of living between two cities.

    Args:
        dataset: The city dataset to resolve ids against.
        comparison_input: Origin and destination ids, salary and tenure.

    Returns:
        A new ComparisonResult.

    Raises:
        UnknownCityError: If either city id is not in the dataset.
        DatasetIntegrityError: If the origin city has a non-positive
            overall index.
    """
    origin = dataset.require(comparison_input.origin_city_id)
    destination = dataset.require(comparison_input.destination_city_id)

    # Records normally validate cost_index > 0; model_construct skips that.
    if origin.cost_index <= 0:
        msg = (
            f"City '{origin.id}' has non-positive cost index "
            f"{origin.cost_index}; cannot compare against it"
        )
        raise DatasetIntegrityError(msg)

    salary = comparison_input.annual_salary
    index_ratio = destination.cost_index / origin.cost_index
    raw_percent = (destination.cost_index - origin.cost_index) / origin.cost_index * 100

    base_monthly = salary / 12
    origin_monthly = round_half_up(base_monthly * (origin.cost_index / 100) * SPEND_FRACTION)
    destination_monthly = round_half_up(
        base_monthly * (destination.cost_index / 100) * SPEND_FRACTION
    )

    percent_difference = _round_percent(raw_percent)
    required_salary = round_half_up(salary * index_ratio)

    breakdown = build_breakdown(origin, destination, comparison_input.housing_tenure)

    logger.debug(
        "Compared %s -> %s (salary=%s, tenure=%s): %.1f%%",
        origin.id,
        destination.id,
        salary,
        comparison_input.housing_tenure.value,
        raw_percent,
    )

    return ComparisonResult(
        origin=origin,
        destination=destination,
        annual_salary=salary,
        housing_tenure=comparison_input.housing_tenure,
        percent_difference=percent_difference,
        is_more_expensive=percent_difference > 0,
        origin_monthly_cost=origin_monthly,
        destination_monthly_cost=destination_monthly,
        required_salary=required_salary,
        salary_adjustment=required_salary - salary,
        category_breakdown=breakdown,
    )


def build_breakdown(
    origin: CityRecord,
    destination: CityRecord,
    tenure: HousingTenure,
) -> list[BreakdownRow]:
    """Build the category index rows followed by the overall index row."""
    multiplier = housing_multiplier(tenure)

    rows: list[BreakdownRow] = []
    for label, field_name in _CATEGORY_ROWS:
        factor = multiplier if field_name == "housing_index" else 1.0
        rows.append(
            BreakdownRow(
                label=label,
                origin_value=getattr(origin, field_name) * factor,
                destination_value=getattr(destination, field_name) * factor,
            )
        )

    rows.append(
        BreakdownRow(
            label=OVERALL_ROW_LABEL,
            origin_value=origin.cost_index,
            destination_value=destination.cost_index,
            is_total_row=True,
        )
    )
    return rows


class ComparisonEngine:
    """Comparison engine bound to a single city dataset.

    Args:
        dataset: The read-only city dataset.

    Example::

        from livecost.data import default_dataset

        engine = ComparisonEngine(default_dataset())
        result = engine.compare(comparison_input)
    """

    def __init__(self, dataset: CityDataset) -> None:
        self._dataset = dataset

    @property
    def dataset(self) -> CityDataset:
        return self._dataset

    def compare(self, comparison_input: ComparisonInput) -> ComparisonResult:
        """Compare two cities from this engine's dataset."""
        return compare(self._dataset, comparison_input)
