"""Comparison input and output models for the livecost engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from livecost.models.city import CityRecord  # noqa: TCH001 (pydantic resolves at runtime)
from livecost.models.enums import HousingTenure


class ComparisonInput(BaseModel):
    """User inputs for a single city-to-city comparison.

    The engine accepts any finite salary, including zero and negative
    values; range checks belong to the caller.
    """

    model_config = ConfigDict(frozen=True)

    origin_city_id: str
    destination_city_id: str
    annual_salary: float = Field(allow_inf_nan=False)
    housing_tenure: HousingTenure = HousingTenure.RENTING

    @field_validator("housing_tenure", mode="before")
    @classmethod
    def normalize_tenure(cls, v: object) -> object:
        if isinstance(v, str):
            return HousingTenure(v)
        return v


class BreakdownRow(BaseModel):
    """One row of the category index comparison table."""

    model_config = ConfigDict(frozen=True)

    label: str
    origin_value: float
    destination_value: float
    is_total_row: bool = False

    @property
    def destination_is_higher(self) -> bool:
        return self.destination_value > self.origin_value


class ComparisonResult(BaseModel):
    """Complete output of a cost-of-living comparison.

    Values are a pure projection of the dataset and the input; a new
    result is built for every comparison.
    """

    model_config = ConfigDict(frozen=True)

    origin: CityRecord
    destination: CityRecord
    annual_salary: float
    housing_tenure: HousingTenure
    percent_difference: float
    is_more_expensive: bool
    origin_monthly_cost: int
    destination_monthly_cost: int
    required_salary: int
    salary_adjustment: float
    category_breakdown: list[BreakdownRow]

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for frontend consumption.

        Returns a dict with formatted strings for direct display, with
        breakdown index values rounded to whole numbers.
        """
        from livecost.formatting import (
            format_currency,
            format_index,
            format_percent_difference,
            format_signed_currency,
        )

        return {
            "origin": self.origin.display_name,
            "destination": self.destination.display_name,
            "headline": f"{self.destination.display_name} vs {self.origin.display_name}",
            "percent_difference_formatted": format_percent_difference(
                self.percent_difference, self.is_more_expensive
            ),
            "is_more_expensive": self.is_more_expensive,
            "origin_monthly_cost_formatted": format_currency(self.origin_monthly_cost),
            "destination_monthly_cost_formatted": format_currency(
                self.destination_monthly_cost
            ),
            "required_salary_formatted": format_currency(self.required_salary),
            "salary_adjustment_formatted": format_signed_currency(
                self.salary_adjustment
            ),
            "housing_tenure": self.housing_tenure.value,
            "breakdown": [
                {
                    "label": row.label,
                    "origin": format_index(row.origin_value),
                    "destination": format_index(row.destination_value),
                    "destination_is_higher": row.destination_is_higher,
                    "is_total_row": row.is_total_row,
                }
                for row in self.category_breakdown
            ],
        }
