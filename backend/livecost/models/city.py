"""City domain model for the livecost engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CityRecord(BaseModel):
    """Cost-of-living indexes for a single city.

    All indexes are relative to the US national average (100). The
    overall ``cost_index`` drives the monthly-cost and salary figures;
    the four sub-indexes only feed the category breakdown.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    cost_index: float = Field(gt=0)
    housing_index: float = Field(gt=0)
    utilities_index: float = Field(gt=0)
    transport_index: float = Field(gt=0)
    groceries_index: float = Field(gt=0)
