"""Built-in cost-of-living indexes for US cities.

Indexes are relative to the US national average (100). Records are
listed from most to least expensive; the presentation layer keeps this
order for its city pickers.
"""

from __future__ import annotations

from livecost.models.city import CityRecord


def _city(
    city_id: str,
    display_name: str,
    cost_index: float,
    housing: float,
    utilities: float,
    transport: float,
    groceries: float,
) -> CityRecord:
    return CityRecord(
        id=city_id,
        display_name=display_name,
        cost_index=cost_index,
        housing_index=housing,
        utilities_index=utilities,
        transport_index=transport,
        groceries_index=groceries,
    )


CITY_RECORDS: list[CityRecord] = [
    # id, label, overall, housing, utilities, transport, groceries
    _city("new_york", "New York, NY", 187, 280, 115, 130, 110),
    _city("san_francisco", "San Francisco, CA", 179, 260, 105, 125, 115),
    _city("los_angeles", "Los Angeles, CA", 166, 230, 100, 135, 105),
    _city("boston", "Boston, MA", 152, 195, 120, 115, 105),
    _city("seattle", "Seattle, WA", 149, 190, 95, 120, 110),
    _city("miami", "Miami, FL", 128, 150, 105, 110, 105),
    _city("denver", "Denver, CO", 128, 155, 95, 105, 100),
    _city("chicago", "Chicago, IL", 107, 110, 100, 115, 100),
    _city("austin", "Austin, TX", 103, 105, 100, 100, 95),
    _city("phoenix", "Phoenix, AZ", 100, 100, 100, 100, 100),
    _city("atlanta", "Atlanta, GA", 98, 95, 95, 105, 98),
    _city("dallas", "Dallas, TX", 96, 90, 100, 100, 95),
    _city("houston", "Houston, TX", 94, 85, 100, 105, 95),
    _city("nashville", "Nashville, TN", 93, 90, 95, 95, 95),
    _city("charlotte", "Charlotte, NC", 91, 85, 95, 100, 95),
    _city("indianapolis", "Indianapolis, IN", 87, 75, 95, 100, 95),
    _city("kansas_city", "Kansas City, MO", 86, 75, 100, 95, 95),
    _city("columbus", "Columbus, OH", 85, 75, 90, 95, 95),
]

DATASET_VERSION = "2026.1"
