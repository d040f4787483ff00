"""Tests for the comparison engine — the core cost-of-living calculation."""

from __future__ import annotations

import pytest

from livecost.data.dataset import CityDataset, default_dataset
from livecost.engine import (
    OVERALL_ROW_LABEL,
    SPEND_FRACTION,
    ComparisonEngine,
    compare,
    housing_multiplier,
    round_half_up,
)
from livecost.exceptions import DatasetIntegrityError, UnknownCityError
from livecost.models.city import CityRecord
from livecost.models.comparison import ComparisonInput, ComparisonResult
from livecost.models.enums import HousingTenure


@pytest.fixture()
def dataset() -> CityDataset:
    """The built-in city dataset."""
    return default_dataset()


@pytest.fixture()
def engine(dataset: CityDataset) -> ComparisonEngine:
    """ComparisonEngine wired to the built-in dataset."""
    return ComparisonEngine(dataset)


# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------


def _input(
    origin: str = "chicago",
    destination: str = "austin",
    salary: float = 75_000,
    tenure: HousingTenure = HousingTenure.RENTING,
) -> ComparisonInput:
    return ComparisonInput(
        origin_city_id=origin,
        destination_city_id=destination,
        annual_salary=salary,
        housing_tenure=tenure,
    )


# ---------------------------------------------------------------------------
# Happy-path tests
# ---------------------------------------------------------------------------


class TestChicagoToAustin:
    """The default scenario: Chicago (107) to Austin (103) on $75,000."""

    def test_percent_difference(self, engine: ComparisonEngine) -> None:
        result = engine.compare(_input())
        # (103 - 107) / 107 * 100 = -3.738...
        assert result.percent_difference == pytest.approx(-3.7)
        assert result.is_more_expensive is False

    def test_monthly_costs(self, engine: ComparisonEngine) -> None:
        result = engine.compare(_input())
        # 6250 * 1.07 * 0.65 = 4346.875 ; 6250 * 1.03 * 0.65 = 4184.375
        assert result.origin_monthly_cost == 4347
        assert result.destination_monthly_cost == 4184

    def test_required_salary(self, engine: ComparisonEngine) -> None:
        result = engine.compare(_input())
        # round(75000 * 103 / 107) = round(72196.26)
        assert result.required_salary == 72196
        assert result.salary_adjustment == -2804

    def test_result_carries_cities_and_input(self, engine: ComparisonEngine) -> None:
        result = engine.compare(_input(tenure=HousingTenure.OWNING))
        assert result.origin.display_name == "Chicago, IL"
        assert result.destination.display_name == "Austin, TX"
        assert result.annual_salary == 75_000
        assert result.housing_tenure == HousingTenure.OWNING

    def test_returns_comparison_result(self, engine: ComparisonEngine) -> None:
        assert isinstance(engine.compare(_input()), ComparisonResult)


class TestMoreExpensiveDestination:
    def test_columbus_to_new_york(self, engine: ComparisonEngine) -> None:
        result = engine.compare(_input("columbus", "new_york", 60_000))
        # (187 - 85) / 85 * 100 = 120.0
        assert result.percent_difference == pytest.approx(120.0)
        assert result.is_more_expensive is True
        # round(60000 * 187 / 85) = 132000
        assert result.required_salary == 132_000
        assert result.salary_adjustment == 72_000

    def test_percent_keeps_one_decimal(self, engine: ComparisonEngine) -> None:
        result = engine.compare(_input("phoenix", "seattle"))
        assert result.percent_difference == pytest.approx(49.0)
        result = engine.compare(_input("atlanta", "boston"))
        # (152 - 98) / 98 * 100 = 55.102...
        assert result.percent_difference == pytest.approx(55.1)


# ---------------------------------------------------------------------------
# Properties across city pairs
# ---------------------------------------------------------------------------


class TestProperties:
    def test_same_city_is_zero_difference(
        self, engine: ComparisonEngine, dataset: CityDataset
    ) -> None:
        for city_id in dataset:
            for tenure in HousingTenure:
                result = engine.compare(_input(city_id, city_id, 82_500, tenure))
                assert result.percent_difference == 0
                assert result.salary_adjustment == 0
                assert result.is_more_expensive is False
                assert result.origin_monthly_cost == result.destination_monthly_cost
                for row in result.category_breakdown:
                    assert row.origin_value == row.destination_value

    def test_sign_matches_index_order(
        self, engine: ComparisonEngine, dataset: CityDataset
    ) -> None:
        for origin in dataset.records():
            for destination in dataset.records():
                result = engine.compare(_input(origin.id, destination.id))
                assert result.is_more_expensive == (result.percent_difference > 0)
                assert result.is_more_expensive == (
                    destination.cost_index > origin.cost_index
                )

    @pytest.mark.parametrize(
        ("salary", "origin", "destination"),
        [
            (75_000, "chicago", "austin"),
            (120_000, "san_francisco", "dallas"),
            (48_000, "kansas_city", "boston"),
            (250_000, "miami", "denver"),
        ],
    )
    def test_required_salary_scales_by_index_ratio(
        self,
        engine: ComparisonEngine,
        dataset: CityDataset,
        salary: float,
        origin: str,
        destination: str,
    ) -> None:
        result = engine.compare(_input(origin, destination, salary))
        expected = round_half_up(
            salary * (dataset[destination].cost_index / dataset[origin].cost_index)
        )
        assert result.required_salary == expected
        assert result.salary_adjustment == expected - salary

    @pytest.mark.parametrize("salary", [20_000, 33_333, 75_000, 181_250, 500_000])
    def test_monthly_cost_is_linear_in_salary(
        self, engine: ComparisonEngine, salary: float
    ) -> None:
        single = engine.compare(_input("boston", "houston", salary))
        double = engine.compare(_input("boston", "houston", salary * 2))
        assert abs(double.origin_monthly_cost - 2 * single.origin_monthly_cost) <= 1
        assert (
            abs(double.destination_monthly_cost - 2 * single.destination_monthly_cost)
            <= 1
        )

    def test_monthly_cost_formula(self, engine: ComparisonEngine) -> None:
        result = engine.compare(_input("los_angeles", "nashville", 96_000))
        # 8000 * 1.66 * 0.65 = 8632 ; 8000 * 0.93 * 0.65 = 4836
        assert result.origin_monthly_cost == 8632
        assert result.destination_monthly_cost == 4836
        assert SPEND_FRACTION == 0.65


# ---------------------------------------------------------------------------
# Category breakdown
# ---------------------------------------------------------------------------


class TestBreakdown:
    def test_row_order_and_labels(self, engine: ComparisonEngine) -> None:
        rows = engine.compare(_input()).category_breakdown
        assert [r.label for r in rows] == [
            "Housing Index",
            "Utilities Index",
            "Transportation Index",
            "Groceries Index",
            OVERALL_ROW_LABEL,
        ]
        assert [r.is_total_row for r in rows] == [False, False, False, False, True]

    def test_renting_values(self, engine: ComparisonEngine) -> None:
        rows = engine.compare(_input()).category_breakdown
        assert (rows[0].origin_value, rows[0].destination_value) == (110, 105)
        assert (rows[1].origin_value, rows[1].destination_value) == (100, 100)
        assert (rows[2].origin_value, rows[2].destination_value) == (115, 100)
        assert (rows[3].origin_value, rows[3].destination_value) == (100, 95)
        assert (rows[4].origin_value, rows[4].destination_value) == (107, 103)

    def test_owning_only_changes_housing_row(self, engine: ComparisonEngine) -> None:
        renting = engine.compare(_input(tenure=HousingTenure.RENTING))
        owning = engine.compare(_input(tenure=HousingTenure.OWNING))

        rent_housing = renting.category_breakdown[0]
        own_housing = owning.category_breakdown[0]
        assert own_housing.origin_value == pytest.approx(rent_housing.origin_value * 1.2)
        assert own_housing.destination_value == pytest.approx(
            rent_housing.destination_value * 1.2
        )

        assert owning.category_breakdown[1:] == renting.category_breakdown[1:]
        assert owning.origin_monthly_cost == renting.origin_monthly_cost
        assert owning.destination_monthly_cost == renting.destination_monthly_cost
        assert owning.required_salary == renting.required_salary
        assert owning.percent_difference == renting.percent_difference

    def test_total_row_ignores_multiplier(self, engine: ComparisonEngine) -> None:
        total = engine.compare(_input(tenure=HousingTenure.OWNING)).category_breakdown[-1]
        assert total.origin_value == 107
        assert total.destination_value == 103

    def test_housing_multipliers(self) -> None:
        assert housing_multiplier(HousingTenure.RENTING) == 1.0
        assert housing_multiplier(HousingTenure.OWNING) == 1.2


# ---------------------------------------------------------------------------
# Edge cases
# ---------------------------------------------------------------------------


class TestEdgeCases:
    def test_zero_salary(self, engine: ComparisonEngine) -> None:
        result = engine.compare(_input("denver", "new_york", 0))
        assert result.origin_monthly_cost == 0
        assert result.destination_monthly_cost == 0
        assert result.required_salary == 0
        assert result.salary_adjustment == 0
        # (187 - 128) / 128 * 100 = 46.09...
        assert result.percent_difference == pytest.approx(46.1)
        assert result.is_more_expensive is True

    def test_negative_salary_does_not_raise(self, engine: ComparisonEngine) -> None:
        result = engine.compare(_input("chicago", "austin", -12_000))
        assert result.origin_monthly_cost < 0
        assert result.destination_monthly_cost < 0
        assert result.required_salary == round_half_up(-12_000 * (103 / 107))
        assert result.percent_difference == pytest.approx(-3.7)

    def test_unknown_origin(self, engine: ComparisonEngine) -> None:
        with pytest.raises(UnknownCityError) as excinfo:
            engine.compare(_input("gotham", "austin"))
        assert excinfo.value.city_id == "gotham"

    def test_unknown_destination(self, engine: ComparisonEngine) -> None:
        with pytest.raises(UnknownCityError, match="metropolis"):
            engine.compare(_input("chicago", "metropolis"))

    def test_unknown_city_is_a_key_error(self, engine: ComparisonEngine) -> None:
        with pytest.raises(KeyError):
            engine.compare(_input("atlantis", "atlantis"))

    def test_zero_origin_index_fails_fast(self) -> None:
        broken = CityRecord.model_construct(
            id="nowhere",
            display_name="Nowhere",
            cost_index=0,
            housing_index=100,
            utilities_index=100,
            transport_index=100,
            groceries_index=100,
        )
        dataset = CityDataset([broken, *default_dataset().records()])
        with pytest.raises(DatasetIntegrityError, match="nowhere"):
            compare(dataset, _input("nowhere", "austin"))


def _flat_city(city_id: str, cost_index: float) -> CityRecord:
    return CityRecord(
        id=city_id,
        display_name=city_id.title(),
        cost_index=cost_index,
        housing_index=100,
        utilities_index=100,
        transport_index=100,
        groceries_index=100,
    )


class TestFractionalIndexes:
    """Loaded datasets may carry non-integer indexes."""

    @pytest.fixture()
    def near_dataset(self) -> CityDataset:
        return CityDataset(
            [
                _flat_city("a", 100.0),
                _flat_city("b", 100.02),
                _flat_city("c", 99.98),
                _flat_city("d", 100.06),
            ]
        )

    def test_tiny_increase_rounds_to_zero_and_is_not_more_expensive(
        self, near_dataset: CityDataset
    ) -> None:
        result = compare(near_dataset, _input("a", "b"))
        assert result.percent_difference == 0
        assert result.is_more_expensive is False

    def test_tiny_decrease(self, near_dataset: CityDataset) -> None:
        result = compare(near_dataset, _input("a", "c"))
        assert result.percent_difference == 0
        assert result.is_more_expensive is False
        assert result.to_summary_dict()["percent_difference_formatted"] == "0.0%"

    def test_rounded_up_increase(self, near_dataset: CityDataset) -> None:
        result = compare(near_dataset, _input("a", "d"))
        assert result.percent_difference == pytest.approx(0.1)
        assert result.is_more_expensive is True
        assert result.to_summary_dict()["percent_difference_formatted"] == "+0.1%"

    def test_flag_matches_stored_percent_for_all_pairs(
        self, near_dataset: CityDataset
    ) -> None:
        for origin in near_dataset:
            for destination in near_dataset:
                result = compare(near_dataset, _input(origin, destination))
                assert result.is_more_expensive == (result.percent_difference > 0)


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (-0.5, 0), (-2.5, -2), (-2.51, -3)],
    )
    def test_rounding(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected


class TestModuleLevelCompare:
    def test_matches_engine(self, engine: ComparisonEngine, dataset: CityDataset) -> None:
        comparison_input = _input("seattle", "charlotte", 140_000, HousingTenure.OWNING)
        assert compare(dataset, comparison_input) == engine.compare(comparison_input)

    def test_results_are_fresh_objects(self, engine: ComparisonEngine) -> None:
        first = engine.compare(_input())
        second = engine.compare(_input())
        assert first == second
        assert first is not second
