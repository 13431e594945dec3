"""
Unit tests for the query pipeline.
"""
from src.engine.pipeline import apply_page_reset, filter_records, recompute, recompute_state
from src.engine.text_search import matches_search_term
from src.models.query import (
    Criterion,
    FilterState,
    LogicOperator,
    Operator,
    PageSpec,
    QueryState,
    SortDirection,
    SortSpec
)


def _ids(records):
    return [r.drug_over_id for r in records]


class TestTextSearch:
    """Test suite for matches_search_term()."""

    def test_empty_term_matches(self, make_record):
        assert matches_search_term(make_record(), "")

    def test_matches_any_search_field(self, sample_records):
        assert [r.drug_over_id for r in sample_records if matches_search_term(r, "ONCO")] == ["d2", "d3"]
        assert [r.drug_over_id for r in sample_records if matches_search_term(r, "salicylic")] == ["d1"]
        assert [r.drug_over_id for r in sample_records if matches_search_term(r, "ctx")] == ["d3"]

    def test_ignores_other_fields(self, sample_records):
        assert not any(matches_search_term(r, "Bayer") for r in sample_records)


class TestPipeline:
    """Test suite for recompute()."""

    def test_filter_sort_paginate_scenario(self, scenario_records):
        launched = FilterState(globalStatuses={"launched"})

        filtered = filter_records(scenario_records, [], launched, "")
        assert [r.overview.drug_name for r in filtered] == ["Aspirin", "Cetrovix"]

        sorted_view = recompute(
            scenario_records, [], launched, "",
            SortSpec(field="drug_name", direction=SortDirection.DESC),
            PageSpec(page=1, page_size=10)
        )
        assert [r.overview.drug_name for r in sorted_view.page_items] == ["Cetrovix", "Aspirin"]

        paged = recompute(
            scenario_records, [], launched, "",
            SortSpec(field="drug_name", direction=SortDirection.DESC),
            PageSpec(page=2, page_size=1)
        )
        assert [r.overview.drug_name for r in paged.page_items] == ["Aspirin"]
        assert paged.total == 2
        assert paged.total_pages == 2
        assert paged.page == 2
        assert paged.page_size == 1

    def test_stages_are_and_combined(self, sample_records):
        criteria = [Criterion(field="company", operator=Operator.CONTAINS, value="o")]
        view = recompute(
            sample_records, criteria, FilterState(globalStatuses={"Launched", "Phase II"}), "onc",
            None, PageSpec(page=1, page_size=10)
        )
        assert _ids(view.page_items) == ["d2"]

    def test_no_constraints_returns_everything_in_fetch_order(self, sample_records):
        view = recompute(sample_records, [], FilterState(), "", None, PageSpec(page=1, page_size=10))
        assert view.page_items == sample_records
        assert view.total == 3
        assert view.total_pages == 1

    def test_empty_collection(self):
        view = recompute([], [], FilterState(), "", None, PageSpec(page=1, page_size=10))
        assert view.page_items == []
        assert view.total == 0
        assert view.total_pages == 0

    def test_chain_applied_in_pipeline(self, sample_records):
        criteria = [
            Criterion(field="therapeutic_area", operator=Operator.IS, value="oncology", logic=LogicOperator.AND),
            Criterion(field="global_status", operator=Operator.IS, value="launched", logic=LogicOperator.OR),
            Criterion(field="biological_target", operator=Operator.IS, value="cox-1"),
        ]
        view = recompute(sample_records, criteria, FilterState(), "", None, PageSpec(page=1, page_size=10))
        assert _ids(view.page_items) == ["d1", "d3"]

    def test_input_collection_untouched(self, sample_records):
        before = list(sample_records)
        recompute(
            sample_records, [], FilterState(), "",
            SortSpec(field="drug_name", direction=SortDirection.DESC),
            PageSpec(page=1, page_size=2)
        )
        assert sample_records == before

    def test_recompute_state(self, scenario_records):
        state = QueryState(
            filter_state=FilterState(globalStatuses={"launched"}),
            sort=SortSpec(field="drug_name", direction=SortDirection.DESC),
            page_spec=PageSpec(page=1, page_size=1)
        )
        view = recompute_state(scenario_records, state)
        assert [r.overview.drug_name for r in view.page_items] == ["Cetrovix"]
        assert view.total_pages == 2


class TestPageReset:
    """Test suite for apply_page_reset()."""

    def _state(self, **overrides):
        values = {"page_spec": PageSpec(page=3, page_size=10)}
        values.update(overrides)
        return QueryState(**values)

    def test_search_term_change_resets(self):
        result = apply_page_reset(self._state(), self._state(search_term="asp"))
        assert result.page_spec.page == 1

    def test_criteria_change_resets(self):
        criteria = [Criterion(field="drug_name", operator=Operator.CONTAINS, value="a")]
        result = apply_page_reset(self._state(), self._state(criteria=criteria))
        assert result.page_spec.page == 1

    def test_filter_change_resets(self):
        result = apply_page_reset(self._state(), self._state(filter_state=FilterState(countries={"India"})))
        assert result.page_spec.page == 1

    def test_page_size_change_resets(self):
        result = apply_page_reset(self._state(), self._state(page_spec=PageSpec(page=3, page_size=25)))
        assert result.page_spec.page == 1
        assert result.page_spec.page_size == 25

    def test_sort_change_keeps_page(self):
        previous = self._state(sort=SortSpec(field="drug_name"))
        current = self._state(sort=SortSpec(field="drug_name", direction=SortDirection.DESC))
        assert apply_page_reset(previous, current).page_spec.page == 3
        other_field = self._state(sort=SortSpec(field="company"))
        assert apply_page_reset(previous, other_field).page_spec.page == 3

    def test_page_navigation_kept(self):
        current = self._state(page_spec=PageSpec(page=4, page_size=10))
        assert apply_page_reset(self._state(), current) == current
