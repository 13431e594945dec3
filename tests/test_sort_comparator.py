"""
Unit tests for record ordering.
"""
from src.engine.sort_comparator import collation_key, compare, sort_key, sort_records
from src.models.query import SortDirection, SortSpec


def _names(records):
    return [r.overview.drug_name for r in records]


class TestSortComparator:
    """Test suite for compare() and sort_records()."""

    def test_no_sort_spec_compares_equal(self, scenario_records):
        a, b, _ = scenario_records
        assert compare(a, b, None) == 0
        assert compare(b, a, None) == 0

    def test_no_sort_spec_keeps_fetch_order(self, scenario_records):
        result = sort_records(scenario_records, None)
        assert result == scenario_records
        assert result is not scenario_records

    def test_ascending_strings(self, make_record):
        records = [make_record(drug_name=n) for n in ["cetrovix", "Aspirin", "betazol"]]
        assert _names(sort_records(records, SortSpec(field="drug_name"))) == ["Aspirin", "betazol", "cetrovix"]

    def test_descending_negates(self, scenario_records):
        a, b, _ = scenario_records
        spec = SortSpec(field="drug_name", direction=SortDirection.DESC)
        assert compare(a, b, spec) > 0
        assert compare(b, a, spec) < 0

    def test_numeric_values_compare_numerically(self, make_record):
        records = [make_record(drug_name=n) for n in ["100", "9", "25.5"]]
        assert _names(sort_records(records, SortSpec(field="drug_name"))) == ["9", "25.5", "100"]

    def test_numbers_sort_before_text(self, make_record):
        records = [make_record(drug_name=n) for n in ["9", "100", "abc"]]
        assert _names(sort_records(records, SortSpec(field="drug_name"))) == ["9", "100", "abc"]

    def test_accented_letters_sort_with_base_letter(self, make_record):
        records = [make_record(drug_name=n) for n in ["Zolmitriptan", "Éfavirenz", "Ebastine"]]
        assert _names(sort_records(records, SortSpec(field="drug_name"))) == ["Ebastine", "Éfavirenz", "Zolmitriptan"]
        assert collation_key("É")[0] == "e"

    def test_sort_reversal(self, sample_records):
        spec = SortSpec(field="created_at", direction=SortDirection.ASC)
        ascending = sort_records(sample_records, spec)
        descending = sort_records(sample_records, SortSpec(field="created_at", direction=SortDirection.DESC))
        assert descending == list(reversed(ascending))
        assert [r.drug_over_id for r in ascending] == ["d3", "d1", "d2"]

    def test_stable_for_equal_keys(self, make_record):
        records = [
            make_record("d1", therapeutic_area="Oncology"),
            make_record("d2", therapeutic_area="Cardiology"),
            make_record("d3", therapeutic_area="oncology"),
            make_record("d4", therapeutic_area="Oncology"),
        ]
        ascending = sort_records(records, SortSpec(field="therapeutic_area"))
        assert [r.drug_over_id for r in ascending] == ["d2", "d1", "d3", "d4"]
        descending = sort_records(records, SortSpec(field="therapeutic_area", direction=SortDirection.DESC))
        assert [r.drug_over_id for r in descending] == ["d1", "d3", "d4", "d2"]

    def test_sort_by_sub_entity_field(self, sample_records):
        ordered = sort_records(sample_records, SortSpec(field="company"))
        assert [r.drug_over_id for r in ordered] == ["d3", "d1", "d2"]

    def test_unknown_field_keeps_order(self, sample_records):
        ordered = sort_records(sample_records, SortSpec(field="nope", direction=SortDirection.DESC))
        assert ordered == sample_records

    def test_input_not_mutated(self, scenario_records):
        original = list(scenario_records)
        sort_records(scenario_records, SortSpec(field="drug_name", direction=SortDirection.DESC))
        assert scenario_records == original

    def test_mixed_numbers_and_text_reverse_exactly(self, make_record):
        keys = ["3", "10", "2", "b", "20x", "1a"]
        records = [make_record(f"d{i}", drug_name=k) for i, k in enumerate(keys)]

        ascending = sort_records(records, SortSpec(field="drug_name"))
        descending = sort_records(records, SortSpec(field="drug_name", direction=SortDirection.DESC))

        assert _names(ascending) == ["2", "3", "10", "1a", "20x", "b"]
        assert descending == list(reversed(ascending))
        assert _names(sort_records(list(reversed(records)), SortSpec(field="drug_name"))) == _names(ascending)

    def test_non_ascii_digits_sort_as_text(self):
        assert sort_key("١٠")[0] == 1
        assert sort_key("1_000")[0] == 1
        assert sort_key(" 12.5 ") == (0, 12.5)
