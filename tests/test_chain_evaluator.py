"""
Unit tests for criteria chain evaluation.
"""
from unittest.mock import patch
import pytest
from src.engine.chain_evaluator import evaluate_chain
from src.engine.criterion_evaluator import evaluate
from src.engine.field_projector import project
from src.models.query import Criterion, LogicOperator, Operator


def _criteria(*logics):
    """Chain of len(logics) + 1 criteria joined by the given logic operators."""
    chain = [Criterion(field=f"f{i}", operator=Operator.IS, value="x", logic=logic) for i, logic in enumerate(logics)]
    chain.append(Criterion(field=f"f{len(logics)}", operator=Operator.IS, value="x"))
    return chain


class TestChainEvaluator:
    """Test suite for evaluate_chain()."""

    def test_empty_chain_is_true(self, make_record):
        assert evaluate_chain(make_record(), []) is True

    def test_single_criterion_matches_direct_evaluation(self, sample_records):
        criteria = [
            Criterion(field="therapeutic_area", operator=Operator.IS, value="oncology"),
            Criterion(field="company", operator=Operator.CONTAINS, value="bayer"),
            Criterion(field="created_at", operator=Operator.GREATER_THAN, value="2023"),
            Criterion(field="unknown", operator=Operator.CONTAINS, value="x"),
        ]
        for record in sample_records:
            for criterion in criteria:
                expected = evaluate(project(record, criterion.field), criterion.operator, criterion.value)
                assert evaluate_chain(record, [criterion]) == expected

    @pytest.mark.parametrize("results,logics,expected", [
        # (F AND T) OR T: a precedence-based evaluator would give F AND (T OR T) = F
        ([False, True, True], [LogicOperator.AND, LogicOperator.OR], True),
        ([True, False, False], [LogicOperator.AND, LogicOperator.OR], False),
        ([True, False, True], [LogicOperator.AND, LogicOperator.OR], True),
        # (T OR F) AND F
        ([True, False, False], [LogicOperator.OR, LogicOperator.AND], False),
        ([False, False, True], [LogicOperator.OR, LogicOperator.OR], True),
        ([True, True, True, False], [LogicOperator.AND, LogicOperator.AND, LogicOperator.AND], False),
    ])
    def test_left_fold_without_precedence(self, make_record, results, logics, expected):
        criteria = _criteria(*logics)
        with patch("src.engine.chain_evaluator.evaluate", side_effect=results):
            assert evaluate_chain(make_record(), criteria) is expected

    def test_left_fold_on_real_fields(self, make_record):
        record = make_record(drug_name="Aspirin", therapeutic_area="Cardiology", global_status="Launched")
        criteria = [
            Criterion(field="drug_name", operator=Operator.IS, value="Betazol", logic=LogicOperator.AND),
            Criterion(field="therapeutic_area", operator=Operator.IS, value="Cardiology", logic=LogicOperator.OR),
            Criterion(field="global_status", operator=Operator.IS, value="Launched"),
        ]
        assert evaluate_chain(record, criteria) is True

    def test_missing_logic_folds_as_or(self, make_record):
        criteria = [
            Criterion(field="f0", operator=Operator.IS, value="x"),
            Criterion(field="f1", operator=Operator.IS, value="x"),
        ]
        with patch("src.engine.chain_evaluator.evaluate", side_effect=[False, True]):
            assert evaluate_chain(make_record(), criteria) is True

    def test_logic_on_last_criterion_is_ignored(self, make_record):
        record = make_record(drug_name="Aspirin")
        criteria = [Criterion(field="drug_name", operator=Operator.IS, value="aspirin", logic=LogicOperator.AND)]
        assert evaluate_chain(record, criteria) is True

    def test_each_criterion_uses_its_own_field(self, make_record):
        record = make_record(drug_name="Aspirin", activity=[{"biological_target": "COX-1"}])
        criteria = [
            Criterion(field="drug_name", operator=Operator.STARTS_WITH, value="asp", logic=LogicOperator.AND),
            Criterion(field="biological_target", operator=Operator.IS, value="cox-1"),
        ]
        assert evaluate_chain(record, criteria) is True
