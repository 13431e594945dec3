"""
Criteria chain evaluation.
Folds an ordered list of criteria into one boolean per record.
"""
from typing import Sequence
from src.engine.criterion_evaluator import evaluate
from src.engine.field_projector import project
from src.models.drug_record import DrugRecord
from src.models.query import Criterion, LogicOperator


def evaluate_chain(record: DrugRecord, criteria: Sequence[Criterion]) -> bool:
    """
    Evaluate a chain of criteria against a record.

    Results are folded strictly left to right with no operator precedence:
    `c1 AND c2 OR c3` is `(c1 AND c2) OR c3`. The logic that joins criterion
    i to criterion i+1 is carried by criterion i; a missing link folds as OR.

    Args:
        record: Drug record to test
        criteria: Ordered criteria; empty means unconstrained

    Returns:
        Folded result of the chain
    """
    if not criteria:
        return True

    results = [
        evaluate(project(record, criterion.field), criterion.operator, criterion.value)
        for criterion in criteria
    ]

    outcome = results[0]
    for previous, result in zip(criteria, results[1:]):
        if previous.logic == LogicOperator.AND:
            outcome = outcome and result
        else:
            outcome = outcome or result
    return outcome
