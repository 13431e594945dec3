"""
Single-criterion evaluation.
Applies one comparison operator to a projected value and a user literal.
"""
import math
import re
from src.models.query import Operator


# Leading numeric prefix, trailing text is ignored
_LEADING_NUMBER = re.compile(r'[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)', re.ASCII)


def parse_float(text: str) -> float:
    """
    Parse the leading number of a string.

    "12.5 mg" parses as 12.5 and "2024-01-05" as 2024.0. A string without a
    leading number parses as NaN.
    """
    match = _LEADING_NUMBER.match(text.lstrip())
    if not match:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))


def evaluate(projected_value: str, operator: Operator, literal: str) -> bool:
    """
    Evaluate one comparison.

    String operators compare lower-cased operands. Numeric operators compare
    parsed floats; when either side is not numeric the comparison involves
    NaN and is False.

    Args:
        projected_value: Value projected from the record
        operator: Comparison to apply
        literal: User-supplied value

    Returns:
        True if the record value satisfies the comparison
    """
    target = projected_value.lower()
    wanted = literal.lower()

    if operator == Operator.CONTAINS:
        return wanted in target
    if operator in (Operator.IS, Operator.EQUALS):
        return target == wanted
    if operator in (Operator.IS_NOT, Operator.NOT_EQUALS):
        return target != wanted
    if operator == Operator.STARTS_WITH:
        return target.startswith(wanted)
    if operator == Operator.ENDS_WITH:
        return target.endswith(wanted)

    left = parse_float(projected_value)
    right = parse_float(literal)
    if operator == Operator.GREATER_THAN:
        return left > right
    if operator == Operator.GREATER_THAN_OR_EQUAL:
        return left >= right
    if operator == Operator.LESS_THAN:
        return left < right
    if operator == Operator.LESS_THAN_OR_EQUAL:
        return left <= right
    return False
