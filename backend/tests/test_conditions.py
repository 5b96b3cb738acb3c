import logging

import pytest

from cart_eligibility.rules.conditions import OPERATORS, evaluate_condition, evaluate_operator


def test_scalar_condition_is_loose_equality():
    assert evaluate_condition(5, "5")
    assert evaluate_condition("gold", "gold")
    assert not evaluate_condition("gold", "silver")
    assert evaluate_condition(None, None)


@pytest.mark.parametrize(
    "value, condition, expected",
    [
        (15, {"gt": 10}, True),
        (10, {"gt": 10}, False),
        (10, {"gte": 10}, True),
        (9, {"lt": 10}, True),
        (10, {"lt": 10}, False),
        (10, {"lte": 10}, True),
        ("15", {"gt": "9"}, True),
        (None, {"lt": 1}, True),
        (True, {"gte": 1}, True),
    ],
)
def test_numeric_comparisons_coerce_both_sides(value, condition, expected):
    assert evaluate_condition(value, condition) is expected


@pytest.mark.parametrize("op", ["gt", "lt", "gte", "lte"])
def test_non_numeric_operands_fail_every_comparison(op):
    assert not evaluate_condition("abc", {op: 5})
    assert not evaluate_condition(5, {op: "abc"})


def test_multiple_operators_form_a_range():
    assert evaluate_condition(15, {"gt": 10, "lt": 20})
    assert not evaluate_condition(25, {"gt": 10, "lt": 20})
    assert not evaluate_condition(5, {"gt": 10, "lt": 20})


def test_in_membership_uses_loose_equality():
    assert evaluate_condition("b", {"in": ["a", "b", "c"]})
    assert not evaluate_condition("d", {"in": ["a", "b", "c"]})
    assert evaluate_condition(2, {"in": ["1", "2"]})
    assert evaluate_condition(2, {"in": (1, 2)})


def test_in_requires_a_sequence(eligibility_logs):
    assert not evaluate_condition("b", {"in": "abc"})
    assert not evaluate_condition(1, {"in": {"a": 1}})
    assert "expects a list" in eligibility_logs.text


def test_or_needs_one_sub_operator():
    condition = {"or": {"gt": 100, "lt": 0}}
    assert not evaluate_condition(50, condition)
    assert evaluate_condition(150, condition)
    assert evaluate_condition(-1, condition)


def test_and_needs_every_sub_operator():
    condition = {"and": {"gte": 10, "lte": 20}}
    assert evaluate_condition(10, condition)
    assert evaluate_condition(20, condition)
    assert not evaluate_condition(21, condition)


def test_nested_and_or():
    condition = {"or": {"in": ["vip"], "and": {"gte": 0, "lt": 1}}}
    assert evaluate_condition("vip", condition)
    assert evaluate_condition("0.5", condition)
    assert not evaluate_condition(3, condition)


def test_and_or_require_mapping_argument(eligibility_logs):
    assert not evaluate_condition(5, {"and": [{"gt": 1}]})
    assert not evaluate_condition(5, {"or": 5})
    assert "expects a mapping" in eligibility_logs.text


def test_empty_and_or_mappings():
    assert evaluate_condition(5, {"and": {}})
    assert not evaluate_condition(5, {"or": {}})


def test_unknown_operator_fails_closed(eligibility_logs):
    assert not evaluate_condition(5, {"eq": 5})
    assert not evaluate_condition(5, {"gt": 1, "between": [1, 9]})
    assert "Unknown operator 'eq'" in eligibility_logs.text


def test_unknown_operator_inside_or_is_just_one_failed_branch():
    assert evaluate_condition(5, {"or": {"regex": ".*", "gt": 1}})


def test_empty_condition_mapping_is_vacuously_true():
    assert evaluate_condition("anything", {})


def test_list_condition_is_compared_as_a_value():
    assert evaluate_condition("a,b", ["a", "b"])
    assert not evaluate_condition("a", ["a", "b"])


def test_evaluate_operator_directly():
    assert evaluate_operator(3, "lte", "3")
    assert not evaluate_operator(3, "nope", 3)


def test_operator_names():
    assert OPERATORS == {"gt", "lt", "gte", "lte", "in", "and", "or"}


def test_known_operators_never_warn_as_unknown(eligibility_logs):
    for name in OPERATORS:
        evaluate_operator(1, name, {"gt": 0} if name in ("and", "or") else [1])
    assert "Unknown operator" not in eligibility_logs.text


def test_non_string_operator_name_is_unknown(eligibility_logs):
    assert not evaluate_condition(1, {1: 1})
    assert "Unknown operator 1" in eligibility_logs.text


def test_unknown_operator_logged_at_warning(caplog):
    caplog.set_level(logging.WARNING, logger="cart_eligibility")
    evaluate_condition(1, {"contains": 1})
    assert [r.levelno for r in caplog.records] == [logging.WARNING]
