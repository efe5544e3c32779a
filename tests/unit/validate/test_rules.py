"""Validation rule and combinator tests."""

import pytest

from commons.validate import (
    AndRule,
    AtLeastOneExistsRule,
    ExcludedRule,
    IncludedRule,
    NotRule,
    ObjectSchema,
    OnlyOneExistsRule,
    OrRule,
    PropertiesComparisonRule,
    Schema,
    ValueComparisonRule,
)


def _run(rule, value) -> list[str]:
    return [r.code for r in Schema().with_rule(rule).validate(value)]


class TestValueRules:
    def test_included(self) -> None:
        assert _run(IncludedRule("a", "b"), "a") == []
        assert _run(IncludedRule("a", "b"), "c") == ["VALUE_NOT_INCLUDED"]

    def test_included_message(self) -> None:
        [result] = Schema().with_rule(IncludedRule(1, 2)).validate(3)
        assert result.message == "value must be one of 1,2"
        assert result.expected == [1, 2]

    def test_excluded(self) -> None:
        assert _run(ExcludedRule("admin", "root"), "guest") == []
        assert _run(ExcludedRule("admin", "root"), "root") == ["VALUE_INCLUDED"]

    @pytest.mark.parametrize("op, bound, value, passes", [
        (">=", 0, 0, True),
        (">=", 0, -1, False),
        ("<", 10, 9.5, True),
        ("<", 10, "11", False),
        ("==", "x", "x", True),
        ("NE", "x", "x", False),
        ("LIKE", "^ab", "abc", True),
        ("LIKE", "^ab", "cab", False),
    ])
    def test_value_comparison(self, op, bound, value, passes) -> None:
        assert (_run(ValueComparisonRule(op, bound), value) == []) is passes

    def test_value_comparison_failure_details(self) -> None:
        [result] = Schema().with_rule(ValueComparisonRule(">=", 18)).validate(16)
        assert result.code == "BAD_VALUE"
        assert result.expected == ">= 18"
        assert result.actual == 16

    def test_booleans_are_not_numbers(self) -> None:
        assert _run(IncludedRule(1, 2), True) == ["VALUE_NOT_INCLUDED"]
        assert _run(ExcludedRule(0), False) == []
        assert _run(IncludedRule(True), True) == []
        assert _run(IncludedRule(1.0), 1) == []

    def test_rules_skip_null_values(self) -> None:
        assert _run(IncludedRule("a"), None) == []


class TestPropertyRules:
    def test_at_least_one_exists(self) -> None:
        rule = AtLeastOneExistsRule("email", "phone")
        assert _run(rule, {"email": "a@b.c"}) == []
        assert _run(rule, {"email": None, "other": 1}) == ["VALUE_NULL"]

    def test_only_one_exists(self) -> None:
        rule = OnlyOneExistsRule("card", "cash")
        assert _run(rule, {"card": "visa"}) == []
        assert _run(rule, {}) == ["VALUE_NULL"]
        assert _run(rule, {"card": "visa", "cash": 10}) == ["VALUE_ONLY_ONE"]

    def test_only_one_exists_counts_truthy_values(self) -> None:
        assert _run(OnlyOneExistsRule("a", "b"), {"a": 1, "b": 0}) == []

    def test_properties_comparison(self) -> None:
        rule = PropertiesComparisonRule("start", "<=", "end")
        assert _run(rule, {"start": 1, "end": 5}) == []

        [result] = Schema().with_rule(rule).validate({"start": 5, "end": 1})
        assert result.code == "PROPERTIES_NOT_MATCH"
        assert result.expected == 1
        assert result.actual == 5

    def test_property_rules_on_object_schema(self) -> None:
        schema = (ObjectSchema(allow_extra_properties=True)
            .with_rule(AtLeastOneExistsRule("email", "phone")))
        [result] = schema.validate({"name": "x"})
        assert result.path == ""
        assert result.message == "value must have at least one property from email,phone"


class TestCombinators:
    def test_and_reports_every_failure(self) -> None:
        rule = AndRule(ValueComparisonRule(">", 10), ValueComparisonRule("<", 0))
        assert _run(rule, 5) == ["BAD_VALUE", "BAD_VALUE"]

    def test_or_passes_when_any_rule_passes(self) -> None:
        rule = OrRule(IncludedRule(1), IncludedRule(2))
        assert _run(rule, 2) == []

    def test_or_reports_all_failures(self) -> None:
        rule = OrRule(IncludedRule(1), IncludedRule(2))
        assert _run(rule, 3) == ["VALUE_NOT_INCLUDED", "VALUE_NOT_INCLUDED"]

    def test_empty_or_passes(self) -> None:
        assert _run(OrRule(), 3) == []

    def test_not_passes_when_rule_fails(self) -> None:
        assert _run(NotRule(IncludedRule("banned")), "ok") == []

    def test_not_fails_when_rule_passes(self) -> None:
        [result] = Schema().with_rule(NotRule(IncludedRule("banned"))).validate("banned")
        assert result.code == "NOT_FAILED"
        assert result.message == "Negative check for value failed"

    def test_not_without_rule_passes(self) -> None:
        assert _run(NotRule(None), "anything") == []

    def test_operators(self) -> None:
        a, b = IncludedRule(1), IncludedRule(2)

        assert (a & b) == AndRule(a, b)
        assert (a | b) == OrRule(a, b)
        assert ~a == NotRule(a)
        assert _run(a | b, 1) == []
        assert _run(~(a | b), 1) == ["NOT_FAILED"]

    def test_rules_are_immutable(self) -> None:
        rule = IncludedRule(1)
        with pytest.raises(AttributeError):
            rule.values = (2,)
