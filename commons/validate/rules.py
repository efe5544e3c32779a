"""Composable Validation Rules

Rules are immutable, stateless checks a schema runs against a non-null
value. Each appends zero or more ValidationResults to the shared list and
never raises.

Features:
- Frozen dataclass rules for immutability
- Value checks (included / excluded / comparison)
- Property checks (at least one / only one / property comparison)
- AND / OR / NOT combinators, also available as ``&``, ``|`` and ``~``
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from commons.convert import to_string
from commons.reflect import ObjectReader

from .comparator import ObjectComparator
from .result import ValidationResult, ValidationResultType

if TYPE_CHECKING:
    from .schema import Schema


def _describe(items: tuple[Any, ...]) -> str:
    return ",".join(to_string(item) for item in items)


class ValidationRule(ABC):
    """Base class for validation rules.

    Rules compose via operators:
    - & (AND): every rule must pass
    - | (OR): at least one rule must pass
    - ~ (NOT): the rule must fail
    """

    @abstractmethod
    def validate(self, path: str, schema: Schema, value: Any, results: list[ValidationResult]) -> None:
        """Check ``value`` found at ``path`` and append any findings to ``results``."""

    def __and__(self, other: ValidationRule) -> AndRule: return AndRule(self, other)

    def __or__(self, other: ValidationRule) -> OrRule: return OrRule(self, other)

    def __invert__(self) -> NotRule: return NotRule(self)


# ============================================================================
# Value Rules
# ============================================================================

@dataclass(frozen=True, slots=True)
class IncludedRule(ValidationRule):
    """Value must equal one of the listed values."""
    values: tuple[Any, ...]

    def __init__(self, *values: Any):
        object.__setattr__(self, "values", values)

    def validate(self, path: str, schema: Schema, value: Any, results: list[ValidationResult]) -> None:
        name = path or "value"
        if not any(ObjectComparator.compare(value, "EQ", allowed) for allowed in self.values):
            results.append(ValidationResult(path, ValidationResultType.ERROR, "VALUE_NOT_INCLUDED",
                f"{name} must be one of {_describe(self.values)}", list(self.values), None))


@dataclass(frozen=True, slots=True)
class ExcludedRule(ValidationRule):
    """Value must not equal any of the listed values."""
    values: tuple[Any, ...]

    def __init__(self, *values: Any):
        object.__setattr__(self, "values", values)

    def validate(self, path: str, schema: Schema, value: Any, results: list[ValidationResult]) -> None:
        name = path or "value"
        if any(ObjectComparator.are_equal(value, excluded) for excluded in self.values):
            results.append(ValidationResult(path, ValidationResultType.ERROR, "VALUE_INCLUDED",
                f"{name} must not be one of {_describe(self.values)}", list(self.values), None))


@dataclass(frozen=True, slots=True)
class ValueComparisonRule(ValidationRule):
    """Value must compare to a constant, e.g. ``ValueComparisonRule(">=", 1)``."""
    operation: str
    value: Any

    def validate(self, path: str, schema: Schema, value: Any, results: list[ValidationResult]) -> None:
        name = path or "value"
        if not ObjectComparator.compare(value, self.operation, self.value):
            results.append(ValidationResult(path, ValidationResultType.ERROR, "BAD_VALUE",
                f"{name} must {self.operation} {to_string(self.value)} but found {to_string(value)}",
                f"{self.operation} {to_string(self.value)}", value))


# ============================================================================
# Property Rules
# ============================================================================

@dataclass(frozen=True, slots=True)
class AtLeastOneExistsRule(ValidationRule):
    """At least one of the named properties must be set (not None)."""
    properties: tuple[str, ...]

    def __init__(self, *properties: str):
        object.__setattr__(self, "properties", properties)

    def validate(self, path: str, schema: Schema, value: Any, results: list[ValidationResult]) -> None:
        name = path or "value"
        found = [prop for prop in self.properties if ObjectReader.get_property(value, prop) is not None]
        if not found:
            results.append(ValidationResult(path, ValidationResultType.ERROR, "VALUE_NULL",
                f"{name} must have at least one property from {_describe(self.properties)}",
                list(self.properties), None))


@dataclass(frozen=True, slots=True)
class OnlyOneExistsRule(ValidationRule):
    """Exactly one of the named properties must be set to a truthy value."""
    properties: tuple[str, ...]

    def __init__(self, *properties: str):
        object.__setattr__(self, "properties", properties)

    def validate(self, path: str, schema: Schema, value: Any, results: list[ValidationResult]) -> None:
        name = path or "value"
        found = [prop for prop in self.properties if ObjectReader.get_property(value, prop)]
        if not found:
            results.append(ValidationResult(path, ValidationResultType.ERROR, "VALUE_NULL",
                f"{name} must have at least one property from {_describe(self.properties)}",
                list(self.properties), None))
        elif len(found) > 1:
            results.append(ValidationResult(path, ValidationResultType.ERROR, "VALUE_ONLY_ONE",
                f"{name} must have only one property from {_describe(self.properties)}",
                list(self.properties), None))


@dataclass(frozen=True, slots=True)
class PropertiesComparisonRule(ValidationRule):
    """Two properties of the value must compare, e.g. ``("start", "<=", "end")``."""
    property1: str
    operation: str
    property2: str

    def validate(self, path: str, schema: Schema, value: Any, results: list[ValidationResult]) -> None:
        name = path or "value"
        value1 = ObjectReader.get_property(value, self.property1)
        value2 = ObjectReader.get_property(value, self.property2)

        if not ObjectComparator.compare(value1, self.operation, value2):
            results.append(ValidationResult(path, ValidationResultType.ERROR, "PROPERTIES_NOT_MATCH",
                f"{name} must have {self.property1} {self.operation} {self.property2}", value2, value1))


# ============================================================================
# Combinators
# ============================================================================

@dataclass(frozen=True, slots=True)
class AndRule(ValidationRule):
    """Every rule must pass. All findings are reported."""
    rules: tuple[ValidationRule, ...]

    def __init__(self, *rules: ValidationRule):
        object.__setattr__(self, "rules", rules)

    def validate(self, path: str, schema: Schema, value: Any, results: list[ValidationResult]) -> None:
        for rule in self.rules:
            rule.validate(path, schema, value, results)


@dataclass(frozen=True, slots=True)
class OrRule(ValidationRule):
    """At least one rule must pass.

    Rules run in order; the first one that adds nothing ends the check and
    discards earlier findings. If every rule fails, all findings are reported.
    """
    rules: tuple[ValidationRule, ...]

    def __init__(self, *rules: ValidationRule):
        object.__setattr__(self, "rules", rules)

    def validate(self, path: str, schema: Schema, value: Any, results: list[ValidationResult]) -> None:
        if not self.rules:
            return

        local_results: list[ValidationResult] = []
        for rule in self.rules:
            count = len(local_results)
            rule.validate(path, schema, value, local_results)
            if len(local_results) == count:
                return

        results.extend(local_results)


@dataclass(frozen=True, slots=True)
class NotRule(ValidationRule):
    """The wrapped rule must fail."""
    rule: ValidationRule | None

    def validate(self, path: str, schema: Schema, value: Any, results: list[ValidationResult]) -> None:
        if self.rule is None:
            return

        name = path or "value"
        local_results: list[ValidationResult] = []
        self.rule.validate(path, schema, value, local_results)
        if local_results:
            return

        results.append(ValidationResult(path, ValidationResultType.ERROR, "NOT_FAILED",
            f"Negative check for {name} failed", None, None))
