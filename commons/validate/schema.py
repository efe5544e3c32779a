"""Validation Schemas

Declarative, reusable validators for dynamic data. A schema walks the
value recursively and records every finding as a ValidationResult with a
dotted path; nothing is raised during the walk. Schemas keep no per-call
state, so one instance can validate many values concurrently.

Usage:
    schema = (ObjectSchema()
        .with_required_property("name", TypeCode.STRING)
        .with_optional_property("tags", ArraySchema(TypeCode.STRING))
        .with_optional_property("age", TypeCode.INTEGER, ValueComparisonRule(">=", 0)))

    results = schema.validate({"name": "Alice", "age": -1})
    schema.validate_and_throw_exception(correlation_id, data)
"""
from __future__ import annotations

from typing import Any, Self, Sequence

from commons.config import get_settings
from commons.convert import TypeCode, to_type_code
from commons.reflect import ObjectReader, TypeMatcher

from .comparator import ObjectComparator
from .exception import ValidationException
from .result import ValidationResult, ValidationResultType
from .rules import ValidationRule


def _child_path(path: str, key: Any) -> str:
    return f"{path}.{key}" if path else str(key)


def _type_to_string(type_: Any) -> str:
    if type_ is None:
        return "unknown"
    if isinstance(type_, Schema):
        return type(type_).__name__
    return str(type_)


class Schema:
    """Base schema: a required flag plus an ordered list of rules."""

    def __init__(self, required: bool = False, rules: Sequence[ValidationRule] | None = None):
        self._required = required
        self._rules: list[ValidationRule] = list(rules or [])

    @property
    def required(self) -> bool: return self._required

    @required.setter
    def required(self, value: bool) -> None: self._required = value

    @property
    def rules(self) -> list[ValidationRule]: return self._rules

    @rules.setter
    def rules(self, value: Sequence[ValidationRule] | None) -> None: self._rules = list(value or [])

    def make_required(self) -> Self:
        self._required = True
        return self

    def make_optional(self) -> Self:
        self._required = False
        return self

    def with_rule(self, rule: ValidationRule) -> Self:
        self._rules.append(rule)
        return self

    def perform_validation(self, path: str, value: Any, results: list[ValidationResult]) -> None:
        """Check the required flag, then run every rule against a non-null value."""
        name = path or "value"
        value = ObjectReader.get_value(value)

        if value is None:
            if self._required:
                results.append(ValidationResult(path, ValidationResultType.ERROR, "VALUE_IS_NULL",
                    f"{name} must not be null", "NOT NULL", None))
            return

        for rule in self._rules:
            rule.validate(path, self, value, results)

    def perform_type_validation(self, path: str, type_: Any, value: Any, results: list[ValidationResult]) -> None:
        """Check ``value`` against an expected type. Null values are left to the required check."""
        if type_ is None:
            return

        if isinstance(type_, Schema):
            type_.perform_validation(path, value, results)
            return

        value = ObjectReader.get_value(value)
        if value is None:
            return

        name = path or "value"
        value_type = to_type_code(value)
        if TypeMatcher.match_type(type_, value_type):
            return

        results.append(ValidationResult(path, ValidationResultType.ERROR, "TYPE_MISMATCH",
            f"{name} type must be {_type_to_string(type_)} but found {value_type}", type_, value_type))

    def validate(self, value: Any) -> list[ValidationResult]:
        """Validate a value and return every finding in encounter order."""
        results: list[ValidationResult] = []
        self.perform_validation("", value, results)
        return results

    def validate_and_return_exception(self, correlation_id: str | None, value: Any,
                                      strict: bool | None = None) -> ValidationException | None:
        """Validate and return a ValidationException when validation failed, else None.

        ``strict`` makes warnings fail too; None uses ``Settings.VALIDATION_STRICT``.
        """
        strict = get_settings().VALIDATION_STRICT if strict is None else strict
        return ValidationException.from_results(correlation_id, self.validate(value), strict)

    def validate_and_throw_exception(self, correlation_id: str | None, value: Any,
                                     strict: bool | None = None) -> None:
        """Validate and raise ValidationException when validation failed."""
        strict = get_settings().VALIDATION_STRICT if strict is None else strict
        ValidationException.throw_exception_if_needed(correlation_id, self.validate(value), strict)


class PropertySchema(Schema):
    """Schema for one named property of an object."""

    def __init__(self, name: str | None = None, type_: Any = None, required: bool = False,
                 rules: Sequence[ValidationRule] | None = None):
        super().__init__(required, rules)
        self._name = name
        self._type = type_

    @property
    def name(self) -> str | None: return self._name

    @name.setter
    def name(self, value: str | None) -> None: self._name = value

    @property
    def type(self) -> Any: return self._type

    @type.setter
    def type(self, value: Any) -> None: self._type = value

    def perform_validation(self, path: str, value: Any, results: list[ValidationResult]) -> None:
        """Validate the property's value at ``path.name``. ``path`` is the parent's path."""
        path = _child_path(path, self._name)
        super().perform_validation(path, value, results)
        self.perform_type_validation(path, self._type, value, results)


class ObjectSchema(Schema):
    """Schema for an object: declared properties plus a policy for extra ones.

    Undeclared properties produce an UNEXPECTED_PROPERTY warning unless
    ``allow_extra_properties`` is set.
    """

    def __init__(self, allow_extra_properties: bool = False, required: bool = False,
                 rules: Sequence[ValidationRule] | None = None):
        super().__init__(required, rules)
        self._allow_extra = allow_extra_properties
        self._allow_undefined = False
        self._properties: list[PropertySchema] = []

    @property
    def properties(self) -> list[PropertySchema]: return self._properties

    @properties.setter
    def properties(self, value: Sequence[PropertySchema] | None) -> None: self._properties = list(value or [])

    @property
    def allow_extra_properties(self) -> bool: return self._allow_extra

    @allow_extra_properties.setter
    def allow_extra_properties(self, value: bool) -> None: self._allow_extra = value

    @property
    def is_undefined_allowed(self) -> bool: return self._allow_undefined

    @is_undefined_allowed.setter
    def is_undefined_allowed(self, value: bool) -> None: self._allow_undefined = value

    def allow_undefined(self, value: bool) -> Self:
        self._allow_undefined = value
        return self

    def with_property(self, schema: PropertySchema) -> Self:
        self._properties.append(schema)
        return self

    def with_required_property(self, name: str, type_: Any = None, *rules: ValidationRule) -> Self:
        return self.with_property(PropertySchema(name, type_, required=True, rules=rules))

    def with_optional_property(self, name: str, type_: Any = None, *rules: ValidationRule) -> Self:
        return self.with_property(PropertySchema(name, type_, required=False, rules=rules))

    def perform_validation(self, path: str, value: Any, results: list[ValidationResult]) -> None:
        value = ObjectReader.get_value(value)
        super().perform_validation(path, value, results)
        if value is None:
            return

        name = path or "value"
        properties = ObjectReader.get_properties(value)

        for property_schema in self._properties:
            processed_name = next(
                (key for key in properties if ObjectComparator.are_equal(property_schema.name, key)),
                None,
            )
            if processed_name is not None:
                property_schema.perform_validation(path, properties.pop(processed_name), results)
            else:
                # Absent properties still get their required check
                property_schema.perform_validation(path, None, results)

        if self._allow_extra:
            return

        for key in properties:
            results.append(ValidationResult(_child_path(path, key), ValidationResultType.WARNING,
                "UNEXPECTED_PROPERTY", f"{name} contains unexpected property {key}", None, key))


class ArraySchema(Schema):
    """Schema for a list: every element is checked against ``value_type``.

    A present value that is not a list is always an error.
    """

    def __init__(self, value_type: Any = None, required: bool = False,
                 rules: Sequence[ValidationRule] | None = None):
        super().__init__(required, rules)
        self._value_type = value_type

    @property
    def value_type(self) -> Any: return self._value_type

    @value_type.setter
    def value_type(self, value: Any) -> None: self._value_type = value

    def perform_validation(self, path: str, value: Any, results: list[ValidationResult]) -> None:
        value = ObjectReader.get_value(value)
        super().perform_validation(path, value, results)
        if value is None:
            return

        name = path or "value"
        value_type = to_type_code(value)
        if value_type == TypeCode.ARRAY:
            for index, element in enumerate(value):
                self.perform_type_validation(_child_path(path, index), self._value_type, element, results)
        else:
            results.append(ValidationResult(path, ValidationResultType.ERROR, "VALUE_ISNOT_ARRAY",
                f"{name} type must be List or Array", TypeCode.ARRAY, value_type))


class MapSchema(Schema):
    """Schema for a mapping: every key and value is checked against ``key_type`` / ``value_type``.

    A present value that is not a mapping is an error only when the schema is required.
    """

    def __init__(self, key_type: Any = None, value_type: Any = None, required: bool = False,
                 rules: Sequence[ValidationRule] | None = None):
        super().__init__(required, rules)
        self._key_type = key_type
        self._value_type = value_type

    @property
    def key_type(self) -> Any: return self._key_type

    @key_type.setter
    def key_type(self, value: Any) -> None: self._key_type = value

    @property
    def value_type(self) -> Any: return self._value_type

    @value_type.setter
    def value_type(self, value: Any) -> None: self._value_type = value

    def perform_validation(self, path: str, value: Any, results: list[ValidationResult]) -> None:
        value = ObjectReader.get_value(value)
        super().perform_validation(path, value, results)
        if value is None:
            return

        name = path or "value"
        value_type = to_type_code(value)
        if value_type == TypeCode.MAP:
            for key, item in value.items():
                element_path = _child_path(path, key)
                self.perform_type_validation(element_path, self._key_type, key, results)
                self.perform_type_validation(element_path, self._value_type, item, results)
        elif self._required:
            results.append(ValidationResult(path, ValidationResultType.ERROR, "VALUE_ISNOT_MAP",
                f"{name} type must be Map", TypeCode.MAP, value_type))
