"""Validation Schema Engine

Schemas walk dynamic values (mappings, lists, dataclasses, pydantic models,
plain objects) and collect ValidationResults with dotted paths. Callers
either inspect the results or raise them as a ValidationException.

Usage:
    from commons.validate import ObjectSchema, ArraySchema, IncludedRule
    from commons.convert import TypeCode

    schema = (ObjectSchema()
        .with_required_property("id", TypeCode.STRING)
        .with_optional_property("status", None, IncludedRule("active", "closed"))
        .with_optional_property("tags", ArraySchema(TypeCode.STRING)))

    for result in schema.validate(payload):
        print(result.path, result.code, result.message)

    schema.validate_and_throw_exception("req-1", payload)   # raises ValidationException
"""
from .result import ValidationResultType, ValidationResult

from .comparator import ObjectComparator

from .exception import ValidationException

from .rules import (
    ValidationRule,
    IncludedRule,
    ExcludedRule,
    ValueComparisonRule,
    AtLeastOneExistsRule,
    OnlyOneExistsRule,
    PropertiesComparisonRule,
    AndRule,
    OrRule,
    NotRule,
)

from .schema import (
    Schema,
    PropertySchema,
    ObjectSchema,
    ArraySchema,
    MapSchema,
)

from .params import (
    PagingParamsSchema,
    FilterParamsSchema,
    ProjectionParamsSchema,
)

__all__ = [
    # Results
    "ValidationResultType",
    "ValidationResult",
    "ValidationException",
    "ObjectComparator",
    # Rules
    "ValidationRule",
    "IncludedRule",
    "ExcludedRule",
    "ValueComparisonRule",
    "AtLeastOneExistsRule",
    "OnlyOneExistsRule",
    "PropertiesComparisonRule",
    "AndRule",
    "OrRule",
    "NotRule",
    # Schemas
    "Schema",
    "PropertySchema",
    "ObjectSchema",
    "ArraySchema",
    "MapSchema",
    "PagingParamsSchema",
    "FilterParamsSchema",
    "ProjectionParamsSchema",
]
