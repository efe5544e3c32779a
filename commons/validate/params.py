"""Ready-made schemas for the standard query parameter shapes."""
from __future__ import annotations

from commons.convert import TypeCode

from .schema import ArraySchema, MapSchema, ObjectSchema


class PagingParamsSchema(ObjectSchema):
    """Paging parameters: optional ``skip`` and ``take`` (longs) and ``total`` (boolean)."""

    def __init__(self):
        super().__init__()
        self.with_optional_property("skip", TypeCode.LONG)
        self.with_optional_property("take", TypeCode.LONG)
        self.with_optional_property("total", TypeCode.BOOLEAN)


class FilterParamsSchema(MapSchema):
    """Filter parameters: a mapping with string keys and values of any type."""

    def __init__(self):
        super().__init__(key_type=TypeCode.STRING)


class ProjectionParamsSchema(ArraySchema):
    """Projection parameters: a list of field names."""

    def __init__(self):
        super().__init__(value_type=TypeCode.STRING)
