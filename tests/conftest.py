"""Shared test fixtures."""

from dataclasses import dataclass

import pytest

from commons.config import get_settings
from commons.convert import TypeCode
from commons.validate import ArraySchema, ObjectSchema


@dataclass(slots=True)
class Address:
    street: str
    city: str


class Person:
    """Plain object with public attributes, a private one and a method."""

    def __init__(self, name: str, age: int | None = None, address: Address | None = None):
        self.name = name
        self.age = age
        self.address = address
        self._secret = "hidden"

    def greet(self) -> str:
        return f"Hi, {self.name}"


@pytest.fixture
def person() -> Person:
    return Person("Alice", 30, Address("Main St", "Springfield"))


@pytest.fixture
def person_schema() -> ObjectSchema:
    """Schema with one required and one optional property."""
    return (ObjectSchema()
        .with_required_property("name", TypeCode.STRING)
        .with_optional_property("age", TypeCode.INTEGER))


@pytest.fixture
def order_schema() -> ObjectSchema:
    """Nested schema: object -> array -> object."""
    line = (ObjectSchema()
        .with_required_property("sku", TypeCode.STRING)
        .with_required_property("qty", TypeCode.INTEGER))
    return (ObjectSchema()
        .with_required_property("id", "string")
        .with_optional_property("lines", ArraySchema(line)))


@pytest.fixture
def fresh_settings():
    """Re-read settings from the environment for the duration of a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
