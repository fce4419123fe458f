"""Operation registry service tests."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pytest
from request_schema.operation_registry import (
    OperationRegistry,
    RegistrationError,
    resolve_request_type,
)
from request_schema.schema_generation import NameCollisionError, SchemaType, schema_field


@dataclass
class CreateUserRequest:
    name: str = schema_field(json="name", description="user name")
    email: str = schema_field(json="email,omitempty")


@dataclass
class InnerRequest:
    name: str = schema_field(json="name")


@dataclass
class CollidingRequest:
    inner: InnerRequest = schema_field(embedded=True)
    name: str = schema_field(json="name")


def test_register_generates_and_stores_schema() -> None:
    registry = OperationRegistry()

    definition = registry.register("create_user", CreateUserRequest, "Create a user")

    assert definition.name == "create_user"
    assert definition.description == "Create a user"
    assert definition.request_type is CreateUserRequest
    assert definition.input_schema.properties["name"].type is SchemaType.STRING
    assert definition.input_schema.required == ("name",)
    assert registry.get("create_user") is definition
    assert "create_user" in registry
    assert len(registry) == 1


def test_register_accepts_instances() -> None:
    registry = OperationRegistry()

    definition = registry.register("create_user", CreateUserRequest(name="a", email="b"))

    assert definition.request_type is CreateUserRequest


def test_operations_sharing_a_request_type_share_one_schema() -> None:
    registry = OperationRegistry()

    first = registry.register("create_user", CreateUserRequest)
    second = registry.register("invite_user", CreateUserRequest)

    assert first.input_schema is second.input_schema
    assert [definition.name for definition in registry.definitions()] == [
        "create_user",
        "invite_user",
    ]
    assert list(registry) == list(registry.definitions())


@pytest.mark.parametrize("name", ["", "   "])
def test_empty_operation_names_are_rejected(name: str) -> None:
    with pytest.raises(RegistrationError, match="non-empty"):
        OperationRegistry().register(name, CreateUserRequest)


def test_duplicate_operation_names_are_rejected() -> None:
    registry = OperationRegistry()
    registry.register("create_user", CreateUserRequest)

    with pytest.raises(RegistrationError, match="already registered"):
        registry.register("create_user", CreateUserRequest)


def test_schema_failures_are_wrapped_and_nothing_is_stored() -> None:
    registry = OperationRegistry()

    with pytest.raises(RegistrationError) as excinfo:
        registry.register("broken", CollidingRequest)

    assert isinstance(excinfo.value.__cause__, NameCollisionError)
    assert "broken" not in registry
    assert len(registry) == 0


def test_unknown_operation_lookup_fails() -> None:
    with pytest.raises(RegistrationError, match="Unknown operation"):
        OperationRegistry().get("missing")


def test_registration_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="request_schema.operation_registry"):
        OperationRegistry().register("create_user", CreateUserRequest)

    assert "Registered operation create_user" in caplog.text


def test_resolves_request_type_reference() -> None:
    resolved = resolve_request_type("request_schema.schema_generation.schema_models:Schema")

    assert resolved.__name__ == "Schema"


@pytest.mark.parametrize(
    ("reference", "message"),
    [
        ("no_separator", "Invalid request reference"),
        ("module:", "Invalid request reference"),
        ("request_schema_missing_module:Thing", "Cannot import module"),
        ("request_schema.schema_generation.schema_models:Missing", "has no attribute"),
        ("request_schema.schema_generation.schema_models:LiteralValue", "is not a class"),
    ],
)
def test_invalid_request_references(reference: str, message: str) -> None:
    with pytest.raises(RegistrationError, match=message):
        resolve_request_type(reference)
