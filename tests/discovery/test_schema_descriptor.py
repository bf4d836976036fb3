"""Tests for schema introspection (field kinds and schema shapes)."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

import pytest
from pydantic import AfterValidator, BaseModel, EmailStr, RootModel

from mcp_hub.discovery.field_kind import (
    MAX_NESTING_DEPTH,
    ArrayKind,
    EffectsKind,
    NullableKind,
    OptionalKind,
    StringKind,
    UnknownKind,
    kind_from_annotation,
)
from mcp_hub.discovery.sample_payload import generate_sample_payload
from mcp_hub.discovery.schema_descriptor import describe_schema, object_field_kinds, unwrap_schema


class Address(BaseModel):
    city: str


class Status(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class CustomerQuery(BaseModel):
    name: str
    email: EmailStr
    count: int
    ratio: float
    active: bool
    created: datetime
    tags: List[str]
    pair: Tuple[str, int]
    address: Address
    addresses: List[Address]
    meta: Dict[str, Any]
    choice: Union[str, int]
    state: Literal["draft", "open"]
    status: Status
    maybe: Optional[int]
    nickname: Optional[str] = None
    limit: int = 10
    code: Annotated[str, AfterValidator(lambda value: value.upper())]
    anything: Any = None


class TestDescribeSchema:
    """Tests for describe_schema"""

    def test_field_labels(self):
        shape = describe_schema(CustomerQuery)

        assert shape == {
            "name": "ZodString",
            "email": "ZodString",
            "count": "ZodNumber",
            "ratio": "ZodNumber",
            "active": "ZodBoolean",
            "created": "ZodString",
            "tags": "Array<ZodString>",
            "pair": "Array<ZodUnion>",
            "address": "Object",
            "addresses": "Array<ZodObject>",
            "meta": "Object",
            "choice": "Union<ZodString | ZodNumber>",
            "state": "Enum<[draft, open]>",
            "status": "Enum<[active, closed]>",
            "maybe": "Nullable<ZodNumber>",
            "nickname": "Optional<ZodString>",
            "limit": "Optional<ZodNumber>",
            "code": "Effects<ZodString>",
            "anything": "Optional<UnknownType>",
        }

    def test_preserves_declaration_order(self):
        assert list(describe_schema(CustomerQuery)) == list(CustomerQuery.model_fields)

    def test_optional_schema_is_unwrapped(self):
        assert describe_schema(Optional[Address]) == {"city": "ZodString"}

    def test_annotated_schema_is_unwrapped(self):
        schema = Annotated[Address, AfterValidator(lambda value: value)]
        assert describe_schema(schema) == {"city": "ZodString"}

    def test_nested_wrappers_are_unwrapped(self):
        schema = Optional[Annotated[Optional[Address], AfterValidator(lambda value: value)]]
        assert unwrap_schema(schema) is Address
        assert describe_schema(schema) == {"city": "ZodString"}

    @pytest.mark.parametrize("schema", [str, Union[str, int], None, 42, "not a schema", List[Address]])
    def test_non_object_schema_is_empty(self, schema):
        assert describe_schema(schema) == {}
        assert object_field_kinds(schema) is None

    def test_root_model_of_scalar_is_empty(self):
        assert describe_schema(RootModel[str]) == {}
        assert object_field_kinds(RootModel[Union[str, int]]) is None

    def test_root_model_of_object_uses_inner_fields(self):
        assert describe_schema(RootModel[Address]) == describe_schema(Address)
        assert describe_schema(Optional[RootModel[Optional[Address]]]) == {"city": "ZodString"}

    def test_root_model_sample_is_accepted(self):
        sample = generate_sample_payload(describe_schema(RootModel[Address]))
        assert RootModel[Address].model_validate(sample).root == Address(city=sample["city"])

    def test_model_without_fields(self):
        class Empty(BaseModel):
            pass

        assert describe_schema(Empty) == {}
        assert object_field_kinds(Empty) == {}

    def test_end_to_end_shape(self):
        class SearchArgs(BaseModel):
            email: str
            limit: Optional[int] = None

        assert describe_schema(SearchArgs) == {"email": "ZodString", "limit": "Optional<ZodNumber>"}


class TestFieldKind:
    """Tests for kind_from_annotation"""

    def test_optional_union_keeps_nullable(self):
        kind = kind_from_annotation(Optional[Union[int, str]])
        assert isinstance(kind, NullableKind)
        assert kind.label() == "Nullable<Union<ZodNumber | ZodString>>"

    def test_pipe_union(self):
        assert kind_from_annotation(str | None) == NullableKind(StringKind())

    def test_annotated_without_validator_is_plain(self):
        assert kind_from_annotation(Annotated[str, "doc"]) == StringKind()

    def test_annotated_with_validator_is_effects(self):
        kind = kind_from_annotation(Annotated[str, AfterValidator(lambda value: value.strip())])
        assert kind == EffectsKind(StringKind())

    def test_bare_list(self):
        assert kind_from_annotation(list) == ArrayKind(UnknownKind())

    def test_wrappers_keep_inner_base_label(self):
        assert OptionalKind(StringKind()).base_label() == "ZodString"
        assert kind_from_annotation(List[Optional[str]]).label() == "Array<ZodString>"

    def test_deep_nesting_terminates(self):
        annotation: Any = str
        for _ in range(MAX_NESTING_DEPTH * 2):
            annotation = List[annotation]

        kind = kind_from_annotation(annotation)
        assert kind.label().startswith("Array<")
