"""AsyncAPI Schema Object and message payloads.

The Schema Object is a superset of JSON Schema Draft 07. Every child schema
(``properties``, ``items``, ``allOf`` members, ...) is a ``RefOr[Schema]``, so a
schema that refers to itself does so through a Reference rather than an inline
cycle. Only mappings are accepted as schemas.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import Field

from .base import ExtensibleModel, RefOr
from .info import ExternalDocumentation

Number = Union[int, float]


class Discriminator(ExtensibleModel):
    """Object form of ``discriminator``, naming the property that selects a subtype."""

    property_name: str
    mapping: dict[str, str] = Field(default_factory=dict)


class Schema(ExtensibleModel):
    """A JSON-Schema-like description of a data shape."""

    title: str | None = None
    type: str | list[str] | None = None
    required: list[str] = Field(default_factory=list)
    multiple_of: Number | None = None
    maximum: Number | None = None
    exclusive_maximum: bool | Number | None = None
    minimum: Number | None = None
    exclusive_minimum: bool | Number | None = None
    max_length: int | None = None
    min_length: int | None = None
    pattern: str | None = None
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool | None = None
    max_properties: int | None = None
    min_properties: int | None = None
    enum: list[Any] | None = None
    const: Any = None
    examples: list[Any] = Field(default_factory=list)
    if_: RefOr[Schema] | None = Field(default=None, alias="if")
    then: RefOr[Schema] | None = None
    else_: RefOr[Schema] | None = Field(default=None, alias="else")
    read_only: bool | None = None
    write_only: bool | None = None
    properties: dict[str, RefOr[Schema]] = Field(default_factory=dict)
    pattern_properties: dict[str, RefOr[Schema]] = Field(default_factory=dict)
    additional_properties: bool | RefOr[Schema] | None = None
    additional_items: bool | RefOr[Schema] | None = None
    items: RefOr[Schema] | list[RefOr[Schema]] | None = None
    property_names: RefOr[Schema] | None = None
    contains: RefOr[Schema] | None = None
    all_of: list[RefOr[Schema]] = Field(default_factory=list)
    one_of: list[RefOr[Schema]] = Field(default_factory=list)
    any_of: list[RefOr[Schema]] = Field(default_factory=list)
    not_: RefOr[Schema] | None = Field(default=None, alias="not")
    description: str | None = None
    format: str | None = None
    default: Any = None
    # AsyncAPI 2.x writes the property name as a bare string
    discriminator: str | Discriminator | None = None
    external_docs: ExternalDocumentation | None = None
    deprecated: bool | None = None


Schema.model_rebuild()

# Reference first, then a Schema, then any value at all (Avro, Protobuf, ... as
# announced by the message's ``schemaFormat``). Declare payload fields with
# ``union_mode="left_to_right"`` to keep that order.
Payload = Union[RefOr[Schema], Any]
