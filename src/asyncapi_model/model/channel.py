"""Channel Item, Operation and Parameter objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Union

from pydantic import Discriminator, Field, Tag

from .base import ExtensibleModel, RefOr, Reference, VecOrSingle, looks_like_reference
from .bindings.channel import ChannelBindings
from .bindings.operation import OperationBindings
from .info import ExternalDocumentation, Tag as DocTag
from .message import Message
from .schema import Schema
from .server import SecurityRequirement


class MessageOneOf(ExtensibleModel):
    """An operation that may carry any one of several messages."""

    one_of: list[RefOr[Message]]


def _message_shape(value: Any) -> str:
    if isinstance(value, Reference) or looks_like_reference(value):
        return "reference"
    if isinstance(value, MessageOneOf) or (isinstance(value, Mapping) and "oneOf" in value):
        return "one_of"
    return "message"


OperationMessage = Annotated[
    Union[
        Annotated[Reference, Tag("reference")],
        Annotated[MessageOneOf, Tag("one_of")],
        Annotated[Message, Tag("message")],
    ],
    Discriminator(_message_shape),
]


class OperationTrait(ExtensibleModel):
    operation_id: str | None = None
    summary: str | None = None
    description: str | None = None
    security: VecOrSingle[SecurityRequirement] = Field(default_factory=list)
    tags: list[DocTag] = Field(default_factory=list)
    external_docs: ExternalDocumentation | None = None
    bindings: RefOr[OperationBindings] | None = None


class Operation(OperationTrait):
    """A publish or subscribe operation on a channel."""

    traits: list[RefOr[OperationTrait]] = Field(default_factory=list)
    message: OperationMessage | None = None


class Parameter(ExtensibleModel):
    """Describes a parameter included in a channel name, such as ``{userId}``."""

    description: str | None = None
    schema_: RefOr[Schema] | None = Field(default=None, alias="schema")
    location: str | None = None


class Channel(ExtensibleModel):
    """Operations available on a single channel."""

    description: str | None = None
    servers: list[str] = Field(default_factory=list)
    subscribe: Operation | None = None
    publish: Operation | None = None
    parameters: dict[str, RefOr[Parameter]] = Field(default_factory=dict)
    bindings: RefOr[ChannelBindings] | None = None
