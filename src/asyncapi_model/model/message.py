"""Message Object, Message Trait Object and their helpers.

A Message carries every field a MessageTrait may set, plus ``payload`` and
``traits``. ``examples`` is a list of MessageExample objects rather than a
name-keyed map of references; one example object or a list of them is
accepted, and it is always held as a list.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import ExtensibleModel, RefOr, VecOrSingle
from .bindings.message import MessageBindings
from .info import ExternalDocumentation, Tag
from .schema import Payload, Schema


class CorrelationId(ExtensibleModel):
    """Runtime expression locating the value used to correlate messages."""

    description: str | None = None
    location: str


class MessageExample(ExtensibleModel):
    headers: dict[str, Any] | None = None
    payload: Any = None
    name: str | None = None
    summary: str | None = None


class MessageTrait(ExtensibleModel):
    """Reusable part of a message, merged into messages that list it in ``traits``."""

    headers: RefOr[Schema] | None = None
    correlation_id: RefOr[CorrelationId] | None = None
    schema_format: str | None = None
    content_type: str | None = None
    name: str | None = None
    title: str | None = None
    summary: str | None = None
    description: str | None = None
    tags: list[Tag] = Field(default_factory=list)
    external_docs: ExternalDocumentation | None = None
    bindings: RefOr[MessageBindings] | None = None
    examples: VecOrSingle[MessageExample] = Field(default_factory=list)


class Message(MessageTrait):
    """A message sent or received on a channel.

    ``payload`` is read as a Reference, else as a Schema, and else kept as-is
    for non-default schema formats. Interpreting ``schema_format`` is up to
    the caller.
    """

    payload: Payload = Field(default=None, union_mode="left_to_right")
    traits: list[RefOr[MessageTrait]] = Field(default_factory=list)
