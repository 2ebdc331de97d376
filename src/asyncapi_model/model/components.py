"""Components Object: reusable definitions addressed by ``#/components/...`` references."""

from __future__ import annotations

from pydantic import Field

from .base import ExtensibleModel, RefOr
from .bindings.channel import ChannelBindings
from .bindings.message import MessageBindings
from .bindings.operation import OperationBindings
from .bindings.server import ServerBindings
from .channel import OperationTrait, Parameter
from .message import CorrelationId, Message, MessageTrait
from .schema import Schema
from .security import SecurityScheme


class Components(ExtensibleModel):
    schemas: dict[str, RefOr[Schema]] = Field(default_factory=dict)
    messages: dict[str, RefOr[Message]] = Field(default_factory=dict)
    security_schemes: dict[str, RefOr[SecurityScheme]] = Field(default_factory=dict)
    parameters: dict[str, RefOr[Parameter]] = Field(default_factory=dict)
    correlation_ids: dict[str, RefOr[CorrelationId]] = Field(default_factory=dict)
    operation_traits: dict[str, RefOr[OperationTrait]] = Field(default_factory=dict)
    message_traits: dict[str, RefOr[MessageTrait]] = Field(default_factory=dict)
    server_bindings: dict[str, RefOr[ServerBindings]] = Field(default_factory=dict)
    channel_bindings: dict[str, RefOr[ChannelBindings]] = Field(default_factory=dict)
    operation_bindings: dict[str, RefOr[OperationBindings]] = Field(default_factory=dict)
    message_bindings: dict[str, RefOr[MessageBindings]] = Field(default_factory=dict)
