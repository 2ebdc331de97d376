"""Protocol-specific definitions for an operation."""

from __future__ import annotations

from pydantic import Field

from ..base import ExtensibleModel, RefOr
from ..schema import Schema
from .reserved import ReservedBinding


class HTTPOperationBinding(ExtensibleModel):
    """``type`` is ``request`` or ``response``; ``method`` only applies to requests."""

    type: str
    method: str | None = None
    query: Schema | None = None
    binding_version: str | None = None


class KafkaOperationBinding(ExtensibleModel):
    group_id: RefOr[Schema] | None = None
    client_id: str | RefOr[Schema] | None = None
    binding_version: str | None = None


class AMQPOperationBinding(ExtensibleModel):
    """How a message is published or consumed over AMQP 0-9-1.

    ``expiration`` is a TTL in milliseconds, ``delivery_mode`` is 1 (transient)
    or 2 (persistent). ``cc`` and ``bcc`` hold routing keys and are omitted
    from the output when empty.
    """

    expiration: int | None = None
    user_id: str | None = None
    cc: list[str] = Field(default_factory=list)
    priority: int | None = None
    delivery_mode: int | None = None
    mandatory: bool | None = None
    bcc: list[str] = Field(default_factory=list)
    reply_to: str | None = None
    timestamp: bool | None = None
    ack: bool | None = None
    binding_version: str | None = None


class MQTTOperationBinding(ExtensibleModel):
    qos: int | None = None
    retain: bool | None = None
    binding_version: str | None = None


class NATSOperationBinding(ExtensibleModel):
    queue: str | None = None
    binding_version: str | None = None


class OperationBindings(ExtensibleModel):
    """Map from protocol name to that protocol's operation binding."""

    http: HTTPOperationBinding | None = None
    ws: ReservedBinding | None = None
    kafka: KafkaOperationBinding | None = None
    anypointmq: ReservedBinding | None = None
    amqp: AMQPOperationBinding | None = None
    amqp1: ReservedBinding | None = None
    mqtt: MQTTOperationBinding | None = None
    mqtt5: ReservedBinding | None = None
    nats: NATSOperationBinding | None = None
    jms: ReservedBinding | None = None
    sns: ReservedBinding | None = None
    sqs: ReservedBinding | None = None
    stomp: ReservedBinding | None = None
    redis: ReservedBinding | None = None
    mercure: ReservedBinding | None = None
    ibmmq: ReservedBinding | None = None
