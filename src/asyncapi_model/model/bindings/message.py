"""Protocol-specific definitions for a message."""

from __future__ import annotations

from ..base import ExtensibleModel, RefOr
from ..schema import Schema
from .reserved import ReservedBinding


class HTTPMessageBinding(ExtensibleModel):
    headers: Schema | None = None
    binding_version: str | None = None


class KafkaMessageBinding(ExtensibleModel):
    key: RefOr[Schema] | None = None
    binding_version: str | None = None


class AnypointMQMessageBinding(ExtensibleModel):
    headers: Schema | None = None
    binding_version: str | None = None


class AMQPMessageBinding(ExtensibleModel):
    content_encoding: str | None = None
    message_type: str | None = None
    binding_version: str | None = None


class MQTTMessageBinding(ExtensibleModel):
    binding_version: str | None = None


class IBMMQMessageBinding(ExtensibleModel):
    type: str | None = None
    headers: str | None = None
    description: str | None = None
    expiry: int | None = None
    binding_version: str | None = None


class MessageBindings(ExtensibleModel):
    """Map from protocol name to that protocol's message binding."""

    http: HTTPMessageBinding | None = None
    ws: ReservedBinding | None = None
    kafka: KafkaMessageBinding | None = None
    anypointmq: AnypointMQMessageBinding | None = None
    amqp: AMQPMessageBinding | None = None
    amqp1: ReservedBinding | None = None
    mqtt: MQTTMessageBinding | None = None
    mqtt5: ReservedBinding | None = None
    nats: ReservedBinding | None = None
    jms: ReservedBinding | None = None
    sns: ReservedBinding | None = None
    sqs: ReservedBinding | None = None
    stomp: ReservedBinding | None = None
    redis: ReservedBinding | None = None
    mercure: ReservedBinding | None = None
    ibmmq: IBMMQMessageBinding | None = None
