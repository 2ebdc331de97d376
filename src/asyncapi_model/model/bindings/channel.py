"""Protocol-specific definitions for a channel."""

from __future__ import annotations

from pydantic import Field

from ..base import ExtensibleModel
from ..schema import Schema
from .reserved import ReservedBinding


class WebSocketsChannelBinding(ExtensibleModel):
    """The channel is the WebSockets connection itself, described by its HTTP handshake."""

    method: str | None = None
    query: Schema | None = None
    headers: Schema | None = None
    binding_version: str | None = None


class KafkaChannelBinding(ExtensibleModel):
    topic: str | None = None
    partitions: int | None = None
    replicas: int | None = None
    binding_version: str | None = None


class AnypointMQChannelBinding(ExtensibleModel):
    destination: str | None = None
    destination_type: str | None = None
    binding_version: str | None = None


class AMQPExchange(ExtensibleModel):
    """Exchange properties, used when the channel ``is`` a ``routingKey``."""

    name: str | None = None
    type: str | None = None
    durable: bool | None = None
    auto_delete: bool | None = None
    vhost: str | None = None


class AMQPQueue(ExtensibleModel):
    """Queue properties, used when the channel ``is`` a ``queue``."""

    name: str | None = None
    durable: bool | None = None
    exclusive: bool | None = None
    auto_delete: bool | None = None
    vhost: str | None = None


class AMQPChannelBinding(ExtensibleModel):
    is_: str | None = Field(default=None, alias="is")
    exchange: AMQPExchange | None = None
    queue: AMQPQueue | None = None
    binding_version: str | None = None


class IBMMQQueue(ExtensibleModel):
    object_name: str
    is_partitioned: bool | None = None
    exclusive: bool | None = None


class IBMMQTopic(ExtensibleModel):
    string: str | None = None
    object_name: str | None = None
    durable_permitted: bool | None = None
    last_msg_retained: bool | None = None


class IBMMQChannelBinding(ExtensibleModel):
    """An IBM MQ queue or topic behind the channel.

    ``queue`` and ``topic`` may both be read; choosing between them is left to
    whoever validates the document.
    """

    destination_type: str | None = None
    queue: IBMMQQueue | None = None
    topic: IBMMQTopic | None = None
    max_msg_length: int | None = None
    binding_version: str | None = None


class ChannelBindings(ExtensibleModel):
    """Map from protocol name to that protocol's channel binding.

    Protocols outside the known set land in ``extensions`` untouched.
    """

    http: ReservedBinding | None = None
    ws: WebSocketsChannelBinding | None = None
    kafka: KafkaChannelBinding | None = None
    anypointmq: AnypointMQChannelBinding | None = None
    amqp: AMQPChannelBinding | None = None
    amqp1: ReservedBinding | None = None
    mqtt: ReservedBinding | None = None
    mqtt5: ReservedBinding | None = None
    nats: ReservedBinding | None = None
    jms: ReservedBinding | None = None
    sns: ReservedBinding | None = None
    sqs: ReservedBinding | None = None
    stomp: ReservedBinding | None = None
    redis: ReservedBinding | None = None
    mercure: ReservedBinding | None = None
    ibmmq: IBMMQChannelBinding | None = None
