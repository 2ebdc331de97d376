"""Protocol-specific definitions for a server."""

from __future__ import annotations

from ..base import ExtensibleModel
from .reserved import ReservedBinding


class KafkaServerBinding(ExtensibleModel):
    schema_registry_url: str | None = None
    schema_registry_vendor: str | None = None
    binding_version: str | None = None


class MQTTLastWill(ExtensibleModel):
    topic: str | None = None
    qos: int | None = None
    message: str | None = None
    retain: bool | None = None


class MQTTServerBinding(ExtensibleModel):
    client_id: str | None = None
    clean_session: bool | None = None
    last_will: MQTTLastWill | None = None
    keep_alive: int | None = None
    binding_version: str | None = None


class IBMMQServerBinding(ExtensibleModel):
    group_id: str | None = None
    ccdt_queue_manager_name: str | None = None
    cipher_spec: str | None = None
    multi_endpoint_server: bool | None = None
    heart_beat_interval: int | None = None
    binding_version: str | None = None


class ServerBindings(ExtensibleModel):
    """Map from protocol name to that protocol's server binding."""

    http: ReservedBinding | None = None
    ws: ReservedBinding | None = None
    kafka: KafkaServerBinding | None = None
    anypointmq: ReservedBinding | None = None
    amqp: ReservedBinding | None = None
    amqp1: ReservedBinding | None = None
    mqtt: MQTTServerBinding | None = None
    mqtt5: ReservedBinding | None = None
    nats: ReservedBinding | None = None
    jms: ReservedBinding | None = None
    sns: ReservedBinding | None = None
    sqs: ReservedBinding | None = None
    stomp: ReservedBinding | None = None
    redis: ReservedBinding | None = None
    mercure: ReservedBinding | None = None
    ibmmq: IBMMQServerBinding | None = None
