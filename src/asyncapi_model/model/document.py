"""The AsyncAPI document root."""

from __future__ import annotations

from pydantic import Field

from .base import ExtensibleModel, RefOr
from .channel import Channel
from .components import Components
from .info import ExternalDocumentation, Info, Tag
from .server import Server


class AsyncAPI(ExtensibleModel):
    """Root of an AsyncAPI 2.x document.

    ``channels`` is required and always written, even when empty. Servers and
    channels keep the order they were read in.
    """

    asyncapi: str
    id: str | None = None
    info: Info
    servers: dict[str, RefOr[Server]] = Field(default_factory=dict)
    default_content_type: str | None = None
    channels: dict[str, Channel]
    components: Components | None = None
    tags: list[Tag] = Field(default_factory=list)
    external_docs: ExternalDocumentation | None = None
