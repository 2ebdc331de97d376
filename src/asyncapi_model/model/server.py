"""Server, ServerVariable and Security Requirement objects."""

from __future__ import annotations

from pydantic import Field

from .base import ExtensibleModel, RefOr, VecOrSingle
from .bindings.server import ServerBindings

# scheme name -> required scopes (empty unless the scheme is oauth2 / openIdConnect)
SecurityRequirement = dict[str, list[str]]


class ServerVariable(ExtensibleModel):
    """A variable for server URL template substitution."""

    enum: list[str] = Field(default_factory=list)
    default: str | None = None
    description: str | None = None
    examples: list[str] = Field(default_factory=list)


class Server(ExtensibleModel):
    """A message broker or other server the API is available on."""

    url: str
    protocol: str
    protocol_version: str | None = None
    description: str | None = None
    variables: dict[str, RefOr[ServerVariable]] = Field(default_factory=dict)
    security: VecOrSingle[SecurityRequirement] = Field(default_factory=list)
    bindings: RefOr[ServerBindings] | None = None
