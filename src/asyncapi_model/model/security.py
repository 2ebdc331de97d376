"""Security Scheme Object, selected by its ``type`` field."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Discriminator, Field

from .base import ExtensibleModel


class OAuthFlow(ExtensibleModel):
    authorization_url: str | None = None
    token_url: str | None = None
    refresh_url: str | None = None
    scopes: dict[str, str]


class OAuthFlows(ExtensibleModel):
    implicit: OAuthFlow | None = None
    password: OAuthFlow | None = None
    client_credentials: OAuthFlow | None = None
    authorization_code: OAuthFlow | None = None


class _SchemeBase(ExtensibleModel):
    type: str
    description: str | None = None


class UserPasswordScheme(_SchemeBase):
    type: Literal["userPassword"] = "userPassword"


class ApiKeyScheme(_SchemeBase):
    """An API key sent as the ``user`` or ``password`` part of the credentials."""

    type: Literal["apiKey"] = "apiKey"
    in_: str = Field(alias="in")


class X509Scheme(_SchemeBase):
    type: Literal["X509"] = "X509"


class SymmetricEncryptionScheme(_SchemeBase):
    type: Literal["symmetricEncryption"] = "symmetricEncryption"


class AsymmetricEncryptionScheme(_SchemeBase):
    type: Literal["asymmetricEncryption"] = "asymmetricEncryption"


class HttpApiKeyScheme(_SchemeBase):
    """An API key carried in a query parameter, header or cookie."""

    type: Literal["httpApiKey"] = "httpApiKey"
    name: str
    in_: str = Field(alias="in")


class HttpScheme(_SchemeBase):
    type: Literal["http"] = "http"
    scheme: str
    bearer_format: str | None = None


class OAuth2Scheme(_SchemeBase):
    type: Literal["oauth2"] = "oauth2"
    flows: OAuthFlows


class OpenIdConnectScheme(_SchemeBase):
    type: Literal["openIdConnect"] = "openIdConnect"
    open_id_connect_url: str


class PlainScheme(_SchemeBase):
    type: Literal["plain"] = "plain"


class ScramSha256Scheme(_SchemeBase):
    type: Literal["scramSha256"] = "scramSha256"


class ScramSha512Scheme(_SchemeBase):
    type: Literal["scramSha512"] = "scramSha512"


class GssapiScheme(_SchemeBase):
    type: Literal["gssapi"] = "gssapi"


SecurityScheme = Annotated[
    Union[
        UserPasswordScheme,
        ApiKeyScheme,
        X509Scheme,
        SymmetricEncryptionScheme,
        AsymmetricEncryptionScheme,
        HttpApiKeyScheme,
        HttpScheme,
        OAuth2Scheme,
        OpenIdConnectScheme,
        PlainScheme,
        ScramSha256Scheme,
        ScramSha512Scheme,
        GssapiScheme,
    ],
    Discriminator("type"),
]
