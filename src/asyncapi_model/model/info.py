"""Descriptive metadata objects: Info, Contact, License, Tag, ExternalDocumentation."""

from .base import ExtensibleModel


class ExternalDocumentation(ExtensibleModel):
    """Allows referencing an external resource for extended documentation."""

    description: str | None = None
    url: str


class Contact(ExtensibleModel):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(ExtensibleModel):
    name: str
    url: str | None = None


class Info(ExtensibleModel):
    """Metadata about the API."""

    title: str
    version: str
    description: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None


class Tag(ExtensibleModel):
    name: str
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
