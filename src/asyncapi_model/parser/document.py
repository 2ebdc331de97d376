"""Decode AsyncAPI documents into typed models and encode them back.

Parses JSON or YAML text into an ``AsyncAPI`` tree. References are kept as
``Reference`` values and never followed.
"""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, TypeAdapter, ValidationError

from asyncapi_model.errors import UnsupportedEncoding, from_validation_error
from asyncapi_model.model.base import to_data
from asyncapi_model.model.document import AsyncAPI

from .detect import detect_format, format_for_path

logger = logging.getLogger(__name__)

T = TypeVar("T")

FORMATS = ("json", "yaml")


class _JsonCompatibleLoader(yaml.SafeLoader):
    """SafeLoader that only produces values JSON can hold.

    Plain scalars that look like dates stay strings, and non-string mapping
    keys (``200: ok``) become the strings JSON would write for them.
    """

    def construct_mapping(self, node, deep=False):
        mapping = super().construct_mapping(node, deep=deep)
        return {key if isinstance(key, str) else json.dumps(key): value for key, value in mapping.items()}


_JsonCompatibleLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def decode(text: str, fmt: str = "auto") -> AsyncAPI:
    """Parse document text into an AsyncAPI model.

    Raises:
        UnsupportedEncoding: the text is not valid JSON/YAML or is not a mapping.
        StructuralMismatch: a value does not fit its field.
        RequiredFieldMissing: a required field is absent.
    """
    if fmt == "auto":
        fmt = detect_format(text)
    elif fmt not in FORMATS:
        raise ValueError(f"Unknown input format {fmt!r}, expected 'auto' or one of {FORMATS}")
    data = _load_text(text, fmt)
    if not isinstance(data, dict):
        raise UnsupportedEncoding(f"document root must be a mapping, got {type(data).__name__}")

    document = decode_value(AsyncAPI, data)
    logger.debug(
        "Decoded AsyncAPI %s document with %d channels and %d servers",
        document.asyncapi,
        len(document.channels),
        len(document.servers),
    )
    return document


def decode_value(type_: type[T] | Any, data: Any) -> T:
    """Validate already-parsed data as ``type_``, e.g. ``RefOr[Schema]``.

    Keys are matched by their wire (camelCase) names only; a snake_case key in
    the data is kept as an extension.
    """
    try:
        return TypeAdapter(type_).validate_python(data, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise from_validation_error(exc) from exc


def encode(document: BaseModel, fmt: str = "yaml", indent: int = 2) -> str:
    """Serialize a model (usually an AsyncAPI root) to JSON or YAML text."""
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format {fmt!r}, expected one of {FORMATS}")

    data = to_data(document)
    logger.debug("Encoding %s as %s", type(document).__name__, fmt)
    if fmt == "json":
        return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, indent=indent)


def load(file_path: Path) -> AsyncAPI:
    """Read and decode an AsyncAPI file."""
    text = file_path.read_text(encoding="utf-8")
    return decode(text)


def dump(document: BaseModel, file_path: Path, fmt: str | None = None, indent: int = 2) -> None:
    """Encode a document and write it, choosing the format from the suffix if not given."""
    text = encode(document, fmt=fmt or format_for_path(file_path), indent=indent)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(text, encoding="utf-8")


def _load_text(text: str, fmt: str) -> Any:
    try:
        if fmt == "json":
            return json.loads(text)
        return yaml.load(text, Loader=_JsonCompatibleLoader)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise UnsupportedEncoding(f"cannot read document as {fmt}: {e}") from e
