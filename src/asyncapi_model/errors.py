"""Errors raised while decoding AsyncAPI documents.

Decoding is first-fail: callers get a single error describing the first
place the document did not match the model.
"""

from pydantic import ValidationError


class AsyncApiError(Exception):
    """Base decode error.

    Args:
        detail: What was expected and what was found.
        path: JSON Pointer to the offending value, ``""`` for the document itself.
    """

    def __init__(self, detail: str, path: str = "") -> None:
        self.detail = detail
        self.path = path
        super().__init__(f"{path or '/'}: {detail}")


class StructuralMismatch(AsyncApiError):
    """A value matched none of the shapes accepted for its field."""


class RequiredFieldMissing(AsyncApiError):
    """A required field is absent from an object."""


class UnsupportedEncoding(AsyncApiError):
    """The text could not be read as JSON or YAML, or its root is not a mapping."""


def _escape(part: str | int) -> str:
    return str(part).replace("~", "~0").replace("/", "~1")


def _preview(value: object, limit: int = 60) -> str:
    text = repr(value)
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


def from_validation_error(exc: ValidationError) -> AsyncApiError:
    """Translate the first error pydantic reported into an AsyncApiError."""
    first = exc.errors(include_url=False)[0]
    path = "".join(f"/{_escape(part)}" for part in first["loc"])
    if first["type"] == "missing":
        return RequiredFieldMissing(first["msg"], path)
    return StructuralMismatch(f"{first['msg']} (got {_preview(first['input'])})", path)
