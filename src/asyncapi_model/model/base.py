"""Building blocks shared by every AsyncAPI object model.

- ExtensibleModel keeps keys it does not declare (specification extensions,
  unknown protocols) and writes them back after its own fields.
- RefOr[T] is either a Reference (``{"$ref": "..."}``) or an inline T.
- VecOrSingle[T] reads a bare value or a list, always holds a list, and writes
  a one-element list back as the bare value.
"""

from collections.abc import Mapping
from typing import Annotated, Any, TypeVar, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    Tag,
    WrapSerializer,
    model_serializer,
)
from pydantic.alias_generators import to_camel

REF_KEY = "$ref"

T = TypeVar("T")


class ExtensibleModel(BaseModel):
    """Base for AsyncAPI objects that may carry specification extensions.

    Wire names are camelCase, Python names snake_case. Keys that match no
    declared field are kept, in first-seen order, in ``extensions``.
    """

    model_config = ConfigDict(
        extra="allow",
        alias_generator=to_camel,
        validate_by_alias=True,
        validate_by_name=True,
    )

    @property
    def extensions(self) -> dict[str, Any]:
        """Undeclared keys of this object, in the order they were read."""
        return self.__pydantic_extra__

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            # an explicit null (e.g. ``const: null``) is data; only unset fields are absent
            absent = value is None and name not in self.model_fields_set
            # collections with a default factory are optional and dropped when empty
            if absent or (field.default_factory is not None and not value):
                data.pop(field.alias if info.by_alias and field.alias else name, None)
        return data


class Reference(BaseModel):
    """A JSON Reference pointing at a definition elsewhere in the document."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        validate_by_alias=True,
        validate_by_name=True,
    )

    ref: str = Field(alias=REF_KEY)

    def __str__(self) -> str:
        return self.ref


def looks_like_reference(value: Any) -> bool:
    """True for a mapping whose only key is ``$ref`` holding a string."""
    return (
        isinstance(value, Mapping)
        and len(value) == 1
        and isinstance(value.get(REF_KEY), str)
    )


def _ref_or_value(value: Any) -> str:
    if isinstance(value, Reference) or looks_like_reference(value):
        return "reference"
    return "value"


RefOr = Annotated[
    Union[Annotated[Reference, Tag("reference")], Annotated[T, Tag("value")]],
    Discriminator(_ref_or_value),
]


def _wrap_single(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value
    return [value]


def _collapse_single(value: Any, handler: SerializerFunctionWrapHandler) -> Any:
    data = handler(value)
    if len(data) == 1:
        return data[0]
    return data


VecOrSingle = Annotated[list[T], BeforeValidator(_wrap_single), WrapSerializer(_collapse_single)]


def reference(location: str) -> Reference:
    """Build a Reference to ``location``, e.g. ``#/components/schemas/User``."""
    return Reference(ref=location)


def is_reference(value: Any) -> bool:
    return isinstance(value, Reference)


def to_data(model: BaseModel) -> dict[str, Any]:
    """Dump a model to plain JSON-compatible data using wire (camelCase) keys."""
    return model.model_dump(mode="json", by_alias=True)
