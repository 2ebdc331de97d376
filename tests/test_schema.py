import pytest

from asyncapi_model.errors import RequiredFieldMissing, StructuralMismatch
from asyncapi_model.model.base import RefOr, Reference, reference, to_data
from asyncapi_model.model.message import Message
from asyncapi_model.model.schema import Discriminator, Schema
from asyncapi_model.parser.document import decode_value


class TestSchema:
    def test_nested_properties_and_references(self):
        source = {
            "type": "object",
            "required": ["id"],
            "properties": {
                "id": {"type": "integer", "minimum": 1},
                "friend": {"$ref": "#/components/schemas/User"},
                "tags": {"type": "array", "items": {"type": "string"}, "uniqueItems": True},
            },
        }
        schema = decode_value(Schema, source)
        assert schema.properties["id"].minimum == 1
        assert schema.properties["friend"] == reference("#/components/schemas/User")
        assert schema.properties["tags"].items == Schema(type="string")
        assert to_data(schema) == source

    def test_composition_keywords(self):
        source = {
            "oneOf": [{"$ref": "#/a"}, {"type": "null"}],
            "anyOf": [{"type": "string"}, {"type": "number", "multipleOf": 0.5}],
            "allOf": [{"$ref": "#/b"}],
            "not": {"type": "boolean"},
        }
        schema = decode_value(Schema, source)
        assert schema.one_of[0] == reference("#/a")
        assert schema.any_of[1].multiple_of == 0.5
        assert schema.not_ == Schema(type="boolean")
        assert to_data(schema) == source

    def test_conditional_keywords(self):
        source = {"if": {"properties": {"kind": {"const": "a"}}}, "then": {"required": ["a"]}, "else": {"$ref": "#/b"}}
        schema = decode_value(Schema, source)
        assert schema.if_.properties["kind"].const == "a"
        assert schema.else_ == reference("#/b")
        assert to_data(schema) == source

    def test_tuple_items_and_type_list(self):
        source = {"type": ["array", "null"], "items": [{"type": "string"}, {"$ref": "#/n"}], "additionalItems": False}
        schema = decode_value(Schema, source)
        assert schema.type == ["array", "null"]
        assert isinstance(schema.items, list)
        assert isinstance(schema.items[1], Reference)
        assert to_data(schema) == source

    def test_additional_properties_schema(self):
        schema = decode_value(Schema, {"additionalProperties": {"type": "integer"}})
        assert schema.additional_properties == Schema(type="integer")

    def test_integer_bounds_stay_integers(self):
        data = to_data(decode_value(Schema, {"maximum": 100, "exclusiveMinimum": 0}))
        assert data == {"maximum": 100, "exclusiveMinimum": 0}
        assert isinstance(data["maximum"], int)

    def test_discriminator_as_string(self):
        schema = decode_value(Schema, {"discriminator": "petType"})
        assert schema.discriminator == "petType"

    def test_discriminator_as_object(self):
        source = {"discriminator": {"propertyName": "petType", "mapping": {"dog": "#/components/schemas/Dog"}}}
        schema = decode_value(Schema, source)
        assert schema.discriminator == Discriminator(property_name="petType", mapping={"dog": "#/components/schemas/Dog"})
        assert to_data(schema) == source

    def test_discriminator_requires_property_name(self):
        with pytest.raises(RequiredFieldMissing):
            decode_value(Discriminator, {"mapping": {}})

    def test_scalar_is_not_a_schema(self):
        with pytest.raises(StructuralMismatch):
            decode_value(Schema, "string")

    def test_wrong_keyword_type_is_mismatch(self):
        with pytest.raises(StructuralMismatch) as exc_info:
            decode_value(Schema, {"properties": {"a": {"minLength": "ten"}}})
        assert exc_info.value.path.startswith("/properties/a")


class TestPayload:
    def test_schema_payload(self):
        message = decode_value(Message, {"payload": {"type": "string"}})
        assert message.payload == Schema(type="string")

    def test_reference_payload(self):
        message = decode_value(Message, {"payload": {"$ref": "#/components/schemas/User"}})
        assert message.payload == reference("#/components/schemas/User")

    def test_non_schema_payload_kept_as_is(self):
        avro = {"type": {"type": "array", "items": "int"}, "name": "Numbers"}
        message = decode_value(Message, {"schemaFormat": "application/vnd.apache.avro;version=1.9.0", "payload": avro})
        assert message.payload == avro
        assert to_data(message)["payload"] == avro

    def test_scalar_payload_kept_as_is(self):
        message = decode_value(Message, {"payload": "opaque"})
        assert message.payload == "opaque"
        assert to_data(message) == {"payload": "opaque"}

    def test_missing_payload_is_none(self):
        assert decode_value(Message, {"name": "m"}).payload is None

    def test_ref_or_schema_round_trip(self):
        for source in ({"$ref": "#/s"}, {"type": "object", "x-avro-name": "User"}):
            assert to_data(decode_value(RefOr[Schema], source)) == source


class TestNullKeywords:
    def test_null_const_and_default_are_kept(self):
        source = {"type": "object", "properties": {"gone": {"const": None, "default": None}}}
        schema = decode_value(Schema, source)
        assert schema.properties["gone"].const is None
        assert to_data(schema) == source

    def test_unset_keywords_stay_omitted(self):
        assert to_data(Schema(type="null")) == {"type": "null"}

    def test_null_const_set_in_code_is_written(self):
        assert to_data(Schema(const=None)) == {"const": None}
