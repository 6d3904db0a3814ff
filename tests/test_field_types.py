"""Tests for field type resolution and error reporting."""

import pytest

from fieldcheck import FieldType, UnknownTypeError, defined_types


class TestFieldType:
    def test_value_is_wire_identifier(self):
        assert FieldType.POST_CODE.value == "post_code"
        assert FieldType.EAN_13.value == "ean_13"

    def test_is_str(self):
        assert isinstance(FieldType.NAME, str)

    def test_resolve_member(self):
        assert FieldType.resolve(FieldType.URL) is FieldType.URL

    def test_resolve_wire_identifier(self):
        assert FieldType.resolve("phone_number") is FieldType.PHONE_NUMBER

    def test_resolve_enum_name(self):
        assert FieldType.resolve("PHONE_NUMBER") is FieldType.PHONE_NUMBER

    def test_resolve_unknown(self):
        with pytest.raises(UnknownTypeError) as exc:
            FieldType.resolve("NOT_A_TYPE")
        assert exc.value.field_type == "NOT_A_TYPE"

    def test_resolve_non_string(self):
        with pytest.raises(UnknownTypeError):
            FieldType.resolve(42)


class TestDefinedTypes:
    def test_lists_every_member_in_order(self):
        types = defined_types()
        assert types == [member.value for member in FieldType]
        assert len(types) == 21
        assert types[0] == "name"
        assert types[-1] == "webservice_key"

    def test_unknown_type_message_enumerates_all(self):
        with pytest.raises(UnknownTypeError) as exc:
            FieldType.resolve("NOT_A_TYPE")

        message = str(exc.value)
        assert message.startswith('Type "NOT_A_TYPE" is not defined.')
        for name in defined_types():
            assert name in message
        assert exc.value.defined_types == defined_types()

    def test_unknown_type_is_value_error(self):
        with pytest.raises(ValueError):
            FieldType.resolve("nope")
