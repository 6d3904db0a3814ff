"""
Field Types

The closed set of field types a value can be checked against.
The enum is the single source of truth for both the rule table and the
list of defined types reported on lookup failures.
"""

from enum import Enum
from typing import List, Union

from fieldcheck.logic.errors import UnknownTypeError


class FieldType(str, Enum):
    """Field type tag. The value is the identifier used on the wire."""

    NAME = "name"
    CATALOG_NAME = "catalog_name"
    GENERIC_NAME = "generic_name"
    CITY_NAME = "city_name"
    ADDRESS = "address"
    POST_CODE = "post_code"
    PHONE_NUMBER = "phone_number"
    MESSAGE = "message"
    LANGUAGE_ISO_CODE = "language_iso_code"
    LANGUAGE_CODE = "language_code"
    CURRENCY_ISO_CODE = "currency_iso_code"
    FILE_NAME = "file_name"
    DNI_LITE = "dni_lite"
    STATE_ISO_CODE = "state_iso_code"
    UPC = "upc"
    EAN_13 = "ean_13"
    ISBN = "isbn"
    REFERENCE = "reference"
    MODULE_NAME = "module_name"
    URL = "url"
    WEBSERVICE_KEY = "webservice_key"

    @classmethod
    def resolve(cls, field_type: Union["FieldType", str]) -> "FieldType":
        """
        Resolve a tag, wire identifier ("post_code") or enum name ("POST_CODE").

        Raises:
            UnknownTypeError: for anything else, listing every defined type.
        """
        if isinstance(field_type, cls):
            return field_type

        if isinstance(field_type, str):
            try:
                return cls(field_type)
            except ValueError:
                member = cls.__members__.get(field_type)
                if member is not None:
                    return member

        raise UnknownTypeError(field_type, defined_types())


def defined_types() -> List[str]:
    """Wire identifiers of every field type, in declaration order."""
    return [member.value for member in FieldType]
