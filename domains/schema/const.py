import re
from enum import Enum


class FieldType(str, Enum):
    """ Closed set of field type tags.

    Members are strings, so a raw tag resolves with `FieldType('string')`
    and compares equal to it.
    """

    STRING = 'string'
    UUID = 'uuid'
    INTEGER = 'integer'
    BOOLEAN = 'boolean'
    DATETIME = 'datetime'
    ENUM = 'enum'
    LIST = 'list'
    REFERENCE = 'reference'
    VALUE_OBJECT = 'value_object'

    def __str__(self):
        return self.value


class OPTION:
    """ Recognized field options """

    REQUIRED = 'required'
    EMPTY = 'empty'
    ENUM_LIST = 'enum_list'
    LIST_TYPE = 'list_type'
    SCHEMA = 'schema'


#: Canonical lowercase 8-4-4-4-12 UUID
UUID_REGEX = re.compile(r'^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$')

#: Placeholder for "no value" in error reports
NO_VALUE = u'-none-'
