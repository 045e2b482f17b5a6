""" Schema representation: plain immutable values.

A [`SchemaRepr`](#schemarepr) is what a [`SchemaBuilder`](#schemabuilder) produces and what the validator consumes.
It can also be loaded from a plain mapping, e.g. a parsed JSON document:

```python
from domains import SchemaRepr

schema = SchemaRepr.from_dict({
    'doc': 'A user',
    'fields': [
        {'name': 'name', 'type': 'string', 'options': {'required': True}},
        {'name': 'age', 'type': 'integer'},
    ]
})
```
"""

from collections import namedtuple
from collections.abc import Mapping
from types import MappingProxyType

from .const import FieldType, OPTION
from .errors import IncorrectSchemaFormat, UnknownFieldTypeError


def field_type(tag):
    """ Resolve a type tag into a `FieldType`

    :param tag: Type tag: a `FieldType` or its string value
    :rtype: FieldType
    :raises UnknownFieldTypeError: unsupported tag
    """
    try:
        return FieldType(tag)
    except ValueError:
        raise UnknownFieldTypeError(u'Unknown type {!r}'.format(tag))


class Field(namedtuple('Field', ('name', 'type', 'doc', 'options'))):
    """ A declared field.

    :param name: Field name
    :type name: str
    :param type: Type tag
    :type type: FieldType|str
    :param doc: Field documentation
    :type doc: str|None
    :param options: Field options (see `domains.schema.const.OPTION`). Stored as a read-only mapping.
    :type options: Mapping|None
    """

    __slots__ = ()

    def __new__(cls, name, type, doc=None, options=None):
        return super(Field, cls).__new__(cls, name, type, doc, MappingProxyType(dict(options or {})))

    def __reduce__(self):
        # mappingproxy can't be pickled: rebuild from a plain dict
        return type(self), (self.name, self.type, self.doc, dict(self.options))

    def __repr__(self):
        return '{cls}({0.name!r}, {0.type!s}, options={options!r})'.format(
            self,
            cls=type(self).__name__,
            options=dict(self.options)
        )

    @property
    def required(self):
        return bool(self.options.get(OPTION.REQUIRED))

    @classmethod
    def from_dict(cls, d):
        """ Load a field from a mapping: {name, type, doc, options}

        Nested `options.schema` mappings are loaded as `SchemaRepr`.

        :type d: Mapping
        :rtype: Field
        :raises IncorrectSchemaFormat: not a field mapping
        :raises UnknownFieldTypeError: unknown type tag
        """
        if not isinstance(d, Mapping) or 'name' not in d or 'type' not in d:
            raise IncorrectSchemaFormat(u'Expected a field mapping with `name` and `type`, got {!r}'.format(d))

        options = dict(d.get('options') or {})
        if isinstance(options.get(OPTION.SCHEMA), Mapping):
            options[OPTION.SCHEMA] = SchemaRepr.from_dict(options[OPTION.SCHEMA])
        if options.get(OPTION.LIST_TYPE) is not None:
            options[OPTION.LIST_TYPE] = field_type(options[OPTION.LIST_TYPE])

        return cls(str(d['name']), field_type(d['type']), d.get('doc'), options)


class SchemaRepr(namedtuple('SchemaRepr', ('doc', 'fields'))):
    """ A schema: documentation and an ordered sequence of fields.

    :param doc: Schema documentation
    :type doc: str|None
    :param fields: Fields, in declaration order
    :type fields: tuple[Field]
    """

    __slots__ = ()

    def __new__(cls, doc=None, fields=()):
        # Keep the sequence immutable, but leave other values to be reported by the compiler
        if isinstance(fields, list):
            fields = tuple(fields)
        return super(SchemaRepr, cls).__new__(cls, doc, fields)

    def __repr__(self):
        return '{cls}(doc={0.doc!r}, fields={names!r})'.format(
            self,
            cls=type(self).__name__,
            names=[getattr(f, 'name', f) for f in self.fields] if isinstance(self.fields, tuple) else self.fields
        )

    def field(self, name):
        """ Get a field by name

        :type name: str
        :rtype: Field|None
        """
        for f in self.fields:
            if f.name == name:
                return f
        return None

    @classmethod
    def from_dict(cls, d):
        """ Load a schema from a mapping: {doc, fields: [...]}

        :type d: Mapping
        :rtype: SchemaRepr
        :raises IncorrectSchemaFormat: malformed schema
        :raises UnknownFieldTypeError: unknown type tag
        """
        if not isinstance(d, Mapping):
            raise IncorrectSchemaFormat(u'Expected a schema mapping, got {!r}'.format(d))
        fields = d.get('fields', ())
        if not isinstance(fields, (list, tuple)):
            raise IncorrectSchemaFormat(u'Expected a list of fields, got {!r}'.format(fields))
        return cls(d.get('doc'), tuple(Field.from_dict(f) for f in fields))
