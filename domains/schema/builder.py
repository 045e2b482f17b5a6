""" Schemas are declared incrementally, once, at definition time, with a [`SchemaBuilder`](#schemabuilder):

```python
from domains import SchemaBuilder, FieldType

address = SchemaBuilder()
address.field('city', FieldType.STRING, required=True)
address.field('zip', FieldType.STRING)

user = SchemaBuilder()
user.schemadoc(u'A user')
user.doc(u'Display name')
user.field('name', FieldType.STRING, required=True, empty=False)
user.field('status', FieldType.ENUM, enum_list={'active', 'closed'})
user.embed('address', address)
user.embed_list('previous_addresses', address)
UserSchema = user.build()
```

The result of a builder is a [`SchemaRepr`](#schemarepr) snapshot: later declarations never change
the snapshots taken before them.
"""

import logging

from . import Schema
from .const import FieldType, OPTION
from .errors import IncorrectSchemaFormat
from .fields import Field, SchemaRepr

logger = logging.getLogger(__name__)


class SchemaBuilder(object):
    """ Schema builder: accumulates field declarations.

    A builder is meant to be used by a single definition unit (e.g. one module), at definition time,
    and is not thread-safe. Its products are.

    Every declaration method returns the builder, so calls can be chained.
    """

    def __init__(self):
        self._schemadoc = None
        self._staged_doc = None
        self._fields = []

    def __repr__(self):
        return '{cls}({names!r})'.format(cls=type(self).__name__, names=[f.name for f in self._fields])

    def schemadoc(self, text):
        """ Document the schema as a whole. Last call wins.

        :type text: str
        :rtype: SchemaBuilder
        """
        self._schemadoc = text
        return self

    def doc(self, text):
        """ Document the next field.

        The text is attached to the next `field()` declaration, and is discarded if none follows.

        :type text: str
        :rtype: SchemaBuilder
        """
        self._staged_doc = text
        return self

    def field(self, name, type, options=None, **kwargs):
        """ Declare a field.

        The type is not checked here: an unsupported one is reported when the schema is compiled,
        i.e. on the first validation.

        :param name: Field name. Typecasted to `str`.
        :param type: Type tag
        :type type: FieldType|str
        :param options: Field options: `required`, `empty`, `enum_list`, `list_type`, `schema`.
            Can also be given as keyword arguments.
        :type options: dict|None
        :rtype: SchemaBuilder
        :raises IncorrectSchemaFormat: The field was already declared
        """
        name = str(name)
        if any(f.name == name for f in self._fields):
            raise IncorrectSchemaFormat(u'Field {!r} is declared more than once'.format(name))

        options = dict(options or {}, **kwargs)
        self._fields.append(Field(name, type, self._staged_doc, options))
        self._staged_doc = None
        return self

    def embed(self, name, provider):
        """ Declare a field containing an embedded object.

        :param name: Field name
        :param provider: Anything that has a `schema()` method that returns a `SchemaRepr`:
            a `SchemaBuilder`, a `Schema`, or a custom class.
        :rtype: SchemaBuilder
        :raises IncorrectSchemaFormat: `provider` is not a schema provider
        """
        return self.field(name, FieldType.VALUE_OBJECT, {OPTION.SCHEMA: self._provided_schema(provider)})

    def embed_list(self, name, provider):
        """ Declare a field containing a list of embedded objects.

        :param name: Field name
        :param provider: Schema provider, see `embed()`
        :rtype: SchemaBuilder
        :raises IncorrectSchemaFormat: `provider` is not a schema provider
        """
        return self.field(name, FieldType.LIST, {OPTION.SCHEMA: self._provided_schema(provider)})

    @staticmethod
    def _provided_schema(provider):
        schema = getattr(provider, 'schema', None)
        if not callable(schema):
            raise IncorrectSchemaFormat(u'Attempted to embed non-schema {!r}'.format(provider))
        return schema()

    def schema(self):
        """ Get the schema declared so far.

        :rtype: SchemaRepr
        """
        return SchemaRepr(self._schemadoc, tuple(self._fields))

    def build(self, **settings):
        """ Get a `Schema` for the schema declared so far.

        :param settings: `Schema` settings, e.g. `require_strictly`
        :rtype: Schema
        """
        schema = self.schema()
        logger.debug('Built schema %r', schema)
        return Schema(schema, **settings)
