import logging

from .compiler import CompiledSchema
from .errors import Invalid

logger = logging.getLogger(__name__)


class Schema(object):
    """ Validation schema.

    A `Schema` wraps a [`SchemaRepr`](#schemarepr): the declared fields of a request-like payload.
    Typically, it's produced by a [`SchemaBuilder`](#schemabuilder):

    ```python
    from domains import SchemaBuilder

    b = SchemaBuilder()
    b.schemadoc(u'A user')
    b.doc(u'Display name')
    b.field('name', 'string', required=True, empty=False)
    b.field('age', 'integer')
    UserSchema = b.build()
    ```

    Once the Schema is defined, validation is triggered with `validate()`, or by calling it:

    ```python
    UserSchema.validate({'name': u'Ann', 'age': 5})  #-> {'name': u'Ann', 'age': 5}
    UserSchema({'name': u'Ann', 'nickname': u'A'})
    #-> UnpermittedFieldError: Extra keys not allowed @ ['nickname']: expected name, age, got 'A'
    ```

    The rules are:

    1. Every key of the input must be a declared field: otherwise, [`UnpermittedFieldError`](#unpermittedfielderror).
    2. Every value must match the field type: otherwise, [`FieldTypeMismatchError`](#fieldtypemismatcherror).
       `None` always matches.
    3. With `require_strictly=True`, all fields declared with `required=True` must be present:
       otherwise, [`RequiredFieldsMissingError`](#requiredfieldsmissingerror) lists all of them.
    4. Embedded objects are validated recursively with the same `require_strictly`.
       An empty mapping always passes.

    The data is never modified: the very same object is returned on success.
    Keys are compared in their canonical string form, so `b'name'` or a string Enum member work as well as `'name'`.

    The schema is compiled on the first validation, and is read-only afterwards:
    it's safe to share a `Schema` between threads.

    :param schema: Schema representation. `None` means "no constraints": any data is valid.
    :type schema: domains.schema.fields.SchemaRepr|None
    :param require_strictly: Default strictness for `validate()` calls that don't specify it
    :type require_strictly: bool
    """

    compiled_schema_cls = CompiledSchema

    def __init__(self, schema, require_strictly=False):
        self._schema = schema
        self._compiled = None
        self.require_strictly = require_strictly

    def __repr__(self):
        return '{cls}({0._schema!r}, require_strictly={0.require_strictly!r})'.format(self, cls=type(self).__name__)

    @property
    def compiled(self):
        """ Compiled schema.

        :rtype: CompiledSchema
        :raises SchemaError: Schema compilation error
        """
        # Compile once. Two threads may race here: both get an equivalent result
        if self._compiled is None:
            self._compiled = self.compiled_schema_cls(self._schema)
        return self._compiled

    def schema(self):
        """ Get the schema representation, e.g. for embedding into another schema.

        :rtype: domains.schema.fields.SchemaRepr|None
        """
        return self._schema

    def validate(self, data, require_strictly=None):
        """ Validate the input data.

        :param data: Input mapping
        :param require_strictly: Enforce `required` fields. Defaults to the Schema setting.
        :type require_strictly: bool|None
        :return: The input data, unchanged
        :raises Invalid: Data validation error. See [`Invalid`](#invalid).
        :raises SchemaError: The schema itself is broken
        """
        if require_strictly is None:
            require_strictly = self.require_strictly
        try:
            return self.compiled(data, require_strictly)
        except Invalid as e:
            logger.debug('Validation failed: %s', e)
            raise

    __call__ = validate


def validate(schema, data, require_strictly=False):
    """ Validate the input data against a schema representation.

    Convenience for one-off validation: the schema is compiled on every call.
    Use [`Schema`](#schema) to compile once.

    ```python
    from domains import validate

    validate(builder.schema(), {'name': u'Ann'}, require_strictly=True)
    ```

    :type schema: domains.schema.fields.SchemaRepr|None
    :param data: Input mapping
    :type require_strictly: bool
    :return: The input data, unchanged
    :raises Invalid: Data validation error
    :raises SchemaError: The schema itself is broken
    """
    return Schema(schema).validate(data, require_strictly)
