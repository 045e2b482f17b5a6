import logging
from collections.abc import Mapping
from datetime import datetime

from .const import FieldType, OPTION, UUID_REGEX, NO_VALUE
from .errors import IncorrectSchemaFormat, UnknownFieldTypeError, Invalid, IncorrectDataFormat, \
    RequiredFieldsMissingError, FieldTypeMismatchError, EmptyFieldError, UnpermittedFieldError
from .fields import Field, field_type
from .util import get_type_name, get_literal_name, symbol, commajoin_as_strings

logger = logging.getLogger(__name__)


class CompiledSchema(object):
    """ Schema compiler.

    Converts a `SchemaRepr` into a callable validator: every field is compiled into a function once,
    so validation does not need to analyze the schema again.

    :param schema: Schema to use for validation. `None` means "no constraints".
    :type schema: domains.schema.fields.SchemaRepr|None
    :param path: Path to this schema, if it's embedded into another one
    :type path: list|None
    :raises SchemaError: Schema compilation error
    """

    def __init__(self, schema, path=None):
        self.schema = schema
        self.path = path or []

        #: Compiled fields: { name: (field, validator) }, in declaration order
        self.compiled = None
        #: Names of required fields, in declaration order
        self.required = ()

        if schema is not None:
            self.compiled = self.compile_schema(schema)
            self.required = tuple(name for name, (field, _) in self.compiled.items() if field.required)
            logger.debug('Compiled schema %r: %d fields', getattr(schema, 'doc', None), len(self.compiled))

    def __call__(self, data, require_strictly=False):
        """ Validate data against the compiled schema

        :param data: The mapping to validate
        :param require_strictly: Also enforce presence of required fields
        :type require_strictly: bool
        :return: `data`, unchanged
        :raises Invalid: Validation error
        """
        # No schema: no constraints
        if self.compiled is None:
            return data

        # Type check
        if not isinstance(data, Mapping):
            raise IncorrectDataFormat(u'Wrong value type', get_type_name(dict), get_type_name(type(data)), self.path)

        if require_strictly:
            keys = set(map(symbol, data))
            missing = [name for name in self.required if name not in keys]
            if missing:
                raise RequiredFieldsMissingError(
                    u'Required fields not provided',
                    commajoin_as_strings(missing),
                    NO_VALUE,
                    self.path,
                    missing=missing)

        # Every pair is checked: keys that collide in canonical form are validated separately
        for key, value in data.items():
            key = symbol(key)
            try:
                field, validate_value = self.compiled[key]
            except KeyError:
                raise UnpermittedFieldError(
                    u'Extra keys not allowed',
                    commajoin_as_strings(self.compiled) or NO_VALUE,
                    get_literal_name(value),
                    self.path + [key],
                    key=key,
                    value=value)
            validate_value(value, require_strictly)

        return data

    def __repr__(self):
        return '{cls}({0.schema!r}, {0.path!r})'.format(self, cls=type(self).__name__)

    #region Compilation Utils

    def sub_compile(self, schema):
        """ Compile a sub-schema.

        The sub-schema reports paths relative to itself: the embedding schema prefixes them
        with `enrich()` when the error passes through.

        :param schema: Embedded schema
        :type schema: domains.schema.fields.SchemaRepr
        :rtype: CompiledSchema
        """
        return type(self)(schema)

    def Invalid(self, field, expected, message=u'Wrong type', error_cls=FieldTypeMismatchError):
        """ Helper for Invalid errors.

        Typical use:

        err_type = self.Invalid(field, u'integer')
        raise err_type(<provided-value>)

        :type field: domains.schema.fields.Field
        :type expected: str
        :type message: str
        :type error_cls: type
        """
        def InvalidPartial(provided, path=None):
            """ Create an Invalid exception

            :param provided: The failed input value
            :type path: list|None
            :rtype: Invalid
            """
            return error_cls(
                message,
                expected,
                get_literal_name(provided),
                self.path + [field.name] + (path or []),
                field
            )
        return InvalidPartial

    #endregion

    #region Compilation Procedure

    def compile_schema(self, schema):
        """ Compile every field of the schema

        :type schema: domains.schema.fields.SchemaRepr
        :rtype: dict
        :raises IncorrectSchemaFormat: malformed schema
        :raises UnknownFieldTypeError: unsupported field type
        """
        fields = getattr(schema, 'fields', None)
        if not isinstance(fields, (list, tuple)):
            raise IncorrectSchemaFormat(u'Expected a sequence of fields, got {!r}'.format(fields))

        compiled = {}
        for field in fields:
            if not isinstance(field, Field):
                raise IncorrectSchemaFormat(u'Expected a Field, got {!r}'.format(field))
            if field.name in compiled:
                raise IncorrectSchemaFormat(u'Field {!r} is declared more than once'.format(field.name))
            compiled[field.name] = (field, self.compile_field(field))
        return compiled

    def get_field_compiler(self, field):
        """ Get compiler method for the field type

        :type field: domains.schema.fields.Field
        :rtype: callable
        :raises UnknownFieldTypeError: unsupported field type
        """
        compilers = {
            FieldType.STRING: self._compile_string,
            FieldType.UUID: self._compile_uuid,
            FieldType.INTEGER: self._compile_integer,
            FieldType.BOOLEAN: self._compile_boolean,
            FieldType.DATETIME: self._compile_datetime,
            FieldType.ENUM: self._compile_enum,
            FieldType.LIST: self._compile_list,
            FieldType.REFERENCE: self._compile_reference,
            FieldType.VALUE_OBJECT: self._compile_value_object,
        }
        return compilers[field_type(field.type)]

    def compile_field(self, field):
        """ Compile a field into a validator: `f(value, require_strictly)`.

        Every validator accepts `None`: absence of a value is only checked with `required`.

        :type field: domains.schema.fields.Field
        :rtype: callable
        """
        validate = self.get_field_compiler(field)(field)

        def validate_field(v, require_strictly=False):
            if v is None:
                return v
            return validate(v, require_strictly)
        return validate_field

    def _compile_isinstance(self, field, expected, typecheck):
        """ Compile a plain type check """
        err_type = self.Invalid(field, expected)

        def validate_type(v, require_strictly):
            if not typecheck(v):
                raise err_type(v)
            return v
        return validate_type

    def _compile_string(self, field):
        err_type = self.Invalid(field, FieldType.STRING.value)
        err_empty = self.Invalid(field, u'non-empty string', u'Empty value not allowed', EmptyFieldError)
        allow_empty = field.options.get(OPTION.EMPTY) is not False

        def validate_string(v, require_strictly):
            if not isinstance(v, str):
                raise err_type(v)
            if not allow_empty and not v.strip():
                raise err_empty(v)
            return v
        return validate_string

    def _compile_uuid(self, field):
        return self._compile_isinstance(
            field, FieldType.UUID.value,
            lambda v: isinstance(v, str) and UUID_REGEX.fullmatch(v) is not None)

    def _compile_integer(self, field):
        # bool is an int subclass, but not a number for us
        return self._compile_isinstance(
            field, FieldType.INTEGER.value,
            lambda v: isinstance(v, int) and not isinstance(v, bool))

    def _compile_boolean(self, field):
        return self._compile_isinstance(field, FieldType.BOOLEAN.value, lambda v: isinstance(v, bool))

    def _compile_datetime(self, field):
        return self._compile_isinstance(field, FieldType.DATETIME.value, lambda v: isinstance(v, datetime))

    def _compile_enum(self, field):
        allowed = frozenset(symbol(s) for s in field.options.get(OPTION.ENUM_LIST) or ())
        err_value = self.Invalid(field, u'one of {}'.format(commajoin_as_strings(sorted(allowed, key=str))))

        def validate_enum(v, require_strictly):
            try:
                ok = symbol(v) in allowed
            except TypeError:  # unhashable
                ok = False
            if not ok:
                raise err_value(v)
            return v
        return validate_enum

    def _compile_list(self, field):
        err_type = self.Invalid(field, FieldType.LIST.value)

        # Element validation: either a type, or an embedded schema
        list_type = field.options.get(OPTION.LIST_TYPE)
        element_schema = field.options.get(OPTION.SCHEMA)
        validate_element = None

        if list_type is not None and element_schema is not None:
            raise IncorrectSchemaFormat(u'List field {!r} declares both a list type and a schema'.format(field.name))
        if list_type is not None:
            if field_type(list_type) is not FieldType.STRING:
                raise UnknownFieldTypeError(u'Unknown list type {!r} for field {!r}'.format(list_type, field.name))
            err_element = self.Invalid(field, u'list of strings')

            def validate_element(index, v, require_strictly):
                if not isinstance(v, str):
                    raise err_element(v, path=[index])
        elif element_schema is not None:
            validate_element = self._compile_embedded(field, element_schema)

        def validate_list(v, require_strictly):
            if not isinstance(v, (list, tuple)):
                raise err_type(v)
            if validate_element is not None:
                for index, element in enumerate(v):
                    validate_element(index, element, require_strictly)
            return v
        return validate_list

    def _compile_reference(self, field):
        # Any object will do: `None` was already let through
        return self._compile_isinstance(field, FieldType.REFERENCE.value, lambda v: isinstance(v, object))

    def _compile_value_object(self, field):
        validate_embedded = self._compile_embedded(field, field.options.get(OPTION.SCHEMA))

        def validate_value_object(v, require_strictly):
            validate_embedded(None, v, require_strictly)
            return v
        return validate_value_object

    def _compile_embedded(self, field, schema):
        """ Compile an embedded object validator: `f(index, value, require_strictly)`.

        `index` is the position in the enclosing list, or `None` for a single object.
        """
        sub_schema = self.sub_compile(schema)

        def validate_embedded(index, v, require_strictly):
            # An empty mapping is always fine, regardless of required fields
            if isinstance(v, Mapping) and not v:
                return v
            try:
                return sub_schema(v, require_strictly)
            except Invalid as e:
                # Errors from the sub-schema are relative to it: prefix with our location
                e.enrich(
                    path=self.path + [field.name] + ([] if index is None else [index]),
                    field=field)
                raise
        return validate_embedded

    #endregion
