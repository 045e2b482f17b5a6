"""
Source: [domains/schema/errors.py](domains/schema/errors.py)

Validation stops at the first violation and raises a typed error, so callers can react to the kind of problem
without parsing messages. The only exception to fail-fast is the strict required-fields check:
it reports every missing field at once.

There are two families:

* [`SchemaError`](#schemaerror): the schema itself is broken. This is a programmer error: don't catch it.
* [`Invalid`](#invalid): the input data does not conform. These are expected, user-facing outcomes.

All errors are available right at the top-level:

```python
from domains import Invalid, SchemaError, FieldTypeMismatchError
```
"""


class BaseError(Exception):
    """ Base exception for everything raised by `domains` """


class SchemaError(BaseError):
    """ Schema error (e.g. malformed) """


class IncorrectSchemaFormat(SchemaError):
    """ The schema is structurally invalid: fields are not a sequence, a non-schema was embedded,
    or a field name was declared twice """


class UnknownFieldTypeError(SchemaError):
    """ A field declares a type tag (or a list element type) that the validator does not support """


class Invalid(BaseError):
    """ Validation error for a single value.

    This exception is guaranteed to contain text values which are meaningful for the user.

    :param message: Validation error message.
    :type message: str
    :param expected: Expected value: info about the value the validator was expecting.
    :type expected: str|None
    :param provided: Provided value: info about the value that was actually supplied by the user
    :type provided: str|None
    :param path: Path to the error value.

        E.g. if an invalid value was encountered at ['items'][1]['sku'], then path=['items', 1, 'sku'].

    :type path: list
    :param field: The field descriptor that has failed, if any
    :type field: domains.schema.fields.Field|None
    :param info: Custom values provided by specific error kinds
    :type info: dict
    """

    def __init__(self, message, expected=None, provided=None, path=None, field=None, **info):
        super(Invalid, self).__init__(message, expected, provided, path, field)
        self.message = message
        self.expected = expected
        self.provided = provided
        self.path = path or []
        self.field = field
        self.info = info

    def __repr__(self):
        return '{cls}({0.message!r}, ' \
               'expected={0.expected!r}, ' \
               'provided={0.provided!r}, ' \
               'path={0.path!r}, ' \
               'field={0.field!r}, ' \
               'info={0.info!r})' \
            .format(self, cls=type(self).__name__)

    def __str__(self):
        message = self.message
        if self.path:
            message = u'{} @ {}'.format(message, u''.join(u'[{!r}]'.format(p) for p in self.path))
        if self.expected is not None or self.provided is not None:
            message = u'{message}: expected {0.expected}, got {0.provided}'.format(self, message=message)
        if self.field is not None:
            message = u'{message} (field {0.name!r}: {0.type!s})'.format(self.field, message=message)
        return message

    def enrich(self, expected=None, provided=None, path=None, field=None):
        """ Enrich this error with additional information.

        The specified arguments are only set if the error does not have any value on the property.

        One exclusion is `path`: if provided, it is prepended to `Invalid.path`.
        This is how an error raised by a nested schema learns where it happened:

        ```python
        try:
            address_schema.validate(data['address'])
        except Invalid as e:
            e.enrich(path=['address'])
            raise
        ```

        :param expected: Invalid.expected default
        :type expected: str|None
        :param provided: Invalid.provided default
        :type provided: str|None
        :param path: Prefix to prepend to Invalid.path
        :type path: list|None
        :param field: Invalid.field default
        :rtype: Invalid
        """
        if self.expected is None and expected is not None:
            self.expected = expected
        if self.provided is None and provided is not None:
            self.provided = provided
        if self.field is None and field is not None:
            self.field = field
        self.path = (path or []) + self.path
        return self


class IncorrectDataFormat(Invalid):
    """ The input data is not a mapping """


class RequiredFieldsMissingError(Invalid):
    """ Strict validation found required fields absent from the input.

    Unlike other errors, this one reports all of them: see `missing`.
    """

    @property
    def missing(self):
        """ Names of all missing fields, in declaration order

        :rtype: list[str]
        """
        return self.info.get('missing', [])


class FieldTypeMismatchError(Invalid):
    """ A field value does not have the declared type """


class EmptyFieldError(Invalid):
    """ A string field declared with `empty=False` received a blank value """


class UnpermittedFieldError(Invalid):
    """ The input contains a key that the schema does not declare """

    @property
    def key(self):
        return self.info.get('key')

    @property
    def value(self):
        return self.info.get('value')


class InvalidInputError(Invalid):
    """ Input rejected by a collaborator (e.g. the persistence layer), translated at the command/query boundary.

    See [`translate_errors`](#translate_errors).
    """


class ResourceNotFoundError(BaseError):
    """ The resource a command or query refers to does not exist """
