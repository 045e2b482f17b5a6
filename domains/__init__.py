""" Declarative schemas for request-like payloads.

Core features:

* Schemas declared incrementally, with documentation for the schema and every field
* Strict type checks: string, uuid, integer, boolean, datetime, enum, list, reference
* Embedded objects and lists of embedded objects
* Required fields, enforced on demand
* Typed errors with paths (which field contains the error)
* No coercion: valid data is returned untouched

```python
from domains import SchemaBuilder

b = SchemaBuilder()
b.field('name', 'string', required=True, empty=False)
b.field('age', 'integer')
UserSchema = b.build()

UserSchema.validate({'name': u'Ann', 'age': 5})  #-> {'name': u'Ann', 'age': 5}
```
"""
# Core

from .schema.errors import BaseError, SchemaError, IncorrectSchemaFormat, UnknownFieldTypeError, \
    Invalid, IncorrectDataFormat, RequiredFieldsMissingError, FieldTypeMismatchError, EmptyFieldError, \
    UnpermittedFieldError, InvalidInputError, ResourceNotFoundError
from .schema.const import FieldType
from .schema.fields import Field, SchemaRepr
from .schema.util import register_type_name

from .schema import Schema, validate
from .schema.builder import SchemaBuilder

# Helpers
from .helpers import *
