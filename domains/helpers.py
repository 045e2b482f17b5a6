""" Helpers for the code that runs commands and queries on top of validated input. """

import logging
from functools import wraps

from .schema.errors import InvalidInputError

logger = logging.getLogger(__name__)


def translate_errors(*exc_types):
    """ Decorator that turns collaborator errors into [`InvalidInputError`](#invalidinputerror).

    Commands and queries validate their input with a schema, but the persistence layer might still reject it
    (e.g. a unique constraint). Wrap the operation to report such rejections as input errors:

    ```python
    from domains import translate_errors

    class CreateUser(object):
        @staticmethod
        @translate_errors(sqlalchemy.exc.IntegrityError)
        def call(data):
            UserSchema.validate(data, require_strictly=True)
            return User.create(**data)
    ```

    The original exception is chained as `__cause__`.

    :param exc_types: Exception classes to translate. Anything else propagates as is.
    :type exc_types: type
    :return: decorator
    :rtype: callable
    """
    def decorator(func):
        if not exc_types:
            return func

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except exc_types as e:
                logger.debug('%s() rejected by %s: %s', func.__name__, type(e).__name__, e)
                raise InvalidInputError(str(e)) from e
        return wrapper
    return decorator


__all__ = ('translate_errors',)
