""" Misc utilities """

from collections.abc import Mapping
from datetime import date, time, datetime
from enum import Enum


__type_names = {
    None:             u'None',
    type(None):       u'None',
    bool:       u'Boolean',
    int:        u'Integer number',
    float:      u'Fractional number',
    complex:    u'Complex number',
    str:        u'String',
    bytes:      u'Binary String',
    tuple:      u'Tuple',
    list:       u'List',
    set:        u'Set',
    frozenset:  u'Frozen Set',
    dict:       u'Dictionary',
    date:       u'Date',
    time:       u'Time',
    datetime:   u'DateTime',
}


def register_type_name(t, name):
    """ Register a human-friendly name for the given type. This will be used in Invalid errors

    :param t: The type to register
    :type t: type
    :param name: Name for the type
    :type name: str
    """
    assert isinstance(t, type)
    assert isinstance(name, str)
    __type_names[t] = name


def get_type_name(t):
    """ Get a human-friendly name for the given type.

    :type t: type|None
    :rtype: str
    """
    try:
        return __type_names[t]
    except KeyError:
        # Mappings are all alike to the user
        if issubclass(t, Mapping):
            return __type_names[dict]
        # Get name from the Type itself
        return str(t.__name__).capitalize()


def get_literal_name(v):
    """ Get a human-friendly representation of an input value.

    :param v: Value
    :rtype: str
    """
    return repr(v)


def symbol(v):
    """ Get the canonical string form of a key or an enum value.

    String-equivalent tokens are unified, so `'active'`, `b'active'` and a string-valued Enum member
    all become `'active'`. Enum members with non-string values are identified by name.
    Anything else is returned as is.

    :param v: Key or symbol
    :rtype: str|*
    """
    if isinstance(v, Enum):
        return v.value if isinstance(v.value, str) else v.name
    if isinstance(v, str):
        return str.__str__(v)  # plain str, even for subclasses
    if isinstance(v, bytes):
        return v.decode('utf-8', 'replace')
    return v


def commajoin_as_strings(iterable):
    """ Join the given iterable with ', ' """
    return u', '.join(str(i) for i in iterable)
