""" Encoding of AMQP lists and maps into nested JSON-ready structures. Only
    a conservative subset of member types is accepted: nested lists, nested
    maps, and strings. Arrays nested inside a collection are dropped from
    the result; any other member type is an error.
"""

from . import errors
from . import types
from .types import AmqpType


def sequence(value):
    """ Return a new list holding the encoded members of the AMQP list
        *value*.
    """

    encoded = list()

    for member in value:
        member_type = types.wire_type(member)

        if member_type is AmqpType.ARRAY:
            continue

        encoded.append(_member(member_type, member))

    return encoded



def mapping(value):
    """ Return a new dictionary holding the encoded members of the AMQP map
        *value*. Keys are reported as plain strings; string and symbol keys
        are the only ones accepted.
    """

    encoded = dict()

    for key, member in value.items():
        key_type = types.wire_type(key)

        if key_type is AmqpType.STRING or key_type is AmqpType.SYMBOL:
            key = str(key)
        else:
            raise errors.IncorrectValueTypeError(key)

        member_type = types.wire_type(member)

        if member_type is AmqpType.ARRAY:
            continue

        encoded[key] = _member(member_type, member)

    return encoded



def _member(member_type, member):

    if member_type is AmqpType.LIST:
        return sequence(member)
    elif member_type is AmqpType.MAP:
        return mapping(member)
    elif member_type is AmqpType.STRING:
        return str(member)

    raise errors.IncorrectValueTypeError(member)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
