""" Canonical text tokens for decoded AMQP values. The tokens are what the
    receiver reports back to the test harness, and they are compared
    byte-for-byte against the values the sender was asked to send; every
    rule here must therefore be exact, and none of them may depend on the
    platform, locale, or floating point formatting.
"""

import struct

from . import collection
from . import errors
from . import types
from .types import AmqpType


def hexadecimal(value, width):
    """ Return *value* as a '0x' prefixed, zero padded, lowercase hex string
        of *width* bytes. Negative values are rendered as their two's
        complement bit pattern at that width, without sign extension.
    """

    mask = (1 << (width * 8)) - 1
    return '0x%0*x' % (width * 2, value & mask)



def hex_bytes(value):
    """ Return the raw bytes in *value* as a '0x' prefixed hex string, one
        byte at a time in the order given; leading zero bytes are kept.
    """

    return '0x' + bytes(value).hex()



def float_bits(value):
    """ Return the IEEE-754 single precision bit pattern of *value* as an
        unsigned integer.
    """

    packed = struct.pack('>f', value)
    return struct.unpack('>I', packed)[0]



def double_bits(value):
    """ Return the IEEE-754 double precision bit pattern of *value* as an
        unsigned integer.
    """

    packed = struct.pack('>d', value)
    return struct.unpack('>Q', packed)[0]



def boolean(value):
    if value:
        return 'True'
    else:
        return 'False'



def character(value):
    """ Printable ASCII characters are reported as themselves, anything
        else as the hex code point.
    """

    point = ord(value)

    if point < 0x7f and value.isprintable():
        return str(value)

    return '0x%x' % (point)



def binary(value):
    """ Binary payloads pass through unchanged. Each byte maps to the code
        point of the same value so the token survives JSON encoding.
    """

    return bytes(value).decode('latin-1')



def encode(amqp_type, value):
    """ Validate that *value* was decoded from *amqp_type*, and return the
        canonical token for it. *amqp_type* is an
        :class:`amqpit.types.AmqpType` member, resolved ahead of time from
        the declared type name.

        Lists and maps are handed to :mod:`amqpit.collection`, and come
        back as nested lists and dictionaries rather than a single string.
    """

    if amqp_type is AmqpType.ARRAY:
        raise errors.UnsupportedTypeError(amqp_type.value)

    types.check(amqp_type, value)

    method = _encoders[amqp_type]
    return method(amqp_type, value)



def _null(amqp_type, value):
    return 'None'


def _boolean(amqp_type, value):
    return boolean(value)


def _integer(amqp_type, value):
    return hexadecimal(value, types.widths[amqp_type])


def _float(amqp_type, value):
    return hexadecimal(float_bits(value), 4)


def _double(amqp_type, value):
    return hexadecimal(double_bits(value), 8)


def _decimal(amqp_type, value):

    # decimal32 and decimal64 arrive as the raw bits in an int, decimal128
    # as the raw 16 bytes.

    if amqp_type is AmqpType.DECIMAL128:
        return hex_bytes(value)

    return hexadecimal(value, types.widths[amqp_type])


def _char(amqp_type, value):
    return character(value)


def _timestamp(amqp_type, value):
    return '0x%x' % (value & 0xFFFFFFFFFFFFFFFF)


def _uuid(amqp_type, value):
    return str(value)


def _binary(amqp_type, value):
    return binary(value)


def _string(amqp_type, value):
    return str(value)


def _list(amqp_type, value):
    return collection.sequence(value)


def _map(amqp_type, value):
    return collection.mapping(value)


_encoders = {
    AmqpType.NULL: _null,
    AmqpType.BOOLEAN: _boolean,
    AmqpType.UBYTE: _integer,
    AmqpType.USHORT: _integer,
    AmqpType.UINT: _integer,
    AmqpType.ULONG: _integer,
    AmqpType.BYTE: _integer,
    AmqpType.SHORT: _integer,
    AmqpType.INT: _integer,
    AmqpType.LONG: _integer,
    AmqpType.FLOAT: _float,
    AmqpType.DOUBLE: _double,
    AmqpType.DECIMAL32: _decimal,
    AmqpType.DECIMAL64: _decimal,
    AmqpType.DECIMAL128: _decimal,
    AmqpType.CHAR: _char,
    AmqpType.TIMESTAMP: _timestamp,
    AmqpType.UUID: _uuid,
    AmqpType.BINARY: _binary,
    AmqpType.STRING: _string,
    AmqpType.SYMBOL: _string,
    AmqpType.LIST: _list,
    AmqpType.MAP: _map,
}


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
