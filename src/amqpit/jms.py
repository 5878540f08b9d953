""" JMS message kinds as they appear on an AMQP wire, and the decoding of
    JMS message bodies into canonical tokens one subtype at a time.

    A JMS client marks each message with the ``x-opt-jms-msg-type``
    message annotation, a small integer naming the JMS message class. The
    test harness refers to the same classes by name (JMS_MAPMESSAGE_TYPE
    and friends); :data:`kinds` maps between the two.

    Within a test run the values are grouped by subtype ('boolean',
    'short', 'string', ...). The functions here decode one body, or one
    value of a body, for a given subtype; the bookkeeping of which subtype
    is current lives in :class:`amqpit.receiver.jms.JmsReceiver`.
"""

import enum
import struct
import types as pytypes

from . import encode
from . import errors
from . import types
from .types import AmqpType


annotation_key = 'x-opt-jms-msg-type'


class Kind(enum.IntEnum):
    """ Values of the ``x-opt-jms-msg-type`` annotation.
    """

    MESSAGE = 0
    OBJECT = 1
    MAP = 2
    BYTES = 3
    STREAM = 4
    TEXT = 5


kinds = pytypes.MappingProxyType({
    'JMS_MESSAGE_TYPE': Kind.MESSAGE,
    'JMS_OBJECTMESSAGE_TYPE': Kind.OBJECT,
    'JMS_MAPMESSAGE_TYPE': Kind.MAP,
    'JMS_BYTESMESSAGE_TYPE': Kind.BYTES,
    'JMS_STREAMMESSAGE_TYPE': Kind.STREAM,
    'JMS_TEXTMESSAGE_TYPE': Kind.TEXT,
})

names = pytypes.MappingProxyType(dict((kind, name) for name, kind in kinds.items()))


def kind(name):
    """ Return the :class:`Kind` for the JMS message type *name*.
    """

    try:
        return kinds[name]
    except KeyError:
        raise errors.UnknownTypeError(name)



def annotated_kind(message):
    """ Return the integer kind annotation carried by *message*, or None if
        the annotation is absent or not an integer. The return value is not
        guaranteed to be a valid :class:`Kind`.
    """

    annotations = message.annotations

    if annotations is None:
        return None

    # proton keys the annotations with proton.symbol, which hashes and
    # compares the same as the plain string.

    value = annotations.get(annotation_key)

    if value is None:
        return None

    try:
        return int(value)
    except (TypeError, ValueError):
        return None



# The AMQP type a value of each subtype is carried as, in map and stream
# bodies. This is also the set of subtypes understood at all.

subtypes = pytypes.MappingProxyType({
    'boolean': AmqpType.BOOLEAN,
    'byte': AmqpType.BYTE,
    'bytes': AmqpType.BINARY,
    'char': AmqpType.CHAR,
    'double': AmqpType.DOUBLE,
    'float': AmqpType.FLOAT,
    'int': AmqpType.INT,
    'long': AmqpType.LONG,
    'short': AmqpType.SHORT,
    'string': AmqpType.STRING,
})


def amqp_type(subtype):
    """ Return the :class:`amqpit.types.AmqpType` for *subtype*, raising
        :class:`amqpit.errors.UnknownSubtypeError` if there is none.
    """

    try:
        return subtypes[subtype]
    except KeyError:
        raise errors.UnknownSubtypeError(subtype)



def token(subtype, value):
    """ Return the canonical token for a single map or stream *value* of
        the named *subtype*.
    """

    return encode.encode(amqp_type(subtype), value)



def map_body(subtype, body):
    """ Return the tokens for a JMS MapMessage *body*. Every key is the
        subtype name followed by a three character index ('string001'),
        and the values are reported in key order.
    """

    types.check(AmqpType.MAP, body)

    for key in body.keys():
        if not isinstance(key, str):
            raise errors.IncorrectValueTypeError(key)

    tokens = list()

    for key in sorted(body.keys()):
        if key[:-3] != subtype:
            raise errors.IncorrectKeyPrefixError(subtype, key)

        tokens.append(token(subtype, body[key]))

    return tokens



def stream_body(subtype, body):
    """ Return the tokens for a JMS StreamMessage *body*, a list of values
        all of the named *subtype*.
    """

    types.check(AmqpType.LIST, body)

    tokens = list()

    for item in body:
        tokens.append(token(subtype, item))

    return tokens



def text_body(body):
    """ Return the token for a JMS TextMessage *body*.
    """

    return encode.encode(AmqpType.STRING, body)



# Widths in bytes of the fixed-size subtypes in a JMS BytesMessage body. The
# values are written big-endian, as by java.io.DataOutputStream.

_widths = pytypes.MappingProxyType({
    'boolean': 1,
    'byte': 1,
    'short': 2,
    'char': 2,
    'int': 4,
    'float': 4,
    'long': 8,
    'double': 8,
})


def bytes_body(subtype, body):
    """ Return the token for a JMS BytesMessage *body*, which must be
        binary. The length of the body is checked exactly against the width
        of the subtype; strings carry a two byte length prefix, and the raw
        'bytes' subtype is unconstrained.
    """

    types.check(AmqpType.BINARY, body)
    body = bytes(body)

    if subtype == 'bytes':
        return encode.binary(body)

    if subtype == 'string':
        return _string(body)

    try:
        expected = _widths[subtype]
    except KeyError:
        raise errors.UnknownSubtypeError(subtype)

    if len(body) != expected:
        raise errors.IncorrectBodyLengthError(expected, len(body))

    # Unpacking as unsigned keeps the bit pattern of the signed and floating
    # point subtypes intact, which is all the hex token reports.

    unpacked = int.from_bytes(body, 'big')

    if subtype == 'boolean':
        return encode.boolean(unpacked)
    elif subtype == 'char':
        return encode.character(chr(unpacked))
    else:
        return encode.hexadecimal(unpacked, expected)



def _string(body):

    # writeUTF(): an unsigned two byte length, then that many bytes of
    # (modified) UTF-8.

    if len(body) < 2:
        raise errors.IncorrectBodyLengthError(2, len(body))

    length = struct.unpack('>H', body[:2])[0]
    expected = length + 2

    if len(body) != expected:
        raise errors.IncorrectBodyLengthError(expected, len(body))

    return body[2:].decode('utf-8')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
