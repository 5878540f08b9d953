""" The closed set of AMQP types exercised by the interoperability tests,
    and the table used to recover the wire type of a value decoded by
    proton. Proton hands back Python-native values; the AMQP type that was
    on the wire is carried by the exact class of the value, with proton's
    own subclasses (:class:`proton.ubyte`, :class:`proton.symbol`, ...)
    distinguishing types that would otherwise collapse into ``int`` or
    ``str``.
"""

import enum
import types as pytypes
import uuid

import proton

from . import errors


class AmqpType(enum.Enum):
    """ One member per AMQP type name, as the test harness spells them.
    """

    NULL = 'null'
    BOOLEAN = 'boolean'
    UBYTE = 'ubyte'
    USHORT = 'ushort'
    UINT = 'uint'
    ULONG = 'ulong'
    BYTE = 'byte'
    SHORT = 'short'
    INT = 'int'
    LONG = 'long'
    FLOAT = 'float'
    DOUBLE = 'double'
    DECIMAL32 = 'decimal32'
    DECIMAL64 = 'decimal64'
    DECIMAL128 = 'decimal128'
    CHAR = 'char'
    TIMESTAMP = 'timestamp'
    UUID = 'uuid'
    BINARY = 'binary'
    STRING = 'string'
    SYMBOL = 'symbol'
    LIST = 'list'
    MAP = 'map'
    ARRAY = 'array'


    @classmethod
    def lookup(cls, name):
        """ Return the :class:`AmqpType` for the declared type *name*,
            raising :class:`amqpit.errors.UnknownTypeError` if there is
            no such type.
        """

        try:
            return cls(name)
        except ValueError:
            raise errors.UnknownTypeError(name)


# end of class AmqpType



# Widths in bytes of the fixed-size numeric types; these drive the zero
# padding of the hex tokens.

widths = pytypes.MappingProxyType({
    AmqpType.UBYTE: 1,
    AmqpType.USHORT: 2,
    AmqpType.UINT: 4,
    AmqpType.ULONG: 8,
    AmqpType.BYTE: 1,
    AmqpType.SHORT: 2,
    AmqpType.INT: 4,
    AmqpType.LONG: 8,
    AmqpType.FLOAT: 4,
    AmqpType.DOUBLE: 8,
    AmqpType.DECIMAL32: 4,
    AmqpType.DECIMAL64: 8,
    AmqpType.DECIMAL128: 16,
})


# Keyed on the exact class. isinstance() would be wrong here: proton.symbol
# is a str, proton.ulong is an int, and bool is an int as well. Proton
# decodes binary as a memoryview over the frame.

_by_class = pytypes.MappingProxyType({
    type(None): AmqpType.NULL,
    bool: AmqpType.BOOLEAN,
    proton.ubyte: AmqpType.UBYTE,
    proton.ushort: AmqpType.USHORT,
    proton.uint: AmqpType.UINT,
    proton.ulong: AmqpType.ULONG,
    proton.byte: AmqpType.BYTE,
    proton.short: AmqpType.SHORT,
    proton.int32: AmqpType.INT,
    int: AmqpType.LONG,
    proton.float32: AmqpType.FLOAT,
    float: AmqpType.DOUBLE,
    proton.decimal32: AmqpType.DECIMAL32,
    proton.decimal64: AmqpType.DECIMAL64,
    proton.decimal128: AmqpType.DECIMAL128,
    proton.char: AmqpType.CHAR,
    proton.timestamp: AmqpType.TIMESTAMP,
    uuid.UUID: AmqpType.UUID,
    bytes: AmqpType.BINARY,
    memoryview: AmqpType.BINARY,
    str: AmqpType.STRING,
    proton.symbol: AmqpType.SYMBOL,
    list: AmqpType.LIST,
    dict: AmqpType.MAP,
    proton.Array: AmqpType.ARRAY,
})


def wire_type(value):
    """ Return the :class:`AmqpType` that *value* was decoded from, or None
        if the value is of a class with no counterpart here (described
        types, for example).
    """

    return _by_class.get(type(value))



def check(expected, value):
    """ Raise :class:`amqpit.errors.IncorrectMessageBodyTypeError` unless
        *value* was decoded from the *expected* :class:`AmqpType`.
    """

    found = wire_type(value)

    if found is not expected:
        raise errors.IncorrectMessageBodyTypeError(expected, found)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
