"""Receiver error hierarchy.

Every error raised here is fatal to a receiver run: nothing in :mod:`amqpit`
catches them, they propagate out of the proton container and are reported
once by :mod:`amqpit.cli`.
"""

from __future__ import annotations


class InteropError(Exception):
    """Base class for all receiver errors."""


class ArgumentError(InteropError):
    """The command line arguments are missing, extra, or malformed."""


class ConfigParseError(InteropError):
    """The expected-count document could not be parsed."""


class IncorrectMessageBodyTypeError(InteropError):
    """The declared type or message kind does not match what was received."""

    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        InteropError.__init__(self, 'incorrect message body type: expected %s; found %s' % (_name(expected), _name(found)))


class IncorrectValueTypeError(InteropError):
    """A collection member or map key has a type outside the supported set."""

    def __init__(self, value):
        self.value = value
        InteropError.__init__(self, 'incorrect value type: %s (%s)' % (repr(value), type(value).__name__))


class UnknownTypeError(InteropError):
    """The declared type name is not a recognized type."""

    def __init__(self, name):
        self.name = name
        InteropError.__init__(self, 'unknown type: ' + repr(name))


class UnsupportedTypeError(InteropError):
    """The declared type name is recognized but excluded from testing."""

    def __init__(self, name):
        self.name = name
        InteropError.__init__(self, 'unsupported type: ' + repr(name))


class IncorrectKeyPrefixError(InteropError):
    """A map-kind key does not start with the current subtype name."""

    def __init__(self, subtype, key):
        self.subtype = subtype
        self.key = key
        InteropError.__init__(self, 'incorrect map key prefix: expected %s; found key %s' % (repr(subtype), repr(key)))


class IncorrectBodyLengthError(InteropError):
    """A fixed-width bytes-kind body has the wrong length."""

    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        InteropError.__init__(self, 'incorrect message body length: expected %d; found %d' % (expected, found))


class UnknownSubtypeError(InteropError):
    """The subtype name is not one of the supported JMS subtypes."""

    def __init__(self, subtype):
        self.subtype = subtype
        InteropError.__init__(self, 'unknown JMS message subtype: ' + repr(subtype))


def _name(thing):

    # Enum members carry their protocol name in .value; everything else
    # (kind names, None for an unrecognized wire type) is used as-is.

    try:
        return thing.value
    except AttributeError:
        return str(thing)
