""" Configuration handling for the receivers: where to connect, and how
    many messages to wait for. Everything here is evaluated before any
    connection is attempted, so a bad configuration never results in a
    half-finished test run.
"""

import os

from . import errors
from . import json


# Defaults that can be set in the environment; the command line arguments
# always take precedence.

broker = os.environ.get('AMQPIT_BROKER', 'localhost:5672')
log_level = os.environ.get('AMQPIT_LOG_LEVEL', 'WARNING')


def broker_url(address, queue):
    """ Return the URL proton should open a receiver on: the broker
        *address* (host:port, with or without an amqp:// scheme), a slash,
        and the *queue* name.
    """

    if address is None or address == '':
        address = broker

    if queue is None or queue == '':
        raise errors.ArgumentError('the queue name must be specified')

    address = address.rstrip('/')
    return address + '/' + queue



def expected_total(text):
    """ Parse the expected message count for an AMQP type test. Any integer
        literal Python understands is accepted ('10', '0x0a').
    """

    try:
        total = int(text, 0)
    except (TypeError, ValueError):
        raise errors.ArgumentError('invalid expected message count: ' + repr(text))

    if total < 0:
        raise errors.ArgumentError('expected message count cannot be negative: ' + repr(text))

    return total



def expected_counts(text):
    """ Parse the JSON document mapping each JMS subtype name to the number
        of messages expected for it, for example::

            {"boolean": 2, "byte": 4, "string": 1}

        The order of the keys is significant and is preserved in the
        returned dictionary.
    """

    try:
        counts = json.loads(text)
    except json.DecodeError as e:
        raise errors.ConfigParseError('cannot parse expected counts: ' + str(e))

    if not isinstance(counts, dict):
        raise errors.ConfigParseError('expected counts must be a JSON object, not ' + type(counts).__name__)

    for subtype, count in counts.items():
        if isinstance(count, bool) or not isinstance(count, int):
            raise errors.ConfigParseError('expected count for %s is not an integer: %s' % (repr(subtype), repr(count)))

        if count < 0:
            raise errors.ConfigParseError('expected count for %s is negative: %d' % (repr(subtype), count))

    return counts


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
