""" Proton message handlers implementing the two receivers used by the
    interoperability tests: :class:`AmqpReceiver` for single-valued AMQP
    type tests, and :class:`JmsReceiver` for the JMS message type tests.
"""

from .amqp import AmqpReceiver
from .jms import JmsReceiver

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
