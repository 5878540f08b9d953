""" Receiver for the AMQP type tests: every message body carries a single
    value of one declared AMQP type. The values are validated against that
    type, turned into canonical tokens, and collected in arrival order.
"""

import logging

from .. import encode
from ..types import AmqpType
from .base import Receiver


logger = logging.getLogger(__name__)


class AmqpReceiver(Receiver):
    """ Receive *expected* messages from *url*, each with a body of the AMQP
        type named by *amqp_type*. The type name is resolved when the
        receiver is created; an unknown name fails immediately, before any
        connection is attempted.

        The collected tokens are available as :attr:`values` once the
        proton container has finished running.

        :ivar values: Canonical tokens, one per accepted message.
        :ivar amqp_type: The declared :class:`amqpit.types.AmqpType`.
    """

    def __init__(self, url, amqp_type, expected):

        Receiver.__init__(self, url, expected)

        self.amqp_type = AmqpType.lookup(amqp_type)
        self.values = list()


    def on_message(self, event):

        message = event.message

        if self.duplicate(message):
            logger.debug('discarding redelivered message id %s', message.id)
            return

        # Messages past the expected count are still counted, but their
        # values are not recorded.

        if self.received < self.expected:
            token = encode.encode(self.amqp_type, message.body)
            self.values.append(token)

        self.received += 1
        self._finish(event)


    def duplicate(self, message):
        """ Return True if *message* is a redelivery of one that was already
            processed. The sender numbers its messages from zero, so any id
            lower than the number of messages processed so far has been seen
            before. Messages without an integer id are never treated as
            duplicates.
        """

        id = message.id

        if id is None:
            return False

        try:
            id = int(id)
        except (TypeError, ValueError):
            return False

        return id < self.received


# end of class AmqpReceiver


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
