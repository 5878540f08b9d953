""" Receiver for the JMS message type tests. The sender emits messages of a
    single JMS message class (map, bytes, stream, text, ...), grouped by
    subtype in a fixed order; the test harness says how many messages to
    expect for each subtype. The receiver decodes each message according to
    its ``x-opt-jms-msg-type`` annotation and the current subtype, and
    moves on to the next subtype once the current one has its quota.
"""

import logging

from .. import jms
from .. import errors
from .base import Receiver


logger = logging.getLogger(__name__)


class JmsReceiver(Receiver):
    """ Receive messages from *url* for a JMS message class named by
        *jms_type* (JMS_MAPMESSAGE_TYPE, for example). *counts* maps subtype
        names to the number of messages expected for that subtype; its
        iteration order is the order the sender uses, and is the order in
        which the subtypes are cycled through here.

        :ivar values: Completed subtypes, mapping each subtype name to the
                      list of tokens received for it.
        :ivar pending: Tokens received so far for the current subtype.
        :ivar subtypes: Subtype names, in cycling order.
        :ivar index: Position of the current subtype in :attr:`subtypes`.
    """

    def __init__(self, url, jms_type, counts):

        counts = dict(counts)
        expected = sum(counts.values())

        Receiver.__init__(self, url, expected)

        self.jms_type = jms_type
        self.kind = jms.kind(jms_type)
        self.counts = counts
        self.subtypes = list(counts.keys())
        self.index = 0
        self.pending = list()
        self.values = dict()

        self.decoders = {
            jms.Kind.MESSAGE: self.receive_message,
            jms.Kind.OBJECT: self.receive_object,
            jms.Kind.MAP: self.receive_map,
            jms.Kind.BYTES: self.receive_bytes,
            jms.Kind.STREAM: self.receive_stream,
            jms.Kind.TEXT: self.receive_text,
        }


    @property
    def subtype(self):
        """ The name of the current subtype, or None if every subtype has
            already been completed.
        """

        try:
            return self.subtypes[self.index]
        except IndexError:
            return None


    def on_message(self, event):

        if self.received >= self.expected:
            return

        message = event.message
        kind = jms.annotated_kind(message)

        try:
            decoder = self.decoders[kind]
        except KeyError:
            logger.debug('ignoring message with JMS message type annotation %s', repr(kind))
        else:
            decoder(message)

        self.advance()
        self.received += 1
        self._finish(event)


    def advance(self):
        """ If the current subtype has received its expected number of
            values, file them under the subtype name and move on to the
            next subtype.
        """

        subtype = self.subtype

        if subtype is None:
            return

        if len(self.pending) >= self.counts[subtype]:
            logger.debug('subtype %s complete with %d values', subtype, len(self.pending))
            self.values[subtype] = self.pending
            self.pending = list()
            self.index += 1


    def require(self, kind):
        """ Raise :class:`amqpit.errors.IncorrectMessageBodyTypeError` if
            this receiver was not configured for messages of *kind*.
        """

        if self.kind != kind:
            raise errors.IncorrectMessageBodyTypeError(self.jms_type, jms.names[kind])


    def receive_message(self, message):
        # Plain JMS messages carry no body; their properties are not
        # compared.
        pass


    def receive_object(self, message):
        # Serialized Java objects are not compared.
        pass


    def receive_map(self, message):
        self.require(jms.Kind.MAP)
        self.pending.extend(jms.map_body(self.subtype, message.body))


    def receive_bytes(self, message):
        self.require(jms.Kind.BYTES)
        self.pending.append(jms.bytes_body(self.subtype, message.body))


    def receive_stream(self, message):
        self.require(jms.Kind.STREAM)
        self.pending.extend(jms.stream_body(self.subtype, message.body))


    def receive_text(self, message):
        self.require(jms.Kind.TEXT)
        self.pending.append(jms.text_body(message.body))


# end of class JmsReceiver


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
