import proton
import pytest

import amqpit


def wire(message):
    """ Return *message* as the receiving side would see it: encoded and
        decoded again by proton, so the body carries the Python types the
        proton decoder actually produces.
    """

    received = proton.Message()
    received.decode(message.encode())
    return received


class Endpoint:
    """ Stand-in for a proton link or connection; records close() calls.
    """

    def __init__(self):
        self.closed = 0

    def close(self):
        self.closed += 1


class Event:
    """ Stand-in for the proton event handed to on_message().
    """

    def __init__(self, message, receiver, connection):
        self.message = message
        self.receiver = receiver
        self.connection = connection


class Delivery:
    """ Feed messages to a receiver the way the proton container would,
        sharing one link and one connection across all of them. Every
        message goes through the proton codec first.
    """

    def __init__(self, handler):
        self.handler = handler
        self.receiver = Endpoint()
        self.connection = Endpoint()

    def __call__(self, message):
        event = Event(wire(message), self.receiver, self.connection)
        self.handler.on_message(event)

    def closed(self):
        return self.receiver.closed > 0 and self.connection.closed > 0


@pytest.fixture
def deliver():
    return Delivery


def jms_message(kind, body, id=None):
    annotations = {proton.symbol(amqpit.jms.annotation_key): proton.byte(kind)}
    return proton.Message(body=body, id=id, annotations=annotations)


@pytest.fixture
def jms():
    return jms_message

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
