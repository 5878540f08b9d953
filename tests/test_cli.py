import io

import proton
import pytest

import amqpit
import amqpit.cli


class Container:
    """ Stand-in for :class:`proton.reactor.Container` that hands a fixed
        list of messages to the handler instead of connecting anywhere.
    """

    messages = ()

    def __init__(self, handler):
        self.handler = handler

    def run(self):

        class Endpoint:
            def close(self):
                pass

        class Event:
            receiver = Endpoint()
            connection = Endpoint()

        for message in self.messages:
            event = Event()
            event.message = message
            self.handler.on_message(event)


def container(*messages):

    class Loaded(Container):
        pass

    Loaded.messages = messages
    return Loaded


def test_receive_amqp():

    loaded = container(proton.Message(id=0, body=proton.ushort(1)),
                       proton.Message(id=1, body=proton.ushort(0xffff)))

    argv = ['localhost:5672', 'queue', 'ushort', '2']
    descriptor, values = amqpit.cli.receive_amqp(argv, container=loaded)

    assert descriptor == 'ushort'
    assert values == ['0x0001', '0xffff']


def test_receive_jms(jms):

    loaded = container(jms(amqpit.jms.Kind.MAP, {'int000': proton.int32(1)}))

    argv = ['localhost:5672', 'queue', 'JMS_MAPMESSAGE_TYPE', '{"int": 1}']
    descriptor, values = amqpit.cli.receive_jms(argv, container=loaded)

    assert descriptor == 'JMS_MAPMESSAGE_TYPE'
    assert values == {'int': ['0x00000001']}


def test_argument_count():

    with pytest.raises(amqpit.errors.ArgumentError):
        amqpit.cli.receive_amqp(['localhost:5672', 'queue', 'int'])

    with pytest.raises(amqpit.errors.ArgumentError):
        amqpit.cli.receive_jms(['localhost:5672', 'queue', 'JMS_MAPMESSAGE_TYPE', '{}', 'extra'])


def test_bad_counts_before_connecting():

    def unreachable(handler):
        raise AssertionError('no connection should be attempted')

    argv = ['localhost:5672', 'queue', 'JMS_MAPMESSAGE_TYPE', '{"int": ']

    with pytest.raises(amqpit.errors.ConfigParseError):
        amqpit.cli.receive_jms(argv, container=unreachable)


def test_report():

    stream = io.StringIO()
    amqpit.cli.report('JMS_TEXTMESSAGE_TYPE', {'text': ['a', 'b']}, stream)

    lines = stream.getvalue().splitlines()
    assert lines[0] == 'JMS_TEXTMESSAGE_TYPE'
    assert amqpit.json.loads(lines[1]) == {'text': ['a', 'b']}


def test_run(capsys):

    def succeed(argv):
        return 'string', ['one']

    def fail(argv):
        raise amqpit.errors.IncorrectMessageBodyTypeError('string', 'int')

    assert amqpit.cli.run('AmqpReceiver', succeed) == 0

    captured = capsys.readouterr()
    assert captured.out.splitlines() == ['string', '["one"]']

    assert amqpit.cli.run('AmqpReceiver', fail) == 1

    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.startswith('AmqpReceiver error: ')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
