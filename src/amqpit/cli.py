""" Command line entry points for the receivers. The test harness invokes
    these with positional arguments only::

        amqpit-amqp-receiver <broker> <queue> <amqp type> <expected count>
        amqpit-jms-receiver <broker> <queue> <JMS message type> <JSON counts>

    On success the type argument is echoed on one line, followed by the
    received values as a JSON document, and the exit status is zero. Any
    failure is reported on stderr and the exit status is non-zero.
"""

import argparse
import logging
import sys

import proton.reactor

from . import config
from . import errors
from . import json
from .receiver import AmqpReceiver
from .receiver import JmsReceiver


logger = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """ An :class:`argparse.ArgumentParser` that raises
        :class:`amqpit.errors.ArgumentError` instead of exiting, so that
        bad arguments are reported the same way as every other failure.
    """

    def error(self, message):
        raise errors.ArgumentError(message)


# end of class ArgumentParser



def amqp_arguments():

    parser = ArgumentParser(prog='amqpit-amqp-receiver',
                description='Receive AMQP typed values and report them as canonical tokens.')

    parser.add_argument('broker', help='broker address, host:port')
    parser.add_argument('queue', help='queue or topic name')
    parser.add_argument('amqp_type', help='AMQP type name of the message bodies')
    parser.add_argument('expected', help='number of messages to receive')

    return parser



def jms_arguments():

    parser = ArgumentParser(prog='amqpit-jms-receiver',
                description='Receive JMS messages and report their values by subtype.')

    parser.add_argument('broker', help='broker address, host:port')
    parser.add_argument('queue', help='queue or topic name')
    parser.add_argument('jms_type', help='JMS message type, for example JMS_MAPMESSAGE_TYPE')
    parser.add_argument('counts', help='JSON object mapping subtype names to expected message counts')

    return parser



def receive_amqp(argv=None, container=proton.reactor.Container):
    """ Parse *argv*, run an :class:`amqpit.receiver.AmqpReceiver` to
        completion, and return the descriptor line and the received values.
    """

    arguments = amqp_arguments().parse_args(argv)

    url = config.broker_url(arguments.broker, arguments.queue)
    expected = config.expected_total(arguments.expected)
    receiver = AmqpReceiver(url, arguments.amqp_type, expected)

    container(receiver).run()
    return arguments.amqp_type, receiver.values



def receive_jms(argv=None, container=proton.reactor.Container):
    """ Parse *argv*, run an :class:`amqpit.receiver.JmsReceiver` to
        completion, and return the descriptor line and the received values.
        The expected counts are parsed before any connection is made.
    """

    arguments = jms_arguments().parse_args(argv)

    url = config.broker_url(arguments.broker, arguments.queue)
    counts = config.expected_counts(arguments.counts)
    receiver = JmsReceiver(url, arguments.jms_type, counts)

    container(receiver).run()
    return arguments.jms_type, receiver.values



def report(descriptor, values, stream=None):
    """ Write the *descriptor* line and the JSON encoded *values*.
    """

    if stream is None:
        stream = sys.stdout

    stream.write(descriptor + '\n')
    stream.write(json.dumps(values).decode() + '\n')
    stream.flush()



def run(name, method, argv=None):
    """ Invoke *method* and report its results, returning the process exit
        status. *name* prefixes any error message.
    """

    level = logging.getLevelName(config.log_level.upper())

    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(stream=sys.stderr, level=level,
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    try:
        descriptor, values = method(argv)
    except Exception as e:
        logger.debug('%s failed', name, exc_info=True)
        sys.stderr.write('%s error: %s\n' % (name, e))
        return 1

    report(descriptor, values)
    return 0



def amqp_main():
    sys.exit(run('AmqpReceiver', receive_amqp))


def jms_main():
    sys.exit(run('JmsReceiver', receive_jms))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
