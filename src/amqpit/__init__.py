""" Python receiver for the AMQP interoperability tests. Messages are
    received through qpid-proton, their bodies are validated against the
    declared AMQP type or JMS message type, and each value is reduced to a
    canonical text token that can be compared against what the sender was
    asked to send.
"""

# Utility components.

from . import errors
from . import json
from . import config

# Value handling.

from . import types
from . import collection
from . import encode
from . import jms

# Primary public-facing interfaces.

from .types import AmqpType
from .receiver import AmqpReceiver
from .receiver import JmsReceiver

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
