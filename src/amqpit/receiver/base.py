"""Common plumbing for the proton-driven receivers.

The proton container owns the run loop and calls into the handler one event
at a time on a single thread; nothing here blocks or locks.
"""

from __future__ import annotations

import logging

from proton.handlers import MessagingHandler


logger = logging.getLogger(__name__)


class Receiver(MessagingHandler):
    """Open one receiving link to *url* and close it, along with the
    connection, once :attr:`expected` messages have been processed."""

    def __init__(self, url: str, expected: int):
        MessagingHandler.__init__(self)

        self.url = url
        self.expected = int(expected)
        self.received = 0
        self.done = False

    def on_start(self, event) -> None:
        logger.debug("opening receiver link to %s", self.url)
        event.container.create_receiver(self.url)

    def _finish(self, event) -> None:
        """Close the receiving link and the connection once the expected
        number of messages have been processed. The container's run loop
        returns when the connection is closed."""

        if self.received < self.expected or self.done:
            return

        logger.debug("%d of %d messages received, closing %s",
                     self.received, self.expected, self.url)

        event.receiver.close()
        event.connection.close()
        self.done = True
