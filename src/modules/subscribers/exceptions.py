"""Subscriber domain exceptions.

Only look-up misses are exceptional.  Rejected link attempts are
ordinary outcomes and come back as ``LinkResult`` values instead.
"""

from __future__ import annotations

from modules.subscribers.constants import SUBSCRIBER_NOT_FOUND


class SubscriberNotFound(Exception):
    """The requested subscriber does not exist."""

    def __init__(self, id: str) -> None:
        self.id = id
        super().__init__(SUBSCRIBER_NOT_FOUND.format(id=id))
