"""Outcome of a single dispatch attempt."""

from enum import Enum, auto


class ProcessOutcome(Enum):
    """Result of one attempt to run a pending process.

    DELIVERED: transport succeeded and the handler received the bytes
    TRANSPORT_FAILURE: transport failed; a retry has been scheduled
    RESPONSE_REJECTED: observer declined the response; handler not called
    """

    DELIVERED = auto()
    TRANSPORT_FAILURE = auto()
    RESPONSE_REJECTED = auto()
