from enum import Enum


class ResponseStatus(str, Enum):
    """Lifecycle status of an offer response."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
