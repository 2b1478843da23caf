"""Errors raised by the notification use cases.

They subclass :class:`ValueError` so callers that only care about "the input
was rejected" can keep catching the builtin.
"""

from __future__ import annotations


class ValidationError(ValueError):
    """A notification or a notification query is malformed."""


class NotFoundError(ValueError):
    """The notification does not exist or is not addressed to the caller."""


class InvalidAuthentication(ValueError):
    """A realtime connection tried to authenticate without a valid role."""


class DeliveryFailure(RuntimeError):
    """The store or the transport failed while fanning out an event.

    Only ever logged; it never reaches the HTTP caller.
    """


__all__ = [
    "ValidationError",
    "NotFoundError",
    "InvalidAuthentication",
    "DeliveryFailure",
]
