"""Precondition failures raised by the string-list core."""

from __future__ import annotations


class PreconditionError(AssertionError):
    """A caller broke an operation's contract (null argument, bad index, …).

    Never raised for recoverable conditions; callers are not expected to catch it.
    """


def require(condition: object, message: str) -> None:
    if not condition:
        raise PreconditionError(message)
