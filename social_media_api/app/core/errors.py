"""
Error kinds and the result type returned by the service layer.

Services never raise for client-correctable conditions.  A fallible
operation returns a ``Result`` carrying either the produced value or
an ``ErrorKind``; the API layer turns the kind into a status code.
Lookups that may find nothing return ``None`` instead, because absence
is not an error.

The two exception classes below are raised only by the repositories
when a database constraint rejects a write.  The services catch them
and convert them into the matching ``ErrorKind``.
"""

from enum import Enum
from typing import Any, NamedTuple, Optional


class ErrorKind(str, Enum):
    DUPLICATE_USERNAME = "duplicate_username"
    INVALID_ACCOUNT_DETAILS = "invalid_account_details"
    INVALID_MESSAGE = "invalid_message"


class Result(NamedTuple):
    """Outcome of a service call: exactly one of ``value``/``error`` is set."""

    value: Any = None
    error: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, value: Any = None) -> "Result":
        return cls(value=value, error=None)

    @classmethod
    def fail(cls, kind: ErrorKind) -> "Result":
        return cls(value=None, error=kind)

    @property
    def failed(self) -> bool:
        return self.error is not None


class DuplicateUsernameError(Exception):
    """The UNIQUE constraint on ``account.username`` rejected an insert."""


class UnknownAuthorError(Exception):
    """The foreign key on ``message.posted_by`` rejected an insert."""
