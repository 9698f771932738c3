"""
Table-backed stores.

Each repository owns one table and exposes insert/find/update/delete
operations.  Repositories do no validation; constraint violations are
reported with the exceptions from ``core.errors``.
"""

from .account_repository import AccountRepository
from .message_repository import MessageRepository

__all__ = ["AccountRepository", "MessageRepository"]
