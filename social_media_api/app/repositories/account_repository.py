"""Store for the ``account`` table."""

import sqlite3
from typing import Optional

from social_media_api.app.core.db import get_cursor
from social_media_api.app.core.errors import DuplicateUsernameError
from social_media_api.app.schemas.account import Account


class AccountRepository:
    """Insert and look up accounts.

    Lookups use exact, case-sensitive equality on ``username`` and
    ``password``.
    """

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def insert(self, account: Account) -> Account:
        """Persist ``account`` and return it with its assigned id.

        Raises ``DuplicateUsernameError`` if the username is taken, which
        can happen when two registrations race past the service check.
        """
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    "INSERT INTO account (username, password) VALUES (?, ?)",
                    (account.username, account.password),
                )
                account_id = cursor.lastrowid
        except sqlite3.IntegrityError as exc:
            raise DuplicateUsernameError(account.username) from exc
        return Account(
            account_id=account_id,
            username=account.username,
            password=account.password,
        )

    def find_by_id(self, account_id: int) -> Optional[Account]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT account_id, username, password FROM account WHERE account_id = ?",
                (account_id,),
            ).fetchone()
        return self._row_to_account(row) if row else None

    def find_by_username(self, username: str) -> Optional[Account]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT account_id, username, password FROM account WHERE username = ?",
                (username,),
            ).fetchone()
        return self._row_to_account(row) if row else None

    def find_by_credentials(self, username: str, password: str) -> Optional[Account]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT account_id, username, password FROM account"
                " WHERE username = ? AND password = ?",
                (username, password),
            ).fetchone()
        return self._row_to_account(row) if row else None

    @staticmethod
    def _row_to_account(row: sqlite3.Row) -> Account:
        return Account(
            account_id=row["account_id"],
            username=row["username"],
            password=row["password"],
        )
