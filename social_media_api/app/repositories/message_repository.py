"""
Store for the ``message`` table.

All queries use parameterized statements.  ``find_all`` and
``find_by_author`` return rows in insertion (id) order.
"""

import sqlite3
from typing import List, Optional

from social_media_api.app.core.db import get_cursor
from social_media_api.app.core.errors import UnknownAuthorError
from social_media_api.app.schemas.message import Message


_COLUMNS = "message_id, posted_by, message_text, time_posted_epoch"


class MessageRepository:
    """CRUD operations on messages."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def insert(self, message: Message) -> Message:
        """Persist ``message`` and return it with its assigned id.

        Raises ``UnknownAuthorError`` if ``posted_by`` does not reference
        an existing account.
        """
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    "INSERT INTO message (posted_by, message_text, time_posted_epoch)"
                    " VALUES (?, ?, ?)",
                    (message.posted_by, message.message_text, message.time_posted_epoch),
                )
                message_id = cursor.lastrowid
        except sqlite3.IntegrityError as exc:
            raise UnknownAuthorError(message.posted_by) from exc
        return Message(
            message_id=message_id,
            posted_by=message.posted_by,
            message_text=message.message_text,
            time_posted_epoch=message.time_posted_epoch,
        )

    def find_by_id(self, message_id: int) -> Optional[Message]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM message WHERE message_id = ?",
                (message_id,),
            ).fetchone()
        return self._row_to_message(row) if row else None

    def find_all(self) -> List[Message]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM message ORDER BY message_id"
            ).fetchall()
        return [self._row_to_message(row) for row in rows]

    def find_by_author(self, account_id: int) -> List[Message]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM message WHERE posted_by = ? ORDER BY message_id",
                (account_id,),
            ).fetchall()
        return [self._row_to_message(row) for row in rows]

    def update_text(self, message_id: int, text: str) -> Optional[Message]:
        """Replace the text of a message and return the updated record.

        Returns ``None`` when no message has this id.  Other columns
        are left untouched.
        """
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "UPDATE message SET message_text = ? WHERE message_id = ?",
                (text, message_id),
            )
            if cursor.rowcount == 0:
                return None
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM message WHERE message_id = ?",
                (message_id,),
            ).fetchone()
        return self._row_to_message(row)

    def delete_by_id(self, message_id: int) -> Optional[Message]:
        """Delete a message and return the removed record, or ``None``."""
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM message WHERE message_id = ?",
                (message_id,),
            ).fetchone()
            if not row:
                return None
            cursor.execute("DELETE FROM message WHERE message_id = ?", (message_id,))
        return self._row_to_message(row)

    @staticmethod
    def _row_to_message(row: sqlite3.Row) -> Message:
        return Message(
            message_id=row["message_id"],
            posted_by=row["posted_by"],
            message_text=row["message_text"],
            time_posted_epoch=row["time_posted_epoch"],
        )
