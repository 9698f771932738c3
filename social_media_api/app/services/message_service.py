"""
Service layer for messages.

Posting checks the text and that the author exists; updating checks
the text and that the message exists.  Reads and deletes never fail:
a missing message is reported as ``None`` and an author without posts
(or an unknown author) yields an empty list.

There is no ownership check.  Any caller that knows a message id may
update or delete it.
"""

import logging
from typing import List, Optional

from social_media_api.app.core.errors import ErrorKind, Result, UnknownAuthorError
from social_media_api.app.repositories.account_repository import AccountRepository
from social_media_api.app.repositories.message_repository import MessageRepository
from social_media_api.app.schemas.message import Message


logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 255


def is_valid_text(text: Optional[str]) -> bool:
    """Text must be non-blank and at most ``MAX_MESSAGE_LENGTH`` characters."""
    return bool(text) and bool(text.strip()) and len(text) <= MAX_MESSAGE_LENGTH


class MessageService:
    """Message CRUD on top of ``MessageRepository`` and ``AccountRepository``."""

    def __init__(self, messages: MessageRepository, accounts: AccountRepository) -> None:
        self.messages = messages
        self.accounts = accounts

    async def post_message(self, candidate: Message) -> Result:
        """Store a new message and return it with its assigned id.

        Fails with ``INVALID_MESSAGE`` when the text is blank or too
        long, or when ``posted_by`` does not name an existing account.
        """
        if (
            not is_valid_text(candidate.message_text)
            or candidate.posted_by is None
            or self.accounts.find_by_id(candidate.posted_by) is None
        ):
            logger.info("Message rejected for author %s", candidate.posted_by)
            return Result.fail(ErrorKind.INVALID_MESSAGE)

        try:
            message = self.messages.insert(
                Message(
                    posted_by=candidate.posted_by,
                    message_text=candidate.message_text,
                    time_posted_epoch=candidate.time_posted_epoch,
                )
            )
        except UnknownAuthorError:
            logger.warning("Author %s vanished before insert", candidate.posted_by)
            return Result.fail(ErrorKind.INVALID_MESSAGE)

        logger.info("Posted message %s by account %s", message.message_id, message.posted_by)
        return Result.ok(message)

    async def get_message(self, message_id: int) -> Optional[Message]:
        return self.messages.find_by_id(message_id)

    async def get_all_messages(self) -> List[Message]:
        return self.messages.find_all()

    async def get_messages_by_account(self, account_id: int) -> List[Message]:
        return self.messages.find_by_author(account_id)

    async def delete_message(self, message_id: int) -> Optional[Message]:
        """Remove a message and return it; ``None`` if the id was unknown."""
        deleted = self.messages.delete_by_id(message_id)
        if deleted is not None:
            logger.info("Deleted message %s", message_id)
        return deleted

    async def update_message_text(self, message_id: int, new_text: Optional[str]) -> Result:
        """Replace only the text of an existing message.

        On success the ``Result`` value is the number of updated rows
        (always 1).  Fails with ``INVALID_MESSAGE`` if the id is unknown
        or the new text is blank or too long.
        """
        if self.messages.find_by_id(message_id) is None or not is_valid_text(new_text):
            logger.info("Update of message %s rejected", message_id)
            return Result.fail(ErrorKind.INVALID_MESSAGE)

        if self.messages.update_text(message_id, new_text) is None:
            # Deleted between the lookup and the update.
            return Result.fail(ErrorKind.INVALID_MESSAGE)

        logger.info("Updated text of message %s", message_id)
        return Result.ok(1)
