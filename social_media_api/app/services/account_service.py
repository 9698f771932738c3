"""
Business logic for accounts.

Registration checks that the username is free before checking the
details themselves, so re-registering a taken username is always
reported as a duplicate, even if the new password is too short.  Login
reports a single error kind for an unknown user and for a wrong
password.

Passwords are stored and compared in plain text because the login
contract expects the stored record back verbatim.
"""

import logging
from typing import Union

from social_media_api.app.core.errors import DuplicateUsernameError, ErrorKind, Result
from social_media_api.app.repositories.account_repository import AccountRepository
from social_media_api.app.schemas.account import Account


logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 4


class AccountService:
    """Registration, login and existence probes on top of ``AccountRepository``."""

    def __init__(self, accounts: AccountRepository) -> None:
        self.accounts = accounts

    async def register(self, candidate: Account) -> Result:
        """Create a new account.

        Returns a ``Result`` holding the stored ``Account`` (with its
        assigned id), or failing with ``DUPLICATE_USERNAME`` or
        ``INVALID_ACCOUNT_DETAILS``.
        """
        username = candidate.username or ""
        password = candidate.password or ""

        if self.account_exists(username):
            logger.info("Registration rejected: username already taken")
            return Result.fail(ErrorKind.DUPLICATE_USERNAME)

        if not username.strip() or len(password) < MIN_PASSWORD_LENGTH:
            logger.info("Registration rejected: invalid account details")
            return Result.fail(ErrorKind.INVALID_ACCOUNT_DETAILS)

        try:
            account = self.accounts.insert(Account(username=username, password=password))
        except DuplicateUsernameError:
            # Lost the race against a concurrent registration.
            logger.info("Registration rejected: username taken concurrently")
            return Result.fail(ErrorKind.DUPLICATE_USERNAME)

        logger.info("Registered account %s (%s)", account.account_id, account.username)
        return Result.ok(account)

    async def login(self, credentials: Account) -> Result:
        """Return the stored account matching both username and password."""
        account = None
        if credentials.username is not None and credentials.password is not None:
            account = self.accounts.find_by_credentials(
                credentials.username, credentials.password
            )
        if account is None:
            logger.info("Login rejected")
            return Result.fail(ErrorKind.INVALID_ACCOUNT_DETAILS)
        logger.info("Account %s logged in", account.account_id)
        return Result.ok(account)

    def account_exists(self, key: Union[str, int]) -> bool:
        """Probe by username (``str``) or by account id (``int``)."""
        if isinstance(key, str):
            return self.accounts.find_by_username(key) is not None
        return self.accounts.find_by_id(key) is not None
