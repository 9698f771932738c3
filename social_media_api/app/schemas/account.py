"""
Pydantic model for accounts.

The same shape is used for registration and login requests and for
the response body.  Passwords are stored and returned verbatim; the
login contract compares them as plain text.
"""

from typing import Optional

from pydantic import BaseModel, Field

from social_media_api.app.core.db import INTEGER_MAX, INTEGER_MIN


class Account(BaseModel):
    """A registered user identity.

    ``account_id`` is assigned by the store and is ``None`` on
    registration and login requests.  ``username`` and ``password``
    are optional at the schema level so a missing field reaches the
    service and is reported as invalid account details rather than a
    framework validation error.
    """

    account_id: Optional[int] = Field(
        None, alias="accountId", ge=INTEGER_MIN, le=INTEGER_MAX, examples=[1]
    )
    username: Optional[str] = Field(None, examples=["bob"])
    password: Optional[str] = Field(None, examples=["pass1"])

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
