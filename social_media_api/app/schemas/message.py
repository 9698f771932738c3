"""
Pydantic models for messages.

``Message`` is both the creation payload and the response body.
``MessageTextUpdate`` is the PATCH body; only the text can change.
"""

from typing import Optional

from pydantic import BaseModel, Field

from social_media_api.app.core.db import INTEGER_MAX, INTEGER_MIN


class Message(BaseModel):
    """A short text post attributed to an account."""

    message_id: Optional[int] = Field(
        None, alias="messageId", ge=INTEGER_MIN, le=INTEGER_MAX, examples=[1]
    )
    posted_by: Optional[int] = Field(
        None, alias="postedBy", ge=INTEGER_MIN, le=INTEGER_MAX, examples=[1]
    )
    message_text: Optional[str] = Field(None, alias="messageText", examples=["hi"])
    # Carried through as given; only bounded to what the store can hold.
    time_posted_epoch: Optional[int] = Field(
        None,
        alias="timePostedEpoch",
        ge=INTEGER_MIN,
        le=INTEGER_MAX,
        examples=[1669947792],
    )

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class MessageTextUpdate(BaseModel):
    """Schema for replacing the text of an existing message.

    Any other field sent by the client is ignored.
    """

    message_text: Optional[str] = Field(None, alias="messageText", examples=["edited"])

    model_config = {
        "populate_by_name": True,
    }
