"""Inbox message entity model."""

from __future__ import annotations

from datetime import datetime

from sqlmodel import Field

from ..base import Base, new_id, utc_now


class InboxMessage(Base, table=True):
    """Notification shown in the player's inbox.

    Table: inbox_messages
    """

    __tablename__ = "inbox_messages"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    user_id: str = Field(index=True, max_length=36)
    subject: str = Field(max_length=255)
    content: str
    message_type: str = Field(max_length=50)
    priority: str = Field(default="normal", max_length=20)
    is_read: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now)
