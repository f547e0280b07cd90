# app/schemas/notification.py
from datetime import datetime
from typing import Literal

from sqlmodel import SQLModel

NotificationLevel = Literal["success", "error"]


class Notification(SQLModel):
    """
    A single operator-facing message.
    """

    level: NotificationLevel
    message: str
    created_at: datetime
