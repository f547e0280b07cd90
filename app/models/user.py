# app/models/user.py
import uuid

from sqlmodel import SQLModel


class UserSummary(SQLModel):
    """
    Customer profile fields embedded into order listings.

    Matches remote table `users` (subset):
      - id, full_name, email
    """

    id: uuid.UUID
    full_name: str | None = None
    email: str | None = None
