# app/schemas/order.py
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

# Statuses the dashboard knows how to display. The store's own check
# constraint decides what is actually accepted on update.
OrderStatus = Literal["pending", "processing", "shipped", "delivered", "cancelled"]

DELIVERED_STATUS: OrderStatus = "delivered"


class OrderStatusUpdate(SQLModel):
    """
    Admin payload to change order status.
    """

    model_config = ConfigDict(extra="forbid")

    status: str

    @field_validator("status")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("status cannot be empty")
        return v
