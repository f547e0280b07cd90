# app/models/order.py
import uuid
from datetime import datetime

from sqlmodel import SQLModel, Field

from app.models.user import UserSummary


class OrderItem(SQLModel):
    """
    Line item inside an order.

    Matches remote table `order_items`:
      - id, product_id, product_name, quantity, unit_price, subtotal
    """

    id: uuid.UUID

    product_id: uuid.UUID | None = Field(
        default=None,
        description="FK to products.id (null if the product was deleted)",
    )

    # Snapshot of the product name at checkout time
    product_name: str = Field(
        description="Product name when the order was placed",
    )

    quantity: int = Field(
        gt=0,
        description="Quantity ordered (>=1)",
    )

    unit_price: float = Field(
        description="Unit price at time of order",
    )

    subtotal: float = Field(
        description="quantity * unit_price, computed by the store",
    )


class Order(SQLModel):
    """
    Customer order as stored in Supabase.

    Matches remote table `orders` (dashboard subset):
      - id, order_number, user_id, status, total, created_at
    """

    id: uuid.UUID

    order_number: str | None = Field(
        default=None,
        description="Human-readable order number",
    )

    user_id: uuid.UUID | None = Field(
        default=None,
        description="FK to users.id",
    )

    # pending | processing | shipped | delivered | cancelled
    status: str | None = Field(
        default="pending",
        description="Order status lifecycle",
    )

    total: float = Field(
        description="Final amount for this order",
    )

    created_at: datetime | None = Field(
        default=None,
        description="Creation timestamp",
    )


class OrderWithItems(Order):
    """
    Order joined with its customer and line items, as listed on the
    orders screen.
    """

    user: UserSummary | None = None
    order_items: list[OrderItem] = []
