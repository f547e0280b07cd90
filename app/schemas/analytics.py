# app/schemas/analytics.py
# Plain pydantic models: SQLModel reserves the `metadata` attribute that
# get_recent_activity rows carry.
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel


class SalesPeriod(str, Enum):
    """
    Window accepted by get_sales_by_period.
    """

    week = "week"
    month = "month"
    year = "year"


class SalesByPeriodRow(BaseModel):
    period_label: str
    total_sales: float
    order_count: int


class TopSellingProduct(BaseModel):
    product_id: uuid.UUID
    product_name: str
    product_image: str | None = None
    total_sold: int
    total_revenue: float


class CategorySales(BaseModel):
    category_name: str
    total_sales: float
    percentage: float


class ConversionMetrics(BaseModel):
    """
    Single-row summary returned by get_conversion_metrics.

    Every field defaults to zero so an empty store still yields a payload.
    """

    total_orders: int = 0
    total_revenue: float = 0.0
    average_order_value: float = 0.0
    orders_today: int = 0
    revenue_today: float = 0.0
    pending_orders: int = 0
    processing_orders: int = 0


class RecentActivity(BaseModel):
    activity_type: Literal["order", "review"]
    description: str
    created_at: datetime
    metadata: dict[str, Any] | None = None
