# app/schemas/stats.py
from pydantic import ConfigDict
from sqlmodel import SQLModel


class DailySales(SQLModel):
    """
    Summed order totals for one formatted calendar day ("Jan 1").
    """
    model_config = ConfigDict(extra="forbid")

    date: str
    total: float


class QueryFailure(SQLModel):
    """
    A dashboard metric that could not be computed.
    """
    model_config = ConfigDict(extra="forbid")

    metric: str
    message: str


class DashboardStats(SQLModel):
    """
    Full payload for the admin dashboard cards and chart.

    A metric is None when its query failed; the reason is listed in
    `failures`. A real zero is always 0, never None.
    """
    model_config = ConfigDict(extra="forbid")

    total_orders: int | None
    total_users: int | None
    total_products: int | None
    featured_products: int | None
    new_products: int | None
    low_stock_products: int | None
    total_revenue: float | None
    chart_data: list[DailySales] | None
    failures: list[QueryFailure] = []
    is_partial: bool = False
