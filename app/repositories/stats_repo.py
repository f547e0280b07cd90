# app/repositories/stats_repo.py
from datetime import datetime

from supabase import Client

from app.schemas.order import DELIVERED_STATUS

# Variants at or below this many units count as low stock
LOW_STOCK_THRESHOLD = 5


class StatsRepository:
    """
    Read-only queries for the admin dashboard cards and chart.

    Every method issues exactly one PostgREST request. Failures raise
    postgrest.exceptions.APIError; the service decides what to do with them.
    """

    def _count(self, client: Client, table: str, **filters) -> int:
        # head=True => only the Content-Range count comes back, no rows
        query = client.table(table).select("*", count="exact", head=True)
        for column, value in filters.items():
            query = query.eq(column, value)
        response = query.execute()
        return int(response.count or 0)

    def count_orders(self, client: Client) -> int:
        return self._count(client, "orders")

    def count_users(self, client: Client) -> int:
        return self._count(client, "users")

    def count_products(self, client: Client) -> int:
        return self._count(client, "products")

    def count_featured_products(self, client: Client) -> int:
        return self._count(client, "products", is_featured=True)

    def count_new_products(self, client: Client) -> int:
        return self._count(client, "products", is_new=True)

    def count_low_stock_variants(self, client: Client) -> int:
        response = (
            client.table("product_variants")
            .select("*", count="exact", head=True)
            .lte("stock_quantity", LOW_STOCK_THRESHOLD)
            .execute()
        )
        return int(response.count or 0)

    def delivered_order_totals(self, client: Client) -> list[dict]:
        """
        `total` of every delivered order.
        """
        response = (
            client.table("orders")
            .select("total")
            .eq("status", DELIVERED_STATUS)
            .execute()
        )
        return list(response.data or [])

    def orders_between(
        self,
        client: Client,
        start: datetime,
        end: datetime,
    ) -> list[dict]:
        """
        `created_at` and `total` of orders created in [start, end],
        oldest first.
        """
        response = (
            client.table("orders")
            .select("created_at, total")
            .gte("created_at", start.isoformat())
            .lte("created_at", end.isoformat())
            .order("created_at")
            .execute()
        )
        return list(response.data or [])
