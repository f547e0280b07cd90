# app/repositories/order_repo.py
from supabase import Client

# Order row plus its customer and line items, in one PostgREST request
ORDER_WITH_ITEMS_SELECT = """
    *,
    user:users(id, full_name, email),
    order_items(
        id,
        product_id,
        product_name,
        quantity,
        unit_price,
        subtotal
    )
"""


class OrderRepository:
    """
    Data access layer for orders and order_items.

    - Pure PostgREST calls, no FastAPI, no cache.
    - Errors propagate as postgrest.exceptions.APIError.
    """

    def list_with_items(
        self,
        client: Client,
        limit: int | None = None,
    ) -> list[dict]:
        query = (
            client.table("orders")
            .select(ORDER_WITH_ITEMS_SELECT)
            .order("created_at", desc=True)
        )
        if limit is not None:
            query = query.limit(limit)
        return list(query.execute().data or [])

    def update_status(
        self,
        client: Client,
        order_id: str,
        status: str,
    ) -> dict | None:
        """
        Set `status` on exactly one order.

        Returns:
            The updated row, or None if no order has this id.
        """
        response = (
            client.table("orders")
            .update({"status": status})
            .eq("id", order_id)
            .execute()
        )
        rows = response.data or []
        return rows[0] if rows else None
