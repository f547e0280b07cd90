# app/repositories/analytics_repo.py
from datetime import date
from typing import Any

from supabase import Client


class AnalyticsRepository:
    """
    Thin wrappers around the analytics RPC functions defined in the
    Supabase project (see the `get_*` SQL functions).

    - Returns raw JSON rows; mapping to schemas happens in the service.
    - Errors propagate as postgrest.exceptions.APIError.
    """

    def _rpc(self, client: Client, fn: str, params: dict[str, Any] | None = None) -> Any:
        return client.rpc(fn, params or {}).execute().data

    def sales_by_period(
        self,
        client: Client,
        period: str,
        start_date: date,
    ) -> list[dict]:
        data = self._rpc(
            client,
            "get_sales_by_period",
            {"p_period": period, "p_start_date": start_date.isoformat()},
        )
        return list(data or [])

    def top_selling_products(self, client: Client, limit: int) -> list[dict]:
        data = self._rpc(client, "get_top_selling_products", {"p_limit": limit})
        return list(data or [])

    def sales_by_category(self, client: Client) -> list[dict]:
        data = self._rpc(client, "get_sales_by_category")
        return list(data or [])

    def conversion_metrics(self, client: Client) -> dict | None:
        """
        The function returns a single JSON object; depending on how it is
        declared PostgREST may wrap it in a one-element array.
        """
        data = self._rpc(client, "get_conversion_metrics")
        if isinstance(data, list):
            return data[0] if data else None
        return data

    def recent_activity(self, client: Client, limit: int) -> list[dict]:
        data = self._rpc(client, "get_recent_activity", {"p_limit": limit})
        return list(data or [])
