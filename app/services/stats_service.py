# app/services/stats_service.py
import asyncio
import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from functools import partial
from typing import Any, Callable, Iterable
from zoneinfo import ZoneInfo

from supabase import Client

from app.repositories.stats_repo import StatsRepository
from app.schemas.stats import DailySales, DashboardStats, QueryFailure

logger = logging.getLogger(__name__)

# Trailing window shown on the dashboard sales chart
SALES_WINDOW = timedelta(days=7)


def parse_timestamp(raw: str | datetime) -> datetime:
    """
    Parse a PostgREST timestamp; naive values are taken as UTC.
    """
    value = raw if isinstance(raw, datetime) else datetime.fromisoformat(raw)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def format_day_label(moment: datetime, tz: ZoneInfo) -> str:
    """
    Short chart label for the calendar day of `moment` in `tz`, e.g. "Jan 1".
    """
    local = moment.astimezone(tz)
    return f"{local:%b} {local.day}"


def sum_totals(rows: Iterable[dict[str, Any]]) -> float:
    """
    Sum the `total` column; missing or null totals count as zero.
    """
    revenue = Decimal("0")
    for row in rows:
        value = row.get("total")
        if value is not None:
            revenue += Decimal(str(value))
    return float(revenue)


def bucket_daily_sales(
    rows: Iterable[dict[str, Any]],
    tz: ZoneInfo,
) -> list[DailySales]:
    """
    Reduce chronologically ordered orders into one bucket per formatted day.

    Buckets keep first-seen order; rows sharing a label are summed.
    """
    buckets: dict[str, Decimal] = {}
    for row in rows:
        label = format_day_label(parse_timestamp(row["created_at"]), tz)
        value = row.get("total")
        buckets.setdefault(label, Decimal("0"))
        if value is not None:
            buckets[label] += Decimal(str(value))
    return [DailySales(date=label, total=float(total)) for label, total in buckets.items()]


def _error_message(exc: Exception) -> str:
    # postgrest APIError carries the upstream message separately
    return getattr(exc, "message", None) or str(exc) or exc.__class__.__name__


class StatsService:
    """
    Orchestrates aggregated admin dashboard statistics.

    All sub-queries are independent and run concurrently in worker
    threads. A failing sub-query never aborts the others: its metric is
    returned as None and the reason is listed in `failures`.
    """

    def __init__(self, repo: StatsRepository, timezone_name: str = "UTC"):
        self.repo = repo
        self.tz = ZoneInfo(timezone_name)

    async def get_dashboard_stats(
        self,
        client: Client,
        now: datetime | None = None,
    ) -> DashboardStats:
        # The chart window is anchored to the moment of this call
        if now is None:
            now = datetime.now(timezone.utc)
        since = now - SALES_WINDOW

        queries: dict[str, Callable[[], Any]] = {
            "total_orders": partial(self.repo.count_orders, client),
            "total_users": partial(self.repo.count_users, client),
            "total_products": partial(self.repo.count_products, client),
            "featured_products": partial(self.repo.count_featured_products, client),
            "new_products": partial(self.repo.count_new_products, client),
            "low_stock_products": partial(self.repo.count_low_stock_variants, client),
            "total_revenue": lambda: sum_totals(
                self.repo.delivered_order_totals(client)
            ),
            "chart_data": lambda: bucket_daily_sales(
                self.repo.orders_between(client, since, now), self.tz
            ),
        }

        results = await asyncio.gather(
            *(asyncio.to_thread(query) for query in queries.values()),
            return_exceptions=True,
        )

        values: dict[str, Any] = {}
        failures: list[QueryFailure] = []
        for metric, result in zip(queries, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                message = _error_message(result)
                logger.warning("Dashboard metric %s unavailable: %s", metric, message)
                failures.append(QueryFailure(metric=metric, message=message))
                values[metric] = None
            else:
                values[metric] = result

        return DashboardStats(
            **values,
            failures=failures,
            is_partial=bool(failures),
        )
