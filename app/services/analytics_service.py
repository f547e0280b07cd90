# app/services/analytics_service.py
from datetime import date, datetime, timedelta, timezone

from supabase import Client

from app.core.query_cache import QueryCache, QueryKey
from app.repositories.analytics_repo import AnalyticsRepository
from app.schemas.analytics import (
    CategorySales,
    ConversionMetrics,
    RecentActivity,
    SalesByPeriodRow,
    SalesPeriod,
    TopSellingProduct,
)

# How far back get_sales_by_period looks for each period
PERIOD_LOOKBACK: dict[SalesPeriod, timedelta] = {
    SalesPeriod.week: timedelta(days=7),
    SalesPeriod.month: timedelta(days=30),
    SalesPeriod.year: timedelta(days=365),
}


def period_start_date(period: SalesPeriod, now: datetime | None = None) -> date:
    """
    First day (UTC) covered by `period`, counted back from `now`.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return (now - PERIOD_LOOKBACK[period]).date()


class AnalyticsService:
    """
    Analytics widgets backed by Supabase RPC functions.

    Responsibilities:
      - parameter shaping (period -> start date)
      - mapping raw rows to typed schemas
      - caching per (operation, parameters)

    Upstream errors are not caught here; they reach the API layer as-is
    and are never cached.
    """

    def __init__(self, repo: AnalyticsRepository, cache: QueryCache):
        self.repo = repo
        self.cache = cache

    def sales_by_period(
        self,
        client: Client,
        period: SalesPeriod = SalesPeriod.month,
    ) -> list[SalesByPeriodRow]:
        def load() -> list[SalesByPeriodRow]:
            rows = self.repo.sales_by_period(
                client, period.value, period_start_date(period)
            )
            return [SalesByPeriodRow.model_validate(r) for r in rows]

        return self.cache.get_or_load(QueryKey.SALES_BY_PERIOD, (period.value,), load)

    def top_selling_products(
        self,
        client: Client,
        limit: int = 5,
    ) -> list[TopSellingProduct]:
        def load() -> list[TopSellingProduct]:
            rows = self.repo.top_selling_products(client, limit)
            return [TopSellingProduct.model_validate(r) for r in rows]

        return self.cache.get_or_load(QueryKey.TOP_SELLING_PRODUCTS, (limit,), load)

    def sales_by_category(self, client: Client) -> list[CategorySales]:
        def load() -> list[CategorySales]:
            rows = self.repo.sales_by_category(client)
            return [CategorySales.model_validate(r) for r in rows]

        return self.cache.get_or_load(QueryKey.SALES_BY_CATEGORY, (), load)

    def conversion_metrics(self, client: Client) -> ConversionMetrics:
        def load() -> ConversionMetrics:
            row = self.repo.conversion_metrics(client)
            if not row:
                return ConversionMetrics()
            return ConversionMetrics.model_validate(row)

        return self.cache.get_or_load(QueryKey.CONVERSION_METRICS, (), load)

    def recent_activity(
        self,
        client: Client,
        limit: int = 10,
    ) -> list[RecentActivity]:
        def load() -> list[RecentActivity]:
            rows = self.repo.recent_activity(client, limit)
            return [RecentActivity.model_validate(r) for r in rows]

        return self.cache.get_or_load(QueryKey.RECENT_ACTIVITY, (limit,), load)
