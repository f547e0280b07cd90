"""
Tests for OrderService - listing and status updates with cache
invalidation and operator notifications.
"""

import uuid

import httpx
import pytest
from fastapi import HTTPException
from postgrest.exceptions import APIError

from app.core.query_cache import QueryKey
from app.repositories.order_repo import OrderRepository
from app.schemas.order import OrderStatusUpdate
from app.services.order_service import OrderService
from conftest import ORDER_ID
from fake_supabase import api_error


@pytest.fixture
def service(cache, notifier) -> OrderService:
    return OrderService(OrderRepository(), cache, notifier)


class TestListOrders:
    def test_newest_first_with_user_and_items(self, service, supabase):
        orders = service.list_orders(supabase)

        assert [o.order_number for o in orders] == ["ORD-0002", "ORD-0001"]
        assert orders[1].user.full_name == "Ana Lopez"
        assert orders[1].order_items[0].subtotal == 100.0
        assert orders[0].order_items == []

    def test_limit(self, service, supabase):
        orders = service.list_orders(supabase, limit=1)

        assert len(orders) == 1

    def test_listing_is_cached(self, service, supabase):
        service.list_orders(supabase)
        service.list_orders(supabase)

        assert len(supabase.calls) == 1

    def test_errors_propagate(self, service, supabase):
        supabase.table_errors["orders"] = api_error("timeout")

        with pytest.raises(APIError):
            service.list_orders(supabase)


class TestUpdateStatus:
    def test_updates_one_order(self, service, supabase, notifier):
        order = service.update_status(
            supabase, uuid.UUID(ORDER_ID), OrderStatusUpdate(status="shipped")
        )

        assert str(order.id) == ORDER_ID
        assert order.status == "shipped"
        statuses = {row["id"]: row["status"] for row in supabase.tables["orders"]}
        assert statuses[ORDER_ID] == "shipped"
        assert sorted(statuses.values()) == ["pending", "shipped"]
        assert [n.level for n in notifier.recent()] == ["success"]
        assert notifier.recent()[0].message == "Order status updated"

    def test_success_invalidates_order_listings(self, service, supabase, cache):
        service.list_orders(supabase)
        service.list_orders(supabase, limit=1)
        cache.set(QueryKey.SALES_BY_CATEGORY, (), ["kept"])

        service.update_status(supabase, uuid.UUID(ORDER_ID), OrderStatusUpdate(status="processing"))

        assert cache.get(QueryKey.ORDERS, (None,)) is None
        assert cache.get(QueryKey.ORDERS, (1,)) is None
        assert cache.get(QueryKey.SALES_BY_CATEGORY, ()) == ["kept"]
        listed = service.list_orders(supabase)
        assert {o.status for o in listed} == {"processing", "pending"}

    def test_rejected_status_notifies_and_keeps_cache(self, service, supabase, cache, notifier):
        cached = service.list_orders(supabase)
        supabase.table_errors["orders"] = api_error(
            'new row for relation "orders" violates check constraint "orders_status_check"',
            "23514",
        )

        with pytest.raises(HTTPException) as exc:
            service.update_status(supabase, uuid.UUID(ORDER_ID), OrderStatusUpdate(status="lost"))

        assert exc.value.status_code == 400
        assert "orders_status_check" in exc.value.detail
        assert cache.get(QueryKey.ORDERS, (None,)) == cached
        (notification,) = notifier.recent()
        assert notification.level == "error"
        assert notification.message.startswith("Error updating order: new row for relation")

    def test_unreachable_store_notifies_and_keeps_cache(self, service, supabase, cache, notifier):
        cached = service.list_orders(supabase)
        supabase.table_errors["orders"] = httpx.ConnectError("connection refused")

        with pytest.raises(HTTPException) as exc:
            service.update_status(supabase, uuid.UUID(ORDER_ID), OrderStatusUpdate(status="shipped"))

        assert exc.value.status_code == 502
        assert exc.value.detail == "connection refused"
        assert cache.get(QueryKey.ORDERS, (None,)) == cached
        (notification,) = notifier.recent()
        assert notification.level == "error"
        assert notification.message == "Error updating order: connection refused"

    def test_unknown_order_is_404(self, service, supabase, notifier):
        with pytest.raises(HTTPException) as exc:
            service.update_status(supabase, uuid.uuid4(), OrderStatusUpdate(status="shipped"))

        assert exc.value.status_code == 404
        assert notifier.recent()[0].level == "error"

    def test_blank_status_is_rejected_by_schema(self):
        with pytest.raises(ValueError):
            OrderStatusUpdate(status="   ")
