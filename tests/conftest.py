import os

os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("DASHBOARD_TIMEZONE", "UTC")

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.notifier import OperatorNotifier, operator_notifier  # noqa: E402
from app.core.query_cache import QueryCache, query_cache  # noqa: E402
from app.core.supabase_client import get_supabase  # noqa: E402
from app.main import app  # noqa: E402
from fake_supabase import FakeSupabase  # noqa: E402

NOW = datetime(2024, 1, 8, 12, 0, tzinfo=timezone.utc)

ORDER_ID = "5b8f7a8e-3c1d-4d4e-9f6a-0a1b2c3d4e5f"
USER_ID = "0f1e2d3c-4b5a-4968-8776-5a4b3c2d1e0f"


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def shop_tables() -> dict[str, list[dict]]:
    return {
        "orders": [
            {
                "id": ORDER_ID,
                "order_number": "ORD-0001",
                "user_id": USER_ID,
                "status": "delivered",
                "total": 100.0,
                "created_at": "2024-01-01T12:00:00+00:00",
                "user": {"id": USER_ID, "full_name": "Ana Lopez", "email": "ana@example.com"},
                "order_items": [
                    {
                        "id": "a3c1b2d4-1111-4222-8333-944455556666",
                        "product_id": "b4d2c3e5-2222-4333-8444-955566667777",
                        "product_name": "Linen shirt",
                        "quantity": 2,
                        "unit_price": 50.0,
                        "subtotal": 100.0,
                    }
                ],
            },
            {
                "id": "6c9f8b9f-4d2e-4e5f-8a7b-1b2c3d4e5f60",
                "order_number": "ORD-0002",
                "user_id": USER_ID,
                "status": "pending",
                "total": 50.0,
                "created_at": "2024-01-07T09:30:00+00:00",
                "user": {"id": USER_ID, "full_name": "Ana Lopez", "email": "ana@example.com"},
                "order_items": [],
            },
        ],
        "users": [{"id": USER_ID}, {"id": "1a2b3c4d-5e6f-4a7b-8c9d-0e1f2a3b4c5d"}],
        "products": [
            {"id": "p1", "is_featured": True, "is_new": False},
            {"id": "p2", "is_featured": True, "is_new": True},
            {"id": "p3", "is_featured": None, "is_new": True},
        ],
        "product_variants": [
            {"id": "v1", "stock_quantity": 0},
            {"id": "v2", "stock_quantity": 5},
            {"id": "v3", "stock_quantity": 6},
            {"id": "v4", "stock_quantity": None},
        ],
    }


@pytest.fixture
def supabase(shop_tables) -> FakeSupabase:
    return FakeSupabase(shop_tables)


@pytest.fixture
def cache() -> QueryCache:
    return QueryCache(ttl_seconds=60)


@pytest.fixture
def notifier() -> OperatorNotifier:
    return OperatorNotifier(max_items=10)


@pytest.fixture
def api(supabase):
    """
    TestClient wired to the fake Supabase client, with the shared cache
    and notification feed reset around each test.
    """
    query_cache.clear()
    operator_notifier.clear()
    app.dependency_overrides[get_supabase] = lambda: supabase
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
    query_cache.clear()
    operator_notifier.clear()
