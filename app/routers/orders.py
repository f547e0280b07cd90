# app/routers/orders.py
import uuid

from fastapi import APIRouter, Depends, Query
from supabase import Client

from app.core.notifier import operator_notifier
from app.core.query_cache import query_cache
from app.core.supabase_client import get_supabase
from app.models.order import Order, OrderWithItems
from app.repositories.order_repo import OrderRepository
from app.schemas.order import OrderStatusUpdate
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])

order_repo = OrderRepository()
service = OrderService(order_repo, query_cache, operator_notifier)


@router.get(
    "",
    response_model=list[OrderWithItems],
)
def list_orders(
    limit: int | None = Query(None, ge=1, le=500),
    client: Client = Depends(get_supabase),
):
    """
    List orders with customer and line items, newest first.
    """
    return service.list_orders(client, limit)


@router.patch(
    "/{order_id}/status",
    response_model=Order,
)
def update_order_status(
    order_id: uuid.UUID,
    payload: OrderStatusUpdate,
    client: Client = Depends(get_supabase),
):
    """
    Update order status.

    Known statuses: pending, processing, shipped, delivered, cancelled.
    Anything else is forwarded to the store, which has the final say:

      - accepted  -> 200 with the updated order, listings cache dropped
      - rejected  -> 400 with the store's message
      - not found -> 404

    Every outcome is also posted to /admin/notifications.
    """
    return service.update_status(client, order_id, payload)
