# app/services/order_service.py
import logging
import uuid

import httpx
from fastapi import HTTPException, status
from postgrest.exceptions import APIError
from supabase import Client

from app.core.notifier import OperatorNotifier
from app.core.query_cache import QueryCache, QueryKey
from app.models.order import Order, OrderWithItems
from app.repositories.order_repo import OrderRepository
from app.schemas.order import OrderStatusUpdate

logger = logging.getLogger(__name__)

STATUS_UPDATED_MESSAGE = "Order status updated"


class OrderService:
    """
    Business logic for the admin orders screen.

    Responsibilities:
      - List orders with customer + items (cached under QueryKey.ORDERS)
      - Change an order's status, then invalidate cached listings and
        notify the operator
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        cache: QueryCache,
        notifier: OperatorNotifier,
    ):
        self.order_repo = order_repo
        self.cache = cache
        self.notifier = notifier

    def list_orders(
        self,
        client: Client,
        limit: int | None = None,
    ) -> list[OrderWithItems]:
        """
        All orders, newest first. Upstream errors propagate.
        """

        def load() -> list[OrderWithItems]:
            rows = self.order_repo.list_with_items(client, limit)
            return [OrderWithItems.model_validate(r) for r in rows]

        return self.cache.get_or_load(QueryKey.ORDERS, (limit,), load)

    def update_status(
        self,
        client: Client,
        order_id: uuid.UUID,
        payload: OrderStatusUpdate,
    ) -> Order:
        """
        Set a new status on one order.

        The status value is not checked against a local list; the store's
        constraint is the authority. A rejection becomes an error
        notification and a 400, an unreachable store a 502; in both cases
        cached listings are left alone.
        """
        try:
            row = self.order_repo.update_status(client, str(order_id), payload.status)
        except APIError as e:
            message = e.message or str(e)
            logger.error("Order %s status update rejected: %s", order_id, message)
            self.notifier.error(f"Error updating order: {message}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=message,
            )
        except httpx.HTTPError as e:
            # Store unreachable; the update may or may not have been applied
            message = str(e) or e.__class__.__name__
            logger.error("Order %s status update failed: %s", order_id, message)
            self.notifier.error(f"Error updating order: {message}")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=message,
            )

        if row is None:
            self.notifier.error("Error updating order: Order not found")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Order not found",
            )

        self.cache.invalidate(QueryKey.ORDERS)
        self.notifier.success(STATUS_UPDATED_MESSAGE)
        return Order.model_validate(row)
