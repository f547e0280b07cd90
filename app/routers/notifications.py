# app/routers/notifications.py
from fastapi import APIRouter, Query

from app.core.notifier import operator_notifier
from app.schemas.notification import Notification

router = APIRouter(prefix="/admin/notifications", tags=["Admin Notifications"])


@router.get(
    "",
    response_model=list[Notification],
)
def list_notifications(limit: int = Query(20, ge=1, le=100)):
    """
    Latest operator notifications (success / error), newest first.
    """
    return operator_notifier.recent(limit)
