# app/core/notifier.py
"""
Operator notification channel.

Responsibilities:
  - Record short success/failure messages produced by admin actions
    (e.g. "Order status updated").
  - Log every message so it also shows up in the server output.
  - Keep a bounded, newest-first feed the dashboard can poll.

Messages are fire-and-forget: callers never wait on or inspect delivery.
"""

import logging
import threading
from collections import deque
from datetime import datetime, timezone

from app.core.config import get_settings
from app.schemas.notification import Notification, NotificationLevel

logger = logging.getLogger(__name__)


class OperatorNotifier:
    def __init__(self, max_items: int = 50):
        self._feed: deque[Notification] = deque(maxlen=max_items)
        self._lock = threading.Lock()

    def success(self, message: str) -> Notification:
        return self._emit("success", message)

    def error(self, message: str) -> Notification:
        return self._emit("error", message)

    def recent(self, limit: int = 20) -> list[Notification]:
        """
        Latest notifications, newest first.
        """
        with self._lock:
            items = list(self._feed)
        items.reverse()
        return items[:limit]

    def clear(self) -> None:
        with self._lock:
            self._feed.clear()

    def _emit(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(
            level=level,
            message=message,
            created_at=datetime.now(timezone.utc),
        )
        if level == "error":
            logger.error("Operator notification: %s", message)
        else:
            logger.info("Operator notification: %s", message)
        with self._lock:
            self._feed.append(notification)
        return notification


# Process-wide feed shared by all routers
operator_notifier = OperatorNotifier(max_items=get_settings().NOTIFICATION_FEED_SIZE)
