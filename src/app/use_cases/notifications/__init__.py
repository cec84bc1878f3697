"""
Notification Use Cases
"""

from .list_notifications_use_case import ListNotificationsUseCase
from .mark_notifications_read_use_case import MarkNotificationsReadUseCase
from .dtos import NotificationInfo, NotificationListResponse, NotificationsReadResponse

__all__ = [
    "ListNotificationsUseCase",
    "MarkNotificationsReadUseCase",
    "NotificationInfo",
    "NotificationListResponse",
    "NotificationsReadResponse",
]
