from datetime import datetime
from typing import List

from pydantic import BaseModel


class NotificationInfo(BaseModel):
    id: str
    type: str
    title: str
    message: str
    task_id: int
    timestamp: datetime
    read: bool


class NotificationListResponse(BaseModel):
    notifications: List[NotificationInfo]
    unread_count: int


class NotificationsReadResponse(BaseModel):
    last_notification_read_at: datetime
