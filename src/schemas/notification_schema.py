from pydantic import BaseModel
from datetime import datetime


class NotificationMessage(BaseModel):
    """Payload gửi tới producer thông báo."""
    target: str
    type: str
    content: str
    href: str = ""


class NotificationPublic(BaseModel):
    id: str
    userId: str
    type: str
    content: str
    href: str
    isRead: bool
    createdAt: datetime
