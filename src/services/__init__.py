from .jwt_service import create_access_token, decode_access_token
from .friend_service import FriendService
from .notification_service import NotificationService
from .notification_producer import InAppNotificationProducer

__all__ = [
    "create_access_token",
    "decode_access_token",
    "FriendService",
    "NotificationService",
    "InAppNotificationProducer"
]
