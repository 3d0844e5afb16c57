from enum import Enum


class NotificationType(str, Enum):
    FRIEND_REQUEST = "FRIEND_REQUEST"
