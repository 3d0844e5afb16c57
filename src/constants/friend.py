from enum import Enum


class FriendshipType(str, Enum):
    FRIEND = "FRIEND"
    CLOSE_FRIEND = "CLOSE_FRIEND"
    FAMILY = "FAMILY"
