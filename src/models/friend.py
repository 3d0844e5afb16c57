from beanie import Document
from pydantic import Field
from typing import Optional
from datetime import datetime, timezone
from ..constants import FriendshipType


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Friend(Document):
    """
    Đại diện cho một quan hệ bạn bè (hoặc lời mời kết bạn đang chờ) giữa hai người dùng.
    """
    sender: str = Field(..., description="ID của người gửi lời mời.")
    receiver: str = Field(..., description="ID của người nhận lời mời.")
    friendshipType: FriendshipType = Field(default=FriendshipType.FRIEND, description="Loại quan hệ.")
    isAccepted: bool = Field(default=False, description="Lời mời đã được chấp nhận hay chưa.")
    createdAt: datetime = Field(default_factory=utc_now, description="Thời điểm lời mời được tạo.")
    acceptedAt: Optional[datetime] = Field(default=None, description="Thời điểm lời mời được chấp nhận.")

    class Settings:
        name = "friends"
        indexes = [
            "sender",
            "receiver",
            "isAccepted",
            "createdAt",
        ]
