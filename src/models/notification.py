from datetime import datetime
from beanie import Document
from pydantic import Field
from .friend import utc_now


class Notification(Document):
    """
    Model cho thông báo của người dùng
    """
    userId: str = Field(..., description="ID của người dùng nhận thông báo")
    type: str = Field(..., description="Loại thông báo: FRIEND_REQUEST, ...")
    content: str = Field(..., description="Nội dung thông báo")
    href: str = Field(default="", description="Link phía client khi người dùng mở thông báo")
    isRead: bool = Field(default=False, description="Đã đọc hay chưa")
    createdAt: datetime = Field(default_factory=utc_now, description="Thời gian tạo thông báo")

    class Settings:
        name = "notifications"
        indexes = [
            [("userId", 1), ("createdAt", -1)],  # Index để query notifications theo userId và sắp xếp theo thời gian
            [("isRead", 1)],  # Index để filter các notification chưa đọc
        ]
