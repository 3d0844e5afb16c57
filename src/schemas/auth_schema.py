from pydantic import BaseModel


class CurrentUser(BaseModel):
    """Danh tính của người dùng đang thực hiện request (lấy từ claim `sub` của JWT)."""
    userId: str
