from .repositories import FriendRepository
from .services import FriendService, InAppNotificationProducer
from .websocket import manager


def get_friend_service() -> FriendService:
    """Dependency FastAPI: mỗi request một FriendService dùng FriendRepository và thông báo trong ứng dụng."""
    return FriendService(
        store=FriendRepository(),
        notifier=InAppNotificationProducer(manager)
    )
