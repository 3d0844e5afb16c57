import logging
from ..schemas import NotificationMessage
from ..utils.map_to_dict import map_notification_to_public_dict
from .notification_service import NotificationService

logger = logging.getLogger(__name__)


class InAppNotificationProducer:
    """
    Producer thông báo trong ứng dụng: lưu thông báo vào MongoDB
    rồi đẩy real-time tới các kết nối WebSocket của người nhận.
    """

    def __init__(self, connection_manager):
        self.connection_manager = connection_manager

    async def send(self, message: NotificationMessage) -> None:
        notification = await NotificationService.create_notification(
            user_id=message.target,
            notification_type=message.type,
            content=message.content,
            href=message.href
        )

        notification_payload = {
            "type": "notification",
            "payload": map_notification_to_public_dict(notification)
        }
        await self.connection_manager.broadcast_to_user(message.target, notification_payload)
        logger.debug(f"Delivered {message.type} notification to {message.target}")
