from typing import List
from bson import ObjectId
from ..models import Notification
from ..utils.exceptions import TargetNotExistException
from ..utils.map_to_dict import map_notification_to_public_dict


class NotificationService:
    """
    Service xử lý các thông báo của người dùng
    """

    @staticmethod
    async def create_notification(
        user_id: str,
        notification_type: str,
        content: str,
        href: str = ""
    ) -> Notification:
        """
        Tạo một thông báo mới cho người dùng

        Args:
            user_id: ID của người dùng nhận thông báo
            notification_type: Loại thông báo (FRIEND_REQUEST, ...)
            content: Nội dung thông báo
            href: Link phía client
        """
        notification = Notification(
            userId=user_id,
            type=notification_type,
            content=content,
            href=href,
            isRead=False
        )
        await notification.save()
        return notification

    @staticmethod
    async def get_user_notifications(
        user_id: str,
        limit: int = 50,
        skip: int = 0,
        unread_only: bool = False
    ) -> List[dict]:
        """
        Lấy danh sách thông báo của người dùng

        Args:
            user_id: ID của người dùng
            limit: Số lượng thông báo tối đa
            skip: Số thông báo bỏ qua (phân trang)
            unread_only: Chỉ lấy thông báo chưa đọc
        """
        query = {"userId": user_id}

        if unread_only:
            query["isRead"] = False

        # Lấy thông báo, sắp xếp theo thời gian giảm dần
        notifications = await Notification.find(
            query,
            limit=limit,
            skip=skip
        ).sort(-Notification.createdAt).to_list()

        return [map_notification_to_public_dict(notif) for notif in notifications]

    @staticmethod
    async def _get_owned(notification_id: str, user_id: str) -> Notification:
        notification = None
        if ObjectId.is_valid(notification_id):
            notification = await Notification.get(notification_id)

        # Không phân biệt "không tồn tại" và "không phải của bạn"
        if not notification or notification.userId != user_id:
            raise TargetNotExistException("Notification not found.")
        return notification

    @staticmethod
    async def mark_as_read(notification_id: str, user_id: str) -> dict:
        """
        Đánh dấu một thông báo là đã đọc
        """
        notification = await NotificationService._get_owned(notification_id, user_id)
        notification.isRead = True
        await notification.save()
        return map_notification_to_public_dict(notification)

    @staticmethod
    async def mark_all_as_read(user_id: str):
        """
        Đánh dấu tất cả thông báo của người dùng là đã đọc
        """
        await Notification.find({"userId": user_id, "isRead": False}).update(
            {"$set": {"isRead": True}}
        )

    @staticmethod
    async def delete_notification(notification_id: str, user_id: str):
        notification = await NotificationService._get_owned(notification_id, user_id)
        await notification.delete()

    @staticmethod
    async def get_unread_count(user_id: str) -> int:
        """
        Lấy số lượng thông báo chưa đọc của người dùng
        """
        count = await Notification.find({"userId": user_id, "isRead": False}).count()
        return count
