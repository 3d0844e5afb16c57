import asyncio
import logging
import math
from datetime import datetime, timezone
from ..constants import FriendshipType, NotificationType, gen_friend_request_list_route
from ..schemas import NotificationMessage
from ..utils.exceptions import BadRequestException, TargetAlreadyExistException, TargetNotExistException

logger = logging.getLogger(__name__)


class FriendService:
    """
    Quản lý lời mời kết bạn và danh sách bạn bè.

    Args:
        store: kho lưu trữ bản ghi Friend (create, find_one, find_one_and_delete,
            find, count_documents, save).
        notifier: producer thông báo, có coroutine `send(message)`.
    """

    def __init__(self, store, notifier):
        self.store = store
        self.notifier = notifier
        # Giữ tham chiếu tới các task gửi thông báo đang chạy nền
        self._pending_notifications = set()

    async def get_paginated_results(self, query: dict, page: int, limit: int) -> dict:
        skip = (page - 1) * limit
        results, total_documents = await asyncio.gather(
            self.store.find(query, skip=skip, limit=int(limit)),
            self.store.count_documents(query)
        )

        return {
            "results": results,
            "totalDocuments": total_documents,
            "totalPages": math.ceil(total_documents / limit)
        }

    async def get_friend_requests_with_pagination(self, id: str, page: int = 1, limit: int = 10) -> dict:
        """
        Lấy các lời mời kết bạn đang chờ mà người dùng `id` là người nhận.
        """
        query = {
            "receiver": id,
            "isAccepted": False
        }

        paginated = await self.get_paginated_results(query, page, limit)

        return {
            "page": page,
            "limit": limit,
            "totalRequests": paginated["totalDocuments"],
            "totalPages": paginated["totalPages"],
            "friendRequests": paginated["results"]
        }

    async def get_friend_list_with_pagination(self, id: str, page: int = 1, limit: int = 10) -> dict:
        """
        Lấy danh sách bạn bè đã chấp nhận, người dùng `id` có thể là người gửi hoặc người nhận.
        """
        query = {
            "$or": [
                {"sender": id},
                {"receiver": id}
            ],
            "isAccepted": True
        }

        paginated = await self.get_paginated_results(query, page, limit)

        return {
            "page": page,
            "limit": limit,
            "totalFriends": paginated["totalDocuments"],
            "totalPages": paginated["totalPages"],
            "friendList": paginated["results"]
        }

    async def add_friend(self, current_user, receiver_id: str, friendship_type: FriendshipType = None):
        """
        Gửi lời mời kết bạn từ người dùng hiện tại tới `receiver_id`.
        """
        sender_id = current_user.userId

        if sender_id == receiver_id:
            raise BadRequestException("Sender and receiver cannot be the same person.")

        # Quan hệ có thể tồn tại theo cả hai chiều
        existing_friend = await self.store.find_one({
            "$or": [
                {"sender": sender_id, "receiver": receiver_id},
                {"sender": receiver_id, "receiver": sender_id}
            ]
        })
        if existing_friend:
            raise TargetAlreadyExistException("A Friend already exists between these users.")

        friendship = await self.store.create({
            "sender": sender_id,
            "receiver": receiver_id,
            "friendshipType": friendship_type or FriendshipType.FRIEND,
            "isAccepted": False,
            "createdAt": datetime.now(timezone.utc)
        })
        logger.info(f"Friend request {friendship.id} sent from {sender_id} to {receiver_id}")

        self._notify(NotificationMessage(
            target=friendship.sender,
            type=NotificationType.FRIEND_REQUEST.value,
            content=f"New friend request <user>{friendship.sender}</user>",
            href=gen_friend_request_list_route(friendship.sender)
        ))
        return friendship

    async def accept_request(self, id: str, current_user):
        friend_request = await self.store.find_one({
            "_id": id,
            "receiver": current_user.userId,
            "isAccepted": False
        })

        if not friend_request:
            raise TargetNotExistException("Friend request not found or already accepted.")

        friend_request.isAccepted = True
        friend_request.acceptedAt = datetime.now(timezone.utc)
        await self.store.save(friend_request)
        logger.info(f"Friend request {id} accepted by {current_user.userId}")

        self._notify(NotificationMessage(
            target=friend_request.receiver,
            type=NotificationType.FRIEND_REQUEST.value,
            content=f"<user>{friend_request.receiver}</user> accepted your friend request",
            href=gen_friend_request_list_route(friend_request.receiver)
        ))
        return friend_request

    async def refuse_request(self, id: str, current_user) -> None:
        friend_request = await self.store.find_one_and_delete({
            "_id": id,
            "receiver": current_user.userId,
            "isAccepted": False
        })

        if not friend_request:
            raise TargetNotExistException("Friend request not found or already accepted.")
        logger.info(f"Friend request {id} refused by {current_user.userId}")

    async def get_friendship_info(self, id: str, current_user):
        # Chỉ người nhận mới xem được
        friendship = await self.store.find_one({
            "_id": id,
            "receiver": current_user.userId
        })

        if not friendship:
            raise TargetNotExistException("Friendship not found.")

        return friendship

    def _notify(self, message: NotificationMessage) -> None:
        """Gửi thông báo chạy nền, lỗi chỉ được ghi log."""
        async def send_in_background():
            try:
                await self.notifier.send(message)
            except Exception:
                logger.exception(f"Failed to send {message.type} notification to {message.target}")

        task = asyncio.create_task(send_in_background())
        self._pending_notifications.add(task)
        task.add_done_callback(self._pending_notifications.discard)
