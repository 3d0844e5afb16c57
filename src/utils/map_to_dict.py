from ..schemas import FriendPublic, NotificationPublic

# Các hàm trợ giúp để chuyển đổi các đối tượng mô hình thành từ điển để trả về / phát sóng
def map_friend_to_public(friend) -> FriendPublic:
    """Chuyển đổi một bản ghi Friend thành FriendPublic."""
    return FriendPublic(
        id=str(friend.id),
        sender=friend.sender,
        receiver=friend.receiver,
        friendshipType=friend.friendshipType,
        isAccepted=friend.isAccepted,
        createdAt=friend.createdAt,
        acceptedAt=friend.acceptedAt
    )

def map_notification_to_public_dict(notif) -> dict:
    """Chuyển đổi một mô hình Notification thành một từ điển có thể tuần tự hóa JSON."""
    public_notif = NotificationPublic(
        id=str(notif.id),
        userId=notif.userId,
        type=notif.type,
        content=notif.content,
        href=notif.href,
        isRead=notif.isRead,
        createdAt=notif.createdAt
    )
    return public_notif.model_dump(mode="json")
