from .auth_schema import CurrentUser
from .friend_schema import FriendRequestCreate, FriendPublic, FriendRequestPage, FriendListPage
from .notification_schema import NotificationMessage, NotificationPublic
