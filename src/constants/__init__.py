from .friend import FriendshipType
from .notification import NotificationType
from .client_route import gen_friend_request_list_route
