from .friend_repository import FriendRepository
