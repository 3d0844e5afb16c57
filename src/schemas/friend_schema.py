from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional
from ..constants import FriendshipType


class FriendRequestCreate(BaseModel):
    receiverId: str
    friendshipType: Optional[FriendshipType] = None


class FriendPublic(BaseModel):
    id: str
    sender: str
    receiver: str
    friendshipType: FriendshipType
    isAccepted: bool
    createdAt: datetime
    acceptedAt: Optional[datetime] = None


class FriendRequestPage(BaseModel):
    page: int
    limit: int
    totalRequests: int
    totalPages: int
    friendRequests: List[FriendPublic]


class FriendListPage(BaseModel):
    page: int
    limit: int
    totalFriends: int
    totalPages: int
    friendList: List[FriendPublic]
