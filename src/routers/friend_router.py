from fastapi import APIRouter, Depends, Query
from ..schemas import CurrentUser, FriendRequestCreate, FriendPublic, FriendRequestPage, FriendListPage
from ..security import get_current_user
from ..services import FriendService
from ..dependencies import get_friend_service
from ..utils.map_to_dict import map_friend_to_public

router = APIRouter(prefix="/friends", tags=["Friends"])

# Lời mời kết bạn đang chờ của người dùng hiện tại
@router.get("/requests", response_model=FriendRequestPage)
async def get_friend_requests(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    current_user: CurrentUser = Depends(get_current_user),
    friend_service: FriendService = Depends(get_friend_service)
):
    result = await friend_service.get_friend_requests_with_pagination(
        id=current_user.userId, page=page, limit=limit
    )
    result["friendRequests"] = [map_friend_to_public(f) for f in result["friendRequests"]]
    return result

# Danh sách bạn bè của người dùng hiện tại
@router.get("/", response_model=FriendListPage)
async def get_my_friends(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    current_user: CurrentUser = Depends(get_current_user),
    friend_service: FriendService = Depends(get_friend_service)
):
    return await _friend_list(friend_service, current_user.userId, page, limit)

# Danh sách bạn bè của một người dùng bất kỳ
@router.get("/users/{user_id}", response_model=FriendListPage)
async def get_user_friends(
    user_id: str,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    current_user: CurrentUser = Depends(get_current_user),
    friend_service: FriendService = Depends(get_friend_service)
):
    return await _friend_list(friend_service, user_id, page, limit)

# Gửi lời mời kết bạn
@router.post("/", response_model=FriendPublic, status_code=201)
async def add_friend(
    request_data: FriendRequestCreate,
    current_user: CurrentUser = Depends(get_current_user),
    friend_service: FriendService = Depends(get_friend_service)
):
    friendship = await friend_service.add_friend(
        current_user=current_user,
        receiver_id=request_data.receiverId,
        friendship_type=request_data.friendshipType
    )
    return map_friend_to_public(friendship)

# Chấp nhận lời mời kết bạn
@router.put("/{friendship_id}/accept", response_model=FriendPublic)
async def accept_friend_request(
    friendship_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    friend_service: FriendService = Depends(get_friend_service)
):
    friendship = await friend_service.accept_request(id=friendship_id, current_user=current_user)
    return map_friend_to_public(friendship)

# Từ chối lời mời kết bạn
@router.delete("/{friendship_id}")
async def refuse_friend_request(
    friendship_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    friend_service: FriendService = Depends(get_friend_service)
):
    await friend_service.refuse_request(id=friendship_id, current_user=current_user)
    return {"message": "Friend request refused."}

@router.get("/{friendship_id}", response_model=FriendPublic)
async def get_friendship_info(
    friendship_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    friend_service: FriendService = Depends(get_friend_service)
):
    friendship = await friend_service.get_friendship_info(id=friendship_id, current_user=current_user)
    return map_friend_to_public(friendship)


async def _friend_list(friend_service: FriendService, user_id: str, page: int, limit: int) -> dict:
    result = await friend_service.get_friend_list_with_pagination(id=user_id, page=page, limit=limit)
    result["friendList"] = [map_friend_to_public(f) for f in result["friendList"]]
    return result
