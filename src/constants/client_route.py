from ..configs import CLIENT_URL


def gen_friend_request_list_route(user_id: str) -> str:
    """Link tới trang danh sách lời mời kết bạn của một người dùng."""
    return f"{CLIENT_URL}/users/{user_id}/friend-requests"
