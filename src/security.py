import logging
from typing import Optional
from fastapi import Depends, HTTPException, status, WebSocket
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from .services import jwt_service
from .schemas import CurrentUser

logger = logging.getLogger(__name__)

# Token do dịch vụ xác thực bên ngoài cấp, ứng dụng này chỉ kiểm tra chữ ký
bearer_scheme = HTTPBearer(auto_error=False)

credentials_exception = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)

def get_user_from_token(token: str) -> CurrentUser:
    token_data = jwt_service.decode_access_token(token)
    if not token_data or not token_data.user_id:
        logger.error("Token decode failed or missing subject")
        raise credentials_exception

    return CurrentUser(userId=token_data.user_id)

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> CurrentUser:
    if credentials is None:
        raise credentials_exception
    return get_user_from_token(credentials.credentials)

async def get_current_user_ws(websocket: WebSocket) -> CurrentUser:

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        # Đóng kết nối thôi chưa đủ, cần raise để dừng chuỗi dependency
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Token is missing")

    try:
        return get_user_from_token(token)
    except HTTPException:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        raise
