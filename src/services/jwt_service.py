from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from pydantic import BaseModel
from ..configs import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES


class TokenData(BaseModel):
    """Mô hình dữ liệu cho payload được giải mã từ token."""
    user_id: Optional[str] = None

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Tạo một token truy cập JWT mới.

    Args:
        data (dict): Dữ liệu (payload) để mã hóa vào token, `sub` là ID người dùng.
        expires_delta (Optional[timedelta]): Thời gian tồn tại của token.
            Mặc định là ACCESS_TOKEN_EXPIRE_MINUTES.

    Returns:
        str: Token JWT đã được mã hóa.
    """
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})

    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[TokenData]:
    """
    Giải mã một token truy cập JWT và trả về payload của nó.

    Returns:
        Optional[TokenData]: Dữ liệu payload nếu giải mã thành công, nếu không thì trả về None.
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        user_id: str = payload.get("sub")
        if user_id is None:
            return None
        token_data = TokenData(user_id=user_id)
    except JWTError:
        # Hết hạn, sai chữ ký, ...
        return None
    return token_data
