import logging
from typing import Dict, List, Any
from fastapi import APIRouter, WebSocket, Depends, WebSocketDisconnect
from datetime import datetime
from .schemas import CurrentUser
from .security import get_current_user_ws

logger = logging.getLogger(__name__)

router = APIRouter()

class ConnectionManager:
    def __init__(self):
        # Ánh xạ user_id tới danh sách các kết nối WebSocket đang hoạt động
        self.active_connections: Dict[str, List[WebSocket]] = {}

    async def connect(self, user_id: str, websocket: WebSocket):
        """Đăng ký một kết nối WebSocket mới cho một người dùng."""
        await websocket.accept()
        self.active_connections.setdefault(user_id, []).append(websocket)

    def disconnect(self, user_id: str, websocket: WebSocket):
        """Xóa một kết nối WebSocket."""
        if user_id in self.active_connections:
            self.active_connections[user_id].remove(websocket)
            if not self.active_connections[user_id]:
                del self.active_connections[user_id]

    def _serialize_for_json(self, obj: Any) -> Any:
        """Chuyển đổi datetime thành ISO string để gửi qua JSON."""
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, dict):
            return {k: self._serialize_for_json(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [self._serialize_for_json(v) for v in obj]
        return obj

    async def broadcast_to_user(self, user_id: str, data: dict):
        """Gửi một tin nhắn JSON đến tất cả các kết nối đang hoạt động của một người dùng."""
        json_ready_data = self._serialize_for_json(data)
        for connection in list(self.active_connections.get(user_id, [])):
            await connection.send_json(json_ready_data)

    def is_user_online(self, user_id: str) -> bool:
        return len(self.active_connections.get(user_id, [])) > 0

# Một instance duy nhất dùng toàn app
manager = ConnectionManager()

@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket, user: CurrentUser = Depends(get_current_user_ws)):
    user_id = user.userId
    await manager.connect(user_id, websocket)
    logger.debug(f"User {user_id} connected")
    try:
        while True:
            # Client hiện chỉ nhận, bỏ qua dữ liệu gửi lên
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(user_id, websocket)
