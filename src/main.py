import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from src.routers import friend_router, notification_router
from src import websocket
from src.models import init_db
from src.configs import LOG_LEVEL
from src.utils.exceptions import AppException

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Relo Friends",
    description="Quản lý lời mời kết bạn, danh sách bạn bè và thông báo liên quan "
                "cho mạng xã hội **Relo**.",
    version="1.0.0"
)

# Exception handler cho RequestValidationError (Pydantic validation)
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    error_messages = []
    for error in errors:
        field = " -> ".join(str(loc) for loc in error["loc"])
        message = error.get("msg", "Validation error")
        error_messages.append(f"{field}: {message}")

    detail = "; ".join(error_messages) if error_messages else "Invalid request data"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail}
    )

# Lỗi nghiệp vụ từ tầng service
@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message}
    )

# Kết nối với cơ sở dữ liệu khi khởi động
@app.on_event("startup")
async def startup_db_client():
    await init_db()

# Gắn các router
app.include_router(friend_router.router, prefix="/api", tags=["Bạn bè"])
app.include_router(notification_router.router, prefix="/api", tags=["Thông báo"])
app.include_router(websocket.router, prefix="/websocket", tags=["Connect real-time"])

@app.get("/")
def read_root():
    return {"message": "Máy chủ đang chạy"}
