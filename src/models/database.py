# Nhập các thư viện cần thiết
import logging
from motor.motor_asyncio import AsyncIOMotorClient # Thư viện bất đồng bộ cho MongoDB
from beanie import init_beanie # ODM (Object-Document Mapper) cho MongoDB
from typing import Type

from ..configs import MONGO_URI, MONGO_DB_NAME
from .friend import Friend
from .notification import Notification

logger = logging.getLogger(__name__)

# Danh sách các model Beanie sẽ được khởi tạo
DOCUMENT_MODELS: list[Type] = [Friend, Notification]

client = None  # 🔹 client global, dùng 1 lần suốt vòng đời app

async def init_db():
    """
    Khởi tạo kết nối cơ sở dữ liệu và Beanie ODM.
    Đảm bảo chỉ tạo một client duy nhất.
    """
    global client

    # Nếu đã có client, bỏ qua
    if client is not None:
        return client

    if not MONGO_URI:
        raise ValueError("Không tìm thấy MONGO_URI trong các biến môi trường.")

    # Trả datetime có múi giờ (UTC), khớp với giá trị được ghi vào
    client = AsyncIOMotorClient(MONGO_URI, tz_aware=True)
    database = client.get_database(MONGO_DB_NAME)

    await init_beanie(database=database, document_models=DOCUMENT_MODELS)
    logger.info(f"Connected to MongoDB database '{MONGO_DB_NAME}'")

    return client
