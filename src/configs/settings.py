import os
from dotenv import load_dotenv

# Tải các biến môi trường từ tệp .env
load_dotenv()

# Cơ sở dữ liệu
MONGO_URI = os.getenv("MONGO_URI")
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "relo-social-network")

# JWT
SECRET_KEY = os.getenv("SECRET_KEY")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 120))

# Địa chỉ client, dùng để tạo link trong thông báo
CLIENT_URL = os.getenv("CLIENT_URL", "").rstrip("/")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
