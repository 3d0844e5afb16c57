from .settings import (
    MONGO_URI,
    MONGO_DB_NAME,
    SECRET_KEY,
    ALGORITHM,
    ACCESS_TOKEN_EXPIRE_MINUTES,
    CLIENT_URL,
    LOG_LEVEL
)
