from .friend import Friend
from .notification import Notification
from .database import init_db
