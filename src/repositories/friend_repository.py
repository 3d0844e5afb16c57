from typing import List, Optional
from bson import ObjectId
from ..models import Friend


class InvalidObjectId(Exception):
    pass


def _to_object_id(value):
    if isinstance(value, ObjectId):
        return value
    if not ObjectId.is_valid(value):
        raise InvalidObjectId(value)
    return ObjectId(value)


def to_mongo_filter(query: dict) -> dict:
    """
    Chuyển `_id` dạng chuỗi trong bộ lọc sang ObjectId (kể cả bên trong $or/$and).
    Raise InvalidObjectId nếu chuỗi không phải ObjectId hợp lệ.
    """
    result = {}
    for key, value in query.items():
        if key == "_id":
            result[key] = _to_object_id(value)
        elif key in ("$or", "$and"):
            result[key] = [to_mongo_filter(clause) for clause in value]
        else:
            result[key] = value
    return result


class FriendRepository:
    """
    Truy cập collection `friends` thông qua Beanie.
    Một `_id` không hợp lệ được xem như không khớp với bản ghi nào.
    """

    async def create(self, data: dict) -> Friend:
        friend = Friend(**data)
        await friend.insert()
        return friend

    async def save(self, friend: Friend) -> Friend:
        await friend.save()
        return friend

    async def find_one(self, query: dict) -> Optional[Friend]:
        try:
            mongo_filter = to_mongo_filter(query)
        except InvalidObjectId:
            return None
        return await Friend.find_one(mongo_filter)

    async def find_one_and_delete(self, query: dict) -> Optional[Friend]:
        try:
            mongo_filter = to_mongo_filter(query)
        except InvalidObjectId:
            return None
        raw = await Friend.get_motor_collection().find_one_and_delete(mongo_filter)
        if raw is None:
            return None
        return Friend.model_validate(raw)

    async def find(self, query: dict, skip: int = 0, limit: int = 0) -> List[Friend]:
        try:
            mongo_filter = to_mongo_filter(query)
        except InvalidObjectId:
            return []
        # Mới nhất trước
        return await Friend.find(mongo_filter).sort(-Friend.createdAt).skip(skip).limit(limit).to_list()

    async def count_documents(self, query: dict) -> int:
        try:
            mongo_filter = to_mongo_filter(query)
        except InvalidObjectId:
            return 0
        return await Friend.find(mongo_filter).count()
