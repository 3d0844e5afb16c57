from unittest.mock import patch

import pytest
from bson import ObjectId

from src.repositories import FriendRepository
from src.repositories.friend_repository import InvalidObjectId, to_mongo_filter

VALID_ID = "65f0c0ffee0000000000abcd"


def test_string_id_becomes_object_id():
    mongo_filter = to_mongo_filter({"_id": VALID_ID, "receiver": "u2", "isAccepted": False})

    assert mongo_filter == {"_id": ObjectId(VALID_ID), "receiver": "u2", "isAccepted": False}


def test_nested_or_clauses_are_left_intact():
    query = {"$or": [{"sender": "u1"}, {"receiver": "u1"}], "isAccepted": True}

    assert to_mongo_filter(query) == query


def test_malformed_id_raises():
    with pytest.raises(InvalidObjectId):
        to_mongo_filter({"_id": "nope"})


@pytest.mark.asyncio
async def test_malformed_id_matches_nothing():
    repository = FriendRepository()

    with patch("src.repositories.friend_repository.Friend") as model:
        assert await repository.find_one({"_id": "nope", "receiver": "u2"}) is None
        assert await repository.find_one_and_delete({"_id": "nope"}) is None

    model.find_one.assert_not_called()
    model.get_motor_collection.assert_not_called()
