import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALGORITHM", "HS256")
os.environ.setdefault("CLIENT_URL", "https://relo.test")

import asyncio
import itertools
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from src.services import FriendService
from src.schemas import CurrentUser


@dataclass
class FakeFriend:
    id: str
    sender: str
    receiver: str
    friendshipType: str
    isAccepted: bool
    createdAt: datetime
    acceptedAt: Optional[datetime] = None


def matches(record, query: dict) -> bool:
    """Evaluate the subset of Mongo filter syntax the friend service uses."""
    for key, value in query.items():
        if key == "$or":
            if not any(matches(record, clause) for clause in value):
                return False
        elif key == "_id":
            if record.id != value:
                return False
        elif getattr(record, key) != value:
            return False
    return True


class InMemoryFriendStore:
    def __init__(self):
        self.records = []
        self._ids = itertools.count(1)
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def add(self, **fields) -> FakeFriend:
        """Insert a record directly, with strictly increasing createdAt."""
        self._clock += timedelta(seconds=1)
        data = {
            "friendshipType": "FRIEND",
            "isAccepted": False,
            "createdAt": self._clock,
        }
        data.update(fields)
        record = FakeFriend(id=f"f{next(self._ids)}", **data)
        self.records.append(record)
        return record

    async def create(self, data: dict) -> FakeFriend:
        data = dict(data)
        data.pop("createdAt", None)
        return self.add(**data)

    async def save(self, record):
        return record

    async def find_one(self, query):
        return next((r for r in self.records if matches(r, query)), None)

    async def find_one_and_delete(self, query):
        record = await self.find_one(query)
        if record is not None:
            self.records.remove(record)
        return record

    async def find(self, query, skip=0, limit=0):
        found = sorted(
            (r for r in self.records if matches(r, query)),
            key=lambda r: r.createdAt,
            reverse=True,
        )
        found = found[skip:]
        return found[:limit] if limit else found

    async def count_documents(self, query):
        return sum(1 for r in self.records if matches(r, query))


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    async def send(self, message):
        self.messages.append(message)


class FailingNotifier:
    async def send(self, message):
        raise RuntimeError("notification queue unavailable")


async def drain_background_tasks():
    for _ in range(3):
        await asyncio.sleep(0)


@pytest.fixture
def store():
    return InMemoryFriendStore()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def friend_service(store, notifier):
    return FriendService(store=store, notifier=notifier)


@pytest.fixture
def u1():
    return CurrentUser(userId="u1")


@pytest.fixture
def u2():
    return CurrentUser(userId="u2")
