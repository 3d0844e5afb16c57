from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from src.schemas import NotificationMessage
from src.services import InAppNotificationProducer, NotificationService
from src.utils.exceptions import TargetNotExistException
from src.websocket import ConnectionManager


def make_notification(**fields):
    data = {
        "id": "65f0c0ffee0000000000abcd",
        "userId": "u1",
        "type": "FRIEND_REQUEST",
        "content": "New friend request <user>u1</user>",
        "href": "/users/u1/friend-requests",
        "isRead": False,
        "createdAt": datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    }
    data.update(fields)
    return SimpleNamespace(**data)


class TestInAppNotificationProducer:

    @pytest.mark.asyncio
    async def test_persists_then_broadcasts(self):
        manager = AsyncMock()
        producer = InAppNotificationProducer(manager)
        message = NotificationMessage(
            target="u1",
            type="FRIEND_REQUEST",
            content="New friend request <user>u1</user>",
            href="/users/u1/friend-requests",
        )

        with patch.object(
            NotificationService, "create_notification", new=AsyncMock(return_value=make_notification())
        ) as create:
            await producer.send(message)

        create.assert_awaited_once_with(
            user_id="u1",
            notification_type="FRIEND_REQUEST",
            content="New friend request <user>u1</user>",
            href="/users/u1/friend-requests",
        )
        manager.broadcast_to_user.assert_awaited_once()
        user_id, payload = manager.broadcast_to_user.await_args.args
        assert user_id == "u1"
        assert payload["type"] == "notification"
        assert payload["payload"]["id"] == "65f0c0ffee0000000000abcd"
        assert payload["payload"]["createdAt"].startswith("2024-05-01T12:00:00")

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self):
        manager = AsyncMock()
        producer = InAppNotificationProducer(manager)
        message = NotificationMessage(target="u1", type="FRIEND_REQUEST", content="x")

        with patch.object(
            NotificationService, "create_notification", new=AsyncMock(side_effect=RuntimeError("down"))
        ):
            with pytest.raises(RuntimeError):
                await producer.send(message)

        manager.broadcast_to_user.assert_not_awaited()


class TestNotificationOwnership:

    @pytest.mark.asyncio
    async def test_malformed_id_is_not_found(self):
        with pytest.raises(TargetNotExistException):
            await NotificationService.mark_as_read("not-an-object-id", "u1")

    @pytest.mark.asyncio
    async def test_other_users_notification_is_not_found(self):
        notification = make_notification(userId="someone-else")
        with patch("src.services.notification_service.Notification") as model:
            model.get = AsyncMock(return_value=notification)
            with pytest.raises(TargetNotExistException):
                await NotificationService.delete_notification("65f0c0ffee0000000000abcd", "u1")


class TestConnectionManager:

    @pytest.mark.asyncio
    async def test_broadcast_reaches_every_connection_of_user(self):
        manager = ConnectionManager()
        first, second, stranger = AsyncMock(), AsyncMock(), AsyncMock()
        await manager.connect("u1", first)
        await manager.connect("u1", second)
        await manager.connect("u2", stranger)

        when = datetime(2024, 5, 1, tzinfo=timezone.utc)
        await manager.broadcast_to_user("u1", {"type": "notification", "payload": {"at": when}})

        expected = {"type": "notification", "payload": {"at": when.isoformat()}}
        first.send_json.assert_awaited_once_with(expected)
        second.send_json.assert_awaited_once_with(expected)
        stranger.send_json.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_disconnect_removes_user_when_last_connection_closes(self):
        manager = ConnectionManager()
        ws = AsyncMock()
        await manager.connect("u1", ws)
        assert manager.is_user_online("u1")

        manager.disconnect("u1", ws)

        assert not manager.is_user_online("u1")
        await manager.broadcast_to_user("u1", {"type": "notification"})
        ws.send_json.assert_not_awaited()
