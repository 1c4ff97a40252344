"""Unit tests for the room directory and its history ring buffer."""

import pytest

from chatcore.schemas.socketio import ChatMessage
from chatcore.services.chat.errors import DuplicateName, EmptyName
from chatcore.services.chat.rooms import RoomDirectory


def make_message(message_id, room_id="global"):
    return ChatMessage(
        id=message_id,
        text=f"message {message_id}",
        sender_id="sid-a",
        sender="alice",
        room_id=room_id,
    )


class TestRoomCreation:
    """Tests for creating and listing rooms."""

    def test_default_room_exists(self):
        rooms = RoomDirectory()
        listed = rooms.list_rooms()

        assert len(listed) == 1
        assert listed[0].id == "global"
        assert listed[0].name == "Global"

    def test_create_room_lists_in_creation_order(self):
        rooms = RoomDirectory()
        dev_id = rooms.create_room("Dev")
        ops_id = rooms.create_room("Ops")

        assert [r.id for r in rooms.list_rooms()] == ["global", dev_id, ops_id]
        assert rooms.get_room(dev_id).name == "Dev"

    def test_room_name_is_trimmed(self):
        rooms = RoomDirectory()
        room_id = rooms.create_room("  Dev  ")
        assert rooms.get_room(room_id).name == "Dev"

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
    def test_blank_name_rejected(self, name):
        rooms = RoomDirectory()
        with pytest.raises(EmptyName):
            rooms.create_room(name)
        assert len(rooms) == 1

    def test_duplicate_name_is_case_insensitive(self):
        rooms = RoomDirectory()
        rooms.create_room("lobby")

        with pytest.raises(DuplicateName):
            rooms.create_room("Lobby")
        with pytest.raises(DuplicateName):
            rooms.create_room(" LOBBY ")

    def test_default_room_cannot_be_duplicated(self):
        rooms = RoomDirectory()
        with pytest.raises(DuplicateName):
            rooms.create_room("global")

    def test_unknown_room_lookup(self):
        rooms = RoomDirectory()
        assert rooms.get_room("nope") is None
        assert "nope" not in rooms
        assert rooms.recent_messages("nope") == []


class TestHistory:
    """Tests for the bounded per-room history."""

    def test_append_and_read_back_in_order(self):
        rooms = RoomDirectory()
        for i in range(1, 4):
            assert rooms.append_message("global", make_message(i))

        assert [m.id for m in rooms.recent_messages("global")] == [1, 2, 3]

    def test_append_to_unknown_room(self):
        rooms = RoomDirectory()
        assert rooms.append_message("nope", make_message(1, "nope")) is False

    def test_history_keeps_last_hundred(self):
        rooms = RoomDirectory()
        for i in range(1, 251):
            rooms.append_message("global", make_message(i))

        history = rooms.recent_messages("global")
        assert len(history) == 100
        assert [m.id for m in history] == list(range(151, 251))

    def test_recent_messages_limit(self):
        rooms = RoomDirectory()
        for i in range(1, 11):
            rooms.append_message("global", make_message(i))

        assert [m.id for m in rooms.recent_messages("global", limit=3)] == [8, 9, 10]
        assert rooms.recent_messages("global", limit=0) == []

    def test_custom_capacity(self):
        rooms = RoomDirectory(capacity=5)
        dev_id = rooms.create_room("Dev")
        for i in range(1, 9):
            rooms.append_message(dev_id, make_message(i, dev_id))

        assert [m.id for m in rooms.recent_messages(dev_id)] == [4, 5, 6, 7, 8]

    def test_find_message(self):
        rooms = RoomDirectory(capacity=2)
        for i in range(1, 4):
            rooms.append_message("global", make_message(i))

        assert rooms.find_message("global", 3).id == 3
        # evicted
        assert rooms.find_message("global", 1) is None
        assert rooms.find_message("nope", 3) is None
