"""
Room directory with bounded in-memory message history.

Rooms are created on request and live for the lifetime of the process. Each
room keeps its most recent messages in a fixed-size ring buffer; once full,
appending a message evicts the oldest one.
"""

import logging
import uuid
from collections import deque
from typing import Deque, Dict, List, Optional

from chatcore.core.config import (
    CHAT_DEFAULT_ROOM_ID,
    CHAT_DEFAULT_ROOM_NAME,
    CHAT_HISTORY_LIMIT,
)
from chatcore.schemas.socketio import ChatMessage, RoomSummary
from chatcore.services.chat.errors import DuplicateName, EmptyName

logger = logging.getLogger(__name__)


class Room:
    """A named channel and its recent message history."""

    def __init__(self, room_id: str, name: str, capacity: int = CHAT_HISTORY_LIMIT):
        self.id = room_id
        self.name = name
        self.messages: Deque[ChatMessage] = deque(maxlen=capacity)

    def summary(self) -> RoomSummary:
        return RoomSummary(id=self.id, name=self.name)

    def __repr__(self) -> str:
        return f"Room(id={self.id!r}, name={self.name!r}, messages={len(self.messages)})"


class RoomDirectory:
    """
    Owns every room and its history.

    The default room is created on construction and can be neither deleted
    nor duplicated. Room names are unique case-insensitively.

    Usage:
        rooms = RoomDirectory()
        room_id = rooms.create_room("Dev")
        rooms.append_message(room_id, message)
        backfill = rooms.recent_messages(room_id)
    """

    def __init__(
        self,
        default_room_id: str = CHAT_DEFAULT_ROOM_ID,
        default_room_name: str = CHAT_DEFAULT_ROOM_NAME,
        capacity: int = CHAT_HISTORY_LIMIT,
    ) -> None:
        self.capacity = capacity
        self.default_room_id = default_room_id
        # dicts keep insertion order, so the default room is always listed first
        self._rooms: Dict[str, Room] = {
            default_room_id: Room(default_room_id, default_room_name, capacity)
        }

    def create_room(self, name: str) -> str:
        """
        Create a new room.

        Args:
            name: Human-readable room name

        Returns:
            The generated room id

        Raises:
            EmptyName: If the name is blank after trimming
            DuplicateName: If a room with that name already exists
        """
        name = (name or "").strip()
        if not name:
            raise EmptyName()

        folded = name.casefold()
        if any(room.name.casefold() == folded for room in self._rooms.values()):
            raise DuplicateName()

        room_id = f"room_{uuid.uuid4().hex[:12]}"
        self._rooms[room_id] = Room(room_id, name, self.capacity)
        logger.info(f"Room created: {room_id}, name: {name}")
        return room_id

    def get_room(self, room_id: str) -> Optional[Room]:
        return self._rooms.get(room_id)

    def list_rooms(self) -> List[RoomSummary]:
        """Return every room in creation order, default room first."""
        return [room.summary() for room in self._rooms.values()]

    def append_message(self, room_id: str, message: ChatMessage) -> bool:
        """
        Push a message onto a room's history, evicting the oldest if full.

        Returns:
            False if the room does not exist
        """
        room = self._rooms.get(room_id)
        if room is None:
            return False

        room.messages.append(message)
        return True

    def recent_messages(
        self, room_id: str, limit: int = CHAT_HISTORY_LIMIT
    ) -> List[ChatMessage]:
        """
        Get a room's most recent messages, oldest first.

        Args:
            room_id: Room to read
            limit: Maximum number of messages to return

        Returns:
            Up to ``limit`` messages, most recent last; empty if the room
            does not exist
        """
        room = self._rooms.get(room_id)
        if room is None or limit <= 0:
            return []

        messages = list(room.messages)
        return messages[-limit:]

    def find_message(self, room_id: str, message_id: int) -> Optional[ChatMessage]:
        """Look up a message still held in a room's history."""
        room = self._rooms.get(room_id)
        if room is None:
            return None

        for message in room.messages:
            if message.id == message_id:
                return message
        return None

    def __contains__(self, room_id: str) -> bool:
        return room_id in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)
