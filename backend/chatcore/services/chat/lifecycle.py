"""
Connection lifecycle controller.

The controller owns the chat state (presence, rooms, typing) and is the only
thing that mutates it. Each inbound event maps to one coroutine here; the
coroutine updates state and then fans the result out through the transport.

Connection states:
    connected -> identified (default room) -> identified (room R)* -> gone

All operations run under a single asyncio lock, so mutations and their
fan-out never interleave and messages reach a room in the order they were
routed.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from chatcore.schemas.socketio import (
    ChatMessage,
    JoinedRoom,
    PresenceEntry,
    ReactionsUpdate,
)
from chatcore.services.chat.message_router import MessageRouter
from chatcore.services.chat.presence import PresenceRegistry
from chatcore.services.chat.reactions import ReactionToggler
from chatcore.services.chat.rooms import Room, RoomDirectory
from chatcore.services.chat.typing_tracker import TypingTracker

logger = logging.getLogger(__name__)

# Outbound event names
PRESENCE_LIST = "presenceList"
ROOM_LIST = "roomList"
JOINED_ROOM = "joinedRoom"
ROOM_BACKFILL = "roomBackfill"
MESSAGE = "message"
REACTIONS_UPDATED = "reactionsUpdated"
TYPING_LIST = "typingList"
USER_JOINED = "userJoined"
USER_LEFT = "userLeft"
ERROR_NOTICE = "errorNotice"


class ChatController:
    """
    Orchestrates connect, identify, room changes, routing and disconnect.

    Args:
        transport: Object exposing the coroutines ``emit(event, data,
            room=None)``, ``enter_room(sid, room)`` and ``leave_room(sid,
            room)``. ``room=None`` broadcasts to every connection and
            ``room=<sid>`` addresses a single connection.
    """

    def __init__(
        self,
        transport: Any,
        presence: Optional[PresenceRegistry] = None,
        rooms: Optional[RoomDirectory] = None,
        typing: Optional[TypingTracker] = None,
    ) -> None:
        self.transport = transport
        self.presence = presence or PresenceRegistry()
        self.rooms = rooms or RoomDirectory()
        self.typing = typing or TypingTracker()
        self.router = MessageRouter(self.presence, self.rooms)
        self.reactions = ReactionToggler(self.rooms)

        # connection id -> current room id (None until identified)
        self._current_room: Dict[str, Optional[str]] = {}
        self._lock = asyncio.Lock()

    def current_room(self, sid: str) -> Optional[str]:
        return self._current_room.get(sid)

    @property
    def connection_count(self) -> int:
        return len(self._current_room)

    # ------------------------------------------------------------------
    # Fan-out helpers
    # ------------------------------------------------------------------

    async def _broadcast_presence(self) -> None:
        await self.transport.emit(
            PRESENCE_LIST, [entry.to_wire() for entry in self.presence.list_all()]
        )

    async def _broadcast_typing(self, room_id: str) -> None:
        await self.transport.emit(
            TYPING_LIST, self.typing.typing_names(room_id), room=room_id
        )

    def _room_list(self) -> List[Dict[str, Any]]:
        return [room.to_wire() for room in self.rooms.list_rooms()]

    async def _move_to_room(self, sid: str, room_id: str) -> None:
        previous = self._current_room.get(sid)
        if previous is not None and previous != room_id:
            await self.transport.leave_room(sid, previous)
        await self.transport.enter_room(sid, room_id)
        self._current_room[sid] = room_id

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def connect(self, sid: str) -> None:
        """Record a new transport connection; it has no identity yet."""
        async with self._lock:
            self._current_room.setdefault(sid, None)
        logger.info(f"Client connected: {sid}")

    async def identify(self, sid: str, display_name: str) -> str:
        """
        Attach a display name to a connection and place it in the default room.

        The connection alone receives the room list and a join confirmation;
        everyone then receives the updated presence list.

        Raises:
            InvalidName: If the display name is blank
        """
        async with self._lock:
            name = self.presence.join(sid, display_name)
            default = self.rooms.get_room(self.rooms.default_room_id)
            await self._move_to_room(sid, default.id)

            await self.transport.emit(ROOM_LIST, self._room_list(), room=sid)
            await self.transport.emit(
                JOINED_ROOM, JoinedRoom(room_id=default.id, name=default.name).to_wire(), room=sid
            )
            await self.transport.emit(
                USER_JOINED, PresenceEntry(connection_id=sid, display_name=name).to_wire()
            )
            await self._broadcast_presence()
            return name

    async def create_room(self, sid: str, name: str) -> str:
        """
        Create a room and broadcast the new room list.

        Raises:
            EmptyName: If the name is blank
            DuplicateName: If the name is already taken
        """
        async with self._lock:
            room_id = self.rooms.create_room(name)
            await self.transport.emit(ROOM_LIST, self._room_list())
            logger.info(f"Room {room_id} created by {sid}")
            return room_id

    async def join_room(self, sid: str, room_id: str) -> Optional[Room]:
        """
        Move a connection to another room and send it that room's backfill.

        Unknown rooms and unidentified connections are ignored without any
        subscription change.
        """
        async with self._lock:
            if sid not in self.presence:
                logger.debug(f"Ignoring joinRoom from unidentified connection {sid}")
                return None

            room = self.rooms.get_room(room_id)
            if room is None:
                logger.debug(f"Ignoring joinRoom to unknown room {room_id} from {sid}")
                return None

            await self._move_to_room(sid, room.id)
            await self.transport.emit(
                JOINED_ROOM, JoinedRoom(room_id=room.id, name=room.name).to_wire(), room=sid
            )
            await self.transport.emit(
                ROOM_BACKFILL,
                [message.to_wire() for message in self.rooms.recent_messages(room.id)],
                room=sid,
            )
            logger.info(f"Client {sid} joined room: {room.id}")
            return room

    async def disconnect(self, sid: str) -> None:
        """
        Remove every trace of a connection.

        Clears presence and typing state in every room, then broadcasts the
        updated presence list and the typing list of each affected room.
        """
        async with self._lock:
            self._current_room.pop(sid, None)
            name = self.presence.remove(sid)
            affected_rooms = self.typing.remove_everywhere(sid)

            if name is not None:
                await self.transport.emit(
                    USER_LEFT, PresenceEntry(connection_id=sid, display_name=name).to_wire()
                )
            await self._broadcast_presence()
            for room_id in affected_rooms:
                await self._broadcast_typing(room_id)

        logger.info(f"Client disconnected: {sid}")

    # ------------------------------------------------------------------
    # Messaging
    # ------------------------------------------------------------------

    async def send_message(self, sid: str, room_id: str, text: str) -> Optional[ChatMessage]:
        """
        Route a message to a room, sender included.

        Raises:
            EmptyMessage: If the text is blank
        """
        async with self._lock:
            message = self.router.send(sid, room_id, text)
            if message is None:
                return None

            payload = message.to_wire()
            await self.transport.emit(MESSAGE, payload, room=room_id)
            # senders posting to a room they are not subscribed to still get their copy
            if self._current_room.get(sid) != room_id:
                await self.transport.emit(MESSAGE, payload, room=sid)
            return message

    async def send_private_message(self, sid: str, recipient_id: str, text: str) -> ChatMessage:
        """
        Deliver a private message to its recipient and echo it to the sender.

        Recipients that are not connected are skipped silently.

        Raises:
            EmptyMessage: If the text is blank
        """
        async with self._lock:
            message = self.router.send_private(sid, recipient_id, text)
            payload = message.to_wire()

            # only live connections are valid targets; a room id must never
            # turn a private message into a room broadcast
            if recipient_id != sid and recipient_id in self._current_room:
                await self.transport.emit(MESSAGE, payload, room=recipient_id)
            await self.transport.emit(MESSAGE, payload, room=sid)
            return message

    async def set_typing(self, sid: str, room_id: str, is_typing: bool) -> Optional[List[str]]:
        """Update a connection's typing state and broadcast the room's typing list."""
        async with self._lock:
            name = self.presence.get(sid)
            if name is None or room_id not in self.rooms:
                return None

            names = self.typing.set_typing(sid, name, room_id, is_typing)
            await self.transport.emit(TYPING_LIST, names, room=room_id)
            return names

    async def toggle_reaction(
        self, sid: str, message_id: int, emoji: str, room_id: str
    ) -> Optional[Dict[str, List[str]]]:
        """Toggle a reaction and broadcast the message's reactions to the room."""
        async with self._lock:
            reactions = self.reactions.toggle(sid, message_id, emoji, room_id)
            if reactions is None:
                return None

            update = ReactionsUpdate(message_id=message_id, reactions=reactions)
            await self.transport.emit(REACTIONS_UPDATED, update.to_wire(), room=room_id)
            return reactions
