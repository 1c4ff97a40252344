"""
Pydantic models for Socket.io message formats.

This module defines the data structures for messages exchanged via Socket.io,
providing validation for inbound event payloads and a camelCase wire format
for everything the server emits.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from chatcore.core.config import CHAT_DEFAULT_ROOM_ID


def utc_now() -> datetime:
    """Return the current timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class WireModel(BaseModel):
    """Base model using camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


# ---------------------------------------------------------------------------
# Inbound payloads
# ---------------------------------------------------------------------------


class SendMessageRequest(WireModel):
    """Payload of ``sendMessage``."""

    text: str = ""
    room_id: str = CHAT_DEFAULT_ROOM_ID


class PrivateMessageRequest(WireModel):
    """Payload of ``sendPrivateMessage``."""

    recipient_id: str
    text: str = ""


class TypingRequest(WireModel):
    """Payload of ``setTyping``."""

    room_id: str = CHAT_DEFAULT_ROOM_ID
    is_typing: bool = False


class ReactionRequest(WireModel):
    """Payload of ``toggleReaction``."""

    message_id: int
    emoji: str
    room_id: str = CHAT_DEFAULT_ROOM_ID


# ---------------------------------------------------------------------------
# Stored / outbound models
# ---------------------------------------------------------------------------


class ChatMessage(WireModel):
    """
    A chat message.

    Everything except ``reactions`` is fixed at creation. ``reactions`` maps
    an emoji to the ids of the connections that reacted with it, in the
    order they reacted.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    id: int
    text: str
    sender_id: str
    sender: str
    timestamp: datetime = Field(default_factory=utc_now)
    room_id: Optional[str] = None
    is_private: bool = False
    recipient_id: Optional[str] = None
    reactions: Dict[str, List[str]] = Field(default_factory=dict)


class RoomSummary(WireModel):
    """Entry of a ``roomList`` event."""

    id: str
    name: str


class PresenceEntry(WireModel):
    """Entry of a ``presenceList`` event, also the ``userJoined``/``userLeft`` payload."""

    connection_id: str
    display_name: str


class JoinedRoom(WireModel):
    """Payload of ``joinedRoom``."""

    room_id: str
    name: str


class ReactionsUpdate(WireModel):
    """Payload of ``reactionsUpdated``."""

    message_id: int
    reactions: Dict[str, List[str]]


class ErrorNotice(WireModel):
    """Payload of ``errorNotice``."""

    message: str
    code: Optional[str] = None
