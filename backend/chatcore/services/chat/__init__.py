"""
Chat services package initialization.
"""

from chatcore.services.chat.errors import (
    ChatValidationError,
    DuplicateName,
    EmptyMessage,
    EmptyName,
    InvalidName,
)
from chatcore.services.chat.lifecycle import ChatController
from chatcore.services.chat.message_router import MessageRouter
from chatcore.services.chat.presence import PresenceRegistry
from chatcore.services.chat.reactions import ReactionToggler
from chatcore.services.chat.rooms import Room, RoomDirectory
from chatcore.services.chat.typing_tracker import TypingTracker

__all__ = [
    "ChatController",
    "ChatValidationError",
    "DuplicateName",
    "EmptyMessage",
    "EmptyName",
    "InvalidName",
    "MessageRouter",
    "PresenceRegistry",
    "ReactionToggler",
    "Room",
    "RoomDirectory",
    "TypingTracker",
]
