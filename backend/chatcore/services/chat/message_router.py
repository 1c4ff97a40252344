"""
Message construction and routing.

Room messages are validated, stamped and appended to the room history.
Private messages are built the same way but never stored; delivery of both
kinds is left to the caller, which knows the transport.
"""

import itertools
import logging
from typing import Optional

from chatcore.core.config import ANONYMOUS_SENDER
from chatcore.schemas.socketio import ChatMessage
from chatcore.services.chat.errors import EmptyMessage
from chatcore.services.chat.presence import PresenceRegistry
from chatcore.services.chat.rooms import RoomDirectory

logger = logging.getLogger(__name__)


class MessageRouter:
    """Builds messages and stores room messages in their history."""

    def __init__(self, presence: PresenceRegistry, rooms: RoomDirectory) -> None:
        self.presence = presence
        self.rooms = rooms
        self._ids = itertools.count(1)

    def _sender_name(self, connection_id: str) -> str:
        # Unidentified connections are not rejected here; identification is
        # enforced where rooms are joined.
        return self.presence.get(connection_id) or ANONYMOUS_SENDER

    @staticmethod
    def _validate_text(text: str) -> str:
        if not isinstance(text, str) or not text.strip():
            raise EmptyMessage()
        return text

    def send(self, connection_id: str, room_id: str, text: str) -> Optional[ChatMessage]:
        """
        Create a room message and append it to the room history.

        Args:
            connection_id: Sender connection id
            room_id: Target room
            text: Message body

        Returns:
            The stored message, or None if the room does not exist

        Raises:
            EmptyMessage: If the text is blank after trimming
        """
        text = self._validate_text(text)

        if room_id not in self.rooms:
            logger.debug(f"Dropped message from {connection_id} to unknown room {room_id}")
            return None

        message = ChatMessage(
            id=next(self._ids),
            text=text,
            sender_id=connection_id,
            sender=self._sender_name(connection_id),
            room_id=room_id,
        )
        self.rooms.append_message(room_id, message)

        logger.info(f"Message {message.id} sent to room {room_id} by {message.sender}")
        return message

    def send_private(self, connection_id: str, recipient_id: str, text: str) -> ChatMessage:
        """
        Create a private message for a single recipient.

        The recipient is not checked; delivery to a connection that is gone
        is a no-op at the transport.

        Raises:
            EmptyMessage: If the text is blank after trimming
        """
        text = self._validate_text(text)

        message = ChatMessage(
            id=next(self._ids),
            text=text,
            sender_id=connection_id,
            sender=self._sender_name(connection_id),
            is_private=True,
            recipient_id=recipient_id,
        )

        logger.info(f"Private message {message.id} from {connection_id} to {recipient_id}")
        return message
