"""
Emoji reactions on stored room messages.
"""

import logging
from typing import Dict, List, Optional

from chatcore.services.chat.rooms import RoomDirectory

logger = logging.getLogger(__name__)


class ReactionToggler:
    """
    Toggles a connection's reaction on a message.

    A connection holds at most one entry per emoji: reacting again with the
    same emoji removes it. An emoji whose reactor list becomes empty is
    removed from the map entirely.
    """

    def __init__(self, rooms: RoomDirectory) -> None:
        self.rooms = rooms

    def toggle(
        self, connection_id: str, message_id: int, emoji: str, room_id: str
    ) -> Optional[Dict[str, List[str]]]:
        """
        Add or remove a reaction.

        Args:
            connection_id: Reacting connection
            message_id: Target message id
            emoji: Emoji symbol
            room_id: Room holding the message

        Returns:
            The message's full reaction map after the toggle, or None if the
            room or message cannot be found (private and evicted messages
            included)
        """
        if not emoji:
            return None

        message = self.rooms.find_message(room_id, message_id)
        if message is None:
            logger.debug(f"Reaction dropped: message {message_id} not in room {room_id}")
            return None

        reactions = message.reactions
        reactors = reactions.get(emoji)

        if reactors is not None and connection_id in reactors:
            reactors.remove(connection_id)
            if not reactors:
                del reactions[emoji]
        else:
            reactions.setdefault(emoji, []).append(connection_id)

        return reactions
