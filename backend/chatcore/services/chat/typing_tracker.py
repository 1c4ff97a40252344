"""
Per-room typing indicators.

The tracker only mirrors the last signal received from each connection.
Clients are expected to send a stop signal after an idle period; the server
does no debouncing or expiry of its own.
"""

import logging
from typing import Dict, List

logger = logging.getLogger(__name__)


class TypingTracker:
    """Tracks which connections are typing in which room."""

    def __init__(self) -> None:
        # room_id -> {connection_id: display_name}
        self._typing: Dict[str, Dict[str, str]] = {}

    def set_typing(
        self, connection_id: str, display_name: str, room_id: str, is_typing: bool
    ) -> List[str]:
        """
        Record a typing start or stop signal.

        Returns:
            Display names currently typing in the room
        """
        room = self._typing.setdefault(room_id, {})
        if is_typing:
            room[connection_id] = display_name
        else:
            room.pop(connection_id, None)

        return self.typing_names(room_id)

    def typing_names(self, room_id: str) -> List[str]:
        return list(self._typing.get(room_id, {}).values())

    def remove_everywhere(self, connection_id: str) -> List[str]:
        """
        Drop a connection from every room's typing set.

        Returns:
            Ids of the rooms that had an entry removed
        """
        affected = []
        for room_id, room in self._typing.items():
            if room.pop(connection_id, None) is not None:
                affected.append(room_id)

        if affected:
            logger.debug(f"Cleared typing state of {connection_id} in {affected}")
        return affected
