"""
Presence tracking: which connections are online and under which name.
"""

import logging
from typing import Dict, List, Optional

from chatcore.schemas.socketio import PresenceEntry
from chatcore.services.chat.errors import InvalidName

logger = logging.getLogger(__name__)


class PresenceRegistry:
    """
    Maps connection ids to display names.

    Display names are not unique; two connections may share one. Entries are
    kept in join order so presence snapshots are deterministic.
    """

    def __init__(self) -> None:
        self._names: Dict[str, str] = {}

    def join(self, connection_id: str, display_name: str) -> str:
        """
        Register a connection under a display name.

        Args:
            connection_id: Transport connection id
            display_name: Requested display name

        Returns:
            The stored (trimmed) display name

        Raises:
            InvalidName: If the name is blank after trimming
        """
        name = (display_name or "").strip()
        if not name:
            raise InvalidName()

        self._names[connection_id] = name
        logger.info(f"{name} joined the chat ({connection_id})")
        return name

    def remove(self, connection_id: str) -> Optional[str]:
        """Forget a connection, returning its display name if it had one."""
        name = self._names.pop(connection_id, None)
        if name is not None:
            logger.info(f"{name} left the chat ({connection_id})")
        return name

    def get(self, connection_id: str) -> Optional[str]:
        return self._names.get(connection_id)

    def list_all(self) -> List[PresenceEntry]:
        return [
            PresenceEntry(connection_id=cid, display_name=name)
            for cid, name in self._names.items()
        ]

    def __contains__(self, connection_id: str) -> bool:
        return connection_id in self._names

    def __len__(self) -> int:
        return len(self._names)
