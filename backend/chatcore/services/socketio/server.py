"""
Socket.io server configuration and FastAPI integration.

This module wraps the python-socketio ASGI server and exposes the small set
of transport primitives the chat controller needs: emitting to everyone, to
a room or to a single connection, and managing room subscriptions.
"""

import logging
from typing import Any, Callable, Optional

import socketio
from fastapi import FastAPI

from chatcore.core.config import (
    SOCKETIO_CORS_ORIGINS,
    SOCKETIO_MAX_HTTP_BUFFER_SIZE,
    SOCKETIO_PING_INTERVAL,
    SOCKETIO_PING_TIMEOUT,
)

# Configure logger
logger = logging.getLogger(__name__)


class SocketIOServer:
    """Socket.io server running in ASGI mode with an in-process client manager."""

    def __init__(self, cors_origins: Optional[list] = None):
        """Initialize the Socket.io server."""
        self.sio = socketio.AsyncServer(
            async_mode="asgi",
            cors_allowed_origins=cors_origins
            if cors_origins is not None
            else SOCKETIO_CORS_ORIGINS,
            ping_timeout=SOCKETIO_PING_TIMEOUT,
            ping_interval=SOCKETIO_PING_INTERVAL,
            max_http_buffer_size=SOCKETIO_MAX_HTTP_BUFFER_SIZE,
            logger=False,
            engineio_logger=False,
        )

        # Create ASGI app
        self.app = socketio.ASGIApp(self.sio)
        logger.info("Socket.IO server initialized")

    def mount_to_fastapi(self, fastapi_app: FastAPI, path: str = "/ws") -> None:
        """Mount the Socket.io server to a FastAPI application.

        Args:
            fastapi_app: The FastAPI application to mount to
            path: The URL path to mount the Socket.io server on
        """
        fastapi_app.mount(path, self.app)
        logger.info(f"Socket.IO server mounted to FastAPI at path: {path}")

    def on(self, event: str, handler: Callable) -> None:
        """Register an event handler.

        Args:
            event: Event name to listen for
            handler: Coroutine to call when the event is received
        """
        self.sio.on(event, handler)

    async def emit(
        self,
        event: str,
        data: Any = None,
        room: Optional[str] = None,
    ) -> None:
        """Emit an event to connected clients.

        Sending to a connection that has already gone away is a no-op.

        Args:
            event: Event name to emit
            data: Data to send with the event
            room: Room or session ID to emit to, or None for global broadcast
        """
        await self.sio.emit(event, data, room=room)

    async def enter_room(self, sid: str, room: str) -> None:
        """Add a client to a room.

        Args:
            sid: Session ID of the client
            room: Room name to join
        """
        await self.sio.enter_room(sid, room)

    async def leave_room(self, sid: str, room: str) -> None:
        """Remove a client from a room.

        Args:
            sid: Session ID of the client
            room: Room name to leave
        """
        await self.sio.leave_room(sid, room)

