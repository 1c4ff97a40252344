"""
Socket.io integration package for real-time communication.

This package provides the Socket.io transport (server configuration and
FastAPI mounting), the inbound event handlers and their error handling
middleware.
"""

from chatcore.services.socketio.server import SocketIOServer
from chatcore.services.socketio.events import build_handlers, register_handlers
from chatcore.services.socketio.middleware import (
    error_handling_middleware,
    notify_error,
)

__all__ = [
    "SocketIOServer",
    "build_handlers",
    "register_handlers",
    "error_handling_middleware",
    "notify_error",
]
