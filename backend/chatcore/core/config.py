"""
Runtime configuration for the chat server, read from environment variables.
"""

import json
import os

# Socket.io transport
CLIENT_URL = os.getenv("CLIENT_URL", "http://localhost:5173")
SOCKETIO_CORS_ORIGINS = json.loads(
    os.getenv("SOCKETIO_CORS_ORIGINS", json.dumps([CLIENT_URL]))
)
SOCKETIO_PING_TIMEOUT = int(os.getenv("SOCKETIO_PING_TIMEOUT", "60"))
SOCKETIO_PING_INTERVAL = int(os.getenv("SOCKETIO_PING_INTERVAL", "25"))
SOCKETIO_MAX_HTTP_BUFFER_SIZE = int(
    os.getenv("SOCKETIO_MAX_HTTP_BUFFER_SIZE", "1000000")
)
SOCKETIO_MOUNT_PATH = os.getenv("SOCKETIO_MOUNT_PATH", "/ws")

# Chat state
CHAT_HISTORY_LIMIT = int(os.getenv("CHAT_HISTORY_LIMIT", "100"))
CHAT_DEFAULT_ROOM_ID = os.getenv("CHAT_DEFAULT_ROOM_ID", "global")
CHAT_DEFAULT_ROOM_NAME = os.getenv("CHAT_DEFAULT_ROOM_NAME", "Global")
ANONYMOUS_SENDER = "Anonymous"

# HTTP server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
