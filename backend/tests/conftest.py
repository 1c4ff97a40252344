"""
Test configuration and fixtures for pytest.
"""

from collections import defaultdict

import pytest
from fastapi.testclient import TestClient

from chatcore.main import create_app
from chatcore.services.chat.lifecycle import ChatController


class RecordingTransport:
    """
    Stand-in for the Socket.io server.

    Records every emit as ``(event, data, room)`` and tracks room
    subscriptions so tests can assert on who would receive what.
    """

    def __init__(self):
        self.emitted = []
        self.subscriptions = defaultdict(set)
        self.handlers = {}

    async def emit(self, event, data=None, room=None):
        self.emitted.append((event, data, room))

    async def enter_room(self, sid, room):
        self.subscriptions[room].add(sid)

    async def leave_room(self, sid, room):
        self.subscriptions[room].discard(sid)

    def on(self, event, handler):
        self.handlers[event] = handler

    def events(self, name):
        """Return ``(data, room)`` for every emit of one event."""
        return [(data, room) for event, data, room in self.emitted if event == name]

    def rooms_of(self, sid):
        return {room for room, sids in self.subscriptions.items() if sid in sids}

    def clear(self):
        self.emitted.clear()


@pytest.fixture
def transport():
    """A fresh recording transport."""
    return RecordingTransport()


@pytest.fixture
def controller(transport):
    """A chat controller wired to the recording transport."""
    return ChatController(transport)


@pytest.fixture
def app():
    """A freshly built application with empty chat state."""
    return create_app()


@pytest.fixture
def client(app):
    """Create a test client for the application."""
    return TestClient(app)
