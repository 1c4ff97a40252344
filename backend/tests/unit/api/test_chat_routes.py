"""
Tests for the chat REST routes.

State is set up through the controller the app owns, the same object the
Socket.io handlers use.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def chat(app):
    """The application's chat controller, detached from the real Socket.io server."""
    controller = app.state.chat
    controller.transport = AsyncMock()
    return controller


def run(coro):
    return asyncio.run(coro)


def test_users_empty(client):
    response = client.get("/api/users")
    assert response.status_code == 200
    assert response.json() == []


def test_users_in_join_order(client, chat):
    run(chat.identify("sid-b", "bob"))
    run(chat.identify("sid-a", "alice"))

    response = client.get("/api/users")
    assert response.json() == [
        {"connectionId": "sid-b", "displayName": "bob"},
        {"connectionId": "sid-a", "displayName": "alice"},
    ]


def test_rooms(client, chat):
    room_id = run(chat.create_room("sid-a", "Dev"))

    response = client.get("/api/rooms")
    assert response.status_code == 200
    assert response.json() == [
        {"id": "global", "name": "Global"},
        {"id": room_id, "name": "Dev"},
    ]


def test_default_room_messages(client, chat):
    run(chat.identify("sid-a", "alice"))
    for text in ("one", "two", "three"):
        run(chat.send_message("sid-a", "global", text))

    response = client.get("/api/messages")
    assert response.status_code == 200
    body = response.json()
    assert [m["text"] for m in body] == ["one", "two", "three"]
    assert body[0]["senderId"] == "sid-a"
    assert body[0]["roomId"] == "global"

    response = client.get("/api/messages", params={"limit": 2})
    assert [m["text"] for m in response.json()] == ["two", "three"]


def test_room_messages(client, chat):
    run(chat.identify("sid-a", "alice"))
    room_id = run(chat.create_room("sid-a", "Dev"))
    run(chat.send_message("sid-a", room_id, "hello dev"))

    response = client.get(f"/api/rooms/{room_id}/messages")
    assert response.status_code == 200
    assert [m["text"] for m in response.json()] == ["hello dev"]


def test_room_messages_unknown_room(client):
    response = client.get("/api/rooms/nope/messages")
    assert response.status_code == 404
    assert response.json() == {"detail": "Room not found"}


def test_messages_limit_validated(client):
    assert client.get("/api/messages", params={"limit": 0}).status_code == 422
    assert client.get("/api/messages", params={"limit": 101}).status_code == 422
