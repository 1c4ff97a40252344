"""
REST API endpoints related to chat functionality.

Read-only snapshots of the live chat state. All changes go through the
Socket.io events.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from chatcore.core.config import CHAT_HISTORY_LIMIT
from chatcore.dependencies import get_chat_controller
from chatcore.schemas.socketio import ChatMessage, PresenceEntry, RoomSummary
from chatcore.services.chat.lifecycle import ChatController

router = APIRouter(prefix="/api", tags=["chat"])


@router.get("/users", response_model=List[PresenceEntry])
async def list_users(chat: ChatController = Depends(get_chat_controller)):
    """Return every identified connection in join order."""
    return chat.presence.list_all()


@router.get("/rooms", response_model=List[RoomSummary])
async def list_rooms(chat: ChatController = Depends(get_chat_controller)):
    """Return every room in creation order, default room first."""
    return chat.rooms.list_rooms()


@router.get("/messages", response_model=List[ChatMessage])
async def list_default_room_messages(
    limit: int = Query(CHAT_HISTORY_LIMIT, ge=1, le=CHAT_HISTORY_LIMIT),
    chat: ChatController = Depends(get_chat_controller),
):
    """Return the default room's recent messages, most recent last."""
    return chat.rooms.recent_messages(chat.rooms.default_room_id, limit)


@router.get(
    "/rooms/{room_id}/messages",
    response_model=List[ChatMessage],
)
async def list_room_messages(
    room_id: str,
    limit: int = Query(CHAT_HISTORY_LIMIT, ge=1, le=CHAT_HISTORY_LIMIT),
    chat: ChatController = Depends(get_chat_controller),
):
    """
    Return a room's recent messages, most recent last.

    Raises:
        HTTPException: 404 if the room does not exist
    """
    if room_id not in chat.rooms:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Room not found"
        )
    return chat.rooms.recent_messages(room_id, limit)
