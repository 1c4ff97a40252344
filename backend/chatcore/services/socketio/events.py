"""
Socket.io event handlers.

Each inbound event is parsed here and handed to the chat controller, which
owns all state changes and the resulting fan-out.

Inbound events:
    identify            displayName: str
    createRoom          roomName: str
    joinRoom            roomId: str
    sendMessage         {text, roomId}
    sendPrivateMessage  {recipientId, text}
    setTyping           {roomId, isTyping}
    toggleReaction      {messageId, emoji, roomId}
"""

import logging
from typing import Any, Callable, Dict

from chatcore.schemas.socketio import (
    PrivateMessageRequest,
    ReactionRequest,
    SendMessageRequest,
    TypingRequest,
)
from chatcore.services.chat.lifecycle import ChatController
from chatcore.services.socketio.middleware import error_handling_middleware

# Configure logger
logger = logging.getLogger(__name__)


def _as_text(data: Any) -> str:
    """Plain string payloads; anything else counts as empty."""
    return data if isinstance(data, str) else ""


def build_handlers(controller: ChatController) -> Dict[str, Callable]:
    """Create the unwrapped handler coroutines, keyed by event name."""

    async def handle_connect(sid: str, environ: Dict[str, Any], auth: Any = None) -> None:
        await controller.connect(sid)

    async def handle_disconnect(sid: str, *args) -> None:
        await controller.disconnect(sid)

    async def handle_identify(sid: str, data: Any) -> None:
        await controller.identify(sid, _as_text(data))

    async def handle_create_room(sid: str, data: Any) -> None:
        await controller.create_room(sid, _as_text(data))

    async def handle_join_room(sid: str, data: Any) -> None:
        room_id = _as_text(data)
        if room_id:
            await controller.join_room(sid, room_id)

    async def handle_send_message(sid: str, data: Dict[str, Any]) -> None:
        request = SendMessageRequest.model_validate(data or {})
        await controller.send_message(sid, request.room_id, request.text)

    async def handle_send_private_message(sid: str, data: Dict[str, Any]) -> None:
        request = PrivateMessageRequest.model_validate(data or {})
        await controller.send_private_message(sid, request.recipient_id, request.text)

    async def handle_set_typing(sid: str, data: Dict[str, Any]) -> None:
        request = TypingRequest.model_validate(data or {})
        await controller.set_typing(sid, request.room_id, request.is_typing)

    async def handle_toggle_reaction(sid: str, data: Dict[str, Any]) -> None:
        request = ReactionRequest.model_validate(data or {})
        await controller.toggle_reaction(
            sid, request.message_id, request.emoji, request.room_id
        )

    return {
        "connect": handle_connect,
        "disconnect": handle_disconnect,
        "identify": handle_identify,
        "createRoom": handle_create_room,
        "joinRoom": handle_join_room,
        "sendMessage": handle_send_message,
        "sendPrivateMessage": handle_send_private_message,
        "setTyping": handle_set_typing,
        "toggleReaction": handle_toggle_reaction,
    }


def register_handlers(server: Any, controller: ChatController) -> Dict[str, Callable]:
    """
    Register all event handlers with the Socket.io server.

    Returns:
        The wrapped handlers, keyed by event name
    """
    registered = {}
    for event, handler in build_handlers(controller).items():
        wrapped = error_handling_middleware(event, server)(handler)
        server.on(event, wrapped)
        registered[event] = wrapped

    logger.info(f"Registered {len(registered)} Socket.IO event handlers")
    return registered
