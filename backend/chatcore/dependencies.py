"""
Dependency injection functions for the API.
"""

from fastapi import Request

from chatcore.services.chat.lifecycle import ChatController


def get_chat_controller(request: Request) -> ChatController:
    """Return the chat controller created at application startup."""
    return request.app.state.chat
