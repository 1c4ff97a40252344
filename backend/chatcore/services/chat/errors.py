"""
Exceptions raised by the chat services.

Validation errors are reported back to the originating connection as an
``errorNotice`` event. Lookups that miss (unknown room, unknown message) are
not errors: services return ``None`` and the event is dropped.
"""


class ChatValidationError(Exception):
    """Base class for user-facing validation failures."""

    code = "ValidationError"
    default_message = "Invalid request."

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidName(ChatValidationError):
    """Display name is blank."""

    code = "InvalidName"
    default_message = "Display name cannot be empty."


class EmptyName(ChatValidationError):
    """Room name is blank."""

    code = "EmptyName"
    default_message = "Room name cannot be empty."


class DuplicateName(ChatValidationError):
    """A room with the same name (case-insensitive) already exists."""

    code = "DuplicateName"
    default_message = "Room name already exists."


class EmptyMessage(ChatValidationError):
    """Message text is blank."""

    code = "EmptyMessage"
    default_message = "Cannot send an empty message."
