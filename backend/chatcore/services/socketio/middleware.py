"""
Socket.io middleware for error handling and event logging.

Every event handler is wrapped so that a failure in one event never reaches
python-socketio or affects other connections. Validation failures are
reported back to the sender only.
"""

import logging
import time
from functools import wraps
from typing import Any, Callable

from pydantic import ValidationError

from chatcore.schemas.socketio import ErrorNotice
from chatcore.services.chat.errors import ChatValidationError
from chatcore.services.chat.lifecycle import ERROR_NOTICE

logger = logging.getLogger(__name__)

# Handlers slower than this are logged as warnings
SLOW_EVENT_THRESHOLD = 1.0


async def notify_error(transport: Any, sid: str, message: str, code: str) -> None:
    """Send an ``errorNotice`` to a single connection."""
    notice = ErrorNotice(message=message, code=code)
    await transport.emit(ERROR_NOTICE, notice.to_wire(), room=sid)


def error_handling_middleware(event_name: str, transport: Any):
    """
    Creates error handling middleware for Socket.io event handlers.

    - ChatValidationError -> ``errorNotice`` with the error's code
    - pydantic ValidationError (malformed payload) -> ``errorNotice``
      with code ``InvalidPayload``
    - anything else -> logged with traceback, generic ``errorNotice``
    """

    def decorator(handler: Callable) -> Callable:
        @wraps(handler)
        async def wrapper(sid: str, *args, **kwargs):
            start_time = time.time()

            try:
                result = await handler(sid, *args, **kwargs)
                logger.debug(
                    f"Event {event_name} completed for {sid} in "
                    f"{time.time() - start_time:.3f}s"
                )
                return result

            except ChatValidationError as e:
                logger.info(f"Rejected {event_name} from {sid}: {e.code}")
                await notify_error(transport, sid, e.message, e.code)

            except ValidationError as e:
                logger.warning(
                    f"Malformed {event_name} payload from {sid}: {e.error_count()} error(s)"
                )
                await notify_error(
                    transport, sid, f"Malformed {event_name} payload.", "InvalidPayload"
                )

            except Exception as e:
                logger.error(
                    f"Error in event handler {event_name} for {sid}: {e}", exc_info=True
                )
                await notify_error(transport, sid, "Internal server error", "InternalError")

            finally:
                execution_time = time.time() - start_time
                if execution_time > SLOW_EVENT_THRESHOLD:
                    logger.warning(
                        f"Slow Socket.io operation - Event: {event_name}, "
                        f"Duration: {execution_time:.3f}s"
                    )

        return wrapper

    return decorator
