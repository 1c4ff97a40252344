"""
Main application initialization and configuration.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from chatcore.api.routes import chat
from chatcore.core.config import HOST, PORT, SOCKETIO_CORS_ORIGINS, SOCKETIO_MOUNT_PATH
from chatcore.core.logging import setup_logging
from chatcore.services.chat.lifecycle import ChatController
from chatcore.services.socketio.events import register_handlers
from chatcore.services.socketio.server import SocketIOServer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Chat server starting up")
    yield
    logger.info("Chat server shutting down")


def create_app() -> FastAPI:
    """
    Build the FastAPI application with the Socket.io server mounted.

    The chat controller is created here and lives as long as the app; it is
    reachable from routes through ``app.state.chat``.
    """
    setup_logging()

    app = FastAPI(title="Chatcore API", lifespan=lifespan)

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=SOCKETIO_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    socketio_server = SocketIOServer()
    controller = ChatController(socketio_server)
    register_handlers(socketio_server, controller)

    app.state.socketio = socketio_server
    app.state.chat = controller

    # Mount Socket.io server
    socketio_server.mount_to_fastapi(app, path=SOCKETIO_MOUNT_PATH)

    # Include routers
    app.include_router(chat.router)

    @app.get("/", response_class=PlainTextResponse)
    def read_root():
        """Return a plain liveness message."""
        return "Socket.io Chat Server is running"

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint with live connection and room counts."""
        return {
            "status": "healthy",
            "connections": controller.connection_count,
            "users": len(controller.presence),
            "rooms": len(controller.rooms),
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("chatcore.main:app", host=HOST, port=PORT)
