"""Unit tests for main FastAPI application."""

from chatcore.main import app as module_app, create_app
from chatcore.services.chat.lifecycle import ChatController
from chatcore.services.socketio.server import SocketIOServer


class TestAppConfiguration:
    """Tests for application initialization and configuration."""

    def test_app_title(self):
        """Test app is created with the correct title."""
        assert module_app.title == "Chatcore API"

    def test_state_is_wired(self, app):
        """Test the controller and Socket.io server are attached to the app."""
        assert isinstance(app.state.chat, ChatController)
        assert isinstance(app.state.socketio, SocketIOServer)
        assert app.state.chat.transport is app.state.socketio

    def test_each_app_has_its_own_state(self):
        """Test two apps never share chat state."""
        assert create_app().state.chat is not create_app().state.chat

    def test_socketio_mounted(self, app):
        """Test the Socket.io ASGI app is mounted."""
        route_paths = [route.path for route in app.routes]
        assert "/ws" in route_paths

    def test_cors_middleware(self, client):
        """Test CORS middleware by checking response headers."""
        response = client.get("/", headers={"Origin": "http://localhost:5173"})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert response.headers["access-control-allow-credentials"] == "true"


class TestEndpoints:
    """Tests for top-level endpoints."""

    def test_root_endpoint(self, client):
        """Test the root endpoint returns the liveness text."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Socket.io Chat Server is running"

    def test_health_endpoint(self, client):
        """Test the health check endpoint on an empty server."""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "connections": 0,
            "users": 0,
            "rooms": 1,
        }
