"""
Pytest configuration and fixtures for the tournament API tests.
"""
import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set testing environment before importing app
os.environ['FLASK_ENV'] = 'testing'

from campeonato.app import create_app
from campeonato.torneio_service import TournamentService


@pytest.fixture
def service():
    """Fresh in-memory store with no publisher."""
    return TournamentService()


@pytest.fixture
def app(service):
    """Create application for testing around the service fixture."""
    app = create_app('testing', service=service)
    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def sample_tournament(service):
    """Create a sample tournament for testing."""
    return service.create('Copa', 2024)


@pytest.fixture
def mock_publisher(mocker):
    """Mock PubSub client."""
    mock = mocker.MagicMock()
    mock.publish.return_value = True
    mock.ping.return_value = True
    return mock


@pytest.fixture
def fake_redis(mocker):
    """MagicMock standing in for a redis.Redis connection."""
    return mocker.MagicMock()
