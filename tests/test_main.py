"""Unit tests for src/main.py"""

from src.core.config import Settings
from src.main import create_client
from src.services.codenames_service import CodenamesService
from src.transport.http_transport import HTTPGameTransport


def test_create_client(settings: Settings) -> None:
    client = create_client(settings)
    assert isinstance(client, CodenamesService)
    assert isinstance(client.transport, HTTPGameTransport)
    assert client.settings is settings
    assert str(client.transport.client.base_url).startswith(settings.server_url)
    client.transport.close()
