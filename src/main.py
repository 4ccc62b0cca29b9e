"""Entrypoint: wire settings, logging, transport and service together."""

import logging
from typing import Optional

from src.core.config import Settings
from src.core.log_config import configure_logging
from src.services.codenames_service import CodenamesService
from src.transport.http_transport import HTTPGameTransport

logger = logging.getLogger(__name__)


def create_client(settings: Optional[Settings] = None) -> CodenamesService:
    """Create and configure a Codenames client talking to the configured server."""
    settings = settings or Settings()
    configure_logging(settings)
    logger.debug("Using game server at %s", settings.server_url)
    return CodenamesService(HTTPGameTransport(settings), settings)
