"""Storage backend selection."""

import logging

from .config import Settings
from .repositories import InMemoryStorage, KeyValueStorage, YamlFileStorage

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> KeyValueStorage:
    """Pick the key-value backend for the given settings."""
    if settings.ephemeral:
        logger.info("Using in-memory storage; tasks will not be saved")
        return InMemoryStorage()
    logger.info("Using storage file %s", settings.store_path)
    return YamlFileStorage(settings.store_path)
