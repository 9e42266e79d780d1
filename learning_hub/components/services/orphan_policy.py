"""What to do with an uploaded object whose metadata row could not be written."""
import logging
from typing import Protocol

from learning_hub.core.errors import RemoveFailed

logger = logging.getLogger(__name__)


class OrphanPolicy(Protocol):
    def handle_orphan(self, object_name: str) -> None: ...


class RetainOrphanPolicy:
    """Leave the object in place and log it for a later cleanup."""

    def handle_orphan(self, object_name: str) -> None:
        logger.warning(f"Orphaned object left in storage: {object_name}")


class RemoveOrphanPolicy:
    """Delete the orphaned object once; a failed removal is logged, not raised."""

    def __init__(self, object_store):
        self._store = object_store

    def handle_orphan(self, object_name: str) -> None:
        try:
            self._store.remove(object_name)
        except RemoveFailed as exc:
            logger.error(f"Could not remove orphaned object {object_name}: {exc}")
            return
        logger.info(f"Removed orphaned object {object_name}")
