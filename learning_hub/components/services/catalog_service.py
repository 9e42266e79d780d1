"""
Video catalog service.

Merges the static YouTube feed with the uploaded videos recorded in the
metadata store, and runs the upload and delete pipelines across the object
store and the metadata store.

The two stores cannot be committed together.  The metadata row is the source
of truth for whether a video exists, so a failure between the two steps can
leave an object with no row (an orphan) but never a row with no object
written yet.
"""

import logging
import os
import random
import time
import uuid
from typing import List, Optional, Sequence

from learning_hub.components.models.video_entry import FeedItem, VideoEntry, VideoUpload
from learning_hub.components.services.orphan_policy import OrphanPolicy, RetainOrphanPolicy
from learning_hub.components.services.user_service import IdentityProvider
from learning_hub.components.services.youtube_feed import feed_entries
from learning_hub.core.config.catalog_config import SAMPLE_YOUTUBE_FEED
from learning_hub.core.errors import PersistFailed, RemoveFailed, Unauthenticated

logger = logging.getLogger(__name__)

DEFAULT_UPLOAD_CATEGORY = "Manual"


def storage_object_name(folder: str, filename: str) -> str:
    """Return a collision-free ``<folder>/<token>-<millis>.<ext>`` object name."""
    _, ext = os.path.splitext(filename)
    suffix = f"{uuid.uuid4().hex}-{int(time.time() * 1000)}"
    return f"{folder.strip('/')}/{suffix}{ext}"


class CatalogService:
    """Application service behind the learning hub video catalog."""

    def __init__(
        self,
        repository,
        object_store,
        identity: IdentityProvider,
        feed: Sequence[FeedItem] = SAMPLE_YOUTUBE_FEED,
        external_prefix: str = "yt",
        orphan_policy: Optional[OrphanPolicy] = None,
        rng: Optional[random.Random] = None,
    ):
        self.repository = repository
        self.object_store = object_store
        self.identity = identity
        self.feed = tuple(feed)
        self.external_prefix = external_prefix
        self.orphan_policy = orphan_policy or RetainOrphanPolicy()
        self._rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    def load_catalog(self) -> List[VideoEntry]:
        """Return the feed entries followed by the persisted entries, newest first.

        A metadata store failure is logged and the feed is returned alone.
        """
        external = feed_entries(self.feed, self.external_prefix, self._rng)
        try:
            rows = self.repository.list_all()
        except PersistFailed as e:
            logger.warning(
                f"Catalog load degraded, serving {len(external)} external videos only: {e}"
            )
            return external

        persisted = []
        for row in rows:
            if not row.get("video_url"):
                logger.warning(f"Skipping video {row.get('id')}: no video_url")
                continue
            try:
                persisted.append(VideoEntry.from_row(row))
            except ValueError as e:
                logger.warning(f"Skipping video {row.get('id')}: {e}")
        return external + persisted

    # ------------------------------------------------------------------
    # Upload
    # ------------------------------------------------------------------

    def upload_video(
        self,
        folder: str,
        upload: VideoUpload,
        title: str,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> VideoEntry:
        """Store *upload* and record it, returning the new persisted entry.

        Raises Unauthenticated, UploadFailed or PersistFailed.  On PersistFailed
        the stored object is handed to the orphan policy before the error is
        re-raised.
        """
        actor = self.identity.get_current_actor()
        if actor is None:
            raise Unauthenticated()

        object_name = storage_object_name(folder, upload.filename)
        self.object_store.upload(object_name, upload.content, upload.content_type)
        video_url = self.object_store.public_url(object_name)

        try:
            row = self.repository.insert(
                {
                    "title": title,
                    "description": description,
                    "category": category or DEFAULT_UPLOAD_CATEGORY,
                    "video_url": video_url,
                    "uploaded_by": actor.id,
                    "views": 0,
                }
            )
        except PersistFailed:
            logger.error(f"Metadata insert failed after uploading {object_name}")
            self.orphan_policy.handle_orphan(object_name)
            raise

        entry = VideoEntry.from_row(row)
        logger.info(f"Video {entry.id} uploaded by {actor.id}: {object_name}")
        return entry

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete_video(self, video_id: str, object_url: str) -> None:
        """Delete the row, then the object it referenced.

        A PersistFailed leaves both in place.  A RemoveFailed means the row is
        gone and the object was left behind.
        """
        self.repository.delete_by_id(video_id)

        object_name = self.object_store.object_path_from_url(object_url)
        if object_name is None:
            logger.error(f"Video {video_id} deleted but {object_url} is not a stored object URL")
            raise RemoveFailed(f"Cannot locate the stored object for {object_url}")

        try:
            self.object_store.remove(object_name)
        except RemoveFailed:
            logger.error(f"Video {video_id} deleted but object {object_name} was left behind")
            raise
        logger.info(f"Video {video_id} deleted")
