"""
In-memory view of the catalog that the learning hub page renders from.

The view is rebuilt wholesale by :meth:`CatalogProjection.reload`.  Uploads
and deletes only change it after the backing stores confirm, and YouTube
links added through :meth:`CatalogProjection.add_external` live here alone,
so they are gone after the next reload.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from learning_hub.components.models.video_entry import VideoEntry, VideoUpload
from learning_hub.components.services.catalog_filter import (
    ALL_CATEGORIES,
    derive_categories,
    filter_videos,
)
from learning_hub.components.services.catalog_service import (
    DEFAULT_UPLOAD_CATEGORY,
    CatalogService,
)
from learning_hub.components.services.youtube_feed import transient_entry
from learning_hub.core.errors import CatalogError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notice:
    """A short message for the user after an action."""

    title: str
    description: str
    destructive: bool = False


MISSING_UPLOAD_FIELDS = Notice("Error", "Please provide both title and video file", True)
UPLOAD_SUCCEEDED = Notice("Success", "Video uploaded successfully")
UPLOAD_FAILED = Notice("Error", "Failed to upload video. Please try again.", True)
DELETE_SUCCEEDED = Notice("Deleted", "Video removed successfully")
DELETE_FAILED = Notice("Error", "Failed to delete video", True)
EXTERNAL_ADDED = Notice("Added", "YouTube video added")
READ_ONLY = Notice("Error", "Only doctors can add or remove videos", True)


class CatalogProjection:
    """The list of videos currently shown, plus the actions that change it.

    A read-only view (for viewers who are not doctors) refuses upload, delete
    and add_external with the READ_ONLY notice and never calls the service.
    """

    def __init__(
        self,
        service: CatalogService,
        folder: str = "doctor-uploads",
        read_only: bool = False,
    ):
        self._service = service
        self._folder = folder
        self.read_only = read_only
        self.videos: List[VideoEntry] = []

    def reload(self) -> List[VideoEntry]:
        self.videos = self._service.load_catalog()
        return self.videos

    def visible(self, search_term: str = "", category: str = ALL_CATEGORIES) -> List[VideoEntry]:
        return filter_videos(self.videos, search_term, category)

    def categories(self) -> List[str]:
        return derive_categories(self.videos)

    def upload(
        self, title: str, description: str, upload: Optional[VideoUpload]
    ) -> Notice:
        """Upload a doctor's video and show it first in the list."""
        if self.read_only:
            return READ_ONLY
        if not title or upload is None:
            return MISSING_UPLOAD_FIELDS
        try:
            entry = self._service.upload_video(
                self._folder,
                upload,
                title,
                description or None,
                DEFAULT_UPLOAD_CATEGORY,
            )
        except CatalogError as e:
            logger.error(f"Error uploading video: {e}")
            return UPLOAD_FAILED
        self.videos = [entry] + self.videos
        return UPLOAD_SUCCEEDED

    def delete(self, entry: VideoEntry) -> Notice:
        """Delete an uploaded video; YouTube entries cannot be deleted."""
        if self.read_only:
            return READ_ONLY
        if not entry.is_persisted:
            raise ValueError(f"Video {entry.id} is not an uploaded video")
        try:
            self._service.delete_video(entry.id, entry.object_url)
        except CatalogError as e:
            logger.error(f"Error deleting video: {e}")
            return DELETE_FAILED
        self.videos = [v for v in self.videos if v.id != entry.id]
        return DELETE_SUCCEEDED

    def add_external(self, title: str, url: str, description: str = "") -> Optional[Notice]:
        """Append a YouTube link to this view only.  Missing fields are ignored."""
        if self.read_only:
            return READ_ONLY
        if not title or not url:
            return None
        entry = transient_entry(
            title,
            url,
            description,
            self._service.external_prefix,
            taken_ids={v.id for v in self.videos},
        )
        self.videos = self.videos + [entry]
        return EXTERNAL_ADDED
