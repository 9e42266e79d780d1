"""Catalog entities shared by the catalog service and its collaborators."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import BinaryIO, Optional, Union

DEFAULT_CATEGORY = "General"

_YOUTUBE_ID_PATTERN = re.compile(r"(?:v=|/)([0-9A-Za-z_-]{11})")


def youtube_video_id(url: str) -> Optional[str]:
    """Return the 11-character YouTube identifier embedded in *url*, if any."""
    match = _YOUTUBE_ID_PATTERN.search(url)
    return match.group(1) if match else None


def youtube_thumbnail_url(url: str) -> str:
    """Return the hqdefault thumbnail for *url*, or "" when no identifier is found."""
    video_id = youtube_video_id(url)
    return f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg" if video_id else ""


def youtube_embed_url(url: str) -> str:
    """Return the embeddable player URL for *url*, falling back to *url* itself."""
    video_id = youtube_video_id(url)
    return f"https://www.youtube.com/embed/{video_id}" if video_id else url


@dataclass(frozen=True)
class FeedItem:
    """One item of the static externally hosted feed."""

    url: str
    title: str


@dataclass(frozen=True)
class Actor:
    """The identity an upload is attributed to."""

    id: str


@dataclass(frozen=True)
class VideoEntry:
    """A single catalog item, either externally hosted or persisted.

    Exactly one of ``external_url`` (a playable YouTube link) and
    ``object_url`` (the public URL of an uploaded object) is set.
    """

    id: str
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    views: int = 0
    external_url: Optional[str] = None
    object_url: Optional[str] = None
    thumbnail: Optional[str] = None
    uploaded_by: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.title:
            raise ValueError(f"Video entry {self.id!r} has no title")
        if bool(self.external_url) == bool(self.object_url):
            raise ValueError(
                f"Video entry {self.id!r} needs exactly one of external_url / object_url"
            )
        if self.views < 0:
            raise ValueError(f"Video entry {self.id!r} has negative views")

    @property
    def effective_category(self) -> str:
        return self.category or DEFAULT_CATEGORY

    @property
    def is_persisted(self) -> bool:
        return bool(self.object_url)

    @property
    def embed_url(self) -> Optional[str]:
        if not self.external_url:
            return None
        return youtube_embed_url(self.external_url)

    @classmethod
    def from_row(cls, row: dict) -> "VideoEntry":
        """Map a ``learning_videos`` row onto a persisted entry."""
        return cls(
            id=str(row["id"]),
            title=row["title"],
            description=row.get("description"),
            category=row.get("category") or DEFAULT_CATEGORY,
            views=row.get("views") or 0,
            object_url=row["video_url"],
            thumbnail=row.get("thumbnail_url") or None,
            uploaded_by=str(row["uploaded_by"]) if row.get("uploaded_by") else None,
            created_at=row.get("created_at"),
        )


@dataclass(frozen=True)
class VideoUpload:
    """A video file handed over for upload: its original name and its bytes."""

    filename: str
    content: Union[bytes, BinaryIO]
    content_type: Optional[str] = "video/mp4"
