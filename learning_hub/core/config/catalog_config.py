"""Catalog configuration: upload folder, feed prefix and the sample YouTube feed."""
import os
from typing import Tuple

from learning_hub.components.models.video_entry import FeedItem

SAMPLE_YOUTUBE_FEED: Tuple[FeedItem, ...] = (
    FeedItem(
        url="https://www.youtube.com/watch?v=_snimIOTp9o",
        title="Introduction to Cardiology",
    ),
    FeedItem(
        url="https://www.youtube.com/watch?v=tD5QlyV-CvQ",
        title="Emergency Medicine Basics",
    ),
    FeedItem(
        url="https://www.youtube.com/watch?v=d2mlWUzA0B4",
        title="Soft Skills for Doctors",
    ),
    FeedItem(
        url="https://www.youtube.com/watch?v=w9zISG3BFBs",
        title="Medical Ethics Overview",
    ),
)


class CatalogConfig:
    upload_folder: str
    external_source_prefix: str
    feed: Tuple[FeedItem, ...]

    def __init__(self, feed: Tuple[FeedItem, ...] = SAMPLE_YOUTUBE_FEED):
        self.upload_folder = os.getenv("UPLOAD_FOLDER", "doctor-uploads")
        self.external_source_prefix = os.getenv("EXTERNAL_SOURCE_PREFIX", "yt")
        self.feed = tuple(feed)
