"""Materialises the static YouTube feed into catalog entries."""
import random
import time
from typing import Collection, Iterable, List, Optional

from learning_hub.components.models.video_entry import (
    FeedItem,
    VideoEntry,
    youtube_thumbnail_url,
)

YOUTUBE_CATEGORY = "YouTube"
FEED_DESCRIPTION = "Educational video"
# Feed view counts are display-only and drawn from [0, MAX_SAMPLE_VIEWS)
MAX_SAMPLE_VIEWS = 5000


def feed_entries(
    feed: Iterable[FeedItem],
    prefix: str = "yt",
    rng: Optional[random.Random] = None,
) -> List[VideoEntry]:
    """Return one entry per feed item, ids ``<prefix>-<index>`` in feed order."""
    rng = rng or random.Random()
    return [
        VideoEntry(
            id=f"{prefix}-{i}",
            title=item.title,
            description=FEED_DESCRIPTION,
            category=YOUTUBE_CATEGORY,
            views=rng.randrange(MAX_SAMPLE_VIEWS),
            external_url=item.url,
            thumbnail=youtube_thumbnail_url(item.url),
        )
        for i, item in enumerate(feed)
    ]


def transient_entry(
    title: str,
    url: str,
    description: str = "",
    prefix: str = "yt",
    taken_ids: Collection[str] = (),
) -> VideoEntry:
    """Build an unpersisted YouTube entry keyed by the current epoch millisecond.

    The millisecond is bumped until the id is not among *taken_ids*.
    """
    millis = int(time.time() * 1000)
    while f"{prefix}-{millis}" in taken_ids:
        millis += 1
    return VideoEntry(
        id=f"{prefix}-{millis}",
        title=title,
        description=description,
        category=YOUTUBE_CATEGORY,
        views=0,
        external_url=url,
        thumbnail=youtube_thumbnail_url(url),
    )
