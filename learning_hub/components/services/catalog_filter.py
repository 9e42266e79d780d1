"""Search and category filtering over a loaded catalog."""
from typing import Iterable, List

from learning_hub.components.models.video_entry import VideoEntry

ALL_CATEGORIES = "All"


def matches(entry: VideoEntry, search_term: str = "", category: str = ALL_CATEGORIES) -> bool:
    """Return True if *entry* passes both the search and the category filter."""
    if search_term and search_term.lower() not in entry.title.lower():
        return False
    if category != ALL_CATEGORIES and entry.effective_category != category:
        return False
    return True


def filter_videos(
    entries: Iterable[VideoEntry],
    search_term: str = "",
    category: str = ALL_CATEGORIES,
) -> List[VideoEntry]:
    """Return the entries matching *search_term* and *category*, in input order."""
    return [e for e in entries if matches(e, search_term, category)]


def derive_categories(entries: Iterable[VideoEntry]) -> List[str]:
    """Return "All" followed by each distinct category in order of first appearance."""
    categories = [ALL_CATEGORIES]
    for entry in entries:
        if entry.effective_category not in categories:
            categories.append(entry.effective_category)
    return categories
