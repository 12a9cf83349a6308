"""Fetch services: reply pagination, thread orchestration, archive and inline flows."""

from yt_archiver.services.archive import archive_page, collect_threads
from yt_archiver.services.inliner import inline_page
from yt_archiver.services.replies import fetch_replies
from yt_archiver.services.threads import (
    REPLY_BATCH_SIZE,
    fetch_all_replies,
    fetch_all_threads,
    fetch_top_level,
)

__all__ = [
    "REPLY_BATCH_SIZE",
    "archive_page",
    "collect_threads",
    "fetch_all_replies",
    "fetch_all_threads",
    "fetch_replies",
    "fetch_top_level",
    "inline_page",
]
