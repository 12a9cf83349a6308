"""
Two-phase comment acquisition: sequential top-level pagination, then
batched concurrent reply fetches.

Nothing here raises to the caller. A failing top-level page ends phase 1
with what was collected so far; a failing reply fetch leaves that thread
with no replies. Both are reported as warnings on the given logger.
"""

import asyncio
import logging

from yt_archiver.adapters.base import ContinuationClient
from yt_archiver.extract.decoder import parse_top_level_page
from yt_archiver.models import Comment, CommentThread, ThreadStub
from yt_archiver.services.replies import fetch_replies

REPLY_BATCH_SIZE = 5


async def fetch_top_level(
    client: ContinuationClient,
    api_url: str,
    client_version: str,
    initial_continuation: str,
    *,
    log: logging.Logger | None = None,
) -> list[tuple[Comment, ThreadStub]]:
    """Phase 1: follow top-level continuations until exhausted or a page fails.

    Returns (comment, stub) pairs in discovery order. Stubs whose comment
    payload never arrived on their page are dropped.
    """
    logger = log or logging.getLogger("yt_archiver.threads")
    collected: list[tuple[Comment, ThreadStub]] = []
    continuation: str | None = initial_continuation

    while continuation:
        try:
            data = await client.post_next(api_url, client_version, continuation)
            page = parse_top_level_page(data)
        except Exception as e:
            logger.warning("Failed to fetch comments: %s", e)
            break

        for stub in page.threads:
            comment = page.comments_by_key.get(stub.comment_key)
            if comment is None:
                continue
            collected.append((comment, stub))

        logger.info("Fetched %s comments (%s total)", len(page.threads), len(collected))

        if not page.threads:
            break
        continuation = page.next_continuation

    return collected


async def _replies_or_empty(
    client: ContinuationClient,
    api_url: str,
    client_version: str,
    continuation: str,
    logger: logging.Logger,
) -> list[Comment]:
    try:
        return await fetch_replies(client, api_url, client_version, continuation, log=logger)
    except Exception as e:
        logger.warning("Failed to fetch replies: %s", e)
        return []


async def fetch_all_replies(
    client: ContinuationClient,
    api_url: str,
    client_version: str,
    threads: list[CommentThread],
    reply_continuations: list[str | None],
    *,
    batch_size: int = REPLY_BATCH_SIZE,
    log: logging.Logger | None = None,
) -> None:
    """Phase 2: fill ``threads[i].replies`` for every i with a reply continuation.

    Jobs run in batches of ``batch_size``; a batch is awaited in full before
    the next one starts, so at most ``batch_size`` fetches are in flight.
    """
    logger = log or logging.getLogger("yt_archiver.threads")
    jobs = [(idx, token) for idx, token in enumerate(reply_continuations) if token]
    logger.info("Fetching replies for %s threads...", len(jobs))

    done = 0
    for start in range(0, len(jobs), batch_size):
        batch = jobs[start:start + batch_size]
        results = await asyncio.gather(
            *(_replies_or_empty(client, api_url, client_version, token, logger) for _, token in batch)
        )
        for (idx, _), replies in zip(batch, results):
            threads[idx].replies = replies

        done += len(batch)
        logger.info("Fetched replies for %s/%s threads", done, len(jobs))


async def fetch_all_threads(
    client: ContinuationClient,
    api_url: str,
    client_version: str,
    initial_continuation: str,
    *,
    batch_size: int = REPLY_BATCH_SIZE,
    include_replies: bool = True,
    log: logging.Logger | None = None,
) -> list[CommentThread]:
    """Fetch every top-level thread and, unless disabled, its replies."""
    logger = log or logging.getLogger("yt_archiver.threads")

    collected = await fetch_top_level(client, api_url, client_version, initial_continuation, log=logger)
    threads = [CommentThread(comment=comment, reply_count=stub.reply_count) for comment, stub in collected]

    if include_replies:
        await fetch_all_replies(
            client,
            api_url,
            client_version,
            threads,
            [stub.reply_continuation for _, stub in collected],
            batch_size=batch_size,
            log=logger,
        )

    return threads
