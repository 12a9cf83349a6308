"""Drain every page of one thread's reply continuation."""

import logging

from yt_archiver.adapters.base import ContinuationClient
from yt_archiver.extract.decoder import find_reply_continuation, iter_comment_payloads, mutation_to_comment
from yt_archiver.models import Comment


async def fetch_replies(
    client: ContinuationClient,
    api_url: str,
    client_version: str,
    initial_continuation: str,
    *,
    log: logging.Logger | None = None,
) -> list[Comment]:
    """
    Fetch all replies of a thread, in the order the API returns them.

    A page that decodes no comments ends the loop even if it still carries
    a token: an empty page is treated as end of data so a malformed
    repeating response cannot loop forever. RPC errors propagate.
    """
    logger = log or logging.getLogger("yt_archiver.replies")
    replies: list[Comment] = []
    continuation: str | None = initial_continuation

    while continuation:
        data = await client.post_next(api_url, client_version, continuation)

        added = 0
        for payload in iter_comment_payloads(data):
            replies.append(mutation_to_comment(payload))
            added += 1

        if added == 0:
            logger.debug("Reply page decoded no comments, stopping")
            break

        continuation = find_reply_continuation(data)

    return replies
