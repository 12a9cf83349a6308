"""Decode comment entity mutations and top-level pagination pages.

Responses come from an undocumented, versioned API, so every field is read
through the safe navigation helpers: a malformed page decodes to empty
results instead of raising.
"""

from typing import Any

from yt_archiver.extract.continuation import continuation_token, iter_continuation_item_lists
from yt_archiver.models import Comment, ThreadStub, TopLevelPage
from yt_archiver.utils import dig, dig_list, dig_str


def mutation_to_comment(payload: Any) -> Comment:
    """Map a commentEntityPayload to a Comment (missing fields become "")."""
    return Comment(
        author=dig_str(payload, "author", "displayName"),
        avatar_url=dig_str(payload, "author", "avatarThumbnailUrl"),
        text=dig_str(payload, "properties", "content", "content"),
        time=dig_str(payload, "properties", "publishedTime"),
        likes=dig_str(payload, "toolbar", "likeCountNotliked"),
    )


def iter_comment_payloads(data: Any) -> list[dict[str, Any]]:
    """commentEntityPayload records of the response's mutation batch, in order."""
    payloads = []
    for mutation in dig_list(data, "frameworkUpdates", "entityBatchUpdate", "mutations"):
        payload = dig(mutation, "payload", "commentEntityPayload")
        if isinstance(payload, dict):
            payloads.append(payload)
    return payloads


def _thread_stub(renderer: Any) -> ThreadStub | None:
    comment_key = dig_str(renderer, "commentViewModel", "commentViewModel", "commentKey")
    if not comment_key:
        return None
    reply_continuation = None
    for entry in dig_list(renderer, "replies", "commentRepliesRenderer", "contents"):
        reply_continuation = continuation_token(entry)
        if reply_continuation:
            break
    return ThreadStub(comment_key=comment_key, reply_continuation=reply_continuation)


def parse_top_level_page(data: Any) -> TopLevelPage:
    """Split one top-level response into thread stubs, comments and the next token.

    Thread stubs keep the order of the continuation items. Reply counts are
    backfilled from the mutation batch onto the stub with the same key.
    """
    page = TopLevelPage()

    for items in iter_continuation_item_lists(data):
        for item in items:
            renderer = dig(item, "commentThreadRenderer")
            if renderer is not None:
                stub = _thread_stub(renderer)
                if stub is not None:
                    page.threads.append(stub)
                continue
            token = continuation_token(item)
            if token:
                page.next_continuation = token

    stubs_by_key = {}
    for stub in page.threads:
        stubs_by_key.setdefault(stub.comment_key, stub)

    for payload in iter_comment_payloads(data):
        key = dig_str(payload, "key")
        if not key:
            continue
        page.comments_by_key[key] = mutation_to_comment(payload)
        reply_count = dig_str(payload, "toolbar", "replyCount")
        if reply_count and key in stubs_by_key:
            stubs_by_key[key].reply_count = reply_count

    return page


def find_reply_continuation(data: Any) -> str | None:
    """Next reply-page token: scanning each item list from the end, the last list with a token wins."""
    found = None
    for items in iter_continuation_item_lists(data):
        for item in reversed(items):
            token = continuation_token(item)
            if token:
                found = token
                break
    return found
