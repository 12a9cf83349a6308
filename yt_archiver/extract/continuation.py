"""Locate continuation tokens in InnerTube result trees."""

from typing import Any

from yt_archiver.utils import dig, dig_list, dig_str

COMMENTS_SECTION_ID = "comment-item-section"

# Action shapes that carry continuationItems (first page reloads, later pages append)
CONTINUATION_ACTIONS = ("reloadContinuationItemsCommand", "appendContinuationItemsAction")


def continuation_token(item: Any) -> str | None:
    """Token of a continuationItemRenderer entry, or None."""
    token = dig_str(item, "continuationItemRenderer", "continuationEndpoint", "continuationCommand", "token")
    return token or None


def find_comments_continuation(data: dict[str, Any] | None) -> str | None:
    """Return the token that starts top-level comment pagination.

    Walks contents.twoColumnWatchNextResults.results.results.contents to the
    item section identified as the comments section, then returns the first
    continuation token in that section's contents.
    """
    if data is None:
        return None
    contents = dig_list(data, "contents", "twoColumnWatchNextResults", "results", "results", "contents")
    for item in contents:
        section = dig(item, "itemSectionRenderer")
        if dig(section, "sectionIdentifier") != COMMENTS_SECTION_ID:
            continue
        for entry in dig_list(section, "contents"):
            token = continuation_token(entry)
            if token:
                return token
    return None


def iter_continuation_item_lists(data: Any) -> list[list[Any]]:
    """All continuationItems lists from the response's received endpoints, in order."""
    lists = []
    for endpoint in dig_list(data, "onResponseReceivedEndpoints"):
        for action_name in CONTINUATION_ACTIONS:
            items = dig(endpoint, action_name, "continuationItems")
            if isinstance(items, list):
                lists.append(items)
                break
    return lists
