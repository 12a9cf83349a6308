"""Builders for synthetic InnerTube responses and a fake continuation client."""

import asyncio
from typing import Any

from yt_archiver.adapters.base import ContinuationClient


def comment_payload(
    key: str,
    author: str = "@alice",
    text: str = "Great video",
    time: str = "2 weeks ago",
    likes: str = "12",
    reply_count: str = "",
    avatar: str = "https://yt3.example/alice.jpg",
) -> dict[str, Any]:
    toolbar: dict[str, Any] = {"likeCountNotliked": likes}
    if reply_count:
        toolbar["replyCount"] = reply_count
    return {
        "key": key,
        "author": {"displayName": author, "avatarThumbnailUrl": avatar},
        "properties": {"content": {"content": text}, "publishedTime": time},
        "toolbar": toolbar,
    }


def mutation(payload: dict[str, Any]) -> dict[str, Any]:
    return {"entityKey": payload.get("key", ""), "payload": {"commentEntityPayload": payload}}


def continuation_item(token: str) -> dict[str, Any]:
    return {
        "continuationItemRenderer": {
            "continuationEndpoint": {"continuationCommand": {"token": token}},
        }
    }


def thread_item(key: str, reply_token: str | None = None) -> dict[str, Any]:
    renderer: dict[str, Any] = {"commentViewModel": {"commentViewModel": {"commentKey": key}}}
    if reply_token:
        renderer["replies"] = {"commentRepliesRenderer": {"contents": [continuation_item(reply_token)]}}
    return {"commentThreadRenderer": renderer}


def response(
    items: list[dict[str, Any]] | None = None,
    payloads: list[dict[str, Any]] | None = None,
    action: str = "appendContinuationItemsAction",
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "onResponseReceivedEndpoints": [{action: {"continuationItems": list(items or [])}}],
    }
    if payloads is not None:
        data["frameworkUpdates"] = {"entityBatchUpdate": {"mutations": [mutation(p) for p in payloads]}}
    return data


def initial_data(token: str | None) -> dict[str, Any]:
    section_contents = [continuation_item(token)] if token else []
    return {
        "contents": {
            "twoColumnWatchNextResults": {
                "results": {
                    "results": {
                        "contents": [
                            {"videoPrimaryInfoRenderer": {}},
                            {
                                "itemSectionRenderer": {
                                    "sectionIdentifier": "comment-item-section",
                                    "contents": section_contents,
                                }
                            },
                        ]
                    }
                }
            }
        }
    }


class FakeClient(ContinuationClient):
    """Serves canned responses by token and records concurrency.

    A response may be an Exception instance, which is raised instead.
    ``delays`` adds extra event-loop turns before a token's response, and
    ``events`` logs ("start", token) / ("end", token) in order.
    """

    def __init__(self, pages: dict[str, Any], delays: dict[str, int] | None = None) -> None:
        self.pages = pages
        self.delays = delays or {}
        self.calls: list[str] = []
        self.events: list[tuple[str, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def post_next(self, api_url: str, client_version: str, continuation: str) -> dict[str, Any]:
        self.calls.append(continuation)
        self.events.append(("start", continuation))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            for _ in range(2 + self.delays.get(continuation, 0)):
                await asyncio.sleep(0)
            result = self.pages[continuation]
            if isinstance(result, Exception):
                raise result
            return result
        finally:
            self.in_flight -= 1
            self.events.append(("end", continuation))
