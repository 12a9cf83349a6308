"""Tests for reply pagination."""

import asyncio

import pytest
from innertube_payloads import FakeClient, comment_payload, continuation_item, response

from yt_archiver.adapters import RequestFailed
from yt_archiver.services import fetch_replies

API = "https://www.youtube.com/youtubei/v1/next?key=K"


def test_drains_all_pages_in_order() -> None:
    """Replies from every page are returned in response order."""
    client = FakeClient(
        {
            "R1": response(items=[continuation_item("R2")],
                           payloads=[comment_payload("a", text="one"), comment_payload("b", text="two")]),
            "R2": response(items=[], payloads=[comment_payload("c", text="three")]),
        }
    )
    replies = asyncio.run(fetch_replies(client, API, "v", "R1"))
    assert [r.text for r in replies] == ["one", "two", "three"]
    assert client.calls == ["R1", "R2"]


def test_empty_page_with_token_stops() -> None:
    """A page with a token but no decoded comments ends pagination."""
    client = FakeClient(
        {
            "R1": response(items=[continuation_item("R2")], payloads=[comment_payload("a", text="only")]),
            "R2": response(items=[continuation_item("R3")], payloads=[]),
            "R3": response(items=[], payloads=[comment_payload("z")]),
        }
    )
    replies = asyncio.run(fetch_replies(client, API, "v", "R1"))
    assert [r.text for r in replies] == ["only"]
    assert client.calls == ["R1", "R2"]


def test_repeated_token_with_empty_page_terminates() -> None:
    client = FakeClient(
        {
            "R1": response(items=[continuation_item("R2")], payloads=[comment_payload("a")]),
            "R2": response(items=[continuation_item("R2")], payloads=[]),
        }
    )
    replies = asyncio.run(fetch_replies(client, API, "v", "R1"))
    assert len(replies) == 1


def test_rpc_failure_propagates() -> None:
    client = FakeClient(
        {
            "R1": response(items=[continuation_item("R2")], payloads=[comment_payload("a")]),
            "R2": RequestFailed(500, API),
        }
    )
    with pytest.raises(RequestFailed):
        asyncio.run(fetch_replies(client, API, "v", "R1"))
