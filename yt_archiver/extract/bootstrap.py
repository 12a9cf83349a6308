"""Scrape the initial-state JSON, API key, client version and title from watch page markup.

Pure string processing: nothing here touches the network and nothing
raises on malformed markup. Missing values come back as None (or "" for the
title) and the caller decides whether enough was found to fetch comments.
"""

import html
import json
import re
from typing import Any

from yt_archiver.extract.continuation import find_comments_continuation
from yt_archiver.models import PageBootstrap

INITIAL_DATA_VAR = "ytInitialData"

API_KEY_RE = re.compile(r'"INNERTUBE_API_KEY"\s*:\s*"([^"]+)"')
CLIENT_VERSION_RE = re.compile(r'"INNERTUBE_CLIENT_VERSION"\s*:\s*"([^"]+)"')
TITLE_RE = re.compile(r'property="og:title"\s+content="([^"]+)"')


def extract_json_var(raw_html: str, var_name: str) -> dict[str, Any] | None:
    """Parse the object literal assigned to ``var <var_name>`` in a script tag."""
    pattern = re.compile(
        r"var\s+" + re.escape(var_name) + r"\s*=\s*(\{.+?\});\s*</script>",
        re.DOTALL,
    )
    match = pattern.search(raw_html)
    if not match:
        return None
    try:
        data = json.loads(match.group(1))
    except (ValueError, RecursionError):
        return None
    return data if isinstance(data, dict) else None


def extract_api_key(raw_html: str) -> str | None:
    m = API_KEY_RE.search(raw_html)
    return m.group(1) if m else None


def extract_client_version(raw_html: str) -> str | None:
    m = CLIENT_VERSION_RE.search(raw_html)
    return m.group(1) if m else None


def extract_title(raw_html: str) -> str:
    """Return the og:title meta content, unescaped, or "" when absent."""
    m = TITLE_RE.search(raw_html)
    return html.unescape(m.group(1)) if m else ""


def extract_bootstrap(raw_html: str) -> PageBootstrap:
    """Collect everything the comment fetcher needs from one page of markup."""
    initial_data = extract_json_var(raw_html, INITIAL_DATA_VAR)
    return PageBootstrap(
        initial_data=initial_data,
        api_key=extract_api_key(raw_html),
        client_version=extract_client_version(raw_html),
        title=extract_title(raw_html),
        comments_continuation=find_comments_continuation(initial_data),
    )
