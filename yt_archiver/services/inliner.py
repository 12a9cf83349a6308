"""Inline a page's external stylesheets and scripts into one HTML document.

Independent of the comment pipeline: fetch the page, fetch every
``<link rel="stylesheet">`` and ``<script src>`` target concurrently, and
replace each element with an inline ``<style>`` or ``<script>``.
"""

import asyncio
import logging
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from yt_archiver.adapters.innertube import InnerTubeClient
from yt_archiver.config import AppConfig

LOG = logging.getLogger("yt_archiver.inliner")


def _is_stylesheet(tag: Tag) -> bool:
    rel = tag.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    return "stylesheet" in (r.lower() for r in rel)


def find_resources(soup: BeautifulSoup, base_url: str) -> list[tuple[Tag, str]]:
    """External stylesheet links and script tags, with absolute URLs, in document order."""
    resources = []
    for tag in soup.find_all(["link", "script"]):
        if tag.name == "link" and tag.get("href") and _is_stylesheet(tag):
            resources.append((tag, urljoin(base_url, tag["href"])))
        elif tag.name == "script" and tag.get("src"):
            resources.append((tag, urljoin(base_url, tag["src"])))
    return resources


def _escape_closing(text: str, tag_name: str) -> str:
    # A literal closing tag would end the inline element early
    return text.replace(f"</{tag_name}", f"<\\/{tag_name}")


def inline_resource(soup: BeautifulSoup, tag: Tag, content: str | None) -> None:
    """Swap one external reference for inline content (or drop it when content is None)."""
    if content is None:
        tag.decompose()
        return
    if tag.name == "link":
        style = soup.new_tag("style")
        if tag.get("media"):
            style["media"] = tag["media"]
        style.string = _escape_closing(content, "style")
        tag.replace_with(style)
        return
    del tag["src"]
    # Only meaningful on external scripts
    for attr in ("async", "defer", "integrity", "crossorigin"):
        if attr in tag.attrs:
            del tag[attr]
    tag.string = _escape_closing(content, "script")


async def _fetch_or_none(client: InnerTubeClient, url: str) -> str | None:
    try:
        return await client.fetch_text(url)
    except Exception as e:
        LOG.warning("Failed to fetch %s: %s", url, e)
        return None


async def inline_page(
    url: str,
    config: AppConfig | None = None,
    *,
    client: InnerTubeClient | None = None,
) -> str:
    """Return the page at ``url`` with its stylesheets and scripts inlined.

    The page fetch itself raises on failure; an individual resource that
    cannot be fetched is removed from the document with a warning.
    """
    config = config or AppConfig()
    own_client = client is None
    if client is None:
        client = InnerTubeClient(config.http, config.innertube)

    try:
        raw_html = await client.fetch_page(url)
        soup = BeautifulSoup(raw_html, "html.parser")
        resources = find_resources(soup, url)
        LOG.info("Inlining %s resources from %s", len(resources), url)

        batch_size = config.fetch.reply_batch_size
        for start in range(0, len(resources), batch_size):
            batch = resources[start:start + batch_size]
            contents = await asyncio.gather(*(_fetch_or_none(client, res_url) for _, res_url in batch))
            for (tag, _), content in zip(batch, contents):
                inline_resource(soup, tag, content)
    finally:
        if own_client:
            await client.aclose()

    return str(soup)
