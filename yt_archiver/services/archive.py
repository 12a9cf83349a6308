"""Archive flow: watch page -> bootstrap -> comment threads -> HTML document."""

import logging

from yt_archiver.adapters.innertube import InnerTubeClient
from yt_archiver.config import AppConfig
from yt_archiver.extract.bootstrap import extract_bootstrap
from yt_archiver.models import CommentThread, PageBootstrap
from yt_archiver.render.page import build_page
from yt_archiver.services.threads import fetch_all_threads


async def collect_threads(
    client: InnerTubeClient,
    bootstrap: PageBootstrap,
    config: AppConfig,
    *,
    log: logging.Logger | None = None,
) -> list[CommentThread]:
    """Fetch threads when the bootstrap found everything needed, else return []."""
    logger = log or logging.getLogger("yt_archiver.archive")
    if not bootstrap.can_fetch_comments:
        logger.warning(
            "Comments unavailable (api_key=%s, client_version=%s, continuation=%s)",
            bool(bootstrap.api_key),
            bool(bootstrap.client_version),
            bool(bootstrap.comments_continuation),
        )
        return []

    return await fetch_all_threads(
        client,
        client.next_url(bootstrap.api_key),
        bootstrap.client_version,
        bootstrap.comments_continuation,
        batch_size=config.fetch.reply_batch_size,
        include_replies=config.fetch.fetch_replies,
        log=logger,
    )


async def archive_page(
    url: str,
    config: AppConfig | None = None,
    *,
    client: InnerTubeClient | None = None,
    log: logging.Logger | None = None,
) -> str:
    """Fetch every threaded comment of a video page and return a static HTML page.

    Failure to fetch the page itself raises (RequestFailed or an httpx
    transport error). Everything after that degrades: the document is
    always produced, with as many comments as could be fetched.
    """
    config = config or AppConfig()
    logger = log or logging.getLogger("yt_archiver.archive")
    own_client = client is None
    if client is None:
        client = InnerTubeClient(config.http, config.innertube)

    try:
        raw_html = await client.fetch_page(url)
        bootstrap = extract_bootstrap(raw_html)
        threads = await collect_threads(client, bootstrap, config, log=logger)
    finally:
        if own_client:
            await client.aclose()

    return build_page(bootstrap.title, threads)
