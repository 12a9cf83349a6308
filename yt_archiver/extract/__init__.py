"""Page bootstrap extraction and InnerTube response decoding (no network I/O)."""

from yt_archiver.extract.bootstrap import (
    extract_api_key,
    extract_bootstrap,
    extract_client_version,
    extract_json_var,
    extract_title,
)
from yt_archiver.extract.continuation import find_comments_continuation
from yt_archiver.extract.decoder import (
    find_reply_continuation,
    iter_comment_payloads,
    mutation_to_comment,
    parse_top_level_page,
)

__all__ = [
    "extract_api_key",
    "extract_bootstrap",
    "extract_client_version",
    "extract_json_var",
    "extract_title",
    "find_comments_continuation",
    "find_reply_continuation",
    "iter_comment_payloads",
    "mutation_to_comment",
    "parse_top_level_page",
]
