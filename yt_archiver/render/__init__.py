"""Static HTML rendering of archived comment threads."""

from yt_archiver.render.page import build_page, render_comment, render_thread

__all__ = ["build_page", "render_comment", "render_thread"]
