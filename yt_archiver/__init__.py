"""yt-archiver: archive a video page's comment threads as a static HTML document."""

__version__ = "0.1.0"
