"""HTTP adapters (InnerTube)."""

from yt_archiver.adapters.base import ArchiverError, ContinuationClient, RequestFailed
from yt_archiver.adapters.innertube import InnerTubeClient

__all__ = ["ArchiverError", "ContinuationClient", "InnerTubeClient", "RequestFailed"]
