"""Data models for comments, threads and decoded pages (Pydantic)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Comment(BaseModel):
    """One authored remark, decoded from a comment entity payload.

    Every field is the platform's display string; an empty string means the
    payload did not carry it.
    """

    model_config = ConfigDict(frozen=True)

    author: str = ""
    avatar_url: str = ""
    text: str = ""
    time: str = ""
    likes: str = ""


class ThreadStub(BaseModel):
    """Thread discovered in a top-level page before its comment is joined."""

    comment_key: str
    reply_count: str = ""
    reply_continuation: str | None = None


class TopLevelPage(BaseModel):
    """One decoded page of top-level comment pagination."""

    threads: list[ThreadStub] = Field(default_factory=list)
    comments_by_key: dict[str, Comment] = Field(default_factory=dict)
    next_continuation: str | None = None


class CommentThread(BaseModel):
    """Top-level comment with its reply count label and fetched replies."""

    comment: Comment
    reply_count: str = ""
    replies: list[Comment] = Field(default_factory=list)

    @property
    def total_comments(self) -> int:
        """The top-level comment plus its replies."""
        return 1 + len(self.replies)


class PageBootstrap(BaseModel):
    """Values scraped from the initial watch page markup."""

    initial_data: dict[str, Any] | None = None
    api_key: str | None = None
    client_version: str | None = None
    title: str = ""
    comments_continuation: str | None = None

    @property
    def can_fetch_comments(self) -> bool:
        """True when the key, client version and first token were all found."""
        return bool(self.api_key and self.client_version and self.comments_continuation)
