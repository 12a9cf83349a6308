"""Render comment threads into a self-contained static HTML document."""

from html import escape

from yt_archiver.models import Comment, CommentThread

PAGE_CSS = """\
*, *::before, *::after { box-sizing: border-box; }
body {
    margin: 0;
    padding: 0;
    font-family: Roboto, Arial, sans-serif;
    color: #0f0f0f;
    background: #fff;
}
.yta-page {
    max-width: 800px;
    margin: 0 auto;
    padding: 24px 16px;
}
.yta-page-title {
    font-size: 18px;
    font-weight: 600;
    line-height: 1.3;
    margin: 0 0 4px;
}
.yta-comments-header {
    font-size: 14px;
    color: #606060;
    margin-bottom: 24px;
    padding-bottom: 16px;
    border-bottom: 1px solid #e5e5e5;
}
.yta-thread { margin-bottom: 8px; }
.yta-comment {
    display: flex;
    gap: 12px;
    padding: 8px 0;
}
.yta-avatar {
    width: 40px;
    height: 40px;
    border-radius: 50%;
    flex-shrink: 0;
}
.yta-replies-list .yta-avatar {
    width: 24px;
    height: 24px;
}
.yta-comment-body {
    flex: 1;
    min-width: 0;
}
.yta-author {
    font-size: 13px;
    font-weight: 500;
}
.yta-time {
    font-size: 12px;
    color: #606060;
    margin-left: 4px;
}
.yta-text {
    font-size: 14px;
    line-height: 1.4;
    margin: 4px 0;
    white-space: pre-wrap;
    word-break: break-word;
}
.yta-likes {
    font-size: 12px;
    color: #606060;
}
.yta-replies-details { margin-left: 52px; }
.yta-replies-toggle {
    font-size: 14px;
    font-weight: 500;
    color: #065fd4;
    cursor: pointer;
    padding: 8px 0;
    list-style: none;
    user-select: none;
}
.yta-replies-toggle::-webkit-details-marker { display: none; }
.yta-replies-toggle::before {
    content: "\\25B6";
    display: inline-block;
    margin-right: 6px;
    font-size: 10px;
    transition: transform 0.15s;
}
details[open] > .yta-replies-toggle::before { transform: rotate(90deg); }
.yta-replies-list { padding-top: 4px; }
"""


def render_comment(comment: Comment) -> str:
    likes = f'<span class="yta-likes">{escape(comment.likes)}</span>' if comment.likes else ""
    return f"""<div class="yta-comment">
  <img class="yta-avatar" src="{escape(comment.avatar_url)}" alt="{escape(comment.author)}" loading="lazy" />
  <div class="yta-comment-body">
    <span class="yta-author">{escape(comment.author)}</span>
    <span class="yta-time">{escape(comment.time)}</span>
    <p class="yta-text">{escape(comment.text)}</p>
    {likes}
  </div>
</div>"""


def replies_label(count: int) -> str:
    return "1 reply" if count == 1 else f"{count} replies"


def render_thread(thread: CommentThread) -> str:
    """One thread block; replies go in a collapsed <details> element."""
    comment_html = render_comment(thread.comment)
    if not thread.replies:
        return f'<div class="yta-thread">{comment_html}</div>'

    replies_html = "\n".join(render_comment(r) for r in thread.replies)
    return f"""<div class="yta-thread">
{comment_html}
<details class="yta-replies-details">
  <summary class="yta-replies-toggle">{replies_label(len(thread.replies))}</summary>
  <div class="yta-replies-list">
{replies_html}
  </div>
</details>
</div>"""


def build_page(title: str, threads: list[CommentThread]) -> str:
    """Assemble the full document: title, total comment count, then every thread.

    The output references no external stylesheet or script; avatars are the
    only remote URLs and are loaded lazily by the reader's browser.
    """
    total = sum(t.total_comments for t in threads)
    threads_html = "\n".join(render_thread(t) for t in threads)
    safe_title = escape(title)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Comments -- {safe_title}</title>
  <style>
{PAGE_CSS}  </style>
</head>
<body>
  <div class="yta-page">
    <h1 class="yta-page-title">{safe_title}</h1>
    <div class="yta-comments-header">{total} comments</div>
{threads_html}
  </div>
</body>
</html>
"""
