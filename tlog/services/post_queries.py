"""Listing helpers over post records.

Every function returns a new list and leaves its input untouched.
"""

import datetime
from typing import Iterable, List, Optional

from tlog.schemas.blog import PostRecord
from tlog.schemas.site import PostFilter
from tlog.utils import is_published


def filter_published_posts(
    posts: Iterable[PostRecord], now: Optional[datetime.datetime] = None
) -> List[PostRecord]:
    """Drop drafts and posts dated after ``now`` (the current instant by default)."""
    now = now or datetime.datetime.now(datetime.timezone.utc)
    return [
        post
        for post in posts
        if not post.data.draft and is_published(post.data.date, now)
    ]


def sort_posts_by_date(posts: Iterable[PostRecord]) -> List[PostRecord]:
    # sorted() is stable, so equal dates keep their input order
    return sorted(posts, key=lambda post: post.data.date, reverse=True)


def _has_any_tag(post: PostRecord, tags: Iterable[str]) -> bool:
    post_tags = post.data.tags or []
    return any(tag in post_tags for tag in tags)


def filter_posts(posts: Iterable[PostRecord], post_filter: PostFilter) -> List[PostRecord]:
    result = list(posts)
    if post_filter.tags:
        result = [post for post in result if _has_any_tag(post, post_filter.tags)]
    if post_filter.exclude_tags:
        result = [
            post for post in result if not _has_any_tag(post, post_filter.exclude_tags)
        ]
    if post_filter.max_posts is not None:
        result = result[: post_filter.max_posts]
    return result


def get_posts_by_tag(posts: Iterable[PostRecord], tag: str) -> List[PostRecord]:
    return [post for post in posts if tag in (post.data.tags or [])]


def get_all_tags(posts: Iterable[PostRecord]) -> List[str]:
    """Distinct tags in first-seen order."""
    seen = {}
    for post in posts:
        for tag in post.data.tags or []:
            seen.setdefault(tag, None)
    return list(seen)
