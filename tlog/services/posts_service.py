from typing import List, Optional

from tlog.repos.post_store import PostStore
from tlog.schemas.blog import PostDetail, PostRecord, PostSummary, SearchEntry
from tlog.schemas.site import SiteConfig
from tlog.services.post_queries import (
    filter_posts,
    filter_published_posts,
    get_all_tags,
    get_posts_by_tag,
    sort_posts_by_date,
)
from tlog.utils import calculate_reading_time, format_date


class PostsService:
    def __init__(self, store: PostStore, site_config: SiteConfig):
        self.store = store
        self.site_config = site_config

    def published_posts(self) -> List[PostRecord]:
        return sort_posts_by_date(filter_published_posts(self.store.values()))

    def list_posts(self) -> List[PostSummary]:
        return [to_summary(post) for post in self.published_posts()]

    def homepage_posts(self) -> List[PostSummary]:
        posts = filter_posts(self.published_posts(), self.site_config.homepage)
        return [to_summary(post) for post in posts]

    def get_post(self, post_id: str) -> Optional[PostDetail]:
        # drafts and future posts are still reachable directly
        record = self.store.get(post_id)
        if not record:
            return None
        return to_detail(record)

    def list_tags(self) -> List[str]:
        return sorted(get_all_tags(self.published_posts()))

    def posts_for_tag(self, tag: str) -> List[PostSummary]:
        return [to_summary(post) for post in get_posts_by_tag(self.published_posts(), tag)]

    def search_index(self) -> List[SearchEntry]:
        return [
            SearchEntry(
                id=post.id,
                title=post.data.title,
                description=post.data.description,
                date=post.data.date,
                tags=post.data.tags or [],
            )
            for post in self.published_posts()
        ]


def to_summary(record: PostRecord) -> PostSummary:
    data = record.data
    return PostSummary(
        id=record.id,
        title=data.title,
        description=data.description,
        image=data.image,
        date=data.date,
        formattedDate=format_date(data.date),
        tags=data.tags or [],
        readingTime=calculate_reading_time(record.body),
        draft=bool(data.draft),
    )


def to_detail(record: PostRecord) -> PostDetail:
    summary = to_summary(record)
    return PostDetail(
        **summary.model_dump(), body=record.body, filePath=record.file_path
    )
