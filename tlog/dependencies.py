from fastapi import Depends, Request

from tlog.repos.post_store import PostStore
from tlog.schemas.site import SiteConfig
from tlog.services.posts_service import PostsService


def get_post_store(request: Request) -> PostStore:
    return request.app.state.store


def get_site_config(request: Request) -> SiteConfig:
    return request.app.state.site_config


def get_posts_service(
    store=Depends(get_post_store),
    site_config=Depends(get_site_config),
):
    return PostsService(store=store, site_config=site_config)
