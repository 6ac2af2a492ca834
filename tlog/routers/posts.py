import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from tlog import dependencies as deps
from tlog.schemas.blog import PostDetail, PostSummary, SearchEntry
from tlog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Published posts, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{post_id}", response_model=PostDetail)
def get_post(
    post_id: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by id, drafts included."""
    try:
        post = service.get_post(post_id)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/homepage", response_model=List[PostSummary])
def homepage_posts(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return service.homepage_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing homepage posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/tags", response_model=List[str])
def list_tags(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return service.list_tags()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{tag}", response_model=List[PostSummary])
def posts_for_tag(
    tag: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        posts = service.posts_for_tag(tag)
        if not posts:
            raise HTTPException(status_code=404, detail="Tag not found")
        return posts
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts for tag {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/search.json", response_model=List[SearchEntry])
def search_index(service: PostsService = Depends(deps.get_posts_service)):
    """Search entries for published posts only."""
    try:
        return service.search_index()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error building search index: {e}")
        raise HTTPException(status_code=500, detail="Failed to build search index")
