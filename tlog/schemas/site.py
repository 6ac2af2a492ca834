from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PostFilter(BaseModel):
    """Listing filter: tag inclusion, then tag exclusion, then truncation."""

    model_config = ConfigDict(populate_by_name=True)

    tags: List[str] = Field(default_factory=list)
    exclude_tags: List[str] = Field(default_factory=list, alias="excludeTags")
    max_posts: Optional[int] = Field(default=None, alias="maxPosts", ge=0)


class SocialLinks(BaseModel):
    github: Optional[str] = None
    linkedin: Optional[str] = None
    email: Optional[str] = None
    rss: Optional[bool] = None


class SiteConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    site: str = "http://localhost:4321"
    title: str = "Zen Blog"
    slogan: str = "A minimal blog."
    description: Optional[str] = "A blog built with tlog."
    bio: Optional[str] = None
    avatar: Optional[str] = None
    social: SocialLinks = Field(default_factory=SocialLinks)
    tech_stack: Optional[List[str]] = Field(default=None, alias="techStack")
    homepage: PostFilter = Field(
        default_factory=lambda: PostFilter(max_posts=5, tags=[], exclude_tags=[])
    )
    google_analysis: Optional[str] = Field(default=None, alias="googleAnalysis")
    search: Optional[bool] = True
