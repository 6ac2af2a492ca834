import json
import logging
import tomllib
from pathlib import Path
from typing import Optional

from tlog.schemas.site import SiteConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = ".config.toml"


def load_site_config(raw: Optional[str]) -> SiteConfig:
    """Build the site config from a JSON string, falling back to defaults.

    Top-level keys replace the defaults wholesale (a shallow merge).
    """
    defaults = SiteConfig().model_dump(by_alias=True)
    if not raw:
        return SiteConfig.model_validate(defaults)
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Failed to parse ZEN_BLOG_CONFIG, using defaults")
        return SiteConfig.model_validate(defaults)
    if not isinstance(parsed, dict):
        logger.warning("ZEN_BLOG_CONFIG is not a JSON object, using defaults")
        return SiteConfig.model_validate(defaults)
    return SiteConfig.model_validate({**defaults, **parsed})


def read_config_toml(path) -> SiteConfig:
    """Map the sections of a blog's .config.toml onto a SiteConfig."""
    parsed = tomllib.loads(Path(path).read_text(encoding="utf-8"))

    site = parsed.get("site") or {}
    social = parsed.get("social") or {}
    homepage = parsed.get("homepage") or {}
    features = parsed.get("features") or {}

    return SiteConfig(
        site=site.get("url") or "http://localhost:4321",
        title=site.get("title") or "Zen Blog",
        slogan=site.get("slogan") or "",
        description=site.get("description") or "",
        bio=site.get("bio") or "",
        avatar=site.get("avatar") or "",
        social={
            "github": social.get("github") or "",
            "linkedin": social.get("linkedin") or "",
            "email": social.get("email") or "",
            "rss": social.get("rss", False),
        },
        tech_stack=features.get("techStack") or [],
        homepage={
            "maxPosts": homepage.get("maxPosts") or 5,
            "tags": homepage.get("tags") or [],
            "excludeTags": homepage.get("excludeTags") or [],
        },
        google_analysis=features.get("googleAnalysis") or "",
        search=features.get("search", True),
    )
