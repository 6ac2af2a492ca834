from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from tlog.schemas.site import SiteConfig
from tlog.site_config import load_site_config


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    ZEN_BLOG_DIR: str = "./content/blog"
    ZEN_BLOG_OUTPUT: Optional[str] = None
    ZEN_BLOG_CONFIG: Optional[str] = None

    # Dev server
    WATCH_CONTENT: bool = False
    WATCH_INTERVAL: float = 0.5

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_dir(self) -> Path:
        return Path(self.ZEN_BLOG_DIR).resolve()

    @property
    def output_dir(self) -> Path:
        if self.ZEN_BLOG_OUTPUT:
            return Path(self.ZEN_BLOG_OUTPUT).resolve()
        return self.content_dir / "dist"

    @property
    def site_config(self) -> SiteConfig:
        return load_site_config(self.ZEN_BLOG_CONFIG)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
