"""Build configuration: env-driven, ``.env``-aware.

Reads ``STATICDATAGEN_*`` environment variables and an optional ``.env`` file
in the working directory.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from staticdatagen.models.config import SiteDefaults


class BuildSettings(BaseSettings):
    """Build settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export STATICDATAGEN_BASE_URL=https://example.com
        export STATICDATAGEN_LANGUAGE=fr
        export STATICDATAGEN_LOG_LEVEL=DEBUG

    Or via .env file::

        STATICDATAGEN_MAX_WORKERS=8
        STATICDATAGEN_ARTIFACTS='["sitemap", "rss"]'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="STATICDATAGEN_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Site
    base_url: str = ""
    language: str = "en"

    # Directories
    content_dir: Path = Path("content")
    build_dir: Path = Path("build")
    site_dir: Path = Path("public")
    template_dir: Path = Path("templates")

    # Runtime
    log_level: str = "INFO"
    max_workers: int = 4

    # Artifact kinds produced when a build description names none
    artifacts: list[str] = [
        "sitemap",
        "news_sitemap",
        "rss",
        "manifest",
        "security",
        "robots",
        "humans",
        "cname",
        "navigation",
        "tags",
        "meta_tags",
    ]

    def site_defaults(self) -> SiteDefaults:
        """The frozen per-pass defaults derived from these settings."""
        return SiteDefaults(base_url=self.base_url, language=self.language)


# Module-level singleton: import as `from staticdatagen.config import settings`
settings = BuildSettings()
