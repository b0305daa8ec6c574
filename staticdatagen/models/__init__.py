"""Staticdatagen records: all Pydantic v2, all frozen (immutable)."""

from staticdatagen.models.config import SiteDefaults
from staticdatagen.models.feed import FeedItem, FeedMetadata
from staticdatagen.models.manifest import ManifestIcon, ManifestRecord
from staticdatagen.models.meta_tags import MetaTag, MetaTagGroups
from staticdatagen.models.navigation import NavItem, Navigation, navigation_from_files
from staticdatagen.models.page import FileRecord, PageMetadata
from staticdatagen.models.policies import (
    CnameRecord,
    HumansRecord,
    RobotsDirectives,
    SecurityPolicy,
)
from staticdatagen.models.sitemap import (
    NewsSitemap,
    NewsSitemapEntry,
    Sitemap,
    SitemapEntry,
)
from staticdatagen.models.tags import TagIndex, TagIndexBuilder, TagPages, extract_page_tags

__all__ = [
    # config
    "SiteDefaults",
    # pages
    "PageMetadata",
    "FileRecord",
    # feed
    "FeedItem",
    "FeedMetadata",
    # sitemaps
    "SitemapEntry",
    "Sitemap",
    "NewsSitemapEntry",
    "NewsSitemap",
    # manifest
    "ManifestIcon",
    "ManifestRecord",
    # policies
    "SecurityPolicy",
    "RobotsDirectives",
    "HumansRecord",
    "CnameRecord",
    # markup
    "TagPages",
    "TagIndex",
    "TagIndexBuilder",
    "MetaTag",
    "MetaTagGroups",
    "NavItem",
    "Navigation",
    "navigation_from_files",
    "extract_page_tags",
]
