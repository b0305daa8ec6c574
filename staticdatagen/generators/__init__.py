"""Pure generators: one validated record in, one complete file body out.

Generators assume their record already passed ``validate()``.
"""

from staticdatagen.generators.feed import generate_rss
from staticdatagen.generators.manifest import generate_manifest
from staticdatagen.generators.meta_tags import generate_meta_tag_groups, generate_meta_tags
from staticdatagen.generators.navigation import generate_navigation
from staticdatagen.generators.policies import (
    generate_cname,
    generate_cname_record,
    generate_humans_txt,
    generate_robots_txt,
    generate_security_txt,
)
from staticdatagen.generators.sitemap import generate_news_sitemap, generate_sitemap
from staticdatagen.generators.tags import generate_tag_index

__all__ = [
    "generate_cname",
    "generate_cname_record",
    "generate_humans_txt",
    "generate_manifest",
    "generate_meta_tag_groups",
    "generate_meta_tags",
    "generate_navigation",
    "generate_news_sitemap",
    "generate_robots_txt",
    "generate_rss",
    "generate_security_txt",
    "generate_sitemap",
    "generate_tag_index",
]
