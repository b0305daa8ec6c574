"""End-to-end integration tests: a whole site through every artifact kind.

These tests exercise the records, generators, locales and the
BuildOrchestrator together, then write the result to disk.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path

import feedparser
import pytest

from staticdatagen.core.orchestrator import (
    ArtifactKind,
    BuildOrchestrator,
    PageInput,
    write_artifacts,
)
from staticdatagen.generators.sitemap import SITEMAP_NS
from staticdatagen.models.config import SiteDefaults

BASE_URL = "https://example.com"

SITE_PAGE = {
    "title": "Example",
    "description": "The example site.",
    "permalink": f"{BASE_URL}/",
    "name": "Example",
    "short_name": "Ex",
    "theme-color": "#FF5733",
    "icon": "/icon.svg",
    "security_contact": "mailto:security@example.com",
    "security_expires": "2099-12-31T23:59:59Z",
    "author": "Jane Doe",
    "author_twitter": "janedoe",
    "cname": "example.com",
    "disallow": "/drafts/",
}


def _post(n: int) -> PageInput:
    return PageInput(
        name=f"posts/post-{n}.md",
        content=f"Post {n} is about python and static sites",
        metadata={
            "title": f"Post {n}",
            "description": f"Summary of post {n}.",
            "permalink": f"/posts/post-{n}",
            "link": f"{BASE_URL}/posts/post-{n}",
            "lastmod": f"2024-02-{10 + n}",
            "tags": "python, static",
            "item_title": f"Post {n}",
            "item_link": f"{BASE_URL}/posts/post-{n}",
            "item_pub_date": f"2024-02-{10 + n}T09:00:00Z",
        },
    )


class TestFullBuild:
    """A site build: every kind, every page, then files on disk."""

    @pytest.fixture
    def pages(self) -> list[PageInput]:
        return [PageInput(name="index.md", content="Welcome", metadata=SITE_PAGE)] + [
            _post(n) for n in range(3)
        ]

    @pytest.fixture
    def orch(self) -> BuildOrchestrator:
        return BuildOrchestrator(SiteDefaults(base_url=BASE_URL, language="en"), max_workers=2)

    def test_every_kind_runs(self, orch: BuildOrchestrator, pages):
        report = orch.run(pages, list(ArtifactKind))
        produced = {result.kind for result in report.outputs}
        # No news_* keys anywhere, so no news sitemap.
        assert produced == set(ArtifactKind) - {ArtifactKind.NEWS_SITEMAP}

    def test_site_page_policies(self, orch: BuildOrchestrator, pages):
        report = orch.run(pages[:1], ["security", "robots", "humans", "cname", "manifest"])
        assert report.ok
        outputs = {result.kind: result.output for result in report.results}
        assert outputs[ArtifactKind.SECURITY].startswith("Contact: mailto:security@example.com\n")
        assert "Disallow: /drafts/" in outputs[ArtifactKind.ROBOTS]
        assert "Twitter: @janedoe" in outputs[ArtifactKind.HUMANS]
        assert outputs[ArtifactKind.CNAME] == "example.com\nwww.example.com"
        manifest = json.loads(outputs[ArtifactKind.MANIFEST])
        assert manifest["icons"][0]["src"] == "/icon.svg"

    def test_posts_only_lack_site_policies(self, orch: BuildOrchestrator, pages):
        report = orch.run(pages[1:], ["security", "cname"])
        assert {result.error_kind for result in report.failures} == {"missing"}
        assert len(report.failures) == 6

    def test_feeds_parse(self, orch: BuildOrchestrator, pages):
        report = orch.run(pages[1:], ["rss"])
        for n, result in enumerate(report.results):
            parsed = feedparser.parse(result.output.encode("utf-8"))
            assert not parsed.bozo
            assert parsed.feed.title == f"Post {n}"
            assert [entry.title for entry in parsed.entries] == [f"Post {n}"]

    def test_sitemap_covers_every_page(self, orch: BuildOrchestrator, pages):
        (result,) = orch.run(pages, ["sitemap"]).results
        root = ET.fromstring(result.output.encode("utf-8"))
        locs = [url.find(f"{{{SITEMAP_NS}}}loc").text for url in root]
        assert locs == [f"{BASE_URL}/"] + [f"{BASE_URL}/posts/post-{n}" for n in range(3)]

    def test_tag_index_and_navigation(self, orch: BuildOrchestrator, pages):
        tags, navigation = orch.run(pages, ["tags", "navigation"]).results
        assert "Featured Tags (6)" in tags.output
        assert tags.output.index('id="h3-python"') < tags.output.index('id="h3-static"')
        root = ET.fromstring(navigation.output)
        labels = [li.find("a").text for li in root.findall("./ul/li")]
        assert labels == ["Post 0", "Post 1", "Post 2"]

    def test_write_to_disk(self, tmp_path: Path, orch: BuildOrchestrator, pages):
        report = orch.run(pages, list(ArtifactKind))
        written = write_artifacts(report, tmp_path)
        assert len(written) == len(report.outputs)
        assert (tmp_path / "sitemap.xml").is_file()
        assert (tmp_path / "index" / "security.txt").is_file()
        assert (tmp_path / "posts" / "post-1" / "rss.xml").is_file()
        assert not (tmp_path / "posts" / "post-1" / "security.txt").exists()
