"""Tests for the BuildOrchestrator: per-page and site-level passes, error capture."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from staticdatagen.core.errors import InvalidValueError
from staticdatagen.core.orchestrator import (
    ArtifactKind,
    ArtifactResult,
    BuildDescription,
    BuildError,
    BuildOrchestrator,
    BuildReport,
    PageInput,
    write_artifacts,
)
from staticdatagen.models.config import SiteDefaults

BASE_URL = "https://example.com"


class TestArtifactKind:
    def test_filenames(self):
        assert ArtifactKind.RSS.filename == "rss.xml"
        assert ArtifactKind.NEWS_SITEMAP.filename == "news-sitemap.xml"
        assert ArtifactKind.CNAME.filename == "CNAME"

    def test_scope(self):
        assert ArtifactKind.SITEMAP.site_level
        assert ArtifactKind.TAGS.site_level
        assert not ArtifactKind.ROBOTS.site_level

    def test_relative_path(self):
        page_result = ArtifactResult(kind=ArtifactKind.RSS, page="posts/hello.md", output="x")
        site_result = ArtifactResult(kind=ArtifactKind.SITEMAP, output="x")
        assert page_result.relative_path == Path("posts/hello/rss.xml")
        assert site_result.relative_path == Path("sitemap.xml")

    @pytest.mark.parametrize(
        "page, expected",
        [
            ("v1.2/notes.md", "v1.2/notes/rss.xml"),
            ("v1.2/notes", "v1.2/notes/rss.xml"),
            ("release.2024.md", "release.2024/rss.xml"),
        ],
    )
    def test_relative_path_strips_only_final_suffix(self, page, expected):
        result = ArtifactResult(kind=ArtifactKind.RSS, page=page, output="x")
        assert result.relative_path == Path(expected)


class TestOrchestratorSetup:
    def test_invalid_defaults_rejected(self):
        with pytest.raises(InvalidValueError):
            BuildOrchestrator(SiteDefaults(base_url="not a url"))

    def test_translator_follows_site_language(self):
        assert BuildOrchestrator(SiteDefaults(language="fr")).translator.language == "fr"

    def test_site_level_kind_is_not_a_page_artifact(self, orchestrator, make_page):
        with pytest.raises(ValueError):
            orchestrator.build_page_artifact(ArtifactKind.SITEMAP, make_page())


class TestPagePass:
    def test_results_follow_requested_order(self, orchestrator, make_page, make_page_metadata):
        page = make_page(**make_page_metadata())
        report = orchestrator.run([page], ["robots", "meta_tags"])
        assert report.ok
        assert [result.kind for result in report.results] == [
            ArtifactKind.ROBOTS,
            ArtifactKind.META_TAGS,
        ]
        assert report.results[0].output.startswith("User-agent: *")

    def test_data_error_recorded_and_pass_continues(
        self, orchestrator, make_page, make_page_metadata, caplog
    ):
        broken = make_page(name="posts/broken.md", description="No title here")
        good = make_page(**make_page_metadata())
        with caplog.at_level(logging.WARNING):
            report = orchestrator.run([broken, good], ["rss"])
        assert not report.ok
        failure, success = report.results
        assert failure.page == "posts/broken.md"
        assert failure.error_kind == "missing"
        assert failure.field == "title"
        assert failure.output == ""
        assert success.ok
        assert "<rss" in success.output
        assert "Skipping rss for posts/broken.md" in caplog.text

    def test_bad_ttl_fails_only_its_page(self, orchestrator, make_page):
        pages = [
            make_page(name="a.md", cname="example.com", ttl="\u00b2"),
            make_page(name="b.md", cname="example.org"),
        ]
        failure, success = orchestrator.run(pages, ["cname"]).results
        assert failure.page == "a.md"
        assert failure.error_kind == "invalid"
        assert failure.field == "ttl"
        assert success.page == "b.md"
        assert success.output == "example.org\nwww.example.org"

    def test_unsafe_page_name_fails_every_kind(self, orchestrator, make_page, make_page_metadata):
        page = make_page(name="../escape.md", **make_page_metadata())
        report = orchestrator.run([page], ["robots", "rss"])
        assert [result.error_kind for result in report.results] == ["security", "security"]

    def test_unexpected_errors_propagate(self, orchestrator, make_page, make_page_metadata):
        def explode(page):
            raise RuntimeError("generator bug")

        orchestrator._page_builders[ArtifactKind.ROBOTS] = explode
        with pytest.raises(RuntimeError, match="generator bug"):
            orchestrator.run([make_page(**make_page_metadata())], ["robots"])

    def test_thread_pool_keeps_input_order(self, defaults, make_page, make_page_metadata):
        orchestrator = BuildOrchestrator(defaults, max_workers=4)
        pages = [
            make_page(name=f"posts/{n}.md", **make_page_metadata(title=f"Post {n}"))
            for n in range(12)
        ]
        report = orchestrator.run(pages, ["meta_tags"])
        assert [result.page for result in report.results] == [page.name for page in pages]
        for n, result in enumerate(report.results):
            assert f'content="Post {n}"' in result.output


class TestSitePass:
    def test_sitemap_aggregates_pages(self, orchestrator, make_page):
        pages = [
            make_page(name="index.md", permalink="/"),
            make_page(name="about.md", permalink="/about", priority="0.5"),
        ]
        report = orchestrator.run(pages, ["sitemap"])
        assert report.ok
        (result,) = report.results
        assert result.page == ""
        assert f"<loc>{BASE_URL}/</loc>" in result.output
        assert f"<loc>{BASE_URL}/about</loc>" in result.output

    def test_bad_page_left_out_of_sitemap(self, orchestrator, make_page):
        pages = [
            make_page(name="index.md", permalink="/"),
            make_page(name="bad.md", permalink="/bad", priority="2"),
        ]
        report = orchestrator.run(pages, ["sitemap"])
        failure, aggregate = report.results
        assert failure.page == "bad.md"
        assert failure.error_kind == "invalid"
        assert aggregate.ok
        assert "/bad" not in aggregate.output

    def test_news_sitemap_only_for_news_pages(
        self, orchestrator, make_page, make_news_metadata
    ):
        assert orchestrator.run([make_page(permalink="/")], ["news_sitemap"]).results == []
        report = orchestrator.run(
            [make_page(permalink="/"), make_page(name="news/launch.md", **make_news_metadata())],
            ["news_sitemap"],
        )
        (result,) = report.results
        assert "<news:title>Example launches</news:title>" in result.output

    def test_tags_and_navigation(self, orchestrator, make_page):
        pages = [
            make_page(name="about.md", content="all about python", tags="python",
                      title="About", permalink="/about", date="2024-02-20"),
            make_page(name="contact.md", content="say hi", title="Contact", permalink="/contact"),
        ]
        report = orchestrator.run(pages, ["tags", "navigation"])
        assert report.ok
        tags, navigation = report.results
        assert tags.kind is ArtifactKind.TAGS
        assert "Python (1 Posts)" in tags.output
        assert navigation.kind is ArtifactKind.NAVIGATION
        assert ">About</a>" in navigation.output
        assert ">Contact</a>" in navigation.output

    def test_page_results_precede_site_results(self, orchestrator, make_page, make_page_metadata):
        report = orchestrator.run([make_page(**make_page_metadata())], ["sitemap", "robots"])
        assert [result.kind for result in report.results] == [
            ArtifactKind.ROBOTS,
            ArtifactKind.SITEMAP,
        ]

    def test_run_description(self, make_page_metadata):
        description = BuildDescription.model_validate(
            {
                "site": {"base_url": BASE_URL, "language": "en"},
                "artifacts": ["robots"],
                "pages": [{"name": "index.md", "metadata": make_page_metadata()}],
            }
        )
        report = BuildOrchestrator(description.site).run_description(description)
        assert report.ok
        assert len(report.outputs) == 1


class TestWriteArtifacts:
    def test_writes_site_and_page_files(self, tmp_path, orchestrator, make_page, make_page_metadata):
        page = make_page(name="posts/hello.md", **make_page_metadata())
        report = orchestrator.run([page], ["robots", "sitemap"])
        written = write_artifacts(report, tmp_path / "site")
        assert sorted(path.relative_to(tmp_path / "site").as_posix() for path in written) == [
            "posts/hello/robots.txt",
            "sitemap.xml",
        ]
        assert (tmp_path / "site" / "sitemap.xml").read_text(encoding="utf-8").startswith("<?xml")

    def test_failures_not_written(self, tmp_path):
        report = BuildReport(
            results=[ArtifactResult(kind=ArtifactKind.CNAME, page="a.md", error="x", error_kind="missing")]
        )
        assert write_artifacts(report, tmp_path) == []

    def test_unwritable_output_raises_build_error(self, tmp_path):
        blocker = tmp_path / "site"
        blocker.write_text("not a directory", encoding="utf-8")
        report = BuildReport(results=[ArtifactResult(kind=ArtifactKind.SITEMAP, output="<x/>")])
        with pytest.raises(BuildError):
            write_artifacts(report, blocker)
