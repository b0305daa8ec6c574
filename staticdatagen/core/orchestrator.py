"""Build orchestrator: the factory -> validate -> generate driver.

The BuildOrchestrator runs every requested artifact kind for every page of a
build description, then the site-level aggregates (sitemaps, tag index,
navigation).  A ``DataError`` raised for one (page, kind) pair is logged,
recorded on an ``ArtifactResult`` and does not stop the pass.  Anything else
propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict, Field

from staticdatagen.core.errors import DataError
from staticdatagen.core.validators import sanitize_path
from staticdatagen.generators import (
    generate_cname,
    generate_humans_txt,
    generate_manifest,
    generate_meta_tags,
    generate_navigation,
    generate_news_sitemap,
    generate_robots_txt,
    generate_rss,
    generate_security_txt,
    generate_sitemap,
    generate_tag_index,
)
from staticdatagen.locales import Translator
from staticdatagen.models.config import SiteDefaults
from staticdatagen.models.feed import FeedMetadata
from staticdatagen.models.manifest import ManifestRecord
from staticdatagen.models.meta_tags import MetaTagGroups
from staticdatagen.models.navigation import navigation_from_files
from staticdatagen.models.page import FileRecord
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
from staticdatagen.models.tags import TagIndexBuilder

logger = logging.getLogger(__name__)


class ArtifactKind(str, Enum):
    """Every artifact the generator knows how to produce."""

    SITEMAP = "sitemap"
    NEWS_SITEMAP = "news_sitemap"
    RSS = "rss"
    MANIFEST = "manifest"
    SECURITY = "security"
    ROBOTS = "robots"
    HUMANS = "humans"
    CNAME = "cname"
    NAVIGATION = "navigation"
    TAGS = "tags"
    META_TAGS = "meta_tags"

    @property
    def filename(self) -> str:
        return ARTIFACT_FILENAMES[self]

    @property
    def site_level(self) -> bool:
        """Whether this kind aggregates over all pages of a build."""
        return self in SITE_LEVEL_KINDS


ARTIFACT_FILENAMES: dict[ArtifactKind, str] = {
    ArtifactKind.SITEMAP: "sitemap.xml",
    ArtifactKind.NEWS_SITEMAP: "news-sitemap.xml",
    ArtifactKind.RSS: "rss.xml",
    ArtifactKind.MANIFEST: "manifest.json",
    ArtifactKind.SECURITY: "security.txt",
    ArtifactKind.ROBOTS: "robots.txt",
    ArtifactKind.HUMANS: "humans.txt",
    ArtifactKind.CNAME: "CNAME",
    ArtifactKind.NAVIGATION: "navigation.html",
    ArtifactKind.TAGS: "tags.html",
    ArtifactKind.META_TAGS: "meta-tags.html",
}

SITE_LEVEL_KINDS = frozenset(
    {
        ArtifactKind.SITEMAP,
        ArtifactKind.NEWS_SITEMAP,
        ArtifactKind.NAVIGATION,
        ArtifactKind.TAGS,
    }
)


class BuildError(RuntimeError):
    """Raised when generated artifacts cannot be written to disk."""


# ---------------------------------------------------------------------------
# Build inputs and results
# ---------------------------------------------------------------------------


class PageInput(BaseModel):
    """One content file of a build: its name, body and front matter."""

    model_config = ConfigDict(frozen=True)

    name: str
    content: str = ""
    metadata: dict[str, str] = Field(default_factory=dict)

    @property
    def file(self) -> FileRecord:
        return FileRecord.create(self.name, self.content)


class BuildDescription(BaseModel):
    """The JSON document the CLI reads: site defaults, kinds and pages."""

    model_config = ConfigDict(frozen=True)

    site: SiteDefaults = Field(default_factory=SiteDefaults)
    artifacts: list[ArtifactKind] = Field(default_factory=list)
    pages: list[PageInput] = Field(default_factory=list)


class ArtifactResult(BaseModel):
    """Outcome of one (page, artifact kind) attempt.

    ``page`` is empty for site-level aggregates.  A failed attempt carries the
    error message and its ``DataError.kind`` and has no output.
    """

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    page: str = ""
    output: str = ""
    error: str = ""
    error_kind: str = ""
    field: str = ""

    @property
    def ok(self) -> bool:
        return not self.error_kind

    @property
    def relative_path(self) -> Path:
        """Where the artifact lands under an output directory."""
        if not self.page:
            return Path(self.kind.filename)
        stem = PurePosixPath(sanitize_path(self.page)).with_suffix("")
        return Path(*stem.parts) / self.kind.filename


class BuildReport(BaseModel):
    """Every ``ArtifactResult`` of a pass, pages first in input order."""

    model_config = ConfigDict(frozen=True)

    results: list[ArtifactResult] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(result.ok for result in self.results)

    @property
    def failures(self) -> list[ArtifactResult]:
        return [result for result in self.results if not result.ok]

    @property
    def outputs(self) -> list[ArtifactResult]:
        return [result for result in self.results if result.ok and result.output]


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class BuildOrchestrator:
    """Drives records and generators over the pages of one build pass.

    Parameters
    ----------
    defaults:
        Site-wide defaults shared by every factory. Uses empty defaults if
        not provided.
    translator:
        Label lookup for navigation and tag-index markup.  Defaults to the
        site language.
    logger:
        Where skipped artifacts and pass summaries are reported.
    max_workers:
        Thread pool size for per-page work; ``1`` runs inline.
    """

    def __init__(
        self,
        defaults: SiteDefaults | None = None,
        translator: Translator | None = None,
        *,
        logger: logging.Logger | None = None,
        max_workers: int = 1,
    ) -> None:
        self.defaults = defaults or SiteDefaults()
        self.defaults.validate()
        self.translator = translator or Translator(self.defaults.language)
        self.logger = logger or logging.getLogger(__name__)
        self.max_workers = max(1, max_workers)

        self._page_builders: dict[ArtifactKind, Callable[[PageInput], str]] = {
            ArtifactKind.RSS: self._build_rss,
            ArtifactKind.MANIFEST: self._build_manifest,
            ArtifactKind.SECURITY: self._build_security,
            ArtifactKind.ROBOTS: self._build_robots,
            ArtifactKind.HUMANS: self._build_humans,
            ArtifactKind.CNAME: self._build_cname,
            ArtifactKind.META_TAGS: self._build_meta_tags,
        }

    # ------------------------------------------------------------------
    # Per-page builders
    # ------------------------------------------------------------------

    def _build_rss(self, page: PageInput) -> str:
        feed = FeedMetadata.from_metadata(page.metadata, self.defaults)
        feed.validate()
        return generate_rss(feed)

    def _build_manifest(self, page: PageInput) -> str:
        manifest = ManifestRecord.from_metadata(page.metadata, self.defaults)
        manifest.validate()
        return generate_manifest(manifest)

    def _build_security(self, page: PageInput) -> str:
        policy = SecurityPolicy.from_metadata(page.metadata)
        policy.validate()
        return generate_security_txt(policy)

    def _build_robots(self, page: PageInput) -> str:
        robots = RobotsDirectives.from_metadata(page.metadata, self.defaults)
        robots.validate()
        return generate_robots_txt(robots)

    def _build_humans(self, page: PageInput) -> str:
        humans = HumansRecord.from_metadata(page.metadata)
        humans.validate()
        return generate_humans_txt(humans)

    def _build_cname(self, page: PageInput) -> str:
        cname = CnameRecord.from_metadata(page.metadata)
        cname.validate()
        return generate_cname(cname)

    def _build_meta_tags(self, page: PageInput) -> str:
        groups = MetaTagGroups.from_metadata(page.metadata, self.defaults)
        groups.validate()
        return generate_meta_tags(groups)

    def build_page_artifact(self, kind: ArtifactKind, page: PageInput) -> str:
        """Run factory, ``validate()`` and generator for one page.

        Raises ``DataError`` on bad input and ``ValueError`` for a site-level
        kind.
        """
        try:
            builder = self._page_builders[kind]
        except KeyError:
            raise ValueError(f"{kind.value} is a site-level artifact") from None
        return builder(page)

    # ------------------------------------------------------------------
    # Result bookkeeping
    # ------------------------------------------------------------------

    def _attempt(
        self, kind: ArtifactKind, page_name: str, build: Callable[[], str]
    ) -> ArtifactResult:
        try:
            output = build()
        except DataError as exc:
            self.logger.warning(
                "Skipping %s for %s: %s", kind.value, page_name or "site", exc
            )
            return ArtifactResult(
                kind=kind,
                page=page_name,
                error=str(exc),
                error_kind=exc.kind,
                field=exc.field,
            )
        self.logger.debug("Generated %s for %s", kind.value, page_name or "site")
        return ArtifactResult(kind=kind, page=page_name, output=output)

    def _page_results(
        self, page: PageInput, kinds: list[ArtifactKind]
    ) -> list[ArtifactResult]:
        results: list[ArtifactResult] = []
        try:
            page.file.validate()
        except DataError as exc:
            self.logger.warning("Skipping page %r: %s", page.name, exc)
            return [
                ArtifactResult(
                    kind=kind,
                    page=page.name,
                    error=str(exc),
                    error_kind=exc.kind,
                    field=exc.field,
                )
                for kind in kinds
            ]
        for kind in kinds:
            results.append(
                self._attempt(kind, page.name, lambda k=kind: self.build_page_artifact(k, page))
            )
        return results

    # ------------------------------------------------------------------
    # Site-level aggregates
    # ------------------------------------------------------------------

    def _collect_entries(
        self,
        kind: ArtifactKind,
        pages: Iterable[PageInput],
        factory: Callable[[PageInput], BaseModel],
    ) -> tuple[list, list[ArtifactResult]]:
        """Build and validate one entry per page; failures become per-page results."""
        entries: list = []
        failures: list[ArtifactResult] = []
        for page in pages:
            try:
                entry = factory(page)
                entry.validate()
            except DataError as exc:
                self.logger.warning("Leaving %s out of %s: %s", page.name, kind.value, exc)
                failures.append(
                    ArtifactResult(
                        kind=kind,
                        page=page.name,
                        error=str(exc),
                        error_kind=exc.kind,
                        field=exc.field,
                    )
                )
                continue
            entries.append(entry)
        return entries, failures

    def _site_results(
        self, pages: list[PageInput], kinds: list[ArtifactKind]
    ) -> list[ArtifactResult]:
        results: list[ArtifactResult] = []
        for kind in kinds:
            if kind is ArtifactKind.SITEMAP:
                entries, failures = self._collect_entries(
                    kind,
                    pages,
                    lambda p: SitemapEntry.from_metadata(p.metadata, self.defaults),
                )
                results.extend(failures)

                def build_sitemap(entries=entries) -> str:
                    sitemap = Sitemap(entries=entries)
                    sitemap.validate()
                    return generate_sitemap(sitemap)

                results.append(self._attempt(kind, "", build_sitemap))

            elif kind is ArtifactKind.NEWS_SITEMAP:
                news_pages = [
                    p for p in pages if any(key.startswith("news_") for key in p.metadata)
                ]
                if not news_pages:
                    self.logger.info("No news pages; skipping news sitemap")
                    continue
                entries, failures = self._collect_entries(
                    kind,
                    news_pages,
                    lambda p: NewsSitemapEntry.from_metadata(p.metadata, self.defaults),
                )
                results.extend(failures)

                def build_news(entries=entries) -> str:
                    news = NewsSitemap(entries=entries)
                    news.validate()
                    return generate_news_sitemap(news)

                results.append(self._attempt(kind, "", build_news))

            elif kind is ArtifactKind.TAGS:
                results.append(self._attempt(kind, "", lambda: self.build_tag_index(pages)))

            elif kind is ArtifactKind.NAVIGATION:
                results.append(self._attempt(kind, "", lambda: self.build_navigation(pages)))
        return results

    def build_tag_index(self, pages: Iterable[PageInput]) -> str:
        builder = TagIndexBuilder()
        for page in pages:
            builder.add_page(page.file, page.metadata)
        index = builder.build()
        index.validate()
        return generate_tag_index(index, self.translator)

    def build_navigation(self, pages: Iterable[PageInput]) -> str:
        navigation = navigation_from_files([page.file for page in pages])
        navigation.validate()
        return generate_navigation(navigation, self.translator)

    # ------------------------------------------------------------------
    # Pass
    # ------------------------------------------------------------------

    def run(
        self, pages: list[PageInput], kinds: Iterable[ArtifactKind | str]
    ) -> BuildReport:
        """Run one build pass and return every result.

        Per-page work fans out over a thread pool; results keep the input
        order of *pages*, then the site-level aggregates follow.
        """
        requested = [ArtifactKind(kind) for kind in kinds]
        page_kinds = [kind for kind in requested if not kind.site_level]
        site_kinds = [kind for kind in requested if kind.site_level]

        self.logger.info(
            "Building %d artifact kind(s) for %d page(s)", len(requested), len(pages)
        )

        results: list[ArtifactResult] = []
        if page_kinds:
            if self.max_workers == 1:
                per_page = [self._page_results(page, page_kinds) for page in pages]
            else:
                with ThreadPoolExecutor(
                    max_workers=self.max_workers, thread_name_prefix="Page"
                ) as executor:
                    per_page = list(
                        executor.map(lambda page: self._page_results(page, page_kinds), pages)
                    )
            for page_results in per_page:
                results.extend(page_results)

        results.extend(self._site_results(pages, site_kinds))

        report = BuildReport(results=results)
        self.logger.info(
            "Build finished: %d generated, %d failed",
            len(report.outputs),
            len(report.failures),
        )
        return report

    def run_description(self, description: BuildDescription) -> BuildReport:
        return self.run(description.pages, description.artifacts)


def write_artifacts(report: BuildReport, output_dir: Path) -> list[Path]:
    """Write every generated artifact of *report* under *output_dir*.

    Site-level artifacts land at the root; per-page artifacts under
    ``<output_dir>/<page stem>/``.  Raises ``BuildError`` if a file cannot be
    written.
    """
    written: list[Path] = []
    for result in report.outputs:
        target = output_dir / result.relative_path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(result.output, encoding="utf-8")
        except OSError as exc:
            raise BuildError(f"Cannot write {target}: {exc}") from exc
        logger.debug("Wrote %s", target)
        written.append(target)
    return written
