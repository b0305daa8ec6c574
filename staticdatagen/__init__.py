"""Staticdatagen: structured-data and metadata artifacts for static sites.

Sitemaps, news sitemaps, RSS feeds, web app manifests, security.txt,
robots.txt, humans.txt, CNAME files, navigation menus, tag indexes and
``<meta>`` tag blocks, each built from page front matter through a frozen
record that validates before anything is rendered.
"""

__version__ = "0.1.0"
__description__ = "Validated metadata artifacts for static sites"

from staticdatagen.core.errors import DataError
from staticdatagen.core.orchestrator import ArtifactKind, BuildOrchestrator
from staticdatagen.cli.app import app as cli

__all__ = ["BuildOrchestrator", "ArtifactKind", "DataError", "cli", "__version__"]
