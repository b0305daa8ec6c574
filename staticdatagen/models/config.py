"""Site-wide defaults threaded into every record factory."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from staticdatagen.core.validators import validate_language_code, validate_url


class SiteDefaults(BaseModel):
    """Read-only site-wide values shared by every page in a build pass.

    Built once by the orchestrator (usually from ``BuildSettings``) and passed
    by reference into factories.  Never mutated during a pass.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = ""
    language: str = "en"

    def validate(self) -> None:
        if self.base_url:
            validate_url(self.base_url, "base_url")
        validate_language_code(self.language, "language")

    def url_for(self, path: str) -> str:
        """Join *path* onto ``base_url``."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
