"""Plain-text policy records: ``security.txt``, ``robots.txt``,
``humans.txt`` and ``CNAME``."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict

from staticdatagen.core.errors import InvalidValueError, MissingFieldError
from staticdatagen.core.metadata import Metadata, lookup, require, split_list
from staticdatagen.core.validators import (
    validate_date,
    validate_domain,
    validate_language_code,
    validate_single_line,
    validate_text_length,
    validate_twitter_handle,
    validate_url,
    validate_whole_number,
)
from staticdatagen.models.config import SiteDefaults

# Contact URIs permitted by RFC 9116 section 2.5.3.
SECURITY_CONTACT_SCHEMES = ("https://", "mailto:", "tel:")

MAX_HUMANS_TEXT_LENGTH = 100
DEFAULT_CNAME_TTL = 3600


# ---------------------------------------------------------------------------
# security.txt
# ---------------------------------------------------------------------------


class SecurityPolicy(BaseModel):
    """Fields of an RFC 9116 ``security.txt`` file."""

    model_config = ConfigDict(frozen=True)

    contact: list[str] = []
    expires: str = ""
    encryption: str = ""
    acknowledgments: str = ""
    canonical: str = ""
    policy: str = ""
    preferred_languages: list[str] = []
    hiring: str = ""

    @classmethod
    def from_metadata(cls, metadata: Metadata) -> SecurityPolicy:
        """Read the ``security_*`` keys.

        ``security_contact`` (comma-separated) and ``security_expires`` are
        required.
        """
        contacts = split_list(lookup(metadata, "security_contact"))
        if not contacts:
            raise MissingFieldError("security_contact")
        return cls(
            contact=contacts,
            expires=require(metadata, "security_expires"),
            encryption=lookup(metadata, "security_encryption"),
            acknowledgments=lookup(metadata, "security_acknowledgments"),
            canonical=lookup(metadata, "security_canonical"),
            policy=lookup(metadata, "security_policy"),
            preferred_languages=split_list(
                lookup(metadata, "security_preferred_languages")
            ),
            hiring=lookup(metadata, "security_hiring"),
        )

    def validate(self, now: datetime | None = None) -> None:
        """Check RFC 9116 constraints; *now* defaults to the current UTC time."""
        for key, value in self.model_dump().items():
            for line in value if isinstance(value, list) else [value]:
                validate_single_line(line, key)
        if not self.contact:
            raise MissingFieldError("contact", "At least one contact is required")
        for contact in self.contact:
            if not contact.startswith(SECURITY_CONTACT_SCHEMES):
                raise InvalidValueError(
                    "contact", contact, "must be an https:, mailto: or tel: URI"
                )
            if contact.startswith("https://"):
                validate_url(contact, "contact")
        if not self.expires:
            raise MissingFieldError("expires")
        expires_at = validate_date(self.expires, "expires")
        if expires_at <= (now or datetime.now(timezone.utc)):
            raise InvalidValueError("expires", self.expires, "date must be in the future")
        for key in ("encryption", "acknowledgments", "canonical", "policy", "hiring"):
            value = getattr(self, key)
            if value:
                validate_url(value, key)
        for language in self.preferred_languages:
            validate_language_code(language, "preferred_languages")


# ---------------------------------------------------------------------------
# robots.txt
# ---------------------------------------------------------------------------


class RobotsDirectives(BaseModel):
    """A single ``User-agent`` block plus an optional ``Sitemap`` line."""

    model_config = ConfigDict(frozen=True)

    user_agent: str = "*"
    allow: list[str] = []
    disallow: list[str] = []
    crawl_delay: str = ""
    sitemap: str = ""

    @classmethod
    def from_metadata(
        cls, metadata: Metadata, defaults: SiteDefaults | None = None
    ) -> RobotsDirectives:
        """Nothing is required.

        The sitemap link defaults to ``<permalink or base_url>/sitemap.xml``.
        """
        defaults = defaults or SiteDefaults()
        sitemap = lookup(metadata, "sitemap")
        if not sitemap:
            root = lookup(metadata, "permalink", default=defaults.base_url)
            sitemap = f"{root.rstrip('/')}/sitemap.xml" if root else ""
        return cls(
            user_agent=lookup(metadata, "user_agent", default="*"),
            allow=split_list(lookup(metadata, "allow")),
            disallow=split_list(lookup(metadata, "disallow")),
            crawl_delay=lookup(metadata, "crawl_delay"),
            sitemap=sitemap,
        )

    def validate(self) -> None:
        if not self.user_agent or any(ch in self.user_agent for ch in "\r\n:"):
            raise InvalidValueError("user_agent", self.user_agent, "not a valid user-agent token")
        for key in ("allow", "disallow"):
            for rule in getattr(self, key):
                if not rule.startswith(("/", "*")) or any(ch.isspace() for ch in rule):
                    raise InvalidValueError(
                        key, rule, "rules must start with '/' or '*' and contain no whitespace"
                    )
        if self.crawl_delay:
            validate_whole_number(self.crawl_delay, "crawl_delay", minimum=0)
        if self.sitemap:
            validate_url(self.sitemap, "sitemap")


# ---------------------------------------------------------------------------
# humans.txt
# ---------------------------------------------------------------------------


class HumansRecord(BaseModel):
    """Credits for ``humans.txt``."""

    model_config = ConfigDict(frozen=True)

    author: str
    author_website: str = ""
    author_twitter: str = ""
    author_location: str = ""
    thanks: str = ""
    site_last_updated: str = ""
    site_standards: str = ""
    site_components: str = ""
    site_software: str = ""

    @classmethod
    def from_metadata(cls, metadata: Metadata) -> HumansRecord:
        """``author`` is required."""
        return cls(
            author=require(metadata, "author"),
            author_website=lookup(metadata, "author_website"),
            author_twitter=lookup(metadata, "author_twitter"),
            author_location=lookup(metadata, "author_location"),
            thanks=lookup(metadata, "thanks"),
            site_last_updated=lookup(metadata, "site_last_updated"),
            site_standards=lookup(metadata, "site_standards"),
            site_components=lookup(metadata, "site_components"),
            site_software=lookup(metadata, "site_software"),
        )

    def validate(self) -> None:
        if not self.author.strip():
            raise MissingFieldError("author")
        for key, value in self.model_dump().items():
            validate_single_line(value, key)
            validate_text_length(value, MAX_HUMANS_TEXT_LENGTH, key)
        if self.author_website:
            validate_url(self.author_website, "author_website")
        if self.author_twitter:
            validate_twitter_handle(self.author_twitter, "author_twitter")
        if self.site_last_updated:
            validate_date(self.site_last_updated, "site_last_updated", allow_date_only=True)


# ---------------------------------------------------------------------------
# CNAME
# ---------------------------------------------------------------------------


class CnameRecord(BaseModel):
    """Custom domain for the ``CNAME`` file (and an optional DNS zone line)."""

    model_config = ConfigDict(frozen=True)

    domain: str
    ttl: int = DEFAULT_CNAME_TTL
    format: str = ""

    @classmethod
    def from_metadata(cls, metadata: Metadata) -> CnameRecord:
        """``cname`` is required and stored in its ASCII (punycode) form."""
        domain = require(metadata, "cname")
        ttl_text = lookup(metadata, "ttl", default=str(DEFAULT_CNAME_TTL))
        return cls(
            domain=validate_domain(domain, "cname"),
            ttl=validate_whole_number(ttl_text, "ttl"),
            format=lookup(metadata, "format"),
        )

    def validate(self) -> None:
        if validate_domain(self.domain, "domain") != self.domain:
            raise InvalidValueError("domain", self.domain, "domain must be stored in ASCII form")
        if self.ttl <= 0:
            raise InvalidValueError("ttl", self.ttl, "must be greater than 0")
        if self.format:
            validate_single_line(self.format, "format")
