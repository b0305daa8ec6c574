"""Plain-text generators: ``security.txt``, ``robots.txt``, ``humans.txt``
and ``CNAME``."""

from __future__ import annotations

from staticdatagen.core.validators import validate_twitter_handle
from staticdatagen.models.policies import (
    CnameRecord,
    HumansRecord,
    RobotsDirectives,
    SecurityPolicy,
)


def generate_security_txt(policy: SecurityPolicy) -> str:
    """Render RFC 9116 fields in canonical order, newline-terminated.

    Order: Contact (one line each), Expires, Encryption, Acknowledgments,
    Canonical, Policy, Preferred-Languages, Hiring.
    """
    lines = [f"Contact: {contact}" for contact in policy.contact]
    lines.append(f"Expires: {policy.expires}")
    optional = (
        ("Encryption", policy.encryption),
        ("Acknowledgments", policy.acknowledgments),
        ("Canonical", policy.canonical),
        ("Policy", policy.policy),
        ("Preferred-Languages", ", ".join(policy.preferred_languages)),
        ("Hiring", policy.hiring),
    )
    lines.extend(f"{label}: {value}" for label, value in optional if value)
    return "\n".join(lines) + "\n"


def generate_robots_txt(robots: RobotsDirectives) -> str:
    """Render one ``User-agent`` group and an optional ``Sitemap`` line.

    A group with no rules gets an empty ``Disallow:`` (allow everything).
    """
    lines = [f"User-agent: {robots.user_agent or '*'}"]
    lines.extend(f"Allow: {rule}" for rule in robots.allow)
    lines.extend(f"Disallow: {rule}" for rule in robots.disallow)
    if not robots.allow and not robots.disallow:
        lines.append("Disallow:")
    if robots.crawl_delay:
        lines.append(f"Crawl-delay: {robots.crawl_delay}")
    if robots.sitemap:
        lines.extend(["", f"Sitemap: {robots.sitemap}"])
    return "\n".join(lines) + "\n"


def generate_humans_txt(humans: HumansRecord) -> str:
    """Render the TEAM / THANKS / SITE sections of ``humans.txt``."""
    twitter = (
        validate_twitter_handle(humans.author_twitter) if humans.author_twitter else ""
    )
    sections = (
        (
            "TEAM",
            (
                ("Name", humans.author),
                ("Website", humans.author_website),
                ("Twitter", twitter),
                ("Location", humans.author_location),
            ),
        ),
        ("THANKS", (("Thanks", humans.thanks),)),
        (
            "SITE",
            (
                ("Last update", humans.site_last_updated),
                ("Standards", humans.site_standards),
                ("Components", humans.site_components),
                ("Software", humans.site_software),
            ),
        ),
    )
    blocks = []
    for heading, fields in sections:
        lines = [f"/* {heading} */"]
        lines.extend(f"    {label}: {value}" for label, value in fields if value)
        blocks.append("\n".join(lines) + "\n")
    return "\n".join(blocks)


def generate_cname(record: CnameRecord) -> str:
    """Render the ``CNAME`` file: the apex domain and its ``www.`` alias.

    A domain that already starts with ``www.`` is written alone.
    """
    if record.domain.startswith("www."):
        return record.domain
    return f"{record.domain}\nwww.{record.domain}"


def generate_cname_record(record: CnameRecord) -> str:
    """Render a DNS zone line, or the record's custom ``format``.

    The custom format may use ``{domain}`` and ``{ttl}`` placeholders.
    """
    if record.format:
        return record.format.replace("{domain}", record.domain).replace(
            "{ttl}", str(record.ttl)
        )
    return f"{record.domain} {record.ttl} IN CNAME www.{record.domain}"
