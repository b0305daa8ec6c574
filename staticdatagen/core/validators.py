"""Pure validators and normalisers used by every record's ``validate()``.

Each validator takes a candidate value and either returns the normalised
value or raises a ``DataError`` subclass naming the field and the offending
value.  Validators never treat absence as an error; deciding whether a field
is required is the record factory's job.

This module is the single home for format and length rules.  Records call
into it rather than re-implementing checks.
"""

from __future__ import annotations

import re
import unicodedata
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime, parsedate_to_datetime
from urllib.parse import urlsplit

import idna

from staticdatagen.core.errors import (
    InvalidValueError,
    MissingFieldError,
    SecurityError,
)

# ISO 639-1 two-letter language codes.
ISO_639_1_CODES: frozenset[str] = frozenset(
    """
    aa ab ae af ak am an ar as av ay az ba be bg bh bi bm bn bo br bs ca ce
    ch co cr cs cu cv cy da de dv dz ee el en eo es et eu fa ff fi fj fo fr
    fy ga gd gl gn gu gv ha he hi ho hr ht hu hy hz ia id ie ig ii ik io is
    it iu ja jv ka kg ki kj kk kl km kn ko kr ks ku kv kw ky la lb lg li ln
    lo lt lu lv mg mh mi mk ml mn mr ms mt my na nb nd ne ng nl nn no nr nv
    ny oc oj om or os pa pi pl ps pt qu rm rn ro ru rw sa sc sd se sg si sk
    sl sm sn so sq sr ss st su sv sw ta te tg th ti tk tl tn to tr ts tt tw
    ty ug uk ur uz ve vi vo wa wo xh yi yo za zh zu
    """.split()
)

_URL_SCHEMES = ("http", "https")
_URL_FORBIDDEN = re.compile(r'[\s<>"]')

_RFC3339 = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt ](?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?P<fraction>\.\d+)?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)
_FULL_DATE = re.compile(r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})$")

# RFC 822 / 2822 with a mandatory four-digit year.
_RFC822 = re.compile(
    r"^(?:[A-Za-z]{3},\s*)?\d{1,2}\s+[A-Za-z]{3}\s+\d{4}\s+"
    r"\d{2}:\d{2}(?::\d{2})?\s+(?:[+-]\d{4}|[A-Za-z]{1,3})$"
)

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_COLOR = re.compile(
    r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$"
)
_IMAGE_SIZE = re.compile(r"^\d+x\d+$")
_TWITTER_HANDLE = re.compile(r"^@?([A-Za-z0-9_]{1,15})$")
_WINDOWS_DRIVE = re.compile(r"^[A-Za-z]:")
_ASCII_DIGITS = re.compile(r"[0-9]+")
_DOMAIN_LABEL = re.compile(r"^[A-Za-z0-9-]+$")

MAX_DOMAIN_LENGTH = 253
MAX_LABEL_LENGTH = 63


# ---------------------------------------------------------------------------
# Presence and text
# ---------------------------------------------------------------------------


def require_non_empty(value: str | None, field: str) -> str:
    """Return *value* stripped, or raise ``MissingFieldError`` if blank."""
    if value is None or not str(value).strip():
        raise MissingFieldError(field)
    return str(value).strip()


def sanitize_text(value: str) -> str:
    """Strip control characters (keeping newline and tab) and the BOM."""
    return "".join(
        ch
        for ch in value
        if ch in "\n\t"
        or (unicodedata.category(ch) != "Cc" and ch != "\ufeff")
    )


def validate_text_length(value: str, max_length: int, field: str = "text") -> str:
    """Fail when *value* holds more than *max_length* characters.

    Counts code points, not bytes.  Never truncates.
    """
    if len(value) > max_length:
        raise InvalidValueError(
            field,
            value,
            f"length {len(value)} exceeds maximum of {max_length}",
            kind="length",
        )
    return value


def validate_single_line(value: str, field: str = "text") -> str:
    """Reject CR and LF so a value cannot start a new line of a text file."""
    if "\r" in value or "\n" in value:
        raise SecurityError(
            f"Line break not allowed in {field}: {value!r}", field=field, value=value
        )
    return value


def validate_whole_number(value: str, field: str = "value", minimum: int = 1) -> int:
    """Parse ASCII decimal digits into an ``int`` no smaller than *minimum*.

    ``str.isdigit`` also accepts superscripts and other Unicode digits that
    ``int()`` rejects, so only ``0-9`` are allowed here.
    """
    if not _ASCII_DIGITS.fullmatch(value or ""):
        raise InvalidValueError(field, value, "must be a whole number")
    number = int(value)
    if number < minimum:
        raise InvalidValueError(field, value, f"must be at least {minimum}")
    return number


# ---------------------------------------------------------------------------
# URLs and domains
# ---------------------------------------------------------------------------


def validate_url(value: str, field: str = "url") -> str:
    """Require an absolute ``http``/``https`` URL with a host."""
    if not value or _URL_FORBIDDEN.search(value):
        raise InvalidValueError(field, value, "not a well-formed URL")
    try:
        parts = urlsplit(value)
        hostname = parts.hostname
    except ValueError as exc:
        raise InvalidValueError(field, value, f"unparseable URL: {exc}") from exc
    if parts.scheme.lower() not in _URL_SCHEMES:
        raise InvalidValueError(field, value, "scheme must be http or https")
    if not hostname:
        raise InvalidValueError(field, value, "URL has no host")
    return value


def validate_domain(value: str, field: str = "domain") -> str:
    """Validate a domain name per IDNA rules and return its ASCII form.

    Internationalised names are converted to punycode
    (``münchen.de`` -> ``xn--mnchen-3ya.de``).
    """
    if not value:
        raise InvalidValueError(field, value, "domain name cannot be empty")
    if value != value.strip():
        raise InvalidValueError(field, value, "leading or trailing whitespace")
    try:
        ascii_domain = idna.encode(value, uts46=True).decode("ascii")
    except idna.IDNAError as exc:
        raise InvalidValueError(field, value, f"not a valid IDNA domain: {exc}") from exc

    if len(ascii_domain) > MAX_DOMAIN_LENGTH:
        raise InvalidValueError(
            field, value, f"exceeds {MAX_DOMAIN_LENGTH} characters"
        )
    labels = ascii_domain.split(".")
    if len(labels) < 2:
        raise InvalidValueError(
            field, value, "must have at least two labels (e.g. example.com)"
        )
    for label in labels:
        if not label:
            raise InvalidValueError(field, value, "empty label")
        if len(label) > MAX_LABEL_LENGTH:
            raise InvalidValueError(
                field, value, f"label {label!r} exceeds {MAX_LABEL_LENGTH} characters"
            )
        if label.startswith("-") or label.endswith("-"):
            raise InvalidValueError(
                field, value, f"label {label!r} starts or ends with a hyphen"
            )
        if not _DOMAIN_LABEL.match(label):
            raise InvalidValueError(
                field, value, f"label {label!r} has invalid characters"
            )
    return ascii_domain


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def _build_datetime(match: re.Match[str], field: str, value: str) -> datetime:
    groups = match.groupdict()
    offset = groups.get("offset")
    if offset is None or offset in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = 1 if offset[0] == "+" else -1
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        if hours > 23 or minutes > 59:
            raise InvalidValueError(field, value, "offset out of range")
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))

    fraction = groups.get("fraction") or ""
    microsecond = int((fraction[1:] + "000000")[:6]) if fraction else 0
    try:
        return datetime(
            int(groups["year"]),
            int(groups["month"]),
            int(groups["day"]),
            int(groups.get("hour") or 0),
            int(groups.get("minute") or 0),
            int(groups.get("second") or 0),
            microsecond,
            tzinfo=tz,
        )
    except ValueError as exc:
        raise InvalidValueError(field, value, f"date out of range: {exc}") from exc


def validate_date(
    value: str, field: str = "date", *, allow_date_only: bool = False
) -> datetime:
    """Parse an RFC 3339 timestamp and return an aware ``datetime``.

    With ``allow_date_only`` a bare ``YYYY-MM-DD`` (W3C Datetime, as used by
    sitemaps) is also accepted and read as midnight UTC.
    """
    text = (value or "").strip()
    match = _RFC3339.match(text)
    if match is None and allow_date_only:
        match = _FULL_DATE.match(text)
    if match is None:
        raise InvalidValueError(field, value, "not an RFC 3339 date")
    return _build_datetime(match, field, value)


def validate_rfc822_date(value: str, field: str = "date") -> datetime:
    """Parse an RFC 822/2822 date with a four-digit year."""
    text = (value or "").strip()
    if not _RFC822.match(text):
        raise InvalidValueError(field, value, "not an RFC 822 date")
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError) as exc:
        raise InvalidValueError(field, value, f"not an RFC 822 date: {exc}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_feed_date(value: str, field: str = "date") -> datetime:
    """Accept either an RFC 822 or an RFC 3339 date (feeds see both)."""
    try:
        return validate_rfc822_date(value, field)
    except InvalidValueError:
        pass
    try:
        return validate_date(value, field)
    except InvalidValueError as exc:
        raise InvalidValueError(
            field, value, "not an RFC 822 or RFC 3339 date"
        ) from exc


def format_rfc822(value: str) -> str:
    """Render a feed date (RFC 822 or RFC 3339 input) in RFC 822 form."""
    return format_datetime(parse_feed_date(value))


# ---------------------------------------------------------------------------
# Colors, sizes, handles, languages
# ---------------------------------------------------------------------------


def validate_color(value: str, field: str = "color") -> str:
    """Accept ``#rgb``, ``#rrggbb`` or ``rgb(r, g, b)`` with channels 0-255."""
    text = (value or "").strip()
    if _HEX_COLOR.match(text):
        return text
    match = _RGB_COLOR.match(text)
    if match and all(int(channel) <= 255 for channel in match.groups()):
        return text
    raise InvalidValueError(field, value, "not a hex or rgb() color")


def validate_image_size(value: str, field: str = "sizes") -> str:
    """Require a ``WIDTHxHEIGHT`` token such as ``512x512``."""
    if not _IMAGE_SIZE.match(value or ""):
        raise InvalidValueError(field, value, "not a WIDTHxHEIGHT size token")
    return value


def validate_language_code(value: str, field: str = "language") -> str:
    """Require a lowercase ISO 639-1 two-letter code."""
    if value not in ISO_639_1_CODES:
        raise InvalidValueError(field, value, "not an ISO 639-1 language code")
    return value


def validate_twitter_handle(value: str, field: str = "twitter") -> str:
    """Validate a Twitter/X handle and return it with a leading ``@``."""
    match = _TWITTER_HANDLE.match((value or "").strip())
    if match is None:
        raise InvalidValueError(
            field, value, "handle must be 1-15 letters, digits or underscores"
        )
    return f"@{match.group(1)}"


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def sanitize_path(value: str, field: str = "name") -> str:
    """Return a cleaned relative path or raise on anything unsafe.

    Rejects embedded NUL, absolute paths (POSIX, drive letters, UNC) and
    any ``..`` component.  Backslashes are treated as separators; ``.`` and
    empty components are dropped.
    """
    if value is None or not value.strip():
        raise InvalidValueError(field, value, "path cannot be empty")
    if "\x00" in value:
        raise SecurityError(f"Path contains NUL byte: {value!r}", field=field, value=value)

    normalised = value.replace("\\", "/")
    if normalised.startswith("/") or _WINDOWS_DRIVE.match(normalised):
        raise SecurityError(f"Absolute path not allowed: {value!r}", field=field, value=value)

    parts = normalised.split("/")
    if any(part == ".." for part in parts):
        raise SecurityError(f"Path traversal detected: {value!r}", field=field, value=value)

    cleaned = [part for part in parts if part not in ("", ".")]
    if not cleaned:
        raise InvalidValueError(field, value, "path has no components")
    return "/".join(cleaned)
