"""Tests for the validators layer: text, URLs, domains, dates, colors, paths."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from staticdatagen.core.errors import (
    DataError,
    InvalidValueError,
    MissingFieldError,
    SecurityError,
)
from staticdatagen.core.validators import (
    format_rfc822,
    parse_feed_date,
    require_non_empty,
    sanitize_path,
    sanitize_text,
    validate_color,
    validate_date,
    validate_domain,
    validate_image_size,
    validate_language_code,
    validate_rfc822_date,
    validate_single_line,
    validate_text_length,
    validate_twitter_handle,
    validate_url,
    validate_whole_number,
)


class TestText:
    def test_require_non_empty_strips(self):
        assert require_non_empty("  hello ", "title") == "hello"

    def test_require_non_empty_blank_raises(self):
        with pytest.raises(MissingFieldError) as exc_info:
            require_non_empty("   ", "title")
        assert exc_info.value.field == "title"
        assert exc_info.value.kind == "missing"

    def test_sanitize_text_drops_controls_keeps_newline_and_tab(self):
        assert sanitize_text("a\x00b\tc\nd\x07") == "ab\tc\nd"

    def test_sanitize_text_drops_bom(self):
        assert sanitize_text("\ufeffTitle") == "Title"

    def test_text_length_within_limit(self):
        assert validate_text_length("abc", 3, "title") == "abc"

    def test_text_length_counts_code_points(self):
        assert validate_text_length("ééé", 3, "title") == "ééé"

    def test_text_length_over_limit_is_length_kind(self):
        with pytest.raises(InvalidValueError) as exc_info:
            validate_text_length("abcd", 3, "title")
        assert exc_info.value.kind == "length"
        assert exc_info.value.field == "title"

    def test_single_line_passes_plain_text(self):
        assert validate_single_line("mailto:a@example.com", "contact") == "mailto:a@example.com"

    @pytest.mark.parametrize("value", ["a\nPolicy: x", "a\rb", "trailing\n"])
    def test_single_line_rejects_line_breaks(self, value):
        with pytest.raises(SecurityError) as exc_info:
            validate_single_line(value, "contact")
        assert exc_info.value.field == "contact"


class TestWholeNumbers:
    def test_ascii_digits_parse(self):
        assert validate_whole_number("3600", "ttl") == 3600

    def test_zero_allowed_with_minimum(self):
        assert validate_whole_number("0", "crawl_delay", minimum=0) == 0

    @pytest.mark.parametrize("value", ["\u00b2", "\u0663", "12\u00b2", "-5", "1.5", " 60", "60\n", ""])
    def test_non_ascii_or_malformed_digits_rejected(self, value):
        with pytest.raises(InvalidValueError):
            validate_whole_number(value, "ttl")

    def test_below_minimum_rejected(self):
        with pytest.raises(InvalidValueError):
            validate_whole_number("0", "ttl")


class TestUrls:
    @pytest.mark.parametrize(
        "url",
        ["https://example.com", "http://example.com/a/b?q=1", "https://sub.example.co.uk:8443/"],
    )
    def test_valid_urls(self, url):
        assert validate_url(url) == url

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "example.com",
            "ftp://example.com/file",
            "javascript:alert(1)",
            "https://",
            "https://exa mple.com",
            'https://example.com/"onmouseover',
        ],
    )
    def test_invalid_urls(self, url):
        with pytest.raises(InvalidValueError):
            validate_url(url, "link")


class TestDomains:
    def test_plain_domain(self):
        assert validate_domain("example.com") == "example.com"

    def test_idn_converted_to_punycode(self):
        assert validate_domain("münchen.de") == "xn--mnchen-3ya.de"

    def test_single_label_rejected(self):
        with pytest.raises(InvalidValueError):
            validate_domain("localhost")

    def test_label_too_long_rejected(self):
        with pytest.raises(InvalidValueError):
            validate_domain("a" * 64 + ".com")

    def test_hyphen_edges_rejected(self):
        with pytest.raises(InvalidValueError):
            validate_domain("-bad.com")

    def test_whitespace_rejected(self):
        with pytest.raises(InvalidValueError):
            validate_domain(" example.com")

    def test_underscore_rejected(self):
        with pytest.raises(InvalidValueError):
            validate_domain("bad_label.com")


class TestDates:
    def test_rfc3339_utc(self):
        parsed = validate_date("2024-02-20T15:15:15Z")
        assert parsed == datetime(2024, 2, 20, 15, 15, 15, tzinfo=timezone.utc)

    def test_rfc3339_offset(self):
        parsed = validate_date("2024-02-20T15:15:15+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_rfc3339_fraction(self):
        assert validate_date("2024-02-20T15:15:15.25Z").microsecond == 250000

    def test_day_month_year_rejected(self):
        with pytest.raises(InvalidValueError):
            validate_date("20/02/2024")

    def test_impossible_date_rejected(self):
        with pytest.raises(InvalidValueError):
            validate_date("2024-02-30T00:00:00Z")

    def test_date_only_needs_opt_in(self):
        with pytest.raises(InvalidValueError):
            validate_date("2024-02-20")
        parsed = validate_date("2024-02-20", allow_date_only=True)
        assert parsed == datetime(2024, 2, 20, tzinfo=timezone.utc)

    def test_rfc822(self):
        parsed = validate_rfc822_date("Tue, 20 Feb 2024 15:15:15 GMT")
        assert parsed == datetime(2024, 2, 20, 15, 15, 15, tzinfo=timezone.utc)

    def test_rfc822_two_digit_year_rejected(self):
        with pytest.raises(InvalidValueError):
            validate_rfc822_date("20 Feb 24 15:15:15 GMT")

    def test_feed_date_accepts_both_forms(self):
        assert parse_feed_date("Tue, 20 Feb 2024 15:15:15 +0000") == parse_feed_date(
            "2024-02-20T15:15:15Z"
        )

    def test_feed_date_rejects_garbage(self):
        with pytest.raises(InvalidValueError):
            parse_feed_date("yesterday")

    def test_format_rfc822_from_rfc3339(self):
        assert format_rfc822("2024-02-20T15:15:15Z") == "Tue, 20 Feb 2024 15:15:15 +0000"


class TestColorsSizesHandles:
    @pytest.mark.parametrize("color", ["#FF5733", "#f53", "rgb(255, 0, 10)", "rgb(0,0,0)"])
    def test_valid_colors(self, color):
        assert validate_color(color) == color

    @pytest.mark.parametrize("color", ["#12345", "FF5733", "#GGGGGG", "rgb(256, 0, 0)", "red"])
    def test_invalid_colors(self, color):
        with pytest.raises(InvalidValueError):
            validate_color(color)

    def test_image_size(self):
        assert validate_image_size("512x512") == "512x512"
        with pytest.raises(InvalidValueError):
            validate_image_size("512")

    def test_language_code(self):
        assert validate_language_code("fr") == "fr"
        with pytest.raises(InvalidValueError):
            validate_language_code("EN")
        with pytest.raises(InvalidValueError):
            validate_language_code("xx")

    def test_twitter_handle_normalised(self):
        assert validate_twitter_handle("jane_doe") == "@jane_doe"
        assert validate_twitter_handle("@jane") == "@jane"

    @pytest.mark.parametrize("handle", ["", "@", "way_too_long_handle", "bad-handle"])
    def test_twitter_handle_rejected(self, handle):
        with pytest.raises(InvalidValueError):
            validate_twitter_handle(handle)


class TestSanitizePath:
    def test_safe_path_unchanged(self):
        assert sanitize_path("posts/2024/hello.md") == "posts/2024/hello.md"

    def test_traversal_raises(self):
        with pytest.raises(SecurityError):
            sanitize_path("../../etc/passwd")

    def test_inner_traversal_raises(self):
        with pytest.raises(SecurityError):
            sanitize_path("posts/../../secret.md")

    def test_absolute_raises(self):
        with pytest.raises(SecurityError):
            sanitize_path("/etc/passwd")

    def test_drive_letter_raises(self):
        with pytest.raises(SecurityError):
            sanitize_path("C:\\Windows\\system.ini")

    def test_unc_raises(self):
        with pytest.raises(SecurityError):
            sanitize_path("\\\\server\\share\\file.md")

    def test_nul_raises(self):
        with pytest.raises(SecurityError):
            sanitize_path("posts/hello\x00.md")

    def test_backslashes_normalised(self):
        assert sanitize_path("posts\\hello.md") == "posts/hello.md"

    def test_dot_and_empty_components_dropped(self):
        assert sanitize_path("./posts//hello.md") == "posts/hello.md"

    def test_empty_rejected(self):
        with pytest.raises(InvalidValueError):
            sanitize_path("")

    def test_security_error_is_data_error(self):
        with pytest.raises(DataError) as exc_info:
            sanitize_path("../x")
        assert exc_info.value.kind == "security"
