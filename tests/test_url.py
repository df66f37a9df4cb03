from datetime import date, datetime, timedelta, timezone

import httpx
import pytest

from typed_notion.errors import MalformedUrl
from typed_notion.utils.timestamps import format_timestamp, parse_timestamp
from typed_notion.utils.url import parse_absolute_url, resolve_url


class TestParseAbsoluteUrl:
    def test_absolute(self):
        assert parse_absolute_url("https://example.com/a") == httpx.URL("https://example.com/a")

    def test_empty_path_becomes_slash(self):
        assert str(parse_absolute_url("https://example.com")) == "https://example.com/"
        assert str(parse_absolute_url("https://example.com?a=1")) == "https://example.com/?a=1"

    def test_escapes_kept(self):
        assert str(parse_absolute_url("https://example.com/pa%20th")) == "https://example.com/pa%20th"

    def test_web_url_without_host_is_none(self):
        assert parse_absolute_url("http://") is None
        assert parse_absolute_url("https:///path") is None

    @pytest.mark.parametrize("raw", ["https://exa mple.com", "https://exa<mple.com", "https://exa^mple.com", "https://a|b.com"])
    def test_forbidden_host_character_is_none(self, raw):
        assert parse_absolute_url(raw) is None

    def test_hostless_scheme_kept(self):
        assert str(parse_absolute_url("mailto:a@example.com")) == "mailto:a@example.com"

    def test_relative_is_none(self):
        assert parse_absolute_url("/22961d0ee2924074a22ce37f405b941a") is None

    def test_garbage_is_none(self):
        assert parse_absolute_url("不正なURL") is None

    def test_control_character_is_none(self):
        assert parse_absolute_url("https://example.com/\x00") is None


class TestResolveUrl:
    def test_absolute_kept(self):
        url = resolve_url("https://www.notion.so/22961d0ee2924074a22ce37f405b941a")
        assert url.host == "www.notion.so"
        assert url.path == "/22961d0ee2924074a22ce37f405b941a"

    def test_relative_resolved_against_notion(self):
        url = resolve_url("/22961d0ee2924074a22ce37f405b941a")
        assert url.scheme == "https"
        assert url.host == "notion.so"
        assert url.path == "/22961d0ee2924074a22ce37f405b941a"

    def test_custom_base(self):
        url = resolve_url("/x", base=httpx.URL("https://example.com"))
        assert url == httpx.URL("https://example.com/x")

    def test_web_url_without_host_raises(self):
        with pytest.raises(MalformedUrl):
            resolve_url("http://")

    def test_scheme_relative_with_bad_host_raises(self):
        with pytest.raises(MalformedUrl):
            resolve_url("//exa mple.com/x")

    def test_unparseable_raises(self):
        with pytest.raises(MalformedUrl) as excinfo:
            resolve_url("https://example.com/\x00")
        assert excinfo.value.raw == "https://example.com/\x00"


class TestTimestamps:
    def test_parse_zulu(self):
        assert parse_timestamp("2024-04-27T12:18:00.000Z") == datetime(
            2024, 4, 27, 12, 18, tzinfo=timezone.utc
        )

    def test_parse_offset(self):
        parsed = parse_timestamp("2024-04-29T12:00:00.000+09:00")
        assert parsed == datetime(2024, 4, 29, 3, 0, tzinfo=timezone.utc)

    def test_parse_date_only_is_utc_midnight(self):
        assert parse_timestamp("2024-05-01") == datetime(2024, 5, 1, tzinfo=timezone.utc)

    def test_format_utc(self):
        value = datetime(2024, 4, 29, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-04-29T00:00:00.000Z"

    def test_format_keeps_milliseconds(self):
        value = datetime(2024, 4, 29, 1, 2, 3, 456789, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-04-29T01:02:03.456Z"

    def test_format_converts_to_utc(self):
        value = datetime(2024, 4, 29, 9, 0, tzinfo=timezone(timedelta(hours=9)))
        assert format_timestamp(value) == "2024-04-29T00:00:00.000Z"

    def test_format_naive_taken_as_utc(self):
        assert format_timestamp(datetime(2024, 4, 29)) == "2024-04-29T00:00:00.000Z"

    def test_format_date(self):
        assert format_timestamp(date(2024, 4, 29)) == "2024-04-29"
