from datetime import date, datetime, timezone

import httpx

from typed_notion.ids import database_id_from, page_id_from, select_option_id_from, user_id_from
from typed_notion.notion import property_update as update

USER = user_id_from("b98a5d4e7d88422b8e58dcf58d45b7f0")
PAGE = page_id_from("e3389b1b7e7841c9835155b8f4757dbe")


class TestScalarUpdates:
    def test_number(self):
        assert update.number(42) == {"type": "number", "number": 42}

    def test_number_none_is_explicit_null(self):
        result = update.number(None)
        assert "number" in result
        assert result == {"type": "number", "number": None}

    def test_url_from_string(self):
        assert update.url("https://example.com") == {"type": "url", "url": "https://example.com"}

    def test_url_from_httpx_url(self):
        result = update.url(httpx.URL("https://narumincho.com/a"))
        assert result == {"type": "url", "url": "https://narumincho.com/a"}

    def test_url_none(self):
        assert update.url(None) == {"type": "url", "url": None}

    def test_email_and_phone(self):
        assert update.email("a@example.com") == {"type": "email", "email": "a@example.com"}
        assert update.email(None) == {"type": "email", "email": None}
        assert update.phone_number("+81") == {"type": "phone_number", "phone_number": "+81"}
        assert update.phone_number(None) == {"type": "phone_number", "phone_number": None}

    def test_checkbox(self):
        assert update.checkbox(False) == {"type": "checkbox", "checkbox": False}


class TestDateUpdate:
    def test_single_date(self):
        assert update.date(date(2024, 4, 29)) == {
            "type": "date",
            "date": {"start": "2024-04-29", "end": None},
        }

    def test_range(self):
        start = datetime(2024, 4, 29, 3, tzinfo=timezone.utc)
        end = datetime(2024, 4, 30, 3, tzinfo=timezone.utc)
        assert update.date(start, end) == {
            "type": "date",
            "date": {"start": "2024-04-29T03:00:00.000Z", "end": "2024-04-30T03:00:00.000Z"},
        }

    def test_clear(self):
        assert update.date(None) == {"type": "date", "date": None}


class TestOptionUpdates:
    def test_select_by_name(self):
        assert update.select(update.option_by_name("A")) == {"type": "select", "select": {"name": "A"}}

    def test_select_by_name_with_color(self):
        assert update.option_by_name("A", color="green") == {"name": "A", "color": "green"}

    def test_select_by_id(self):
        option_id = select_option_id_from("392f963c-2cc4-4009-a241-21b704c04042")
        assert update.select(update.option_by_id(option_id)) == {
            "type": "select",
            "select": {"id": "392f963c2cc44009a24121b704c04042"},
        }

    def test_select_clear(self):
        assert update.select(None) == {"type": "select", "select": None}

    def test_status(self):
        assert update.status(update.option_by_name("未着手")) == {
            "type": "status",
            "status": {"name": "未着手"},
        }
        assert update.status(None) == {"type": "status", "status": None}

    def test_multi_select(self):
        result = update.multi_select([update.option_by_name("a"), update.option_by_name("b")])
        assert result == {"type": "multi_select", "multi_select": [{"name": "a"}, {"name": "b"}]}

    def test_multi_select_empty_clears(self):
        assert update.multi_select([]) == {"type": "multi_select", "multi_select": []}


class TestReferenceUpdates:
    def test_people(self):
        assert update.people([USER]) == {"type": "people", "people": [{"id": USER}]}

    def test_relation_keeps_order(self):
        other = page_id_from("0538d3d5058a484bb4db1a911fffaec9")
        assert update.relation([other, PAGE]) == {
            "type": "relation",
            "relation": [{"id": other}, {"id": PAGE}],
        }

    def test_files(self):
        result = update.files([
            update.external_file("paper.pdf", "https://example.com/paper.pdf"),
            update.hosted_file("img.png", "https://prod-files-secure.s3.amazonaws.com/img.png"),
        ])
        assert result == {
            "type": "files",
            "files": [
                {"type": "external", "name": "paper.pdf", "external": {"url": "https://example.com/paper.pdf"}},
                {
                    "type": "file",
                    "name": "img.png",
                    "file": {"url": "https://prod-files-secure.s3.amazonaws.com/img.png"},
                },
            ],
        }


class TestRichTextUpdates:
    def test_title_with_text_and_mention(self):
        result = update.title([update.text("A "), update.mention_user(USER)])
        assert result == {
            "type": "title",
            "title": [
                {"type": "text", "text": {"content": "A "}},
                {"type": "mention", "mention": {"user": {"id": USER}}},
            ],
        }

    def test_rich_text_link_and_annotations(self):
        item = update.text("site", link="https://example.com", annotations={"bold": True})
        assert update.rich_text([item]) == {
            "type": "rich_text",
            "rich_text": [
                {
                    "type": "text",
                    "text": {"content": "site", "link": {"url": "https://example.com"}},
                    "annotations": {"bold": True},
                }
            ],
        }

    def test_mentions(self):
        database_id = database_id_from("a1cb2e5ca6f94399a835fdcd39a828cb")
        assert update.mention_page(PAGE)["mention"] == {"page": {"id": PAGE}}
        assert update.mention_database(database_id)["mention"] == {"database": {"id": database_id}}
        assert update.mention_date(date(2024, 5, 1))["mention"] == {
            "date": {"start": "2024-05-01", "end": None}
        }
        assert update.mention_template_date("today")["mention"] == {
            "template_mention": {"type": "template_mention_date", "template_mention_date": "today"}
        }
        assert update.mention_template_user()["mention"] == {
            "template_mention": {"type": "template_mention_user", "template_mention_user": "me"}
        }

    def test_equation(self):
        assert update.equation("e=mc^2") == {"type": "equation", "equation": {"expression": "e=mc^2"}}


class TestIconAndCover:
    def test_emoji_icon(self):
        assert update.emoji_icon("💡") == {"type": "emoji", "emoji": "💡"}

    def test_external_icon_and_cover(self):
        assert update.external_icon("https://example.com/i.png") == {
            "type": "external",
            "external": {"url": "https://example.com/i.png"},
        }
        assert update.external_cover(httpx.URL("https://example.com/c.png")) == {
            "type": "external",
            "external": {"url": "https://example.com/c.png"},
        }
