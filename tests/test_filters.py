import json
from datetime import date, datetime, timezone

from typed_notion.filters import (
    checkbox,
    formula,
    multi_select,
    number,
    people,
    query,
    relation,
    rollup,
    select,
    status,
    text,
)
from typed_notion.filters import date as date_filter
from typed_notion.ids import page_id_from, user_id_from


class TestConditions:
    def test_text(self):
        assert text.equals("a") == {"equals": "a"}
        assert text.does_not_equal("a") == {"does_not_equal": "a"}
        assert text.contains("a") == {"contains": "a"}
        assert text.does_not_contain("a") == {"does_not_contain": "a"}
        assert text.starts_with("a") == {"starts_with": "a"}
        assert text.ends_with("a") == {"ends_with": "a"}

    def test_number(self):
        assert number.equals(1) == {"equals": 1}
        assert number.does_not_equal(1) == {"does_not_equal": 1}
        assert number.greater_than(5) == {"greater_than": 5}
        assert number.less_than(5) == {"less_than": 5}
        assert number.greater_than_or_equal_to(5) == {"greater_than_or_equal_to": 5}
        assert number.less_than_or_equal_to(2.5) == {"less_than_or_equal_to": 2.5}

    def test_checkbox(self):
        assert checkbox.equals(True) == {"equals": True}
        assert checkbox.does_not_equal(False) == {"does_not_equal": False}

    def test_select_and_status(self):
        assert select.equals("a") == {"equals": "a"}
        assert select.does_not_equal("a") == {"does_not_equal": "a"}
        assert status.equals("未着手") == {"equals": "未着手"}
        assert status.does_not_equal("Done") == {"does_not_equal": "Done"}

    def test_contains_families(self):
        user_id = user_id_from("b98a5d4e-7d88-422b-8e58-dcf58d45b7f0")
        page_id = page_id_from("e3389b1b7e7841c9835155b8f4757dbe")
        assert multi_select.contains("a") == {"contains": "a"}
        assert multi_select.does_not_contain("a") == {"does_not_contain": "a"}
        assert people.contains(user_id) == {"contains": "b98a5d4e7d88422b8e58dcf58d45b7f0"}
        assert people.does_not_contain(user_id) == {"does_not_contain": user_id}
        assert relation.contains(page_id) == {"contains": page_id}
        assert relation.does_not_contain(page_id) == {"does_not_contain": page_id}

    def test_existence_available_everywhere(self):
        for module in (
            text, number, checkbox, select, status, multi_select,
            people, relation, date_filter, formula, rollup,
        ):
            assert module.is_empty() == {"is_empty": True}
            assert module.is_not_empty() == {"is_not_empty": True}

    def test_existence_returns_fresh_dicts(self):
        first = text.is_empty()
        first["is_empty"] = False
        assert text.is_empty() == {"is_empty": True}


class TestDateConditions:
    def test_absolute_datetime(self):
        moment = datetime(2024, 4, 29, tzinfo=timezone.utc)
        assert date_filter.before(moment) == {"before": "2024-04-29T00:00:00.000Z"}
        assert date_filter.after(moment) == {"after": "2024-04-29T00:00:00.000Z"}
        assert date_filter.equals(moment) == {"equals": "2024-04-29T00:00:00.000Z"}
        assert date_filter.on_or_before(moment) == {"on_or_before": "2024-04-29T00:00:00.000Z"}
        assert date_filter.on_or_after(moment) == {"on_or_after": "2024-04-29T00:00:00.000Z"}

    def test_absolute_date(self):
        assert date_filter.on_or_after(date(2024, 4, 29)) == {"on_or_after": "2024-04-29"}

    def test_relative(self):
        assert date_filter.this_week() == {"this_week": {}}
        assert date_filter.past_week() == {"past_week": {}}
        assert date_filter.past_month() == {"past_month": {}}
        assert date_filter.past_year() == {"past_year": {}}
        assert date_filter.next_week() == {"next_week": {}}
        assert date_filter.next_month() == {"next_month": {}}
        assert date_filter.next_year() == {"next_year": {}}


class TestFormulaAndRollup:
    def test_formula(self):
        assert formula.string(text.contains("x")) == {"string": {"contains": "x"}}
        assert formula.checkbox(checkbox.equals(True)) == {"checkbox": {"equals": True}}
        assert formula.number(number.equals(3)) == {"number": {"equals": 3}}
        assert formula.date(date_filter.past_week()) == {"date": {"past_week": {}}}

    def test_rollup_array(self):
        assert rollup.any_(rollup.subfilter_rich_text(text.contains("a"))) == {
            "any": {"rich_text": {"contains": "a"}}
        }
        assert rollup.none(rollup.subfilter_number(number.equals(0))) == {
            "none": {"number": {"equals": 0}}
        }
        assert rollup.every(rollup.subfilter_status(status.equals("Done"))) == {
            "every": {"status": {"equals": "Done"}}
        }

    def test_rollup_subfilters(self):
        assert rollup.subfilter_checkbox(checkbox.equals(True)) == {"checkbox": {"equals": True}}
        assert rollup.subfilter_select(select.equals("a")) == {"select": {"equals": "a"}}
        assert rollup.subfilter_multi_select(multi_select.contains("a")) == {
            "multi_select": {"contains": "a"}
        }
        assert rollup.subfilter_relation(relation.is_empty()) == {"relation": {"is_empty": True}}
        assert rollup.subfilter_date(date_filter.next_year()) == {"date": {"next_year": {}}}
        assert rollup.subfilter_people(people.is_not_empty()) == {
            "people": {"is_not_empty": True}
        }
        assert rollup.subfilter_files(rollup.is_empty()) == {"files": {"is_empty": True}}

    def test_rollup_scalar(self):
        assert rollup.date(date_filter.this_week()) == {"date": {"this_week": {}}}
        assert rollup.number(number.greater_than(1)) == {"number": {"greater_than": 1}}


class TestPropertyFilters:
    def test_number_property(self):
        assert query.property_number("Age", number.greater_than(5)) == {
            "type": "number",
            "property": "Age",
            "number": {"greater_than": 5},
        }

    def test_every_property_type_uses_its_own_key(self):
        cases = [
            (query.property_title, "title", text.equals("a")),
            (query.property_rich_text, "rich_text", text.equals("a")),
            (query.property_number, "number", number.equals(1)),
            (query.property_checkbox, "checkbox", checkbox.equals(True)),
            (query.property_select, "select", select.equals("a")),
            (query.property_multi_select, "multi_select", multi_select.contains("a")),
            (query.property_status, "status", status.equals("a")),
            (query.property_date, "date", date_filter.past_week()),
            (query.property_people, "people", people.is_empty()),
            (query.property_files, "files", rollup.is_not_empty()),
            (query.property_url, "url", text.contains("https")),
            (query.property_email, "email", text.ends_with("@example.com")),
            (query.property_phone_number, "phone_number", text.starts_with("+81")),
            (query.property_relation, "relation", relation.is_not_empty()),
            (query.property_created_by, "created_by", people.is_not_empty()),
            (query.property_created_time, "created_time", date_filter.past_year()),
            (query.property_last_edited_by, "last_edited_by", people.is_empty()),
            (query.property_last_edited_time, "last_edited_time", date_filter.this_week()),
            (query.property_formula, "formula", formula.number(number.equals(1))),
            (query.property_unique_id, "unique_id", number.greater_than(10)),
            (query.property_rollup, "rollup", rollup.number(number.equals(1))),
        ]
        for build, prop_type, condition in cases:
            assert build("P", condition) == {"property": "P", "type": prop_type, prop_type: condition}


class TestTimestampAndCompound:
    def test_created_time(self):
        moment = datetime(2024, 4, 29, tzinfo=timezone.utc)
        assert query.created_time(date_filter.before(moment)) == {
            "timestamp": "created_time",
            "type": "created_time",
            "created_time": {"before": "2024-04-29T00:00:00.000Z"},
        }

    def test_last_edited_time(self):
        assert query.last_edited_time(date_filter.past_week()) == {
            "timestamp": "last_edited_time",
            "type": "last_edited_time",
            "last_edited_time": {"past_week": {}},
        }

    def test_or_and_nesting(self):
        leaf_a = query.property_checkbox("Done", checkbox.equals(True))
        leaf_b = query.property_number("Age", number.less_than(3))
        nested = query.or_([leaf_a, query.and_([leaf_b, query.created_time(date_filter.past_week())])])
        assert nested == {
            "or": [
                leaf_a,
                {"and": [leaf_b, query.created_time(date_filter.past_week())]},
            ]
        }

    def test_empty_groups_allowed(self):
        assert query.or_([]) == {"or": []}
        assert query.and_([]) == {"and": []}

    def test_order_preserved(self):
        leaves = [query.property_title("Name", text.equals(str(i))) for i in range(5)]
        assert query.and_(leaves)["and"] == leaves

    def test_serializable(self):
        built = query.and_([
            query.property_rollup("R", rollup.any_(rollup.subfilter_files(rollup.is_empty()))),
            query.last_edited_time(date_filter.on_or_after(date(2024, 1, 1))),
        ])
        assert json.loads(json.dumps(built)) == built
