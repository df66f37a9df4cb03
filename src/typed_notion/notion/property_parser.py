"""Convert Notion page and rich-text JSON into the domain model.

Each converter switches on the wire ``type`` tag. Wire types that are not
modeled fall through to an explicit ``Unsupported*`` result instead of
raising, since Notion adds new types without notice. Malformed identifiers
do raise (``InvalidIdentifier``); a malformed link only drops that link.
"""

import logging

from typed_notion.errors import MalformedUrl
from typed_notion.ids import (
    database_id_from,
    page_id_from,
    property_id_from,
    select_option_id_from,
    user_id_from,
)
from typed_notion.notion.models import (
    Annotations,
    CheckboxValue,
    DateMention,
    DateRange,
    DateValue,
    DatabaseMention,
    EmailValue,
    EquationContent,
    LinkPreviewMention,
    Mention,
    MentionContent,
    NumberValue,
    Page,
    PageMention,
    PageProperty,
    PhoneNumberValue,
    PropertyValue,
    RelationValue,
    RichText,
    RichTextItem,
    RichTextType,
    RichTextValue,
    SelectOption,
    SelectType,
    SelectValue,
    TemplateMention,
    TextContent,
    UnsupportedContent,
    UnsupportedMention,
    UnsupportedValue,
    UrlType,
    UrlValue,
    UserMention,
)
from typed_notion.notion.raw_types import (
    RawAnnotations,
    RawDate,
    RawMention,
    RawPage,
    RawPropertyValue,
    RawRichTextItem,
    RawSelectOption,
)
from typed_notion.utils.timestamps import parse_timestamp
from typed_notion.utils.url import parse_absolute_url, resolve_url

logger = logging.getLogger(__name__)


def classify_url(raw: str | None) -> UrlValue:
    """Classify a URL field as empty, valid or invalid without ever failing."""
    if raw is None:
        return UrlValue(UrlType.EMPTY)
    url = parse_absolute_url(raw)
    if url is None:
        return UrlValue(UrlType.INVALID, None, raw)
    return UrlValue(UrlType.VALID, url, raw)


def _resolve_or_none(raw: str | None, field_name: str):
    if raw is None:
        return None
    try:
        return resolve_url(raw)
    except MalformedUrl:
        logger.warning("Dropping malformed %s: %r", field_name, raw)
        return None


def raw_annotations_to_annotations(raw: RawAnnotations) -> Annotations:
    return Annotations(
        bold=raw.get("bold", False),
        italic=raw.get("italic", False),
        strikethrough=raw.get("strikethrough", False),
        underline=raw.get("underline", False),
        code=raw.get("code", False),
        color=raw.get("color", "default"),
    )


def raw_date_to_date_range(raw: RawDate) -> DateRange:
    end = raw.get("end")
    return DateRange(
        start=parse_timestamp(raw["start"]),
        end=parse_timestamp(end) if end else None,
    )


def raw_mention_to_mention(raw: RawMention) -> Mention:
    """Convert the ``mention`` payload of a rich-text item."""
    mention_type = raw.get("type")

    if mention_type == "user":
        return UserMention(user_id_from(raw["user"]["id"]))

    if mention_type == "date":
        return DateMention(raw_date_to_date_range(raw["date"]))

    if mention_type == "link_preview":
        raw_url = raw["link_preview"]["url"]
        return LinkPreviewMention(_resolve_or_none(raw_url, "link preview"), raw_url)

    if mention_type == "template_mention":
        template = raw["template_mention"]
        kind = template["type"]
        return TemplateMention(kind, template[kind])

    if mention_type == "page":
        return PageMention(page_id_from(raw["page"]["id"]))

    if mention_type == "database":
        return DatabaseMention(database_id_from(raw["database"]["id"]))

    logger.debug("Unsupported Notion mention type: %s", mention_type)
    return UnsupportedMention()


def raw_rich_text_to_rich_text(raw: RawRichTextItem) -> RichTextItem:
    """Convert one rich-text item. Relative hrefs are made absolute."""
    item_type = raw.get("type")

    if item_type == "text":
        content = TextContent()
    elif item_type == "mention":
        content = MentionContent(raw_mention_to_mention(raw["mention"]))
    elif item_type == "equation":
        content = EquationContent(raw["equation"]["expression"])
    else:
        logger.debug("Unsupported Notion rich text type: %s", item_type)
        content = UnsupportedContent()

    return RichTextItem(
        annotations=raw_annotations_to_annotations(raw.get("annotations", {})),
        plain_text=raw.get("plain_text", ""),
        href=_resolve_or_none(raw.get("href"), "href"),
        content=content,
    )


def raw_rich_text_list(raw: list[RawRichTextItem] | None) -> RichText:
    return tuple(raw_rich_text_to_rich_text(item) for item in raw or [])


def _select_options(raw: list[RawSelectOption]) -> tuple[SelectOption, ...]:
    return tuple(
        SelectOption(
            id=select_option_id_from(option["id"]),
            name=option["name"],
            color=option["color"],
        )
        for option in raw
    )


def raw_property_value_to_property_value(raw: RawPropertyValue) -> PropertyValue:
    """Convert one entry of a page's ``properties`` map."""
    prop_type = raw.get("type")

    if prop_type == "number":
        return NumberValue(raw["number"])

    if prop_type == "url":
        return classify_url(raw["url"])

    if prop_type == "select":
        selected = raw["select"]
        return SelectValue(
            _select_options([selected] if selected is not None else []),
            SelectType.SELECT,
        )

    if prop_type == "multi_select":
        return SelectValue(_select_options(raw["multi_select"]), SelectType.MULTI_SELECT)

    if prop_type == "status":
        selected = raw["status"]
        return SelectValue(
            _select_options([selected] if selected is not None else []),
            SelectType.STATUS,
        )

    if prop_type == "date":
        date_obj = raw["date"]
        return DateValue(raw_date_to_date_range(date_obj) if date_obj is not None else None)

    if prop_type == "email":
        return EmailValue(raw["email"])

    if prop_type == "phone_number":
        return PhoneNumberValue(raw["phone_number"])

    if prop_type == "checkbox":
        return CheckboxValue(raw["checkbox"])

    if prop_type == "title":
        return RichTextValue(raw_rich_text_list(raw["title"]), RichTextType.TITLE)

    if prop_type == "rich_text":
        return RichTextValue(raw_rich_text_list(raw["rich_text"]), RichTextType.RICH_TEXT)

    if prop_type == "relation":
        return RelationValue(
            ids=tuple(page_id_from(related["id"]) for related in raw["relation"]),
            has_more=raw.get("has_more", False),
        )

    logger.debug("Unsupported Notion property type: %s", prop_type)
    return UnsupportedValue()


def raw_page_to_page(raw: RawPage) -> Page:
    """Convert a page object. Properties are keyed by property ID."""
    properties = {
        property_id_from(value["id"]): PageProperty(
            name=name,
            value=raw_property_value_to_property_value(value),
        )
        for name, value in raw.get("properties", {}).items()
    }
    return Page(
        id=page_id_from(raw["id"]),
        created_time=parse_timestamp(raw["created_time"]),
        last_edited_time=parse_timestamp(raw["last_edited_time"]),
        created_by_user_id=user_id_from(raw["created_by"]["id"]),
        last_edited_by_user_id=user_id_from(raw["last_edited_by"]["id"]),
        in_trash=raw.get("in_trash", raw.get("archived", False)),
        properties=properties,
        url=classify_url(raw.get("url")),
        public_url=classify_url(raw.get("public_url")),
    )
