import re
from datetime import date

from draftmcp.jekyll.formatting import build_front_matter, render_draft, sanitize_filename
from draftmcp.jekyll.models import JekyllDraft

_DAY = date(2024, 5, 6)


def test_front_matter_minimal_record() -> None:
    draft = JekyllDraft(title="Hello World", path="/site")
    assert build_front_matter(draft, today=_DAY) == (
        '---\nlayout: post\ntitle: "Hello World"\ndate: 2024-05-06\n---'
    )


def test_front_matter_single_category_and_tag_are_double_bracketed() -> None:
    draft = JekyllDraft(title="T", path="/site", categories=["go"], tags=["mcp"])
    lines = build_front_matter(draft, today=_DAY).split("\n")
    assert 'categories: [["go"]]' in lines
    assert 'tags: [["mcp"]]' in lines


def test_front_matter_full_record_field_order() -> None:
    draft = JekyllDraft(
        title="Post",
        path="/site",
        categories=["go", "tools"],
        tags=["mcp", "jekyll", "drafts"],
        series="Building Things",
        summary="A short summary",
    )
    assert build_front_matter(draft, today=_DAY) == "\n".join(
        [
            "---",
            "layout: post",
            'title: "Post"',
            "date: 2024-05-06",
            'categories: [["go", "tools"]]',
            'tags: [["mcp", "jekyll", "drafts"]]',
            "series: Building Things",
            'summary: "A short summary"',
            "---",
        ]
    )


def test_front_matter_quotes_title_without_escaping() -> None:
    draft = JekyllDraft(title='Say "hi"', path="/site")
    assert 'title: "Say "hi""' in build_front_matter(draft, today=_DAY)


def test_front_matter_defaults_to_current_date() -> None:
    draft = JekyllDraft(title="T", path="/site")
    before = date.today()
    rendered = build_front_matter(draft)
    after = date.today()
    stamps = {before.strftime("%Y-%m-%d"), after.strftime("%Y-%m-%d")}
    assert any(f"\ndate: {stamp}\n" in rendered for stamp in stamps)


def test_render_draft_appends_body_after_newline() -> None:
    draft = JekyllDraft(title="T", path="/site", body="Body text\n")
    rendered = render_draft(draft, today=_DAY)
    assert rendered.endswith("\n---\nBody text\n")


def test_sanitize_filename_maps_spaces_and_drops_punctuation() -> None:
    assert sanitize_filename("Hello, World! 2024") == "Hello-World-2024"
    assert sanitize_filename("  double  space ") == "--double--space-"
    assert sanitize_filename("café über_naïve") == "caf-bernave"


def test_sanitize_filename_empty_for_punctuation_only() -> None:
    assert sanitize_filename("") == ""
    assert sanitize_filename("?!.,/\\") == ""


def test_sanitize_filename_output_alphabet() -> None:
    samples = [
        "Mixed CASE and 123 digits",
        "tabs\tand\nnewlines",
        "emoji 🚀 launch",
        "full-width １２３ digits",
        "../../etc/passwd",
    ]
    for title in samples:
        result = sanitize_filename(title)
        assert re.fullmatch(r"[A-Za-z0-9-]*", result)
        assert result.count("-") == title.count(" ")
        assert sanitize_filename(title) == result
