"""
Tests for text/gemini parser and formatter.
"""
from typing import List

import pytest
from hypothesis import given, strategies as st

from smallweb.text import (
    HeadingLine,
    LineKind,
    Link,
    ListItem,
    Mode,
    QuoteLine,
    TextLine,
    extract_title,
    format_gemtext,
    parse_gemtext,
    step,
)
from smallweb.url import LinkScheme

BASE_URL = "gemini://example.com/dir/page.gmi"

gemtext_lines = st.lists(
    st.one_of(
        st.text(alphabet=st.characters(exclude_characters="\n")),
        st.text(alphabet=st.characters(exclude_characters="\n")).map(lambda line: line + "\r"),
        st.sampled_from(
            ["```", "``` alt", "=>", "=> ", "# ", "#####", "* ", ">", "=> ://x", "a\r", "x\r\r"]
        ),
    )
)


@given(text=st.text())
def test_parsing_does_not_raise_errors(text: str):
    """Parsing text should not fail spectacularly."""
    parse_gemtext(text)
    parse_gemtext(text, base_url=BASE_URL)


@given(text=st.text())
def test_parsing_is_deterministic(text: str):
    """No state survives between calls."""
    assert parse_gemtext(text, base_url=BASE_URL) == parse_gemtext(text, base_url=BASE_URL)


@given(lines=gemtext_lines)
def test_toggle_lines_are_never_emitted(lines: List[str]):
    """Toggle lines only switch modes."""
    for element in parse_gemtext("\n".join(lines)):
        if isinstance(element, TextLine):
            assert not element.raw_content.strip().startswith("```")
        assert element.kind in LineKind


@given(lines=gemtext_lines)
def test_formatting_is_canonical(lines: List[str]):
    """Formatting parsed text gives text that formats to itself once parsed again."""
    formatted = format_gemtext(parse_gemtext("\n".join(lines), base_url=BASE_URL))
    assert formatted == format_gemtext(parse_gemtext(formatted, base_url=BASE_URL))


def test_empty_contents():
    """
    Parsing and formatting empty text returns empty text.
    """
    assert "" == format_gemtext(parse_gemtext(""))


def test_blank_lines_are_preserved():
    assert parse_gemtext("one\n\ntwo\n") == [
        TextLine("one"),
        TextLine(""),
        TextLine("two"),
    ]


def test_trailing_newline_does_not_add_a_line():
    assert len(parse_gemtext("=> gemini://example.com/foo Example Page\n")) == 1


def test_crlf_line_endings():
    assert parse_gemtext("# Title\r\nText\r\n") == [HeadingLine("# Title", 1), TextLine("Text")]


def test_absolute_link():
    elements = parse_gemtext(
        "=> gemini://example.com/foo Example Page\n", base_url="gemini://example.com/"
    )
    assert elements == [
        Link(
            "=> gemini://example.com/foo Example Page",
            "gemini://example.com/foo",
            "Example Page",
            LinkScheme.GEMINI,
        )
    ]


@pytest.mark.parametrize(
    "line, base_url, target",
    [
        ("=> ./bar.gmi", "gemini://example.com/dir/page.gmi", "gemini://example.com/dir/bar.gmi"),
        ("=> ../up.gmi", "gemini://example.com/a/b/page.gmi", "gemini://example.com/a/up.gmi"),
        ("=> /root.gmi", "gemini://example.com/a/b/page.gmi", "gemini://example.com/root.gmi"),
        ("=>sibling.gmi", "gemini://example.com/a/", "gemini://example.com/a/sibling.gmi"),
        ("=> ://example.org/", "gemini://example.com/", "gemini://example.org/"),
        ("=> https://example.org/", "gemini://example.com/", "https://example.org/"),
        ("=> mailto:ada@example.org", "gemini://example.com/", "mailto:ada@example.org"),
    ],
)
def test_link_targets_are_resolved(line: str, base_url: str, target: str):
    [link] = parse_gemtext(line, base_url=base_url)
    assert isinstance(link, Link)
    assert link.target == target


def test_relative_link_without_base_url_is_left_untouched():
    [link] = parse_gemtext("=> ../up.gmi Up")
    assert link == Link("=> ../up.gmi Up", "../up.gmi", "Up", LinkScheme.RELATIVE)


def test_link_label():
    [link] = parse_gemtext("  =>\tdocs/   The\t docs  ", base_url="gemini://example.com/")
    assert link.label == "The docs"

    [link] = parse_gemtext("=> docs/", base_url="gemini://example.com/")
    assert link.label == link.target == "gemini://example.com/docs/"


def test_link_without_target():
    [link] = parse_gemtext("=>   ", base_url=BASE_URL)
    assert link == Link("=>   ", None, None, None)


@pytest.mark.parametrize(
    "target, scheme",
    [
        ("gopher://floodgap.com/", LinkScheme.GOPHER),
        ("finger://ada@example.org", LinkScheme.FINGER),
        ("http://example.org/", LinkScheme.HTTP),
        ("https://example.org/", LinkScheme.HTTPS),
        ("xmpp:ada@example.org", LinkScheme.XMPP),
        ("irc:irc.libera.chat", LinkScheme.IRC),
        ("spartan://mozz.us/", LinkScheme.UNKNOWN),
    ],
)
def test_link_scheme(target: str, scheme: LinkScheme):
    [link] = parse_gemtext(f"=> {target}", base_url=BASE_URL)
    assert link.scheme is scheme


@pytest.mark.parametrize(
    "line, level, text",
    [
        ("# One", 1, "One"),
        ("##Two", 2, "Two"),
        ("### Three", 3, "Three"),
        ("##### Clamped", 3, "Clamped"),
        ("  #  Indented  ", 1, "Indented"),
    ],
)
def test_headings(line: str, level: int, text: str):
    [heading] = parse_gemtext(line)
    assert heading == HeadingLine(line, level)
    assert heading.text == text


@pytest.mark.parametrize("line", ["#", "###", "#####", "   ##   "])
def test_markers_without_content_are_text(line: str):
    assert parse_gemtext(line) == [TextLine(line)]


def test_list_items_need_whitespace_after_marker():
    assert parse_gemtext("* Item\n*Not an item\n") == [
        ListItem("* Item"),
        TextLine("*Not an item"),
    ]
    assert ListItem("*\tTabbed").text == "Tabbed"


def test_quotes():
    assert parse_gemtext(">Quoted\n> Also quoted\n") == [
        QuoteLine(">Quoted"),
        QuoteLine("> Also quoted"),
    ]
    assert QuoteLine(">Quoted").text == "Quoted"


def test_preformatted_block():
    text = "Before\n```python\n  def f():\n\n=> not a link\n```\nAfter\n"
    assert parse_gemtext(text) == [
        TextLine("Before"),
        TextLine("  def f():", preformatted=True),
        TextLine("", preformatted=True),
        TextLine("=> not a link", preformatted=True),
        TextLine("After"),
    ]


def test_unterminated_preformatted_block():
    elements = parse_gemtext("```\none\n  two\nthree")
    assert elements == [
        TextLine("one", preformatted=True),
        TextLine("  two", preformatted=True),
        TextLine("three", preformatted=True),
    ]


def test_step_state_machine():
    assert step(Mode.NORMAL, "``` alt text") == (Mode.PREFORMATTED, None)
    assert step(Mode.PREFORMATTED, "  ```") == (Mode.NORMAL, None)
    assert step(Mode.PREFORMATTED, "# kept") == (
        Mode.PREFORMATTED,
        TextLine("# kept", preformatted=True),
    )
    assert step(Mode.NORMAL, "# heading") == (Mode.NORMAL, HeadingLine("# heading", 1))


def test_format_preformatted_runs():
    elements = parse_gemtext("```\n  a\n```\ntext\n```\nb\n")
    assert format_gemtext(elements) == "```\n  a\n```\ntext\n```\nb\n```\n"


def test_format_links():
    elements = parse_gemtext("=>  a.gmi   A   page\n=> b.gmi\n=>\n")
    assert format_gemtext(elements) == "=> a.gmi A page\n=> b.gmi\n=>\n"


@pytest.mark.parametrize("text", ["a\r\r\nb\n", "```\nx\r\r\n```\n"])
def test_trailing_carriage_returns_survive_formatting(text: str):
    formatted = format_gemtext(parse_gemtext(text))
    assert parse_gemtext(formatted) == parse_gemtext(text)
    assert format_gemtext(parse_gemtext(formatted)) == formatted


def test_extract_title():
    assert extract_title(parse_gemtext("```\nart\n```\n\nHello there\n# Title\n")) == "Hello there"
    assert extract_title(parse_gemtext("=> foo\n### Deep title\n")) == "Deep title"
    assert extract_title(parse_gemtext("\n\n")) is None


class TestGeminiElements:
    """Test validation and construction of text/gemini elements."""

    valid_contents = st.text().filter(lambda text: "\n" not in text)

    @given(contents=valid_contents)
    def test_elements_accept_no_newlines(self, contents: str):
        """Line separators are for formatting so are not accepted as contents of elements."""
        for content_index in range(len(contents) + 1):
            # Splice in a newline.
            invalid_contents = contents[:content_index] + "\n" + contents[content_index:]

            with pytest.raises(ValueError, match="line content cannot contain newlines"):
                TextLine(invalid_contents)
            with pytest.raises(ValueError, match="line content cannot contain newlines"):
                QuoteLine(invalid_contents)

    def test_link_without_target_has_no_label(self):
        with pytest.raises(ValueError, match="link without target"):
            Link("=>", None, "label", None)

    def test_link_target_cannot_be_empty(self):
        with pytest.raises(ValueError, match="link target cannot be empty"):
            Link("=>", "", "", LinkScheme.RELATIVE)

    @given(invalid_level=st.one_of(st.integers(max_value=0), st.integers(min_value=4)))
    def test_heading_with_invalid_level(self, invalid_level: int):
        """Heading lines ensure the level makes sense."""
        with pytest.raises(ValueError, match="heading level must be between 1 and 3"):
            HeadingLine("# Blog post # 5", invalid_level)
