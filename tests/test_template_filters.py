from markupsafe import Markup

from SocialActivity.utils.template_filters import (
    limit_text_length,
    rich_text_preview,
    strip_html_filter,
    strip_tags,
)


def test_strip_tags_removes_all_tags():
    assert strip_tags('<p class="x">Hello <b>world</b></p>') == "Hello world"


def test_strip_tags_handles_multiline_tags():
    assert strip_tags('<a\n  href="/x">link</a>') == "link"


def test_strip_tags_keeps_entities():
    assert strip_tags("<i>a &amp; b</i>") == "a &amp; b"
    assert strip_html_filter("<i>a &amp; b</i>") == "a & b"


def test_strip_tags_empty():
    assert strip_tags(None) == ""


def test_limit_text_length():
    assert limit_text_length("abcdef", 10) == "abcdef"
    assert limit_text_length("abcdefghijkl", 10) == "abcdefg..."
    assert len(limit_text_length("x" * 200, 60)) == 60


def test_minimal_preview_escapes_text():
    preview = rich_text_preview("5 < 6 & 7", minimal=True)

    assert isinstance(preview, Markup)
    assert str(preview) == "5 &lt; 6 &amp; 7"


def test_full_rich_text_renders_markdown():
    html = rich_text_preview("**bold**", minimal=False)

    assert "<strong>bold</strong>" in html


def test_strip_tags_quoted_gt_and_unclosed_tag():
    assert strip_tags('alice <img alt="a>b" src=\'x>y\'> done <br') == "alice  done "


def test_strip_tags_keeps_comparisons():
    assert strip_tags("1 < 2 and 3 > 2") == "1 < 2 and 3 > 2"


def test_minimal_preview_keeps_comparisons():
    assert str(rich_text_preview("if 1 < 2 and 3 > 2 then ok")) == "if 1 &lt; 2 and 3 &gt; 2 then ok"


def test_minimal_preview_strips_raw_html():
    preview = rich_text_preview("<b>loud</b> words", minimal=True)

    assert str(preview) == "loud words"
