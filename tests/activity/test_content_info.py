from markupsafe import Markup

from SocialActivity.activity import ContentTitlePreview, SocialActivity
from SocialActivity.rendering.urls import UrlBuilder


class Note(ContentTitlePreview):
    def __init__(self, name, description):
        self.name = name
        self.description = description

    def get_content_name(self):
        return self.name

    def get_content_description(self):
        return self.description


class Shared(SocialActivity):
    view_name = "shared"


def content_info(name, description):
    return Shared(url_builder=UrlBuilder(None)).get_content_info(Note(name, description))


def quoted_preview(info):
    return str(info).split(' "', 1)[1][:-1]


def test_name_is_escaped():
    info = content_info("<b>Title</b>", "text")

    assert isinstance(info, Markup)
    assert str(info).startswith("&lt;b&gt;Title&lt;/b&gt; ")
    assert "<b>" not in str(info)


def test_long_description_is_truncated():
    info = content_info("Post", "word " * 40)

    preview = quoted_preview(info)
    assert len(preview) <= 60
    assert preview.endswith("...")


def test_short_description_is_kept():
    info = content_info("Post", "Short and sweet")

    assert str(info) == 'Post "Short and sweet"'


def test_description_markup_is_stripped():
    info = content_info("Post", "<script>alert(1)</script> **bold** and [a link](http://x.org)")

    preview = quoted_preview(info)
    assert "<" not in preview
    assert "bold and a link" in preview


def test_empty_description():
    assert str(content_info("Post", None)) == 'Post ""'
