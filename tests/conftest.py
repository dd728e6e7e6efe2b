import pytest

from SocialActivity import config as config_module
from SocialActivity.activity import SocialActivity
from SocialActivity.config import Config
from SocialActivity.rendering.urls import UrlBuilder


@pytest.fixture(autouse=True)
def empty_config():
    cfg = Config(raw={})
    config_module.set_config(cfg)
    yield cfg
    config_module.set_config(None)


@pytest.fixture
def view_dir(tmp_path):
    """A view directory with one view per output-mode variant and layouts."""
    views = tmp_path / "views"
    (views / "mail" / "plaintext").mkdir(parents=True)
    (views / "liked.html").write_text(
        "<b>{{ originator }}</b> liked {{ source.title }} ({{ extra }})"
    )

    layouts = tmp_path / "layouts"
    layouts.mkdir()
    (layouts / "web.html").write_text('<div class="web">{{ content }}</div>')
    (layouts / "mail.html").write_text('<table class="mail">{{ content }}</table>')
    (layouts / "mail_plaintext.html").write_text(
        "{% autoescape false %}PLAIN[{{ content }}]{% endautoescape %}"
    )
    return tmp_path


class Record:
    def __init__(self, title):
        self.title = title


@pytest.fixture
def make_activity(view_dir):
    def factory(**kwargs):
        class Liked(SocialActivity):
            view_path = str(view_dir / "views")
            view_name = "liked"
            layout_web = str(view_dir / "layouts" / "web.html")
            layout_mail = str(view_dir / "layouts" / "mail.html")
            layout_mail_plaintext = str(view_dir / "layouts" / "mail_plaintext.html")

        kwargs.setdefault("originator", "alice")
        kwargs.setdefault("source", Record("Holiday photos"))
        kwargs.setdefault("url_builder", UrlBuilder("https://social.example.org"))
        return Liked(**kwargs)

    return factory
