import os

from SocialActivity.activity import SocialActivity, views_beside
from SocialActivity.config import Config


class Followed(SocialActivity):
    name = "followed"
    view_path = "/srv/views"
    view_name = "followed"
    layout_web = "web.html"
    layout_mail = "mail.html"
    layout_mail_plaintext = "plain.html"


def fake_isfile(existing):
    return lambda path: path in existing


def test_mail_view_prefers_mail_variant(monkeypatch):
    monkeypatch.setattr(os.path, "isfile", fake_isfile({"/srv/views/mail/followed.html"}))
    activity = Followed()

    assert activity.get_view_file("mail") == "/srv/views/mail/followed.html"


def test_mail_view_falls_back_to_base(monkeypatch):
    monkeypatch.setattr(os.path, "isfile", fake_isfile(set()))
    activity = Followed()

    assert activity.get_view_file("mail") == "/srv/views/followed.html"


def test_plaintext_view_prefers_plaintext_variant(monkeypatch):
    monkeypatch.setattr(os.path, "isfile", fake_isfile({"/srv/views/mail/plaintext/followed.html"}))
    activity = Followed()

    assert activity.get_view_file("mail_plaintext") == "/srv/views/mail/plaintext/followed.html"


def test_plaintext_view_ignores_mail_variant(monkeypatch):
    monkeypatch.setattr(os.path, "isfile", fake_isfile({"/srv/views/mail/followed.html"}))
    activity = Followed()

    assert activity.get_view_file("mail_plaintext") == "/srv/views/followed.html"


def test_web_and_text_never_look_for_alternatives(monkeypatch):
    checked = []
    monkeypatch.setattr(os.path, "isfile", lambda path: checked.append(path) or True)
    activity = Followed()

    assert activity.get_view_file("web") == "/srv/views/followed.html"
    assert activity.get_view_file("text") == "/srv/views/followed.html"
    assert checked == []


def test_layout_file_per_mode():
    activity = Followed()

    assert activity.get_layout_file("web") == "web.html"
    assert activity.get_layout_file("text") == "web.html"
    assert activity.get_layout_file("mail") == "mail.html"
    assert activity.get_layout_file("mail_plaintext") == "plain.html"


def test_view_path_can_be_configured():
    config = Config(raw={"activities": {"followed": {"view_path": "/opt/theme/followed"}}})
    activity = Followed(config=config)

    assert activity.get_view_path() == "/opt/theme/followed"


def test_views_beside_module_file():
    assert views_beside("/app/modules/like/activities.py") == "/app/modules/like/views"
