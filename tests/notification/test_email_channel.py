import smtplib

import pytest

from SocialActivity.activities import CommentCreated
from SocialActivity.activities.samples import User
from SocialActivity.config import Config
from SocialActivity.notification import EmailChannel, NotificationError
from SocialActivity.rendering.urls import UrlBuilder
from SocialActivity.utils import email as email_module
from SocialActivity.utils.email import SMTPClient


class FakeSMTPClient:
    def __init__(self, result=True):
        self.result = result
        self.sent = []

    def send_email(self, **kwargs):
        self.sent.append(kwargs)
        return self.result


@pytest.fixture
def activity():
    return CommentCreated.sample(url_builder=UrlBuilder("https://social.example.org"))


@pytest.fixture
def recipient():
    return User(id=1, username="jdoe", display_name="Jane Doe", email="jane@example.org")


def test_send_renders_both_parts(activity, recipient):
    smtp = FakeSMTPClient()
    channel = EmailChannel(config=Config(raw={}), smtp_client=smtp)

    assert channel.send(activity, recipient) is True

    (message,) = smtp.sent
    assert message["recipient"] == "jane@example.org"
    assert message["subject"].startswith("Richard Roe commented on Post")
    assert '<table class="notification"' in message["html_content"]
    assert "<" not in message["text_content"]


def test_subject_prefix_from_config(activity):
    smtp = FakeSMTPClient()
    channel = EmailChannel(config=Config(raw={"email": {"subject_prefix": "Lab"}}), smtp_client=smtp)

    channel.send(activity, "someone@example.org")

    assert smtp.sent[0]["subject"].startswith("[Lab] Richard Roe")


def test_recipient_without_address_is_rejected(activity):
    channel = EmailChannel(config=Config(raw={}), smtp_client=FakeSMTPClient())

    with pytest.raises(NotificationError):
        channel.send(activity, User(id=9, username="x", display_name="X"))


def test_missing_template_becomes_notification_error(activity):
    activity.view_name = "missing"
    channel = EmailChannel(config=Config(raw={}), smtp_client=FakeSMTPClient())

    with pytest.raises(NotificationError):
        channel.send(activity, "someone@example.org")


def test_failed_delivery_raises(activity):
    channel = EmailChannel(config=Config(raw={}), smtp_client=FakeSMTPClient(result=False))

    with pytest.raises(NotificationError):
        channel.send(activity, "someone@example.org")


class FakeSMTP:
    instances = []
    fail_sends = 0

    def __init__(self, host, port, timeout):
        self.host = host
        self.port = port
        self.messages = []
        FakeSMTP.instances.append(self)

    def starttls(self):
        self.tls = True

    def login(self, username, password):
        self.credentials = (username, password)

    def send_message(self, msg):
        if FakeSMTP.fail_sends:
            FakeSMTP.fail_sends -= 1
            raise smtplib.SMTPServerDisconnected("gone")
        self.messages.append(msg)

    def quit(self):
        pass

    def close(self):
        pass


@pytest.fixture
def fake_smtp(monkeypatch):
    FakeSMTP.instances = []
    FakeSMTP.fail_sends = 0
    monkeypatch.setattr(email_module.smtplib, "SMTP", FakeSMTP)
    monkeypatch.setattr(email_module.time, "sleep", lambda seconds: None)
    return FakeSMTP


def test_smtp_client_sends_multipart_message(fake_smtp):
    client = SMTPClient({
        "smtp": {"host": "mail.example.org", "port": 587, "encryption": "tls",
                 "username": "u", "password": "p"},
        "email": {"from_address": "noreply@example.org", "from_name": "Social"},
    })

    assert client.send_email("a@example.org", "Hi", "<p>Hi</p>", "Hi")

    (smtp,) = fake_smtp.instances
    assert smtp.tls is True
    assert smtp.credentials == ("u", "p")
    (msg,) = smtp.messages
    assert msg["From"] == "Social <noreply@example.org>"
    assert [part.get_content_type() for part in msg.get_payload()] == ["text/plain", "text/html"]


def test_smtp_client_retries_then_gives_up(fake_smtp):
    fake_smtp.fail_sends = 5
    client = SMTPClient({})

    assert client.send_email("a@example.org", "Hi", "<p>Hi</p>", "Hi", retry_count=2) is False
    assert len(fake_smtp.instances) == 2


def test_smtp_client_recovers_after_transient_failure(fake_smtp):
    fake_smtp.fail_sends = 1
    client = SMTPClient({})

    assert client.send_email("a@example.org", "Hi", "<p>Hi</p>", "Hi") is True


def test_unknown_provider_is_rejected():
    with pytest.raises(ValueError):
        SMTPClient({"smtp": {"provider": "carrier-pigeon"}})
