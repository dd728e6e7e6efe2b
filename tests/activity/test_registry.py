import pytest

from SocialActivity.activity import ActivityRegistry, SocialActivity


class Poked(SocialActivity):
    name = "poked"


def test_register_and_get():
    registry = ActivityRegistry()

    assert registry.register(Poked) is Poked
    assert registry.get("poked") is Poked
    assert registry.is_registered("poked")
    assert registry.names() == ["poked"]


def test_unknown_name_raises():
    with pytest.raises(ValueError):
        ActivityRegistry().get("nope")


def test_nameless_activity_is_rejected():
    class Anonymous(SocialActivity):
        pass

    with pytest.raises(ValueError):
        ActivityRegistry().register(Anonymous)
