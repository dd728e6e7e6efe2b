import pytest

from SocialActivity import config as config_module
from SocialActivity.config import Config, get_config, reload_config


def test_dotted_lookup():
    cfg = Config(raw={"web": {"base_url": "https://x.org"}, "layouts": "oops"})

    assert cfg.get("web.base_url") == "https://x.org"
    assert cfg.get("web.missing", "default") == "default"
    assert cfg.get("layouts.notification.web") is None
    assert cfg.section("layouts") == {}
    assert cfg.section("web") == {"base_url": "https://x.org"}


def test_load_from_explicit_path(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("web:\n  base_url: https://from-file.example.org\n")
    config_module.set_config(None)

    assert get_config(str(path)).get("web.base_url") == "https://from-file.example.org"


def test_environment_variable(tmp_path, monkeypatch):
    path = tmp_path / "env.yml"
    path.write_text("email:\n  subject_prefix: Env\n")
    monkeypatch.setenv(config_module.ENV_VAR, str(path))

    assert reload_config().get("email.subject_prefix") == "Env"


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        reload_config(str(tmp_path / "absent.yml"))


def test_missing_default_file_is_empty(tmp_path, monkeypatch):
    monkeypatch.delenv(config_module.ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    config_module.set_config(None)

    assert get_config().raw == {}


def test_non_mapping_root_is_rejected(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ValueError):
        reload_config(str(path))
