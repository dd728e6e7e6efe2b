import pytest

from SocialActivity.activity import OutputMode
from SocialActivity.rendering.renderer import ViewNotFoundError


def test_web_output_is_wrapped_in_web_layout(make_activity):
    activity = make_activity()

    output = activity.render("web", {"extra": "x"})

    assert output == '<div class="web"><b>alice</b> liked Holiday photos (x)</div>'


def test_default_mode_is_web(make_activity):
    activity = make_activity()

    assert activity.render() == activity.render(OutputMode.WEB)


def test_mail_output_falls_back_to_base_view(make_activity):
    activity = make_activity()

    output = activity.render("mail", {"extra": "x"})

    assert output == '<table class="mail"><b>alice</b> liked Holiday photos (x)</table>'


def test_mail_output_uses_mail_view_when_present(make_activity, view_dir):
    (view_dir / "views" / "mail" / "liked.html").write_text("<i>mail view</i>")
    activity = make_activity()

    assert activity.render("mail") == '<table class="mail"><i>mail view</i></table>'


def test_mail_plaintext_uses_plaintext_view(make_activity, view_dir):
    (view_dir / "views" / "mail" / "plaintext" / "liked.html").write_text("{{ originator }} liked it")
    activity = make_activity()

    assert activity.render("mail_plaintext") == "PLAIN[alice liked it]"


def test_text_output_has_no_markup_and_no_layout(make_activity):
    activity = make_activity()

    output = activity.render("text", {"extra": "<em>nested</em>"})

    assert "<" not in output and ">" not in output
    assert output.startswith("alice liked Holiday photos")
    assert "web" not in output


def test_reserved_params_override_caller_values(make_activity, view_dir):
    (view_dir / "views" / "params.html").write_text(
        "{{ originator }}|{{ source.title }}|{{ contentContainer }}|{{ record }}|{{ url }}|{{ extra }}"
    )
    activity = make_activity(view_name="params", record="rec-1")

    output = activity.render("text", {"originator": "mallory", "url": "evil", "extra": "kept"})

    assert output == "alice|Holiday photos|None|rec-1|#|kept"


def test_get_view_params_does_not_mutate_input(make_activity):
    activity = make_activity()
    params = {"extra": 1}

    view_params = activity.get_view_params(params)

    assert params == {"extra": 1}
    assert set(view_params) == {"extra", "originator", "source", "contentContainer", "record", "url"}


def test_render_is_idempotent(make_activity):
    activity = make_activity()

    assert activity.render("web", {}) == activity.render("web", {})


def test_view_context_exposes_activity_helpers(make_activity, view_dir):
    (view_dir / "views" / "ctx.html").write_text("{{ view.mode.value }} {{ view.activity.module_id }} {{ view.url }}")
    activity = make_activity(view_name="ctx", module_id="like")

    assert activity.render("text") == "text like #"


def test_missing_view_name_propagates_not_found(make_activity):
    activity = make_activity()
    activity.view_name = None

    with pytest.raises(ViewNotFoundError):
        activity.render("web")


def test_missing_base_view_is_not_prechecked(make_activity):
    activity = make_activity(view_name="does_not_exist")

    assert activity.get_view_file("web").endswith("does_not_exist.html")
    with pytest.raises(ViewNotFoundError):
        activity.render("mail")


def test_missing_layout_propagates_not_found(make_activity):
    activity = make_activity()
    activity.layout_mail = None

    assert activity.render("web", {"extra": 1}).startswith('<div class="web">')
    with pytest.raises(ViewNotFoundError):
        activity.render("mail", {"extra": 1})


def test_unknown_mode_is_rejected(make_activity):
    activity = make_activity()

    with pytest.raises(ValueError):
        activity.render("pdf")


def test_text_output_strips_tricky_markup(make_activity, view_dir):
    (view_dir / "views" / "tricky.html").write_text('{{ originator }} <img alt="a>b" src="x"> done <br')
    activity = make_activity(view_name="tricky")

    output = activity.render("text")

    assert output == "alice  done "


def test_missing_view_path_fails_fast(make_activity):
    activity = make_activity()
    activity.view_path = None

    with pytest.raises(ViewNotFoundError, match="declares no view_path"):
        activity.render("web", {"extra": 1})
