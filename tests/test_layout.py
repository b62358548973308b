import json

from bs_widgets.config import Config, load_config
from bs_widgets.layout import load_layout


def test_missing_layout_gives_demo(tmp_path):
    layout = load_layout(tmp_path / "missing.json")
    assert [w.key for w in layout.widgets] == ["alert"]
    assert layout.widgets[0].config == {"body": "Say hello..."}


def test_list_form(tmp_path):
    path = tmp_path / "layout.json"
    path.write_text(json.dumps({
        "title": "Flash",
        "widgets": [
            {"key": "alert", "body": "one"},
            {"key": "alert", "enabled": False, "body": "two"},
            {"body": "no key"},
            "junk",
        ],
    }), encoding="utf-8")

    layout = load_layout(path)
    assert layout.title == "Flash"
    assert [(w.key, w.enabled, w.config) for w in layout.widgets] == [
        ("alert", True, {"body": "one"}),
        ("alert", False, {"body": "two"}),
    ]


def test_dict_form(tmp_path):
    path = tmp_path / "layout.json"
    path.write_text(json.dumps({"widgets": {"alert": {"body": "hi", "close_button": None}}}), encoding="utf-8")

    layout = load_layout(path)
    assert layout.title is None
    assert layout.widgets[0].config == {"body": "hi", "close_button": None}


def test_config_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"title": "T", "id_prefix": "a", "nope": 1}), encoding="utf-8")

    cfg = load_config(path)
    assert cfg.title == "T"
    assert cfg.id_prefix == "a"
    assert not hasattr(cfg, "nope")


def test_config_defaults(tmp_path):
    assert load_config(tmp_path / "missing.json") == Config()
