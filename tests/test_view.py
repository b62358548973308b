import pytest

from bs_widgets.config import Config
from bs_widgets.view import View


def test_capture_is_nested(view):
    view.write("a")
    view.begin_capture()
    view.write("b")
    assert view.end_capture() == "b"
    view.write("c")
    assert view.getvalue() == "ac"


def test_end_capture_without_begin(view):
    with pytest.raises(RuntimeError):
        view.end_capture()


def test_widget_ids_use_prefix():
    view = View(Config(id_prefix="alert-"))
    assert [view.next_widget_id() for _ in range(3)] == ["alert-0", "alert-1", "alert-2"]


def test_register_js_deduplicates(view):
    view.register_js("a();")
    view.register_js("b();")
    view.register_js("a();")
    assert view.js == ["a();", "b();"]


def test_register_js_same_key_replaces(view):
    view.register_js("a();", key="k")
    view.register_js("b();", key="k")
    assert view.js == ["b();"]


def test_bundles_resolve_dependencies_first(view):
    view.register_asset_bundle("bootstrap-plugin")
    view.register_asset_bundle("jquery")
    assert view.asset_bundles == ["jquery", "bootstrap", "bootstrap-plugin"]


def test_unknown_bundle(view):
    with pytest.raises(KeyError):
        view.register_asset_bundle("nope")
