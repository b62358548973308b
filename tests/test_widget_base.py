import pytest

from bs_widgets import Alert, Widget, WidgetStackError
from bs_widgets.widgets import get_widget, register_widget
from bs_widgets.widgets.registry import available_widgets


class Panel(Widget):
    title = None

    def initialize(self):
        self.view.write(f"<section id=\"{self.id}\">")

    def finalize(self):
        return "</section>"


def test_finalize_return_value_is_written(view):
    with Panel.begin(view):
        view.write("x")
    assert view.getvalue() == '<section id="w0">x</section>'


def test_widget_captures_output(view):
    view.write("before ")
    html = Panel.widget(view)
    assert html == '<section id="w0"></section>'
    assert view.getvalue() == "before "


def test_unknown_property_is_rejected(view):
    with pytest.raises(TypeError, match="bogus"):
        Alert(view, bogus=1)


def test_methods_are_not_properties(view):
    with pytest.raises(TypeError):
        Alert(view, initialize="nope")


def test_declared_property_is_set(view):
    assert Panel(view, title="T").title == "T"


def test_end_without_begin(view):
    with pytest.raises(WidgetStackError):
        Alert.end(view)


def test_end_of_wrong_widget(view):
    Panel.begin(view)
    with pytest.raises(WidgetStackError, match="Panel"):
        Alert.end(view)


def test_nested_widgets(view):
    with Panel.begin(view):
        with Alert.begin(view, close_button=None):
            view.write("inner")
    out = view.getvalue()
    assert out.startswith('<section id="w0"><div id="w1" class="fade in alert">')
    assert out.endswith("</div></section>")
    assert view.widget_stack == []


def test_exception_in_block_still_closes(view):
    with pytest.raises(ValueError):
        with Alert.begin(view):
            view.write("partial")
            raise ValueError("boom")
    assert view.widget_stack == []
    assert view.getvalue().endswith("partial\n\n\n</div>")


def test_exception_after_manual_end_is_not_masked(view):
    with pytest.raises(ValueError):
        with Alert.begin(view):
            Alert.end(view)
            raise ValueError("boom")
    assert view.getvalue().count("</div>") == 1


def test_registry():
    assert get_widget("alert") is Alert
    assert "alert" in available_widgets()
    with pytest.raises(KeyError, match="Unknown widget"):
        get_widget("carousel")


def test_registry_rejects_duplicate_key():
    with pytest.raises(KeyError):
        register_widget("alert")(Panel)
