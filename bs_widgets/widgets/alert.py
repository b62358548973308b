# # Alert widget: Bootstrap alert box with an optional dismiss button.

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from .base import Widget
from .registry import register_widget
from ..html import add_css_class, begin_tag, end_tag, remove_option, render_tag


@register_widget("alert")
class Alert(Widget):
    """
    Renders a Bootstrap alert.

        Alert.widget(view, body="Say hello...", close_button={"tag": "a", "label": "&times;"})

    Anything written to the view between Alert.begin() and Alert.end() is part
    of the body too, and comes before `body`.

    `close_button` holds the attributes of the dismiss button. Two keys are
    consumed instead of rendered: `tag` (default "button") and `label` (default
    "&times;"). Any non-mapping value, None or False included, renders no button.
    """

    body: Optional[str] = None
    close_button: Any = MappingProxyType({})

    def initialize(self) -> None:
        super().initialize()
        self.init_options()

        self.view.write(begin_tag("div", self.options) + "\n")
        self.view.write(self.render_body_begin() + "\n")

    def finalize(self) -> None:
        self.view.write("\n" + self.render_body_end())
        self.view.write("\n" + end_tag("div"))

        self.register_plugin("alert")

    def render_body_begin(self) -> str:
        return self.render_close_button()

    def render_body_end(self) -> str:
        return ("" if self.body is None else str(self.body)) + "\n"

    def render_close_button(self) -> str:
        if self.close_button is None:
            return ""
        tag = remove_option(self.close_button, "tag") or "button"
        label = remove_option(self.close_button, "label", "&times;")
        if tag == "button" and "type" not in self.close_button:
            self.close_button["type"] = "button"
        return render_tag(tag, label, self.close_button)

    def init_options(self) -> None:
        self.options = {"class": "fade in", **self.options}
        add_css_class(self.options, "alert")

        if isinstance(self.close_button, Mapping):
            self.close_button = {
                "data-dismiss": "alert",
                "aria-hidden": "true",
                "class": "close",
                **self.close_button,
            }
        else:
            self.close_button = None
