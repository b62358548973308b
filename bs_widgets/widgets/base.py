# # Widget base: options, id, two-phase (initialize/finalize) rendering into a View.

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Type, TypeVar, Union

from ..view import View

log = logging.getLogger(__name__)

W = TypeVar("W", bound="Widget")


class WidgetStackError(RuntimeError):
    """begin()/end() calls do not pair up."""


class Widget:
    """
    Base for server-rendered widgets.

    A widget renders in two phases. initialize() writes the opening markup,
    finalize() writes (or returns) the closing markup, and anything the caller
    writes to the view in between ends up inside the widget:

        with Alert.begin(view, body="Saved.") as alert:
            view.write("<b>Heads up!</b>")

    Keyword properties are limited to the attributes a widget class declares.
    """

    key: str = "base"

    def __init__(
        self,
        view: Optional[View] = None,
        *,
        options: Optional[Dict[str, Any]] = None,
        client_options: Union[Dict[str, Any], bool, None] = None,
        client_events: Optional[Dict[str, str]] = None,
        **props: Any,
    ):
        # # Without a host view, plugin registration lands in a throwaway one
        self.view = view if view is not None else View()
        self.options: Dict[str, Any] = dict(options or {})
        self.client_options = {} if client_options is None else client_options
        self.client_events: Dict[str, str] = dict(client_events or {})

        for name, value in props.items():
            if name.startswith("_") or name in ("key", "view", "id") or not hasattr(type(self), name) \
                    or callable(getattr(type(self), name)):
                raise TypeError(f"{type(self).__name__} got an unknown property {name!r}")
            setattr(self, name, value)

        if self.options.get("id") is None:
            self.options["id"] = self.view.next_widget_id()

    @property
    def id(self) -> str:
        return str(self.options["id"])

    # # Lifecycle hooks

    def initialize(self) -> None:
        pass

    def finalize(self) -> Optional[str]:
        return None

    # # Entry points

    @classmethod
    def begin(cls: Type[W], view: Optional[View] = None, **props: Any) -> W:
        widget = cls(view, **props)
        widget.view.widget_stack.append(widget)
        widget.initialize()
        return widget

    @classmethod
    def end(cls: Type[W], view: View) -> W:
        if not view.widget_stack:
            raise WidgetStackError(f"Unexpected {cls.__name__}.end() call: no matching begin() found.")
        widget = view.widget_stack.pop()
        if type(widget) is not cls:
            raise WidgetStackError(f"Expecting end() of {type(widget).__name__}, found {cls.__name__}.")
        view.write(widget.finalize())
        view.rendered.append(widget)
        return widget

    @classmethod
    def widget(cls, view: Optional[View] = None, **props: Any) -> str:
        """Render both phases at once and return the markup instead of writing it."""
        widget = cls(view, **props)
        widget.view.begin_capture()
        try:
            widget.initialize()
            widget.view.write(widget.finalize())
        finally:
            out = widget.view.end_capture()
        widget.view.rendered.append(widget)
        return out

    def __enter__(self: W) -> W:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        # # Closing markup goes out even when the block raised, unless the stack
        # # no longer ends with this widget
        if exc_type is not None and not (self.view.widget_stack and self.view.widget_stack[-1] is self):
            return False
        type(self).end(self.view)
        return False

    # # Client side

    def register_plugin(self, name: str) -> None:
        view = self.view
        view.register_asset_bundle("bootstrap-plugin")

        wid = self.id
        if self.client_options is not False:
            opts = json.dumps(self.client_options) if self.client_options else ""
            view.register_js(f"jQuery('#{wid}').{name}({opts});")

        if self.client_events:
            js = [f"jQuery('#{wid}').on('{event}', {handler});" for event, handler in self.client_events.items()]
            view.register_js("\n".join(js))

        log.debug("%s #%s registered client plugin %s", type(self).__name__, wid, name)
