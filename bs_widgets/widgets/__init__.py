from .base import Widget, WidgetStackError
from .registry import available_widgets, get_widget, register_widget
from .alert import Alert

__all__ = ["Alert", "Widget", "WidgetStackError", "available_widgets", "get_widget", "register_widget"]
