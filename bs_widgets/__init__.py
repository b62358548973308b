# # Server-rendered Bootstrap widgets.

from .view import View
from .widgets import Alert, Widget, WidgetStackError

__all__ = ["Alert", "View", "Widget", "WidgetStackError"]
