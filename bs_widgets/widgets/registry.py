# # Widget registry: layouts refer to widgets by key.

from __future__ import annotations

from typing import Callable, Dict, TYPE_CHECKING, List, Type

if TYPE_CHECKING:
    from .base import Widget

_WIDGETS: Dict[str, Type["Widget"]] = {}


def register_widget(key: str) -> Callable[[Type["Widget"]], Type["Widget"]]:
    def deco(cls: Type["Widget"]) -> Type["Widget"]:
        if key in _WIDGETS and _WIDGETS[key] is not cls:
            raise KeyError(f"Widget key already registered: {key} ({_WIDGETS[key].__name__})")
        cls.key = key
        _WIDGETS[key] = cls
        return cls
    return deco


def get_widget(key: str) -> Type["Widget"]:
    if key not in _WIDGETS:
        raise KeyError(f"Unknown widget: {key}. Available: {sorted(_WIDGETS.keys())}")
    return _WIDGETS[key]


def available_widgets() -> List[str]:
    return sorted(_WIDGETS.keys())
