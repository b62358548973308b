# # Layout loader: supports both list-form and dict-form widget configs.

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclasses.dataclass
class WidgetSpec:
    key: str
    enabled: bool = True
    config: Dict[str, Any] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass
class Layout:
    title: Optional[str] = None
    widgets: List[WidgetSpec] = dataclasses.field(default_factory=list)


def _coerce_widgets(w: Any) -> List[WidgetSpec]:
    # # List form: [{"key": "alert", "enabled": true, "body": "..."}, ...]
    if isinstance(w, list):
        out: List[WidgetSpec] = []
        for entry in w:
            if not isinstance(entry, dict) or "key" not in entry:
                continue
            cfg = {k: v for k, v in entry.items() if k not in {"key", "enabled"}}
            out.append(WidgetSpec(key=str(entry["key"]), enabled=bool(entry.get("enabled", True)), config=cfg))
        return out

    # # Dict form: {"alert": {...}}; one widget per key
    if isinstance(w, dict):
        out = []
        for key, cfg in w.items():
            cfg = cfg if isinstance(cfg, dict) else {}
            enabled = bool(cfg.get("enabled", True))
            out.append(WidgetSpec(key=str(key), enabled=enabled, config={k: v for k, v in cfg.items() if k != "enabled"}))
        return out

    return []


def load_layout(path: Path) -> Layout:
    if not path.exists():
        # # Default: a single dismissible alert
        return Layout(widgets=[WidgetSpec("alert", config={"body": "Say hello..."})])

    data = json.loads(path.read_text(encoding="utf-8"))
    title = data.get("title")
    return Layout(title=str(title) if title is not None else None, widgets=_coerce_widgets(data.get("widgets")))
