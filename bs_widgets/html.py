# # HTML helpers: tag rendering, attribute serialization, css class merging.

from __future__ import annotations

import json
from html import escape
from typing import Any, Dict, Iterable, Optional

# # Elements that never take content or a closing tag
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "command", "embed", "hr", "img", "input",
    "keygen", "link", "meta", "param", "source", "track", "wbr",
})

# # Attributes rendered first, in this order; everything else keeps insertion order
ATTRIBUTE_ORDER = (
    "type", "id", "class", "name", "value",
    "href", "src", "action", "method",
    "selected", "checked", "readonly", "disabled", "multiple",
    "size", "maxlength", "width", "height", "rows", "cols",
    "alt", "title", "rel", "media",
)


def encode(value: Any) -> str:
    return escape(str(value), quote=True)


def _ordered_items(options: Dict[str, Any]) -> Iterable[tuple]:
    for name in ATTRIBUTE_ORDER:
        if name in options:
            yield name, options[name]
    for name, value in options.items():
        if name not in ATTRIBUTE_ORDER:
            yield name, value


def render_tag_attributes(options: Optional[Dict[str, Any]]) -> str:
    """
    Serialize an attribute dict into ` name="value"` pairs.

    True renders the bare attribute name, None and False drop the attribute.
    A dict under `data` expands into `data-*` attributes.
    """
    if not options:
        return ""

    out = []
    for name, value in _ordered_items(options):
        if value is None or value is False:
            continue
        if value is True:
            out.append(f" {name}")
        elif name == "data" and isinstance(value, dict):
            for k, v in value.items():
                if v is None:
                    continue
                v = v if isinstance(v, str) else json.dumps(v)
                out.append(f' data-{k}="{encode(v)}"')
        else:
            out.append(f' {name}="{encode(value)}"')
    return "".join(out)


def begin_tag(name: str, options: Optional[Dict[str, Any]] = None) -> str:
    return f"<{name}{render_tag_attributes(options)}>"


def end_tag(name: str) -> str:
    return f"</{name}>"


def render_tag(name: str, content: Any = "", options: Optional[Dict[str, Any]] = None) -> str:
    # # Content is markup and goes out as-is; only attribute values are escaped
    html = begin_tag(name, options)
    if name.lower() in VOID_ELEMENTS:
        return html
    return f"{html}{'' if content is None else content}{end_tag(name)}"


def add_css_class(options: Dict[str, Any], css_class: str) -> None:
    """Append class token(s) to options["class"], skipping ones already present."""
    current = str(options.get("class") or "").split()
    for token in str(css_class).split():
        if token not in current:
            current.append(token)
    options["class"] = " ".join(current)


def remove_option(options: Dict[str, Any], key: str, default: Any = None) -> Any:
    return options.pop(key, default)
