# # HTML shell: wraps rendered widgets in a page with their bundles and scripts.

from __future__ import annotations

from typing import List

from ..config import Config
from ..html import encode, render_tag
from ..view import View


def _indent(lines: List[str], prefix: str = "  ") -> str:
    return "\n".join(prefix + line for line in lines)


def build_head(view: View) -> List[str]:
    # # The bootstrap stylesheet is always wanted; widgets only add to it
    names = view.assets.resolve("bootstrap", list(view.asset_bundles))
    return [render_tag("link", options={"rel": "stylesheet", "href": url}) for url in view.assets.css_urls(names)]


def build_scripts(view: View) -> List[str]:
    out = [render_tag("script", options={"src": url}) for url in view.assets.js_urls(view.asset_bundles)]
    if view.js:
        body = "\n".join(view.js)
        out.append(f"<script>jQuery(function ($) {{\n{body}\n}});</script>")
    return out


def wrap_page(title: str, body_html: str, view: View, cfg: Config) -> str:
    return f"""<!doctype html>
<html lang="{encode(cfg.lang)}">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{encode(title)}</title>
{_indent(build_head(view))}
</head>
<body>
  <div class="container">
{body_html}
  </div>
{_indent(build_scripts(view))}
</body>
</html>
"""
