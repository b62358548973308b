# # Orchestrates: render each enabled widget of the layout into one view,
# # then wrap the result in a page and write it out.

from __future__ import annotations

import logging
from pathlib import Path

from . import widgets
from .config import Config
from .layout import Layout, WidgetSpec
from .output.html_shell import wrap_page
from .view import View

log = logging.getLogger(__name__)


def render_widget(view: View, spec: WidgetSpec) -> None:
    w_cls = widgets.get_widget(spec.key)
    props = dict(spec.config)

    # # Specs with "content" go through begin/end so the content is streamed inside
    if "content" in props:
        content = props.pop("content")
        w_cls.begin(view, **props)
        if content is not None:
            view.write(str(content))
        w_cls.end(view)
    else:
        view.write(w_cls.widget(view, **props))
    view.write("\n")


def render_view(cfg: Config, layout: Layout) -> View:
    view = View(cfg)
    for spec in layout.widgets:
        if not spec.enabled:
            log.debug("skipping disabled widget %s", spec.key)
            continue
        render_widget(view, spec)
    return view


def run(cfg: Config, layout: Layout) -> Path:
    out_root = Path(cfg.out_dir)
    out_root.mkdir(parents=True, exist_ok=True)

    view = render_view(cfg, layout)
    html = wrap_page(
        title=layout.title or cfg.title,
        body_html=view.getvalue(),
        view=view,
        cfg=cfg,
    )

    out_path = out_root / cfg.out_file
    out_path.write_text(html, encoding="utf-8")
    log.info("Wrote %d widget(s) to %s", len(view.rendered), out_path)
    return out_path
