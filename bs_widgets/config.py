# # Config loader: JSON -> dataclass

from __future__ import annotations

import dataclasses
import json
from pathlib import Path


@dataclasses.dataclass
class Config:
    # # Page
    title: str = "Bootstrap Widgets"
    lang: str = "en"

    # # Widgets
    id_prefix: str = "w"

    # # Assets
    jquery_url: str = "https://code.jquery.com/jquery-1.10.2.min.js"
    bootstrap_css_url: str = "https://netdna.bootstrapcdn.com/bootstrap/3.0.0/css/bootstrap.min.css"
    bootstrap_js_url: str = "https://netdna.bootstrapcdn.com/bootstrap/3.0.0/js/bootstrap.min.js"

    # # Output
    out_dir: str = "./out"
    out_file: str = "index.html"


def load_config(path: Path) -> Config:
    cfg = Config()
    if not path.exists():
        return cfg

    data = json.loads(path.read_text(encoding="utf-8"))
    for k, v in data.items():
        if hasattr(cfg, k):
            setattr(cfg, k, v)
    return cfg
