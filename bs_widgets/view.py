# # Request-scoped view: output stream, widget stack, registered scripts and bundles.

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, Dict, List, Optional

from .config import Config
from .output.assets import AssetManager, default_bundles

if TYPE_CHECKING:
    from .widgets.base import Widget

log = logging.getLogger(__name__)


class View:
    """
    Collects everything one page render produces.

    Widgets write markup into the current output buffer, push themselves on the
    widget stack between begin() and end(), and ask for client scripts and asset
    bundles. Nothing here is shared between renders.
    """

    def __init__(self, cfg: Optional[Config] = None, assets: Optional[AssetManager] = None):
        self.cfg = cfg or Config()
        self.assets = assets or AssetManager(bundles=default_bundles(self.cfg))
        self.widget_stack: List["Widget"] = []
        self.rendered: List["Widget"] = []
        self.asset_bundles: List[str] = []
        self._js: Dict[str, str] = {}
        self._buffers: List[io.StringIO] = [io.StringIO()]
        self._counter = 0

    # # Output

    def write(self, text: Optional[str]) -> None:
        if text:
            self._buffers[-1].write(text)

    def begin_capture(self) -> None:
        self._buffers.append(io.StringIO())

    def end_capture(self) -> str:
        if len(self._buffers) < 2:
            raise RuntimeError("end_capture() called without a matching begin_capture()")
        return self._buffers.pop().getvalue()

    def getvalue(self) -> str:
        return self._buffers[0].getvalue()

    # # Widgets

    def next_widget_id(self) -> str:
        wid = f"{self.cfg.id_prefix}{self._counter}"
        self._counter += 1
        return wid

    # # Client side

    @property
    def js(self) -> List[str]:
        return list(self._js.values())

    def register_js(self, js: str, key: Optional[str] = None) -> None:
        key = key or js
        if key not in self._js:
            log.debug("register js %s", key)
        self._js[key] = js

    def register_asset_bundle(self, name: str) -> None:
        for bundle in self.assets.resolve(name, []):
            if bundle not in self.asset_bundles:
                self.asset_bundles.append(bundle)
