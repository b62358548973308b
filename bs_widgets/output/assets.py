# # Asset bundles: css/js a page needs once some widget has asked for it.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..config import Config


@dataclass(frozen=True)
class AssetBundle:
    name: str
    css: Tuple[str, ...] = ()
    js: Tuple[str, ...] = ()
    depends: Tuple[str, ...] = ()


def default_bundles(cfg: Config) -> Dict[str, AssetBundle]:
    return {
        "jquery": AssetBundle("jquery", js=(cfg.jquery_url,)),
        "bootstrap": AssetBundle("bootstrap", css=(cfg.bootstrap_css_url,)),
        "bootstrap-plugin": AssetBundle(
            "bootstrap-plugin",
            js=(cfg.bootstrap_js_url,),
            depends=("jquery", "bootstrap"),
        ),
    }


@dataclass
class AssetManager:
    bundles: Dict[str, AssetBundle] = field(default_factory=lambda: default_bundles(Config()))

    def resolve(self, name: str, seen: List[str]) -> List[str]:
        # # Depth-first: dependencies land before the bundle that needs them
        if name not in self.bundles:
            raise KeyError(f"Unknown asset bundle: {name}. Available: {sorted(self.bundles.keys())}")
        if name in seen:
            return seen
        for dep in self.bundles[name].depends:
            self.resolve(dep, seen)
        seen.append(name)
        return seen

    def css_urls(self, names: List[str]) -> List[str]:
        return [url for n in names for url in self.bundles[n].css if url]

    def js_urls(self, names: List[str]) -> List[str]:
        return [url for n in names for url in self.bundles[n].js if url]
