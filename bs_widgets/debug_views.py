from __future__ import annotations

from rich import box
from rich.panel import Panel
from rich.table import Table

from .console import ConsoleOptions, make_console
from .view import View


def _table(title: str) -> Table:
    return Table(title=title, box=box.SIMPLE_HEAVY, show_lines=False, expand=False, padding=(0, 1))


def render_debug_view(view: View, *, width: int | None = None, no_color: bool = False) -> None:
    console = make_console(ConsoleOptions(width=width, no_color=no_color))

    console.print(
        Panel.fit(
            f"[k]Debug View[/k]\n"
            f"[info]Widgets[/info]: {len(view.rendered)}  "
            f"[info]Bundles[/info]: {len(view.asset_bundles)}  "
            f"[info]Scripts[/info]: {len(view.js)}",
            border_style="info",
        )
    )

    t = _table("Rendered widgets")
    t.add_column("Key", style="tag", no_wrap=True)
    t.add_column("Class", no_wrap=True)
    t.add_column("Id", style="attr", no_wrap=True)
    t.add_column("Container class", no_wrap=True, overflow="ellipsis", max_width=40)
    for w in view.rendered:
        t.add_row(w.key, type(w).__name__, w.id, str(w.options.get("class", "")))
    console.print(t)

    if view.asset_bundles:
        t2 = _table("Asset bundles (load order)")
        t2.add_column("Bundle", style="tag", no_wrap=True)
        t2.add_column("Files", overflow="ellipsis")
        for name in view.asset_bundles:
            bundle = view.assets.bundles[name]
            t2.add_row(name, "\n".join(bundle.css + bundle.js) or "[dim]-[/dim]")
        console.print(t2)

    if view.js:
        t3 = _table("Registered scripts")
        t3.add_column("#", justify="right")
        t3.add_column("Script", overflow="ellipsis")
        for i, js in enumerate(view.js, start=1):
            t3.add_row(str(i), js)
        console.print(t3)
    else:
        console.print(Panel.fit("[warn]No client scripts registered[/warn]", border_style="warn"))
