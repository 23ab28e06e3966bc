"""Render a sidebar tree as a navigable HTML fragment.

This module turns a loaded :data:`~docs_sidebars.models.SidebarTree` into a
``<nav class="menu">`` block of nested lists, highlighting the link for the
active page and the categories that contain it. It is meant for previewing a
payload outside the site it was built for.

>>> from docs_sidebars.registry import SidebarRegistry
>>> registry = SidebarRegistry.from_path(Path("sidebars.js"))  # doctest: +SKIP
>>> renderer = SidebarHtmlRenderer()
>>> html = renderer.render(
...     registry.sidebar("docs"), active_path="/PopGen.jl/docs/io/vcf"
... )  # doctest: +SKIP

Templates are read from ``docs_sidebars/templates`` unless a custom directory
is provided; Jinja2 autoescaping is enabled so labels and hrefs are escaped.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import Category, Link

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Item, SidebarTree


class SidebarHtmlRenderer:
    """Render sidebar trees through the ``sidebar.jinja`` template."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``sidebar.jinja``. Defaults to the templates
            shipped with the package.
        """
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("sidebar.jinja")

    def render(
        self,
        tree: SidebarTree,
        *,
        active_path: str | None = None,
        label: str = "Docs sidebar",
    ) -> str:
        """Return the HTML fragment for ``tree``.

        Parameters
        ----------
        tree : SidebarTree
            Categories to render, in declaration order.
        active_path : str, optional
            Path of the page being viewed. The link with exactly this href is
            marked active; no prefix matching is applied.
        label : str, optional
            Accessible name for the ``<nav>`` landmark.
        """
        nodes = _build_nodes(tree, active_path)
        html = self.template.render(nodes=nodes, label=label)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def write(
        self,
        tree: SidebarTree,
        output: Path,
        *,
        active_path: str | None = None,
    ) -> Path:
        """Render ``tree`` and write UTF-8 HTML to ``output``."""
        html = self.render(tree, active_path=active_path)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
        return output


def _build_nodes(
    items: cabc.Iterable[Item], active_path: str | None
) -> list[dict[str, typ.Any]]:
    """Convert items to template nodes, flagging the active branch."""
    nodes: list[dict[str, typ.Any]] = []
    for item in items:
        if isinstance(item, Link):
            nodes.append(
                {
                    "kind": "link",
                    "label": item.label,
                    "href": item.href,
                    "active": active_path is not None and item.href == active_path,
                }
            )
        elif isinstance(item, Category):
            children = _build_nodes(item.items, active_path)
            nodes.append(
                {
                    "kind": "category",
                    "label": item.label,
                    "children": children,
                    "active": any(child["active"] for child in children),
                }
            )
    return nodes


__all__ = ["SidebarHtmlRenderer"]
