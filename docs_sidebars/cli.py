"""Cyclopts CLI entrypoint for inspecting documentation sidebar payloads.

The ``sidebars`` console script defined here loads the payload named in
``config/sidebars.yaml`` (a bare JSON file or the compiled chunk from a built
site) and answers questions about it: which sidebar a page shows, what a
sidebar looks like flattened, whether the trees and permalink index agree,
and how the sidebar renders for a given active page.

Examples
--------
Look up the sidebar for a page:

>>> from docs_sidebars.cli import app
>>> app(["lookup", "/PopGen.jl/docs/api/api"])  # doctest: +SKIP
docs

Write an HTML preview with the install page highlighted:

>>> app(
...     ["html", "--active", "/PopGen.jl/docs/getting_started/install"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SidebarSiteConfig, load_site_config
from .registry import SidebarRegistry
from .renderer import SidebarHtmlRenderer

DEFAULT_CONFIG = Path("config/sidebars.yaml")

app = App(name="sidebars", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to sidebars config", env_var="INPUT_CONFIG")
]
SidebarOption = typ.Annotated[
    str | None,
    Parameter(help="Sidebar name to use", env_var="INPUT_SIDEBAR"),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load(config: Path) -> tuple[SidebarRegistry, SidebarSiteConfig]:
    site_config = load_site_config(config)
    return SidebarRegistry.from_path(site_config.payload), site_config


@app.command(help="Print the sidebar shown for a documentation path.")
def lookup(path: str, *, config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Print the sidebar name for ``path`` or report that none matches.

    Matching is exact: trailing slashes, prefixes and case differences do not
    resolve.
    """
    registry, _ = _load(config)
    name = registry.lookup_sidebar(path)
    if name is None:
        print(f"{path}: no sidebar")
    else:
        print(name)


@app.command(help="Print a sidebar as an indented outline.")
def outline(
    *, sidebar: SidebarOption = None, config: ConfigOption = DEFAULT_CONFIG
) -> None:
    """Print the flattened sidebar, two spaces of indent per level."""
    registry, site_config = _load(config)
    for entry in registry.render(sidebar or site_config.sidebar):
        indent = "  " * entry.depth
        if entry.href is None:
            print(f"{indent}{entry.label}")
        else:
            print(f"{indent}{entry.label} -> {entry.href}")


@app.command(help="Verify the sidebar trees and permalink index agree.")
def check(*, config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Print every consistency problem and exit non-zero when any exist.

    Raises
    ------
    SystemExit
        With status ``1`` when the report lists problems.
    """
    registry, _ = _load(config)
    report = registry.check()
    if report.ok:
        print("ok")
        return
    for line in report.problems():
        print(line)
    raise SystemExit(1)


@app.command(help="Write an HTML preview of a sidebar.")
def html(
    *,
    active: typ.Annotated[
        str | None,
        Parameter(help="Path of the page to highlight", env_var="INPUT_ACTIVE"),
    ] = None,
    sidebar: SidebarOption = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output file", env_var="INPUT_OUTPUT"),
    ] = None,
    config: ConfigOption = DEFAULT_CONFIG,
) -> None:
    """Render the sidebar to HTML and print the written path.

    When ``sidebar`` is omitted and ``active`` is indexed, the sidebar mapped
    to the active page is used; otherwise the configured default applies.
    """
    registry, site_config = _load(config)
    name = sidebar
    if name is None and active is not None:
        name = registry.lookup_sidebar(active)
    tree = registry.sidebar(name or site_config.sidebar)
    target = output or site_config.html_output
    written = SidebarHtmlRenderer().write(tree, target, active_path=active)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``sidebars`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
