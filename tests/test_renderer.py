"""Tests for the HTML sidebar preview.

The renderer output is parsed with BeautifulSoup so assertions target the
structure (active link, expanded categories, escaping) rather than exact
whitespace produced by the template.
"""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from docs_sidebars.models import Category, Link
from docs_sidebars.renderer import SidebarHtmlRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from docs_sidebars.registry import SidebarRegistry


@pytest.fixture(scope="module")
def renderer() -> SidebarHtmlRenderer:
    return SidebarHtmlRenderer()


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_render_marks_single_active_link(
    renderer: SidebarHtmlRenderer, registry: SidebarRegistry
) -> None:
    html = renderer.render(registry.sidebar("docs"), active_path="/PopGen.jl/docs/io/vcf")
    soup = _soup(html)
    active = soup.select("a.menu__link--active")
    assert len(active) == 1, f"expected exactly one active link, got {len(active)}"
    assert active[0].get("href") == "/PopGen.jl/docs/io/vcf"
    assert active[0].get("aria-current") == "page"
    assert active[0].get_text(strip=True) == "Variant Call Format"


def test_render_expands_active_category(
    renderer: SidebarHtmlRenderer, registry: SidebarRegistry
) -> None:
    html = renderer.render(
        registry.sidebar("docs"), active_path="/PopGen.jl/docs/api/genepop"
    )
    expanded = _soup(html).select("li.menu__list-item--active > .menu__caret")
    assert [node.get_text(strip=True) for node in expanded] == ["API"]


def test_render_preserves_order(
    renderer: SidebarHtmlRenderer, registry: SidebarRegistry
) -> None:
    soup = _soup(renderer.render(registry.sidebar("docs")))
    hrefs = [anchor.get("href") for anchor in soup.select("a.menu__link")]
    assert hrefs == registry.hrefs("docs")
    assert not soup.select(".menu__link--active"), "no link should be active"
    nav = soup.select_one("nav.menu")
    assert nav is not None
    assert nav.get("aria-label") == "Docs sidebar"


def test_render_nests_lists(renderer: SidebarHtmlRenderer) -> None:
    tree = (
        Category(
            label="Outer",
            items=(
                Category(label="Inner", items=(Link(label="Deep", href="/deep"),)),
            ),
        ),
    )
    soup = _soup(renderer.render(tree, active_path="/deep"))
    link = soup.select_one("ul ul ul a")
    assert link is not None, "expected the link three lists deep"
    assert link.get_text(strip=True) == "Deep"
    assert len(soup.select("li.menu__list-item--active")) == 2


def test_render_escapes_labels(renderer: SidebarHtmlRenderer) -> None:
    tree = (
        Category(
            label="<script>",
            items=(Link(label="A & B", href='/x?a="1"'),),
        ),
    )
    html = renderer.render(tree)
    assert "<script>" not in html
    anchor = _soup(html).select_one("a.menu__link")
    assert anchor is not None
    assert anchor.get_text() == "A & B"
    assert anchor.get("href") == '/x?a="1"'


def test_write_creates_output(
    renderer: SidebarHtmlRenderer, registry: SidebarRegistry, tmp_path: Path
) -> None:
    output = tmp_path / "public" / "sidebar.html"
    written = renderer.write(registry.sidebar("docs"), output)
    assert written == output
    text = output.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert len(_soup(text).select("a.menu__link")) == 31
