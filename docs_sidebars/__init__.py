"""Load and query documentation sidebar payloads.

This package reads the sidebar metadata a static documentation site ships
with (named navigation trees plus a permalink-to-sidebar index), validates
its shape, and exposes it as an immutable value for lookups, flattening,
consistency checks, and HTML previews.

Exports
-------
- ``SidebarRegistry``: read-only holder for every sidebar and the index.
- ``load``, ``lookup_sidebar``, ``render``: functional entry points.
- ``MalformedDataError``: raised when a payload cannot be loaded.
- ``app`` / ``main``: the ``sidebars`` Cyclopts application.

Examples
--------
>>> from docs_sidebars import load, lookup_sidebar
>>> sidebars, index = load(b'{"docsSidebars": {"docs": []}, "permalinkToSidebar": {}}')
>>> list(sidebars)
['docs']
>>> lookup_sidebar(index, "/unknown/path") is None
True
"""

from __future__ import annotations

from .bundle import extract_payload
from .cli import app, main
from .models import Category, Link, MalformedDataError, SidebarEntry
from .registry import (
    SidebarRegistry,
    check_consistency,
    load,
    lookup_sidebar,
    render,
)

__all__ = [
    "Category",
    "Link",
    "MalformedDataError",
    "SidebarEntry",
    "SidebarRegistry",
    "app",
    "check_consistency",
    "extract_payload",
    "load",
    "lookup_sidebar",
    "main",
    "render",
]
