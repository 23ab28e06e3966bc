"""Typed structures describing a documentation sidebar payload.

The payload emitted by the static-site generator is a JSON document with two
top-level keys: ``docsSidebars`` maps a sidebar name to an ordered array of
category objects, and ``permalinkToSidebar`` maps each documentation path to
the sidebar shown alongside it. Items inside a category are discriminated by
their ``type`` field, which :mod:`msgspec` decodes into :class:`Link` or
:class:`Category` directly.

All structs are frozen and sequences decode to tuples, so a loaded tree can be
shared freely without defensive copies.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import msgspec


class MalformedDataError(ValueError):
    """Raised when a sidebar payload cannot be parsed or has the wrong shape."""


class Link(msgspec.Struct, frozen=True, tag="link", tag_field="type"):
    """Leaf navigation entry pointing at one documentation page."""

    label: str
    href: str


class Category(msgspec.Struct, frozen=True, tag="category", tag_field="type"):
    """Labelled grouping node holding links and nested categories."""

    label: str
    items: tuple[Item, ...]


Item = Link | Category
SidebarTree: typ.TypeAlias = tuple[Category, ...]
Sidebars: typ.TypeAlias = typ.Mapping[str, SidebarTree]
PermalinkIndex: typ.TypeAlias = typ.Mapping[str, str]


class SidebarPayload(msgspec.Struct, frozen=True, rename="camel"):
    """Top-level document as written by the site generator."""

    # Decoded through the union so the ``type`` tag is required at every level.
    docs_sidebars: dict[str, tuple[Item, ...]]
    permalink_to_sidebar: dict[str, str]


@dc.dataclass(frozen=True, slots=True)
class SidebarEntry:
    """One row of a flattened sidebar.

    Attributes
    ----------
    depth : int
        Nesting level; top-level categories sit at ``0``.
    label : str
        Text shown for the entry.
    href : str or None
        Target path for links; ``None`` for category headers.
    """

    depth: int
    label: str
    href: str | None = None

    @property
    def is_header(self) -> bool:
        """Return True when the entry is a category header."""
        return self.href is None


@dc.dataclass(slots=True)
class ConsistencyReport:
    """Referential-integrity problems between sidebar trees and the index."""

    unindexed: list[tuple[str, str]] = dc.field(default_factory=list)
    mismatched: list[tuple[str, str, str]] = dc.field(default_factory=list)
    unknown_sidebars: list[tuple[str, str]] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when no problems were found."""
        return not (self.unindexed or self.mismatched or self.unknown_sidebars)

    def problems(self) -> list[str]:
        """Return human-readable descriptions of every problem found."""
        lines = [
            f"{sidebar}: '{href}' is not in the permalink index"
            for sidebar, href in self.unindexed
        ]
        lines.extend(
            f"{sidebar}: '{href}' is indexed under sidebar '{indexed}'"
            for sidebar, href, indexed in self.mismatched
        )
        lines.extend(
            f"index: '{href}' points at unknown sidebar '{sidebar}'"
            for href, sidebar in self.unknown_sidebars
        )
        return lines


__all__ = [
    "Category",
    "ConsistencyReport",
    "Item",
    "Link",
    "MalformedDataError",
    "PermalinkIndex",
    "SidebarEntry",
    "SidebarPayload",
    "SidebarTree",
    "Sidebars",
]
