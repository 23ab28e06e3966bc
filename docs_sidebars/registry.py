"""Load, query, and flatten documentation sidebar payloads.

The module offers plain functions mirroring the payload's contract and a
:class:`SidebarRegistry` value object bundling them for callers that keep the
loaded data around for the lifetime of the process.

Typical usage loads the chunk straight from a built site:

>>> from pathlib import Path
>>> from docs_sidebars.registry import SidebarRegistry
>>> registry = SidebarRegistry.from_path(Path("build/sidebars.js"))  # doctest: +SKIP
>>> registry.lookup_sidebar("/PopGen.jl/docs/api/api")  # doctest: +SKIP
'docs'
>>> registry.render("docs")[0]  # doctest: +SKIP
SidebarEntry(depth=0, label='Getting Started', href=None)

Everything returned is read-only: structs are frozen, sequences are tuples,
and mappings are wrapped in :class:`types.MappingProxyType`.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ
from types import MappingProxyType

import msgspec
import msgspec.json as msgspec_json

from .bundle import extract_payload
from .models import (
    Category,
    ConsistencyReport,
    Link,
    MalformedDataError,
    PermalinkIndex,
    SidebarEntry,
    SidebarPayload,
    Sidebars,
    SidebarTree,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .models import Item

logger = logging.getLogger(__name__)

EXTERNAL_HREF_PATTERN = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.-]*:|//)")
_DECODER = msgspec_json.Decoder(SidebarPayload)


def load(raw: bytes | str) -> tuple[Sidebars, PermalinkIndex]:
    """Parse a sidebar payload into its trees and permalink index.

    Parameters
    ----------
    raw : bytes or str
        JSON document with ``docsSidebars`` and ``permalinkToSidebar`` keys.

    Returns
    -------
    tuple[Sidebars, PermalinkIndex]
        Read-only mapping of sidebar name to tree, in payload order, and the
        read-only path-to-sidebar index.

    Raises
    ------
    MalformedDataError
        If ``raw`` is not valid JSON or does not match the expected shape. The
        message names the offending location, e.g.
        ``Object missing required field `items` - at `$.docsSidebars.docs[0]```.
    """
    try:
        payload = _DECODER.decode(raw)
    except msgspec.DecodeError as exc:
        msg = f"Malformed sidebar payload: {exc}"
        raise MalformedDataError(msg) from exc
    for name, tree in payload.docs_sidebars.items():
        for position, entry in enumerate(tree):
            if not isinstance(entry, Category):
                msg = (
                    "Malformed sidebar payload: expected a category, got a link"
                    f" - at `$.docsSidebars.{name}[{position}]`"
                )
                raise MalformedDataError(msg)
    logger.debug(
        "loaded %d sidebar(s) and %d permalink(s)",
        len(payload.docs_sidebars),
        len(payload.permalink_to_sidebar),
    )
    return (
        MappingProxyType(payload.docs_sidebars),
        MappingProxyType(payload.permalink_to_sidebar),
    )


def lookup_sidebar(index: PermalinkIndex, path: str) -> str | None:
    """Return the sidebar name for an exact ``path`` match, or None."""
    return index.get(path)


def render(tree: SidebarTree) -> list[SidebarEntry]:
    """Flatten ``tree`` into presentation rows by pre-order traversal.

    Categories become header rows without an ``href``; every item sits one
    level deeper than the category that contains it.
    """
    return list(_walk(tree, 0))


def _walk(items: cabc.Iterable[Item], depth: int) -> cabc.Iterator[SidebarEntry]:
    for item in items:
        match item:
            case Link(label=label, href=href):
                yield SidebarEntry(depth=depth, label=label, href=href)
            case Category(label=label, items=children):
                yield SidebarEntry(depth=depth, label=label)
                yield from _walk(children, depth + 1)


def iter_links(items: cabc.Iterable[Item]) -> cabc.Iterator[Link]:
    """Yield every link below ``items`` in declaration order."""
    for item in items:
        if isinstance(item, Link):
            yield item
        else:
            yield from iter_links(item.items)


def is_page_href(href: str) -> bool:
    """Return True when ``href`` targets a documentation page on this site."""
    return bool(href) and not EXTERNAL_HREF_PATTERN.match(href)


def check_consistency(sidebars: Sidebars, index: PermalinkIndex) -> ConsistencyReport:
    """Cross-check sidebar trees against the permalink index.

    Every page link must be indexed under the sidebar that contains it, and
    every index entry must name a sidebar the payload defines. External links
    are exempt.
    """
    report = ConsistencyReport()
    for name, tree in sidebars.items():
        for link in iter_links(tree):
            if not is_page_href(link.href):
                continue
            indexed = index.get(link.href)
            if indexed is None:
                report.unindexed.append((name, link.href))
            elif indexed != name:
                report.mismatched.append((name, link.href, indexed))
    for href, name in index.items():
        if name not in sidebars:
            report.unknown_sidebars.append((href, name))
    return report


@dc.dataclass(frozen=True, slots=True)
class SidebarRegistry:
    """Immutable holder for every sidebar in a payload and its index."""

    sidebars: Sidebars
    permalinks: PermalinkIndex

    @classmethod
    def from_bytes(cls, raw: bytes | str) -> SidebarRegistry:
        """Build a registry from a JSON payload."""
        sidebars, permalinks = load(raw)
        return cls(sidebars=sidebars, permalinks=permalinks)

    @classmethod
    def from_path(cls, path: Path) -> SidebarRegistry:
        """Build a registry from a JSON file or a compiled JavaScript chunk.

        Parameters
        ----------
        path : Path
            File holding either the bare JSON payload or a chunk embedding it
            through ``JSON.parse``.

        Raises
        ------
        FileNotFoundError
            If ``path`` does not exist.
        MalformedDataError
            If no payload can be found or the payload is malformed.
        """
        if not path.exists():
            msg = f"Sidebar payload '{path}' not found."
            raise FileNotFoundError(msg)
        text = path.read_text(encoding="utf-8")
        logger.debug("reading sidebar payload from %s", path)
        return cls.from_bytes(extract_payload(text))

    def names(self) -> list[str]:
        """Return sidebar names in payload order."""
        return list(self.sidebars)

    def sidebar(self, name: str) -> SidebarTree:
        """Return the tree registered under ``name``."""
        try:
            return self.sidebars[name]
        except KeyError as exc:
            available = ", ".join(self.sidebars) or "none"
            msg = f"Unknown sidebar '{name}'. Known sidebars: {available}"
            raise KeyError(msg) from exc

    def lookup_sidebar(self, path: str) -> str | None:
        """Return the sidebar name highlighted for ``path``, or None."""
        return lookup_sidebar(self.permalinks, path)

    def sidebar_for(self, path: str) -> SidebarTree | None:
        """Return the tree to display alongside ``path``, or None."""
        name = self.lookup_sidebar(path)
        if name is None:
            return None
        return self.sidebars.get(name)

    def render(self, name: str) -> list[SidebarEntry]:
        """Flatten the sidebar registered under ``name``."""
        return render(self.sidebar(name))

    def hrefs(self, name: str) -> list[str]:
        """Return page links of sidebar ``name`` in declaration order."""
        links = iter_links(self.sidebar(name))
        return [link.href for link in links if is_page_href(link.href)]

    def check(self) -> ConsistencyReport:
        """Return the consistency report for this registry."""
        return check_consistency(self.sidebars, self.permalinks)


__all__ = [
    "MalformedDataError",
    "SidebarRegistry",
    "check_consistency",
    "is_page_href",
    "iter_links",
    "load",
    "lookup_sidebar",
    "render",
]
