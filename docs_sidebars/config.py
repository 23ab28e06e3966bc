"""Site-level configuration loader for the sidebars command."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ._constants import DEFAULT_SIDEBAR

DEFAULT_HTML_OUTPUT = Path("public/sidebar.html")


class SiteConfigError(ValueError):
    """Raised when the sidebars configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SidebarSiteConfig:
    """Where the sidebar payload lives and how to preview it."""

    payload: Path
    sidebar: str = DEFAULT_SIDEBAR
    html_output: Path = DEFAULT_HTML_OUTPUT


def load_site_config(path: Path) -> SidebarSiteConfig:
    """Load the YAML configuration describing the sidebar payload.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/sidebars.yaml``). Relative paths inside it resolve against
        the file's own directory.

    Returns
    -------
    SidebarSiteConfig
        Parsed configuration with absolute payload and output paths.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top level is not a mapping or ``payload`` is missing.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_site_config(Path("config/sidebars.yaml"))  # doctest: +SKIP
    >>> config.sidebar  # doctest: +SKIP
    'docs'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    base_dir = path.parent
    payload = _optional_str(raw.get("payload"))
    if not payload:
        msg = "Sidebar configuration requires a 'payload' path."
        raise SiteConfigError(msg)
    sidebar = _optional_str(raw.get("sidebar")) or DEFAULT_SIDEBAR
    html_output = _optional_str(raw.get("html_output"))

    return SidebarSiteConfig(
        payload=_resolve(base_dir, payload),
        sidebar=sidebar,
        html_output=_resolve(base_dir, html_output or str(DEFAULT_HTML_OUTPUT)),
    )


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve(base_dir: Path, value: str) -> Path:
    candidate = Path(value).expanduser()
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


__all__ = [
    "DEFAULT_HTML_OUTPUT",
    "SidebarSiteConfig",
    "SiteConfigError",
    "load_site_config",
]
