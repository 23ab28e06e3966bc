"""Shared fixtures for the sidebar payload tests.

The fixtures point at two copies of the PopGen.jl documentation sidebar: the
compiled JavaScript chunk as shipped by the built site, and the bare JSON
document extracted from it.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from docs_sidebars.registry import SidebarRegistry

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(scope="session")
def bundle_path() -> Path:
    """Return the path to the compiled sidebar chunk."""
    return FIXTURES_DIR / "popgen_bundle.js"


@pytest.fixture(scope="session")
def payload_path() -> Path:
    """Return the path to the bare JSON payload."""
    return FIXTURES_DIR / "popgen_sidebars.json"


@pytest.fixture(scope="session")
def payload_bytes(payload_path: Path) -> bytes:
    """Return the raw JSON payload bytes."""
    return payload_path.read_bytes()


@pytest.fixture(scope="session")
def registry(payload_bytes: bytes) -> SidebarRegistry:
    """Return a registry loaded from the bare JSON payload."""
    return SidebarRegistry.from_bytes(payload_bytes)
