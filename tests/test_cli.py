"""Tests for the ``sidebars`` command functions, called directly with a temp config."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from docs_sidebars import cli


def _write_config(tmp_path: Path, payload: Path) -> Path:
    path = tmp_path / "sidebars.yaml"
    path.write_text(
        f"""
payload: {payload}
sidebar: docs
html_output: public/sidebar.html
""".strip()
        + "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def config_path(tmp_path: Path, bundle_path: Path) -> Path:
    return _write_config(tmp_path, bundle_path)


def test_lookup_known_path(config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.lookup("/PopGen.jl/docs/api/api", config=config_path)
    assert capsys.readouterr().out == "docs\n"


def test_lookup_unknown_path(
    config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.lookup("/unknown/path", config=config_path)
    assert capsys.readouterr().out == "/unknown/path: no sidebar\n"


def test_outline_indents_by_depth(
    config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.outline(config=config_path)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Getting Started"
    assert lines[1] == "  Installation -> /PopGen.jl/docs/getting_started/install"
    assert len(lines) == 36


def test_check_ok(config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.check(config=config_path)
    assert capsys.readouterr().out == "ok\n"


def test_check_reports_problems(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    payload = tmp_path / "payload.json"
    payload.write_text(
        json.dumps(
            {
                "docsSidebars": {
                    "docs": [
                        {
                            "type": "category",
                            "label": "Cat",
                            "items": [{"type": "link", "label": "A", "href": "/a"}],
                        }
                    ]
                },
                "permalinkToSidebar": {},
            }
        ),
        encoding="utf-8",
    )
    config = _write_config(tmp_path, payload)
    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config)
    assert excinfo.value.code == 1
    assert "'/a' is not in the permalink index" in capsys.readouterr().out


def test_html_writes_preview(
    config_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.html(active="/PopGen.jl/docs/io/vcf", config=config_path)
    output = tmp_path / "public" / "sidebar.html"
    assert output.exists(), "expected the preview at the configured html_output"
    assert "menu__link--active" in output.read_text(encoding="utf-8")
    assert capsys.readouterr().out.startswith("wrote ")


def test_html_output_override(config_path: Path, tmp_path: Path) -> None:
    target = tmp_path / "elsewhere" / "nav.html"
    cli.html(output=target, config=config_path)
    assert target.exists()


def test_html_unknown_sidebar(config_path: Path) -> None:
    with pytest.raises(KeyError):
        cli.html(sidebar="api", config=config_path)
