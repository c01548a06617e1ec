from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest
from ruamel.yaml import YAML

from docsite import cli


def _write_config(site_dir: Path, raw: dict[str, object]) -> Path:
    path = site_dir / "docsite.yaml"
    yaml = YAML(typ="safe")
    yaml.default_flow_style = False
    with path.open("w", encoding="utf-8") as handle:
        yaml.dump(raw, handle)
    return path


def test_check_reports_ok(
    site_dir: Path, raw_config: dict[str, object], capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_config(site_dir, raw_config)
    cli.check(config=config_path)
    out = capsys.readouterr().out
    assert out.strip() == "ok: My Docs -> https://example.github.io/docs/"


def test_check_reports_field_and_exits(
    site_dir: Path, raw_config: dict[str, object], capsys: pytest.CaptureFixture[str]
) -> None:
    raw_config["base_url"] = "docs"
    config_path = _write_config(site_dir, raw_config)
    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config_path)
    assert excinfo.value.code == 1
    assert capsys.readouterr().out.startswith("error: base_url: ")


def test_resolve_writes_descriptor_json(
    site_dir: Path,
    raw_config: dict[str, object],
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config_path = _write_config(site_dir, raw_config)
    output = tmp_path / "build" / "site.json"
    cli.resolve(config=config_path, output=output)

    assert capsys.readouterr().out.startswith("wrote ")
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["origin"] == "https://example.github.io"
    assert payload["base_path"] == "/docs/"
    assert payload["broken_links"]["links"] == "fail"
    assert payload["navbar"]["items"][0]["kind"] == "sidebar"
    sidebar_path = payload["presets"][0]["docs"]["sidebar_path"]
    assert Path(sidebar_path).is_absolute()


def test_resolve_prints_json_to_stdout(
    site_dir: Path, raw_config: dict[str, object], capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_config(site_dir, raw_config)
    cli.resolve(config=config_path)
    payload = json.loads(capsys.readouterr().out)
    assert payload["locales"] == ["en"]
    assert payload["deployment"]["branch"] == "gh-pages"


def test_resolve_reports_field_and_exits(
    site_dir: Path,
    raw_config: dict[str, object],
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    raw_config["base_url"] = "docs"
    config_path = _write_config(site_dir, raw_config)
    output = tmp_path / "site.json"
    with pytest.raises(SystemExit) as excinfo:
        cli.resolve(config=config_path, output=output)
    assert excinfo.value.code == 1
    assert capsys.readouterr().out.startswith("error: base_url: ")
    assert not output.exists()


@pytest.mark.parametrize("command", [cli.check, cli.resolve])
def test_missing_config_file_exits(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], command: typ.Callable[..., None]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        command(config=tmp_path / "missing.yaml")
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert out.startswith("error: ")
    assert "missing.yaml" in out


@pytest.mark.parametrize("command", [cli.check, cli.resolve])
def test_non_mapping_config_file_exits(
    site_dir: Path, capsys: pytest.CaptureFixture[str], command: typ.Callable[..., None]
) -> None:
    config_path = site_dir / "docsite.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        command(config=config_path)
    assert excinfo.value.code == 1
    assert capsys.readouterr().out.startswith("error: ")
