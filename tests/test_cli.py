"""CLI parser and exit status tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from debugdecoders import cli
from debugdecoders.cli import _build_parser
from debugdecoders.extractor import ExtractorError, ManifestNotFoundError
from debugdecoders.orchestrator import GenerationOutcome


def test_cli_defaults_path_to_current_directory(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    args = _build_parser().parse_args([])
    assert Path(args.path).resolve() == tmp_path.resolve()
    assert args.output is None
    assert args.dry_run is False
    assert args.verbose is False


def test_cli_accepts_short_flags() -> None:
    args = _build_parser().parse_args(["-p", "app", "-o", "Debug.elm", "-v", "--dry-run"])
    assert args.path == "app"
    assert args.output == "Debug.elm"
    assert args.verbose is True
    assert args.dry_run is True


def _install_orchestrator(monkeypatch, run) -> None:
    class FakeOrchestrator:
        def run(self, path, *, output=None, dry_run=False):
            return run(path, output, dry_run)

    monkeypatch.setattr(cli, "Orchestrator", FakeOrchestrator)
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)


def test_main_reports_created_file(monkeypatch, capsys, tmp_path: Path) -> None:
    target = tmp_path / "DebugDecoders.elm"

    def run(path, output, dry_run):
        return GenerationOutcome(target, "module DebugDecoders\n", 1, 0, 1, dry_run)

    _install_orchestrator(monkeypatch, run)

    cli.main(["-p", str(tmp_path)])

    out = capsys.readouterr().out
    assert str(target.name) in out
    assert "Open it with elm-reactor!" in out


def test_main_prints_source_on_dry_run(monkeypatch, capsys, tmp_path: Path) -> None:
    def run(path, output, dry_run):
        return GenerationOutcome(tmp_path / "X.elm", "module DebugDecoders\n", 0, 0, 0, dry_run)

    _install_orchestrator(monkeypatch, run)

    cli.main(["--dry-run"])

    assert capsys.readouterr().out == "module DebugDecoders\n"


def test_main_exits_one_when_manifest_missing(monkeypatch) -> None:
    def run(path, output, dry_run):
        raise ManifestNotFoundError("elm-package.json did not exist")

    _install_orchestrator(monkeypatch, run)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 1


def test_main_propagates_extractor_exit_code(monkeypatch) -> None:
    def run(path, output, dry_run):
        raise ExtractorError("boom", exit_code=4)

    _install_orchestrator(monkeypatch, run)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 4


def test_main_exits_one_when_extractor_cannot_start(monkeypatch) -> None:
    def run(path, output, dry_run):
        raise ExtractorError("missing")

    _install_orchestrator(monkeypatch, run)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 1
