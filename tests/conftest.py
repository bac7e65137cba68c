from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Iterable

import pytest

from debugdecoders.models import Module
from debugdecoders.signatures import LexicalClassifier
from tests._fixtures.modules import interface_payload


@pytest.fixture
def classifier() -> LexicalClassifier:
    return LexicalClassifier()


@pytest.fixture
def elm_project(tmp_path: Path) -> Path:
    """An Elm 0.18 project directory containing only its manifest."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "elm-package.json").write_text('{"version": "1.0.0"}\n', encoding="utf-8")
    return project


@pytest.fixture
def fake_runner() -> Callable[..., Callable]:
    """Build an extractor runner that reports ``modules`` and records its calls."""

    def _build(modules: Iterable[Module] = (), *, returncode: int = 0, stderr: str = "", calls=None):
        stdout = json.dumps(interface_payload(modules))

        def _runner(args):
            if calls is not None:
                calls.append(list(args))
            return returncode, stdout, stderr

        return _runner

    return _build
