"""Adapter around ``elm-interface-to-json``, which dumps exported signatures."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .logging import get_logger
from .models import Module, TypeSignature

DEFAULT_EXECUTABLE = "elm-interface-to-json"
DEFAULT_MANIFEST = "elm-package.json"

RunResult = Tuple[int, str, str]


class ExtractorError(RuntimeError):
    """Raised when the interface extractor cannot produce signatures."""

    def __init__(self, message: str, exit_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ManifestNotFoundError(FileNotFoundError):
    """Raised when the project directory has no Elm manifest."""


def ensure_manifest(project_path: Path, manifest: str = DEFAULT_MANIFEST) -> Path:
    """Return the manifest path, failing when the project lacks one."""
    manifest_path = project_path / manifest
    if not manifest_path.is_file():
        raise ManifestNotFoundError(
            f"{manifest} did not exist at {project_path}. "
            f"Please give me the path where your {manifest} is!"
        )
    return manifest_path


class InterfaceExtractor:
    """Runs the extractor executable and parses its JSON output."""

    def __init__(
        self,
        executable: str = DEFAULT_EXECUTABLE,
        *,
        runner: Callable[[Sequence[str]], RunResult] | None = None,
    ) -> None:
        self.executable = executable
        self._runner = runner or self._default_runner
        self.logger = get_logger("extractor")

    def extract(self, project_path: Path) -> List[Module]:
        args = [self.executable, "--path", str(project_path)]
        self.logger.debug("Running %s", " ".join(args))
        try:
            returncode, stdout, stderr = self._runner(args)
        except FileNotFoundError as exc:
            raise ExtractorError(
                f"Unable to start {self.executable}. Make sure to install it globally first: "
                f"npm install -g {self.executable}"
            ) from exc

        if stderr.strip() or returncode != 0:
            self.logger.debug("Extractor stderr: %s", stderr.strip())
            raise ExtractorError(
                f"{self.executable} exited with code {returncode}. "
                "Did you run elm-make in the directory already? If not, do so now!",
                exit_code=returncode,
            )

        try:
            payload = json.loads(stdout)
        except json.JSONDecodeError as exc:
            raise ExtractorError(f"{self.executable} produced output that is not JSON: {exc}") from exc

        modules = parse_modules(payload)
        self.logger.debug("Extractor reported %d modules", len(modules))
        return modules

    @staticmethod
    def _default_runner(args: Sequence[str]) -> RunResult:
        completed = subprocess.run(
            list(args),
            check=False,
            capture_output=True,
            text=True,
        )
        return completed.returncode, completed.stdout, completed.stderr


def parse_modules(payload: Any) -> List[Module]:
    """Convert extractor JSON into modules, skipping records of the wrong shape."""
    if not isinstance(payload, list):
        return []
    modules: List[Module] = []
    for record in payload:
        if not isinstance(record, dict):
            continue
        module_name = record.get("moduleName")
        if not isinstance(module_name, str):
            continue
        types = record.get("types")
        signatures = []
        for item in types if isinstance(types, list) else []:
            if not isinstance(item, dict):
                continue
            name = item.get("name")
            signature = item.get("signature")
            if isinstance(name, str) and isinstance(signature, str):
                signatures.append(TypeSignature(name=name, signature=signature))
        modules.append(Module(module_name=module_name, signatures=tuple(signatures)))
    return modules


__all__ = [
    "ExtractorError",
    "InterfaceExtractor",
    "ManifestNotFoundError",
    "ensure_manifest",
    "parse_modules",
]
