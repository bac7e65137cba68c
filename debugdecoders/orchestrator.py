"""Coordinates extraction, classification, pairing and file output."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .assembler import ElmAssembler
from .config import DebugDecodersConfig, load_config
from .extractor import InterfaceExtractor, ensure_manifest
from .logging import get_logger
from .pairing import summarise_pairs
from .pipeline import run_pipeline
from .signatures import LexicalClassifier, SignatureClassifier


@dataclass
class GenerationOutcome:
    """Result of generating the debugger module for one project."""

    path: Path
    source: str
    decoder_count: int
    view_count: int
    fallback_count: int
    dry_run: bool


class Orchestrator:
    """Runs the generation pipeline for an Elm project directory."""

    def __init__(
        self,
        extractor: InterfaceExtractor | None = None,
        classifier: SignatureClassifier | None = None,
        assembler: ElmAssembler | None = None,
    ) -> None:
        self._extractor = extractor
        self._classifier = classifier
        self._assembler = assembler
        self.logger = get_logger("orchestrator")

    def run(
        self,
        path: str | Path,
        *,
        output: str | Path | None = None,
        dry_run: bool = False,
    ) -> GenerationOutcome:
        """Generate the debugger module for the project at ``path``."""
        project_path = Path(path).expanduser().resolve()
        self.logger.info("Looking for decoders in %s", project_path)
        config = load_config(project_path)

        ensure_manifest(project_path, config.extractor.manifest)
        extractor = self._extractor or InterfaceExtractor(config.extractor.executable)
        modules = extractor.extract(project_path)
        self.logger.debug("Extracted %d modules", len(modules))

        classifier = self._resolve_classifier(config)
        pipeline = run_pipeline(
            modules,
            classifier=classifier,
            assembler=self._resolve_assembler(config, classifier),
            exclude_modules=config.exclude_modules,
        )
        summary = summarise_pairs(pipeline.pairs)
        self.logger.info(
            "Found %d decoders and %d simple views (%d paired, %d rendered as text)",
            pipeline.decoder_count,
            pipeline.view_count,
            summary.paired,
            summary.fallback,
        )

        target = self._resolve_output(project_path, config, output)
        if dry_run:
            self.logger.info("Dry run: not writing %s", target)
        else:
            self.logger.info("Creating a file at %s", target)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(pipeline.source, encoding="utf-8")

        return GenerationOutcome(
            path=target,
            source=pipeline.source,
            decoder_count=pipeline.decoder_count,
            view_count=pipeline.view_count,
            fallback_count=summary.fallback,
            dry_run=dry_run,
        )

    def _resolve_classifier(self, config: DebugDecodersConfig) -> SignatureClassifier:
        if self._classifier is not None:
            return self._classifier
        return LexicalClassifier(decoder_type=config.types.decoder, view_type=config.types.view)

    def _resolve_assembler(
        self, config: DebugDecodersConfig, classifier: SignatureClassifier
    ) -> ElmAssembler:
        if self._assembler is not None:
            return self._assembler
        return ElmAssembler(
            config.templates_dir,
            module_name=config.output.module_name,
            classifier=classifier,
        )

    @staticmethod
    def _resolve_output(
        project_path: Path, config: DebugDecodersConfig, output: str | Path | None
    ) -> Path:
        if output is None:
            return project_path / config.output.filename
        target = Path(output).expanduser()
        if not target.is_absolute():
            target = project_path / target
        return target


__all__ = ["GenerationOutcome", "Orchestrator"]
