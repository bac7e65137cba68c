"""Single-pass pipeline from extracted modules to generated source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .assembler import ElmAssembler
from .models import Module, PairedEntry
from .pairing import resolve_pairs
from .signatures import SignatureClassifier


@dataclass(frozen=True)
class Pipeline:
    """Every intermediate value produced while generating one module."""

    modules: Tuple[Module, ...]
    decoders: Tuple[Module, ...]
    views: Tuple[Module, ...]
    pairs: Tuple[PairedEntry, ...]
    source: str

    @property
    def decoder_count(self) -> int:
        return sum(len(module.signatures) for module in self.decoders)

    @property
    def view_count(self) -> int:
        return sum(len(module.signatures) for module in self.views)


def run_pipeline(
    modules: Iterable[Module],
    *,
    classifier: SignatureClassifier,
    assembler: ElmAssembler,
    exclude_modules: Iterable[str] = (),
) -> Pipeline:
    excluded = set(exclude_modules)
    kept = tuple(module for module in modules if module.module_name not in excluded)
    decoders = classifier.filter_modules(kept, classifier.only_decoders)
    views = classifier.filter_modules(kept, classifier.only_simple_views)
    pairs = resolve_pairs(kept, classifier)
    source = assembler.assemble(kept, pairs, classifier=classifier)
    return Pipeline(
        modules=kept,
        decoders=decoders,
        views=views,
        pairs=pairs,
        source=source,
    )


__all__ = ["Pipeline", "run_pipeline"]
