"""Match every decoder with the simple view able to render its result.

Matching is textual: a view qualifies when the text before its single arrow
equals the text after the decoder's leading type token. The first qualifying
view, in module order and then declaration order, wins. Later candidates are
ignored even when they also match, so the outcome depends on the order in
which the interface extractor lists modules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from .models import FALLBACK_MODULE, FALLBACK_VIEW, Module, PairedEntry, TypeSignature
from .signatures import SignatureClassifier


@dataclass(frozen=True)
class PairingSummary:
    """Counts reported after resolving pairs."""

    decoders: int
    paired: int
    fallback: int


def resolve_pairs(
    modules: Sequence[Module], classifier: SignatureClassifier
) -> Tuple[PairedEntry, ...]:
    """Return exactly one entry per decoder, preserving discovery order."""
    modules = tuple(modules)
    views_by_module = tuple(
        (module, classifier.only_simple_views(module).signatures) for module in modules
    )
    entries = []
    for module, decoder in _iter_decoders(modules, classifier):
        match = _first_compatible_view(decoder, views_by_module, classifier)
        if match is None:
            entries.append(PairedEntry(decoder, module, FALLBACK_VIEW, FALLBACK_MODULE))
        else:
            view_module, view = match
            entries.append(PairedEntry(decoder, module, view, view_module))
    return tuple(entries)


def summarise_pairs(pairs: Iterable[PairedEntry]) -> PairingSummary:
    decoders = 0
    fallback = 0
    for entry in pairs:
        decoders += 1
        if entry.is_fallback:
            fallback += 1
    return PairingSummary(decoders=decoders, paired=decoders - fallback, fallback=fallback)


def _iter_decoders(
    modules: Iterable[Module], classifier: SignatureClassifier
) -> Iterator[Tuple[Module, TypeSignature]]:
    for module in modules:
        for signature in classifier.only_decoders(module).signatures:
            yield module, signature


def _first_compatible_view(
    decoder: TypeSignature,
    views_by_module: Iterable[Tuple[Module, Tuple[TypeSignature, ...]]],
    classifier: SignatureClassifier,
) -> Optional[Tuple[Module, TypeSignature]]:
    payload = classifier.decoder_payload(decoder.signature)
    candidates = (
        (module, view)
        for module, views in views_by_module
        for view in views
        if classifier.view_input(view.signature) == payload
    )
    return next(candidates, None)


__all__ = ["PairingSummary", "resolve_pairs", "summarise_pairs"]
