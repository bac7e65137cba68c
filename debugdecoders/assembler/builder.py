"""Renders the DebugDecoders Elm module from classified signatures."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..models import FALLBACK_MODULE, FALLBACK_VIEW, Module, PairedEntry
from ..naming import (
    constructor_name,
    elm_string,
    fully_qualified_reference,
    payload_constructor_name,
)
from ..pairing import resolve_pairs
from ..signatures import LexicalClassifier, SignatureClassifier, type_variables
from .constants import (
    BASE_IMPORTS,
    DEFAULT_MODULE_NAME,
    IGNORE_VIEW_MSG,
    NO_DECODERS_CONSTRUCTOR,
    NO_DECODERS_MESSAGE,
    NO_VIEWS_CONSTRUCTOR,
    NO_VIEWS_MESSAGE,
    PAYLOAD_VARIABLE,
    TEMPLATE_NAME,
)


@dataclass(frozen=True)
class DecoderEntry:
    """One ``decodersByName`` row: lookup key and the wrapped decoder."""

    key: str
    wrapper: str


@dataclass(frozen=True)
class DecodedCase:
    """A ``DecodedValue`` constructor and the branches dispatching on it."""

    name: str
    declaration: str
    pattern: str
    render: str
    summary: str
    view_tag: str


@dataclass(frozen=True)
class ViewCase:
    """A ``KnownView`` constructor and the signature it stands for."""

    name: str
    signature: str


class ElmAssembler:
    """Turns discovered modules and resolved pairs into Elm source text.

    Every helper accepts an optional classifier; when omitted the assembler's
    own is used. ``assemble`` threads one classifier through all of them so
    imports, view cases and pairs always agree.
    """

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        module_name: str = DEFAULT_MODULE_NAME,
        classifier: SignatureClassifier | None = None,
    ) -> None:
        self.templates_dir = templates_dir
        self.module_name = module_name
        self.classifier = classifier or LexicalClassifier()
        self._env = self._create_env(templates_dir)

    def assemble(
        self,
        modules: Sequence[Module],
        pairs: Optional[Sequence[PairedEntry]] = None,
        *,
        classifier: SignatureClassifier | None = None,
    ) -> str:
        """Return the generated module; never fails on odd signature text."""
        classifier = classifier or self.classifier
        modules = tuple(modules)
        if pairs is None:
            pairs = resolve_pairs(modules, classifier)

        template = self._env.get_template(TEMPLATE_NAME)
        return template.render(
            module_name=self.module_name,
            base_imports=BASE_IMPORTS,
            imports=self.imports(modules, pairs, classifier=classifier),
            decoder_entries=self.decoder_entries(pairs, classifier=classifier),
            decoded_cases=self.decoded_cases(pairs, classifier=classifier),
            view_cases=self.view_cases(modules, classifier=classifier),
            fallback_name=FALLBACK_VIEW.name,
            fallback_signature=FALLBACK_VIEW.signature,
            ignore_view_msg=IGNORE_VIEW_MSG,
        )

    def imports(
        self,
        modules: Iterable[Module],
        pairs: Iterable[PairedEntry],
        *,
        classifier: SignatureClassifier | None = None,
    ) -> List[str]:
        """Module names to import, first-seen order, each listed once."""
        classifier = classifier or self.classifier
        names: Dict[str, None] = {}
        for module in modules:
            if classifier.only_decoders_and_views(module).signatures:
                names.setdefault(module.module_name, None)
        for entry in pairs:
            names.setdefault(entry.decoder_module.module_name, None)
            names.setdefault(entry.view_module.module_name, None)
        return [name for name in names if name and name not in BASE_IMPORTS]

    def decoder_entries(
        self,
        pairs: Iterable[PairedEntry],
        *,
        classifier: SignatureClassifier | None = None,
    ) -> List[DecoderEntry]:
        classifier = classifier or self.classifier
        entries: List[DecoderEntry] = []
        for entry in pairs:
            reference = fully_qualified_reference(entry.decoder_module, entry.decoder)
            constructor = payload_constructor_name(entry.decoder.signature)
            payload = classifier.decoder_payload(entry.decoder.signature)
            if not payload:
                constructor = f"(always {constructor})"
            elif type_variables(payload):
                constructor = f"(toString >> {constructor})"
            entries.append(
                DecoderEntry(
                    key=elm_string(reference),
                    wrapper=f"Json.Decode.map {constructor} {reference}",
                )
            )
        return entries

    def decoded_cases(
        self,
        pairs: Iterable[PairedEntry],
        *,
        classifier: SignatureClassifier | None = None,
    ) -> List[DecodedCase]:
        """One case per distinct constructor; the first decoder to claim a name wins."""
        classifier = classifier or self.classifier
        cases: Dict[str, DecodedCase] = {}
        for entry in pairs:
            name = payload_constructor_name(entry.decoder.signature)
            if name not in cases:
                cases[name] = _decoded_case(name, entry, classifier)
        if not cases:
            message = elm_string(NO_DECODERS_MESSAGE)
            cases[NO_DECODERS_CONSTRUCTOR] = DecodedCase(
                name=NO_DECODERS_CONSTRUCTOR,
                declaration=NO_DECODERS_CONSTRUCTOR,
                pattern=NO_DECODERS_CONSTRUCTOR,
                render=f"Html.text {message}",
                summary=message,
                view_tag="Nothing",
            )
        return list(cases.values())

    def view_cases(
        self,
        modules: Iterable[Module],
        *,
        classifier: SignatureClassifier | None = None,
    ) -> List[ViewCase]:
        classifier = classifier or self.classifier
        cases: Dict[str, ViewCase] = {}
        for module in modules:
            for view in classifier.only_simple_views(module).signatures:
                name = constructor_name(view.signature)
                cases.setdefault(name, ViewCase(name=name, signature=elm_string(view.signature)))
        if not cases:
            cases[NO_VIEWS_CONSTRUCTOR] = ViewCase(
                name=NO_VIEWS_CONSTRUCTOR, signature=elm_string(NO_VIEWS_MESSAGE)
            )
        return list(cases.values())

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        # A project templates directory shadows the bundled template.
        search_path = [str(templates_dir)] if templates_dir else []
        search_path.append(str(Path(__file__).with_name("templates")))
        return Environment(
            loader=FileSystemLoader(list(dict.fromkeys(search_path))),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )


def _decoded_case(name: str, entry: PairedEntry, classifier: SignatureClassifier) -> DecodedCase:
    payload = classifier.decoder_payload(entry.decoder.signature)
    label = elm_string(entry.decoder.signature)
    if not payload:
        return DecodedCase(
            name=name,
            declaration=name,
            pattern=name,
            render=f"Html.text {label}",
            summary=label,
            view_tag="Nothing",
        )

    pattern = f"{name} {PAYLOAD_VARIABLE}"
    prefix = elm_string(entry.decoder.signature + ": ")
    if type_variables(payload):
        # Generic payloads cannot appear in DecodedValue; they travel as text.
        return DecodedCase(
            name=name,
            declaration=f"{name} String",
            pattern=pattern,
            render=f"Html.text {PAYLOAD_VARIABLE}",
            summary=f"{prefix} ++ {PAYLOAD_VARIABLE}",
            view_tag="Nothing",
        )

    if entry.is_fallback:
        render = f"{fully_qualified_reference(FALLBACK_MODULE, FALLBACK_VIEW)} {PAYLOAD_VARIABLE}"
        view_tag = "Nothing"
    else:
        view_reference = fully_qualified_reference(entry.view_module, entry.view)
        render = f"Html.map (always {IGNORE_VIEW_MSG}) ({view_reference} {PAYLOAD_VARIABLE})"
        view_tag = f"Just {constructor_name(entry.view.signature)}"
    return DecodedCase(
        name=name,
        declaration=f"{name} {_parenthesise(payload)}",
        pattern=pattern,
        render=render,
        summary=f"{prefix} ++ toString {PAYLOAD_VARIABLE}",
        view_tag=view_tag,
    )


def _parenthesise(payload: str) -> str:
    if payload.startswith("(") and payload.endswith(")"):
        return payload
    if len(payload.split()) == 1:
        return payload
    return f"({payload})"


__all__ = ["DecodedCase", "DecoderEntry", "ElmAssembler", "ViewCase"]
