"""Core data models shared across debug-decoders components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class TypeSignature:
    """A single exported value and its raw type text."""

    name: str
    signature: str


@dataclass(frozen=True)
class Module:
    """Exported signatures of one Elm module, in declaration order."""

    module_name: str
    signatures: Tuple[TypeSignature, ...] = field(default_factory=tuple)

    def with_signatures(self, signatures: Tuple[TypeSignature, ...]) -> "Module":
        """Return a copy of this module restricted to ``signatures``."""
        return Module(module_name=self.module_name, signatures=tuple(signatures))


# Rendering used when no exported view accepts a decoder's result type. The
# generated program defines ``renderAsText`` itself, hence the empty module.
FALLBACK_VIEW = TypeSignature(name="renderAsText", signature="a -> Html.Html msg")
FALLBACK_MODULE = Module(module_name="")


@dataclass(frozen=True)
class PairedEntry:
    """A decoder and the view chosen to render what it decodes."""

    decoder: TypeSignature
    decoder_module: Module
    view: TypeSignature
    view_module: Module

    @property
    def is_fallback(self) -> bool:
        return self.view == FALLBACK_VIEW and self.view_module.module_name == ""


__all__ = ["FALLBACK_MODULE", "FALLBACK_VIEW", "Module", "PairedEntry", "TypeSignature"]
