"""Base class for signature classifiers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Tuple

from ..models import Module


class SignatureClassifier(ABC):
    """Decides which exported signatures are decoders and which are simple views.

    Subclasses answer the predicates and expose the payload and input types
    used for pairing. Module filtering is shared, so a type-aware classifier
    can replace the lexical one without changes to the pairing resolver or
    the assembler.
    """

    @abstractmethod
    def is_decoder(self, signature: str) -> bool:
        """Return True when ``signature`` denotes a decoder value."""

    @abstractmethod
    def is_simple_view(self, signature: str) -> bool:
        """Return True when ``signature`` denotes a value or one-argument function producing HTML."""

    @abstractmethod
    def decoder_payload(self, signature: str) -> str:
        """Return the type a decoder signature produces."""

    @abstractmethod
    def view_input(self, signature: str) -> str | None:
        """Return the argument type of a simple view, or None when it takes no argument."""

    def is_decoder_or_view(self, signature: str) -> bool:
        return self.is_decoder(signature) or self.is_simple_view(signature)

    def only_decoders(self, module: Module) -> Module:
        return _keep(module, self.is_decoder)

    def only_simple_views(self, module: Module) -> Module:
        return _keep(module, self.is_simple_view)

    def only_decoders_and_views(self, module: Module) -> Module:
        return _keep(module, self.is_decoder_or_view)

    @staticmethod
    def filter_modules(
        modules: Iterable[Module], selector: Callable[[Module], Module]
    ) -> Tuple[Module, ...]:
        """Apply a module-level filter such as ``only_decoders`` to every module."""
        return tuple(selector(module) for module in modules)


def _keep(module: Module, predicate: Callable[[str], bool]) -> Module:
    return module.with_signatures(
        tuple(item for item in module.signatures if predicate(item.signature))
    )
