"""Derive Elm identifiers and references from exported signatures."""

from __future__ import annotations

import re

from .models import Module, TypeSignature
from .signatures.lexical import ARROW

CONSTRUCTOR_SUFFIX = "_Tag"
# View signatures may start with a type variable, a tuple or a record.
VIEW_PREFIX = "View_"
PAYLOAD_SUFFIX = "_Payload"
SEPARATOR = "_"

_WHITESPACE = re.compile(r"\s+")
_UNSAFE = re.compile(r"[^A-Za-z0-9_]")
_ELM_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"})


def fully_qualified_reference(module: Module, signature: TypeSignature) -> str:
    """Return ``Module.name``, or the bare name for the synthetic empty module."""
    if not module.module_name:
        return signature.name
    return f"{module.module_name}.{signature.name}"


def normalise(text: str) -> str:
    """Collapse signature text into an identifier fragment.

    Whitespace is removed first, so signatures that differ only in spacing
    normalise identically.
    """
    compact = _WHITESPACE.sub("", text)
    compact = compact.replace(ARROW, SEPARATOR)
    return _UNSAFE.sub(SEPARATOR, compact)


def constructor_name(signature: str) -> str:
    """Tag for a whole signature; equal for equal normalised text in any module."""
    return VIEW_PREFIX + normalise(signature) + CONSTRUCTOR_SUFFIX


def payload_constructor_name(signature: str) -> str:
    """Tag for the case that wraps a value of the signature's result type."""
    prefix = signature.split(ARROW, 1)[0]
    return normalise(prefix) + PAYLOAD_SUFFIX


def elm_string(text: str) -> str:
    """Quote ``text`` as an Elm string literal."""
    return f'"{text.translate(_ELM_ESCAPES)}"'


__all__ = [
    "CONSTRUCTOR_SUFFIX",
    "PAYLOAD_SUFFIX",
    "VIEW_PREFIX",
    "constructor_name",
    "elm_string",
    "fully_qualified_reference",
    "normalise",
    "payload_constructor_name",
]
