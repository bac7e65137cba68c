"""Purely textual signature classification.

Elm interfaces arrive as plain strings such as ``Json.Decode.Decoder Int`` or
``Int -> Html.Html msg``. Nothing here understands types: decoders and views
are recognised by their leading tokens and by counting arrows. Unrecognised
text is simply neither, so every function is total over arbitrary input.
"""

from __future__ import annotations

import re

from .base import SignatureClassifier

ARROW = "->"
DEFAULT_DECODER_TYPE = "Json.Decode.Decoder"
DEFAULT_VIEW_TYPE = "Html.Html"

_WHITESPACE = re.compile(r"\s")
_RECORD_FIELD = re.compile(r"\b[a-z][A-Za-z0-9_]*\s*:")
_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")


class LexicalClassifier(SignatureClassifier):
    """Classifies signatures by comparing whitespace-delimited tokens."""

    def __init__(
        self,
        decoder_type: str = DEFAULT_DECODER_TYPE,
        view_type: str = DEFAULT_VIEW_TYPE,
    ) -> None:
        self.decoder_type = decoder_type
        self.view_type = view_type

    def is_decoder(self, signature: str) -> bool:
        # An arrow means a function, which is never a bare decoder value.
        if ARROW in signature:
            return False
        return _leading_token(signature) == self.decoder_type

    def is_simple_view(self, signature: str) -> bool:
        pieces = [piece.strip() for piece in signature.split(ARROW)]
        if len(pieces) not in (1, 2):
            return False
        result_tokens = pieces[-1].split()
        if len(result_tokens) < 2:
            return False
        return result_tokens[0] == self.view_type

    def decoder_payload(self, signature: str) -> str:
        parts = _WHITESPACE.split(signature, maxsplit=1)
        if len(parts) < 2:
            return ""
        return parts[1].strip()

    def view_input(self, signature: str) -> str | None:
        pieces = signature.split(ARROW)
        if len(pieces) != 2:
            return None
        return pieces[0].strip()


def type_variables(text: str) -> list[str]:
    """Unqualified lowercase names in a type, ignoring record field labels."""
    without_labels = _RECORD_FIELD.sub(" ", text)
    names = (name for name in _NAME.findall(without_labels) if name[0].islower() and "." not in name)
    return list(dict.fromkeys(names))


def _leading_token(signature: str) -> str:
    # Splitting on the first whitespace character keeps a leading space
    # significant: " Json.Decode.Decoder Int" has an empty first token.
    return _WHITESPACE.split(signature, maxsplit=1)[0]


__all__ = [
    "ARROW",
    "DEFAULT_DECODER_TYPE",
    "DEFAULT_VIEW_TYPE",
    "LexicalClassifier",
    "type_variables",
]
