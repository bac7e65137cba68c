"""Signature classifiers used to find decoders and simple views."""

from __future__ import annotations

from .base import SignatureClassifier
from .lexical import ARROW, DEFAULT_DECODER_TYPE, DEFAULT_VIEW_TYPE, LexicalClassifier, type_variables

__all__ = [
    "ARROW",
    "DEFAULT_DECODER_TYPE",
    "DEFAULT_VIEW_TYPE",
    "LexicalClassifier",
    "SignatureClassifier",
    "type_variables",
]
