"""Elm source assembly for the generated decoder debugger."""

from __future__ import annotations

from .builder import DecodedCase, DecoderEntry, ElmAssembler, ViewCase
from .constants import DEFAULT_MODULE_NAME

__all__ = ["DEFAULT_MODULE_NAME", "DecodedCase", "DecoderEntry", "ElmAssembler", "ViewCase"]
