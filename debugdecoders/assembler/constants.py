"""Shared constants for assembling the generated Elm module."""

from __future__ import annotations

DEFAULT_MODULE_NAME = "DebugDecoders"
TEMPLATE_NAME = "debug_decoders.elm.j2"

# Modules the generated program always needs for its own UI and decoding.
BASE_IMPORTS: tuple[str, ...] = (
    "Dict",
    "Html",
    "Html.Attributes",
    "Html.Events",
    "Json.Decode",
)

NO_DECODERS_CONSTRUCTOR = "NoDecodersFound_Payload"
NO_VIEWS_CONSTRUCTOR = "NoViewsFound_Tag"
NO_DECODERS_MESSAGE = "No decoders were found in this project."
NO_VIEWS_MESSAGE = "No simple views were found in this project."

PAYLOAD_VARIABLE = "value"

# Paired views produce their own message type; the program maps it to this no-op.
IGNORE_VIEW_MSG = "IgnoreViewMsg"


__all__ = [
    "BASE_IMPORTS",
    "DEFAULT_MODULE_NAME",
    "IGNORE_VIEW_MSG",
    "NO_DECODERS_CONSTRUCTOR",
    "NO_DECODERS_MESSAGE",
    "NO_VIEWS_CONSTRUCTOR",
    "NO_VIEWS_MESSAGE",
    "PAYLOAD_VARIABLE",
    "TEMPLATE_NAME",
]
