# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of everything that flows through the
# dispatcher.  They carry almost no behavior.
#
# THREE FAMILIES:
#   1. Tool contracts   → ParamSpec, ToolDefinition (what clients discover)
#   2. Requests         → one frozen dataclass per generation tool, holding
#                         arguments AFTER defaulting and clamping
#   3. Notes            → the small in-memory note store's record type
#
# WHY FROZEN?
#   A ToolDefinition is declared once at import and must never change under
#   a running server.  A request is built once per call and then only read
#   by the template and prompt builders.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Optional


# -----------------------------------------------------------------------------
# ParamSpec — one entry of a tool's inputSchema
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ParamSpec:
    """A single declared tool parameter."""

    name: str
    type: str                          # JSON-schema type: "string", "number", "object"
    description: str
    default: Optional[Any] = None      # None → no "default" key in the schema

    def to_schema(self) -> dict:
        schema: dict = {"type": self.type, "description": self.description}
        if self.default is not None:
            schema["default"] = self.default
        return schema


# -----------------------------------------------------------------------------
# ToolDefinition — the discoverable contract of one tool
# -----------------------------------------------------------------------------
# Clients call tools/list and get exactly this: name, description and a
# JSON-schema-like inputSchema.  The schema is ADVISORY: handlers still
# coerce every argument themselves (see core/normalize.py).
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDefinition:
    """Name, description and input schema of a callable tool."""

    name: str
    description: str
    params: tuple[ParamSpec, ...] = ()
    required: tuple[str, ...] = ()

    def input_schema(self) -> dict:
        return {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self.params},
            "required": list(self.required),
        }


# -----------------------------------------------------------------------------
# Generation requests — normalized arguments, one type per tool
# -----------------------------------------------------------------------------
# Every field here is already defaulted, trimmed and clamped.  The template
# functions trust these values completely.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class WishRequest:
    occasion: str                      # required, e.g. "Diwali"
    language: str = "Hinglish"
    tone: str = "sweet"                # sweet | funny | formal
    name: str = ""                     # recipient, "" → not personalized
    variant_count: int = 3             # clamped to [1, 5]
    emoji_level: int = 1               # clamped to [0, 2]
    length: str = "short"              # short | medium


@dataclass(frozen=True)
class ShayariRequest:
    theme: str                         # required, e.g. "dosti"
    language: str = "Hindi"
    variant_count: int = 2             # clamped to [1, 3]
    script: str = "devanagari"         # devanagari | latin


@dataclass(frozen=True)
class StatusRequest:
    theme: str                         # required, e.g. "exam"
    language: str = "Hinglish"
    count: int = 5                     # clamped to [3, 7]
    style: str = "emoji-heavy"         # clean | emoji-heavy | hashtaggy


@dataclass(frozen=True)
class RoastRequest:
    target: str                        # required: who/what gets roasted
    language: str = "Hinglish"
    count: int = 3                     # clamped to [2, 5]
    spice: str = "mild"                # mild | medium | spicy


@dataclass(frozen=True)
class PickupRequest:
    vibe: str = "cute"                 # cute | filmy | nerdy
    language: str = "Hinglish"
    name: str = ""
    count: int = 5                     # clamped to [3, 7]


# -----------------------------------------------------------------------------
# Note — the ancillary resource type
# -----------------------------------------------------------------------------
@dataclass
class Note:
    """A text note, addressable as note:///<id>."""

    id: str                            # sequential numeric string: "1", "2", ...
    title: str
    content: str
