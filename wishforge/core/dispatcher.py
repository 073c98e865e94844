# =============================================================================
# core/dispatcher.py  —  Tool Registry & Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the ONE list of tools the server offers and routes a call
#   (name + raw argument dict) to the handler bound to that name.
#
# HOW A GENERATION CALL FLOWS:
#   1. call_tool("status_pack", {"theme": "exam", "count": 10})
#   2. the handler normalizes: theme required, count clamped to [3, 7] → 7
#   3. it builds a prompt and asks RemoteGenerator for text
#   4. no backend configured / all failed → templates.status_pack(request)
#   5. one string comes back
#
# TOOL PROFILES:
#   "full" exposes everything.  "lite" is the smaller three-generator
#   deployment (no roast_generator, no pickup_lines).  A disabled tool
#   behaves exactly like an unknown one.
#
# ERRORS:
#   ToolValidationError for a missing required field, UnknownToolError for a
#   bad name.  Remote failures never get here (see core/remote.py).
# =============================================================================

import logging
from typing import Any, Awaitable, Callable, Mapping, Optional

from wishforge import SERVER_NAME, __version__
from wishforge.core import prompts, templates
from wishforge.core.config import Settings
from wishforge.core.errors import ToolValidationError, UnknownPromptError, UnknownToolError
from wishforge.core.identity import extract_token
from wishforge.core.models import (
    ParamSpec,
    PickupRequest,
    RoastRequest,
    ShayariRequest,
    StatusRequest,
    ToolDefinition,
    WishRequest,
)
from wishforge.core.normalize import clamp_int, require, text_arg
from wishforge.core.notes import (
    MIME_TYPE,
    NoteStore,
    note_id_from_uri,
    resource_entry,
    summarize_notes_messages,
)
from wishforge.core.remote import RemoteGenerator

logger = logging.getLogger(__name__)

Arguments = Optional[Mapping[str, Any]]


# =============================================================================
# Tool contracts
# =============================================================================
# Order here is the order clients see in tools/list.
# =============================================================================
TOOL_DEFINITIONS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="validate",
        description=(
            "Validate a bearer token and return the owner phone number as "
            "{country_code}{number} (e.g., 919876543210)"
        ),
        params=(ParamSpec("bearerToken", "string", "Bearer token to validate"),),
    ),
    ToolDefinition(
        name="create_note",
        description="Create a new note",
        params=(
            ParamSpec("title", "string", "Title of the note"),
            ParamSpec("content", "string", "Text content of the note"),
        ),
        required=("title", "content"),
    ),
    ToolDefinition(
        name="server_info",
        description="Describe this server: version, tool profile, available tools and remote backends",
    ),
    ToolDefinition(
        name="wishify",
        description="Generate short, highly-shareable wishes in Indic languages (multiple variants)",
        params=(
            ParamSpec("occasion", "string", "e.g. Birthday, Diwali, Holi, Anniversary"),
            ParamSpec("language", "string", "e.g. Hinglish, Hindi, Marathi, Gujarati, Tamil", "Hinglish"),
            ParamSpec("tone", "string", "sweet | funny | formal", "sweet"),
            ParamSpec("name", "string", "Recipient name to personalize", ""),
            ParamSpec("variantCount", "number", "Number of variants (1-5)", 3),
            ParamSpec("emojiLevel", "number", "0=no emoji, 1=some, 2=lots", 1),
            ParamSpec("length", "string", "short | medium", "short"),
        ),
        required=("occasion",),
    ),
    ToolDefinition(
        name="shayari",
        description="Generate 2-4 line rhyming shayari with optional transliteration",
        params=(
            ParamSpec("theme", "string", "e.g. pyaar, dosti, motivation"),
            ParamSpec("language", "string", "Hindi | Urdu | Punjabi | Hinglish", "Hindi"),
            ParamSpec("variantCount", "number", "Number of variants (1-3)", 2),
            ParamSpec("script", "string", "devanagari | latin (latin gives Hinglish)", "devanagari"),
        ),
        required=("theme",),
    ),
    ToolDefinition(
        name="status_pack",
        description="Generate a pack of crisp WhatsApp Status lines for a theme (high-CTR hooks)",
        params=(
            ParamSpec("theme", "string", "e.g. Monday motivation, exam prep, cricket win"),
            ParamSpec("language", "string", "Hinglish | Hindi | Marathi", "Hinglish"),
            ParamSpec("count", "number", "How many lines (3-7)", 5),
            ParamSpec("style", "string", "clean | emoji-heavy | hashtaggy", "emoji-heavy"),
        ),
        required=("theme",),
    ),
    ToolDefinition(
        name="roast_generator",
        description="Generate friendly, light-hearted roast one-liners about a person or thing",
        params=(
            ParamSpec("target", "string", "Who or what to roast, e.g. a friend's name"),
            ParamSpec("language", "string", "Hinglish | Hindi", "Hinglish"),
            ParamSpec("count", "number", "How many roasts (2-5)", 3),
            ParamSpec("spice", "string", "mild | medium | spicy", "mild"),
        ),
        required=("target",),
    ),
    ToolDefinition(
        name="pickup_lines",
        description="Generate cheesy desi pickup lines (cute, filmy or nerdy)",
        params=(
            ParamSpec("vibe", "string", "cute | filmy | nerdy", "cute"),
            ParamSpec("language", "string", "Hinglish | Hindi", "Hinglish"),
            ParamSpec("name", "string", "Name to address the lines to", ""),
            ParamSpec("count", "number", "How many lines (3-7)", 5),
        ),
    ),
)

LITE_TOOLS = frozenset({"validate", "create_note", "server_info", "wishify", "shayari", "status_pack"})

PROMPTS = ({"name": "summarize_notes", "description": "Summarize all notes"},)


# =============================================================================
# Argument normalization — one function per generation tool
# =============================================================================
# Pure: raw dict in, frozen request out.  Kept outside the Dispatcher so the
# clamping rules can be tested without any settings or backends.
# =============================================================================
def wish_request(args: Arguments) -> WishRequest:
    return WishRequest(
        occasion=require(text_arg(args, "occasion"), "occasion"),
        language=text_arg(args, "language", "Hinglish"),
        tone=text_arg(args, "tone", "sweet"),
        name=text_arg(args, "name").strip(),
        variant_count=clamp_int((args or {}).get("variantCount"), 3, 1, 5),
        emoji_level=clamp_int((args or {}).get("emojiLevel"), 1, 0, 2),
        length=text_arg(args, "length", "short"),
    )


def shayari_request(args: Arguments) -> ShayariRequest:
    return ShayariRequest(
        theme=require(text_arg(args, "theme"), "theme"),
        language=text_arg(args, "language", "Hindi"),
        variant_count=clamp_int((args or {}).get("variantCount"), 2, 1, 3),
        script=text_arg(args, "script", "devanagari"),
    )


def status_request(args: Arguments) -> StatusRequest:
    return StatusRequest(
        theme=require(text_arg(args, "theme"), "theme"),
        language=text_arg(args, "language", "Hinglish"),
        count=clamp_int((args or {}).get("count"), 5, 3, 7),
        style=text_arg(args, "style", "emoji-heavy"),
    )


def roast_request(args: Arguments) -> RoastRequest:
    return RoastRequest(
        target=require(text_arg(args, "target"), "target"),
        language=text_arg(args, "language", "Hinglish"),
        count=clamp_int((args or {}).get("count"), 3, 2, 5),
        spice=text_arg(args, "spice", "mild"),
    )


def pickup_request(args: Arguments) -> PickupRequest:
    return PickupRequest(
        vibe=text_arg(args, "vibe", "cute"),
        language=text_arg(args, "language", "Hinglish"),
        name=text_arg(args, "name").strip(),
        count=clamp_int((args or {}).get("count"), 5, 3, 7),
    )


# =============================================================================
# Dispatcher
# =============================================================================
class Dispatcher:
    """Routes tool calls, resource reads and prompt requests for one server."""

    def __init__(
        self,
        settings: Settings,
        store: Optional[NoteStore] = None,
        remote: Optional[RemoteGenerator] = None,
    ):
        self.settings = settings
        self.store = store if store is not None else NoteStore()
        self.remote = remote if remote is not None else RemoteGenerator.from_settings(settings)
        self._handlers: dict[str, Callable[[Arguments], Awaitable[str]]] = {
            "validate": self._validate,
            "create_note": self._create_note,
            "server_info": self._server_info,
            "wishify": self._wishify,
            "shayari": self._shayari,
            "status_pack": self._status_pack,
            "roast_generator": self._roast_generator,
            "pickup_lines": self._pickup_lines,
        }

    # -------------------------------------------------------------------------
    # Tools
    # -------------------------------------------------------------------------
    def list_tools(self) -> list[ToolDefinition]:
        if self.settings.profile == "lite":
            return [t for t in TOOL_DEFINITIONS if t.name in LITE_TOOLS]
        return list(TOOL_DEFINITIONS)

    def _enabled(self, name: str) -> bool:
        return any(t.name == name for t in self.list_tools())

    async def call_tool(self, name: str, arguments: Arguments = None) -> str:
        """Run the named tool and return its single text result."""
        handler = self._handlers.get(name)
        if handler is None or not self._enabled(name):
            raise UnknownToolError(name)
        if not isinstance(arguments, Mapping):
            arguments = {}
        return await handler(arguments)

    async def _validate(self, args: Arguments) -> str:
        # Non-authenticating on purpose: the answer never depends on the token.
        token = extract_token(args)
        logger.info("validate: token %s", "present" if token else "absent")
        return self.settings.owner_phone

    async def _create_note(self, args: Arguments) -> str:
        # blank values come back as "", so no strip is needed; stored as given
        title = text_arg(args, "title")
        content = text_arg(args, "content")
        if not title or not content:
            raise ToolValidationError("Title and content are required.")
        note = self.store.create(title, content)
        return f"Created note {note.id}: {note.title}"

    async def _server_info(self, args: Arguments) -> str:
        backends = self.remote.configured
        lines = [
            f"{SERVER_NAME} {__version__}",
            f"profile: {self.settings.profile}",
            "tools: " + ", ".join(t.name for t in self.list_tools()),
            "remote backends: " + (", ".join(backends) if backends else "none (templates only)"),
            f"notes: {len(self.store)}",
        ]
        return "\n".join(lines)

    async def _wishify(self, args: Arguments) -> str:
        req = wish_request(args)
        return await self.remote.generate_or_fallback(
            prompts.build_wish_prompt(req), lambda: templates.wishify(req)
        )

    async def _shayari(self, args: Arguments) -> str:
        req = shayari_request(args)
        return await self.remote.generate_or_fallback(
            prompts.build_shayari_prompt(req), lambda: templates.shayari(req)
        )

    async def _status_pack(self, args: Arguments) -> str:
        req = status_request(args)
        return await self.remote.generate_or_fallback(
            prompts.build_status_prompt(req), lambda: templates.status_pack(req)
        )

    async def _roast_generator(self, args: Arguments) -> str:
        req = roast_request(args)
        return await self.remote.generate_or_fallback(
            prompts.build_roast_prompt(req), lambda: templates.roast_generator(req)
        )

    async def _pickup_lines(self, args: Arguments) -> str:
        req = pickup_request(args)
        return await self.remote.generate_or_fallback(
            prompts.build_pickup_prompt(req), lambda: templates.pickup_lines(req)
        )

    # -------------------------------------------------------------------------
    # Resources & prompts (the note store)
    # -------------------------------------------------------------------------
    def list_resources(self) -> list[dict]:
        return [resource_entry(n) for n in self.store.list()]

    def read_resource(self, uri: str) -> dict:
        """{contents: [{uri, mimeType, text}]} or NoteNotFoundError."""
        note = self.store.get(note_id_from_uri(uri))
        return {"contents": [{"uri": uri, "mimeType": MIME_TYPE, "text": note.content}]}

    def list_prompts(self) -> list[dict]:
        return [dict(p) for p in PROMPTS]

    def get_prompt(self, name: str) -> dict:
        if name != "summarize_notes":
            raise UnknownPromptError(name)
        return {"messages": summarize_notes_messages(self.store.list())}
