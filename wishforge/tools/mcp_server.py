# =============================================================================
# tools/mcp_server.py  —  FastMCP Server (tools, resources, prompt, health)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds a FastMCP server around a core Dispatcher.  Each server gets its
#   own Dispatcher, so its own note store: two servers never share notes.
#
# HOW A TOOL CALL FLOWS:
#   1. A client sends tools/call {name: "wishify", arguments: {...}}
#   2. FastMCP finds the DispatchedTool registered under that name
#   3. DispatchedTool.run() hands the RAW arguments to Dispatcher.call_tool
#   4. The text comes back as a single TextContent block
#   5. A WishForgeError becomes a ToolError → isError result with the message
#
# WHY NOT @mcp.tool() ON TYPED FUNCTIONS?
#   FastMCP would derive the schema from type hints and reject a count of
#   "ten" before our code ever saw it.  Our contract is the opposite: the
#   schema is advisory and every handler coerces and clamps on its own.  So
#   each tool carries its hand-written schema and receives arguments as-is.
#
# HTTP SURFACE (when run with the HTTP transport, see main.py):
#   /mcp            → streamable MCP endpoint
#   /sse, /messages/ → legacy SSE transport
#   /  and /healthz → "OK" (plain text) for load-balancer probes
#   anything else   → 404 from Starlette
# =============================================================================

import json
import logging
import sys
from typing import Any, Callable, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ResourceError, ToolError
from fastmcp.prompts import Prompt
from fastmcp.resources import Resource
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import PromptMessage, TextContent
from pydantic import Field
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from wishforge import SERVER_NAME, __version__
from wishforge.core.config import Settings
from wishforge.core.dispatcher import Dispatcher
from wishforge.core.errors import NoteNotFoundError, WishForgeError
from wishforge.core.identity import AUTH_HEADER_KEYS, TOKEN_ALIASES, extract_token
from wishforge.core.models import ToolDefinition
from wishforge.core.notes import MIME_TYPE, note_uri, resource_entry

logger = logging.getLogger("wishforge.mcp")

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because in stdio mode the MCP messages travel over
# STDOUT.  A log line on stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + arguments)
#     - GREEN for responses
#     - YELLOW for intermediate status (errors, new resources)
# =============================================================================
_CYAN = "\033[36m"     # Requests
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status
_RESET = "\033[0m"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


_REDACTED_KEYS = frozenset(TOKEN_ALIASES + AUTH_HEADER_KEYS + ("headers",))


def _log_request(tool_name: str, params: dict) -> None:
    """Log an incoming tool call with its arguments in CYAN (tokens redacted)."""
    # only validate reads tokens; its any-string fallback would match any field
    token = extract_token(params) if tool_name == "validate" else ""

    def shown(key: str, value: Any) -> str:
        if key in _REDACTED_KEYS or (token and isinstance(value, str) and token in value):
            return "***"
        return repr(value)

    param_str = ", ".join(f"{k}={shown(k, v)}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the tool's text (JSON-escaped, one line) in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(text, ensure_ascii=False)}{_RESET}")
    return text


# =============================================================================
# DispatchedTool — one MCP tool backed by the core Dispatcher
# =============================================================================
class DispatchedTool(Tool):
    """An MCP tool whose schema and behavior come from a ToolDefinition."""

    dispatcher: Any = Field(default=None, exclude=True)

    @classmethod
    def from_definition(cls, definition: ToolDefinition, dispatcher: Dispatcher) -> "DispatchedTool":
        return cls(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            dispatcher=dispatcher,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        arguments = arguments or {}
        _log_request(self.name, arguments)
        try:
            text = await self.dispatcher.call_tool(self.name, arguments)
        except WishForgeError as e:
            _log_status(f"{self.name} failed: {e}")
            raise ToolError(str(e)) from e
        _log_response(self.name, text)
        return ToolResult(content=[TextContent(type="text", text=text)])


# =============================================================================
# Resources
# =============================================================================
# Every note is registered as a concrete resource so it shows up in
# resources/list.  The note:///{note_id} template catches everything else
# and turns a miss into "Note <id> not found".
# =============================================================================
def _add_note_resource(mcp: FastMCP, dispatcher: Dispatcher, entry: dict) -> None:
    uri = entry["uri"]

    def read_note() -> str:
        return dispatcher.read_resource(uri)["contents"][0]["text"]

    mcp.add_resource(Resource.from_function(
        read_note,
        uri=uri,
        name=entry["name"],
        description=entry["description"],
        mime_type=entry["mimeType"],
    ))
    _log_status(f"registered resource {uri}")


def _register_resources(mcp: FastMCP, dispatcher: Dispatcher) -> None:
    for entry in dispatcher.list_resources():
        _add_note_resource(mcp, dispatcher, entry)
    dispatcher.store.subscribe(lambda note: _add_note_resource(mcp, dispatcher, resource_entry(note)))

    @mcp.resource("note:///{note_id}", name="note", mime_type=MIME_TYPE)
    def read_note_by_id(note_id: str) -> str:
        """A text note, looked up by id."""
        try:
            return dispatcher.read_resource(note_uri(note_id))["contents"][0]["text"]
        except NoteNotFoundError as e:
            raise ResourceError(str(e)) from e


# =============================================================================
# Prompt
# =============================================================================
def _prompt_renderer(dispatcher: Dispatcher, name: str) -> Callable[[], list[PromptMessage]]:
    def render() -> list[PromptMessage]:
        messages = dispatcher.get_prompt(name)["messages"]
        return [PromptMessage.model_validate(m) for m in messages]
    return render


def _register_prompts(mcp: FastMCP, dispatcher: Dispatcher) -> None:
    for entry in dispatcher.list_prompts():
        mcp.add_prompt(Prompt.from_function(
            _prompt_renderer(dispatcher, entry["name"]),
            name=entry["name"],
            description=entry["description"],
        ))


# =============================================================================
# Health routes (HTTP transport only)
# =============================================================================
def _register_health_routes(mcp: FastMCP) -> None:
    @mcp.custom_route("/", methods=["GET"])
    async def root(_request: Request) -> PlainTextResponse:
        return PlainTextResponse("OK")

    @mcp.custom_route("/healthz", methods=["GET"])
    async def healthz(_request: Request) -> PlainTextResponse:
        return PlainTextResponse("OK")


# =============================================================================
# HTTP app: streamable /mcp plus legacy SSE at /sse
# =============================================================================
# Older clients still connect over SSE (GET /sse, POST /messages/).  Both
# transports share one FastMCP server, so one note store.  The SSE app's
# custom routes duplicate the streamable app's and are skipped.
# =============================================================================
MCP_PATH = "/mcp"
SSE_PATH = "/sse"


def create_http_app(mcp: FastMCP) -> Starlette:
    app = mcp.http_app(path=MCP_PATH, stateless_http=True)
    sse = mcp.http_app(path=SSE_PATH, transport="sse")
    taken = {getattr(route, "path", None) for route in app.routes}
    app.router.routes.extend(r for r in sse.routes if getattr(r, "path", None) not in taken)
    return app


# =============================================================================
# Factory
# =============================================================================
def create_server(
    settings: Optional[Settings] = None,
    dispatcher: Optional[Dispatcher] = None,
) -> FastMCP:
    """Build a fully wired FastMCP server with fresh in-memory state."""
    if dispatcher is None:
        dispatcher = Dispatcher(settings or Settings.from_env())

    mcp = FastMCP(SERVER_NAME, version=__version__)
    for definition in dispatcher.list_tools():
        mcp.add_tool(DispatchedTool.from_definition(definition, dispatcher))
    _register_resources(mcp, dispatcher)
    _register_prompts(mcp, dispatcher)
    _register_health_routes(mcp)

    backends = dispatcher.remote.configured
    _log_status(
        f"{SERVER_NAME} ready: profile={dispatcher.settings.profile}, "
        f"tools={len(dispatcher.list_tools())}, "
        f"remote={', '.join(backends) if backends else 'none'}"
    )
    return mcp
