# =============================================================================
# wishforge/tools/__init__.py
# =============================================================================
# This package contains the FastMCP server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP and core/.  It:
#     1. Publishes every ToolDefinition from core/dispatcher.py as an MCP tool
#        with its hand-written input schema
#     2. Publishes the note store as note:///<id> resources and the
#        summarize_notes prompt
#     3. Turns WishForgeError into MCP errors carrying the same message
#     4. Adds the plain-HTTP liveness routes used by the HTTP deployment
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT normalize arguments or pick templates (that's core/)
#   - They do NOT call the LLM backends (that's core/remote.py)
# =============================================================================
