# =============================================================================
# wishforge/__init__.py
# =============================================================================
# WishForge MCP — an MCP server that writes short, shareable Hindi/Hinglish
# text: wishes, shayari, WhatsApp status lines, roasts and pickup lines.
#
# LAYOUT:
#   core/   → pure Python: templates, argument handling, remote LLM calls,
#             the tool registry/dispatcher and the note store
#   tools/  → the FastMCP server that exposes core/ over MCP
#   main.py → process entry point (stdio or streamable HTTP)
# =============================================================================

SERVER_NAME = "WishForge MCP"
__version__ = "0.1.0"
