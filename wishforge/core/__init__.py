# =============================================================================
# wishforge/core/__init__.py
# =============================================================================
# This package contains ALL business logic for WishForge.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Starlette or any transport.
#   The dispatcher takes a tool name and an argument dict and hands back a
#   string; how that string travels to a client is the tools/ layer's job.
#
#   The only outbound I/O lives in remote.py (optional LLM backends), and it
#   is always allowed to fail: templates.py is the guaranteed answer.
# =============================================================================
