# =============================================================================
# main.py  —  Entry Point for the WishForge MCP server
# =============================================================================
#
# HOW TO RUN:
#   wishforge                    # HTTP on $PORT (default 8080): /mcp and /sse
#   MCP_STDIO=1 wishforge        # stdio, for desktop MCP clients
#   python -m wishforge.main     # same thing without the console script
#
# WHAT HAPPENS:
#   1. .env is loaded (OPENAI_API_KEY, GEMINI_API_KEY, OWNER_PHONE, ...)
#   2. Settings are read from the environment
#   3. Logging is pointed at stderr
#   4. The FastMCP server is built (tools/mcp_server.py)
#   5. It runs on stdio or streamable HTTP until interrupted
#
# SIGNALS:
#   Ctrl-C / SIGTERM are handled by uvicorn (HTTP) or anyio (stdio).
#   A failure to START is fatal: it is logged and the process
#   exits with status 1.
# =============================================================================

import logging
import sys

import uvicorn
from dotenv import load_dotenv

from wishforge.core.config import Settings
from wishforge.tools.mcp_server import (
    MCP_PATH,
    SSE_PATH,
    configure_logging,
    create_http_app,
    create_server,
)

logger = logging.getLogger("wishforge")


def main() -> None:
    # Must happen BEFORE Settings.from_env(): .env values only reach
    # os.environ once load_dotenv() has run.
    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    try:
        mcp = create_server(settings)
        if settings.use_stdio:
            mcp.run()
        else:
            logger.info(
                "[wishforge] streamable HTTP MCP listening on http://localhost:%d%s (SSE at %s)",
                settings.port, MCP_PATH, SSE_PATH,
            )
            uvicorn.run(create_http_app(mcp), host=settings.host, port=settings.port)
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Failed to start server")
        sys.exit(1)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
