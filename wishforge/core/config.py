# =============================================================================
# core/config.py  —  Settings from the environment
# =============================================================================
#
# WHERE VALUES COME FROM:
#   main.py calls dotenv's load_dotenv() first, so a local .env file and the
#   real process environment are merged before Settings.from_env() reads
#   os.environ.  Nothing else in the codebase touches os.environ.
#
# RECOGNIZED OPTIONS:
#   OPENAI_API_KEY / OPENAI_MODEL   → chat-completion backend (optional)
#   GEMINI_API_KEY / GEMINI_MODEL   → text-generation backend (optional)
#   OWNER_PHONE                     → identity echoed by the validate tool
#   HOST / PORT                     → HTTP transport bind address
#   MCP_STDIO=1                     → use stdio instead of HTTP
#   WISHFORGE_PROFILE               → "full" (all tools) or "lite"
#   LOG_LEVEL                       → logging level name
#
# A blank value is treated exactly like an unset one, so `OPENAI_API_KEY=`
# in a .env file does NOT enable the backend.
# =============================================================================

from dataclasses import dataclass
import os
from typing import Mapping, Optional

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
DEFAULT_OWNER_PHONE = "919998881729"
DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"

PROFILES = ("full", "lite")


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once at startup."""

    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    owner_phone: str = DEFAULT_OWNER_PHONE
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    use_stdio: bool = False
    profile: str = "full"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build Settings from a mapping (defaults to os.environ)."""
        env = os.environ if environ is None else environ

        def get(key: str) -> Optional[str]:
            return _clean(env.get(key))

        port_raw = get("PORT")
        try:
            port = int(port_raw) if port_raw else DEFAULT_PORT
        except ValueError:
            port = DEFAULT_PORT

        profile = (get("WISHFORGE_PROFILE") or "full").lower()
        if profile not in PROFILES:
            profile = "full"

        return cls(
            openai_api_key=get("OPENAI_API_KEY"),
            openai_model=get("OPENAI_MODEL") or DEFAULT_OPENAI_MODEL,
            gemini_api_key=get("GEMINI_API_KEY"),
            gemini_model=get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
            owner_phone=get("OWNER_PHONE") or DEFAULT_OWNER_PHONE,
            host=get("HOST") or DEFAULT_HOST,
            port=port,
            use_stdio=get("MCP_STDIO") == "1",
            profile=profile,
            log_level=(get("LOG_LEVEL") or "INFO").upper(),
        )

    @property
    def chat_backend_enabled(self) -> bool:
        return self.openai_api_key is not None

    @property
    def text_backend_enabled(self) -> bool:
        return self.gemini_api_key is not None
