# =============================================================================
# core/errors.py  —  Error taxonomy
# =============================================================================
#
# Every failure a CLIENT can see is one of these.  The MCP layer turns them
# into protocol errors carrying str(exc) as the message.
#
# What is NOT here: remote backend failures.  Those are absorbed inside
# core/remote.py and turn into a template fallback, never an error.
# =============================================================================


class WishForgeError(Exception):
    """Base class for caller-visible failures."""


class ToolValidationError(WishForgeError):
    """A required argument was missing or empty after trimming."""


class UnknownToolError(WishForgeError):
    """The tool name is not registered (or disabled by the active profile)."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class UnknownPromptError(WishForgeError):
    def __init__(self, name: str):
        super().__init__(f"Unknown prompt: {name}")
        self.name = name


class NoteNotFoundError(WishForgeError):
    def __init__(self, note_id: str):
        super().__init__(f"Note {note_id} not found")
        self.note_id = note_id
