# =============================================================================
# core/notes.py  —  Note Storage & the summarize_notes prompt
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   A tiny in-memory note store, exposed over MCP as resources
#   (note:///<id>) plus one prompt that asks a model to summarize them all.
#   It is unrelated to the generation tools; it is kept because MCP clients
#   use it to exercise resources and prompts.
#
# OWNERSHIP:
#   There is no module-level note dict.  The Dispatcher owns one NoteStore,
#   and create()/list()/get() are the only ways in.
#
# CONCURRENCY:
#   Not designed for concurrent writers.  Ids are len(notes) + 1, which is
#   only safe because invocations are handled one at a time.
#
# LIFETIME:
#   Process memory only.  Restart the server and you are back to the two
#   seed notes.
# =============================================================================

from typing import Callable

from wishforge.core.errors import NoteNotFoundError
from wishforge.core.models import Note

NOTE_SCHEME = "note:///"
MIME_TYPE = "text/plain"

SEED_NOTES = (
    ("First Note", "This is note 1"),
    ("Second Note", "This is note 2"),
)


def note_uri(note_id: str) -> str:
    return f"{NOTE_SCHEME}{note_id}"


def note_id_from_uri(uri: str) -> str:
    """note:///7 → "7".  Anything without the scheme is taken as a path."""
    path = uri[len(NOTE_SCHEME):] if uri.startswith(NOTE_SCHEME) else uri.split("://", 1)[-1]
    return path.lstrip("/")


class NoteStore:
    """Sequentially numbered notes held in memory."""

    def __init__(self, seed: bool = True):
        self._notes: dict[str, Note] = {}
        self._listeners: list[Callable[[Note], None]] = []
        if seed:
            for title, content in SEED_NOTES:
                self.create(title, content)

    def __len__(self) -> int:
        return len(self._notes)

    def subscribe(self, listener: Callable[[Note], None]) -> None:
        """Call listener(note) after every create()."""
        self._listeners.append(listener)

    def create(self, title: str, content: str) -> Note:
        note = Note(id=str(len(self._notes) + 1), title=title, content=content)
        self._notes[note.id] = note
        for listener in self._listeners:
            listener(note)
        return note

    def list(self) -> list[Note]:
        return list(self._notes.values())

    def get(self, note_id: str) -> Note:
        note = self._notes.get(note_id)
        if note is None:
            raise NoteNotFoundError(note_id)
        return note


# =============================================================================
# Resource / prompt shapes
# =============================================================================
# Plain dicts in MCP's field names (mimeType, not mime_type).  The tools/
# layer hands them to FastMCP; core/ never imports MCP types.
# =============================================================================
def resource_entry(note: Note) -> dict:
    return {
        "uri": note_uri(note.id),
        "mimeType": MIME_TYPE,
        "name": note.title,
        "description": f"A text note: {note.title}",
    }


def summarize_notes_messages(notes: list[Note]) -> list[dict]:
    """Instruction, one embedded resource per note, closing instruction."""
    embedded = [
        {
            "role": "user",
            "content": {
                "type": "resource",
                "resource": {"uri": note_uri(n.id), "mimeType": MIME_TYPE, "text": n.content},
            },
        }
        for n in notes
    ]
    return [
        {"role": "user", "content": {"type": "text", "text": "Please summarize the following notes:"}},
        *embedded,
        {"role": "user", "content": {"type": "text", "text": "Provide a concise summary of all the notes above."}},
    ]
