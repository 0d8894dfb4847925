"""Write tools: create_note, append_to_note."""
import logging
from datetime import datetime
from pathlib import Path

from fastmcp import FastMCP
from vaultstats.errors import error, NOT_FOUND, ALREADY_EXISTS, OUTSIDE_VAULT, INVALID_ARGUMENT
from vaultstats.template import Template
from vaultstats.vault import resolve_note_path
from vaultstats.tools._locks import get_note_lock, atomic_write

logger = logging.getLogger(__name__)

NOTE_STAMP_FORMAT = "%Y_%m_%d_%H_%M_%S"


def note_filename(now: datetime) -> str:
    return f"Note_{now.strftime(NOTE_STAMP_FORMAT)}.md"


def create_note(
    idea: str,
    vault: Path,
    template: Template | None = None,
    now: datetime | None = None,
) -> str:
    """Create a timestamped note at the vault root and return its relative path."""
    if not idea.strip():
        raise ValueError("Idea must not be empty")

    now = now or datetime.now()
    stamp = now.strftime(NOTE_STAMP_FORMAT)
    file_path = vault / note_filename(now)
    content = (template or Template()).render(date=stamp, body=idea)

    with get_note_lock(file_path):
        if file_path.exists():
            raise FileExistsError(f"Note already exists: {file_path.relative_to(vault)}")
        atomic_write(file_path, content)

    relative = str(file_path.relative_to(vault))
    logger.info("Created note %s", relative)
    return relative


def append_to_note(relative_path: str, idea: str, vault: Path) -> str:
    """Append *idea* on a new line at the end of an existing note."""
    path = resolve_note_path(relative_path, vault)

    with get_note_lock(path):
        if not path.is_file():
            raise FileNotFoundError(f"Note not found: {relative_path}")
        # bytes in, bytes out: existing line endings are left untouched
        existing = path.read_bytes()
        atomic_write(path, existing + ("\n" + idea).encode("utf-8"))

    relative = str(path.relative_to(vault.resolve()))
    logger.info("Appended to note %s", relative)
    return relative


# --- FastMCP tool registration ---

def _register(mcp: FastMCP, vault: Path, template: Template | None = None) -> None:
    @mcp.tool()
    def create_note_tool(idea: str) -> str:
        """Create a new timestamped note from an idea. Returns the relative path of the created file."""
        try:
            return create_note(idea, vault, template)
        except FileExistsError as e:
            return error(ALREADY_EXISTS, str(e))
        except ValueError as e:
            return error(INVALID_ARGUMENT, str(e))

    @mcp.tool()
    def append_to_note_tool(path: str, idea: str) -> str:
        """Append an idea to the end of an existing note."""
        try:
            relative = append_to_note(path, idea, vault)
            return f"Appended to `{relative}`."
        except FileNotFoundError as e:
            return error(NOT_FOUND, str(e))
        except ValueError as e:
            return error(OUTSIDE_VAULT, str(e))
