"""Read tools: read_note."""
from pathlib import Path

from fastmcp import FastMCP
from vaultstats.errors import error, NOT_FOUND, OUTSIDE_VAULT
from vaultstats.vault import resolve_note_path


def read_note(relative_path: str, vault: Path) -> str:
    """Return the full text of a note inside the vault."""
    path = resolve_note_path(relative_path, vault)
    if not path.is_file():
        raise FileNotFoundError(f"Note not found: {relative_path}")
    return path.read_text(encoding="utf-8")


# --- FastMCP tool registration ---

def _register(mcp: FastMCP, vault: Path) -> None:
    @mcp.tool()
    def get_note_tool(path: str) -> str:
        """Return the raw markdown of a note, given its path relative to the vault."""
        try:
            return read_note(path, vault)
        except FileNotFoundError as e:
            return error(NOT_FOUND, str(e))
        except ValueError as e:
            return error(OUTSIDE_VAULT, str(e))
