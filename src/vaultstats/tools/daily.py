"""Daily note: make sure today's YYYY-MM-DD.md exists and build its obsidian:// URI."""
import logging
from datetime import date
from pathlib import Path
from urllib.parse import quote

from vaultstats.vault import resolve_note_path
from vaultstats.tools._locks import get_note_lock

logger = logging.getLogger(__name__)


def obsidian_uri(vault_name: str, file: str) -> str:
    return f"obsidian://open?vault={quote(vault_name, safe='')}&file={quote(file, safe='')}"


def ensure_daily_note(vault: Path, day: date | None = None) -> tuple[str, str]:
    """Create the daily note if missing and return (relative path, open URI).

    An existing note is never modified.
    """
    stamp = (day or date.today()).isoformat()
    path = resolve_note_path(f"{stamp}.md", vault)

    with get_note_lock(path):
        if not path.exists():
            path.touch()
            logger.info("Created daily note %s", path.name)

    return path.name, obsidian_uri(vault.resolve().name, stamp)
