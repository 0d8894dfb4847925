"""Vault path utilities: document enumeration and note path resolution."""
import logging
import os
from pathlib import Path
from typing import Callable, Iterator

logger = logging.getLogger(__name__)

# Entries starting with this marker (.obsidian, .git, .trash, ...) are never scanned.
HIDDEN_PREFIX = "."


def _is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def iter_vault_docs(
    vault: Path,
    extension: str = ".md",
    on_error: Callable[[OSError], None] | None = None,
) -> Iterator[Path]:
    """Yield document files under *vault*, skipping hidden entries and unreadable subtrees.

    Hidden directories are pruned so the walk never descends into them.
    Directory errors are logged and handed to *on_error*; the rest of the
    vault is still walked. Pass an *on_error* that raises to make them fatal.
    """

    def _onerror(exc: OSError) -> None:
        logger.warning("Skipping unreadable path %s: %s", exc.filename, exc.strerror or exc)
        if on_error is not None:
            on_error(exc)

    for dirpath, dirnames, filenames in os.walk(vault, onerror=_onerror):
        # prune in place; sorted so every run walks in the same order
        dirnames[:] = sorted(d for d in dirnames if not _is_hidden(d))
        base = Path(dirpath)
        for name in sorted(filenames):
            if _is_hidden(name):
                continue
            path = base / name
            if path.suffix != extension:
                continue
            if not path.is_file():
                continue
            yield path


def resolve_note_path(relative: str, vault: Path) -> Path:
    """Resolve a relative note path inside the vault.

    Raises ValueError if the path escapes the vault root (traversal attempt).
    """
    resolved = (vault / relative).resolve()
    try:
        resolved.relative_to(vault.resolve())
    except ValueError:
        raise ValueError(f"Path '{relative}' escapes vault root")
    return resolved
