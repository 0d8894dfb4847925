"""Per-note locks and atomic writes for create/append.

FastMCP runs sync tools on worker threads, so two appends to one note can
arrive together. Locks are per process; other writers (Obsidian itself) are
not coordinated.
"""
import threading
from pathlib import Path

_registry_lock = threading.Lock()
_note_locks: dict[Path, threading.Lock] = {}


def get_note_lock(path: Path) -> threading.Lock:
    """Return the lock shared by every reference to the note at *path*."""
    key = path.resolve()
    with _registry_lock:
        return _note_locks.setdefault(key, threading.Lock())


def atomic_write(path: Path, content: str | bytes) -> None:
    """Replace *path* with *content* via a sibling temp file and os.replace().

    Bytes are written unchanged; text goes through the platform newline translation.
    """
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        if isinstance(content, bytes):
            tmp.write_bytes(content)
        else:
            tmp.write_text(content, encoding="utf-8")
        tmp.replace(path)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise
