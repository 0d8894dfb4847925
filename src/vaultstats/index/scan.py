"""Vault scan: fan out one read+extract task per document, fold results into one VaultTotals.

Workers run on a bounded thread pool and never touch the totals. The calling
thread drains finished futures and is the only place merge() runs.
"""
from __future__ import annotations

import logging
import os
import time
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path

from vaultstats.config import DEFAULT_DOC_EXT, DEFAULT_MAX_WORKERS
from vaultstats.index.aggregate import merge
from vaultstats.index.extractor import extract
from vaultstats.index.models import ExtractionResult, ScanFailure, VaultTotals
from vaultstats.vault import iter_vault_docs

logger = logging.getLogger(__name__)

# Pending futures allowed per worker before the coordinator stops submitting and drains.
_IN_FLIGHT_PER_WORKER = 2


def _check_root(root: Path) -> None:
    """Raise if the vault root cannot be scanned at all."""
    if not root.exists():
        raise FileNotFoundError(f"Vault root does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Vault root is not a directory: {root}")
    try:
        with os.scandir(root):
            pass
    except PermissionError:
        raise PermissionError(f"Vault root is not readable: {root}") from None


def _rel(path: Path | str, root: Path) -> str:
    try:
        return str(Path(path).relative_to(root))
    except ValueError:
        return str(path)


def scan_document(path: Path) -> ExtractionResult:
    """Read one document and extract its counts. Raises OSError/UnicodeDecodeError."""
    # newline="" keeps \r and \r\n as written
    with open(path, encoding="utf-8", newline="") as f:
        content = f.read()
    return extract(content)


def _scan_task(path: Path, root: Path) -> ExtractionResult | ScanFailure:
    try:
        return scan_document(path)
    except (OSError, UnicodeDecodeError) as e:
        return ScanFailure(path=_rel(path, root), kind="read", message=str(e))


def _collect(done: set[Future], totals: VaultTotals) -> None:
    for future in done:
        outcome = future.result()
        if isinstance(outcome, ScanFailure):
            logger.warning("Could not read %s: %s", outcome.path, outcome.message)
            totals.failures.append(outcome)
        else:
            merge(totals, outcome)


def run(
    root: Path,
    extension: str = DEFAULT_DOC_EXT,
    max_workers: int | None = None,
) -> VaultTotals:
    """Scan every document under *root* and return the aggregated totals.

    Only an invalid root is fatal. Unreadable documents and directories are
    recorded in ``totals.failures`` and contribute nothing.
    """
    root = Path(root)
    _check_root(root)

    workers = DEFAULT_MAX_WORKERS if max_workers is None else max_workers
    if workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {workers}")
    limit = workers * _IN_FLIGHT_PER_WORKER

    totals = VaultTotals()

    def _record_walk_error(exc: OSError) -> None:
        totals.failures.append(ScanFailure(
            path=_rel(exc.filename or "", root),
            kind="enumerate",
            message=exc.strerror or str(exc),
        ))

    start = time.monotonic()
    pending: set[Future] = set()

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="vaultstats-scan") as executor:
        for path in iter_vault_docs(root, extension, on_error=_record_walk_error):
            pending.add(executor.submit(_scan_task, path, root))
            if len(pending) >= limit:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                _collect(done, totals)

        while pending:
            done, pending = wait(pending, return_when=FIRST_COMPLETED)
            _collect(done, totals)

    duration = time.monotonic() - start
    logger.info(
        "Scanned %d documents in %s (%.2fs): %d words, %d links, %d distinct tags, %d skipped",
        totals.documents_scanned, root, duration,
        totals.total_word_count, totals.total_link_count,
        len(totals.tag_counts), totals.skipped_documents,
    )
    return totals
