"""Stats tool: vault_stats."""
from pathlib import Path

from fastmcp import FastMCP
from vaultstats.config import DEFAULT_DOC_EXT
from vaultstats.errors import error, root_error, INVALID_ARGUMENT
from vaultstats.index.aggregate import rank
from vaultstats.index.models import VaultTotals
from vaultstats.index.scan import run

DEFAULT_TOP_TAGS = 3


def format_stats(totals: VaultTotals, top: int = DEFAULT_TOP_TAGS) -> str:
    """Render totals as the plain-text report shared by the CLI and the MCP tool."""
    if totals.documents_scanned == 0 and not totals.failures:
        return "Vault is empty — no notes found."

    lines = [
        f"Vault Links: {totals.total_link_count}",
        f"Vault Words: {totals.total_word_count}",
        "Most Frequent Tags:",
    ]
    for tag, count in rank(totals, top):
        lines.append(f"    {tag}: {count}")

    if totals.skipped_documents:
        n = totals.skipped_documents
        lines.append("")
        lines.append(f"Skipped: {n} document{'s' if n != 1 else ''} could not be read")
    if totals.skipped_directories:
        n = totals.skipped_directories
        lines.append(f"Skipped: {n} director{'ies' if n != 1 else 'y'} could not be listed")

    return "\n".join(lines)


def vault_stats(
    vault: Path,
    top: int = DEFAULT_TOP_TAGS,
    extension: str = DEFAULT_DOC_EXT,
    max_workers: int | None = None,
) -> str:
    """Scan the vault and return word, link and top-tag statistics."""
    return format_stats(run(vault, extension=extension, max_workers=max_workers), top=top)


# --- FastMCP tool registration ---

def _register(mcp: FastMCP, vault: Path, extension: str = DEFAULT_DOC_EXT, max_workers: int | None = None) -> None:
    @mcp.tool()
    def vault_stats_tool(top: int = DEFAULT_TOP_TAGS) -> str:
        """Return vault statistics: total words, total wikilinks, and the most frequent tags."""
        if top < 0:
            return error(INVALID_ARGUMENT, f"top must be >= 0, got {top}")
        try:
            return vault_stats(vault, top=top, extension=extension, max_workers=max_workers)
        except OSError as e:
            return root_error(e)
