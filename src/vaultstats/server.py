import logging
from pathlib import Path

from fastmcp import FastMCP

from vaultstats.config import get_vault_config, get_scan_workers, get_doc_extension, ConfigError
from vaultstats.template import Template

logger = logging.getLogger(__name__)

mcp = FastMCP(
    name="vaultstats",
    instructions=(
        "You are connected to an Obsidian vault. "
        "Use vault_stats_tool to report word, link and tag statistics. "
        "Notes can be read with get_note_tool and captured with create_note_tool and append_to_note_tool; "
        "statistics are always recomputed from the files on disk."
    ),
)

# Explicit registration: server -> tools (one direction only).
from vaultstats.tools import read, stats, write  # noqa: E402


def _register_all(
    server: FastMCP,
    vault: Path,
    template: Template | None = None,
    extension: str = ".md",
    max_workers: int | None = None,
) -> None:
    stats._register(server, vault, extension=extension, max_workers=max_workers)
    write._register(server, vault, template)
    read._register(server, vault)


def serve(
    vault: Path | str | None = None,
    template: Path | str | None = None,
    max_workers: int | None = None,
) -> None:
    """Resolve the vault, register every tool and block on the MCP transport."""
    try:
        cfg = get_vault_config(vault, template)
        workers = max_workers or get_scan_workers()
        tmpl = Template.load(cfg.template) if cfg.template else None
    except (ConfigError, OSError) as e:
        logger.error("Configuration error: %s", e)
        raise SystemExit(1)

    logger.info("vaultstats starting — vault root: %s", cfg.vault)
    _register_all(mcp, cfg.vault, tmpl, extension=get_doc_extension(), max_workers=workers)
    mcp.run()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    serve()


if __name__ == "__main__":
    main()
