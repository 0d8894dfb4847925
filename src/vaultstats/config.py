import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_FILE = Path("config") / "default.toml"
DEFAULT_TEMPLATE_FILE = Path("config") / "default_template.md"
DEFAULT_DOC_EXT = ".md"
DEFAULT_MAX_WORKERS = 8

# A vault is only valid if Obsidian has initialised it.
_VAULT_MARKER = ".obsidian"


class ConfigError(Exception):
    pass


@dataclass
class VaultConfig:
    vault: Path
    template: Path | None = None


def _read_config_file(path: Path) -> str:
    """Return the vault_path entry of a TOML config file."""
    try:
        table = tomllib.loads(path.read_text())
    except FileNotFoundError:
        raise ConfigError(
            f"No vault given: pass --vault, set VAULT_PATH, or create {path}"
        )
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}")

    raw = table.get("vault_path", "")
    if not isinstance(raw, str) or not raw:
        raise ConfigError(f"Config file {path} has no vault_path entry")
    return raw


def get_vault_root(vault: Path | str | None = None, cwd: Path | None = None) -> Path:
    """Resolve the vault root: explicit argument, then VAULT_PATH, then config/default.toml."""
    cwd = cwd or Path.cwd()

    if vault:
        raw = str(vault)
    elif os.environ.get("VAULT_PATH"):
        raw = os.environ["VAULT_PATH"]
    else:
        raw = _read_config_file(cwd / DEFAULT_CONFIG_FILE)

    path = Path(raw).expanduser().resolve()

    if not path.is_dir():
        raise ConfigError(f"Vault root is not a directory: {path}")

    if not (path / _VAULT_MARKER).exists():
        raise ConfigError(f"No {_VAULT_MARKER} directory found at vault root: {path}")

    return path


def get_template_path(template: Path | str | None = None, cwd: Path | None = None) -> Path:
    """Resolve the note template: explicit argument, then VAULT_TEMPLATE, then config/default_template.md."""
    cwd = cwd or Path.cwd()

    if template:
        path = Path(template).expanduser()
    elif os.environ.get("VAULT_TEMPLATE"):
        path = Path(os.environ["VAULT_TEMPLATE"]).expanduser()
    else:
        path = cwd / DEFAULT_TEMPLATE_FILE

    if not path.is_file():
        raise ConfigError(f"Template file not found: {path}")
    return path.resolve()


def get_vault_config(
    vault: Path | str | None = None,
    template: Path | str | None = None,
    require_template: bool = False,
) -> VaultConfig:
    root = get_vault_root(vault)
    if require_template or template:
        return VaultConfig(vault=root, template=get_template_path(template))
    try:
        tmpl = get_template_path(template)
    except ConfigError:
        tmpl = None
    return VaultConfig(vault=root, template=tmpl)


def get_scan_workers() -> int:
    raw = os.environ.get("VAULT_SCAN_WORKERS", "")
    if not raw.strip():
        return DEFAULT_MAX_WORKERS
    try:
        workers = int(raw)
    except ValueError:
        raise ConfigError(f"VAULT_SCAN_WORKERS must be an integer, got {raw!r}")
    if workers < 1:
        raise ConfigError(f"VAULT_SCAN_WORKERS must be at least 1, got {workers}")
    return workers


def get_doc_extension() -> str:
    raw = os.environ.get("VAULT_DOC_EXT", "").strip()
    if not raw:
        return DEFAULT_DOC_EXT
    return raw if raw.startswith(".") else f".{raw}"
