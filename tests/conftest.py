import shutil
from pathlib import Path

import pytest


VAULT_FIXTURE_PATH = Path(__file__).parent / "vault_fixture"


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """Copy vault_fixture to a temp directory and return its path."""
    vault_path = tmp_path / "notes"
    shutil.copytree(VAULT_FIXTURE_PATH, vault_path)
    return vault_path


@pytest.fixture(autouse=True)
def set_vault_env(vault: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point VAULT_PATH at the temp vault and clear other config for every test."""
    monkeypatch.setenv("VAULT_PATH", str(vault))
    for name in ("VAULT_TEMPLATE", "VAULT_SCAN_WORKERS", "VAULT_DOC_EXT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_vault(tmp_path: Path):
    """Build a minimal vault from a {relative_path: content} mapping."""
    def _make(files: dict[str, str | bytes], name: str = "vault") -> Path:
        root = tmp_path / name
        (root / ".obsidian").mkdir(parents=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content)
        return root
    return _make
