"""Unit tests for write tools."""
from datetime import datetime
from pathlib import Path

import pytest

from vaultstats.template import Template
from vaultstats.tools.write import append_to_note, create_note, note_filename

NOW = datetime(2026, 1, 5, 9, 30, 15)


class TestCreateNote:
    def test_creates_timestamped_file_at_root(self, vault: Path) -> None:
        path = create_note("An idea", vault, now=NOW)
        assert path == "Note_2026_01_05_09_30_15.md"
        assert (vault / path).exists()

    def test_renders_template(self, vault: Path) -> None:
        tmpl = Template(text="---\ncreated: ?time\n---\n?body\n")
        path = create_note("Capture #idea", vault, tmpl, now=NOW)
        content = (vault / path).read_text()
        assert content == "---\ncreated: 2026_01_05_09_30_15\n---\nCapture #idea\n"

    def test_default_template_used_when_none(self, vault: Path) -> None:
        path = create_note("plain idea", vault, now=NOW)
        assert "plain idea" in (vault / path).read_text()

    def test_empty_idea_rejected(self, vault: Path) -> None:
        with pytest.raises(ValueError):
            create_note("   ", vault, now=NOW)

    def test_existing_note_not_overwritten(self, vault: Path) -> None:
        create_note("first", vault, now=NOW)
        with pytest.raises(FileExistsError, match="already exists"):
            create_note("second", vault, now=NOW)
        assert "first" in (vault / note_filename(NOW)).read_text()

    def test_no_temp_file_left_behind(self, vault: Path) -> None:
        create_note("idea", vault, now=NOW)
        assert not list(vault.glob("*.tmp"))
        assert not list(vault.glob(".*.tmp"))


class TestAppendToNote:
    def test_appends_on_new_line(self, vault: Path) -> None:
        append_to_note("daily/2026-01-05.md", "Follow up #todo", vault)
        content = (vault / "daily/2026-01-05.md").read_text()
        assert content == "Met about [[Second Brain]] #idea\n\nFollow up #todo"

    def test_returns_relative_path(self, vault: Path) -> None:
        assert append_to_note("ideas/voice-capture.md", "more", vault) == "ideas/voice-capture.md"

    def test_missing_note(self, vault: Path) -> None:
        with pytest.raises(FileNotFoundError):
            append_to_note("ideas/ghost.md", "text", vault)

    def test_traversal_rejected(self, vault: Path) -> None:
        with pytest.raises(ValueError):
            append_to_note("../outside.md", "text", vault)

    def test_appended_content_is_counted(self, vault: Path) -> None:
        from vaultstats.index.scan import run

        before = run(vault)
        append_to_note("ideas/voice-capture.md", "#idea again", vault)
        after = run(vault)
        assert after.tag_counts["#idea"] == before.tag_counts["#idea"] + 1
        assert after.total_word_count == before.total_word_count + 2

    def test_crlf_line_endings_preserved(self, vault: Path) -> None:
        note = vault / "windows.md"
        note.write_bytes(b"line1\r\nline2\r\n")
        append_to_note("windows.md", "idea", vault)
        assert note.read_bytes() == b"line1\r\nline2\r\n\nidea"

    def test_non_ascii_idea_written_as_utf8(self, vault: Path) -> None:
        note = vault / "plain.md"
        note.write_bytes(b"start")
        append_to_note("plain.md", "café #idée", vault)
        assert note.read_bytes() == "start\ncafé #idée".encode("utf-8")
