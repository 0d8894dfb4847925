"""Tests for scan value objects."""
from vaultstats.index.models import ExtractionResult, ScanFailure, VaultTotals


def test_extraction_result_copies_input_mapping() -> None:
    source = {"#a": 1}
    result = ExtractionResult(word_count=1, tag_counts=source)
    source["#a"] = 99
    assert result.tag_counts["#a"] == 1


def test_extraction_results_compare_by_value() -> None:
    assert ExtractionResult(1, 2, {"#a": 1}) == ExtractionResult(1, 2, {"#a": 1})


def test_vault_totals_start_empty() -> None:
    totals = VaultTotals()
    assert totals.total_word_count == 0
    assert totals.total_link_count == 0
    assert not totals.tag_counts
    assert totals.failures == []
    assert totals.skipped_documents == 0


def test_skipped_counts_split_by_kind() -> None:
    totals = VaultTotals(failures=[
        ScanFailure("a.md", "read", "boom"),
        ScanFailure("b.md", "read", "boom"),
        ScanFailure("locked", "enumerate", "Permission denied"),
    ])
    assert totals.skipped_documents == 2
    assert totals.skipped_directories == 1


def test_totals_instances_do_not_share_state() -> None:
    first, second = VaultTotals(), VaultTotals()
    first.tag_counts["#x"] += 1
    first.failures.append(ScanFailure("a.md", "read", "x"))
    assert not second.tag_counts
    assert second.failures == []
