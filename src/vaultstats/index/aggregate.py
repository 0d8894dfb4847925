"""Fold extraction results into vault totals and rank tags."""
from vaultstats.index.models import ExtractionResult, VaultTotals


def merge(totals: VaultTotals, result: ExtractionResult) -> VaultTotals:
    """Add one document's counts into *totals* (in place) and return it."""
    totals.total_word_count += result.word_count
    totals.total_link_count += result.link_count
    for tag, count in result.tag_counts.items():
        totals.tag_counts[tag] += count
    totals.documents_scanned += 1
    return totals


def rank(totals: VaultTotals, n: int) -> list[tuple[str, int]]:
    """Return the top *n* tags by descending count.

    Equal counts are ordered by tag string ascending, so output is stable
    across runs regardless of merge order.
    """
    if n <= 0:
        return []
    ordered = sorted(totals.tag_counts.items(), key=lambda item: (-item[1], item[0]))
    return ordered[:n]
