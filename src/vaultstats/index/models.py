"""Value objects for a vault statistics scan."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping

FailureKind = Literal["read", "enumerate"]


@dataclass(frozen=True)
class ExtractionResult:
    """Counts extracted from a single document."""
    word_count: int = 0
    link_count: int = 0
    tag_counts: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only view so a result can't be altered after it leaves its worker
        object.__setattr__(self, "tag_counts", MappingProxyType(dict(self.tag_counts)))


@dataclass(frozen=True)
class ScanFailure:
    path: str
    kind: FailureKind
    message: str


@dataclass
class VaultTotals:
    """Running totals for one scan. Only the scan coordinator mutates this."""
    total_word_count: int = 0
    total_link_count: int = 0
    tag_counts: Counter = field(default_factory=Counter)
    documents_scanned: int = 0
    failures: list[ScanFailure] = field(default_factory=list)

    @property
    def skipped_documents(self) -> int:
        return sum(1 for f in self.failures if f.kind == "read")

    @property
    def skipped_directories(self) -> int:
        return sum(1 for f in self.failures if f.kind == "enumerate")
