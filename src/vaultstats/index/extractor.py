"""Per-document content extraction: words, wikilinks and inline #tags."""
import re
from collections import Counter

from vaultstats.index.models import ExtractionResult

# ASCII whitespace only; str.split() would also break on Unicode spaces.
_WORD_RE = re.compile(r"[^ \t\n\r\x0b\x0c]+")

# Non-greedy, so a span ends at the first ]] after its [[.
_WIKILINK_RE = re.compile(r"\[\[.*?\]\]")

_TAG_RE = re.compile(r"#\w+")


def count_words(content: str) -> int:
    return sum(1 for _ in _WORD_RE.finditer(content))


def count_links(content: str) -> int:
    """Count [[...]] spans. An unterminated [[ is not a link."""
    return sum(1 for _ in _WIKILINK_RE.finditer(content))


def count_tags(content: str) -> Counter:
    """Count every #tag occurrence, keyed by the literal match including '#'."""
    return Counter(_TAG_RE.findall(content))


def extract(content: str) -> ExtractionResult:
    return ExtractionResult(
        word_count=count_words(content),
        link_count=count_links(content),
        tag_counts=count_tags(content),
    )
