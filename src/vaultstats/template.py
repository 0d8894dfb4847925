"""Note templates with ?time and ?body placeholders."""
import re
from dataclasses import dataclass
from pathlib import Path

_PLACEHOLDER_RE = re.compile(r"\?(time|body)")

# Used when no template file is configured.
DEFAULT_TEMPLATE = "?time\n\n?body\n"


@dataclass
class Template:
    text: str = DEFAULT_TEMPLATE
    path: Path | None = None

    @classmethod
    def load(cls, path: Path) -> "Template":
        return cls(text=path.read_text(), path=path)

    def render(self, date: str, body: str) -> str:
        """Substitute placeholders in a single pass.

        Text coming from *body* is never re-expanded, so an idea that
        contains '?time' is written verbatim.
        """
        values = {"time": date, "body": body}
        return _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], self.text)
