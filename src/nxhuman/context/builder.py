"""Simple context builder for composing markdown sections."""

from typing import Iterable, List, Optional, Tuple


class ContextBuilder:
    """Simple builder for composing markdown context documents."""

    def __init__(self):
        self.sections: List[str] = []

    def add(self, content: str, title: Optional[str] = None) -> 'ContextBuilder':
        """Add content with optional ``##`` title."""
        if title:
            self.sections.append(f"## {title}\n{content}")
        else:
            self.sections.append(content)
        return self

    def add_items(self, title: str, items: Iterable[Tuple[str, str]]) -> 'ContextBuilder':
        """Add a ``- Label: text`` bullet list."""
        lines = [f"- {label}: {text}" for label, text in items]
        return self.add("\n".join(lines), title)

    def add_numbered(self, title: str, items: Iterable[Tuple[str, str]]) -> 'ContextBuilder':
        """Add a ``1. LABEL: text`` numbered list."""
        lines = [f"{index}. {label}: {text}" for index, (label, text) in enumerate(items, start=1)]
        return self.add("\n".join(lines), title)

    def add_bullets(self, title: str, lines: Iterable[str], intro: Optional[str] = None) -> 'ContextBuilder':
        """Add plain ``- text`` bullets, optionally preceded by an intro line."""
        body = [intro] if intro else []
        body.extend(f"- {line}" for line in lines)
        return self.add("\n".join(body), title)

    def build(self) -> str:
        """Build the final markdown document."""
        return "\n\n".join(self.sections).strip()
