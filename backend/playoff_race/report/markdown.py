"""
Minimal markdown document builder.

Each element renders itself with `str()`; a Document concatenates them.
"""

from typing import Any, Iterable, List


class Element:
    """Base class for markdown elements."""

    def __str__(self) -> str:
        raise NotImplementedError


class Document:
    """An ordered collection of rendered elements."""

    def __init__(self):
        self._parts: List[str] = []

    def add(self, element: Element) -> 'Document':
        self._parts.append(str(element))
        return self

    def __str__(self) -> str:
        return "".join(self._parts)


class Paragraph(Element):
    def __init__(self, content: Any):
        self.content = str(content)

    def __str__(self) -> str:
        return f"{self.content}\n\n"


class _Header(Element):
    level = 1

    def __init__(self, content: Any):
        self.content = str(content)

    def __str__(self) -> str:
        return f"{'#' * self.level} {self.content}\n"


class H1(_Header):
    level = 1


class H2(_Header):
    level = 2


class H3(_Header):
    level = 3


class BulletList(Element):
    """Bulleted list."""

    def __init__(self, items: Iterable[Any] = ()):
        self.items = [str(i) for i in items]

    def add(self, item: Any) -> None:
        self.items.append(str(item))

    def __str__(self) -> str:
        return "".join(f"* {item}\n" for item in self.items) + "\n"


class NumberedList(BulletList):
    def __str__(self) -> str:
        return "".join(f"{i}. {item}\n" for i, item in enumerate(self.items, 1)) + "\n"


class Table(Element):
    """Table with centered columns."""

    def __init__(self, headers: Iterable[Any]):
        self.headers = [str(h) for h in headers]
        self.rows: List[List[str]] = []

    def add(self, row: Iterable[Any]) -> None:
        """
        Append a row.

        Raises:
            ValueError: If the row doesn't have one cell per header
        """
        cells = [str(c) for c in row]
        if len(cells) != len(self.headers):
            raise ValueError(
                f"Row has {len(cells)} cells but the table has {len(self.headers)} headers"
            )
        self.rows.append(cells)

    def __str__(self) -> str:
        lines = ["|".join(self.headers), "|".join(":---:" for _ in self.headers)]
        lines.extend("|".join(row) for row in self.rows)
        return "\n".join(lines) + "\n\n"


class Code(Element):
    """Indented code block."""

    def __init__(self, content: Any):
        self.content = str(content)

    def __str__(self) -> str:
        body = "".join(f"    {line}\n" for line in self.content.splitlines())
        return f"\n{body}\n"


class HR(Element):
    def __str__(self) -> str:
        return "---\n"
