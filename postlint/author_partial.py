"""Inspection of the author biography partial template.

The partial interpolates values such as ``@author.gravatar`` that an external
rendering engine resolves. Here the references are only located, never
evaluated.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from pydantic import computed_field

from postlint.entities import BaseEntity

_ACCESSOR_RE = re.compile(r"@author\.(?P<name>[A-Za-z_][A-Za-z0-9_]*)")


@dataclass(frozen=True)
class AccessorReference:
    """One ``@author.<name>`` occurrence in a partial"""

    name: str
    line: int
    column: int


def find_accessor_references(text: str) -> list[AccessorReference]:
    """Return every author accessor reference in document order."""
    references = []
    for match in _ACCESSOR_RE.finditer(text):
        line_start = text.rfind("\n", 0, match.start()) + 1
        references.append(
            AccessorReference(
                name=match.group("name"),
                line=text.count("\n", 0, match.start()) + 1,
                column=match.start() - line_start + 1,
            )
        )
    return references


class AuthorPartial(BaseEntity):
    """An author partial template and the accessors it references"""

    text: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def accessor_names(self) -> list[str]:
        """Distinct accessor names in order of first appearance"""
        seen: dict[str, None] = {}
        for reference in self.references:
            seen.setdefault(reference.name, None)
        return list(seen)

    @property
    def references(self) -> list[AccessorReference]:
        return find_accessor_references(self.text)

    @property
    def label(self) -> str:
        return str(self.source) if self.source is not None else "<author partial>"

    @classmethod
    def from_text(cls, text: str, source: Path | str | None = None) -> "AuthorPartial":
        return cls(text=text, source=source)
