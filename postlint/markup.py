"""
Scanner for the lightweight markup used in post entries.

Recognises preformatted code blocks (HTML ``<pre>`` and backtick fences) and
inline hyperlinks (HTML anchors, Markdown and Textile links). Nothing is
rendered; the scanner only reports what it finds and where.
"""

import re
from dataclasses import dataclass

_CODE_TOKEN_RE = re.compile(
    r"(?P<pre_open><pre\b[^>]*>)|(?P<pre_close></pre\s*>)|(?P<fence>^[ \t]*```[^\n]*$)",
    re.IGNORECASE | re.MULTILINE,
)
_CODE_TAG_RE = re.compile(r"</?code\b[^>]*>", re.IGNORECASE)

_HTML_LINK_RE = re.compile(
    r"<a\b[^>]*?\bhref\s*=\s*(?P<quote>[\"'])(?P<target>.*?)(?P=quote)[^>]*>(?P<text>.*?)</a\s*>",
    re.IGNORECASE | re.DOTALL,
)
_MARKDOWN_LINK_RE = re.compile(
    r"\[(?P<text>[^\]\n]*)\]\((?P<target>[^)\s]*)(?:\s+\"[^\"\n]*\")?\)"
)
# A bare "text": counts as a link only at the end of a line
_TEXTILE_LINK_RE = re.compile(
    r"\"(?P<text>[^\"\n]+)\":(?:(?P<target>[^\s<>\"]*[^\s<>\".,;:!?)\]])|(?=[ \t]*$))",
    re.MULTILINE,
)

PRE = "pre"
FENCE = "fence"


@dataclass(frozen=True)
class CodeBlock:
    """A preformatted block of example code"""

    kind: str
    start_line: int
    end_line: int
    body: str
    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return not _CODE_TAG_RE.sub("", self.body).strip()


@dataclass(frozen=True)
class CodeMarker:
    """A code block delimiter without a matching partner"""

    kind: str
    line: int
    message: str


@dataclass(frozen=True)
class Link:
    """An inline hyperlink"""

    kind: str
    text: str
    target: str
    line: int


def _line_of(text: str, offset: int) -> int:
    return text.count("\n", 0, offset) + 1


def _kind_of(opener: re.Match) -> str:
    return PRE if opener.lastgroup == "pre_open" else FENCE


def _scan_code(text: str) -> tuple[list[CodeBlock], list[CodeMarker], int | None]:
    blocks: list[CodeBlock] = []
    markers: list[CodeMarker] = []
    opener: re.Match | None = None

    for match in _CODE_TOKEN_RE.finditer(text):
        token = match.lastgroup
        line = _line_of(text, match.start())

        if opener is None:
            if token == "pre_close":
                markers.append(CodeMarker(PRE, line, "closing </pre> without opening <pre>"))
            else:
                opener = match
            continue

        open_kind = _kind_of(opener)

        # Inside a fence everything but another fence is literal text
        if open_kind == FENCE and token != "fence":
            continue

        if open_kind == PRE and token == "fence":
            continue

        if open_kind == PRE and token == "pre_open":
            markers.append(CodeMarker(PRE, line, "nested <pre> inside an open <pre> block"))
            continue

        blocks.append(
            CodeBlock(
                kind=open_kind,
                start_line=_line_of(text, opener.start()),
                end_line=line,
                body=text[opener.end() : match.start()],
                start=opener.start(),
                end=match.end(),
            )
        )
        opener = None

    if opener is None:
        return blocks, markers, None

    open_kind = _kind_of(opener)
    opener_text = "<pre>" if open_kind == PRE else "```"
    markers.append(
        CodeMarker(
            open_kind,
            _line_of(text, opener.start()),
            f"{opener_text} block is never closed",
        )
    )
    return blocks, markers, opener.start()


def find_code_blocks(text: str) -> list[CodeBlock]:
    """Return the complete code blocks in document order."""
    blocks, _, _ = _scan_code(text)
    return blocks


def unbalanced_code_markers(text: str) -> list[CodeMarker]:
    """Return code block delimiters that have no matching partner."""
    _, markers, _ = _scan_code(text)
    return markers


def _mask_code(text: str) -> str:
    """Blank out code blocks, keeping offsets and line breaks intact."""
    blocks, _, unclosed_at = _scan_code(text)
    spans = [(block.start, block.end) for block in blocks]

    # Everything after an unclosed opener is code
    if unclosed_at is not None:
        spans.append((unclosed_at, len(text)))

    masked = text
    for start, end in spans:
        segment = re.sub(r"[^\n]", " ", masked[start:end])
        masked = masked[:start] + segment + masked[end:]
    return masked


def find_links(text: str) -> list[Link]:
    """Return hyperlinks outside code blocks, ordered by position."""
    masked = _mask_code(text)
    found: list[tuple[int, Link]] = []

    for kind, pattern in (
        ("html", _HTML_LINK_RE),
        ("markdown", _MARKDOWN_LINK_RE),
        ("textile", _TEXTILE_LINK_RE),
    ):
        for match in pattern.finditer(masked):
            link = Link(
                kind=kind,
                text=match.group("text").strip(),
                target=(match.group("target") or "").strip(),
                line=_line_of(masked, match.start()),
            )
            found.append((match.start(), link))

    found.sort(key=lambda item: item[0])
    return [link for _, link in found]
