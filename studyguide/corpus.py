"""
Markdown notes loader.

A document is read once into a Document: its title, headings, fenced code
blocks, links and table count. Nothing is rendered; the parser only knows
enough markdown to audit and index the notes.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from .errors import CorpusError

FENCE_RE = re.compile(r"^(\s*)(`{3,}|~{3,})\s*([\w+#.-]*)")
HEADING_RE = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
LINK_RE = re.compile(r"(?<!!)\[([^\]]*)\]\(([^)\s]+)(?:\s+\"[^\"]*\")?\)")
AUTOLINK_RE = re.compile(r"<(https?://[^>\s]+)>")
TABLE_SEP_RE = re.compile(r"^\s*\|?\s*:?-{3,}:?\s*(\|\s*:?-{3,}:?\s*)*\|?\s*$")
WORD_RE = re.compile(r"\w+")


@dataclass
class CodeBlock:
    language: str
    code: str
    line: int


@dataclass
class Link:
    text: str
    target: str
    line: int

    @property
    def is_external(self) -> bool:
        return self.target.startswith(("http://", "https://"))


@dataclass
class Document:
    rel_path: str
    title: str | None = None
    headings: list[tuple[int, str]] = field(default_factory=list)
    code_blocks: list[CodeBlock] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    tables: int = 0
    words: int = 0
    unterminated_fence: int | None = None
    text: str = ""

    @property
    def parts(self) -> tuple[str, ...]:
        return PurePosixPath(self.rel_path).parts

    @property
    def section(self) -> str:
        return self.parts[0] if len(self.parts) > 1 else ""

    @property
    def topic(self) -> str | None:
        if self.section == "dsa" and len(self.parts) > 2:
            return self.parts[1]
        return None

    @property
    def languages(self) -> list[str]:
        return sorted({b.language for b in self.code_blocks if b.language})


def parse_markdown(text: str, rel_path: str) -> Document:
    doc = Document(rel_path=rel_path, text=text)
    fence = None          # (marker, language, start line, lines)
    prose = []

    for lineno, line in enumerate(text.splitlines(), 1):
        if fence is not None:
            marker, language, start, body = fence
            if line.strip().startswith(marker) and not line.strip().strip(marker[0]):
                doc.code_blocks.append(CodeBlock(language, "\n".join(body), start))
                fence = None
            else:
                body.append(line)
            continue

        m = FENCE_RE.match(line)
        if m:
            fence = (m.group(2), m.group(3).lower(), lineno, [])
            continue

        prose.append(line)
        heading = HEADING_RE.match(line)
        if heading:
            level, title = len(heading.group(1)), heading.group(2)
            doc.headings.append((level, title))
            if level == 1 and doc.title is None:
                doc.title = title
        if TABLE_SEP_RE.match(line) and "|" in line:
            doc.tables += 1
        for text_, target in LINK_RE.findall(line):
            doc.links.append(Link(text_, target, lineno))
        for url in AUTOLINK_RE.findall(line):
            doc.links.append(Link(url, url, lineno))

    if fence is not None:
        marker, language, start, body = fence
        doc.unterminated_fence = start
        doc.code_blocks.append(CodeBlock(language, "\n".join(body), start))

    doc.words = len(WORD_RE.findall("\n".join(
        line for line in prose if not HEADING_RE.match(line)
    )))
    return doc


@dataclass
class Corpus:
    root: Path
    documents: list[Document] = field(default_factory=list)

    def __iter__(self):
        return iter(self.documents)

    def __len__(self) -> int:
        return len(self.documents)

    def find(self, rel_path: str) -> Document | None:
        for doc in self.documents:
            if doc.rel_path == rel_path:
                return doc
        return None

    def by_section(self) -> dict[str, list[Document]]:
        grouped = {}
        for doc in self.documents:
            grouped.setdefault(doc.section, []).append(doc)
        return grouped

    def by_topic(self) -> dict[str, list[Document]]:
        grouped = {}
        for doc in self.documents:
            if doc.topic:
                grouped.setdefault(doc.topic, []).append(doc)
        return grouped


def load_corpus(root: Path, ignore=()) -> Corpus:
    """Read every *.md under root in sorted path order."""
    root = Path(root)
    if not root.is_dir():
        raise CorpusError(f"notes directory not found: {root}")

    corpus = Corpus(root=root)
    for path in sorted(root.rglob("*.md")):
        rel_path = path.relative_to(root).as_posix()
        if any(PurePosixPath(rel_path).match(pattern) for pattern in ignore):
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusError(f"cannot read {rel_path}: {e}") from e
        corpus.documents.append(parse_markdown(text, rel_path))
    return corpus
