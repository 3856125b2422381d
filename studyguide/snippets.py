"""Pull code listings out of the notes so they can be checked or run."""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from .corpus import CodeBlock, Corpus, Document
from .validate import PYTHON_LANGUAGES, check_python_source

EXTENSIONS = {
    "python": "py", "py": "py", "python3": "py",
    "java": "java", "javascript": "js", "js": "js", "typescript": "ts", "ts": "ts",
    "go": "go", "cpp": "cpp", "c++": "cpp", "c": "c", "sql": "sql",
    "bash": "sh", "sh": "sh", "shell": "sh", "yaml": "yaml", "yml": "yaml",
    "json": "json", "hcl": "tf", "terraform": "tf",
}


@dataclass
class Snippet:
    doc: Document
    block: CodeBlock
    index: int

    @property
    def extension(self) -> str:
        return EXTENSIONS.get(self.block.language, "txt")

    @property
    def filename(self) -> str:
        """<rel_path without .md>_<n>.<ext>, unique within a corpus."""
        stem = PurePosixPath(self.doc.rel_path).with_suffix("")
        return f"{stem.as_posix()}_{self.index}.{self.extension}"


def extract_snippets(corpus: Corpus, language: str | None = None):
    """Yield every code block, optionally only those in one language."""
    wanted = None
    if language:
        wanted = PYTHON_LANGUAGES if language.lower() in PYTHON_LANGUAGES else {language.lower()}
    for doc in corpus:
        for index, block in enumerate(doc.code_blocks, 1):
            if wanted is None or block.language in wanted:
                yield Snippet(doc, block, index)


def check_python(snippet: Snippet) -> str | None:
    if snippet.block.language not in PYTHON_LANGUAGES:
        return None
    return check_python_source(snippet.block.code)


def write_snippets(snippets, out_dir: Path) -> list[Path]:
    out_dir = Path(out_dir)
    written = []
    for snippet in snippets:
        target = out_dir / snippet.filename
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(snippet.block.code.rstrip("\n") + "\n", encoding="utf-8")
        written.append(target)
    return written
