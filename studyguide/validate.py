"""
Editorial checks over the notes corpus.

Errors are things a reader would trip over (a broken link, a listing that does
not parse). Warnings are gaps in coverage. Nothing here raises for content
problems; every check appends a prefixed message instead.
"""

import ast
import posixpath
from urllib.parse import unquote, urlsplit

from .config import Settings
from .corpus import Corpus, Document
from .errors import ConfigError

PYTHON_LANGUAGES = {"python", "py", "python3"}


def check_python_source(code: str) -> str | None:
    """Return a one-line syntax error description, or None if code parses."""
    try:
        ast.parse(code)
    except SyntaxError as e:
        return f"line {e.lineno}: {e.msg}"
    return None


def resolve_link(doc: Document, target: str) -> str | None:
    """Corpus-relative path a local link points to, or None for anchors/URLs."""
    parts = urlsplit(target)
    if parts.scheme or parts.netloc or not parts.path:
        return None
    path = unquote(parts.path)
    if path.startswith("/"):
        return posixpath.normpath(path.lstrip("/"))
    return posixpath.normpath(posixpath.join(posixpath.dirname(doc.rel_path), path))


def validate_document(doc: Document, corpus: Corpus, settings: Settings | None = None) -> tuple[list[str], list[str]]:
    """Returns (errors, warnings)."""
    settings = settings or Settings()
    errors = []
    warnings = []
    prefix = f"[{doc.rel_path}]"

    # === STRUCTURE ===
    if doc.section not in settings.sections and doc.rel_path != "README.md":
        errors.append(f"{prefix} Outside known sections {list(settings.sections)}")

    if not doc.title:
        errors.append(f"{prefix} Missing '# ' title")

    if doc.unterminated_fence is not None:
        errors.append(f"{prefix} Code fence opened on line {doc.unterminated_fence} is never closed")

    if doc.words == 0 and not doc.code_blocks:
        warnings.append(f"{prefix} Empty document")

    # === CODE LISTINGS ===
    for block in doc.code_blocks:
        if not block.language:
            warnings.append(f"{prefix} Code block on line {block.line} has no language tag")
        elif block.language in PYTHON_LANGUAGES:
            problem = check_python_source(block.code)
            if problem:
                errors.append(f"{prefix} Python block on line {block.line} does not parse ({problem})")

    # === DSA COVERAGE ===
    if doc.section == "dsa":
        if not doc.code_blocks:
            warnings.append(f"{prefix} DSA note has no code listing")
        text_lower = doc.text.lower()
        if not any(marker in text_lower for marker in settings.complexity_markers):
            warnings.append(f"{prefix} DSA note never discusses complexity")

    # === LOCAL LINKS ===
    known = {d.rel_path for d in corpus}
    for link in doc.links:
        if link.is_external:
            continue
        target = resolve_link(doc, link.target)
        if target is None:
            continue
        if target.startswith(".."):
            errors.append(f"{prefix} Link on line {link.line} escapes the notes root: {link.target}")
        elif target.endswith(".md") and target not in known:
            errors.append(f"{prefix} Broken link on line {link.line}: {link.target}")
        elif not target.endswith(".md") and not (corpus.root / target).exists():
            errors.append(f"{prefix} Broken link on line {link.line}: {link.target}")

    return errors, warnings


def validate_corpus(corpus: Corpus, settings: Settings | None = None, section: str | None = None) -> tuple[list[str], list[str]]:
    settings = settings or Settings()
    if section and section not in settings.sections:
        raise ConfigError(f"unknown section '{section}', expected one of {list(settings.sections)}")
    errors = []
    warnings = []
    if not len(corpus):
        warnings.append(f"[{corpus.root}] No markdown documents found")
    for doc in corpus:
        if section and doc.section != section:
            continue
        doc_errors, doc_warnings = validate_document(doc, corpus, settings)
        errors.extend(doc_errors)
        warnings.extend(doc_warnings)
    return errors, warnings


def exit_code(errors: list[str], warnings: list[str], strict: bool = False) -> int:
    if errors or (strict and warnings):
        return 1
    return 0
