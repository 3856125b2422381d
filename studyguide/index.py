"""
YAML index of the notes: one entry per document, grouped by section, plus a
topic map for dsa/ and corpus totals.
"""

from pathlib import Path

import yaml

from .corpus import Corpus, Document


# ── YAML helpers ─────────────────────────────────────────────────────────────

class IndexDumper(yaml.SafeDumper):
    pass


def str_representer(dumper, data):
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


IndexDumper.add_representer(str, str_representer)


# ── Index ────────────────────────────────────────────────────────────────────

def document_entry(doc: Document) -> dict:
    entry = {
        "path": doc.rel_path,
        "title": doc.title or "",
    }
    if doc.topic:
        entry["topic"] = doc.topic
    entry["headings"] = [text for level, text in doc.headings if level == 2]
    entry["languages"] = doc.languages
    entry["snippets"] = len(doc.code_blocks)
    entry["tables"] = doc.tables
    entry["words"] = doc.words
    return entry


def build_index(corpus: Corpus) -> dict:
    sections = {
        section or "root": [document_entry(doc) for doc in docs]
        for section, docs in sorted(corpus.by_section().items())
    }
    topics = {
        topic: [doc.rel_path for doc in docs]
        for topic, docs in sorted(corpus.by_topic().items())
    }
    totals = {
        "documents": len(corpus),
        "snippets": sum(len(doc.code_blocks) for doc in corpus),
        "tables": sum(doc.tables for doc in corpus),
        "words": sum(doc.words for doc in corpus),
    }
    return {"sections": sections, "topics": topics, "totals": totals}


def dump_index(index: dict) -> str:
    return yaml.dump(index, Dumper=IndexDumper, default_flow_style=False,
                     allow_unicode=True, width=120, sort_keys=False)


def save_index(index: dict, path: Path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_index(index))
