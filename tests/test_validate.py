import pytest

from studyguide.config import Settings
from studyguide.corpus import load_corpus
from studyguide.errors import ConfigError
from studyguide.validate import check_python_source, exit_code, resolve_link, validate_corpus, validate_document

GOOD_DSA = """\
# Two Sum

Complexity: O(n).

```python
def two_sum(nums, target):
    return None
```
"""


def _validate(write_notes, files, rel_path):
    corpus = load_corpus(write_notes(files))
    return validate_document(corpus.find(rel_path), corpus, Settings())


def test_clean_dsa_note(write_notes):
    errors, warnings = _validate(write_notes, {"dsa/arrays/two-sum.md": GOOD_DSA}, "dsa/arrays/two-sum.md")
    assert errors == []
    assert warnings == []


def test_missing_title_and_bad_python(write_notes):
    text = "Intro\n\n```python\ndef broken(:\n```\n"
    errors, _ = _validate(write_notes, {"cloud/x.md": text}, "cloud/x.md")
    assert any("Missing '# ' title" in e for e in errors)
    assert any("does not parse" in e and "line 3" in e for e in errors)
    assert all(e.startswith("[cloud/x.md]") for e in errors)


def test_unterminated_fence_is_error(write_notes):
    errors, _ = _validate(write_notes, {"cloud/x.md": "# X\n\n```python\nx = 1\n"}, "cloud/x.md")
    assert any("never closed" in e for e in errors)


def test_dsa_coverage_warnings(write_notes):
    _, warnings = _validate(write_notes, {"dsa/graphs/bfs.md": "# BFS\n\nVisit level by level.\n"},
                            "dsa/graphs/bfs.md")
    assert any("no code listing" in w for w in warnings)
    assert any("complexity" in w for w in warnings)


def test_untagged_fence_and_empty_doc_warn(write_notes):
    _, warnings = _validate(write_notes, {"cloud/x.md": "# X\n\n```\nls\n```\n"}, "cloud/x.md")
    assert any("no language tag" in w for w in warnings)
    _, warnings = _validate(write_notes, {"cloud/y.md": "# Y\n"}, "cloud/y.md")
    assert any("Empty document" in w for w in warnings)


def test_unknown_section_is_error(write_notes):
    errors, _ = _validate(write_notes, {"misc/x.md": "# X\n\ntext\n"}, "misc/x.md")
    assert any("Outside known sections" in e for e in errors)


def test_local_links(write_notes):
    files = {
        "system-design/cap.md": "# CAP\n\n[eda](eda.md) [gone](missing.md) [up](../../x.md)\n"
                                "[anchor](#cp-vs-ap) [img](img/diagram.png)\n",
        "system-design/eda.md": "# EDA\n\n[back](cap.md#cp-vs-ap) [trie](/dsa/trie.md)\n",
    }
    errors, _ = _validate(write_notes, files, "system-design/cap.md")
    assert any("Broken link" in e and "missing.md" in e for e in errors)
    assert any("escapes the notes root" in e for e in errors)
    assert any("img/diagram.png" in e for e in errors)
    assert not any("eda.md" in e for e in errors)
    assert not any("#cp-vs-ap" in e for e in errors)

    errors, _ = _validate(write_notes, files, "system-design/eda.md")
    assert errors == ["[system-design/eda.md] Broken link on line 3: /dsa/trie.md"]


def test_resolve_link():
    from studyguide.corpus import parse_markdown
    doc = parse_markdown("# X\n", "dsa/trie/trie.md")
    assert resolve_link(doc, "../heaps/top-k.md") == "dsa/heaps/top-k.md"
    assert resolve_link(doc, "top-k.md#section") == "dsa/trie/top-k.md"
    assert resolve_link(doc, "#section") is None
    assert resolve_link(doc, "https://example.com") is None
    assert resolve_link(doc, "/cloud/compute.md") == "cloud/compute.md"


def test_check_python_source():
    assert check_python_source("x = 1\n") is None
    assert check_python_source("def f(:\n").startswith("line 1")


def test_validate_corpus_section_filter(write_notes):
    root = write_notes({"cloud/x.md": "no title\n", "dsa/a/b.md": GOOD_DSA})
    corpus = load_corpus(root)
    errors, _ = validate_corpus(corpus, Settings(), section="dsa")
    assert errors == []
    errors, _ = validate_corpus(corpus, Settings())
    assert len(errors) == 1


def test_exit_code():
    assert exit_code([], []) == 0
    assert exit_code([], ["w"]) == 0
    assert exit_code([], ["w"], strict=True) == 1
    assert exit_code(["e"], []) == 1


def test_repo_notes_are_clean(repo_notes):
    corpus = load_corpus(repo_notes)
    errors, warnings = validate_corpus(corpus, Settings(notes_dir=repo_notes))
    assert errors == []
    assert warnings == []


def test_validate_corpus_rejects_unknown_section(write_notes):
    corpus = load_corpus(write_notes({"dsa/a/b.md": GOOD_DSA}))
    with pytest.raises(ConfigError, match="unknown section 'algos'"):
        validate_corpus(corpus, Settings(), section="algos")
