import pytest

from studyguide.corpus import load_corpus
from studyguide.dsa import CATALOG, algorithms_by_topic, get_algorithm


def test_names_are_unique():
    names = [algo.name for algo in CATALOG]
    assert len(names) == len(set(names))


def test_every_entry_is_callable():
    for algo in CATALOG:
        assert callable(algo.impl)
        assert algo.qualname.startswith("studyguide.dsa.")


def test_filter_and_lookup():
    assert {a.topic for a in algorithms_by_topic("heaps")} == {"heaps"}
    assert len(algorithms_by_topic()) == len(CATALOG)
    assert get_algorithm("coin-change").impl([1, 2, 5], 11) == 3
    with pytest.raises(KeyError):
        get_algorithm("bogosort")


def test_every_dsa_note_topic_has_algorithms(repo_notes):
    topics = {algo.topic for algo in CATALOG}
    corpus = load_corpus(repo_notes)
    assert set(corpus.by_topic()) <= topics
