import pytest

from tagnt_tr.search import search


def test_search_verse(data_dir):
    hits = search(3627, kind="verse", data_dir=data_dir)
    assert len(hits) == 1
    assert hits[0].ref == "John 1:1"
    assert hits[0].match_text is None


def test_search_words(data_dir):
    hits = search(373, kind="word", data_dir=data_dir)
    assert [(h.ref, h.position) for h in hits] == [("John 1:1", 5), ("John 1:1", 8), ("John 1:1", 17)]
    assert hits[0].match_text == "λόγος,"


def test_search_words_in_canonical_order(data_dir):
    hits = search(58, kind="word", data_dir=data_dir)
    assert [h.ref for h in hits] == ["John 1:1"] * 3 + ["John 1:2", "John 1:10"]


def test_search_limit_offset(data_dir):
    hits = search(58, kind="word", limit=2, offset=2, data_dir=data_dir)
    assert [(h.ref, h.position) for h in hits] == [("John 1:1", 15), ("John 1:2", 2)]


def test_search_book_filter(data_dir):
    hits = search(688, book="Matthew", data_dir=data_dir)
    assert [(h.kind, h.ref, h.match_text) for h in hits] == [("word", "Matthew 1:1", "Ἰησοῦ")]
    assert search(688, book="John", data_dir=data_dir) == []


def test_search_other_systems(data_dir):
    hits = search(62, kind="word", system="ordinal", data_dir=data_dir)
    assert len(hits) == 3
    assert all(h.system == "ordinal" for h in hits)
    assert len(search(26, kind="word", system="reduced", data_dir=data_dir)) == 3


def test_search_verses_before_words(data_dir):
    hits = search(55, data_dir=data_dir)
    assert {h.kind for h in hits} == {"word"}
    hits = search(3627, data_dir=data_dir)
    assert hits[0].kind == "verse"


@pytest.mark.parametrize("kwargs", [{"system": "isopsephy"}, {"kind": "gram"}])
def test_search_rejects_bad_arguments(data_dir, kwargs):
    with pytest.raises(ValueError):
        search(1, data_dir=data_dir, **kwargs)
