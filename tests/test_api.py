import pytest
from fastapi.testclient import TestClient

from tagnt_tr.api import app


@pytest.fixture
def client(data_dir, monkeypatch):
    monkeypatch.setenv("TAGNT_DATA_DIR", str(data_dir))
    return TestClient(app)


def test_home(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["edition"] == "hf-hmcgovern-olb-greek-stepbible-tagnt-tr"


def test_gematria(client):
    r = client.get("/gematria", params={"text": "ἀρχῇ"})
    assert r.status_code == 200
    assert r.json() == {
        "text": "ἀρχῇ",
        "normalized": "αρχηι",
        "gematria": {"standard": 719, "ordinal": 56, "reduced": 29},
    }


def test_gematria_requires_text(client):
    assert client.get("/gematria").status_code == 422


def test_gematria_empty_text_scores_zero(client):
    r = client.get("/gematria", params={"text": ""})
    assert r.status_code == 200
    assert r.json()["gematria"] == {"standard": 0, "ordinal": 0, "reduced": 0}


def test_books(client):
    r = client.get("/books")
    assert r.status_code == 200
    assert len(r.json()) == 27


def test_verse(client):
    r = client.get("/verses/John/1/1")
    assert r.status_code == 200
    body = r.json()
    assert body["gematria"]["standard"] == 3627
    assert len(body["words"]) == 17
    assert body["words"][4]["gematria"]["standard"] == 373


def test_verse_not_found(client):
    assert client.get("/verses/John/1/999").status_code == 404


def test_verse_unknown_book(client):
    assert client.get("/verses/Hezekiah/1/1").status_code == 400


def test_chapter(client):
    r = client.get("/verses/John/1")
    assert r.status_code == 200
    assert len(r.json()) == 3
    assert client.get("/verses/John/99").status_code == 404


def test_search_by_value(client):
    r = client.get("/search", params={"value": 373, "kind": "word"})
    assert r.status_code == 200
    assert [h["position"] for h in r.json()] == [5, 8, 17]


def test_search_by_text(client):
    r = client.get("/search", params={"text": "λογος", "kind": "word", "system": "ordinal"})
    assert r.status_code == 200
    hits = r.json()
    assert len(hits) == 3
    assert hits[0]["gematria"] == 62


def test_search_requires_value_or_text(client):
    assert client.get("/search").status_code == 400


def test_search_unknown_book(client):
    assert client.get("/search", params={"value": 1, "book": "Hezekiah"}).status_code == 400
