from __future__ import annotations
from dataclasses import asdict
from typing import Any, Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from .gematria import compute_greek, normalize_greek
from .search import search
from .source import list_books, load_chapter, load_verse, source_info
from .store import VerseData

app = FastAPI(title="TAGNT Textus Receptus")

class GematriaOut(BaseModel):
    standard: int
    ordinal: int
    reduced: int

class WordOut(BaseModel):
    position: int
    text: str
    lemma: Optional[List[str]] = None
    strongs: Optional[str] = None
    morph: Optional[str] = None
    translation: str = ""
    metadata: Dict[str, Any] = {}
    gematria: GematriaOut

class VerseOut(BaseModel):
    text: str
    words: List[WordOut]
    gematria: GematriaOut

class HitOut(BaseModel):
    kind: str
    ref: str
    text: str
    gematria: int
    system: str
    match_text: Optional[str] = None
    position: Optional[int] = None

def _verse_out(v: VerseData) -> VerseOut:
    return VerseOut(**v.to_dict())

@app.get("/")
def home():
    return {**source_info, "endpoints": ["/gematria", "/books", "/verses/{book}/{chapter}/{verse}", "/search"]}

@app.get("/gematria")
def api_gematria(
    text: str = Query(..., description="Greek text to score"),
):
    return {
        "text": text,
        "normalized": normalize_greek(text),
        "gematria": compute_greek(text).as_dict(),
    }

@app.get("/books", response_model=List[str])
def api_books():
    return list_books()

@app.get("/verses/{book}/{chapter}/{verse}", response_model=VerseOut)
def api_verse(book: str, chapter: int, verse: int):
    try:
        return _verse_out(load_verse(book, chapter, verse))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@app.get("/verses/{book}/{chapter}", response_model=List[VerseOut])
def api_chapter(book: str, chapter: int):
    try:
        return [_verse_out(v) for v in load_chapter(book, chapter)]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@app.get("/search", response_model=List[HitOut])
def api_search(
    value: Optional[int] = Query(None, ge=0, description="Gematria value to search"),
    text: Optional[str] = Query(None, description="Greek text: its gematria is computed, then searched"),
    kind: Optional[Literal["verse", "word"]] = None,
    system: Literal["standard", "ordinal", "reduced"] = "standard",
    book: Optional[str] = None,
    # Default: return everything (no limit)
    limit: Optional[int] = Query(None, ge=1, le=200000),
    offset: int = Query(0, ge=0),
):
    if value is None:
        if not text:
            raise HTTPException(status_code=400, detail="Provide value or text")
        value = getattr(compute_greek(text), system)

    try:
        hits = search(value=value, kind=kind, system=system, book=book, limit=limit, offset=offset)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [HitOut(**asdict(h)) for h in hits]
