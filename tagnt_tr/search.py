from __future__ import annotations
from dataclasses import dataclass
from typing import List, Literal, Optional

from .books import book_name
from .source import load_cache
from .store import PathLike

Kind = Literal["verse", "word"]
System = Literal["standard", "ordinal", "reduced"]

_KINDS = ("verse", "word")
_SYSTEMS = ("standard", "ordinal", "reduced")

@dataclass
class Hit:
    kind: str
    ref: str
    text: str
    gematria: int
    system: str
    match_text: Optional[str] = None
    position: Optional[int] = None

def _ref(book: str, chapter: int, verse: int) -> str:
    return f"{book_name(book)} {chapter}:{verse}"

def search(
    value: int,
    kind: Optional[Kind] = None,
    system: System = "standard",
    book: Optional[str] = None,  # Filter by book
    limit: Optional[int] = None,   # None = return all
    offset: int = 0,
    data_dir: Optional[PathLike] = None,
) -> List[Hit]:
    if kind is not None and kind not in _KINDS:
        raise ValueError(f"kind must be one of: {', '.join(_KINDS)}")
    if system not in _SYSTEMS:
        raise ValueError(f"system must be one of: {', '.join(_SYSTEMS)}")

    # load_cache yields verses in canonical order already
    verses = load_cache(book=book, data_dir=data_dir)
    verse_hits: List[Hit] = []
    word_hits: List[Hit] = []

    for key, v in verses.items():
        b, c, n = key.rsplit(".", 2)
        ref = _ref(b, int(c), int(n))

        if kind in (None, "verse") and getattr(v.gematria, system) == value:
            verse_hits.append(Hit(kind="verse", ref=ref, text=v.text, gematria=value, system=system))

        if kind in (None, "word"):
            for w in v.words:
                if getattr(w.gematria, system) == value:
                    word_hits.append(Hit(
                        kind="word",
                        ref=ref,
                        text=v.text,
                        gematria=value,
                        system=system,
                        match_text=w.text,
                        position=w.position,
                    ))

    hits = verse_hits + word_hits
    if limit is None:
        return hits[offset:]
    return hits[offset:offset + limit]
