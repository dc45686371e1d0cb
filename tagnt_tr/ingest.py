from __future__ import annotations
import re
from pathlib import Path
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

import pandas as pd

from .books import resolve_book, to_osis
from .bootstrap_data import ensure_parquet
from .gematria import compute_greek
from .source import clear_cache
from .store import WordEntry, data_dir_from_env, make_verse, write_metadata, write_verse

_REFERENCE_RE = re.compile(r"^(\w+)\.(\d+)\.(\d+)\.(\d+)$")
# Optional sense letter after the number: G2424G, G3754H, ...
_DSTRONGS_RE = re.compile(r"^G(\d+)[A-Z]?=(.+)$")

_COLUMNS = ("reference", "text", "transliteration", "translation", "dStrongs", "manuscript_source")

IMPORT_METADATA = {
    "abbreviation": "TR",
    "name": "Textus Receptus (STEPBible)",
    "language": "Greek",
    "license": "CC BY 4.0",
    "source": "STEPBible",
    "urls": [
        "https://www.stepbible.org",
        "https://huggingface.co/datasets/hmcgovern/original-language-bibles-greek",
        "https://github.com/STEPBible/STEPBible-Data",
    ],
    "attribution": {
        "source": "STEP Bible / Tyndale House Cambridge - CC BY 4.0",
        "huggingface_curator": "Hope McGovern",
    },
    "filter": "manuscript_source contains K (Textus Receptus only)",
}

class RawRow(NamedTuple):
    reference: str
    text: str
    transliteration: str
    translation: str
    dStrongs: str
    manuscript_source: str

class Reference(NamedTuple):
    book: str
    chapter: int
    verse: int
    position: int

VerseKey = Tuple[str, int, int]  # (book, chapter, verse)

def read_parquet(path: Path) -> List[RawRow]:
    print(f"[ingest] Reading parquet file {path} ...", flush=True)
    df = pd.read_parquet(path, engine="pyarrow")
    df = df.reindex(columns=list(_COLUMNS)).fillna("").astype(str)
    rows = [RawRow(*rec) for rec in df.itertuples(index=False, name=None)]
    print(f"[ingest] Read {len(rows):,} total rows", flush=True)
    return rows

def filter_to_tr(rows: List[RawRow]) -> List[RawRow]:
    """Textus Receptus readings carry 'K' in manuscript_source."""
    filtered = [r for r in rows if "K" in r.manuscript_source]
    pct = (len(filtered) / len(rows) * 100) if rows else 0.0
    print(f"[ingest] Filtered to {len(filtered):,} TR readings ({pct:.1f}%)", flush=True)
    return filtered

def parse_reference(ref: str) -> Optional[Reference]:
    m = _REFERENCE_RE.match(ref)
    if not m:
        return None
    abbr, chapter, verse, position = m.groups()
    return Reference(to_osis(abbr), int(chapter), int(verse), int(position))

def parse_dstrongs(dstrongs: str) -> Optional[Tuple[str, str]]:
    """'G0976=N-NSF' -> ('G976', 'robinson:N-NSF')"""
    m = _DSTRONGS_RE.match(dstrongs)
    if not m:
        return None
    num, morph = m.groups()
    return (f"G{int(num)}", f"robinson:{morph}")

def build_word(row: RawRow, position: int) -> WordEntry:
    parsed = parse_dstrongs(row.dStrongs)
    metadata = {"transliteration": row.transliteration} if row.transliteration else {}
    return WordEntry(
        position=position,
        text=row.text,
        lemma=[parsed[0]] if parsed else None,
        strongs=parsed[0] if parsed else None,
        morph=parsed[1] if parsed else None,
        translation=row.translation,
        metadata=metadata,
        gematria=compute_greek(row.text),
    )

def group_by_verse(rows: Iterable[RawRow]) -> Dict[VerseKey, List[WordEntry]]:
    verses: Dict[VerseKey, List[WordEntry]] = {}
    for row in rows:
        ref = parse_reference(row.reference)
        if ref is None:
            continue
        key = (ref.book, ref.chapter, ref.verse)
        verses.setdefault(key, []).append(build_word(row, ref.position))

    for words in verses.values():
        words.sort(key=lambda w: w.position)
        for i, w in enumerate(words, 1):
            w.position = i
    return verses

def ingest(
    parquet_path: Optional[str] = None,
    data_dir: Optional[str] = None,
    source_dir: Optional[str] = None,
    books: Optional[List[str]] = None,
    url: Optional[str] = None,
    force_download: bool = False,
    progress_every: int = 1000,
) -> int:
    # Book names are checked before any download
    books_set = set(resolve_book(b) for b in books) if books else None

    if parquet_path:
        path = Path(parquet_path)
        if not path.exists():
            raise FileNotFoundError(str(path))
    else:
        path = ensure_parquet(source_dir, url, force=force_download)

    out_dir = data_dir_from_env(data_dir)

    rows = filter_to_tr(read_parquet(path))
    print("[ingest] Grouping by verse ...", flush=True)
    verses = group_by_verse(rows)
    if books_set:
        verses = {k: v for k, v in verses.items() if k[0] in books_set}
    print(f"[ingest] Found {len(verses):,} verses", flush=True)

    count = 0
    for (book, chapter, verse), words in verses.items():
        write_verse(out_dir, book, chapter, verse, make_verse(words))
        count += 1
        if count % progress_every == 0:
            print(f"[ingest] Saved {count:,}/{len(verses):,} verses", flush=True)

    write_metadata(out_dir, IMPORT_METADATA)
    clear_cache()
    print(f"Done. Verses written: {count:,}. Data: {out_dir}", flush=True)
    return count
