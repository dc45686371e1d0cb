from __future__ import annotations
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .books import OSIS_BOOKS, book_name, resolve_book
from .store import PathLike, VerseData, data_dir_from_env, read_json, verse_path

EDITION = "hf-hmcgovern-olb-greek-stepbible-tagnt-tr"

metadata = {
    "abbreviation": EDITION,
    "name": "Textus Receptus (STEPBible TAGNT)",
    "language": "Greek",
    "license": "CC BY 4.0",
    "source": "STEPBible",
    "urls": [
        "https://www.stepbible.org",
        "https://huggingface.co/datasets/hmcgovern/original-language-bibles-greek",
        "https://github.com/STEPBible/STEPBible-Data",
    ],
}

source_info = {"edition": EDITION, "metadata": metadata}

# (data_dir, book) -> verses
_cache: Dict[Tuple[str, Optional[str]], Dict[str, VerseData]] = {}

def list_books() -> List[str]:
    return [book_name(b) for b in OSIS_BOOKS]

def load_verse(book: str, chapter: int, verse: int, data_dir: Optional[PathLike] = None) -> VerseData:
    osis = resolve_book(book)
    path = verse_path(data_dir_from_env(data_dir), osis, chapter, verse)
    if not path.is_file():
        raise FileNotFoundError(f"Verse not found: {book} {chapter}:{verse} ({path})")
    return VerseData.from_dict(read_json(path))

def _verse_files(chapter_dir: Path) -> List[Tuple[int, Path]]:
    files = []
    for p in chapter_dir.glob("*.json"):
        if p.stem.isdigit():
            files.append((int(p.stem), p))
    files.sort()
    return files

def _chapter_dirs(book_dir: Path) -> List[Tuple[int, Path]]:
    dirs = [(int(p.name), p) for p in book_dir.iterdir() if p.is_dir() and p.name.isdigit()]
    dirs.sort()
    return dirs

def load_chapter(book: str, chapter: int, data_dir: Optional[PathLike] = None) -> List[VerseData]:
    osis = resolve_book(book)
    chapter_dir = data_dir_from_env(data_dir) / osis / str(chapter)
    files = _verse_files(chapter_dir) if chapter_dir.is_dir() else []
    if not files:
        raise FileNotFoundError(f"Chapter not found: {book} {chapter} ({chapter_dir})")
    return [VerseData.from_dict(read_json(p)) for _, p in files]

def load_cache(book: Optional[str] = None, data_dir: Optional[PathLike] = None) -> Dict[str, VerseData]:
    """
    Load every verse (or every verse of one book) keyed "<OSIS>.<chapter>.<verse>".
    Results are memoized per data directory; call clear_cache() after a re-import.
    """
    root = data_dir_from_env(data_dir)
    osis = resolve_book(book) if book else None
    key = (str(root.resolve()), osis)
    if key in _cache:
        return _cache[key]

    verses: Dict[str, VerseData] = {}
    for b in ([osis] if osis else OSIS_BOOKS):
        book_dir = root / b
        if not book_dir.is_dir():
            continue
        for c, chapter_dir in _chapter_dirs(book_dir):
            for v, p in _verse_files(chapter_dir):
                verses[f"{b}.{c}.{v}"] = VerseData.from_dict(read_json(p))

    _cache[key] = verses
    return verses

def clear_cache() -> None:
    _cache.clear()
