from __future__ import annotations
import json
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .gematria import Gematria, sum_gematria

DEFAULT_DATA_DIR = Path("data") / "hf-hmcgovern-olb-greek-stepbible-tagnt-tr"

_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([,.;:!?\u00b7\u0387])")

PathLike = Union[str, Path]

def data_dir_from_env(data_dir: Optional[PathLike] = None) -> Path:
    return Path(data_dir or os.environ.get("TAGNT_DATA_DIR", str(DEFAULT_DATA_DIR)))

@dataclass
class WordEntry:
    position: int
    text: str
    lemma: Optional[List[str]] = None
    strongs: Optional[str] = None
    morph: Optional[str] = None
    translation: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)
    gematria: Gematria = field(default_factory=Gematria)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"position": self.position, "text": self.text, "lemma": self.lemma}
        if self.strongs is not None:
            d["strongs"] = self.strongs
        d["morph"] = self.morph
        d["translation"] = self.translation
        d["metadata"] = self.metadata
        d["gematria"] = self.gematria.as_dict()
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "WordEntry":
        return cls(
            position=int(d["position"]),
            text=d["text"],
            lemma=d.get("lemma"),
            strongs=d.get("strongs"),
            morph=d.get("morph"),
            translation=d.get("translation") or "",
            metadata=d.get("metadata") or {},
            gematria=Gematria.from_dict(d.get("gematria")),
        )

@dataclass
class VerseData:
    text: str
    words: List[WordEntry]
    gematria: Gematria

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "words": [w.to_dict() for w in self.words],
            "gematria": self.gematria.as_dict(),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "VerseData":
        return cls(
            text=d["text"],
            words=[WordEntry.from_dict(w) for w in d.get("words", [])],
            gematria=Gematria.from_dict(d.get("gematria")),
        )

def verse_text(words: List[WordEntry]) -> str:
    text = " ".join(w.text for w in words)
    return _SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)

def make_verse(words: List[WordEntry]) -> VerseData:
    # Verse totals are always the field-wise sum of the word triples.
    return VerseData(
        text=verse_text(words),
        words=words,
        gematria=sum_gematria(w.gematria for w in words),
    )

def verse_path(data_dir: PathLike, book: str, chapter: int, verse: int) -> Path:
    return Path(data_dir) / book / str(chapter) / f"{verse}.json"

def write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))

def write_verse(data_dir: PathLike, book: str, chapter: int, verse: int, data: VerseData) -> Path:
    path = verse_path(data_dir, book, chapter, verse)
    write_json(path, data.to_dict())
    return path

def write_metadata(data_dir: PathLike, metadata: Dict[str, Any]) -> Path:
    path = Path(data_dir) / "metadata.json"
    write_json(path, metadata)
    return path
