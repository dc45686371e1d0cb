from __future__ import annotations
from typing import Dict, List

import pandas as pd
import pytest

from tagnt_tr.ingest import ingest
from tagnt_tr.source import clear_cache

from .corpus import JOHN_1_1, JOHN_1_2, JOHN_1_10, MATT_1_1


def _row(reference: str, text: str, source: str = "NKO", dstrongs: str = "G3588=T-NSM") -> Dict[str, str]:
    return {
        "reference": reference,
        "text": text,
        "transliteration": "",
        "translation": "",
        "dStrongs": dstrongs,
        "manuscript_source": source,
    }


def _verse_rows(abbr: str, chapter: int, verse: int, words: List[str]) -> List[Dict[str, str]]:
    return [_row(f"{abbr}.{chapter}.{verse}.{i:02d}", w) for i, w in enumerate(words, 1)]


@pytest.fixture
def tagnt_rows() -> List[Dict[str, str]]:
    # John 1:1 with a non-TR reading at source position 3, rows out of order.
    john_1_1 = []
    for i, w in enumerate(JOHN_1_1):
        pos = i + 1 if i < 2 else i + 2
        john_1_1.append(_row(f"Jhn.1.1.{pos:02d}", w))
    john_1_1.append(_row("Jhn.1.1.03", "δέ", source="NO"))
    john_1_1.reverse()

    matt = _verse_rows("Mat", 1, 1, MATT_1_1)
    matt[2] = {**matt[2], "dStrongs": "G2424G=N-GSM-P", "transliteration": "Iēsou", "translation": "of Jesus"}

    rows = matt + john_1_1
    rows += _verse_rows("Jhn", 1, 10, JOHN_1_10)
    rows += _verse_rows("Jhn", 1, 2, JOHN_1_2)
    rows.append(_row("garbage", "λόγος", source="K"))
    return rows


@pytest.fixture
def parquet_file(tmp_path, tagnt_rows):
    path = tmp_path / "tagnt.parquet"
    pd.DataFrame(tagnt_rows).to_parquet(path, engine="pyarrow", index=False)
    return path


@pytest.fixture
def data_dir(tmp_path, parquet_file):
    out = tmp_path / "data"
    ingest(parquet_path=str(parquet_file), data_dir=str(out))
    return out


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()
