from __future__ import annotations
from typing import Dict, List

# TAGNT abbreviations -> OSIS ids
_TAGNT_TO_OSIS: Dict[str, str] = {
    'Mat': 'Matt', 'Mrk': 'Mark', 'Luk': 'Luke', 'Jhn': 'John',
    'Act': 'Acts', 'Rom': 'Rom', '1Co': '1Cor', '2Co': '2Cor',
    'Gal': 'Gal', 'Eph': 'Eph', 'Php': 'Phil', 'Col': 'Col',
    '1Th': '1Thess', '2Th': '2Thess', '1Ti': '1Tim', '2Ti': '2Tim',
    'Tit': 'Titus', 'Phm': 'Phlm', 'Heb': 'Heb',
    'Jas': 'Jas', '1Pe': '1Pet', '2Pe': '2Pet',
    '1Jn': '1John', '2Jn': '2John', '3Jn': '3John',
    'Jud': 'Jude', 'Rev': 'Rev',
}

# Canonical New Testament order
_OSIS_NAMES: Dict[str, str] = {
    'Matt': 'Matthew', 'Mark': 'Mark', 'Luke': 'Luke', 'John': 'John',
    'Acts': 'Acts', 'Rom': 'Romans', '1Cor': '1 Corinthians', '2Cor': '2 Corinthians',
    'Gal': 'Galatians', 'Eph': 'Ephesians', 'Phil': 'Philippians', 'Col': 'Colossians',
    '1Thess': '1 Thessalonians', '2Thess': '2 Thessalonians', '1Tim': '1 Timothy', '2Tim': '2 Timothy',
    'Titus': 'Titus', 'Phlm': 'Philemon', 'Heb': 'Hebrews',
    'Jas': 'James', '1Pet': '1 Peter', '2Pet': '2 Peter',
    '1John': '1 John', '2John': '2 John', '3John': '3 John',
    'Jude': 'Jude', 'Rev': 'Revelation',
}

OSIS_BOOKS: List[str] = list(_OSIS_NAMES)

def _key(name: str) -> str:
    return name.replace(" ", "").lower()

_LOOKUP: Dict[str, str] = {}
for _abbr, _osis in _TAGNT_TO_OSIS.items():
    _LOOKUP[_key(_abbr)] = _osis
for _osis, _name in _OSIS_NAMES.items():
    _LOOKUP[_key(_osis)] = _osis
    _LOOKUP[_key(_name)] = _osis

def to_osis(abbr: str) -> str:
    return _TAGNT_TO_OSIS.get(abbr, abbr)

def book_name(osis: str) -> str:
    return _OSIS_NAMES.get(osis, osis)

def resolve_book(name: str) -> str:
    """Map an English name, OSIS id or TAGNT abbreviation to its OSIS id."""
    osis = _LOOKUP.get(_key(name or ""))
    if osis is None:
        raise ValueError(f"Unknown book: {name!r}")
    return osis
