from __future__ import annotations
import re
import unicodedata
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

_IOTA_SUBSCRIPT = "\u0345"
_COMBINING_MARKS_RE = re.compile("[\u0300-\u036f]")

# Isopsephy values, including the archaic numerals stigma, koppa and sampi.
GREEK_VALUES: Dict[str, int] = {
    "α": 1, "β": 2, "γ": 3, "δ": 4, "ε": 5, "ϛ": 6, "ζ": 7, "η": 8, "θ": 9,
    "ι": 10, "κ": 20, "λ": 30, "μ": 40, "ν": 50, "ξ": 60, "ο": 70, "π": 80, "ϟ": 90,
    "ρ": 100, "σ": 200, "ς": 200, "τ": 300, "υ": 400, "φ": 500, "χ": 600, "ψ": 700, "ω": 800, "ϡ": 900,
}

GREEK_ORDINAL: Dict[str, int] = {
    "α": 1, "β": 2, "γ": 3, "δ": 4, "ε": 5, "ζ": 6, "η": 7, "θ": 8,
    "ι": 9, "κ": 10, "λ": 11, "μ": 12, "ν": 13, "ξ": 14, "ο": 15, "π": 16,
    "ρ": 17, "σ": 18, "ς": 18, "τ": 19, "υ": 20, "φ": 21, "χ": 22, "ψ": 23, "ω": 24,
}

@dataclass(frozen=True)
class Gematria:
    standard: int = 0
    ordinal: int = 0
    reduced: int = 0

    def __add__(self, other: "Gematria") -> "Gematria":
        if not isinstance(other, Gematria):
            return NotImplemented
        return Gematria(
            standard=self.standard + other.standard,
            ordinal=self.ordinal + other.ordinal,
            reduced=self.reduced + other.reduced,
        )

    def as_dict(self) -> Dict[str, int]:
        return {"standard": self.standard, "ordinal": self.ordinal, "reduced": self.reduced}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, int]]) -> "Gematria":
        data = data or {}
        return cls(
            standard=int(data.get("standard", 0)),
            ordinal=int(data.get("ordinal", 0)),
            reduced=int(data.get("reduced", 0)),
        )

def normalize_greek(text: str) -> str:
    """
    Reduce Greek text to bare lower-case base letters.

    The iota subscript is rewritten to a plain iota before the remaining
    combining marks (accents, breathings, diaeresis) are stripped, so it
    keeps its numeric weight.
    """
    if not text:
        return ""
    # Lower first: lower() can itself emit combining marks (e.g. U+0130).
    t = unicodedata.normalize("NFD", text.lower())
    t = t.replace(_IOTA_SUBSCRIPT, "ι")
    t = _COMBINING_MARKS_RE.sub("", t)
    return t

def digit_root(n: int) -> int:
    while n > 9:
        n = sum(int(d) for d in str(n))
    return n

def compute_greek(text: str) -> Gematria:
    """
    Standard, ordinal and reduced gematria of a Greek string.

    Example:
      compute_greek("λόγος").standard == 373
    """
    standard = 0
    ordinal = 0
    reduced = 0
    for ch in normalize_greek(text):
        standard += GREEK_VALUES.get(ch, 0)
        ord_val = GREEK_ORDINAL.get(ch)
        if ord_val is not None:
            ordinal += ord_val
            reduced += digit_root(ord_val)
    return Gematria(standard=standard, ordinal=ordinal, reduced=reduced)

def sum_gematria(values: Iterable[Gematria]) -> Gematria:
    total = Gematria()
    for g in values:
        total = total + g
    return total
