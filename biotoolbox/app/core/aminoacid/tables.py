# File: biotoolbox/app/core/aminoacid/tables.py
# Version: v0.1.0
"""
Amino-acid lookup tables for protein variant notation.

- `AMINO_ACIDS` lists the 20 standard residues (three-letter and one-letter codes).
  Its order is also the substitution order used by the three-to-one converter.
- `StopCodonSymbol` is the rendering choice for a translational stop.
- `STOP_ALIASES` are the textual stop forms recognized on input (all interchangeable).

Lookups are exact-case and never raise: unknown codes return None and callers
pass the original text through unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class AminoAcidEntry:
    three: str
    one: str


AMINO_ACIDS: Tuple[AminoAcidEntry, ...] = (
    AminoAcidEntry("Ala", "A"),
    AminoAcidEntry("Arg", "R"),
    AminoAcidEntry("Asn", "N"),
    AminoAcidEntry("Asp", "D"),
    AminoAcidEntry("Cys", "C"),
    AminoAcidEntry("Gln", "Q"),
    AminoAcidEntry("Glu", "E"),
    AminoAcidEntry("Gly", "G"),
    AminoAcidEntry("His", "H"),
    AminoAcidEntry("Ile", "I"),
    AminoAcidEntry("Leu", "L"),
    AminoAcidEntry("Lys", "K"),
    AminoAcidEntry("Met", "M"),
    AminoAcidEntry("Phe", "F"),
    AminoAcidEntry("Pro", "P"),
    AminoAcidEntry("Ser", "S"),
    AminoAcidEntry("Thr", "T"),
    AminoAcidEntry("Trp", "W"),
    AminoAcidEntry("Tyr", "Y"),
    AminoAcidEntry("Val", "V"),
)


class StopCodonSymbol(str, Enum):
    TER = "Ter"
    ASTERISK = "*"
    X = "X"


# Substitution order on input; every alias maps to the configured symbol.
STOP_ALIASES: Tuple[str, ...] = tuple(s.value for s in StopCodonSymbol)

_THREE_TO_ONE: Dict[str, str] = {aa.three: aa.one for aa in AMINO_ACIDS}
_ONE_TO_THREE: Dict[str, str] = {aa.one: aa.three for aa in AMINO_ACIDS}


def to_one_letter(three_letter_code: str) -> Optional[str]:
    """Return the one-letter code for `three_letter_code` (e.g. 'Leu' -> 'L'), or None."""
    return _THREE_TO_ONE.get(three_letter_code)


def to_three_letter(one_letter_code: str) -> Optional[str]:
    """Return the three-letter code for `one_letter_code` (e.g. 'L' -> 'Leu'), or None."""
    return _ONE_TO_THREE.get(one_letter_code)


def is_stop_alias(symbol: str) -> bool:
    return symbol in STOP_ALIASES
