# File: biotoolbox/app/core/aminoacid/converter.py
# Version: v0.2.1
"""
Protein variant notation converter (three-letter <-> one-letter).

Handles HGVS-style protein descriptors such as:
    p.Leu858Arg            <-> p.L858R
    p.Gln61Ter             <-> p.Q61*   (stop rendering is configurable)
    Leu858_Glu861delinsAsp <-> L858_E861delinsD

Both directions are best-effort and never fail: text that is not recognized
passes through unchanged. A leading `p.` (any case) is kept and normalized to
lowercase `p.`.

three_to_one:
    Plain substring substitution. Stop aliases first (Ter, *, X), then the 20
    residues in table order. There is no word-boundary anchoring, so a residue
    code embedded in unrelated text is substituted as well ("Serine" -> "Sine").

one_to_three:
    Every match of `<A><pos>[_<A><pos>][type][target]` is rewritten in place,
    where type is one of delins/del/ins/dup/fs/ext and target is a residue,
    `*` or `X`. `*` only exists in one-letter notation, so a stop target with
    the `*` setting is written as `Ter` in three-letter output.

Version history
---------------
v0.2.0: `delins` is tried before `del` in the one-letter pattern, so range
        deletion-insertions keep their inserted residue.
v0.2.1: the token that opens a `p.` line renders the prefix; stop targets are
        recognized through `is_stop_alias`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

from .tables import (
    AMINO_ACIDS,
    STOP_ALIASES,
    StopCodonSymbol,
    is_stop_alias,
    to_three_letter,
)

MUTATION_TYPES: Tuple[str, ...] = ("delins", "del", "ins", "dup", "fs", "ext")

_PROTEIN_PREFIX_RE = re.compile(r"^p\.", re.IGNORECASE)
_ONE_LETTER_VARIANT_RE = re.compile(
    r"([A-Z])(\d+)"
    r"(?:_([A-Z])(\d+))?"
    r"(" + "|".join(MUTATION_TYPES) + r")?"
    r"([A-Z*])?"
)

StopSymbolLike = Union[StopCodonSymbol, str]


class ConversionDirection(str, Enum):
    TO_ONE = "toOne"
    TO_THREE = "toThree"


@dataclass(frozen=True)
class Residue:
    amino_acid: str
    position: int


@dataclass(frozen=True)
class VariantToken:
    """
    One parsed one-letter variant (e.g. `L858_E861delinsD`).

    `has_protein_prefix` is set on the token that opens a `p.`-prefixed line;
    that token renders the prefix.
    """
    primary: Residue
    secondary: Optional[Residue] = None
    mutation_type: Optional[str] = None
    target_amino_acid: Optional[str] = None
    has_protein_prefix: bool = False

    @classmethod
    def from_match(cls, m: "re.Match[str]", has_protein_prefix: bool = False) -> "VariantToken":
        aa1, pos1, aa2, pos2, mutation_type, target = m.groups()
        secondary = Residue(aa2, int(pos2)) if aa2 and pos2 else None
        return cls(
            primary=Residue(aa1, int(pos1)),
            secondary=secondary,
            mutation_type=mutation_type,
            target_amino_acid=target,
            has_protein_prefix=has_protein_prefix,
        )

    def to_three_letter(self, stop_symbol: StopSymbolLike = StopCodonSymbol.TER) -> str:
        """Render the token in three-letter notation, with `p.` if it owns the prefix."""
        text = "p." if self.has_protein_prefix else ""
        text += f"{_residue_three(self.primary.amino_acid)}{self.primary.position}"
        if self.secondary is not None:
            text += f"_{_residue_three(self.secondary.amino_acid)}{self.secondary.position}"
        if self.mutation_type:
            text += self.mutation_type
        if self.target_amino_acid:
            if is_stop_alias(self.target_amino_acid):
                text += three_letter_stop(stop_symbol)
            else:
                text += _residue_three(self.target_amino_acid)
        return text


def _residue_three(letter: str) -> str:
    return to_three_letter(letter) or letter


def three_letter_stop(stop_symbol: StopSymbolLike) -> str:
    """Stop rendering inside three-letter notation (`*` has no three-letter form)."""
    symbol = StopCodonSymbol(stop_symbol)
    if symbol is StopCodonSymbol.ASTERISK:
        return StopCodonSymbol.TER.value
    return symbol.value


def split_protein_prefix(line: str) -> Tuple[str, str]:
    """Strip the line and split off a case-insensitive `p.` prefix -> (prefix, body)."""
    variant = line.strip()
    if _PROTEIN_PREFIX_RE.match(variant):
        return "p.", variant[2:]
    return "", variant


def three_to_one(line: str, stop_symbol: StopSymbolLike = StopCodonSymbol.TER) -> str:
    """Convert a three-letter variant line to one-letter notation."""
    target = StopCodonSymbol(stop_symbol).value
    prefix, result = split_protein_prefix(line)
    if not prefix and not result:
        return ""

    for alias in STOP_ALIASES:
        result = result.replace(alias, target)
    for aa in AMINO_ACIDS:
        result = result.replace(aa.three, aa.one)

    return prefix + result


def parse_one_letter(line: str) -> List[VariantToken]:
    """Return every one-letter variant token found in `line`, left to right."""
    prefix, body = split_protein_prefix(line)
    return [_token(m, prefix) for m in _ONE_LETTER_VARIANT_RE.finditer(body)]


def _token(m: "re.Match[str]", prefix: str) -> VariantToken:
    return VariantToken.from_match(m, has_protein_prefix=bool(prefix) and m.start() == 0)


def one_to_three(line: str, stop_symbol: StopSymbolLike = StopCodonSymbol.TER) -> str:
    """Convert a one-letter variant line to three-letter notation."""
    symbol = StopCodonSymbol(stop_symbol)
    prefix, body = split_protein_prefix(line)
    if not prefix and not body:
        return ""

    result = _ONE_LETTER_VARIANT_RE.sub(lambda m: _token(m, prefix).to_three_letter(symbol), body)
    if prefix and not _ONE_LETTER_VARIANT_RE.match(body):
        # No token opens the body, so the prefix is re-attached here.
        result = prefix + result
    return result


_CONVERTERS: Dict[ConversionDirection, Callable[[str, StopSymbolLike], str]] = {
    ConversionDirection.TO_ONE: three_to_one,
    ConversionDirection.TO_THREE: one_to_three,
}


def get_converter(direction: Union[ConversionDirection, str]) -> Callable[[str, StopSymbolLike], str]:
    return _CONVERTERS[ConversionDirection(direction)]


def convert_line(
    line: str,
    direction: Union[ConversionDirection, str],
    stop_symbol: StopSymbolLike = StopCodonSymbol.TER,
) -> str:
    return get_converter(direction)(line, stop_symbol)
