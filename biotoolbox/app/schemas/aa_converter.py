# File: biotoolbox/app/schemas/aa_converter.py
# Version: v0.1.0
"""
Pydantic schemas for the amino-acid variant notation converter.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..core.aminoacid.batch import BatchStatus
from ..core.aminoacid.converter import ConversionDirection
from ..core.aminoacid.tables import StopCodonSymbol


class ConvertRequest(BaseModel):
    """Request payload for batch variant conversion."""
    text: str = Field(
        ...,
        description="One protein variant per line, e.g. 'p.Leu858Arg' or 'p.L858R'.",
        examples=["p.Leu858Arg\np.Gln61Ter"],
    )
    direction: ConversionDirection = Field(
        ConversionDirection.TO_ONE,
        description="'toOne' (three-letter -> one-letter) or 'toThree' (one-letter -> three-letter).",
    )
    stopSymbol: Optional[StopCodonSymbol] = Field(
        None,
        description="Stop codon rendering: 'Ter', '*' or 'X'. Defaults to the server setting.",
    )
    maxLines: Optional[int] = Field(
        None,
        ge=1,
        description="Maximum accepted line count. Defaults to the server setting.",
    )


class ConvertResponse(BaseModel):
    """Converted text, or the line-limit state with no output."""
    status: BatchStatus
    output: Optional[str] = Field(None, description="Joined converted lines; null when over the line limit.")
    lineCount: int = Field(..., ge=0)
    maxLines: int = Field(..., ge=1)
    overLimit: bool


class AminoAcidItem(BaseModel):
    three: str
    one: str


class AminoAcidTableResponse(BaseModel):
    aminoAcids: List[AminoAcidItem]
    stopSymbols: List[str]
