# File: biotoolbox/app/api/v1/aa_converter.py
# Version: v0.1.0
"""
API router for protein variant notation conversion.

POST /api/aa-converter/convert
  - Body: ConvertRequest
  - Returns: ConvertResponse. Exceeding the line limit is NOT an HTTP error:
    the response has status "line_limit_exceeded", overLimit=true and no output.

GET /api/aa-converter/amino-acids
  - Returns the 20-residue lookup table and the recognized stop symbols.
"""

from fastapi import APIRouter, HTTPException

from ...core.aminoacid.batch import convert_batch
from ...core.aminoacid.tables import AMINO_ACIDS, STOP_ALIASES
from ...core.config import settings
from ...schemas.aa_converter import (
    AminoAcidItem,
    AminoAcidTableResponse,
    ConvertRequest,
    ConvertResponse,
)

router = APIRouter(prefix="/aa-converter", tags=["aa-converter"])


@router.post("/convert", response_model=ConvertResponse)
def convert_variants(payload: ConvertRequest) -> ConvertResponse:
    """Convert every line of `text` in the requested direction."""
    max_lines = payload.maxLines or settings.AA_MAX_LINES
    if max_lines > settings.AA_MAX_LINES_CAP:
        raise HTTPException(
            status_code=400,
            detail=f"maxLines must be <= {settings.AA_MAX_LINES_CAP}",
        )
    stop_symbol = payload.stopSymbol or settings.AA_DEFAULT_STOP_SYMBOL

    result = convert_batch(
        payload.text,
        direction=payload.direction,
        stop_symbol=stop_symbol,
        max_lines=max_lines,
    )
    return ConvertResponse(
        status=result.status,
        output=result.output,
        lineCount=result.line_count,
        maxLines=result.max_lines,
        overLimit=result.over_limit,
    )


@router.get("/amino-acids", response_model=AminoAcidTableResponse)
def amino_acid_table() -> AminoAcidTableResponse:
    return AminoAcidTableResponse(
        aminoAcids=[AminoAcidItem(three=aa.three, one=aa.one) for aa in AMINO_ACIDS],
        stopSymbols=list(STOP_ALIASES),
    )
