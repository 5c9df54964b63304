# File: biotoolbox/tests/test_aa_converter.py
# Version: v0.1.1
"""
Single-line conversion tests for both directions.
"""
import pytest

from biotoolbox.app.core.aminoacid.converter import (
    ConversionDirection,
    Residue,
    VariantToken,
    convert_line,
    one_to_three,
    parse_one_letter,
    split_protein_prefix,
    three_letter_stop,
    three_to_one,
)
from biotoolbox.app.core.aminoacid.tables import StopCodonSymbol


# ---------- three -> one ----------

@pytest.mark.parametrize(
    "line,stop,expected",
    [
        ("p.Leu858Arg", "Ter", "p.L858R"),
        ("p.Gln61Ter", "*", "p.Q61*"),
        ("p.Gln61Ter", "X", "p.Q61X"),
        ("p.Gln61Ter", "Ter", "p.Q61Ter"),
        ("p.Trp24*", "Ter", "p.W24Ter"),
        ("p.Arg97X", "*", "p.R97*"),
        ("Leu858_Glu861delinsAsp", "Ter", "L858_E861delinsD"),
        ("p.Glu746_Ala750del", "Ter", "p.E746_A750del"),
        ("p.Ala767_Val769dup", "Ter", "p.A767_V769dup"),
        ("p.Arg97Glyfs*23", "Ter", "p.R97GfsTer23"),
    ],
)
def test_three_to_one(line, stop, expected):
    assert three_to_one(line, stop) == expected


def test_three_to_one_prefix_is_normalized_to_lowercase():
    assert three_to_one("P.Leu858Arg") == "p.L858R"


def test_three_to_one_strips_surrounding_whitespace():
    assert three_to_one("  p.Leu858Arg \r") == "p.L858R"


def test_three_to_one_multiple_codes_in_one_line():
    assert three_to_one("Leu858Arg;Thr790Met", "Ter") == "L858R;T790M"


def test_three_to_one_unrecognized_text_passes_through():
    assert three_to_one("c.2573T>G") == "c.2573T>G"


def test_three_to_one_substring_substitution_known_limitation():
    # Codes are replaced wherever they occur, even inside unrelated words.
    assert three_to_one("Serine") == "Sine"
    # Table order is applied sequentially: "Ala" -> "A" then the new "Arg" -> "R".
    assert three_to_one("Alarg") == "R"


# ---------- one -> three ----------

@pytest.mark.parametrize(
    "line,stop,expected",
    [
        ("p.L858R", "Ter", "p.Leu858Arg"),
        ("L858_E861delinsD", "Ter", "Leu858_Glu861delinsAsp"),
        ("p.E746_A750del", "Ter", "p.Glu746_Ala750del"),
        ("p.A767_V769dup", "Ter", "p.Ala767_Val769dup"),
        ("p.K745_E746insI", "Ter", "p.Lys745_Glu746insIle"),
        ("p.R97fs", "Ter", "p.Arg97fs"),
        ("p.V560del", "Ter", "p.Val560del"),
        ("p.Q61*", "Ter", "p.Gln61Ter"),
        ("p.Q61X", "X", "p.Gln61X"),
        ("p.Q61*", "X", "p.Gln61X"),
        ("p.Q61X", "Ter", "p.Gln61Ter"),
    ],
)
def test_one_to_three(line, stop, expected):
    assert one_to_three(line, stop) == expected


def test_one_to_three_asterisk_setting_renders_ter():
    assert one_to_three("p.Q61*", "*") == "p.Gln61Ter"
    assert three_letter_stop(StopCodonSymbol.ASTERISK) == "Ter"
    assert three_letter_stop("X") == "X"


def test_one_to_three_multiple_matches_in_place():
    assert one_to_three("L858R / T790M") == "Leu858Arg / Thr790Met"


def test_one_to_three_unknown_letters_pass_through():
    assert one_to_three("B12Z") == "B12Z"


@pytest.mark.parametrize("line", ["c.2573T>G", "Leu858Arg", "no variant here"])
def test_one_to_three_non_matching_text_unchanged(line):
    assert one_to_three(line) == line


# ---------- shared ----------

@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_blank_line_yields_empty(line):
    assert three_to_one(line) == ""
    assert one_to_three(line) == ""


def test_split_protein_prefix():
    assert split_protein_prefix(" p.L858R ") == ("p.", "L858R")
    assert split_protein_prefix("P.L858R") == ("p.", "L858R")
    assert split_protein_prefix("L858R") == ("", "L858R")


def test_stop_symbol_round_trip():
    one = three_to_one("p.Gln61Ter", "*")
    assert one == "p.Q61*"
    assert one_to_three(one, "*") == "p.Gln61Ter"


@pytest.mark.parametrize("line", ["p.Leu858Arg", "Leu858_Glu861delinsAsp", "p.Val600Glu"])
def test_round_trip_well_formed(line):
    assert one_to_three(three_to_one(line)) == line


def test_parse_one_letter_tokens():
    tokens = parse_one_letter("p.L858_E861delinsD")
    assert tokens == [
        VariantToken(
            primary=Residue("L", 858),
            secondary=Residue("E", 861),
            mutation_type="delins",
            target_amino_acid="D",
            has_protein_prefix=True,
        )
    ]
    assert tokens[0].to_three_letter() == "p.Leu858_Glu861delinsAsp"


def test_parse_one_letter_simple_substitution_has_no_range():
    (token,) = parse_one_letter("L858R")
    assert token.secondary is None
    assert token.mutation_type is None
    assert token.target_amino_acid == "R"
    assert token.has_protein_prefix is False


def test_convert_line_dispatch():
    assert convert_line("p.Leu858Arg", ConversionDirection.TO_ONE) == "p.L858R"
    assert convert_line("p.L858R", "toThree") == "p.Leu858Arg"


def test_invalid_stop_symbol_is_rejected():
    with pytest.raises(ValueError):
        three_to_one("p.Gln61Ter", "Stop")


def test_prefix_belongs_to_the_opening_token_only():
    first, second = parse_one_letter("p.L858R/T790M")
    assert first.has_protein_prefix is True
    assert second.has_protein_prefix is False
    assert first.to_three_letter() + "/" + second.to_three_letter() == "p.Leu858Arg/Thr790Met"
    assert one_to_three("p.L858R/T790M") == "p.Leu858Arg/Thr790Met"


def test_prefix_kept_when_no_token_opens_the_line():
    assert parse_one_letter("p.(L858R)")[0].has_protein_prefix is False
    assert one_to_three("p.(L858R)") == "p.(Leu858Arg)"
    assert one_to_three("p.") == "p."


@pytest.mark.parametrize("stop,expected", [("Ter", "Ter"), ("*", "Ter"), ("X", "X")])
def test_token_stop_target_rendering(stop, expected):
    token = VariantToken(primary=Residue("Q", 61), target_amino_acid="*")
    assert token.to_three_letter(stop) == "Gln61" + expected
    assert VariantToken(primary=Residue("Q", 61), target_amino_acid="X").to_three_letter(stop) == "Gln61" + expected
