import pytest

from copyrat.errors import ExpectedEnumVariant, ExpectedSurroundingPair
from copyrat.styles import HintAlignment, Surround


@pytest.mark.parametrize(
    "text,expected",
    [
        ("leading", HintAlignment.LEADING),
        ("Leading", HintAlignment.LEADING),
        ("TRAILING", HintAlignment.TRAILING),
        ("trailing", HintAlignment.TRAILING),
    ],
)
def test_parse_hint_alignment_case_insensitive(text, expected):
    assert HintAlignment.parse(text) is expected


def test_parse_hint_alignment_round_trip():
    for member in HintAlignment:
        assert HintAlignment.parse(member.value) is member


def test_parse_unknown_hint_alignment():
    with pytest.raises(ExpectedEnumVariant) as excinfo:
        HintAlignment.parse("center")
    assert "leading" in str(excinfo.value)
    assert "trailing" in str(excinfo.value)


@pytest.mark.parametrize("open_,close", [("{", "}"), ("<", ">"), ("(", ")")])
def test_surround_keeps_characters(open_, close):
    surround = Surround(open_, close)
    assert (surround.open, surround.close) == (open_, close)
    assert surround == Surround(open_, close)


@pytest.mark.parametrize("open_,close", [("{{", "}"), ("{", ""), ("", "")])
def test_surround_requires_single_characters(open_, close):
    with pytest.raises(ExpectedSurroundingPair):
        Surround(open_, close)