import pytest

from transaction_analysis import fix_title


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  DILWALE   DULHANIA   LE   JAYENGE  ", "Dilwale Dulhania Le Jayenge"),
        ("dil ka kya kare", "Dil ka Kya Kare"),
        ("THE LUNCHBOX", "The Lunchbox"),
        ("gangs OF wasseypur", "Gangs of Wasseypur"),
        ("kabhi khushi kabhie gham", "Kabhi Khushi Kabhie Gham"),
        ("ek THA tiger aur A hero", "Ek Tha Tiger aur a Hero"),
        ("an evening in paris", "An Evening in Paris"),
        ("3 IDIOTS", "3 Idiots"),
        ("x", "X"),
    ],
)
def test_fix_title(raw: str, expected: str):
    assert fix_title(raw) == expected


@pytest.mark.parametrize("raw", [None, 42, ["Sholay"], "", "     "])
def test_fix_title_invalid_returns_empty_string(raw):
    assert fix_title(raw) == ""


def test_fix_title_leaves_non_ascii_letters_alone():
    assert fix_title("éK tha") == "ék Tha"
