"""Tests for feature extraction."""

import math

from sigilworks.engine.features import (
    MAX_LINES,
    MIN_LINES,
    FeatureSet,
    clean_statement,
    extract,
    line_count_for,
)
from tests.conftest import (
    FLY_STATEMENT,
    LONG_STATEMENT,
    NON_ALPHA_STATEMENT,
    STATEMENTS,
    SUCCESS_STATEMENT,
)


def test_clean_statement():
    assert clean_statement(SUCCESS_STATEMENT) == "iamsuccessful"
    assert clean_statement("Hello, World! 123") == "helloworld"
    assert clean_statement("") == ""


def test_success_statement_features():
    f = extract(SUCCESS_STATEMENT)
    assert f.cleaned_text == "iamsuccessful"
    assert f.unique_letters == ("i", "a", "m", "s", "u", "c", "e", "f", "l")
    assert len(f.harmonics) == 8
    assert len(f.phase_angles) == 13


def test_seed_accumulation():
    # a=97, b=98: 97*1 + 98*2
    assert extract("ab").seed == 97 + 196
    assert extract("AB").seed == 97 + 196


def test_harmonics_combine_identity_and_frequency():
    f = extract(SUCCESS_STATEMENT)
    # 's' is letter 18 and occurs 3 times in 13 characters
    s_index = f.unique_letters.index("s")
    assert math.isclose(f.harmonics[s_index], 18 * 3 / 13)
    # 'a' is letter 0 -> harmonic 0
    assert f.harmonics[f.unique_letters.index("a")] == 0.0


def test_phase_angles():
    f = extract("ab")
    assert math.isclose(f.phase_angles[0], (97 % 360) * math.pi / 180)
    assert math.isclose(f.phase_angles[1], ((98 * 2) % 360) * math.pi / 180)
    for angle in extract(LONG_STATEMENT).phase_angles:
        assert 0.0 <= angle < 2 * math.pi


def test_rhythm_uses_first_three_unique_letters():
    f = extract(SUCCESS_STATEMENT)
    # i=8, a=0, m=12
    assert math.isclose(f.rhythm, (8 + 0 + 12) / 75)
    assert extract("z").rhythm == 1.0
    assert extract("a").rhythm == 0.0


def test_ratios():
    f = extract(SUCCESS_STATEMENT)
    assert math.isclose(f.vowel_ratio, 5 / 13)
    assert math.isclose(f.consonant_ratio, 8 / 13)


def test_complexity_zero_when_a_ratio_is_zero():
    assert extract("aeiou").complexity == 0.0
    assert extract("bcdfg").complexity == 0.0
    assert extract("aeiou").line_count == MIN_LINES


def test_complexity_formula():
    f = extract(SUCCESS_STATEMENT)
    expected = (9 / 26) * (5 / 13) * (8 / 13) * ((8 + 0 + 12) / 75)
    assert math.isclose(f.complexity, expected)
    assert f.line_count == math.floor(7 + expected * 6)


def test_bounds_hold_for_all_statements():
    for statement in STATEMENTS:
        f = extract(statement)
        assert len(f.unique_letters) <= 26
        assert len(f.harmonics) <= 8
        assert len(f.phase_angles) <= 13
        assert 0.0 <= f.rhythm <= 1.0
        assert 0.0 <= f.complexity <= 1.0
        assert MIN_LINES <= f.line_count <= MAX_LINES


def test_line_count_is_monotonic_in_complexity():
    samples = [i / 100 for i in range(0, 101)]
    counts = [line_count_for(c) for c in samples]
    assert counts == sorted(counts)
    assert counts[0] == MIN_LINES
    assert counts[-1] == MAX_LINES


def test_line_count_clamped():
    assert line_count_for(-5.0) == MIN_LINES
    assert line_count_for(5.0) == MAX_LINES


def test_empty_input():
    f = extract("")
    assert f == FeatureSet()
    assert f.unique_letters == ()
    assert f.harmonics == ()
    assert f.seed == 0
    assert f.rhythm == 0.0
    assert f.line_count == MIN_LINES
    assert f.is_empty


def test_non_alphabetic_input_is_empty():
    assert extract(NON_ALPHA_STATEMENT) == extract("")


def test_case_and_space_insensitive():
    a = extract(FLY_STATEMENT)
    b = extract("i will fly")
    c = extract("iwillfly")
    assert a.cleaned_text == b.cleaned_text == c.cleaned_text == "iwillfly"
    assert a == b == c


def test_extract_is_deterministic():
    for statement in STATEMENTS:
        assert extract(statement) == extract(statement)


def test_to_dict_uses_lists():
    data = extract(SUCCESS_STATEMENT).to_dict()
    assert data["unique_letters"][:3] == ["i", "a", "m"]
    assert isinstance(data["harmonics"], list)
    assert data["line_count"] == extract(SUCCESS_STATEMENT).line_count
