import itertools

import pytest
from packages.engine import (
    Constraints, DictionaryUnavailableError, Match, SortKey, build_inventory, cover_deficits,
    filter_candidates, letter_frequency, match_word, parse_sort_key, point_value, solve,
    sort_matches, word_score,
)

# --- letter scorer ---
@pytest.mark.parametrize("letter,expected", [
    ("A", 1), ("b", 3), ("D", 2), ("f", 4), ("J", 8), ("k", 5),
    ("Q", 10), ("x", 8), ("Y", 4), ("z", 10),
    ("?", 0), ("1", 0), (" ", 0), ("", 0), ("é", 0),
])
def test_point_value(letter, expected):
    assert point_value(letter) == expected

@pytest.mark.parametrize("word,expected", [
    ("CAT", 5), ("act", 5), ("QUIZ", 22), ("JUKEBOX", 27), ("C-A-T", 5), ("", 0),
])
def test_word_score(word, expected):
    assert word_score(word) == expected

# --- inventory ---
def test_build_inventory_ignores_junk():
    inv = build_inventory("c-a t?1?")
    assert inv.counts[ord("C") - 65] == 1
    assert inv.counts[ord("A") - 65] == 1
    assert inv.counts[ord("T") - 65] == 1
    assert inv.blanks == 2
    assert sum(inv.counts) == 3

def test_build_inventory_empty():
    inv = build_inventory("")
    assert sum(inv.counts) == 0 and inv.blanks == 0

def test_cover_deficits_uses_blank_for_missing_letter():
    inv = build_inventory("A?T")
    assert cover_deficits(letter_frequency("CAT"), inv) == (True, 3)
    # inventory itself is untouched
    assert inv.blanks == 1

def test_cover_deficits_shared_pool():
    # Z and Q each short by one, only one blank for the whole word
    inv = build_inventory("AI?")
    feasible, _ = cover_deficits(letter_frequency("QAZI"), inv)
    assert feasible is False

# --- constraints ---
def test_constraints_case_insensitive():
    c = Constraints("ca", "T", "a")
    assert c.matches("CAT") and c.matches("cat")
    assert not c.matches("SCAT")

def test_constraints_none_fields_always_match():
    c = Constraints(None, None, None)
    assert c.empty
    assert c.matches("anything")

def test_constraints_whitespace_is_not_trimmed():
    # a blank prefix is a real constraint, not "no constraint"
    c = Constraints(" ")
    assert not c.empty
    assert not c.matches("CAT")
    assert solve(["CAT"], "CAT", c) == []

def test_solve_applies_constraints_before_feasibility():
    # SCAT is buildable from the rack but fails the prefix
    out = solve(["CAT", "CATS", "SCAT"], "CATS", Constraints(prefix="ca"), "none")
    assert [m.word for m in out] == ["CAT", "CATS"]

def test_filter_candidates_order_preserved():
    words = ["CATS", "SCAT", "CAT", "ACT"]
    assert filter_candidates(words, Constraints(contains="CA")) == ["CATS", "SCAT", "CAT"]
    assert filter_candidates(words, None) == words

# --- golden solves ---
def test_solve_example_exact_letters():
    out = solve(["CAT", "ACT", "CATS", "DOG"], "CAT")
    assert out == [Match("ACT", 5), Match("CAT", 5)]

def test_solve_example_wildcard():
    out = solve(["CAT", "ACT", "EAT"], "A?T")
    assert out == [Match("ACT", 2), Match("CAT", 2), Match("EAT", 2)]

def test_solve_example_no_results():
    assert solve(["ZOO"], "Z") == []

def test_solve_example_prefix():
    out = solve(["CAT", "CATS", "SCAT"], "CATS", Constraints(prefix="CA"))
    assert [m.word for m in out] == ["CAT", "CATS"]
    assert [m.score for m in out] == [5, 6]

def test_all_blank_word_scores_zero():
    assert solve(["OO", "ZOO"], "??", sort_key="none") == [Match("OO", 0)]
    assert solve(["ZOO"], "Z??") == [Match("ZOO", 10)]

def test_lowercase_dictionary_and_letters():
    assert solve(["cat"], "tac") == [Match("cat", 5)]

def test_empty_dictionary_raises():
    with pytest.raises(DictionaryUnavailableError):
        solve([], "CAT")
    with pytest.raises(DictionaryUnavailableError):
        solve(None, "CAT")

def test_unknown_sort_key_raises():
    with pytest.raises(ValueError):
        solve(["CAT"], "CAT", sort_key="alphabet")

def test_solve_does_not_mutate_words():
    words = ["cats", "CAT", "act"]
    snapshot = list(words)
    solve(words, "CATS?", Constraints("c"), "length")
    assert words == snapshot

def test_solve_deterministic():
    words = ["RATE", "TEAR", "TARE", "EAT", "TEA", "ATE", "ERA", "ARE", "EAR", "RAT"]
    a = solve(words, "R?TEA", None, SortKey.POINTS)
    b = solve(words, "R?TEA", None, SortKey.POINTS)
    assert a == b

# --- properties ---
WORDS = ["CAT", "ACT", "CATS", "TACT", "ZOO", "QUIZ", "OO", "AA", "STAR", "RATS", "TSAR"]
RACKS = ["", "CAT", "A?T", "??", "ZO?", "STAR", "S?A", "QUI?", "T?C?"]

@pytest.mark.parametrize("rack", RACKS)
def test_feasibility_matches_deficit_sum(rack):
    inv = build_inventory(rack)
    accepted = {m.word for m in solve(WORDS, rack, sort_key="none")}
    for w in WORDS:
        freq = letter_frequency(w)
        need = sum(max(0, freq[i] - inv.counts[i]) for i in range(26))
        assert (w in accepted) == (need <= inv.blanks)

@pytest.mark.parametrize("rack", RACKS)
def test_empty_constraints_never_exclude(rack):
    plain = solve(WORDS, rack)
    assert solve(WORDS, rack, Constraints()) == plain
    assert solve(WORDS, rack, Constraints("", "", "")) == plain

def test_score_monotonic_when_blank_replaced():
    for word in ["QUIZ", "CAT", "ZOO"]:
        for i, ch in enumerate(word):
            with_blank = word[:i] + "?" + word[i + 1:]
            low = match_word(word, build_inventory(with_blank))
            high = match_word(word, build_inventory(word))
            assert low is not None and high is not None
            assert high.score >= low.score
            assert high.score - low.score == point_value(ch)

def test_order_of_rack_letters_irrelevant():
    words = ["STAR", "RATS", "TSAR", "ARTS"]
    base = solve(words, "STAR")
    for perm in itertools.permutations("STAR"):
        assert solve(words, "".join(perm)) == base

# --- sorting ---
def test_sort_by_points_tiebreaks():
    ms = [Match("TACT", 6), Match("CATS", 6), Match("CAT", 5), Match("ZZ", 20), Match("ACT", 5)]
    out = sort_matches(ms, SortKey.POINTS)
    assert [m.word for m in out] == ["ACT", "CAT", "CATS", "TACT", "ZZ"]

def test_sort_by_points_shorter_word_wins_score_tie():
    # lexicographic order alone would put AAAA before BA
    ms = [Match("AAAA", 4), Match("DE", 3), Match("BA", 4)]
    out = sort_matches(ms, SortKey.POINTS)
    assert [m.word for m in out] == ["DE", "BA", "AAAA"]

def test_solve_points_tie_broken_by_length():
    out = solve(["AAAA", "BA", "DE"], "AAAABDE")
    assert out == [Match("DE", 3), Match("BA", 4), Match("AAAA", 4)]

def test_sort_by_length_then_lexicographic():
    ms = [Match("CATS", 6), Match("CAT", 5), Match("ACT", 5), Match("QI", 11)]
    out = sort_matches(ms, "length")
    assert [m.word for m in out] == ["QI", "ACT", "CAT", "CATS"]

def test_sort_none_preserves_dictionary_order():
    out = solve(["CATS", "CAT", "ACT"], "CATS", sort_key=SortKey.NONE)
    assert [m.word for m in out] == ["CATS", "CAT", "ACT"]

def test_sort_matches_returns_new_list():
    ms = [Match("CAT", 5), Match("ACT", 5)]
    sort_matches(ms, "points")
    assert [m.word for m in ms] == ["CAT", "ACT"]

@pytest.mark.parametrize("raw,expected", [
    ("points", SortKey.POINTS), ("LENGTH", SortKey.LENGTH), (" none ", SortKey.NONE),
    (SortKey.LENGTH, SortKey.LENGTH),
])
def test_parse_sort_key(raw, expected):
    assert parse_sort_key(raw) is expected

def test_match_str():
    assert str(Match("CAT", 5)) == "CAT (5)"
