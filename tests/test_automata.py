import io
import json

import pytest

from reverser.automata import normalize_automaton, validate_automaton, \
    load_automaton, run_automaton, is_complete, make_complete, \
    complement, union, intersection, difference, format_quintuple, \
    AutomatonError


def make_automaton(states, transitions, initial, accept, alphabet=("0", "1")):
    return {"states": list(states),
            "alphabet": list(alphabet),
            "transitions": [{"source": s, "input": i, "target": t}
                            for s, i, t in transitions],
            "initialState": initial,
            "acceptStates": list(accept)}


@pytest.fixture
def ends_with_zero():
    """words over {0,1} ending in 0."""
    return make_automaton(
        ["q0", "q1"],
        [("q0", "0", "q1"), ("q0", "1", "q0"),
         ("q1", "0", "q1"), ("q1", "1", "q0")],
        "q0", ["q1"])


@pytest.fixture
def even_ones():
    """words over {0,1} with an even number of 1s."""
    return make_automaton(
        ["e", "o"],
        [("e", "0", "e"), ("e", "1", "o"),
         ("o", "0", "o"), ("o", "1", "e")],
        "e", ["e"])


@pytest.fixture
def only_zeros():
    """incomplete automaton accepting 0*."""
    return make_automaton(["z"], [("z", "0", "z")], "z", ["z"])


WORDS = ["", "0", "1", "00", "01", "10", "11", "0110", "1010", "111", "1100"]


def test_run_automaton_from_two_state_example():
    automaton = make_automaton(
        ["0", "1"],
        [("0", "0", "1"), ("0", "1", "0"), ("1", "0", "1"), ("1", "1", "1")],
        "0", ["0"])
    assert run_automaton(automaton, "0011") is False
    assert run_automaton(automaton, "111") is True
    assert run_automaton(automaton, "") is True


@pytest.mark.parametrize("word", WORDS)
def test_run_automaton(ends_with_zero, even_ones, word):
    assert run_automaton(ends_with_zero, word) == word.endswith("0")
    assert run_automaton(even_ones, word) == (word.count("1") % 2 == 0)


def test_run_automaton_rejects_missing_transitions(only_zeros):
    assert run_automaton(only_zeros, "000")
    assert not run_automaton(only_zeros, "010")
    assert not run_automaton(only_zeros, "0a")


def test_normalize_alternative_keys():
    data = {"states": ["a", "b"],
            "alphabet": ["x"],
            "transitions": [{"from": "a", "symbol": "x", "to": "b"}],
            "initialState": "a",
            "finalStates": ["b"]}
    automaton = normalize_automaton(data)
    assert automaton["acceptStates"] == ["b"]
    assert automaton["transitions"] == [
        {"source": "a", "input": "x", "target": "b"}]
    assert "finalStates" in data
    validate_automaton(automaton)


@pytest.mark.parametrize("change,message", [
    ({"states": []}, "states"),
    ({"alphabet": []}, "alphabet"),
    ({"transitions": None}, "transitions"),
    ({"initialState": "qx"}, "initial state"),
    ({"acceptStates": ["qx"]}, "accept state"),
    ({"transitions": [{"source": "q0", "input": "0"}]}, "source, input and target"),
    ({"transitions": [{"source": "qx", "input": "0", "target": "q0"}]}, "source state"),
    ({"transitions": [{"source": "q0", "input": "0", "target": "qx"}]}, "target state"),
    ({"transitions": [{"source": "q0", "input": "2", "target": "q0"}]}, "alphabet"),
    ({"transitions": [{"source": "q0", "input": "0", "target": "q0"},
                      {"source": "q0", "input": "0", "target": "q1"}]}, "deterministic"),
])
def test_validate_automaton_errors(ends_with_zero, change, message):
    ends_with_zero.update(change)
    with pytest.raises(AutomatonError, match=message):
        validate_automaton(ends_with_zero)


def test_load_automaton(ends_with_zero):
    automaton = load_automaton(io.StringIO(json.dumps(ends_with_zero)))
    assert automaton == ends_with_zero


def test_load_automaton_invalid_json():
    with pytest.raises(AutomatonError):
        load_automaton(io.StringIO("{states: "))
    with pytest.raises(AutomatonError):
        load_automaton(io.StringIO("[1, 2]"))


def test_make_complete(only_zeros):
    assert not is_complete(only_zeros)
    automaton = make_complete(only_zeros)
    assert is_complete(automaton)
    assert automaton["states"] == ["z", "sink"]
    assert "sink" not in automaton["acceptStates"]
    assert {"source": "sink", "input": "1", "target": "sink"} in automaton["transitions"]
    # input is not modified
    assert only_zeros["states"] == ["z"]


def test_make_complete_renames_sink():
    automaton = make_automaton(["sink"], [("sink", "0", "sink")], "sink", [])
    result = make_complete(automaton)
    assert result["states"] == ["sink", "sink'"]


def test_make_complete_keeps_complete_automaton(ends_with_zero):
    assert make_complete(ends_with_zero) == ends_with_zero


@pytest.mark.parametrize("word", WORDS)
def test_complement(ends_with_zero, only_zeros, word):
    assert run_automaton(complement(ends_with_zero), word) != \
        run_automaton(ends_with_zero, word)
    assert run_automaton(complement(only_zeros), word) != \
        run_automaton(only_zeros, word)


@pytest.mark.parametrize("word", WORDS)
def test_product_operations(ends_with_zero, even_ones, word):
    a = run_automaton(ends_with_zero, word)
    b = run_automaton(even_ones, word)
    assert run_automaton(union(ends_with_zero, even_ones), word) == (a or b)
    assert run_automaton(intersection(ends_with_zero, even_ones), word) == (a and b)
    assert run_automaton(difference(ends_with_zero, even_ones), word) == (a and not b)


@pytest.mark.parametrize("word", WORDS + ["a", "0a0"])
def test_product_with_different_alphabets(only_zeros, word):
    letters = make_automaton(["s"], [("s", "a", "s")], "s", ["s"], alphabet=["a"])
    a = run_automaton(only_zeros, word)
    b = run_automaton(letters, word)
    result = union(only_zeros, letters)
    assert result["alphabet"] == ["0", "1", "a"]
    assert is_complete(result)
    assert run_automaton(result, word) == (a or b)


def test_product_state_names(ends_with_zero, even_ones):
    result = intersection(ends_with_zero, even_ones)
    assert result["initialState"] == "(q0,e)"
    assert sorted(result["states"]) == ["(q0,e)", "(q0,o)", "(q1,e)", "(q1,o)"]
    assert result["acceptStates"] == ["(q1,e)"]
    assert len(result["transitions"]) == 8
    validate_automaton(result)


def test_format_quintuple(ends_with_zero):
    text = format_quintuple(ends_with_zero)
    lines = text.split("\n")
    assert lines[0] == "Quintupla formal del autómata finito:"
    assert "Q = {q0, q1}" in lines
    assert "Σ = {0, 1}" in lines
    assert "Estado\t| δ(q,0)\t| δ(q,1)" in lines
    assert "q0\t| q1\t| q0\t|" in lines
    assert "q0 = q0" in lines
    assert lines[-2] == "F = {q1}"


def test_format_quintuple_missing_transition(only_zeros):
    only_zeros["alphabet"] = ["0", "1"]
    assert "z\t| z\t| -\t|" in format_quintuple(only_zeros).split("\n")
